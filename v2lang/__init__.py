"""Parse V2 configuration files, write them as JSON or YAML, check the output and run .v2f scripts."""

__version__ = "1.0.3"