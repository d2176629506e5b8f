[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "v2lang"
version = "1.0.3"
description = "Parser, JSON/YAML converter and checker for .v2 configuration files, plus a small .v2f script runner"
requires-python = ">=3.10"
dependencies = []
keywords = ["configuration", "config-as-code", "json", "yaml", "converter", "interpreter"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Interpreters",
    "Topic :: File Formats :: JSON",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
v2 = "v2lang.cli:main"
v2file = "v2lang.script_cli:main"

[tool.hatch.build.targets.wheel]
packages = ["v2lang"]

[tool.pytest.ini_options]
addopts = "-ra"
