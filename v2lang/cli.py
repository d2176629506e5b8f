"""Command line front end for ``.v2`` configuration files."""

from __future__ import annotations

import sys
from pathlib import Path
from typing import Iterator, Optional, Sequence

from v2lang.jsonout import check_json_design, to_json
from v2lang.model import ConfigItem, V2SyntaxError, load_v2
from v2lang.yamlout import check_yaml_design, to_yaml

PROG = "v2"
VERSION = "v1.0.3"

_HELP = f"""\
Usage: {PROG} [options] [filename]

Options
   -h, --help                 Display this information.
   -v, --version              Display compiler version information.
   --author                   Display the author information.
   --transpiler::json         Convert to JSON format.
   --transpiler::yaml         Convert to YAML format.
   --checkDesignJSON          Check, fix, and format JSON output.
   --checkDesignYAML          Check and validate YAML output.
   --load [filename]          Load and interpret the .v2 file.
"""


def change_extension(path: str, new_ext: str) -> str:
    """Replace everything from the last dot in ``path`` with ``new_ext``.

    Without a dot the extension is appended.
    """
    dot = path.rfind(".")
    return path[:dot] + new_ext if dot != -1 else path + new_ext


def _render(item: ConfigItem, indent: int) -> Iterator[str]:
    prefix = "  " * indent
    for child in item.children:
        if child.value is not None:
            yield f"{prefix}{child.key} = {child.value}\n"
        else:
            yield f"{prefix}{child.key}:\n"
            yield from _render(child, indent + 1)


def interpret_config(item: ConfigItem) -> str:
    """Render the tree as ``key = value`` lines, blocks as ``key:``."""
    return "".join(_render(item, 0))


def _load(path: str) -> Optional[ConfigItem]:
    try:
        return load_v2(path)
    except V2SyntaxError as exc:
        print(exc, file=sys.stderr)
    except (OSError, UnicodeDecodeError):
        print(f"Failed to open file {path}", file=sys.stderr)
    return None


def _write(path: str, text: str) -> bool:
    try:
        Path(path).write_text(text, encoding="utf-8")
    except OSError:
        print(f"Failed to open file {path} for writing", file=sys.stderr)
        return False
    return True


def _process(
    path: str, json_out: bool, yaml_out: bool, check_json: bool, check_yaml: bool
) -> None:
    config = _load(path)
    if config is None:
        print(f"Failed to parse {path}", file=sys.stderr)
        return

    if json_out:
        target = change_extension(path, ".json")
        text = to_json(config, check_json)
        if _write(target, text):
            print(f"Converted to JSON: {target}")
            if check_json:
                if check_json_design(text):
                    print(f"JSON validation passed for {target}")
                else:
                    print(
                        "Error: Unbalanced braces or brackets in JSON",
                        file=sys.stderr,
                    )
                    print(f"Warning: JSON validation failed for {target}")

    if yaml_out:
        target = change_extension(path, ".yaml")
        text = to_yaml(config)
        if _write(target, text):
            print(f"Converted to YAML: {target}")
            if check_yaml:
                report = check_yaml_design(text)
                for message in report.warnings + report.errors:
                    print(message, file=sys.stderr)
                if report.ok:
                    print(f"YAML validation passed for {target}")
                else:
                    print(f"Warning: YAML validation failed for {target}")


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the command line tool and return its exit status."""
    args = list(sys.argv[1:] if argv is None else argv)
    if not args:
        print(f"Usage: {PROG} [options] [filename] ...", file=sys.stderr)
        return 1

    json_out = yaml_out = check_json = check_yaml = False
    load_path: Optional[str] = None

    remaining = iter(args)
    for arg in remaining:
        if arg in ("--version", "-v"):
            print(f"{PROG} [{VERSION}]")
            return 0
        if arg in ("--help", "-h"):
            print(_HELP, end="")
            return 0
        if arg == "--author":
            print(f"{PROG} configuration tools, version {VERSION}")
            return 0
        if arg == "--transpiler::json":
            json_out = True
        elif arg == "--transpiler::yaml":
            yaml_out = True
        elif arg == "--checkDesignJSON":
            check_json = True
        elif arg == "--checkDesignYAML":
            check_yaml = True
        elif arg == "--load":
            load_path = next(remaining, None)
            if load_path is None:
                print("Error: --load option requires a filename", file=sys.stderr)
                return 1
        else:
            _process(arg, json_out, yaml_out, check_json, check_yaml)

    if load_path is not None:
        config = _load(load_path)
        if config is None:
            print(f"Failed to load {load_path}", file=sys.stderr)
            return 1
        print(f"Interpreting {load_path}:")
        print(interpret_config(config), end="")

    return 0


if __name__ == "__main__":
    sys.exit(main())