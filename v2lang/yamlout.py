"""YAML output for configuration trees and a line-based design check."""

from __future__ import annotations

from dataclasses import dataclass, field

from v2lang.model import ConfigItem

_INDENT = "  "
_SPECIAL = set(":#{}[]&*!|>'\",")
_FLOW_CHARS = set("{}[]&*")


@dataclass
class YamlReport:
    """Outcome of :func:`check_yaml_design`."""

    errors: list[str] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        """True when no errors were found; warnings do not count."""
        return not self.errors


def _needs_quotes(value: str) -> bool:
    return any(ch in _SPECIAL or ord(ch) <= 32 or ord(ch) >= 128 for ch in value)


def _render(item: ConfigItem, depth: int) -> list[str]:
    lines = []
    prefix = _INDENT * depth
    for child in item.children:
        if child.value is not None:
            if _needs_quotes(child.value):
                escaped = child.value.replace('"', '\\"')
                lines.append(f'{prefix}{child.key}: "{escaped}"\n')
            else:
                lines.append(f"{prefix}{child.key}: {child.value}\n")
        else:
            lines.append(f"{prefix}{child.key}:\n")
            lines.extend(_render(child, depth + 1))
    return lines


def to_yaml(item: ConfigItem) -> str:
    """Render the children of ``item`` as block-style YAML.

    Values holding whitespace, control, non-ASCII or YAML indicator
    characters are double-quoted with embedded quotes escaped.
    """
    return "".join(_render(item, 0))


def _closes_string(line: str, delimiter: str) -> bool:
    escaped = False
    for ch, following in zip(line, line[1:] + "\0"):
        if escaped:
            escaped = False
            continue
        if ch == "\\" and following == delimiter:
            escaped = True
            continue
        if ch == delimiter:
            return True
    return False


def check_yaml_design(text: str) -> YamlReport:
    """Check YAML text for tabs, indentation problems and unclosed strings.

    Checking stops at the first error; warnings about odd indents and
    unquoted values with indicator characters are collected along the way.
    """
    report = YamlReport()
    indent_levels: dict[int, int] = {}
    current_level = 0
    in_string = False
    delimiter = ""

    for lineno, line in enumerate(text.splitlines(keepends=True), start=1):
        if line.startswith(("\n", "#")):
            continue

        if in_string:
            if _closes_string(line, delimiter):
                in_string = False
            continue

        indent = len(line) - len(line.lstrip(" "))

        if "\t" in line:
            report.errors.append(
                f"Error at line {lineno}: Tab characters are not allowed in YAML"
            )
            break

        _, colon, after = line.partition(":")
        if colon and after and not after.startswith("\n"):
            value = after.lstrip(" ")
            quoted = value.startswith(('"', "'"))
            if quoted:
                delimiter = value[0]
                end = value.find(delimiter, 1)
                if end == -1 or value[end - 1] == "\\":
                    in_string = True
            if not quoted and any(ch in _FLOW_CHARS for ch in value):
                report.warnings.append(
                    f"Warning at line {lineno}: Value may need quotes: "
                    f"{value.rstrip(chr(10))}"
                )

        if indent % 2:
            report.warnings.append(
                f"Warning at line {lineno}: Indent is not a multiple of 2 spaces"
            )

        level = indent // 2
        if level > current_level:
            if level != current_level + 1:
                report.errors.append(
                    f"Error at line {lineno}: "
                    "Indentation increased by more than one level"
                )
                break
            indent_levels[level] = indent
        elif level > 0 and indent != indent_levels.get(level, 0):
            report.errors.append(
                f"Error at line {lineno}: Inconsistent indentation for this level"
            )
            break

        current_level = level

    if in_string:
        report.errors.append("Error: Unclosed string literal in YAML")

    return report