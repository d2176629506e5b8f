"""JSON output for configuration trees and a simple balance check."""

from __future__ import annotations

import re
from typing import Optional

from v2lang.model import ConfigItem

_INDENT = "    "

_ESCAPES = {
    '"': '\\"',
    "\\": "\\\\",
    "\b": "\\b",
    "\f": "\\f",
    "\n": "\\n",
    "\r": "\\r",
    "\t": "\\t",
}

_NUMBER = re.compile(
    r"""
    [ \t\n\v\f\r]*
    [+-]?
    (?:
        0x(?:[0-9a-f]+\.?[0-9a-f]*|\.[0-9a-f]+)(?:p[+-]?\d+)?
      | (?:\d+\.?\d*|\.\d+)(?:e[+-]?\d+)?
      | inf(?:inity)?
      | nan(?:\([0-9a-z_]*\))?
    )
    """,
    re.VERBOSE | re.IGNORECASE,
)


def escape_json_string(text: str) -> str:
    """Escape quotes, backslashes and the common control characters."""
    return "".join(_ESCAPES.get(ch, ch) for ch in text)


def is_numeric(text: Optional[str]) -> bool:
    """True if the whole string reads as a C floating-point literal."""
    if text is None:
        return False
    if text == "":
        return True
    return _NUMBER.fullmatch(text) is not None


def is_boolean(text: Optional[str]) -> bool:
    """True for exactly ``true`` or ``false``."""
    return text in ("true", "false")


def is_null(text: Optional[str]) -> bool:
    """True for a missing value or exactly ``null``."""
    return text is None or text == "null"


def _quoted(text: str) -> str:
    return f'"{escape_json_string(text)}"'


def _scalar(value: str, check_design: bool) -> str:
    if check_design:
        if is_numeric(value) or is_boolean(value):
            return value
        if is_null(value):
            return "null"
    return _quoted(value)


def _render_value(item: ConfigItem, indent: int, check_design: bool) -> str:
    if item.children:
        return _render_object(item, indent + 1, check_design)
    if item.value is not None:
        return _scalar(item.value, check_design)
    return "null"


def _render_object(item: ConfigItem, indent: int, check_design: bool) -> str:
    if not item.children:
        return "{}"

    inner = _INDENT * (indent + 1)
    groups: dict[str, list[ConfigItem]] = {}
    for child in item.children:
        groups.setdefault(child.key, []).append(child)

    entries = []
    for key, members in groups.items():
        head = f"{inner}{_quoted(key)}: "
        if len(members) == 1:
            entries.append(head + _render_value(members[0], indent, check_design))
        else:
            separator = f",\n{inner}{_INDENT}"
            body = separator.join(
                _render_value(member, indent, check_design) for member in members
            )
            entries.append(f"{head}[\n{inner}{_INDENT}{body}\n{inner}]")

    return "{\n" + ",\n".join(entries) + "\n" + _INDENT * indent + "}"


def to_json(item: ConfigItem, check_design: bool = False) -> str:
    """Render the children of ``item`` as a JSON object.

    Repeated keys are gathered into an array at the first key's position.
    With ``check_design`` numbers, booleans and ``null`` are written bare;
    otherwise every scalar is a string.
    """
    return _render_object(item, 0, check_design)


def check_json_design(text: str) -> bool:
    """True if braces and brackets outside strings are balanced."""
    braces = brackets = 0
    in_string = escape = False
    for ch in text:
        if escape:
            escape = False
            continue
        if ch == "\\" and in_string:
            escape = True
            continue
        if ch == '"':
            in_string = not in_string
            continue
        if in_string:
            continue
        if ch == "{":
            braces += 1
        elif ch == "}":
            braces -= 1
        elif ch == "[":
            brackets += 1
        elif ch == "]":
            brackets -= 1
        if braces < 0 or brackets < 0:
            return False
    return braces == 0 and brackets == 0