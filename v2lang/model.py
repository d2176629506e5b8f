"""Configuration tree and the parser for ``.v2`` files."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field
from os import PathLike
from typing import Optional, Union

_WHITESPACE = " \t\n\v\f\r"
_FIELD_LIMIT = 127


class V2SyntaxError(ValueError):
    """Raised when a ``.v2`` document is malformed."""

    def __init__(self, message: str, lineno: Optional[int] = None) -> None:
        self.lineno = lineno
        where = f" (line {lineno})" if lineno is not None else ""
        super().__init__(f"Syntax error: {message}{where}")


@dataclass
class ConfigItem:
    """A key with either a scalar value or a list of child items."""

    key: str
    value: Optional[str] = None
    children: list[ConfigItem] = field(default_factory=list)

    def add_child(self, child: ConfigItem) -> None:
        """Append ``child`` after the existing children."""
        self.children.append(child)


def parse_v2(lines: Iterable[str]) -> ConfigItem:
    """Parse ``.v2`` source lines into a tree rooted at an item named ``root``.

    ``key = value`` lines become scalar items (the value keeps everything after
    ``=``), ``name {`` opens a block and a line containing ``}`` closes it.
    Lines starting with ``#`` and blank lines are ignored.  Keys and values
    are limited to 127 characters.
    """
    root = ConfigItem("root")
    current = root
    stack: list[ConfigItem] = []

    for lineno, raw in enumerate(lines, start=1):
        line = raw.removesuffix("\n")
        if not line or line.startswith("#"):
            continue

        body = line.lstrip(_WHITESPACE)
        key_part, equals, rest = body.partition("=")
        if equals and key_part and rest:
            key = key_part.rstrip(_WHITESPACE)[:_FIELD_LIMIT]
            current.add_child(ConfigItem(key, rest[:_FIELD_LIMIT]))
        elif "{" in body and not body.startswith("{"):
            key = body.partition("{")[0].rstrip(_WHITESPACE)[:_FIELD_LIMIT]
            block = ConfigItem(key)
            current.add_child(block)
            stack.append(current)
            current = block
        elif "}" in body:
            if not stack:
                raise V2SyntaxError("Unmatched closing brace", lineno)
            current = stack.pop()

    return root


def load_v2(path: Union[str, PathLike]) -> ConfigItem:
    """Read and parse the ``.v2`` file at ``path``."""
    with open(path, encoding="utf-8") as handle:
        return parse_v2(handle)