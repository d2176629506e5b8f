"""Command line runner for ``.v2f`` scripts."""

from __future__ import annotations

import sys
from typing import Optional, Sequence

from v2lang.script import interpret

PROG = "v2file"


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the script named by the first argument and return the exit status."""
    args = list(sys.argv[1:] if argv is None else argv)
    if not args:
        print(f"Usage: {PROG} <script.v2f>", file=sys.stderr)
        return 1

    try:
        with open(args[0], encoding="utf-8", errors="replace", newline="") as handle:
            code = handle.read()
    except OSError as exc:
        print(f"Error opening file: {exc.strerror}", file=sys.stderr)
        return 1

    interpret(code)
    return 0


if __name__ == "__main__":
    sys.exit(main())