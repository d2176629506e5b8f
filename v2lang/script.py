"""Interpreter for the line-oriented ``.v2f`` scripting language.

Each line holds at most one command of the form ``name.system(argument)``:

``createfile.system(path)``
    create (or truncate) the file ``path``
``os.system(command)``
    run ``command`` through the shell
``print.system(text)``
    write ``text`` to standard output
``error.system(text)``
    write ``text`` to standard error

Lines that match none of these are ignored.
"""

from __future__ import annotations

import subprocess
import sys
from collections.abc import Callable
from typing import Optional


def _trim(text: str) -> str:
    """Drop trailing carriage returns and newlines."""
    return text.rstrip("\r\n")


def _argument(rest: str) -> Optional[str]:
    """Return the first non-empty run of text not containing ``)``."""
    return next((part for part in rest.split(")") if part), None)


def _create_file(path: str) -> None:
    try:
        with open(path, "w", encoding="utf-8"):
            pass
    except OSError:
        print(f"Failed to create file: {path}", file=sys.stderr)
    else:
        print(f"File created: {path}")


def _run_shell(command: str) -> None:
    sys.stdout.flush()
    sys.stderr.flush()
    subprocess.run(command, shell=True, check=False)


def _print_out(text: str) -> None:
    print(text)


def _print_err(text: str) -> None:
    print(text, file=sys.stderr)


_COMMANDS: dict[str, Callable[[str], None]] = {
    "createfile.system(": _create_file,
    "os.system(": _run_shell,
    "print.system(": _print_out,
    "error.system(": _print_err,
}


def parse_line(line: str) -> None:
    """Execute the command on a single script line, if there is one."""
    line = _trim(line)
    for prefix, handler in _COMMANDS.items():
        if line.startswith(prefix):
            argument = _argument(line[len(prefix):])
            if argument is not None:
                handler(_trim(argument))
            return


def interpret(code: str) -> None:
    """Execute every non-empty line of ``code`` in order."""
    for line in code.split("\n"):
        if line:
            parse_line(line)