"""
Console I/O for the interactive demo menu.

Thin wrapper over click so the dispatcher can be driven from tests.
"""

import sys
from typing import Callable, Optional

import click


class Console:
    """Reads selections from stdin and writes to stdout through click."""

    def __init__(self, read_line: Optional[Callable[[], str]] = None):
        # read_line returns "" at end of input, like file.readline()
        self._read_line = read_line or sys.stdin.readline

    def write(self, text: str = "") -> None:
        click.echo(text, nl=False)

    def write_line(self, text: str = "") -> None:
        click.echo(text)

    def read_line(self) -> Optional[str]:
        """Read one line without its line ending; None at end of input."""
        line = self._read_line()
        if not line:
            return None
        return line.rstrip("\r\n")

    def pause(self) -> None:
        # No-op when stdin/stdout is not a terminal
        click.pause(info="")

    def clear(self) -> None:
        click.clear()
