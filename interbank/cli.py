"""Interactive console: load a CSV, print the report, look up ids."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence
from typing import TextIO

from interbank.manager import DBManager

_WHITESPACE = " \t\n\v\f\r"
_INT_MIN = -(1 << 31)
_INT_MAX = (1 << 31) - 1
_ULONG_LIMIT = 1 << 64

_MENU = "\n----- MENU -----\n1. Buscar por ID\n0. Salir\nSeleccione una opcion: "


class _Console:
    """Character-level reader over a text stream, for prompt-style input."""

    def __init__(self, stream: TextIO) -> None:
        self._stream = stream
        self._pending = ""

    def _peek(self) -> str:
        if not self._pending:
            self._pending = self._stream.read(1)
        return self._pending

    def _take(self) -> str:
        char = self._peek()
        self._pending = ""
        return char

    def getline(self) -> str:
        chars = []
        while (char := self._take()) not in ("", "\n"):
            chars.append(char)
        return "".join(chars)

    def getchar(self) -> str:
        return self._take()

    def ignore_line(self) -> None:
        while self._take() not in ("", "\n"):
            pass

    def read_integer(self) -> int | None:
        """Read a signed decimal integer after optional whitespace, or None."""
        while (char := self._peek()) and char in _WHITESPACE:
            self._take()
        negative = False
        if self._peek() in ("+", "-"):
            negative = self._take() == "-"
        digits = []
        while (char := self._peek()) and char.isascii() and char.isdigit():
            digits.append(self._take())
        if not digits:
            return None
        value = int("".join(digits))
        return -value if negative else value


def _read_option(console: _Console) -> int:
    value = console.read_integer()
    if value is None or not _INT_MIN <= value <= _INT_MAX:
        return 0
    return value


def _read_id(console: _Console) -> int | None:
    value = console.read_integer()
    if value is None or abs(value) >= _ULONG_LIMIT:
        return None
    return value % _ULONG_LIMIT


def run(stdin: TextIO, stdout: TextIO) -> None:
    """Run the interactive session over the given streams."""
    console = _Console(stdin)
    stdout.write("Ingrese la direccion donde se encuentra el CSV: ")
    path = console.getline()

    manager = DBManager(path, ",")
    manager.load_data(stdout)
    stdout.write(manager.report())

    stdout.write("Presiona cualquier tecla para ir al menu de API... ")
    console.getchar()

    while True:
        stdout.write(_MENU)
        option = _read_option(console)
        if option == 1:
            stdout.write("Ingrese el ID a buscar: ")
            record_id = _read_id(console)
            if record_id is None:
                console.ignore_line()
                stdout.write("ID invalido.\n")
            else:
                stdout.write(manager.describe(record_id))
        elif option == 0:
            stdout.write("Adios.\n")
            return
        else:
            stdout.write("Ingrese algo correcto...\n")


def main(argv: Sequence[str] | None = None) -> int:
    """Entry point of the interactive console."""
    parser = argparse.ArgumentParser(
        prog="interbank",
        description="Load interbank transactions from a CSV file and query them by id.",
    )
    parser.parse_args(argv)
    run(sys.stdin, sys.stdout)
    return 0


if __name__ == "__main__":
    sys.exit(main())