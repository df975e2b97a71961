"""A small CSV reader that skips the header row and blank lines."""

from __future__ import annotations

import os


def split_line(line: str, delimiter: str) -> list[str]:
    """Split a line on the delimiter; a trailing empty field is dropped."""
    parts = line.split(delimiter)
    if parts and parts[-1] == "":
        parts.pop()
    return parts


class CSVReader:
    """Reads delimited rows from a file, ignoring its first line."""

    def __init__(self, path: str | os.PathLike[str], delimiter: str = ";") -> None:
        if len(delimiter) != 1:
            raise ValueError("delimiter must be a single character")
        self.path = path
        self.delimiter = delimiter
        self._rows: list[list[str]] = []

    def read(self) -> list[list[str]]:
        """Read the file, append its rows and return all rows read so far.

        Raises OSError if the file cannot be opened.
        """
        with open(self.path, encoding="utf-8") as handle:
            next(handle, None)
            for line in handle:
                line = line.rstrip("\n")
                if line:
                    self._rows.append(split_line(line, self.delimiter))
        return self.rows()

    def rows(self) -> list[list[str]]:
        """Return a copy of the rows read so far."""
        return [list(row) for row in self._rows]

    def clear(self) -> None:
        """Forget all rows read so far."""
        self._rows = []