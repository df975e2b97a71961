"""Loads transactions from CSV into a cuckoo table and a running report."""

from __future__ import annotations

import re
import sys
from collections.abc import Sequence
from typing import TextIO

from interbank.csvreader import CSVReader
from interbank.cuckoo import CuckooHashTable
from interbank.records import Transaction
from interbank.report import TransactionReport, format_record

_ULONG_LIMIT = 1 << 64
_SPACE = r"[ \t\n\v\f\r]*"
_UNSIGNED_PREFIX = re.compile(_SPACE + r"([+-]?)(\d+)", re.ASCII)
_FLOAT_PREFIX = re.compile(
    _SPACE
    + r"([+-]?(?:(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?|inf(?:inity)?|nan))",
    re.ASCII | re.IGNORECASE,
)


class RowParseError(ValueError):
    """A CSV row could not be turned into a transaction."""


def _parse_unsigned(text: str) -> int:
    """Read the leading unsigned integer of the text; a minus sign wraps around."""
    match = _UNSIGNED_PREFIX.match(text)
    if match is None:
        raise RowParseError(f"not an integer: {text!r}")
    sign, digits = match.groups()
    value = int(digits)
    if value >= _ULONG_LIMIT:
        raise RowParseError(f"integer out of range: {text!r}")
    if sign == "-":
        value = -value % _ULONG_LIMIT
    return value


def _parse_float(text: str) -> float:
    """Read the leading floating-point number of the text."""
    match = _FLOAT_PREFIX.match(text)
    if match is None:
        raise RowParseError(f"not a number: {text!r}")
    literal = match.group(1)
    value = float(literal)
    if value in (float("inf"), float("-inf")) and "inf" not in literal.lower():
        raise RowParseError(f"number out of range: {text!r}")
    return value


def parse_row(row: Sequence[str]) -> Transaction:
    """Build a transaction from the id, kind and amount fields of a row."""
    if len(row) < 3:
        raise RowParseError(f"expected at least 3 fields, got {len(row)}")
    return Transaction(_parse_unsigned(row[0]), row[1], _parse_float(row[2]))


class DBManager:
    """Ties the CSV reader, the hash table and the report together."""

    def __init__(self, csv_path: str, delimiter: str = ";", hash_size: int = 2500) -> None:
        self._reader = CSVReader(csv_path, delimiter)
        self._table = CuckooHashTable(hash_size)
        self._report = TransactionReport()

    @property
    def summary(self) -> TransactionReport:
        """The running totals over every loaded row."""
        return self._report

    def load_data(self, out: TextIO | None = None) -> bool:
        """Read the CSV, fold each row into the report and store it.

        Problems are written to ``out`` (standard output by default).
        Returns False if the file could not be read.
        """
        out = sys.stdout if out is None else out
        try:
            rows = self._reader.read()
        except (OSError, UnicodeDecodeError):
            out.write("No se pudo leer el archivo\n")
            return False
        for row in rows:
            try:
                record = parse_row(row)
            except RowParseError:
                out.write("No se pudo interpretar la fila!\n")
                continue
            self._report.evaluate(record)
            self._table.insert(record)
        self._reader.clear()
        return True

    def report(self) -> str:
        """Return the final report text."""
        return self._report.render()

    def search(self, record_id: int) -> Transaction | None:
        """Return the stored transaction with this id, or None."""
        return self._table.search(record_id)

    def describe(self, record_id: int) -> str:
        """Return the description of a transaction, or a not-found message."""
        record = self.search(record_id)
        if record is None:
            return f"No se encontró el registro con el ID: {record_id}\n"
        return format_record(record)