"""Running totals over transactions and their text report."""

from __future__ import annotations

from dataclasses import dataclass

from interbank.records import Transaction

CREDIT = "Crédito"
DEBIT = "Débito"
_RULE = "-" * 45


def _number(value: float) -> str:
    """Format a float the way a default-precision stream does (six significant digits)."""
    return format(value, "g")


def format_record(record: Transaction) -> str:
    """Describe one transaction on three lines."""
    return (
        f"ID: {record.id}\n"
        f"Tipo_transaccion: {record.kind}\n"
        f"Monto: {_number(record.amount)}\n"
    )


@dataclass
class TransactionReport:
    """Final balance, largest transaction and credit/debit counts."""

    balance: float = 0.0
    largest_amount: float = 0.0
    largest_id: int = 0
    credit_count: int = 0
    debit_count: int = 0

    def evaluate(self, record: Transaction) -> None:
        """Fold one transaction into the totals.

        Credits add to the balance and debits subtract from it; other kinds
        only take part in the search for the largest amount.
        """
        if record.kind == CREDIT:
            self.credit_count += 1
            self.balance += record.amount
        if record.kind == DEBIT:
            self.debit_count += 1
            self.balance -= record.amount
        if record.amount > self.largest_amount:
            self.largest_amount = record.amount
            self.largest_id = record.id

    def render(self) -> str:
        """Return the report text."""
        return (
            "Reporte de Transacciones\n"
            f"{_RULE}\n"
            f"Balance Final: {_number(self.balance)}\n"
            f"Transacción de Mayor Monto: ID {self.largest_id} - "
            f"{_number(self.largest_amount)}\n"
            f"Conteo de Transacciones: {CREDIT}: {self.credit_count} "
            f"{DEBIT}: {self.debit_count}\n"
        )