from interbank.records import Transaction
from interbank.report import TransactionReport, format_record


def test_fresh_report_is_empty():
    report = TransactionReport()
    assert report.credit_count == 0
    assert report.debit_count == 0
    assert report.largest_id == 0
    assert report.balance == 0.0


def test_credit_adds_to_balance():
    report = TransactionReport()
    report.evaluate(Transaction(1, "Crédito", 250.0))
    assert report.credit_count == 1
    assert report.debit_count == 0
    assert report.balance == 250.0


def test_debit_subtracts_from_balance():
    report = TransactionReport()
    report.evaluate(Transaction(2, "Débito", 75.5))
    assert report.debit_count == 1
    assert report.credit_count == 0
    assert report.balance == -75.5


def test_credit_and_debit_cancel():
    report = TransactionReport()
    report.evaluate(Transaction(1, "Crédito", 40.0))
    report.evaluate(Transaction(2, "Débito", 40.0))
    assert report.balance == 0.0
    assert (report.credit_count, report.debit_count) == (1, 1)


def test_unknown_kind_only_tracks_largest():
    report = TransactionReport()
    report.evaluate(Transaction(9, "Transferencia", 500.0))
    assert report.credit_count == 0
    assert report.debit_count == 0
    assert report.balance == 0.0
    assert report.largest_id == 9
    assert report.largest_amount == 500.0


def test_largest_keeps_first_on_tie():
    report = TransactionReport()
    report.evaluate(Transaction(3, "Crédito", 100.0))
    report.evaluate(Transaction(4, "Débito", 100.0))
    assert report.largest_id == 3


def test_largest_moves_to_bigger_amount():
    report = TransactionReport()
    report.evaluate(Transaction(3, "Crédito", 100.0))
    report.evaluate(Transaction(8, "Débito", 300.0))
    assert report.largest_id == 8
    assert report.largest_amount == 300.0


def test_negative_amounts_never_become_largest():
    report = TransactionReport()
    report.evaluate(Transaction(5, "Crédito", -10.0))
    assert report.largest_id == 0
    assert report.largest_amount == 0.0


def test_render_layout():
    report = TransactionReport()
    report.evaluate(Transaction(7, "Crédito", 150.0))
    lines = report.render().splitlines()
    assert lines[0] == "Reporte de Transacciones"
    assert lines[1] == "---------------------------------------------"
    assert lines[2] == "Balance Final: 150"
    assert lines[3] == "Transacción de Mayor Monto: ID 7 - 150"
    assert lines[4] == "Conteo de Transacciones: Crédito: 1 Débito: 0"
    assert report.render().endswith("\n")


def test_render_uses_six_significant_digits():
    report = TransactionReport()
    report.evaluate(Transaction(1, "Crédito", 1234567.0))
    assert "Balance Final: 1.23457e+06" in report.render()


def test_format_record():
    text = format_record(Transaction(7, "Crédito", 12.5))
    assert text == "ID: 7\nTipo_transaccion: Crédito\nMonto: 12.5\n"