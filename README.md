# interbank

This package reads a CSV file of interbank transactions and prints a summary report. After the report, you can look up single transactions by their ID.

## Input

The first line of the file is a header, and it is always skipped. Empty lines are ignored. Every other line holds at least three fields, separated by commas:

```
id,tipo,monto
1,Crédito,100.00
2,Débito,75.50
3,Crédito,250.00
```

- `id` is a non-negative integer and is the lookup key. When an ID repeats, only its first occurrence is stored for lookup. Every row still counts towards the report.
- `tipo` is `Crédito` (credit) or `Débito` (debit). Rows of any other kind are not counted and do not change the balance. They do take part in the search for the largest amount.
- `monto` is the amount.

If a row cannot be interpreted, the program prints `No se pudo interpretar la fila!` and skips that row. A row cannot be interpreted when it has fewer than three fields, or when its ID or amount is not a number. If the file cannot be read, the program prints `No se pudo leer el archivo`.

## Running

```
pip install .
interbank
```

The program first asks for the path of the CSV file. It then prints the report:

```
Reporte de Transacciones
---------------------------------------------
Balance Final: 274.5
Transacción de Mayor Monto: ID 3 - 250
Conteo de Transacciones: Crédito: 2 Débito: 1
```

- The final balance adds credits and subtracts debits.
- The largest transaction is the first row whose amount is the highest and above zero. If no amount is above zero, the report shows `ID 0 - 0`.
- The counts give the number of credit rows and the number of debit rows.
- Numbers are shown with up to six significant digits.

After the report, press Enter to open the menu:

- `1` asks for an ID. It then prints that record, or says that no record has that ID. If the ID is not a number, it prints `ID invalido.`.
- `0` exits.
- Any other number prints `Ingrese algo correcto...` and shows the menu again. Input that is not a number ends the session.

## Library use

```python
from interbank.manager import DBManager

manager = DBManager("transactions.csv", ",", 2500)
manager.load_data()
print(manager.report())
record = manager.search(3)
print(manager.describe(3))
```

- `DBManager.load_data(out=None)` writes its messages to `out`, which is standard output by default. It returns `False` if the file could not be read.
- `DBManager.search` returns a `Transaction` (from `interbank.records`), or `None` when no record has that ID.
- `DBManager.describe` returns the record's text, or a not-found message.
- `DBManager.summary` exposes the running `TransactionReport`.

The other modules can also be used on their own:

- `interbank.csvreader.CSVReader` reads the rows of a CSV file.
- `interbank.manager.parse_row` turns a row into a `Transaction` and raises `RowParseError` on bad input.
- `interbank.report.TransactionReport` keeps the running totals and renders the report.
- `interbank.cuckoo.CuckooHashTable` stores the records. It is a single-table cuckoo hash that doubles its size when displacement fails.

## Limitations

Records live only in memory for the length of a session. Nothing is saved, and records cannot be added, changed or deleted from the console.

## Tests

```
pip install .[test]
pytest
```