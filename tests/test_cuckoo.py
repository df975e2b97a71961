import pytest

from interbank.cuckoo import CuckooHashTable, hash_function
from interbank.records import Transaction


def make(record_id, amount=1.0):
    return Transaction(record_id, "Crédito", amount)


def test_hash_of_zero_is_zero():
    assert hash_function(0, 2500) == 0


@pytest.mark.parametrize("table_size", [1, 2, 7, 2500])
def test_hash_in_range(table_size):
    for key in range(200):
        assert 0 <= hash_function(key, table_size) < table_size


def test_hash_is_deterministic():
    results = {hash_function(123456, 997) for _ in range(5)}
    assert len(results) == 1
    assert 0 <= results.pop() < 997


def test_hash_treats_key_as_64_bit():
    assert hash_function((1 << 64) + 5, 101) == hash_function(5, 101)


def test_table_size_must_be_positive():
    with pytest.raises(ValueError):
        CuckooHashTable(0)


def test_default_size():
    assert CuckooHashTable().size() == 2500


def test_insert_and_search():
    table = CuckooHashTable(50)
    record = make(10, 99.5)
    assert table.insert(record) is True
    assert table.search(10) is record
    assert 10 in table
    assert len(table) == 1


def test_search_missing_returns_none():
    table = CuckooHashTable(50)
    table.insert(make(1))
    assert table.search(2) is None
    assert 2 not in table


def test_duplicate_id_rejected_and_original_kept():
    table = CuckooHashTable(50)
    first = make(5, 1.0)
    assert table.insert(first) is True
    assert table.insert(make(5, 2.0)) is False
    assert table.search(5) is first
    assert len(table) == 1


def test_delete():
    table = CuckooHashTable(50)
    table.insert(make(3))
    assert table.delete(3) is True
    assert table.search(3) is None
    assert table.delete(3) is False
    assert len(table) == 0


def test_collisions_force_growth_and_keep_every_record():
    table = CuckooHashTable(1)
    records = [make(i, float(i)) for i in range(1, 201)]
    for record in records:
        assert table.insert(record) is True
    assert table.size() >= len(records)
    assert len(table) == len(records)
    for record in records:
        assert table.search(record.id) is record


def test_size_doubles_from_one():
    table = CuckooHashTable(1)
    table.insert(make(1))
    table.insert(make(2))
    size = table.size()
    assert size >= 2
    assert size & (size - 1) == 0


def test_delete_after_growth():
    table = CuckooHashTable(2)
    for i in range(1, 51):
        table.insert(make(i))
    for i in range(1, 51, 2):
        assert table.delete(i) is True
    assert len(table) == 25
    assert all((i in table) == (i % 2 == 0) for i in range(1, 51))


def test_contains_rejects_non_int():
    table = CuckooHashTable(10)
    table.insert(make(1))
    assert ("1" in table) is False