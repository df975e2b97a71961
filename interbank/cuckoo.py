"""Single-table cuckoo hash keyed by transaction id."""

from __future__ import annotations

from interbank.records import Transaction

_MASK = (1 << 64) - 1
_PRIME = 0x9E3779B1
_SECOND_MULTIPLIER = 37


def hash_function(key: int, table_size: int) -> int:
    """Mix a 64-bit unsigned key and reduce it modulo the table size."""
    key &= _MASK
    key ^= key >> 21
    key = (key * _PRIME) & _MASK
    key ^= key >> 24
    key = (key + (key << 3)) & _MASK
    key ^= key >> 11
    key = (key + (key << 15)) & _MASK
    key ^= key >> 17
    return key % table_size


class CuckooHashTable:
    """Cuckoo hash table of transactions with two hash positions per id.

    The table doubles and rehashes everything when an eviction chain
    runs as long as the table is wide.
    """

    def __init__(self, size: int = 2500) -> None:
        if size < 1:
            raise ValueError("table size must be at least 1")
        self._size = size
        self._table: list[Transaction | None] = [None] * size

    def _first_hash(self, record_id: int) -> int:
        return hash_function(record_id, self._size)

    def _second_hash(self, record_id: int) -> int:
        return hash_function((record_id * _SECOND_MULTIPLIER) & _MASK, self._size)

    def size(self) -> int:
        """Number of slots in the table."""
        return self._size

    def __len__(self) -> int:
        return sum(1 for slot in self._table if slot is not None)

    def __contains__(self, record_id: object) -> bool:
        return isinstance(record_id, int) and self.search(record_id) is not None

    def _alternate(self, record: Transaction, pos: int) -> int:
        check = self._first_hash(record.id)
        if check == pos:
            check = self._second_hash(record.id)
        return check

    def _relocate(self, record: Transaction, pos: int) -> None:
        loops = 0
        while loops < self._size:
            record, self._table[pos] = self._table[pos], record
            assert record is not None
            check = self._alternate(record, pos)
            if self._table[check] is None:
                self._table[check] = record
                return
            pos = check
            loops += 1
        self._grow()
        self.insert(record)

    def _grow(self) -> None:
        old_table = self._table
        self._size *= 2
        self._table = [None] * self._size
        for record in old_table:
            if record is not None:
                self.insert(record)

    def insert(self, record: Transaction) -> bool:
        """Store a record; return False if its id is already present."""
        if self.search(record.id) is not None:
            return False

        pos = self._first_hash(record.id)
        displaced = self._table[pos]
        self._table[pos] = record
        if displaced is None:
            return True

        check = self._alternate(displaced, pos)
        if self._table[check] is None:
            self._table[check] = displaced
            return True

        self._relocate(displaced, check)
        return True

    def search(self, record_id: int) -> Transaction | None:
        """Return the record with this id, or None."""
        for pos in (self._first_hash(record_id), self._second_hash(record_id)):
            record = self._table[pos]
            if record is not None and record.id == record_id:
                return record
        return None

    def delete(self, record_id: int) -> bool:
        """Remove the record with this id; return False if it is absent."""
        for pos in (self._first_hash(record_id), self._second_hash(record_id)):
            record = self._table[pos]
            if record is not None and record.id == record_id:
                self._table[pos] = None
                return True
        return False