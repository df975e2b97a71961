"""Transaction record stored by the interbank tools."""

from __future__ import annotations

from dataclasses import dataclass

KIND_MAX_BYTES = 254
_ID_LIMIT = 1 << 64


def _clip_kind(kind: str) -> str:
    """Cut the kind at the first NUL and to at most KIND_MAX_BYTES bytes of UTF-8."""
    kind = kind.split("\0", 1)[0]
    encoded = kind.encode("utf-8")
    if len(encoded) <= KIND_MAX_BYTES:
        return kind
    return encoded[:KIND_MAX_BYTES].decode("utf-8", errors="ignore")


@dataclass(frozen=True)
class Transaction:
    """One interbank transaction: identifier, kind and amount."""

    id: int
    kind: str
    amount: float

    def __post_init__(self) -> None:
        if not 0 <= self.id < _ID_LIMIT:
            raise ValueError(f"transaction id out of range: {self.id}")
        object.__setattr__(self, "kind", _clip_kind(self.kind))
        object.__setattr__(self, "amount", float(self.amount))