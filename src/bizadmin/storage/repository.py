from __future__ import annotations

import copy
from typing import Iterable, Protocol

from bizadmin.parsing.types import Record


class CollectionRepository(Protocol):
    """
    One entity's persisted collection. The import pipeline only ever talks to this.

    `append` must never replace or reorder what is already stored.
    """
    def load(self) -> list[Record]: ...

    def save(self, records: Iterable[Record]) -> None: ...

    def append(self, records: Iterable[Record]) -> None: ...


class InMemoryRepository:
    """Process-local collection. Used by tests, dry runs and as a reference implementation."""

    def __init__(self, records: Iterable[Record] = ()) -> None:
        self._records: list[Record] = [dict(r) for r in records]

    def __len__(self) -> int:
        return len(self._records)

    def load(self) -> list[Record]:
        # deep copies, so callers mutating what they loaded cannot touch the store.
        return copy.deepcopy(self._records)

    def save(self, records: Iterable[Record]) -> None:
        self._records = [dict(r) for r in records]

    def append(self, records: Iterable[Record]) -> None:
        self._records.extend(dict(r) for r in records)
