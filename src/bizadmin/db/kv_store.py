from __future__ import annotations

from typing import Any, Iterable

from psycopg import Connection
from psycopg.types.json import Jsonb

from bizadmin.parsing.schema import EntityType
from bizadmin.parsing.types import Record


def get_value(conn: Connection, key: str) -> Any | None:
    """Stored JSON value for `key`, `None` when the key was never written."""
    row = conn.execute("SELECT value FROM kv_store WHERE key = %s", (key,)).fetchone()
    return None if row is None else row[0]


def set_value(conn: Connection, key: str, value: Any) -> None:
    """Insert or replace the JSON value stored under `key`."""
    conn.execute(
        """
        INSERT INTO kv_store (key, value, updated_at)
        VALUES (%s, %s, now())
        ON CONFLICT (key) DO UPDATE
        SET value = EXCLUDED.value, updated_at = now()
        """,
        (key, Jsonb(value)),
    )


def append_values(conn: Connection, key: str, values: list[Any]) -> None:
    """
    Append `values` to the JSON array stored under `key` (created when absent).

    One statement: concurrent appends to the same key serialize on the row lock
    instead of overwriting each other.
    """
    conn.execute(
        """
        INSERT INTO kv_store (key, value, updated_at)
        VALUES (%s, %s, now())
        ON CONFLICT (key) DO UPDATE
        SET value = kv_store.value || EXCLUDED.value, updated_at = now()
        """,
        (key, Jsonb(values)),
    )


class PostgresRepository:
    """
    An entity collection persisted as one JSON array in `kv_store`, keyed by entity name.

    Writes are not committed here; the caller owns the transaction.
    """

    def __init__(self, conn: Connection, entity: EntityType | str) -> None:
        self.conn = conn
        self.key = entity.value if isinstance(entity, EntityType) else str(entity)

    def load(self) -> list[Record]:
        value = get_value(self.conn, self.key)
        if value is None:
            return []
        if not isinstance(value, list):
            raise ValueError(f"kv_store[{self.key!r}] is not a JSON array")
        return [dict(r) for r in value]

    def save(self, records: Iterable[Record]) -> None:
        set_value(self.conn, self.key, [dict(r) for r in records])

    def append(self, records: Iterable[Record]) -> None:
        batch = [dict(r) for r in records]
        if batch:
            append_values(self.conn, self.key, batch)
