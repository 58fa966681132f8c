from __future__ import annotations

import logging
from pathlib import Path

import psycopg

from bizadmin.db.connect import connect

logger = logging.getLogger(__name__)


class SchemaInitError(RuntimeError):
    """A schema statement failed; names the file and the 1-based statement number."""

    def __init__(self, sql_path: Path, index: int, statement: str, cause: Exception) -> None:
        super().__init__(f"{sql_path}: statement {index} failed: {cause}\n{statement}")
        self.sql_path = sql_path
        self.index = index
        self.statement = statement


def split_statements(sql: str) -> list[str]:
    """`;`-separated statements, blanks dropped. The schema files hold no `;` inside literals."""
    return [s.strip() for s in sql.split(";") if s.strip()]


def apply_sql_file(conn: psycopg.Connection, sql_path: Path) -> int:
    """Run every statement of `sql_path` in one transaction. Returns the statement count."""
    statements = split_statements(sql_path.read_text(encoding="utf-8"))

    for i, stmt in enumerate(statements, 1):
        try:
            conn.execute(stmt)
        except psycopg.Error as e:
            conn.rollback()
            raise SchemaInitError(sql_path, i, stmt, e) from e

    conn.commit()
    logger.info("applied %s (%d statement(s))", sql_path, len(statements))
    return len(statements)


def schema_files(sql_path: Path) -> list[Path]:
    """`sql_path` itself, or the `*.sql` files of a directory in name order."""
    if not sql_path.exists():
        raise FileNotFoundError(f"SQL path not found: {sql_path}")
    if sql_path.is_dir():
        return sorted(sql_path.glob("*.sql"))
    return [sql_path]


def db_init(*, sql_path: Path, database_url: str | None = None) -> list[Path]:
    """
    Create (or re-create) the `kv_store` and `import_runs` tables.

    Returns the files that were applied.
    """
    files = schema_files(sql_path)
    with connect(database_url) as conn:
        for f in files:
            apply_sql_file(conn, f)
    return files
