from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Literal
from uuid import UUID

from psycopg import Connection

from bizadmin.ingest.summary import ImportReport

RunStatus = Literal["running", "succeeded", "rejected", "failed"]


@dataclass(frozen=True)
class ImportRun:
    """One import attempt as persisted in the ledger."""
    run_id: UUID
    entity: str
    input_path: str
    status: RunStatus
    total_rows: int | None
    added: int | None
    issue_count: int | None


def insert_import_run(conn: Connection, *, input_path: Path, entity: str) -> UUID:
    """
    Create an `import_runs` row in `running` state, returns `run_id`.

    The caller commits it immediately so the ledger persists even if the import errors.
    """
    row = conn.execute(
        """
        INSERT INTO import_runs (entity, input_path, status)
        VALUES (%s, %s, 'running')
        RETURNING run_id
        """,
        (entity, str(input_path)),
    ).fetchone()
    assert row is not None
    return row[0]


def finish_import_run(conn: Connection, *, run_id: UUID, report: ImportReport) -> None:
    """Record an import's outcome (`succeeded`/`rejected`) and its counts."""
    conn.execute(
        """
        UPDATE import_runs
        SET status = %s, total_rows = %s, added = %s, issue_count = %s
        WHERE run_id = %s
        """,
        (report.status, report.total, report.added, len(report.issues), run_id),
    )


def fail_import_run(conn: Connection, *, run_id: UUID) -> None:
    """Mark a run `failed` (infra error, nothing committed)."""
    conn.execute("UPDATE import_runs SET status = 'failed' WHERE run_id = %s", (run_id,))


def get_import_run(conn: Connection, run_id: UUID) -> ImportRun | None:
    row = conn.execute(
        """
        SELECT run_id, entity, input_path, status, total_rows, added, issue_count
        FROM import_runs WHERE run_id = %s
        """,
        (run_id,),
    ).fetchone()
    if row is None:
        return None
    return ImportRun(*row)
