from __future__ import annotations

import argparse
import sys
from pathlib import Path

from psycopg import Connection

from bizadmin.config import get_settings
from bizadmin.db.connect import connect
from bizadmin.db.import_runs import fail_import_run, finish_import_run, insert_import_run
from bizadmin.db.initialize import db_init
from bizadmin.db.kv_store import PostgresRepository
from bizadmin.export.csv_export import write_csv
from bizadmin.export.xlsx_export import write_xlsx
from bizadmin.ingest.pipeline import import_file
from bizadmin.ingest.readers import ImportFileError
from bizadmin.ingest.summary import ImportReport
from bizadmin.logs import setup_logging
from bizadmin.parsing.registry import ALL_ENTITIES, IMPORTABLE_ENTITIES, get_entity_schema


def run_import(conn: Connection, *, input_path: Path, entity: str) -> ImportReport:
    """
    Import one file into the Postgres-backed collection for `entity`.

    - the `import_runs` ledger row is committed first,
    - data and the run's outcome are committed together,
    - on an infra error the data is rolled back and the run marked `failed` (separate txn).
    """
    run_id = insert_import_run(conn, input_path=input_path, entity=entity)
    conn.commit()

    try:
        report = import_file(PostgresRepository(conn, entity), input_path=input_path, entity=entity)
        finish_import_run(conn, run_id=run_id, report=report)
        conn.commit()
        return report
    except Exception:
        conn.rollback()
        fail_import_run(conn, run_id=run_id)
        conn.commit()
        raise


def run_export(conn: Connection, *, entity: str, output_path: Path, fmt: str) -> int:
    """Export the stored collection for `entity`. Returns the number of records written."""
    schema = get_entity_schema(entity)
    records = PostgresRepository(conn, entity).load()
    if fmt == "xlsx":
        return write_xlsx(output_path, records, schema)
    return write_csv(output_path, records, schema)


def main(argv: list[str] | None = None) -> int:
    """
    A CLI for importing and exporting master data.

    The `cmd` options are:
    ## import:
    Validate a CSV file and append its rows to an entity collection.
    - `--input` as the path to the CSV,
    - `--entity` as the target collection.
    Any validation error aborts the whole file; nothing is added.

    ### Example import usage:
    - `bizadmin import --input data/products.csv --entity products`

    ## export:
    Write a stored collection out as CSV (default) or XLSX.
    - `bizadmin export --entity customers --output customers.csv`
    - `bizadmin export --entity contracts --output contracts.xlsx --format xlsx`

    ## db:
    Database controlling commands.
    - `init` (re)creates the schema, `--sql` points at a `.sql` file or a dir of them.
    """
    p = argparse.ArgumentParser(prog="bizadmin")
    sub = p.add_subparsers(dest="cmd", required=True)

    # import cmd
    imp = sub.add_parser("import", help="Validate a CSV file and append it to a collection.")
    imp.add_argument("--input", required=True, help="Path to the CSV file.")
    imp.add_argument("--entity", required=True, choices=IMPORTABLE_ENTITIES)

    # export cmd
    exp = sub.add_parser("export", help="Export a collection to CSV or XLSX.")
    exp.add_argument("--entity", required=True, choices=ALL_ENTITIES)
    exp.add_argument("--output", required=True, help="Path of the file to write.")
    exp.add_argument("--format", dest="fmt", default="csv", choices=["csv", "xlsx"])

    # db cmd
    db = sub.add_parser("db", help="Database utilities.")
    db_sub = db.add_subparsers(dest="db_cmd", required=True)

    db_init_p = db_sub.add_parser("init", help="Initialize DB schema from SQL file(s).")
    db_init_p.add_argument("--sql", default="sql", help="Path to schema SQL file OR a directory of `.sql` files.")

    args = p.parse_args(argv)
    settings = get_settings()
    setup_logging(settings.log_level)

    if args.cmd == "import":
        input_path = Path(args.input)
        try:
            with connect() as conn:
                report = run_import(conn, input_path=input_path, entity=args.entity)
        except ImportFileError as e:
            print(f"import failed: {e}", file=sys.stderr)
            return 1

        print(report.render(cap=settings.error_cap))
        return 0 if report.succeeded else 1

    if args.cmd == "export":
        output_path = Path(args.output)
        with connect() as conn:
            n = run_export(conn, entity=args.entity, output_path=output_path, fmt=args.fmt)
        print(f"{args.entity}: exported {n} record(s) to {output_path}")
        return 0

    if args.cmd == "db" and args.db_cmd == "init":
        applied = db_init(sql_path=Path(args.sql))
        print(f"Initialized schema from {args.sql} ({len(applied)} file(s))")
        return 0

    return 2


if __name__ == "__main__":
    raise SystemExit(main())
