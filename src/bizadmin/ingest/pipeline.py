from __future__ import annotations

import logging
from pathlib import Path

from bizadmin.ingest.readers import read_csv_text
from bizadmin.ingest.summary import ImportReport
from bizadmin.parsing.builder import IdFactory, build_records, new_record_id
from bizadmin.parsing.registry import get_import_schema
from bizadmin.parsing.schema import EntityType
from bizadmin.parsing.tokenizer import parse_csv_text
from bizadmin.parsing.validator import validate_rows
from bizadmin.storage.repository import CollectionRepository

logger = logging.getLogger(__name__)


def import_csv_text(
    repo: CollectionRepository,
    text: str,
    *,
    entity: EntityType | str,
    id_factory: IdFactory = new_record_id,
) -> ImportReport:
    """
    End-to-end import of decoded CSV text into one entity collection:
      - tokenize into header + data rows,
      - validate the header and then every data row, collecting all issues,
      - any issue -> return a `rejected` report, `repo` is not touched,
      - otherwise build one record per row (fresh unique `id`) and append the
        whole batch to `repo` in one call.

    Raises only on unknown/export-only entities and repository (infra) errors.
    Invalid data never raises, it is reported.
    """
    schema = get_import_schema(entity)
    name = schema.entity.value

    rows = parse_csv_text(text)
    result = validate_rows(schema, rows)
    total = len(result.data_rows)

    if result.header is not None and result.header.ignored:
        logger.debug("%s: ignoring columns %s", name, list(result.header.ignored))

    ## -- any issue aborts the whole import
    if not result.ok:
        logger.info("%s: import rejected, %d issue(s) in %d data row(s)", name, len(result.issues), total)
        return ImportReport(entity=name, status="rejected", total=total, added=0, issues=result.issues)

    assert result.header is not None     # `ok` implies the header was mapped

    existing_ids = [str(r.get("id")) for r in repo.load() if r.get("id") is not None]
    records = build_records(
        schema,
        result.header,
        result.data_rows,
        existing_ids=existing_ids,
        id_factory=id_factory,
    )

    ## -- commit the batch
    repo.append(records)
    logger.info("%s: imported %d record(s)", name, len(records))

    return ImportReport(entity=name, status="succeeded", total=total, added=len(records))


def import_file(
    repo: CollectionRepository,
    *,
    input_path: Path,
    entity: EntityType | str,
    id_factory: IdFactory = new_record_id,
) -> ImportReport:
    """
    Read `input_path` then run `import_csv_text`.

    The file read is the only I/O step; `ImportFileError` from it propagates
    before anything is parsed.
    """
    logger.info("importing %s from %s", getattr(entity, "value", entity), input_path)
    text = read_csv_text(input_path)
    return import_csv_text(repo, text, entity=entity, id_factory=id_factory)
