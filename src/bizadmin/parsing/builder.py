from __future__ import annotations

from typing import Any, Callable, Collection, Sequence
from uuid import uuid4

from bizadmin.parsing.adapter import HeaderMap
from bizadmin.parsing.primitives import parse_optional_number, parse_text
from bizadmin.parsing.schema import EntitySchema
from bizadmin.parsing.types import Record

IdFactory = Callable[[], str]


def new_record_id() -> str:
    return str(uuid4())


def build_record(schema: EntitySchema, header: HeaderMap, row: Sequence[str], *, record_id: str) -> Record:
    """
    One validated row -> one record.

    Field values come out trimmed, numeric fields parsed with the same parser the
    validator used. Fields whose column is absent take the schema's default.
    """
    out: dict[str, Any] = {"id": record_id}
    for f in schema.fields:
        if f.name not in header.index:
            out[f.name] = schema.default_for(f)
            continue

        raw = header.cell(row, f.name)
        if f.numeric:
            out[f.name] = parse_optional_number(raw, field=f.name)
        else:
            out[f.name] = parse_text(raw)
    return out


def build_records(
    schema: EntitySchema,
    header: HeaderMap,
    rows: Sequence[Sequence[str]],
    *,
    existing_ids: Collection[str] = (),
    id_factory: IdFactory = new_record_id,
) -> list[Record]:
    """
    Build one record per row, in row order.

    Only call after validation passed for every row. Ids are unique among
    `existing_ids` and the rest of the batch (a colliding id is drawn again).
    """
    taken = set(existing_ids)
    records: list[Record] = []
    for row in rows:
        rid = id_factory()
        while rid in taken:
            rid = id_factory()
        taken.add(rid)
        records.append(build_record(schema, header, row, record_id=rid))
    return records
