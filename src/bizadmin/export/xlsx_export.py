from __future__ import annotations

from pathlib import Path
from typing import Any, Iterable

from openpyxl import Workbook
from openpyxl.cell.cell import ILLEGAL_CHARACTERS_RE
from openpyxl.styles import Font

from bizadmin.export.csv_export import export_headers, format_value
from bizadmin.parsing.schema import EntitySchema
from bizadmin.parsing.types import Record


def _cell_value(value: Any) -> Any:
    """
    Numbers stay numbers in the sheet, empty text is a blank cell, everything else is text.

    Control characters the xlsx format cannot hold (e.g. `\\x0b`) are dropped.
    """
    if isinstance(value, bool):
        return format_value(value)
    if isinstance(value, (int, float)):
        return value
    s = ILLEGAL_CHARACTERS_RE.sub("", format_value(value))
    return s if s != "" else None


def build_workbook(records: Iterable[Record], schema: EntitySchema) -> Workbook:
    """One sheet named after the entity, bold header row, one row per record."""
    wb = Workbook()
    ws = wb.active
    ws.title = schema.entity.value

    headers = export_headers(schema)
    ws.append(headers)
    for cell in ws[1]:
        cell.font = Font(bold=True)

    for r in records:
        ws.append([_cell_value(r.get(h)) for h in headers])
        # text is stored as text: "=1+1" in a notes field is not a formula.
        for cell in ws[ws.max_row]:
            if isinstance(cell.value, str):
                cell.data_type = "s"

    ws.freeze_panes = "A2"
    return wb


def write_xlsx(path: Path, records: Iterable[Record], schema: EntitySchema) -> int:
    """Write `records` to `path` as an `.xlsx` workbook. Returns the number of records written."""
    records = list(records)
    build_workbook(records, schema).save(path)
    return len(records)
