from __future__ import annotations

from pathlib import Path
from typing import Any, Iterable, Sequence

from bizadmin.parsing.schema import EntitySchema
from bizadmin.parsing.types import Record

_BOM = "\ufeff"
_NEEDS_QUOTES = (",", '"', "\n", "\r")


def format_value(value: Any) -> str:
    """Stringify one record value: `None` -> `""`, lists joined by `"; "`."""
    if value is None:
        return ""
    if isinstance(value, (list, tuple)):
        return "; ".join(format_value(v) for v in value)
    return str(value)


def escape_csv_value(value: Any) -> str:
    """
    Escape one value for a CSV cell.

    Wrapped in double quotes (embedded quotes doubled) only when it holds a comma,
    a quote or a line break. This is the inverse of the tokenizer's quoting rules.
    """
    s = format_value(value)
    if any(c in s for c in _NEEDS_QUOTES):
        return '"' + s.replace('"', '""') + '"'
    return s


def export_headers(schema: EntitySchema) -> list[str]:
    """Export column order: `id` then the schema's fields."""
    return ["id", *schema.field_names]


def render_csv(records: Iterable[Record], headers: Sequence[str], *, bom: bool = True) -> str:
    """
    Serialize `records` to CSV text, one line per record, `\\n` separated.

    Missing keys export as empty cells. A leading BOM (default) makes spreadsheet
    tools detect UTF-8.
    """
    lines = [",".join(escape_csv_value(h) for h in headers)]
    for r in records:
        lines.append(",".join(escape_csv_value(r.get(h)) for h in headers))
    text = "\n".join(lines)
    return _BOM + text if bom else text


def write_csv(path: Path, records: Iterable[Record], schema: EntitySchema) -> int:
    """Write `records` to `path` as CSV. Returns the number of records written."""
    records = list(records)
    path.write_text(render_csv(records, export_headers(schema)), encoding="utf-8", newline="")
    return len(records)
