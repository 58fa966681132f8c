from __future__ import annotations

from dataclasses import dataclass
from typing import Mapping, Sequence

from bizadmin.parsing.primitives import normalize_cell


@dataclass(frozen=True, slots=True)
class HeaderMap:
    """Where each canonical field sits in the imported rows."""
    index: dict[str, int]           # canonical field name -> column position
    width: int                      # number of header columns, the expected row width
    ignored: tuple[str, ...]        # header cells that matched no field (or a field already mapped)

    def cell(self, row: Sequence[str], field: str) -> str | None:
        """Raw cell for `field`, `None` when the column is absent or the row is short."""
        i = self.index.get(field)
        if i is None or i >= len(row):
            return None
        return row[i]


def adapt_header(header: Sequence[str], *, aliases: Mapping[str, str]) -> HeaderMap:
    """
    Map an imported header row to canonical field names.

    `aliases` is the allowed header text and also the mapping to canonical keys.
    example:
      `{"name": "name", "機種": "name", "price": "price", "代理価格": "price", ...}`

    Header cells are trimmed before lookup. Unknown columns are ignored rather than
    rejected, so an exported file (with its `id` column) imports back cleanly.
    When one field is spelled twice, the first column wins.
    """
    index: dict[str, int] = {}
    ignored: list[str] = []

    for i, raw in enumerate(header):
        h = normalize_cell(raw)
        canon = aliases.get(h)
        if canon is None or canon in index:
            ignored.append(h)
            continue
        index[canon] = i

    return HeaderMap(index=index, width=len(header), ignored=tuple(ignored))
