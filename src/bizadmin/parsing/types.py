from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any


class IssueCode(str, Enum):
    """Typed validation issue classifications."""
    too_few_rows = "too_few_rows"               # structural: no data rows after the header
    missing_column = "missing_column"           # structural: required header absent
    column_count = "column_count"               # row field count differs from the header
    missing_required = "missing_required"
    invalid_number = "invalid_number"


# codes that abort before any data row is looked at.
STRUCTURAL_CODES = frozenset({IssueCode.too_few_rows, IssueCode.missing_column})


@dataclass(frozen=True, slots=True)
class ValidationIssue:
    """One problem found while validating an import."""
    code: IssueCode
    row: int | None         # 1-based, header is row 1. `None` means the whole file.
    field: str | None       # canonical field name, `None` for row/file level issues
    message: str

    @property
    def structural(self) -> bool:
        return self.code in STRUCTURAL_CODES

    def render(self) -> str:
        """How a single issue reads in a feedback report."""
        where = "file" if self.row is None else f"row {self.row}"
        if self.field is None:
            return f"{where}: {self.message}"
        return f"{where}: {self.field}: {self.message}"


# A built entity record: `id` plus one key per schema field.
Record = dict[str, Any]
