from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

from bizadmin.parsing.adapter import HeaderMap, adapt_header
from bizadmin.parsing.primitives import ParseError, normalize_cell, parse_number
from bizadmin.parsing.schema import EntitySchema
from bizadmin.parsing.types import IssueCode, ValidationIssue

# header is row 1, so the first data row is row 2.
FIRST_DATA_ROW = 2


@dataclass(frozen=True, slots=True)
class ValidationResult:
    """Outcome of validating a tokenized file against one entity schema."""
    header: HeaderMap | None            # `None` when the file had no header to map
    data_rows: Sequence[Sequence[str]]
    issues: list[ValidationIssue]

    @property
    def ok(self) -> bool:
        return not self.issues


def check_required_columns(schema: EntitySchema, header: HeaderMap) -> list[ValidationIssue]:
    """One `missing_column` issue (on the header row) per required field absent from `header`."""
    return [
        ValidationIssue(
            code=IssueCode.missing_column,
            row=1,
            field=name,
            message="missing required column",
        )
        for name in schema.required_fields
        if name not in header.index
    ]


def validate_row(schema: EntitySchema, header: HeaderMap, row: Sequence[str], *, row_no: int) -> list[ValidationIssue]:
    """
    Every issue in a single data row.

    Check order:
    - 1st: field count vs. header. A mismatch is the row's only issue (no cell is indexed).
    - 2nd: per field, in schema order, `missing_required` then `invalid_number`.
    """
    if len(row) != header.width:
        return [
            ValidationIssue(
                code=IssueCode.column_count,
                row=row_no,
                field=None,
                message=f"expected {header.width} fields, found {len(row)}",
            )
        ]

    issues: list[ValidationIssue] = []
    for f in schema.fields:
        if f.name not in header.index:
            continue        # optional column absent, backfilled later

        value = normalize_cell(header.cell(row, f.name))

        if f.required and value == "":
            issues.append(ValidationIssue(IssueCode.missing_required, row_no, f.name, "required field is empty"))
            continue

        if f.numeric and value != "":
            try:
                parse_number(value, field=f.name)
            except ParseError:
                issues.append(ValidationIssue(IssueCode.invalid_number, row_no, f.name, "must be a number"))

    return issues


def validate_rows(schema: EntitySchema, rows: Sequence[Sequence[str]]) -> ValidationResult:
    """
    Validate tokenized rows (header first) against `schema`.

    Structural problems stop immediately:
    - fewer than two rows -> one file-level `too_few_rows` issue,
    - required columns missing from the header -> one `missing_column` issue each.

    Otherwise every data row is checked and all issues are collected; nothing here
    stops at the first bad row.
    """
    if len(rows) < 2:
        issue = ValidationIssue(
            code=IssueCode.too_few_rows,
            row=None,
            field=None,
            message="file needs a header row and at least one data row",
        )
        return ValidationResult(header=None, data_rows=(), issues=[issue])

    header = adapt_header(rows[0], aliases=schema.header_aliases)
    data_rows = rows[1:]

    missing = check_required_columns(schema, header)
    if missing:
        return ValidationResult(header=header, data_rows=data_rows, issues=missing)

    issues: list[ValidationIssue] = []
    for i, row in enumerate(data_rows):
        issues.extend(validate_row(schema, header, row, row_no=i + FIRST_DATA_ROW))

    return ValidationResult(header=header, data_rows=data_rows, issues=issues)
