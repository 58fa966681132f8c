from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any

from .types import IssueCode


@dataclass(frozen=True, slots=True)
class ParseError(Exception):
    """Raised by cell parsers, carries the issue classification and a detail message."""
    code: IssueCode         # which issue this becomes once reported
    detail: str


def normalize_cell(v: Any) -> str:
    """
    Transform a raw tokenizer cell into its comparable shape.

    `None` (cell past the end of a short row) becomes `""`, strings are trimmed.
    Unlike a null-synonym table, "NA"/"null" stay literal text here: master data
    (e.g. a product called "NA") is allowed to say that.
    """
    if v is None:
        return ""
    return str(v).strip()


def parse_number(v: Any, *, field: str) -> int | float:
    """
    Parse a numeric cell. Raise on empty, non-numeric or non-finite input.

    Returns:
    - `int` when the text is an integer literal (`"3"`, `"-12"`, `"1_000"` is rejected),
    - `float` otherwise (`"19.99"`, `"1e3"`).
    """
    s = normalize_cell(v)
    if s == "":
        raise ParseError(IssueCode.missing_required, f"{field}: missing required number")

    # `int()`/`float()` accept digit separators, nothing in a spreadsheet export does.
    if "_" in s:
        raise ParseError(IssueCode.invalid_number, f"{field}: invalid number {s!r}")

    try:
        return int(s)
    except ValueError:
        pass

    try:
        f = float(s)
    except ValueError:
        raise ParseError(IssueCode.invalid_number, f"{field}: invalid number {s!r}")

    # "nan"/"inf" parse as floats but cannot be stored as JSON numbers.
    if not math.isfinite(f):
        raise ParseError(IssueCode.invalid_number, f"{field}: invalid number {s!r}")
    return f


def parse_optional_number(v: Any, *, field: str) -> int | float | None:
    """Numeric cell that may be empty, in which case `None`."""
    if normalize_cell(v) == "":
        return None
    return parse_number(v, field=field)


def parse_text(v: Any) -> str:
    """Text cell, trimmed. Empty text is `""`, never `None`."""
    return normalize_cell(v)
