from __future__ import annotations

import pytest

from bizadmin.parsing.primitives import ParseError, normalize_cell, parse_number, parse_optional_number
from bizadmin.parsing.types import IssueCode


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("19.99", 19.99),
        (" 9.99 ", 9.99),
        ("3", 3),
        ("-12", -12),
        ("1e3", 1000.0),
        ("0", 0),
    ],
)
def test_parse_number_accepts(raw: str, expected: float) -> None:
    assert parse_number(raw, field="price") == expected


def test_integer_text_parses_to_int() -> None:
    assert isinstance(parse_number("3", field="quantity"), int)
    assert isinstance(parse_number("3.0", field="quantity"), float)


@pytest.mark.parametrize("raw", ["abc", "1,000", "12abc", "nan", "inf", "-Infinity", "1_000"])
def test_parse_number_rejects(raw: str) -> None:
    with pytest.raises(ParseError) as e:
        parse_number(raw, field="price")
    assert e.value.code == IssueCode.invalid_number
    assert "price" in e.value.detail


def test_parse_number_empty_is_missing() -> None:
    with pytest.raises(ParseError) as e:
        parse_number("  ", field="price")
    assert e.value.code == IssueCode.missing_required


def test_parse_optional_number_empty_is_none() -> None:
    assert parse_optional_number("", field="price") is None
    assert parse_optional_number(None, field="price") is None
    assert parse_optional_number("2", field="price") == 2


def test_normalize_cell_keeps_null_like_text() -> None:
    """Master data may legitimately say "NA"."""
    assert normalize_cell("  NA ") == "NA"
    assert normalize_cell(None) == ""
