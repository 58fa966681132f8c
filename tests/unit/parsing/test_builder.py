from __future__ import annotations

from itertools import chain

from bizadmin.parsing.adapter import adapt_header
from bizadmin.parsing.builder import build_records
from bizadmin.parsing.profiles.agents import AGENT_STATUS_ACTIVE, AGENTS_SCHEMA
from bizadmin.parsing.profiles.products import PRODUCTS_SCHEMA


def _header(schema, cells):
    return adapt_header(cells, aliases=schema.header_aliases)


def test_builds_trimmed_typed_records(sequential_ids) -> None:
    header = _header(PRODUCTS_SCHEMA, ["name", "price"])
    records = build_records(PRODUCTS_SCHEMA, header, [[" Widget ", "19.99"], ["Gadget", " 9.99"]], id_factory=sequential_ids)

    assert records[0]["id"] == "id-1"
    assert records[0]["name"] == "Widget"
    assert records[0]["price"] == 19.99
    assert records[1]["id"] == "id-2"
    assert records[1]["price"] == 9.99


def test_absent_optional_columns_are_backfilled() -> None:
    header = _header(PRODUCTS_SCHEMA, ["name", "price"])
    (r,) = build_records(PRODUCTS_SCHEMA, header, [["Widget", "1"]])

    assert set(r) == {"id", *PRODUCTS_SCHEMA.field_names}
    assert r["category"] == ""
    assert r["partition_price"] is None      # numeric default


def test_template_defaults_apply_only_to_absent_columns() -> None:
    header_without = _header(AGENTS_SCHEMA, ["代理商"])
    header_with = _header(AGENTS_SCHEMA, ["代理商", "代理状态"])

    (a,) = build_records(AGENTS_SCHEMA, header_without, [["Tokyo Trading"]])
    (b,) = build_records(AGENTS_SCHEMA, header_with, [["Osaka Trading", ""]])

    assert a["name"] == "Tokyo Trading"
    assert a["status"] == AGENT_STATUS_ACTIVE
    assert b["status"] == ""


def test_empty_optional_number_is_none() -> None:
    header = _header(PRODUCTS_SCHEMA, ["name", "price", "partition_price"])
    (r,) = build_records(PRODUCTS_SCHEMA, header, [["Widget", "5", " "]])
    assert r["price"] == 5
    assert r["partition_price"] is None


def test_colliding_ids_are_redrawn() -> None:
    """Ids already held by the collection (or earlier in the batch) are never reused."""
    draws = chain(["taken", "a", "a", "b"])
    header = _header(PRODUCTS_SCHEMA, ["name", "price"])

    records = build_records(
        PRODUCTS_SCHEMA,
        header,
        [["X", "1"], ["Y", "2"]],
        existing_ids={"taken"},
        id_factory=lambda: next(draws),
    )
    assert [r["id"] for r in records] == ["a", "b"]


def test_default_ids_are_unique() -> None:
    header = _header(PRODUCTS_SCHEMA, ["name", "price"])
    records = build_records(PRODUCTS_SCHEMA, header, [["X", "1"]] * 50)
    assert len({r["id"] for r in records}) == 50
