from __future__ import annotations

from bizadmin.ingest.pipeline import import_csv_text
from bizadmin.storage.repository import InMemoryRepository


def test_contract_import_with_dashboard_headers(sequential_ids) -> None:
    """A contracts sheet exported from the dashboard, Japanese headers, quoted notes."""
    text = (
        "契約書NO,担当,機種,単価,台数,備考①\n"
        'C-2024-001,Sato,X-100,"1200000",2,"分割, 12回"\n'
        "C-2024-002,Suzuki,X-200,980000.5,,\n"
    )
    repo = InMemoryRepository()
    report = import_csv_text(repo, text, entity="contracts", id_factory=sequential_ids)

    assert report.succeeded
    first, second = repo.load()
    assert first["contract_no"] == "C-2024-001"
    assert first["unit_price"] == 1200000
    assert first["quantity"] == 2
    assert first["notes_1"] == "分割, 12回"
    assert first["agent_name"] == ""        # column absent -> default
    assert second["unit_price"] == 980000.5
    assert second["quantity"] is None


def test_lead_import_keeps_counts_as_text() -> None:
    text = "引合番号,台数,訪問回数\nL-1,3台,2\n"
    repo = InMemoryRepository()
    report = import_csv_text(repo, text, entity="leads")

    assert report.succeeded
    (lead,) = repo.load()
    assert lead["lead_no"] == "L-1"
    assert lead["quantity"] == "3台"
    assert lead["visit_count"] == "2"


def test_lead_without_number_is_rejected() -> None:
    text = "引合番号,担当\n,Sato\n"
    repo = InMemoryRepository()
    report = import_csv_text(repo, text, entity="leads")

    assert not report.succeeded
    assert [(i.row, i.field) for i in report.issues] == [(2, "lead_no")]
    assert repo.load() == []


def test_agents_default_to_active() -> None:
    repo = InMemoryRepository()
    import_csv_text(repo, "代理商,电话\n上海代理,021-0000\n", entity="agents")
    (agent,) = repo.load()
    assert agent["status"] == "合作中"
    assert agent["phone"] == "021-0000"
