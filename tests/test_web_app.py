"""Mini README: Tests for the FastAPI JSON interface.

The application is created around an in-memory session so requests exercise
the full add/delete/clear flow, including write-through results, without
touching the filesystem.
"""

from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from budgettracker.finance import TransactionStore
from budgettracker.interface import create_application
from budgettracker.session import BudgetSession
from budgettracker.storage import InMemoryKeyValueStore, TransactionRepository


def _client(backend: InMemoryKeyValueStore | None = None) -> TestClient:
    store = TransactionStore(TransactionRepository(backend or InMemoryKeyValueStore()))
    return TestClient(create_application(BudgetSession(store=store)))


def test_add_and_list_transactions() -> None:
    client = _client()

    response = client.post(
        "/transactions",
        data={"description": "Salary", "amount": "500", "category": "Salary", "kind": "income"},
    )
    assert response.status_code == 201
    body = response.json()
    assert body["message"] == "Income added successfully!"
    assert body["saved"] is True
    assert body["transaction"]["formatted_amount"] == "₹500.00"

    client.post(
        "/transactions",
        data={"description": "Lunch", "amount": "20", "category": "Food", "kind": "expense"},
    )
    listed = client.get("/transactions").json()["transactions"]
    assert [item["description"] for item in listed] == ["Lunch", "Salary"]


def test_add_rejects_invalid_amount() -> None:
    client = _client()

    response = client.post(
        "/transactions",
        data={"description": "Lunch", "amount": "0", "category": "Food", "kind": "expense"},
    )

    assert response.status_code == 400
    assert response.json()["detail"] == "Amount must be greater than zero."
    assert client.get("/transactions").json()["transactions"] == []


def test_delete_and_lookup() -> None:
    client = _client()
    created = client.post(
        "/transactions",
        data={"description": "Bus", "amount": "15", "category": "Transport", "kind": "expense"},
    ).json()["transaction"]

    assert client.get(f"/transactions/{created['id']}").status_code == 200
    deleted = client.delete(f"/transactions/{created['id']}").json()
    assert deleted["removed"] is True
    assert client.get(f"/transactions/{created['id']}").status_code == 404
    assert client.delete("/transactions/unknown").json()["removed"] is False


def test_clear_requires_confirmation() -> None:
    client = _client()
    assert client.post("/transactions/clear").json()["message"] == "Nothing to clear!"

    client.post(
        "/transactions",
        data={"description": "Gift", "amount": "50", "category": "Gift", "kind": "income"},
    )
    assert client.post("/transactions/clear").status_code == 400
    cleared = client.post("/transactions/clear", data={"confirm": "true"})
    assert cleared.json()["cleared"] is True
    assert client.get("/transactions").json()["transactions"] == []


def test_summary_reports_totals_and_chart() -> None:
    client = _client()
    for description, amount, category, kind in [
        ("Pay", "500", "Salary", "income"),
        ("Groceries", "200", "Food", "expense"),
        ("Dinner", "100", "Food", "expense"),
        ("Taxi", "50", "Transport", "expense"),
    ]:
        client.post(
            "/transactions",
            data={"description": description, "amount": amount, "category": category, "kind": kind},
        )

    summary = client.get("/summary").json()

    assert summary["summary"] == {"balance": "₹150.00", "income": "₹500.00", "expense": "₹350.00"}
    shares = summary["totals"]["category_breakdown"]
    assert [share["category"] for share in shares] == ["Food", "Transport"]
    assert shares[0]["percentage"] == pytest.approx(85.714, abs=0.01)


def test_failed_save_is_reported() -> None:
    client = _client(InMemoryKeyValueStore(quota_bytes=8))

    body = client.post(
        "/transactions",
        data={"description": "Tea", "amount": "2", "category": "Food", "kind": "expense"},
    ).json()

    assert body["saved"] is False
    assert "quota" in body["save_message"].lower()
    assert len(client.get("/transactions").json()["transactions"]) == 1


def test_categories_endpoint_lists_both_kinds() -> None:
    categories = _client().get("/categories").json()

    assert categories["income"][0] == {"name": "Salary", "colour": "#22c55e"}
    assert any(item["name"] == "Other Expense" for item in categories["expense"])


def test_session_aggregate_reflects_store() -> None:
    """Aggregates are recomputed from the store on every call."""

    session = BudgetSession(store=TransactionStore(TransactionRepository(InMemoryKeyValueStore())))
    session.store.add("Pay", "100", "Salary", "income")
    session.store.add("Snacks", "40", "Food", "expense")

    result = session.aggregate()
    assert str(result.net_balance) == "60"
    assert list(result.category_totals()) == ["Food"]

    session.store.clear()
    assert session.aggregate().net_balance == 0
