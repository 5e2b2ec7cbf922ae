"""Integration tests for API endpoints"""

from unittest.mock import AsyncMock, patch
from datetime import date, timedelta
from fastapi.testclient import TestClient

from finance_gateway.domain.exceptions import RecordStoreError
from finance_gateway.domain.models import Bill, Budget, Transaction

USER = {"X-User-ID": "user_1"}


def test_health_endpoint(client: TestClient):
    """Test health check endpoint"""
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json()["status"] == "ok"


def test_metrics_endpoint(client: TestClient):
    """Test Prometheus metrics endpoint"""
    client.get("/health")
    response = client.get("/metrics")
    assert response.status_code == 200
    assert "http_request_duration_seconds" in response.text


def test_request_id_is_echoed(client: TestClient):
    response = client.get("/health", headers={"X-Request-ID": "req-123"})
    assert response.headers["X-Request-ID"] == "req-123"


@patch("finance_gateway.infrastructure.records.repositories.TransactionRepository.list")
def test_summary_endpoint(mock_list: AsyncMock, client: TestClient, sample_transactions: list[Transaction]):
    """Test GET /v1/summary derives figures from the ledger"""
    mock_list.return_value = sample_transactions

    response = client.get("/v1/summary", headers=USER)

    assert response.status_code == 200
    data = response.json()
    assert data["income"] == 3500
    assert data["expenses"] == 1454.25
    assert data["savings"] == 2045.75
    assert data["balance"] == 12045.75
    assert data["notice"] is None


@patch("finance_gateway.infrastructure.records.repositories.TransactionRepository.list")
def test_summary_endpoint_store_down(mock_list: AsyncMock, client: TestClient):
    """A failed load serves the zero summary with a notice, not an error"""
    mock_list.side_effect = RecordStoreError("Record store timeout after 5.0s")

    response = client.get("/v1/summary", headers=USER)

    assert response.status_code == 200
    assert response.json() == {
        "balance": 0,
        "income": 0,
        "expenses": 0,
        "savings": 0,
        "notice": "Failed to load transactions",
    }


def test_summary_requires_user(client: TestClient):
    assert client.get("/v1/summary").status_code == 401
    assert client.get("/v1/transactions").status_code == 401
    assert client.get("/v1/budgets").status_code == 401


@patch("finance_gateway.infrastructure.records.repositories.TransactionRepository.create")
def test_create_transaction_normalises_kind(mock_create: AsyncMock, client: TestClient):
    mock_create.side_effect = lambda t: t

    response = client.post(
        "/v1/transactions",
        json={"description": "Paycheck", "amount": 2500, "date": "2023-06-01", "type": "income"},
        headers=USER,
    )

    assert response.status_code == 201
    assert response.json()["type"] == "Credit"
    assert mock_create.call_args.args[0].description == "Paycheck"


@patch("finance_gateway.infrastructure.records.repositories.TransactionRepository.create")
def test_create_transaction_validation(mock_create: AsyncMock, client: TestClient):
    response = client.post(
        "/v1/transactions",
        json={"description": "", "amount": -3, "type": "gift"},
        headers=USER,
    )

    assert response.status_code == 422
    assert set(response.json()["detail"]) == {"description", "amount", "type"}
    mock_create.assert_not_called()


@patch("finance_gateway.infrastructure.records.repositories.TransactionRepository.delete")
def test_delete_transaction_store_error(mock_delete: AsyncMock, client: TestClient):
    mock_delete.side_effect = RecordStoreError("Failed to delete transaction")

    response = client.delete("/v1/transactions/4", headers=USER)

    assert response.status_code == 503
    assert response.json()["detail"] == "Failed to delete transaction"


@patch("finance_gateway.infrastructure.records.repositories.BudgetRepository.list")
def test_list_budgets_with_status(mock_list: AsyncMock, client: TestClient, sample_budgets: list[Budget]):
    """Test GET /v1/budgets classifies each budget and totals the page"""
    mock_list.return_value = sample_budgets + [Budget(id=4, category="Legacy", amount=0, spent=10)]

    response = client.get("/v1/budgets", headers=USER)

    assert response.status_code == 200
    data = response.json()
    assert [(b["percentage"], b["status"]) for b in data["budgets"]] == [
        (50, "on_track"),
        (90, "warning"),
        (100, "exceeded"),
        (None, None),
    ]
    assert data["budgets"][3]["error"]
    assert data["totals"] == {"count": 4, "budgeted": 1000, "spent": 890, "remaining": 110}


@patch("finance_gateway.infrastructure.records.repositories.BudgetRepository.create")
def test_create_budget_rejects_non_positive_amount(mock_create: AsyncMock, client: TestClient):
    response = client.post("/v1/budgets", json={"category": "Dining", "amount": 0}, headers=USER)

    assert response.status_code == 422
    assert response.json()["detail"] == {"amount": "Budget amount must be a positive number"}
    mock_create.assert_not_called()


@patch("finance_gateway.infrastructure.records.repositories.BudgetRepository.update")
def test_update_budget(mock_update: AsyncMock, client: TestClient):
    mock_update.side_effect = lambda b: b

    response = client.put(
        "/v1/budgets/2",
        json={"category": "Dining", "amount": 200, "spent": 180, "color": "amber"},
        headers=USER,
    )

    assert response.status_code == 200
    data = response.json()
    assert data["id"] == 2
    assert data["percentage"] == 90
    assert data["status"] == "warning"


@patch("finance_gateway.infrastructure.records.repositories.GoalRepository.list")
def test_list_goals_for_user(mock_list: AsyncMock, client: TestClient, sample_goals):
    mock_list.return_value = sample_goals

    response = client.get("/v1/goals", headers=USER)

    assert response.status_code == 200
    goals = response.json()["goals"]
    assert [g["name"] for g in goals] == ["Emergency Fund", "New Car"]
    assert [g["percentage"] for g in goals] == [50, 32]


def test_anonymous_goals_use_local_list(client: TestClient):
    """Without a user, goals are stored locally per browser session"""
    session = {"X-Session-ID": "browser-1"}

    created = client.post(
        "/v1/goals",
        json={"name": "Vacation", "target": 2000, "current": 2500, "target_date": "2030-07-01"},
        headers=session,
    )
    assert created.status_code == 201
    assert created.json()["percentage"] == 100

    assert len(client.get("/v1/goals", headers=session).json()["goals"]) == 1
    assert client.get("/v1/goals", headers={"X-Session-ID": "browser-2"}).json()["goals"] == []


def test_anonymous_goal_validation(client: TestClient):
    response = client.post("/v1/goals", json={"name": "Vacation", "target": 0, "target_date": "2030-07-01"})

    assert response.status_code == 422
    assert "target" in response.json()["detail"]


@patch("finance_gateway.infrastructure.records.repositories.BillRepository.list")
def test_list_bills_filter_and_sort(mock_list: AsyncMock, client: TestClient, sample_bills: list[Bill]):
    mock_list.return_value = sample_bills

    response = client.get("/v1/bills?filter=unpaid&sort=amount", headers=USER)

    assert response.status_code == 200
    data = response.json()
    assert [b["name"] for b in data["bills"]] == ["internet", "Electricity"]
    assert all(b["overdue"] for b in data["bills"])
    assert data["totals"] == {"count": 3, "paid_count": 1, "unpaid_amount": 150.5}


def test_list_bills_rejects_unknown_sort(client: TestClient):
    assert client.get("/v1/bills?sort=color").status_code == 422


def test_anonymous_bill_lifecycle(client: TestClient):
    due = (date.today() + timedelta(days=3)).isoformat()

    created = client.post("/v1/bills", json={"name": "Water", "amount": 30, "due_date": due})
    assert created.status_code == 201
    bill_id = created.json()["id"]
    assert created.json()["overdue"] is False

    toggled = client.post(f"/v1/bills/{bill_id}/toggle-paid")
    assert toggled.status_code == 200
    assert toggled.json()["is_paid"] is True

    listing = client.get("/v1/bills?filter=paid").json()
    assert [b["id"] for b in listing["bills"]] == [bill_id]
    assert listing["totals"]["unpaid_amount"] == 0

    assert client.delete(f"/v1/bills/{bill_id}").status_code == 204
    assert client.post(f"/v1/bills/{bill_id}/toggle-paid").status_code == 404


def test_preferences_round_trip(client: TestClient):
    assert client.get("/v1/preferences", headers=USER).json() == {"dark_mode": False}

    saved = client.put("/v1/preferences", json={"dark_mode": True}, headers=USER)
    assert saved.json() == {"dark_mode": True}

    assert client.get("/v1/preferences", headers=USER).json() == {"dark_mode": True}
    assert client.get("/v1/preferences").json() == {"dark_mode": False}


@patch("finance_gateway.infrastructure.clients.records.RecordStoreClient.fetch_records")
def test_summary_from_loosely_typed_rows(mock_fetch: AsyncMock, client: TestClient):
    """Raw store rows go through the mappers before reaching the summary"""
    mock_fetch.return_value = [
        {"Id": 1, "description": "Paycheck", "amount": "2000", "type": "income", "date": "2023-06-01"},
        {"Id": 2, "description": "Rent", "amount": 300, "date": "2023-06-02"},
        {"Id": 3, "description": "Refund", "amount": 50, "type": "refund", "date": "2023-06-03"},
        {"Id": 4, "description": "Typo", "amount": "abc", "type": "Debit", "date": "2023-06-04"},
        None,
        {"Id": 5, "description": "Groceries", "amount": 120.5, "type": "", "date": "2023-06-05"},
    ]

    response = client.get("/v1/summary", headers=USER)

    assert response.status_code == 200
    assert response.json() == {
        "balance": 11579.5,
        "income": 2000,
        "expenses": 420.5,
        "savings": 1579.5,
        "notice": None,
    }

    kinds = {t["id"]: t["type"] for t in client.get("/v1/transactions", headers=USER).json()["transactions"]}
    assert kinds == {1: "Credit", 2: "Debit", 3: "refund", 4: "Debit", 5: "Debit"}
