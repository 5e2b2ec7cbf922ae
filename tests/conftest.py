"""Pytest fixtures for testing"""

import pytest
from datetime import date
from typing import Generator
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker, Session
from finance_gateway.api.main import create_app
from finance_gateway.infrastructure.database.models import Base
from finance_gateway.infrastructure.database.session import get_db
from finance_gateway.domain.models import Bill, Budget, Goal, Transaction


# Test database
TEST_DATABASE_URL = "sqlite:///./test.db"
engine = create_engine(TEST_DATABASE_URL, connect_args={"check_same_thread": False})
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

USER_HEADERS = {"X-User-ID": "user_1"}


@pytest.fixture
def db() -> Generator[Session, None, None]:
    """Create test database and session"""
    Base.metadata.create_all(bind=engine)
    db = TestingSessionLocal()
    try:
        yield db
    finally:
        db.close()
        Base.metadata.drop_all(bind=engine)


@pytest.fixture
def client(db: Session) -> TestClient:
    """Create FastAPI test client with test database"""
    app = create_app()

    def override_get_db():
        try:
            yield db
        finally:
            pass

    app.dependency_overrides[get_db] = override_get_db
    return TestClient(app)


@pytest.fixture
def sample_transactions() -> list[Transaction]:
    """A month of salary and everyday spending"""
    return [
        Transaction(id=1, description="Salary", amount=3500.0, date=date(2023, 5, 28),
                    category="income", type="Credit", account="Checking"),
        Transaction(id=2, description="Apartment Rent", amount=1200.0, date=date(2023, 5, 27),
                    category="housing", type="Debit", account="Checking"),
        Transaction(id=3, description="Grocery Shopping", amount=185.75, date=date(2023, 5, 26),
                    category="groceries", type="Debit"),
        Transaction(id=4, description="Dinner with Friends", amount=68.5, date=date(2023, 5, 25),
                    category="dining", type="Debit"),
    ]


@pytest.fixture
def sample_budgets() -> list[Budget]:
    return [
        Budget(id=1, category="Groceries", amount=500.0, spent=250.0, color="green"),
        Budget(id=2, category="Dining", amount=200.0, spent=180.0, color="amber"),
        Budget(id=3, category="Shopping", amount=300.0, spent=450.0),
    ]


@pytest.fixture
def sample_goals() -> list[Goal]:
    return [
        Goal(id=1, name="New Car", target=25000.0, current=8000.0, target_date=date(2025, 6, 30)),
        Goal(id=2, name="Emergency Fund", target=10000.0, current=5000.0, target_date=date(2024, 12, 31)),
    ]


@pytest.fixture
def sample_bills() -> list[Bill]:
    return [
        Bill(id=1, name="Rent", amount=1200.0, due_date=date(2023, 8, 1), category="housing", is_paid=True),
        Bill(id=2, name="internet", amount=65.0, due_date=date(2023, 8, 20)),
        Bill(id=3, name="Electricity", amount=85.5, due_date=date(2023, 8, 15)),
    ]
