"""Unit tests for submission-time validation"""

from datetime import date

import pytest

from finance_gateway.domain.exceptions import RecordValidationError
from finance_gateway.domain.models import Bill, Budget, EntryKind, Goal, Transaction
from finance_gateway.domain.validation import (
    normalize_entry_kind,
    validate_bill,
    validate_budget,
    validate_goal,
    validate_transaction,
)


@pytest.mark.parametrize(
    "value, expected",
    [
        ("Credit", EntryKind.CREDIT),
        ("income", EntryKind.CREDIT),
        (" DEBIT ", EntryKind.DEBIT),
        ("expense", EntryKind.DEBIT),
        ("transfer", None),
        (None, None),
        (1, None),
    ],
)
def test_normalize_entry_kind(value, expected):
    assert normalize_entry_kind(value) is expected


def test_validate_transaction_accepts_valid_record():
    validate_transaction(
        Transaction(id=None, description="Coffee", amount=4.5, date=date.today(), category="dining", type="expense")
    )


def test_validate_transaction_collects_all_errors():
    with pytest.raises(RecordValidationError) as exc_info:
        validate_transaction(
            Transaction(id=None, description="  ", amount=0, date=date.today(), category="dining", type="gift")
        )

    assert set(exc_info.value.errors) == {"description", "amount", "type"}


def test_validate_budget_requires_positive_amount():
    with pytest.raises(RecordValidationError) as exc_info:
        validate_budget(Budget(id=None, category="Dining", amount=0, spent=0))
    assert exc_info.value.errors == {"amount": "Budget amount must be a positive number"}

    with pytest.raises(RecordValidationError) as exc_info:
        validate_budget(Budget(id=None, category="Dining", amount=None, spent=0))
    assert exc_info.value.errors == {"amount": "Budget amount is required"}


def test_validate_budget_rejects_negative_spent_and_missing_category():
    with pytest.raises(RecordValidationError) as exc_info:
        validate_budget(Budget(id=None, category="", amount=100, spent=-1))

    assert set(exc_info.value.errors) == {"category", "spent"}


def test_validate_goal():
    validate_goal(Goal(id=None, name="Trip", target=2000, current=0, target_date=date(2030, 1, 1)))

    with pytest.raises(RecordValidationError) as exc_info:
        validate_goal(Goal(id=None, name="", target=-5, current=-1, target_date=None))

    assert exc_info.value.errors == {
        "name": "Goal name is required",
        "target": "Target amount must be greater than zero",
        "current": "Current amount cannot be negative",
        "target_date": "Target date is required",
    }


def test_validate_bill():
    validate_bill(Bill(id=None, name="Water", amount=30, due_date=date(2030, 1, 1)))

    with pytest.raises(RecordValidationError) as exc_info:
        validate_bill(Bill(id=None, name="Water", amount=float("nan"), due_date=None))

    assert set(exc_info.value.errors) == {"amount", "due_date"}


def test_validation_error_message_lists_fields():
    error = RecordValidationError({"amount": "Please enter a valid amount"})

    assert str(error) == "amount: Please enter a valid amount"
