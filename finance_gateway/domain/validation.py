"""Submission-time validation for records headed to the record store.

Rules run before anything is persisted or classified, so a non-positive
budget or goal target never reaches the status classifier.
"""

from typing import Any, Dict, Optional

from finance_gateway.domain.exceptions import RecordValidationError
from finance_gateway.domain.models import Bill, Budget, EntryKind, Goal, Transaction
from finance_gateway.utils.numbers import is_finite_number

_KIND_ALIASES = {
    "credit": EntryKind.CREDIT,
    "income": EntryKind.CREDIT,
    "debit": EntryKind.DEBIT,
    "expense": EntryKind.DEBIT,
}


def normalize_entry_kind(value: Any) -> Optional[EntryKind]:
    """Map Credit/Debit and the income/expense aliases to an EntryKind"""
    if not isinstance(value, str):
        return None
    return _KIND_ALIASES.get(value.strip().lower())


def _blank(value: Any) -> bool:
    return not isinstance(value, str) or not value.strip()


def _positive(value: Any) -> bool:
    return is_finite_number(value) and value > 0


def _non_negative(value: Any) -> bool:
    return is_finite_number(value) and value >= 0


def _raise_if_any(errors: Dict[str, str]) -> None:
    if errors:
        raise RecordValidationError(errors)


def validate_transaction(transaction: Transaction) -> None:
    errors: Dict[str, str] = {}

    if _blank(transaction.description):
        errors["description"] = "Please enter a description"
    if not _positive(transaction.amount):
        errors["amount"] = "Please enter a valid amount"
    if normalize_entry_kind(transaction.type) is None:
        errors["type"] = "Type must be Credit or Debit"

    _raise_if_any(errors)


def validate_budget(budget: Budget) -> None:
    errors: Dict[str, str] = {}

    if _blank(budget.category):
        errors["category"] = "Category is required"
    if budget.amount is None:
        errors["amount"] = "Budget amount is required"
    elif not _positive(budget.amount):
        errors["amount"] = "Budget amount must be a positive number"
    if not _non_negative(budget.spent):
        errors["spent"] = "Spent amount must be a non-negative number"

    _raise_if_any(errors)


def validate_goal(goal: Goal) -> None:
    errors: Dict[str, str] = {}

    if _blank(goal.name):
        errors["name"] = "Goal name is required"
    if not _positive(goal.target):
        errors["target"] = "Target amount must be greater than zero"
    if not _non_negative(goal.current):
        errors["current"] = "Current amount cannot be negative"
    if goal.target_date is None:
        errors["target_date"] = "Target date is required"

    _raise_if_any(errors)


def validate_bill(bill: Bill) -> None:
    errors: Dict[str, str] = {}

    if _blank(bill.name):
        errors["name"] = "Please enter a bill name"
    if not _positive(bill.amount):
        errors["amount"] = "Please enter a valid amount"
    if bill.due_date is None:
        errors["due_date"] = "Please select a due date"

    _raise_if_any(errors)
