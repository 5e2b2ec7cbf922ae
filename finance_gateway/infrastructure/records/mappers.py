"""Translate loosely typed record-store rows to domain records and back"""

from datetime import date
from typing import Any, Dict

from finance_gateway.domain.models import Bill, Budget, EntryKind, Goal, Transaction
from finance_gateway.domain.validation import normalize_entry_kind
from finance_gateway.utils.date_utils import parse_iso_date
from finance_gateway.utils.numbers import coerce_amount


def _text(value: Any, default: str = "") -> str:
    return value if isinstance(value, str) and value else default


def _date(value: Any) -> date:
    return parse_iso_date(value, default=date.today())


def _flag(value: Any) -> bool:
    if isinstance(value, str):
        return value.strip().lower() in ("1", "true", "yes")
    return bool(value)


def transaction_from_api(row: Dict[str, Any]) -> Transaction:
    # Missing kinds default to Debit; unknown kinds are kept verbatim so the
    # summary engine excludes them
    raw_kind = row.get("type")
    kind = normalize_entry_kind(raw_kind)
    if kind is None and raw_kind in (None, ""):
        kind = EntryKind.DEBIT
    return Transaction(
        id=row.get("Id"),
        description=_text(row.get("description")) or _text(row.get("Name")),
        amount=coerce_amount(row.get("amount")),
        date=_date(row.get("date")),
        category=_text(row.get("category"), "shopping"),
        type=kind.value if kind else str(raw_kind),
        account=_text(row.get("account")),
    )


def transaction_to_api(transaction: Transaction) -> Dict[str, Any]:
    kind = normalize_entry_kind(transaction.type)
    return {
        "Id": transaction.id,
        "Name": transaction.description,
        "description": transaction.description,
        "amount": float(transaction.amount),
        "date": transaction.date.isoformat(),
        "category": transaction.category,
        "type": kind.value if kind else transaction.type,
        "account": transaction.account or "",
    }


def budget_from_api(row: Dict[str, Any]) -> Budget:
    return Budget(
        id=row.get("Id"),
        category=_text(row.get("category")) or _text(row.get("Name")),
        amount=coerce_amount(row.get("amount")),
        spent=coerce_amount(row.get("spent")),
        period=_text(row.get("period"), "Monthly"),
        color=_text(row.get("color"), "blue"),
    )


def budget_to_api(budget: Budget) -> Dict[str, Any]:
    return {
        "Id": budget.id,
        "Name": budget.category,
        "category": budget.category,
        "amount": float(budget.amount),
        "spent": float(budget.spent),
        "period": budget.period,
        "color": budget.color,
    }


def goal_from_api(row: Dict[str, Any]) -> Goal:
    return Goal(
        id=row.get("Id"),
        name=_text(row.get("Name")),
        target=coerce_amount(row.get("target")),
        current=coerce_amount(row.get("current")),
        target_date=parse_iso_date(row.get("targetDate")),
        category=_text(row.get("category"), "Savings"),
    )


def goal_to_api(goal: Goal) -> Dict[str, Any]:
    return {
        "Id": goal.id,
        "Name": goal.name,
        "target": float(goal.target),
        "current": float(goal.current),
        "targetDate": goal.target_date.isoformat() if goal.target_date else None,
        "category": goal.category,
    }


def bill_from_api(row: Dict[str, Any]) -> Bill:
    return Bill(
        id=row.get("Id"),
        name=_text(row.get("Name")),
        amount=coerce_amount(row.get("amount")),
        due_date=_date(row.get("dueDate")),
        category=_text(row.get("category"), "utilities"),
        is_paid=_flag(row.get("isPaid")),
        recurring=_text(row.get("recurring"), "monthly"),
        autopay=_flag(row.get("autopay")),
    )


def bill_to_api(bill: Bill) -> Dict[str, Any]:
    return {
        "Id": bill.id,
        "Name": bill.name,
        "amount": float(bill.amount),
        "dueDate": bill.due_date.isoformat(),
        "category": bill.category,
        "isPaid": bill.is_paid,
        "recurring": bill.recurring,
        "autopay": bill.autopay,
    }


def without_id(row: Dict[str, Any]) -> Dict[str, Any]:
    """Create payloads must not carry an Id"""
    return {key: value for key, value in row.items() if key != "Id"}
