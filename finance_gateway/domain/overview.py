"""Page-level aggregates for budgets and bills"""

import math
from datetime import date
from typing import List, Optional

from finance_gateway.domain.models import Bill, BillTotals, Budget, BudgetTotals
from finance_gateway.utils.date_utils import is_past

BILL_FILTERS = ("all", "paid", "unpaid")
BILL_SORTS = ("dueDate", "amount", "name")


def budget_totals(budgets: List[Budget]) -> BudgetTotals:
    """Total budgeted, total spent and what remains across all budgets"""
    budgeted = math.fsum(b.amount for b in budgets)
    spent = math.fsum(b.spent for b in budgets)

    return BudgetTotals(
        count=len(budgets),
        budgeted=budgeted,
        spent=spent,
        remaining=budgeted - spent,
    )


def bill_totals(bills: List[Bill]) -> BillTotals:
    return BillTotals(
        count=len(bills),
        paid_count=sum(1 for b in bills if b.is_paid),
        unpaid_amount=math.fsum(b.amount for b in bills if not b.is_paid),
    )


def filter_bills(bills: List[Bill], option: str = "all") -> List[Bill]:
    if option == "paid":
        return [b for b in bills if b.is_paid]
    if option == "unpaid":
        return [b for b in bills if not b.is_paid]
    return list(bills)


def sort_bills(bills: List[Bill], option: str = "dueDate") -> List[Bill]:
    """Stable sort by due date, amount or case-insensitive name; unknown keys keep order"""
    if option == "dueDate":
        return sorted(bills, key=lambda b: b.due_date)
    if option == "amount":
        return sorted(bills, key=lambda b: b.amount)
    if option == "name":
        return sorted(bills, key=lambda b: b.name.casefold())
    return list(bills)


def is_overdue(bill: Bill, today: Optional[date] = None) -> bool:
    """Unpaid and due before today"""
    return not bill.is_paid and is_past(bill.due_date, today)
