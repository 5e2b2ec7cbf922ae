"""Domain models - pure Python dataclasses representing business entities"""

from dataclasses import dataclass
from datetime import date
from enum import Enum
from typing import Any, Optional


class EntryKind(str, Enum):
    """Direction of a ledger entry"""

    CREDIT = "Credit"
    DEBIT = "Debit"


class BudgetStatus(str, Enum):
    """Spend ratio classification for a budget"""

    ON_TRACK = "on_track"
    WARNING = "warning"
    EXCEEDED = "exceeded"


@dataclass(frozen=True)
class LedgerEntry:
    """Minimal income/expense record consumed by the summary engine"""

    amount: Any  # may arrive as a string or garbage from the record store
    kind: Any


@dataclass(frozen=True)
class FinancialSummary:
    """Dashboard figures derived from the transaction ledger"""

    balance: float
    income: float
    expenses: float
    savings: float

    @classmethod
    def zero(cls) -> "FinancialSummary":
        return cls(balance=0.0, income=0.0, expenses=0.0, savings=0.0)


@dataclass(frozen=True)
class StatusResult:
    """Budget progress for a progress bar plus its status badge"""

    percentage: int
    status: BudgetStatus


@dataclass(frozen=True)
class GoalProgress:
    """Goal completion for a progress bar"""

    percentage: int


@dataclass
class Transaction:
    """Transaction record from the record store"""

    id: Optional[int]
    description: str
    amount: float
    date: date
    category: str
    type: str  # "Credit" or "Debit"
    account: str = ""


@dataclass
class Budget:
    """Spending cap for a category; `spent` is entered manually"""

    id: Optional[int]
    category: str
    amount: float
    spent: float
    period: str = "Monthly"
    color: str = "blue"


@dataclass
class Goal:
    """Savings target with a manually tracked current amount"""

    id: Optional[int]
    name: str
    target: float
    current: float
    target_date: Optional[date]
    category: str = "Savings"


@dataclass
class Bill:
    """Recurring or one-off bill"""

    id: Optional[int]
    name: str
    amount: float
    due_date: date
    category: str = "utilities"
    is_paid: bool = False
    recurring: str = "monthly"
    autopay: bool = False


@dataclass(frozen=True)
class BudgetTotals:
    """Header figures on the budget page"""

    count: int
    budgeted: float
    spent: float
    remaining: float


@dataclass(frozen=True)
class BillTotals:
    """Header figures on the bills page"""

    count: int
    paid_count: int
    unpaid_amount: float


@dataclass
class Preferences:
    """UI settings persisted per owner"""

    dark_mode: bool = False
