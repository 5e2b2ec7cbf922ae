"""Pydantic schemas for API request/response validation"""

from pydantic import BaseModel, Field
import datetime
from datetime import date
from typing import List, Optional

from finance_gateway.domain.models import BudgetStatus


class SummaryResponse(BaseModel):
    """Response for GET /v1/summary"""

    balance: float
    income: float
    expenses: float
    savings: float
    notice: Optional[str] = Field(None, description="User-visible message when figures could not be loaded")


class TransactionRequest(BaseModel):
    """Request body for creating or updating a transaction"""

    description: str = ""
    amount: float = Field(..., description="Positive amount; direction comes from type")
    date: Optional[datetime.date] = None
    category: str = "shopping"
    type: str = Field("Debit", description="Credit or Debit (income/expense accepted)")
    account: str = ""


class TransactionSchema(BaseModel):
    id: Optional[int] = None
    description: str
    amount: float
    date: datetime.date
    category: str
    type: str
    account: str = ""


class TransactionListResponse(BaseModel):
    transactions: List[TransactionSchema]


class BudgetRequest(BaseModel):
    """Request body for creating or updating a budget"""

    category: str = ""
    amount: Optional[float] = Field(None, description="Spending cap, must be positive")
    spent: float = 0.0
    period: str = "Monthly"
    color: str = "blue"


class BudgetSchema(BaseModel):
    id: Optional[int] = None
    category: str
    amount: float
    spent: float
    period: str
    color: str
    percentage: Optional[int] = None
    status: Optional[BudgetStatus] = None
    error: Optional[str] = None


class BudgetTotalsSchema(BaseModel):
    count: int
    budgeted: float
    spent: float
    remaining: float


class BudgetListResponse(BaseModel):
    """Response for GET /v1/budgets"""

    budgets: List[BudgetSchema]
    totals: BudgetTotalsSchema


class GoalRequest(BaseModel):
    """Request body for creating or updating a goal"""

    name: str = ""
    target: Optional[float] = None
    current: float = 0.0
    target_date: Optional[date] = None
    category: str = "Savings"


class GoalSchema(BaseModel):
    id: Optional[int] = None
    name: str
    target: float
    current: float
    target_date: Optional[date] = None
    category: str
    percentage: Optional[int] = None
    error: Optional[str] = None


class GoalListResponse(BaseModel):
    goals: List[GoalSchema]


class BillRequest(BaseModel):
    """Request body for creating or updating a bill"""

    name: str = ""
    amount: Optional[float] = None
    due_date: Optional[date] = None
    category: str = "utilities"
    is_paid: bool = False
    recurring: str = "monthly"
    autopay: bool = False


class BillSchema(BaseModel):
    id: Optional[int] = None
    name: str
    amount: float
    due_date: date
    category: str
    is_paid: bool
    recurring: str
    autopay: bool
    overdue: bool = False


class BillTotalsSchema(BaseModel):
    count: int
    paid_count: int
    unpaid_amount: float


class BillListResponse(BaseModel):
    """Response for GET /v1/bills"""

    bills: List[BillSchema]
    totals: BillTotalsSchema


class PreferencesSchema(BaseModel):
    dark_mode: bool = False
