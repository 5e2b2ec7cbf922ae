"""Budget endpoints - CRUD plus per-budget status and page totals"""

import logging
from typing import Optional
from fastapi import APIRouter, Depends, Response

from finance_gateway.api.v1.schemas import BudgetListResponse, BudgetRequest, BudgetSchema, BudgetTotalsSchema
from finance_gateway.api.dependencies import get_budget_repository
from finance_gateway.domain.exceptions import InvalidAmountError, InvalidTargetError
from finance_gateway.domain.models import Budget
from finance_gateway.domain.overview import budget_totals
from finance_gateway.domain.status import classify_budget
from finance_gateway.domain.validation import validate_budget
from finance_gateway.infrastructure.observability.metrics import record_budget_status
from finance_gateway.infrastructure.records.repositories import BudgetRepository

router = APIRouter()


def _to_domain(body: BudgetRequest, budget_id: Optional[int] = None) -> Budget:
    budget = Budget(
        id=budget_id,
        category=body.category.strip(),
        amount=body.amount,
        spent=body.spent,
        period=body.period,
        color=body.color,
    )
    validate_budget(budget)
    return budget


def _to_schema(budget: Budget) -> BudgetSchema:
    schema = BudgetSchema(
        id=budget.id,
        category=budget.category,
        amount=budget.amount,
        spent=budget.spent,
        period=budget.period,
        color=budget.color,
    )
    try:
        result = classify_budget(budget.amount, budget.spent)
    except (InvalidTargetError, InvalidAmountError) as e:
        logging.warning(f"Unclassifiable budget {budget.id}: {e}")
        schema.error = str(e)
        return schema

    record_budget_status(result.status)
    schema.percentage = result.percentage
    schema.status = result.status
    return schema


@router.get("/budgets", response_model=BudgetListResponse)
async def list_budgets(repository: BudgetRepository = Depends(get_budget_repository)):
    """
    Budgets ordered by category, each with its progress and status.

    Status thresholds: 85% warning, 100% exceeded. Spent amounts are entered
    by the user and are not derived from transactions.
    """
    budgets = await repository.list()
    totals = budget_totals(budgets)

    return BudgetListResponse(
        budgets=[_to_schema(b) for b in budgets],
        totals=BudgetTotalsSchema(
            count=totals.count,
            budgeted=totals.budgeted,
            spent=totals.spent,
            remaining=totals.remaining,
        ),
    )


@router.post("/budgets", response_model=BudgetSchema, status_code=201)
async def create_budget(body: BudgetRequest, repository: BudgetRepository = Depends(get_budget_repository)):
    created = await repository.create(_to_domain(body))
    return _to_schema(created)


@router.put("/budgets/{budget_id}", response_model=BudgetSchema)
async def update_budget(
    budget_id: int,
    body: BudgetRequest,
    repository: BudgetRepository = Depends(get_budget_repository),
):
    updated = await repository.update(_to_domain(body, budget_id))
    return _to_schema(updated)


@router.delete("/budgets/{budget_id}", status_code=204)
async def delete_budget(budget_id: int, repository: BudgetRepository = Depends(get_budget_repository)):
    await repository.delete(budget_id)
    return Response(status_code=204)
