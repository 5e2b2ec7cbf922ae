"""GET /v1/summary - Dashboard balance, income, expenses and savings"""

import time
from fastapi import APIRouter, Depends, Request

from finance_gateway.api.v1.schemas import SummaryResponse
from finance_gateway.api.dependencies import get_request_id, get_transaction_repository, require_user_id
from finance_gateway.api.loaders import load_summary
from finance_gateway.config import settings
from finance_gateway.infrastructure.observability.logging import log_summary
from finance_gateway.infrastructure.records.repositories import TransactionRepository

router = APIRouter()


@router.get("/summary", response_model=SummaryResponse)
async def get_summary(
    request: Request,
    user_id: str = Depends(require_user_id),
    repository: TransactionRepository = Depends(get_transaction_repository),
):
    """
    Compute dashboard figures from the user's full transaction list.

    If the record store is unavailable the response still succeeds with all
    figures at zero and a notice for the UI to display.
    """
    start_time = time.time()

    result = await load_summary(repository, settings.base_balance)

    duration_ms = (time.time() - start_time) * 1000
    log_summary(get_request_id(request), user_id, result.entry_count, result.fallback, duration_ms)

    return SummaryResponse(
        balance=result.summary.balance,
        income=result.summary.income,
        expenses=result.summary.expenses,
        savings=result.summary.savings,
        notice=result.notice,
    )
