"""Data loading for the dashboard summary"""

import logging
from dataclasses import dataclass
from typing import Optional

from finance_gateway.domain.exceptions import RecordStoreError
from finance_gateway.domain.models import FinancialSummary, LedgerEntry
from finance_gateway.domain.summary import summarize
from finance_gateway.infrastructure.observability.metrics import record_summary
from finance_gateway.infrastructure.records.repositories import TransactionRepository

logger = logging.getLogger(__name__)

LOAD_FAILURE_NOTICE = "Failed to load transactions"


@dataclass(frozen=True)
class SummaryLoad:
    """Result of one dashboard load: figures plus an optional user notice"""

    summary: FinancialSummary
    entry_count: int
    notice: Optional[str] = None

    @property
    def fallback(self) -> bool:
        return self.notice is not None


async def load_summary(repository: TransactionRepository, base_balance: float) -> SummaryLoad:
    """
    Fetch the complete transaction snapshot and summarize it.

    A failed fetch never reaches the engine: the zero summary is substituted
    and a notice is attached for the UI.
    """
    try:
        transactions = await repository.list()
    except RecordStoreError as e:
        logger.error("Transaction load failed, serving zero summary", extra={"error": str(e)})
        record_summary(fallback=True)
        return SummaryLoad(summary=FinancialSummary.zero(), entry_count=0, notice=LOAD_FAILURE_NOTICE)

    entries = [LedgerEntry(amount=t.amount, kind=t.type) for t in transactions]
    record_summary(fallback=False)
    return SummaryLoad(summary=summarize(entries, base_balance), entry_count=len(entries))
