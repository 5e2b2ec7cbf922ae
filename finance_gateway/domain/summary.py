"""Financial summary engine - derives dashboard figures from the ledger"""

import logging
import math
from collections.abc import Mapping
from typing import Any, Iterable, Optional, Tuple

from finance_gateway.domain.models import EntryKind, FinancialSummary, LedgerEntry
from finance_gateway.utils.numbers import coerce_amount

logger = logging.getLogger(__name__)

DEFAULT_BASE_BALANCE = 10_000.0

_KINDS = {kind.value: kind for kind in EntryKind}


def _read_entry(entry: Any) -> Optional[Tuple[EntryKind, float]]:
    """
    Extract (kind, amount) from a ledger entry, or None if it is malformed.

    Accepts LedgerEntry objects and raw record-store mappings, where the kind
    lives under the source field name "type".
    """
    if isinstance(entry, LedgerEntry):
        raw_kind, raw_amount = entry.kind, entry.amount
    elif isinstance(entry, Mapping):
        raw_kind, raw_amount = entry.get("type"), entry.get("amount")
    else:
        return None

    if not isinstance(raw_kind, str) or raw_kind not in _KINDS:
        return None

    return _KINDS[raw_kind], coerce_amount(raw_amount)


def summarize(entries: Iterable[Any], base_balance: float = DEFAULT_BASE_BALANCE) -> FinancialSummary:
    """
    Reduce a snapshot of ledger entries to balance, income, expenses and savings.

    Rules:
    - income = sum of Credit amounts, expenses = sum of Debit amounts
    - savings = income - expenses
    - balance = base_balance + savings (base_balance is an assumed opening
      balance, not a ledger figure)
    - malformed entries and unknown kinds contribute nothing
    - any non-finite result resets the whole summary to zero

    Sums use math.fsum, which is exactly rounded, so any permutation of the
    same entries yields an identical summary. Inputs are never mutated.
    """
    credits = []
    debits = []

    for entry in entries:
        parsed = _read_entry(entry)
        if parsed is None:
            continue
        kind, amount = parsed
        if kind is EntryKind.CREDIT:
            credits.append(amount)
        else:
            debits.append(amount)

    try:
        income = math.fsum(credits)
        expenses = math.fsum(debits)
        savings = income - expenses
        balance = float(base_balance) + savings
    except (OverflowError, ValueError, TypeError) as e:
        logger.warning("Summary computation failed, using zero summary", extra={"error": str(e)})
        return FinancialSummary.zero()

    if not all(math.isfinite(value) for value in (balance, income, expenses, savings)):
        logger.warning("Summary produced non-finite values, using zero summary")
        return FinancialSummary.zero()

    return FinancialSummary(
        balance=balance,
        income=income,
        expenses=expenses,
        savings=savings,
    )
