"""Data access layer for finance entities held in the hosted record store"""

import logging
from collections.abc import Mapping
from typing import Any, Callable, Dict, Generic, List, TypeVar

from finance_gateway.domain.exceptions import RecordNotFoundError, RecordStoreError
from finance_gateway.domain.models import Bill, Budget, Goal, Transaction
from finance_gateway.infrastructure.clients.records import NOT_DELETED, RecordStoreClient
from finance_gateway.infrastructure.records import mappers

logger = logging.getLogger(__name__)

T = TypeVar("T")


class RecordRepository(Generic[T]):
    """Repository for one record-store table"""

    table: str = ""
    fields: List[str] = []
    order_by: List[Dict[str, str]] = []
    from_api: Callable[[Dict[str, Any]], T]
    to_api: Callable[[T], Dict[str, Any]]

    def __init__(self, client: RecordStoreClient):
        self.client = client

    def _map(self, row: Any) -> T:
        if not isinstance(row, Mapping):
            raise RecordStoreError(f"Invalid {self.table} record from record store: {row!r}")
        try:
            return self.from_api(row)
        except (AttributeError, TypeError, ValueError) as e:
            raise RecordStoreError(f"Invalid {self.table} record from record store: {e}") from e

    async def list(self) -> List[T]:
        """
        Fetch all non-deleted records in the table's display order.

        Malformed rows are skipped with a warning; the rest of the table is
        still returned.
        """
        rows = await self.client.fetch_records(self.table, self.fields, order_by=self.order_by)
        records = []
        for row in rows:
            try:
                records.append(self._map(row))
            except RecordStoreError as e:
                logger.warning("Skipping malformed record", extra={"table": self.table, "error": str(e)})
        return records

    async def get(self, record_id: int) -> T:
        rows = await self.client.fetch_records(
            self.table,
            self.fields,
            where=[NOT_DELETED, {"field": "Id", "operator": "ExactMatch", "values": [record_id]}],
        )
        if not rows:
            raise RecordNotFoundError(f"{self.table} {record_id} not found")
        return self._map(rows[0])

    async def create(self, record: T) -> T:
        created = await self.client.create_records(self.table, [mappers.without_id(self.to_api(record))])
        return self._map(created[0])

    async def update(self, record: T) -> T:
        updated = await self.client.update_records(self.table, [self.to_api(record)])
        return self._map(updated[0])

    async def delete(self, record_id: int) -> None:
        await self.client.delete_records(self.table, [record_id])


class TransactionRepository(RecordRepository[Transaction]):
    """Most recent transactions first"""

    table = "transaction"
    fields = ["Id", "Name", "date", "amount", "description", "category", "type", "account"]
    order_by = [{"field": "date", "direction": "DESC"}]
    from_api = staticmethod(mappers.transaction_from_api)
    to_api = staticmethod(mappers.transaction_to_api)


class BudgetRepository(RecordRepository[Budget]):
    table = "budget"
    fields = ["Id", "Name", "category", "amount", "spent", "period", "color"]
    order_by = [{"field": "category", "direction": "ASC"}]
    from_api = staticmethod(mappers.budget_from_api)
    to_api = staticmethod(mappers.budget_to_api)


class GoalRepository(RecordRepository[Goal]):
    table = "financial_goal"
    fields = ["Id", "Name", "target", "current", "targetDate", "category"]
    order_by = [{"field": "targetDate", "direction": "ASC"}]
    from_api = staticmethod(mappers.goal_from_api)
    to_api = staticmethod(mappers.goal_to_api)


class BillRepository(RecordRepository[Bill]):
    table = "bill"
    fields = ["Id", "Name", "amount", "dueDate", "category", "isPaid", "recurring", "autopay"]
    order_by = [{"field": "dueDate", "direction": "ASC"}]
    from_api = staticmethod(mappers.bill_from_api)
    to_api = staticmethod(mappers.bill_to_api)
