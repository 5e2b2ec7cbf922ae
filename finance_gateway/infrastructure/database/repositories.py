"""Data access layer for locally persisted preferences and fallback lists"""

from typing import Any, Callable, Dict, Generic, List, TypeVar
from sqlalchemy.orm import Session
from finance_gateway.infrastructure.database.models import LocalRecordList, UserPreference
from finance_gateway.domain.exceptions import RecordNotFoundError
from finance_gateway.domain.models import Preferences

T = TypeVar("T")


class PreferenceRepository:
    """Repository for per-owner UI preferences"""

    def __init__(self, db: Session):
        self.db = db

    def load(self, owner_id: str) -> Preferences:
        """Stored preferences, or defaults for an unknown owner"""
        row = self.db.get(UserPreference, owner_id)
        if row is None:
            return Preferences()
        return Preferences(dark_mode=row.dark_mode)

    def save(self, owner_id: str, preferences: Preferences) -> Preferences:
        row = self.db.get(UserPreference, owner_id)
        if row is None:
            row = UserPreference(owner_id=owner_id)
            self.db.add(row)
        row.dark_mode = preferences.dark_mode
        self.db.flush()
        return Preferences(dark_mode=row.dark_mode)


class LocalListRepository:
    """Repository for JSON record lists keyed by owner and kind"""

    def __init__(self, db: Session):
        self.db = db

    def _row(self, owner_id: str, kind: str) -> LocalRecordList | None:
        return (
            self.db.query(LocalRecordList)
            .filter(LocalRecordList.owner_id == owner_id, LocalRecordList.kind == kind)
            .first()
        )

    def load(self, owner_id: str, kind: str) -> List[Dict[str, Any]]:
        row = self._row(owner_id, kind)
        return list(row.items) if row is not None else []

    def save(self, owner_id: str, kind: str, items: List[Dict[str, Any]]) -> None:
        row = self._row(owner_id, kind)
        if row is None:
            row = LocalRecordList(owner_id=owner_id, kind=kind)
            self.db.add(row)
        # Assign a new list so the JSON column registers the change
        row.items = list(items)
        self.db.flush()


class LocalRecordRepository(Generic[T]):
    """
    Record-store look-alike backed by a local list.

    Exposes the same async list/get/create/update/delete surface as the
    remote repositories so routers can serve anonymous sessions unchanged.
    Rows are stored in record-store wire format.
    """

    def __init__(
        self,
        lists: LocalListRepository,
        owner_id: str,
        kind: str,
        from_api: Callable[[Dict[str, Any]], T],
        to_api: Callable[[T], Dict[str, Any]],
    ):
        self.lists = lists
        self.owner_id = owner_id
        self.kind = kind
        self.from_api = from_api
        self.to_api = to_api

    def _index(self, rows: List[Dict[str, Any]], record_id: int) -> int:
        for i, row in enumerate(rows):
            if row.get("Id") == record_id:
                return i
        raise RecordNotFoundError(f"{self.kind} {record_id} not found")

    async def list(self) -> List[T]:
        return [self.from_api(row) for row in self.lists.load(self.owner_id, self.kind)]

    async def get(self, record_id: int) -> T:
        rows = self.lists.load(self.owner_id, self.kind)
        return self.from_api(rows[self._index(rows, record_id)])

    async def create(self, record: T) -> T:
        rows = self.lists.load(self.owner_id, self.kind)
        row = self.to_api(record)
        row["Id"] = max((r.get("Id") or 0 for r in rows), default=0) + 1
        rows.append(row)
        self.lists.save(self.owner_id, self.kind, rows)
        return self.from_api(row)

    async def update(self, record: T) -> T:
        rows = self.lists.load(self.owner_id, self.kind)
        row = self.to_api(record)
        rows[self._index(rows, row.get("Id"))] = row
        self.lists.save(self.owner_id, self.kind, rows)
        return self.from_api(row)

    async def delete(self, record_id: int) -> None:
        rows = self.lists.load(self.owner_id, self.kind)
        del rows[self._index(rows, record_id)]
        self.lists.save(self.owner_id, self.kind, rows)
