"""Dependency injection for FastAPI endpoints"""

from typing import Optional

from fastapi import Depends, Header, HTTPException, Request
from sqlalchemy.orm import Session

from finance_gateway.infrastructure.clients.records import RecordStoreClient
from finance_gateway.infrastructure.database.repositories import LocalListRepository, LocalRecordRepository
from finance_gateway.infrastructure.database.session import get_db
from finance_gateway.infrastructure.records import mappers
from finance_gateway.infrastructure.records.repositories import (
    BillRepository,
    BudgetRepository,
    GoalRepository,
    TransactionRepository,
)


def get_request_id(request: Request) -> str:
    """Extract request ID from request state"""
    return getattr(request.state, "request_id", "unknown")


def get_user_id(x_user_id: Optional[str] = Header(None)) -> Optional[str]:
    """Authenticated user forwarded by the identity SDK, if any"""
    return x_user_id.strip() if x_user_id and x_user_id.strip() else None


def require_user_id(user_id: Optional[str] = Depends(get_user_id)) -> str:
    if user_id is None:
        raise HTTPException(status_code=401, detail="Authentication required")
    return user_id


def get_owner_key(
    user_id: Optional[str] = Depends(get_user_id),
    x_session_id: Optional[str] = Header(None),
) -> str:
    """Key for locally stored state: the user, or the anonymous browser session"""
    if user_id is not None:
        return user_id
    return f"anonymous:{x_session_id or 'default'}"


def get_optional_record_client(user_id: Optional[str] = Depends(get_user_id)) -> Optional[RecordStoreClient]:
    """Provide record store client scoped to the signed-in user, if any"""
    return RecordStoreClient(owner_id=user_id) if user_id is not None else None


def get_record_client(
    user_id: str = Depends(require_user_id),
    client: Optional[RecordStoreClient] = Depends(get_optional_record_client),
) -> RecordStoreClient:
    return client


def get_transaction_repository(client: RecordStoreClient = Depends(get_record_client)) -> TransactionRepository:
    return TransactionRepository(client)


def get_budget_repository(client: RecordStoreClient = Depends(get_record_client)) -> BudgetRepository:
    return BudgetRepository(client)


def get_goal_repository(
    client: Optional[RecordStoreClient] = Depends(get_optional_record_client),
    owner_key: str = Depends(get_owner_key),
    db: Session = Depends(get_db),
):
    """Remote goals for signed-in users, the local fallback list otherwise"""
    if client is not None:
        return GoalRepository(client)
    return LocalRecordRepository(
        LocalListRepository(db), owner_key, GoalRepository.table, mappers.goal_from_api, mappers.goal_to_api
    )


def get_bill_repository(
    client: Optional[RecordStoreClient] = Depends(get_optional_record_client),
    owner_key: str = Depends(get_owner_key),
    db: Session = Depends(get_db),
):
    """Remote bills for signed-in users, the local fallback list otherwise"""
    if client is not None:
        return BillRepository(client)
    return LocalRecordRepository(
        LocalListRepository(db), owner_key, BillRepository.table, mappers.bill_from_api, mappers.bill_to_api
    )
