"""CRUD endpoints for transactions"""

from datetime import date
from typing import Optional
from fastapi import APIRouter, Depends, Response

from finance_gateway.api.v1.schemas import TransactionListResponse, TransactionRequest, TransactionSchema
from finance_gateway.api.dependencies import get_transaction_repository
from finance_gateway.domain.models import Transaction
from finance_gateway.domain.validation import normalize_entry_kind, validate_transaction
from finance_gateway.infrastructure.records.repositories import TransactionRepository

router = APIRouter()


def _to_domain(body: TransactionRequest, transaction_id: Optional[int] = None) -> Transaction:
    transaction = Transaction(
        id=transaction_id,
        description=body.description.strip(),
        amount=body.amount,
        date=body.date or date.today(),
        category=body.category,
        type=body.type,
        account=body.account,
    )
    validate_transaction(transaction)
    transaction.type = normalize_entry_kind(transaction.type).value
    return transaction


def _to_schema(transaction: Transaction) -> TransactionSchema:
    return TransactionSchema(
        id=transaction.id,
        description=transaction.description,
        amount=transaction.amount,
        date=transaction.date,
        category=transaction.category,
        type=transaction.type,
        account=transaction.account,
    )


@router.get("/transactions", response_model=TransactionListResponse)
async def list_transactions(repository: TransactionRepository = Depends(get_transaction_repository)):
    """Non-deleted transactions, most recent first"""
    transactions = await repository.list()
    return TransactionListResponse(transactions=[_to_schema(t) for t in transactions])


@router.post("/transactions", response_model=TransactionSchema, status_code=201)
async def create_transaction(
    body: TransactionRequest,
    repository: TransactionRepository = Depends(get_transaction_repository),
):
    created = await repository.create(_to_domain(body))
    return _to_schema(created)


@router.put("/transactions/{transaction_id}", response_model=TransactionSchema)
async def update_transaction(
    transaction_id: int,
    body: TransactionRequest,
    repository: TransactionRepository = Depends(get_transaction_repository),
):
    updated = await repository.update(_to_domain(body, transaction_id))
    return _to_schema(updated)


@router.delete("/transactions/{transaction_id}", status_code=204)
async def delete_transaction(
    transaction_id: int,
    repository: TransactionRepository = Depends(get_transaction_repository),
):
    await repository.delete(transaction_id)
    return Response(status_code=204)
