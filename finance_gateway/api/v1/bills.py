"""Bill endpoints - CRUD, paid toggle, filtering, sorting and totals"""

from typing import Optional
from fastapi import APIRouter, Depends, Query, Response
from sqlalchemy.orm import Session

from finance_gateway.api.v1.schemas import BillListResponse, BillRequest, BillSchema, BillTotalsSchema
from finance_gateway.api.dependencies import get_bill_repository
from finance_gateway.domain.models import Bill
from finance_gateway.domain.overview import bill_totals, filter_bills, is_overdue, sort_bills
from finance_gateway.domain.validation import validate_bill
from finance_gateway.infrastructure.database.session import get_db

router = APIRouter()


def _to_domain(body: BillRequest, bill_id: Optional[int] = None) -> Bill:
    bill = Bill(
        id=bill_id,
        name=body.name.strip(),
        amount=body.amount,
        due_date=body.due_date,
        category=body.category,
        is_paid=body.is_paid,
        recurring=body.recurring,
        autopay=body.autopay,
    )
    validate_bill(bill)
    return bill


def _to_schema(bill: Bill) -> BillSchema:
    return BillSchema(
        id=bill.id,
        name=bill.name,
        amount=bill.amount,
        due_date=bill.due_date,
        category=bill.category,
        is_paid=bill.is_paid,
        recurring=bill.recurring,
        autopay=bill.autopay,
        overdue=is_overdue(bill),
    )


@router.get("/bills", response_model=BillListResponse)
async def list_bills(
    filter: str = Query("all", pattern="^(all|paid|unpaid)$", description="all, paid or unpaid"),
    sort: str = Query("dueDate", pattern="^(dueDate|amount|name)$", description="dueDate, amount or name"),
    repository=Depends(get_bill_repository),
):
    """
    Bills after filtering and sorting.

    Totals always cover every bill, regardless of the filter.
    """
    bills = await repository.list()
    totals = bill_totals(bills)

    return BillListResponse(
        bills=[_to_schema(b) for b in sort_bills(filter_bills(bills, filter), sort)],
        totals=BillTotalsSchema(
            count=totals.count,
            paid_count=totals.paid_count,
            unpaid_amount=totals.unpaid_amount,
        ),
    )


@router.post("/bills", response_model=BillSchema, status_code=201)
async def create_bill(
    body: BillRequest,
    repository=Depends(get_bill_repository),
    db: Session = Depends(get_db),
):
    created = await repository.create(_to_domain(body))
    db.commit()
    return _to_schema(created)


@router.put("/bills/{bill_id}", response_model=BillSchema)
async def update_bill(
    bill_id: int,
    body: BillRequest,
    repository=Depends(get_bill_repository),
    db: Session = Depends(get_db),
):
    updated = await repository.update(_to_domain(body, bill_id))
    db.commit()
    return _to_schema(updated)


@router.post("/bills/{bill_id}/toggle-paid", response_model=BillSchema)
async def toggle_bill_paid(
    bill_id: int,
    repository=Depends(get_bill_repository),
    db: Session = Depends(get_db),
):
    bill = await repository.get(bill_id)
    bill.is_paid = not bill.is_paid
    updated = await repository.update(bill)
    db.commit()
    return _to_schema(updated)


@router.delete("/bills/{bill_id}", status_code=204)
async def delete_bill(
    bill_id: int,
    repository=Depends(get_bill_repository),
    db: Session = Depends(get_db),
):
    await repository.delete(bill_id)
    db.commit()
    return Response(status_code=204)
