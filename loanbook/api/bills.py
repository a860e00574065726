# loanbook/api/bills.py

from typing import Optional

from fastapi import APIRouter, Depends, Query

from loanbook.api.deps import get_ledger
from loanbook.models.bills import (
    BillCreate,
    BillListResponse,
    BillResponse,
    MonthlyBillSummaryResponse,
)
from loanbook.services.ledger import LedgerService

router = APIRouter(prefix="/api/bills", tags=["bills"])


@router.get("", response_model=BillListResponse, response_model_exclude_none=True)
def list_bills(
    search: Optional[str] = Query(
        default=None,
        description="Case-insensitive match on customer name, or part of the bill number",
    ),
    limit: Optional[int] = Query(default=None, ge=1),
    offset: int = Query(0, ge=0),
    ledger: LedgerService = Depends(get_ledger),
) -> BillListResponse:
    bills, total = ledger.list_bills(search=search, limit=limit, offset=offset)
    return BillListResponse(bills=bills, total=total)


@router.post("", response_model=BillResponse, response_model_exclude_none=True, status_code=201)
def create_bill(
    payload: BillCreate,
    ledger: LedgerService = Depends(get_ledger),
) -> BillResponse:
    """
    Record a bill and add its amount to the customer's toBePaid.
    """
    bill = ledger.create_bill(payload)
    return BillResponse(message="Bill added successfully", bill=bill)


@router.get("/customer/{customer_id}", response_model=BillListResponse, response_model_exclude_none=True)
def list_customer_bills(
    customer_id: str,
    ledger: LedgerService = Depends(get_ledger),
) -> BillListResponse:
    bills = ledger.list_bills_for_customer(customer_id)
    return BillListResponse(bills=bills, total=len(bills))


@router.get("/summary/month", response_model=MonthlyBillSummaryResponse, response_model_exclude_none=True)
def monthly_summary(
    month: str = Query(..., description="Target month in YYYY-MM format"),
    customer_id: Optional[str] = Query(
        default=None,
        alias="customerId",
        description="Optional customer ID to restrict the sum to",
    ),
    ledger: LedgerService = Depends(get_ledger),
) -> MonthlyBillSummaryResponse:
    """
    Returns the sum of billAmount for bills dated in the target month.
    """
    return MonthlyBillSummaryResponse(summary=ledger.monthly_bill_summary(month, customer_id))
