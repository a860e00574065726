# loanbook/api/customers.py

from typing import Optional

from fastapi import APIRouter, Depends, Query

from loanbook.api.deps import get_ledger
from loanbook.models.customers import (
    CustomerCreate,
    CustomerListResponse,
    CustomerResponse,
    CustomerStatementResponse,
)
from loanbook.services.ledger import LedgerService

router = APIRouter(prefix="/api/customers", tags=["customers"])


@router.get("", response_model=CustomerListResponse, response_model_exclude_none=True)
def list_customers(
    search: Optional[str] = Query(
        default=None,
        description="Case-insensitive match on customer name or ID",
    ),
    limit: Optional[int] = Query(default=None, ge=1),
    offset: int = Query(0, ge=0),
    ledger: LedgerService = Depends(get_ledger),
) -> CustomerListResponse:
    """
    Return customers in creation order. Without query parameters this is the
    whole collection.
    """
    customers, total = ledger.list_customers(search=search, limit=limit, offset=offset)
    return CustomerListResponse(customers=customers, total=total)


@router.post("", response_model=CustomerResponse, response_model_exclude_none=True, status_code=201)
def create_customer(
    payload: CustomerCreate,
    ledger: LedgerService = Depends(get_ledger),
) -> CustomerResponse:
    customer = ledger.create_customer(payload)
    return CustomerResponse(message="Customer created successfully", customer=customer)


@router.get("/{customer_id}/statement", response_model=CustomerStatementResponse, response_model_exclude_none=True)
def get_customer_statement(
    customer_id: str,
    ledger: LedgerService = Depends(get_ledger),
) -> CustomerStatementResponse:
    """
    previousBills + sum of bills - sum of payments, computed from the collections.
    """
    return CustomerStatementResponse(statement=ledger.customer_statement(customer_id))


@router.get("/{customer_id}", response_model=CustomerResponse, response_model_exclude_none=True)
def get_customer(
    customer_id: str,
    ledger: LedgerService = Depends(get_ledger),
) -> CustomerResponse:
    return CustomerResponse(customer=ledger.get_customer(customer_id))
