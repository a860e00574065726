# loanbook/api/payments.py

from fastapi import APIRouter, Depends

from loanbook.api.deps import get_ledger
from loanbook.models.payments import PaymentCreate, PaymentListResponse, PaymentResponse
from loanbook.services.ledger import LedgerService

router = APIRouter(prefix="/api/payments", tags=["payments"])


@router.get("", response_model=PaymentListResponse, response_model_exclude_none=True)
def list_payments(ledger: LedgerService = Depends(get_ledger)) -> PaymentListResponse:
    payments = ledger.list_payments()
    return PaymentListResponse(payments=payments, total=len(payments))


@router.post("", response_model=PaymentResponse, response_model_exclude_none=True, status_code=201)
def create_payment(
    payload: PaymentCreate,
    ledger: LedgerService = Depends(get_ledger),
) -> PaymentResponse:
    """
    Record a payment and add it to the customer's paidAmount (toBePaid is untouched).
    """
    payment = ledger.create_payment(payload)
    return PaymentResponse(message="Payment recorded successfully", payment=payment)


@router.get("/customer/{customer_id}", response_model=PaymentListResponse, response_model_exclude_none=True)
def list_customer_payments(
    customer_id: str,
    ledger: LedgerService = Depends(get_ledger),
) -> PaymentListResponse:
    payments = ledger.list_payments_for_customer(customer_id)
    return PaymentListResponse(payments=payments, total=len(payments))
