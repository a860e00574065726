# loanbook/models/payments.py

from typing import Any, List, Optional

from loanbook.models.base import Envelope, PayloadModel, RecordModel


class Payment(RecordModel):
    customer_id: str
    customer_name: str = ""
    paying_amount: float = 0
    notes: str = ""
    paid_date: Optional[str] = None
    created_at: Optional[str] = None


class PaymentCreate(PayloadModel):
    customer_id: Optional[Any] = None
    paying_amount: Optional[Any] = None
    paid_date: Optional[Any] = None
    notes: Optional[Any] = None


class PaymentResponse(Envelope):
    payment: Payment


class PaymentListResponse(Envelope):
    payments: List[Payment]
    total: int
