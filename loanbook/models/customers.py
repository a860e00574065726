# loanbook/models/customers.py

from typing import Any, List, Optional

from pydantic import field_validator, model_validator

from loanbook.models.base import Envelope, PayloadModel, RecordModel


class Customer(RecordModel):
    customer_id: str
    customer_name: str = ""
    location: str = ""
    contact_number: str = ""
    previous_bills: float = 0
    bills: List[str] = []
    paid_amount: float = 0
    to_be_paid: Optional[float] = None
    created_at: Optional[str] = None

    @field_validator("bills", mode="before")
    @classmethod
    def _bill_numbers_as_strings(cls, value: Any) -> Any:
        if isinstance(value, list):
            return [str(item) for item in value]
        return value

    @model_validator(mode="after")
    def _carry_previous_bills(self) -> "Customer":
        # records written before toBePaid existed start from the carried-in balance
        if self.to_be_paid is None:
            self.to_be_paid = self.previous_bills
        return self


class CustomerCreate(PayloadModel):
    customer_name: Optional[Any] = None
    location: Optional[Any] = None
    contact_number: Optional[Any] = None
    previous_bills: Optional[Any] = None


class CustomerStatement(RecordModel):
    customer_id: str
    customer_name: str
    previous_bills: float
    bills_total: float
    total_bill_amount: float
    total_paid: float
    balance: float
    bill_count: int
    payment_count: int
    # stored running fields, kept for comparison with the computed balance
    to_be_paid: float
    paid_amount: float


class CustomerResponse(Envelope):
    customer: Customer


class CustomerListResponse(Envelope):
    customers: List[Customer]
    total: int


class CustomerStatementResponse(Envelope):
    statement: CustomerStatement
