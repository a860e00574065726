# loanbook/models/bills.py

from typing import Any, List, Optional

from pydantic import field_validator

from loanbook.models.base import Envelope, PayloadModel, RecordModel


class Bill(RecordModel):
    bill_number: str
    customer_id: str
    customer_name: str = ""
    bill_amount: float = 0
    bill_date: Optional[str] = None
    notes: str = ""
    created_at: Optional[str] = None

    @field_validator("bill_number", mode="before")
    @classmethod
    def _bill_number_as_string(cls, value: Any) -> Any:
        if isinstance(value, int) and not isinstance(value, bool):
            return str(value)
        return value


class BillCreate(PayloadModel):
    bill_number: Optional[Any] = None
    customer_id: Optional[Any] = None
    bill_amount: Optional[Any] = None
    bill_date: Optional[Any] = None
    notes: Optional[Any] = None


class MonthlyBillSummary(RecordModel):
    month: str
    customer_id: Optional[str] = None
    total_amount: float
    bill_count: int


class BillResponse(Envelope):
    bill: Bill


class BillListResponse(Envelope):
    bills: List[Bill]
    total: int


class MonthlyBillSummaryResponse(Envelope):
    summary: MonthlyBillSummary
