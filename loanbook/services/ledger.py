# loanbook/services/ledger.py
"""
Customer / bill / payment bookkeeping.

All validation, identifier assignment and the cross-collection side effects
(a bill raises the customer's toBePaid, a payment raises paidAmount) live here,
so the routers only translate HTTP to calls on LedgerService.
"""

import logging
import math
import re
import threading
from datetime import datetime, timezone
from typing import Any, List, Optional, Tuple

from pydantic import ValidationError as RecordValidationError

from loanbook.exceptions import NotFoundError, ValidationError
from loanbook.models.bills import Bill, BillCreate, MonthlyBillSummary
from loanbook.models.customers import Customer, CustomerCreate, CustomerStatement
from loanbook.models.payments import Payment, PaymentCreate
from loanbook.store.base import BaseStore

logger = logging.getLogger(__name__)

CUSTOMER_ID_PREFIX = "CUST"
CUSTOMER_ID_WIDTH = 3
BILL_NUMBER_RE = re.compile(r"[0-9]{4}")

# Serialises read-modify-write cycles within this process. Separate processes
# sharing the same files can still overwrite each other.
_write_lock = threading.Lock()


# ---- Helpers ----

def utc_timestamp() -> str:
    return datetime.now(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")


def clean_text(value: Any) -> str:
    if value is None:
        return ""
    return str(value).strip()


def parse_amount(value: Any) -> Optional[float]:
    """Numbers and numeric strings become floats; anything else is None."""
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, str):
        value = value.strip()
        if not value:
            return None
    try:
        amount = float(value)
    except (TypeError, ValueError, OverflowError):
        return None
    if math.isnan(amount) or math.isinf(amount):
        return None
    return amount


def paginate(items: list, limit: Optional[int], offset: int) -> list:
    if limit is None:
        return items[offset:]
    return items[offset:offset + limit]


def _reject(message: str):
    logger.warning("Rejected request: %s", message)
    raise ValidationError(message)


class LedgerService:
    def __init__(self, store: BaseStore):
        self.store = store
        # raw records from the last load of each collection that did not validate
        self._unreadable = {}

    # ---- Loading ----

    def _load(self, name: str, model) -> list:
        records, unreadable = [], []
        for raw in self.store.read_all(name):
            try:
                records.append(model.model_validate(raw))
            except RecordValidationError as exc:
                logger.warning(
                    "Skipping %s record that does not validate (%d errors): %r",
                    name, exc.error_count(), raw,
                )
                unreadable.append(raw)
        self._unreadable[name] = unreadable
        return records

    def _customers(self) -> List[Customer]:
        return self._load("customers", Customer)

    def _bills(self) -> List[Bill]:
        return self._load("bills", Bill)

    def _payments(self) -> List[Payment]:
        return self._load("payments", Payment)

    def _save(self, name: str, records) -> None:
        # records skipped on load are written back untouched, after the rest
        self.store.write_all(
            name,
            [record.to_record() for record in records] + self._unreadable.get(name, []),
        )

    @staticmethod
    def _find_customer(customers: List[Customer], customer_id: str) -> Optional[Customer]:
        for customer in customers:
            if customer.customer_id == customer_id:
                return customer
        return None

    # ---- Customers ----

    def list_customers(
        self,
        search: Optional[str] = None,
        limit: Optional[int] = None,
        offset: int = 0,
    ) -> Tuple[List[Customer], int]:
        customers = self._customers()

        term = clean_text(search).lower()
        if term:
            customers = [
                c for c in customers
                if term in c.customer_name.lower() or term in c.customer_id.lower()
            ]

        return paginate(customers, limit, offset), len(customers)

    def get_customer(self, customer_id: str) -> Customer:
        customer = self._find_customer(self._customers(), customer_id)
        if customer is None:
            raise NotFoundError("Customer not found")
        return customer

    def create_customer(self, payload: CustomerCreate) -> Customer:
        name = clean_text(payload.customer_name)
        if not name:
            _reject("Customer name is required")

        previous_bills = 0.0
        if clean_text(payload.previous_bills):
            previous_bills = parse_amount(payload.previous_bills)
            if previous_bills is None or previous_bills < 0:
                _reject("Previous bills must be a non-negative number")

        with _write_lock:
            customer = Customer(
                customer_id=self.store.next_sequence_id(
                    "customers", "customerId", CUSTOMER_ID_PREFIX, CUSTOMER_ID_WIDTH
                ),
                customer_name=name,
                location=clean_text(payload.location),
                contact_number=clean_text(payload.contact_number),
                previous_bills=previous_bills,
                bills=[],
                paid_amount=0,
                to_be_paid=previous_bills,
                created_at=utc_timestamp(),
            )
            self.store.append("customers", customer.to_record())

        logger.info("Created customer %s (%s)", customer.customer_id, customer.customer_name)
        return customer

    def customer_statement(self, customer_id: str) -> CustomerStatement:
        """
        Balance recomputed from the bill and payment collections.

        The stored toBePaid is never reduced by payments, so ``balance`` here is
        the figure to show; the stored fields are returned alongside it.
        """
        customer = self.get_customer(customer_id)
        bills = self.list_bills_for_customer(customer_id)
        payments = self.list_payments_for_customer(customer_id)

        bills_total = sum(b.bill_amount for b in bills)
        total_paid = sum(p.paying_amount for p in payments)
        total_bill_amount = customer.previous_bills + bills_total

        return CustomerStatement(
            customer_id=customer.customer_id,
            customer_name=customer.customer_name,
            previous_bills=customer.previous_bills,
            bills_total=bills_total,
            total_bill_amount=total_bill_amount,
            total_paid=total_paid,
            balance=total_bill_amount - total_paid,
            bill_count=len(bills),
            payment_count=len(payments),
            to_be_paid=customer.to_be_paid,
            paid_amount=customer.paid_amount,
        )

    # ---- Bills ----

    def list_bills(
        self,
        search: Optional[str] = None,
        limit: Optional[int] = None,
        offset: int = 0,
    ) -> Tuple[List[Bill], int]:
        bills = self._bills()

        term = clean_text(search).lower()
        if term:
            bills = [
                b for b in bills
                if term in b.customer_name.lower() or term in b.bill_number
            ]

        return paginate(bills, limit, offset), len(bills)

    def list_bills_for_customer(self, customer_id: str) -> List[Bill]:
        return [b for b in self._bills() if b.customer_id == customer_id]

    def create_bill(self, payload: BillCreate) -> Bill:
        # first failing check wins
        bill_number = "" if payload.bill_number is None else str(payload.bill_number)
        if not BILL_NUMBER_RE.fullmatch(bill_number):
            _reject("Bill number must be exactly 4 digits")

        customer_id = clean_text(payload.customer_id)
        if not customer_id:
            _reject("Customer ID is required")

        bill_amount = parse_amount(payload.bill_amount)
        if bill_amount is None or bill_amount <= 0:
            _reject("Bill amount is required and must be greater than 0")

        bill_date = clean_text(payload.bill_date)
        if not bill_date:
            _reject("Bill date is required")

        with _write_lock:
            customers = self._customers()
            customer = self._find_customer(customers, customer_id)
            if customer is None:
                _reject(f"Customer {customer_id} does not exist")

            bills = self._bills()
            if any(b.bill_number == bill_number for b in bills):
                _reject(f"Bill number {bill_number} already exists")

            bill = Bill(
                bill_number=bill_number,
                customer_id=customer.customer_id,
                customer_name=customer.customer_name,
                bill_amount=bill_amount,
                bill_date=bill_date,
                notes=clean_text(payload.notes),
                created_at=utc_timestamp(),
            )
            bills.append(bill)
            self._save("bills", bills)

            # no rollback if this second write fails
            if bill_number not in customer.bills:
                customer.bills.append(bill_number)
            customer.to_be_paid += bill_amount
            self._save("customers", customers)

        logger.info(
            "Created bill %s for %s: amount=%s, toBePaid=%s",
            bill_number, customer_id, bill_amount, customer.to_be_paid,
        )
        return bill

    def monthly_bill_summary(self, month: str, customer_id: Optional[str] = None) -> MonthlyBillSummary:
        """
        Sum of billAmount for bills dated in ``month`` (YYYY-MM).

        A bill without billDate is placed by its createdAt. Dates are matched on
        their leading YYYY-MM, so free-form dates in other layouts never match.
        """
        try:
            month = datetime.strptime(clean_text(month), "%Y-%m").strftime("%Y-%m")
        except ValueError:
            _reject("month must be in YYYY-MM format")

        customer_id = clean_text(customer_id) or None

        matched = [
            b for b in self._bills()
            if (b.bill_date or b.created_at or "")[:7] == month
            and (customer_id is None or b.customer_id == customer_id)
        ]

        return MonthlyBillSummary(
            month=month,
            customer_id=customer_id,
            total_amount=sum(b.bill_amount for b in matched),
            bill_count=len(matched),
        )

    # ---- Payments ----

    def list_payments(self) -> List[Payment]:
        return self._payments()

    def list_payments_for_customer(self, customer_id: str) -> List[Payment]:
        return [p for p in self._payments() if p.customer_id == customer_id]

    def create_payment(self, payload: PaymentCreate) -> Payment:
        customer_id = clean_text(payload.customer_id)
        if not customer_id:
            _reject("Customer ID is required")

        paying_amount = parse_amount(payload.paying_amount)
        if paying_amount is None or paying_amount <= 0:
            _reject("Paying amount is required and must be greater than 0")

        with _write_lock:
            customers = self._customers()
            customer = self._find_customer(customers, customer_id)
            if customer is None:
                _reject(f"Customer {customer_id} does not exist")

            payment = Payment(
                customer_id=customer.customer_id,
                customer_name=customer.customer_name,
                paying_amount=paying_amount,
                notes=clean_text(payload.notes),
                paid_date=clean_text(payload.paid_date) or None,
                created_at=utc_timestamp(),
            )
            payments = self._payments()
            payments.append(payment)
            self._save("payments", payments)

            # toBePaid is left as is; see customer_statement for the real balance
            customer.paid_amount += paying_amount
            self._save("customers", customers)

        logger.info(
            "Recorded payment of %s for %s: paidAmount=%s",
            paying_amount, customer_id, customer.paid_amount,
        )
        return payment
