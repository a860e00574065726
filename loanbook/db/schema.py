# loanbook/db/schema.py

from sqlalchemy import (
    JSON, MetaData, Table, Column, Integer, String, Numeric, Text
)

metadata = MetaData()

# Column names are the snake_case form of the record keys (customerId -> customer_id).
# Nothing here enforces references between collections; the ledger service does.

customers = Table(
    "customers",
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column("customer_id", String, unique=True),
    Column("customer_name", String),
    Column("location", String),
    Column("contact_number", String),
    Column("previous_bills", Numeric(18, 2, asdecimal=False)),
    Column("bills", JSON),
    Column("paid_amount", Numeric(18, 2, asdecimal=False)),
    Column("to_be_paid", Numeric(18, 2, asdecimal=False)),
    Column("created_at", String),
)

bills = Table(
    "bills",
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column("bill_number", String, unique=True),
    Column("customer_id", String, index=True),
    Column("customer_name", String),
    Column("bill_amount", Numeric(18, 2, asdecimal=False)),
    Column("bill_date", String),
    Column("notes", Text),
    Column("created_at", String),
)

payments = Table(
    "payments",
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column("customer_id", String, index=True),
    Column("customer_name", String),
    Column("paying_amount", Numeric(18, 2, asdecimal=False)),
    Column("paid_date", String),
    Column("notes", Text),
    Column("created_at", String),
)
