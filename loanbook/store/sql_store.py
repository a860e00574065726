# loanbook/store/sql_store.py

import logging
from typing import List

from pydantic.alias_generators import to_camel
from sqlalchemy import Table, select
from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError

from loanbook.db.schema import metadata
from loanbook.store.base import BaseStore

logger = logging.getLogger(__name__)


def _row_to_record(table: Table, row) -> dict:
    return {
        to_camel(column.name): row[column.name]
        for column in table.columns
        if column.name != "id" and row[column.name] is not None
    }


def _record_to_row(table: Table, record: dict) -> dict:
    return {
        column.name: record.get(to_camel(column.name))
        for column in table.columns
        if column.name != "id"
    }


class SqlStore(BaseStore):
    """
    Same collections kept in SQL tables (SQLite by default).

    Only the columns declared in ``loanbook.db.schema`` are stored, so unknown
    record keys are dropped on write.
    """

    def __init__(self, engine: Engine):
        self.engine = engine

    def table_for(self, name: str) -> Table:
        return metadata.tables[self.check_collection(name)]

    def ensure_collection(self, name: str) -> None:
        self.table_for(name).create(self.engine, checkfirst=True)

    def read_all(self, name: str) -> List[dict]:
        table = self.table_for(name)
        try:
            with self.engine.connect() as conn:
                rows = conn.execute(select(table).order_by(table.c.id)).mappings().all()
        except SQLAlchemyError:
            logger.exception("Could not read table %s; reading it as empty", name)
            return []

        return [_row_to_record(table, row) for row in rows]

    def write_all(self, name: str, records: List[dict]) -> None:
        table = self.table_for(name)
        rows = [_record_to_row(table, record) for record in records]

        with self.engine.begin() as conn:
            conn.execute(table.delete())
            if rows:
                conn.execute(table.insert(), rows)
