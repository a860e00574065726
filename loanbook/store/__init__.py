# loanbook/store/__init__.py

from functools import lru_cache

from loanbook import config
from loanbook.store.base import COLLECTIONS, BaseStore
from loanbook.store.json_store import JsonFileStore
from loanbook.store.sql_store import SqlStore


def build_store(backend: str = None) -> BaseStore:
    backend = (backend or config.STORE_BACKEND).lower()
    if backend == "json":
        return JsonFileStore(config.DATA_DIR)
    if backend == "sql":
        from loanbook.db.engine import get_engine

        return SqlStore(get_engine())
    raise ValueError(f"Unknown store backend {backend!r} (expected 'json' or 'sql')")


@lru_cache
def get_store() -> BaseStore:
    return build_store()


__all__ = [
    "COLLECTIONS",
    "BaseStore",
    "JsonFileStore",
    "SqlStore",
    "build_store",
    "get_store",
]
