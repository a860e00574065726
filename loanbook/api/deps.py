# loanbook/api/deps.py

from fastapi import Depends

from loanbook.services.ledger import LedgerService
from loanbook.store import BaseStore, get_store


def get_ledger(store: BaseStore = Depends(get_store)) -> LedgerService:
    return LedgerService(store)
