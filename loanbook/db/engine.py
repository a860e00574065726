# loanbook/db/engine.py

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine

from loanbook import config


def get_engine(db_url: str = None) -> Engine:
    # echo=True if you want to see SQL printed in the terminal
    return create_engine(db_url or config.DB_URL, future=True)
