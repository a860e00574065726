# loanbook/config.py

import os

HOST = os.getenv("HOST", "0.0.0.0")
PORT = int(os.getenv("PORT", "2026"))

# "json" keeps one file per collection under DATA_DIR; "sql" uses DB_URL
STORE_BACKEND = os.getenv("LOANBOOK_STORE", "json").lower()
DATA_DIR = os.getenv("LOANBOOK_DATA_DIR", "data")
DB_URL = os.getenv("LOANBOOK_DB_URL", "sqlite:///db.sqlite")

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
LOG_FORMAT = "%(asctime)s [%(levelname)s] %(message)s"
