# app.py
"""
Thin entrypoint for the API.

Usage:
    python app.py            # listens on $PORT (default 2026)
    uvicorn app:app --reload
"""

import uvicorn

from loanbook import config
from loanbook.main import app  # re-export FastAPI instance

if __name__ == "__main__":
    uvicorn.run(app, host=config.HOST, port=config.PORT)
