# loanbook/main.py

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from loanbook import config
from loanbook.api.bills import router as bills_router
from loanbook.api.customers import router as customers_router
from loanbook.api.payments import router as payments_router
from loanbook.exceptions import LoanbookError
from loanbook.store import get_store

logging.basicConfig(level=config.LOG_LEVEL, format=config.LOG_FORMAT)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    # honour test overrides of the store dependency
    store = app.dependency_overrides.get(get_store, get_store)()
    store.ensure_all()
    logger.info("Collections ready (%s)", type(store).__name__)
    yield


app = FastAPI(
    title="Loanbook API",
    version="0.1.0",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(LoanbookError)
async def loanbook_error_handler(request: Request, exc: LoanbookError) -> JSONResponse:
    return JSONResponse(
        status_code=exc.status_code,
        content={"success": False, "message": exc.message},
    )


@app.exception_handler(RequestValidationError)
async def request_validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    fields = ", ".join(
        " -> ".join(str(loc) for loc in error["loc"]) for error in exc.errors()
    )
    logger.warning("Malformed request on %s %s: %s", request.method, request.url.path, fields)
    return JSONResponse(
        status_code=400,
        content={"success": False, "message": f"Invalid request: {fields}"},
    )


@app.exception_handler(Exception)
async def unexpected_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    return JSONResponse(
        status_code=500,
        content={"success": False, "message": "Internal server error"},
    )


@app.get("/")
def root():
    return {"success": True, "message": "Loan API is running", "status": "success"}


@app.get("/health")
def health_check():
    return {"status": "ok"}


app.include_router(customers_router)
app.include_router(bills_router)
app.include_router(payments_router)
