# stockwise/main.py

import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from .config import settings
from .database import create_db_and_tables, engine
from .logging_config import setup_logging
from .seed_data import seed_demo_data
from .store import (
    ConflictError,
    NotFoundError,
    ReadOnlyCollectionError,
    StoreError,
    StoreUnavailable,
    UnknownCollectionError,
    ValidationError,
)

from .api import records as records_api
from .api import pages as pages_api

logger = logging.getLogger(__name__)

# Most specific first; anything else in the hierarchy is a 500
STATUS_BY_ERROR = [
    (StoreUnavailable, 503),
    (ValidationError, 422),
    (ConflictError, 409),
    (NotFoundError, 404),
    (UnknownCollectionError, 404),
    (ReadOnlyCollectionError, 405),
]


app = FastAPI(title="Stockwise Inventory & Sales")

# Include API routers
app.include_router(records_api.router)
app.include_router(pages_api.router)


@app.exception_handler(StoreError)
async def store_error_handler(request: Request, exc: StoreError):
    status_code = next(
        (code for error_type, code in STATUS_BY_ERROR if isinstance(exc, error_type)),
        500,
    )
    if status_code >= 500:
        logger.error("%s %s failed: %s", request.method, request.url.path, exc)
    return JSONResponse(status_code=status_code, content={"detail": str(exc)})


@app.on_event("startup")
async def startup_event():
    setup_logging()
    create_db_and_tables()
    if settings.seed_demo_data:
        seed_demo_data(engine)


@app.get("/")
def root():
    return {"service": "stockwise", "pages": [route.path for route in pages_api.router.routes]}
