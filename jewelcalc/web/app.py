"""FastAPI application for the JewelCalc catalog API."""

from __future__ import annotations

from contextlib import asynccontextmanager
from uuid import uuid4

import structlog
from fastapi import FastAPI, HTTPException, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from prometheus_fastapi_instrumentator import Instrumentator
from sqlalchemy.exc import IntegrityError, InterfaceError, OperationalError, SQLAlchemyError
from starlette.middleware.base import BaseHTTPMiddleware

from jewelcalc import __version__
from jewelcalc.core.logging import configure_logging
from jewelcalc.db.connection import close_db
from jewelcalc.errors import CatalogError
from jewelcalc.web.routes import auth, diamonds, health, inventory, metals, products

# Initialize structured logging
configure_logging()
logger = structlog.get_logger()

UNIQUE_VIOLATION = "23505"


@asynccontextmanager
async def lifespan(app: FastAPI):
    yield
    await close_db()


app = FastAPI(
    title="JewelCalc Catalog API",
    description="Jewellery catalog with derived sale pricing",
    version=__version__,
    docs_url="/docs",
    redoc_url="/redoc",
    lifespan=lifespan,
)


# Request Logging Middleware
class RequestLoggingMiddleware(BaseHTTPMiddleware):
    async def dispatch(self, request: Request, call_next):
        structlog.contextvars.clear_contextvars()

        request_id = request.headers.get("X-Request-ID", str(uuid4()))
        structlog.contextvars.bind_contextvars(request_id=request_id)

        logger.info(
            "request_started",
            method=request.method,
            path=request.url.path,
            client_ip=request.client.host if request.client else None,
        )

        try:
            response = await call_next(request)

            logger.info("request_completed", status_code=response.status_code)
            return response

        except Exception as exc:
            logger.error("request_failed", error=str(exc))
            raise


app.add_middleware(RequestLoggingMiddleware)

# Prometheus Metrics
Instrumentator().instrument(app).expose(app)


# Exception Handlers
def _error(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"success": False, "message": message})


def _is_unique_violation(exc: IntegrityError) -> bool:
    orig = exc.orig
    code = getattr(orig, "sqlstate", None) or getattr(orig, "pgcode", None)
    if code is not None:
        return code == UNIQUE_VIOLATION
    return "unique" in str(orig).lower()


@app.exception_handler(HTTPException)
async def http_exception_handler(request: Request, exc: HTTPException):
    return _error(exc.status_code, str(exc.detail))


@app.exception_handler(RequestValidationError)
async def validation_error_handler(request: Request, exc: RequestValidationError):
    logger.warning("validation_error", path=request.url.path, errors=len(exc.errors()))
    return JSONResponse(
        status_code=422,
        content={
            "success": False,
            "message": "Invalid request body or parameters",
            "errors": jsonable_encoder(exc.errors()),
        },
    )


@app.exception_handler(CatalogError)
async def catalog_error_handler(request: Request, exc: CatalogError):
    logger.warning("catalog_error", error_type=type(exc).__name__, error=str(exc))
    return _error(exc.status_code, str(exc))


@app.exception_handler(IntegrityError)
async def integrity_error_handler(request: Request, exc: IntegrityError):
    logger.warning("integrity_error", error=str(exc.orig))
    if _is_unique_violation(exc):
        return _error(409, "Duplicate entry. This record already exists.")
    return _error(400, "Invalid reference or missing required field.")


@app.exception_handler(SQLAlchemyError)
async def database_error_handler(request: Request, exc: SQLAlchemyError):
    logger.error("database_error", error=str(exc))
    if isinstance(exc, (OperationalError, InterfaceError)):
        return _error(503, "Database connection failed. Please try again later.")
    return _error(500, "Database operation failed")


# Include Routers
app.include_router(health.router)
app.include_router(auth.router)
app.include_router(products.router)
app.include_router(metals.router)
app.include_router(diamonds.router)
app.include_router(inventory.router)
