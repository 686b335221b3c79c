# product_api/main.py
import logging
from contextlib import asynccontextmanager
from typing import Optional

import uvicorn
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from . import health, products
from .config import get_settings
from .database import Database
from .errors import ProductAPIError, StoreError
from .logging_setup import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    database: Database = app.state.database
    try:
        await database.create_schema()
    except Exception:
        logger.exception("Could not prepare the products table; is the database reachable?")
        raise
    logger.info("Product API started")
    yield
    logger.info("Product API shutting down")
    await database.dispose()


def _validation_message(exc: RequestValidationError) -> str:
    return "; ".join(
        f"{'.'.join(str(part) for part in err['loc'])}: {err['msg']}" for err in exc.errors()
    )


def register_error_handlers(app: FastAPI) -> None:
    @app.exception_handler(ProductAPIError)
    async def product_api_error_handler(request: Request, exc: ProductAPIError):
        if isinstance(exc, StoreError):
            logger.error("Store error on %s %s: %s", request.method, request.url.path, exc.message)
        else:
            logger.warning("%s on %s %s", exc.message, request.method, request.url.path)
        return JSONResponse(status_code=exc.status_code, content=exc.to_response())

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(request: Request, exc: RequestValidationError):
        message = _validation_message(exc)
        logger.warning("Bad request on %s %s: %s", request.method, request.url.path, message)
        return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content={"error": message})

    @app.exception_handler(StarletteHTTPException)
    async def http_error_handler(request: Request, exc: StarletteHTTPException):
        return JSONResponse(status_code=exc.status_code, content={"error": exc.detail}, headers=exc.headers)

    @app.exception_handler(Exception)
    async def unhandled_error_handler(request: Request, exc: Exception):
        logger.error("Unhandled exception on %s %s: %s", request.method, request.url.path, exc, exc_info=True)
        return JSONResponse(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, content={"error": str(exc)})


def create_app(database: Optional[Database] = None) -> FastAPI:
    settings = get_settings()
    setup_logging(settings.log_level)
    if database is None:
        database = Database(settings.database_url, echo=settings.sql_echo, pool_pre_ping=True)

    app = FastAPI(
        title="Product API",
        description="CRUD and simple filtering over the products table",
        version="1.0.0",
        lifespan=lifespan,
    )
    app.state.database = database

    app.include_router(health.router)
    app.include_router(products.router)
    register_error_handlers(app)
    return app


if __name__ == "__main__":
    settings = get_settings()
    uvicorn.run(create_app(), host=settings.host, port=settings.port)
