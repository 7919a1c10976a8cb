# main.py
from __future__ import annotations

import json
import time
from contextlib import asynccontextmanager
from typing import Callable, Optional

from fastapi import FastAPI, Request
from fastapi.responses import ORJSONResponse

# Import logging utilities early so that the logger configuration is
# applied before any other modules emit log messages.
from balikobot.logging_config import configure_logging, logger
from balikobot.core.errors import (
    BalikobotError,
    CarrierRejectedError,
    EmptyResponseError,
    InvalidArgumentError,
    MalformedResponseError,
    TransportError,
)
from balikobot.routes.branches import router as branches_router
from balikobot.routes.catalog import router as catalog_router
from balikobot.routes.orders import router as orders_router
from balikobot.routes.packages import router as packages_router
from balikobot.services.balikobot_service import Balikobot

# Most specific first; anything else is a bad gateway.
ERROR_STATUS = (
    (InvalidArgumentError, 400),
    (CarrierRejectedError, 422),
    (TransportError, 503),
    (MalformedResponseError, 502),
    (EmptyResponseError, 502),
)


def error_status(exc: BalikobotError) -> int:
    for error_type, status_code in ERROR_STATUS:
        if isinstance(exc, error_type):
            return status_code
    return 502


def create_app(balikobot_factory: Optional[Callable[[], Balikobot]] = None) -> FastAPI:
    factory = balikobot_factory or Balikobot.from_settings

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        # one facade, one connection pool for the whole process
        app.state.balikobot = factory()
        try:
            yield
        finally:
            app.state.balikobot.close()

    app = FastAPI(default_response_class=ORJSONResponse, lifespan=lifespan)

    app.include_router(packages_router)
    app.include_router(orders_router)
    app.include_router(catalog_router)
    app.include_router(branches_router)

    @app.exception_handler(BalikobotError)
    async def handle_balikobot_error(request: Request, exc: BalikobotError):
        status_code = error_status(exc)
        logger.error(json.dumps({
            "event": "gateway_error",
            "path": request.url.path,
            "error": type(exc).__name__,
            "detail": str(exc),
            "status": status_code,
        }))
        return ORJSONResponse(
            status_code=status_code,
            content={
                "detail": exc.message,
                "status_code": exc.status_code,
                "response": exc.response,
            },
        )

    # -----------------------------------------------------------------
    # Request logging middleware
    # -----------------------------------------------------------------
    # Records path, method, status and processing time of every incoming
    # request as one JSON event.
    @app.middleware("http")  # type: ignore[misc]
    async def log_requests(request: Request, call_next):
        start_time = time.time()
        response = await call_next(request)
        duration_ms = (time.time() - start_time) * 1000
        logger.info(json.dumps({
            "event": "http_request",
            "path": request.url.path,
            "method": request.method,
            "status": response.status_code,
            "duration_ms": round(duration_ms, 2),
        }))
        return response

    return app


configure_logging()
app = create_app()
