# report_engine/logging/exception_handlers.py

import json
import logging
import traceback
from datetime import datetime

from fastapi import Request, HTTPException
from fastapi.exceptions import ResponseValidationError, RequestValidationError
from fastapi.responses import JSONResponse

from report_engine.core import database
from report_engine.core.config import APPLICATION_ID
from report_engine.core.context import system_username
from report_engine.logging.middleware import resolve_hostname
from report_engine.logging.models import RequestLog

logger = logging.getLogger(__name__)


def safe_json_dumps(obj) -> str:
    return json.dumps(obj, indent=2, default=str)


def convert_error(error):
    """Make pydantic error payloads JSON-safe (ctx may hold exceptions)."""
    if isinstance(error, dict):
        return {k: convert_error(v) for k, v in error.items()}
    if isinstance(error, (list, tuple)):
        return [convert_error(item) for item in error]
    if isinstance(error, (str, int, float, bool)) or error is None:
        return error
    return str(error)


async def general_exception_handler(request: Request, exc: Exception):
    """Unhandled exceptions never reach the middleware, so they are logged here."""
    error_traceback = "".join(traceback.format_exception(type(exc), exc, exc.__traceback__))
    logger.error("Unhandled error on %s %s: %s", request.method, request.url.path, exc)

    try:
        with database.SessionLocal() as session:
            session.add(
                RequestLog(
                    timestamp=datetime.now(),
                    method=request.method,
                    path=str(request.url.path),
                    query_string=request.url.query or None,
                    status_code=500,
                    client_ip=request.client.host if request.client else None,
                    request_body=None,
                    response_body=safe_json_dumps(
                        {"error": str(exc), "type": type(exc).__name__, "traceback": error_traceback}
                    ),
                    processing_time=None,
                    user_agent=request.headers.get("user-agent"),
                    username=request.headers.get("user") or system_username(),
                    hostname=resolve_hostname(),
                    application_id=APPLICATION_ID,
                )
            )
            session.commit()
    except Exception as log_error:
        logger.error("Error logging exception: %s", log_error)

    return JSONResponse(status_code=500, content={"detail": "Internal Server Error"})


async def response_validation_exception_handler(request: Request, exc: ResponseValidationError):
    logger.error("Response validation failed on %s: %s", request.url.path, exc.errors())
    return JSONResponse(
        status_code=500,
        content={"detail": "Internal Server Error: Response validation failed."},
    )


async def request_validation_exception_handler(request: Request, exc: RequestValidationError):
    """Malformed bodies or out-of-range page_index/size."""
    safe_errors = convert_error(exc.errors())
    logger.info("Request validation failed on %s: %s", request.url.path, safe_errors)
    return JSONResponse(status_code=422, content={"detail": safe_errors})


async def http_exception_handler(request: Request, exc: HTTPException):
    if exc.status_code >= 500:
        logger.error("HTTP %d on %s: %s", exc.status_code, request.url.path, exc.detail)
    elif exc.status_code >= 400:
        logger.info("HTTP %d on %s: %s", exc.status_code, request.url.path, exc.detail)

    return JSONResponse(
        status_code=exc.status_code,
        content={"detail": exc.detail},
        headers=getattr(exc, "headers", None),
    )
