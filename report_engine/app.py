"""FastAPI application entry point for the report engine."""

from fastapi import FastAPI, HTTPException
from fastapi.exceptions import ResponseValidationError, RequestValidationError
from fastapi.middleware.cors import CORSMiddleware

from report_engine.core.database import init_db
from report_engine.core.router import register_routes
from report_engine.logging.middleware import LoggingMiddleware
from report_engine.logging.exception_handlers import (
    response_validation_exception_handler,
    request_validation_exception_handler,
    general_exception_handler,
    http_exception_handler,
)


def create_app() -> FastAPI:

    app = FastAPI(
        title="Report Engine",
        docs_url="/api/docs",
        redoc_url="/api/redoc",
        openapi_url="/api/openapi.json",
    )
    init_db()

    app.add_middleware(LoggingMiddleware)

    # Unhandled exceptions and response validation errors bypass the middleware log
    app.add_exception_handler(ResponseValidationError, response_validation_exception_handler)
    app.add_exception_handler(RequestValidationError, request_validation_exception_handler)
    app.add_exception_handler(Exception, general_exception_handler)
    app.add_exception_handler(HTTPException, http_exception_handler)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],  # In production, replace with specific origins
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_routes(app)

    return app
