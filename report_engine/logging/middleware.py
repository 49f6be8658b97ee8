import time
import logging
import platform
import socket
from datetime import datetime
from typing import Callable

from fastapi import Request, Response
from starlette.background import BackgroundTask, BackgroundTasks
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.types import ASGIApp

from report_engine.core import database
from report_engine.core.config import APPLICATION_ID
from report_engine.core.context import system_username
from report_engine.logging.models import RequestLog

logger = logging.getLogger(__name__)

# Documentation endpoints are not worth a row each
EXCLUDED_PATHS = ("/api/docs", "/api/redoc", "/api/openapi.json")


def attach_background(response: Response, func: Callable) -> None:
    """Run func after the response is sent, after any task the response already carries."""
    existing = getattr(response, "background", None)
    if existing is None:
        response.background = BackgroundTask(func)
    elif isinstance(existing, BackgroundTasks):
        existing.add_task(func)
    else:
        tasks = BackgroundTasks()
        tasks.add_task(existing)
        tasks.add_task(func)
        response.background = tasks


def resolve_hostname() -> str:
    try:
        return socket.gethostname() or platform.node() or "unknown_host"
    except Exception:
        return "unknown_host"


class LoggingMiddleware(BaseHTTPMiddleware):
    """Writes one RequestLog row per API call once the response has been sent."""

    def __init__(self, app: ASGIApp, session_factory: Callable = None):
        super().__init__(app)
        # None means "database.SessionLocal at write time", so tests can swap it
        self.session_factory = session_factory
        self.service_user = system_username()
        self.hostname = resolve_hostname()
        self.application_id = APPLICATION_ID

        logger.info(
            "Logging middleware initialized for %s on host %s, App ID: %s",
            self.service_user,
            self.hostname,
            self.application_id,
        )

    def _open_session(self):
        factory = self.session_factory or database.SessionLocal
        return factory()

    async def dispatch(self, request: Request, call_next: Callable):
        if any(request.url.path.startswith(path) for path in EXCLUDED_PATHS):
            return await call_next(request)

        start_time = time.time()

        body_bytes = await request.body()
        request_body = body_bytes.decode("utf-8", errors="ignore")

        # Reconstruct stream for the endpoint
        async def receive() -> dict:
            return {"type": "http.request", "body": body_bytes}

        request = Request(request.scope, receive=receive)

        response = await call_next(request)

        duration_ms = (time.time() - start_time) * 1000
        status_code = response.status_code
        response_body = b""

        if isinstance(response, Response) and hasattr(response, "body"):
            response_body = response.body
        elif hasattr(response, "body_iterator"):
            original_iterator = response.body_iterator
            chunks = []

            async def buffer_iterator():
                nonlocal response_body
                async for chunk in original_iterator:
                    chunks.append(chunk)
                    yield chunk
                response_body = b"".join(chunks)

            response.body_iterator = buffer_iterator()

        username = request.headers.get("user") or self.service_user

        def log_to_db():
            try:
                with self._open_session() as session:
                    session.add(
                        RequestLog(
                            timestamp=datetime.now(),
                            method=request.method,
                            path=str(request.url.path),
                            query_string=request.url.query or None,
                            status_code=status_code,
                            client_ip=request.client.host if request.client else None,
                            request_body=request_body,
                            response_body=response_body.decode("utf-8", errors="ignore")
                            if response_body
                            else "[Response body not available]",
                            processing_time=duration_ms,
                            user_agent=request.headers.get("user-agent"),
                            username=username,
                            hostname=self.hostname,
                            application_id=self.application_id,
                        )
                    )
                    session.commit()
            except Exception:
                logger.exception("Could not log %s %s", request.method, request.url.path)

        attach_background(response, log_to_db)
        return response
