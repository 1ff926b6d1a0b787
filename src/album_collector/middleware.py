"""
Middleware for request context and logging
"""

import json
import re
import time
from collections.abc import Callable
from typing import Any

from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.types import ASGIApp

from .logging import clear_request_context, get_logger, set_request_context

logger = get_logger(__name__)

SENSITIVE_KEYS = {
    "password",
    "token",
    "api_key",
    "secret",
    "auth",
    "authorization",
    "access_token",
    "key",
    "session",
    "cookie",
    "credentials",
}

REQUEST_ID_HEADER = "X-Request-ID"


def sanitize_query_params(params: dict[str, Any]) -> dict[str, Any]:
    """Redact query parameters whose names look sensitive."""
    sanitized = {}
    for key, value in params.items():
        if any(sensitive in key.lower() for sensitive in SENSITIVE_KEYS):
            sanitized[key] = "[REDACTED]"
        else:
            sanitized[key] = value
    return sanitized


def _operation_from_query(query: Any) -> str | None:
    if not isinstance(query, str) or not query:
        return None
    if "__schema" in query or "IntrospectionQuery" in query:
        return "__introspection"

    match = re.search(r"\bquery\s+(\w+)", query) or re.search(r"\bmutation\s+(\w+)", query)
    if match:
        kind = "mutation:" if query.lstrip().startswith("mutation") else ""
        return f"{kind}{match.group(1)}"
    return "unnamed_operation"


async def extract_graphql_operation_name(request: Request) -> str | None:
    """Best-effort GraphQL operation name for GET and POST /graphql requests."""
    if request.url.path != "/graphql":
        return None

    if request.method == "GET":
        params = dict(request.query_params)
        op = params.get("operationName")
        if isinstance(op, str) and op:
            return op
        return _operation_from_query(params.get("query"))

    if request.method == "POST":
        body = await request.body()
        if not body:
            return None
        try:
            data = json.loads(body)
        except (json.JSONDecodeError, UnicodeDecodeError):
            return None
        if not isinstance(data, dict):
            return None
        op = data.get("operationName")
        if isinstance(op, str) and op:
            return op
        return _operation_from_query(data.get("query"))

    return None


class LoggingContextMiddleware(BaseHTTPMiddleware):
    """Bind a request id and the serving application to every log line of a request.

    The id comes from the ``X-Request-ID`` header when the caller sends one and
    is echoed back on the response.
    """

    def __init__(self, app: ASGIApp, service: str | None = None):
        super().__init__(app)
        self.service = service

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        request_id = set_request_context(request.headers.get(REQUEST_ID_HEADER), self.service)
        started = time.perf_counter()

        try:
            query_params = None
            if request.query_params:
                query_params = sanitize_query_params(dict(request.query_params))
                # Never log raw GraphQL documents passed in the query string
                if request.url.path == "/graphql":
                    for k in ("query", "variables", "extensions"):
                        if k in query_params:
                            query_params[k] = "[REDACTED]"

            graphql_operation = await extract_graphql_operation_name(request)

            logger.info(
                "Request started",
                method=request.method,
                path=request.url.path,
                query_params=query_params,
                remote_addr=request.client.host if request.client else None,
                graphql_operation=graphql_operation,
            )

            response = await call_next(request)
            response.headers[REQUEST_ID_HEADER] = request_id

            logger.info(
                "Request completed",
                status_code=response.status_code,
                method=request.method,
                path=request.url.path,
                graphql_operation=graphql_operation,
                duration_ms=round((time.perf_counter() - started) * 1000, 2),
            )
            return response

        except Exception as e:
            logger.error(
                "Request failed",
                method=request.method,
                path=request.url.path,
                error=str(e),
                duration_ms=round((time.perf_counter() - started) * 1000, 2),
            )
            raise

        finally:
            clear_request_context()
