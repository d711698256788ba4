"""
Middleware for request context and logging
"""

import json
import re
from collections.abc import Callable
from typing import Any

from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware

from .logging import clear_request_context, get_logger, start_request_context

logger = get_logger(__name__)

SENSITIVE_KEYS = {
    "password",
    "token",
    "api_key",
    "secret",
    "auth",
    "authorization",
    "access_token",
    "refresh_token",
    "key",
    "jwt",
    "session",
    "cookie",
    "credentials",
}

_OPERATION_PATTERN = re.compile(r"\b(query|mutation)\s+(\w+)")
_FIELD_PATTERN = re.compile(r"\{\s*(\w+)")


def sanitize_query_params(params: dict[str, Any]) -> dict[str, Any]:
    """Remove sensitive query parameters from logging.

    Args:
        params: Dictionary of query parameters

    Returns:
        Dictionary with sensitive parameters redacted
    """
    sanitized = {}
    for key, value in params.items():
        if any(sensitive in key.lower() for sensitive in SENSITIVE_KEYS):
            sanitized[key] = "[REDACTED]"
        else:
            sanitized[key] = value

    return sanitized


def operation_name_from_query(query: str) -> str:
    """Best-effort operation name for a GraphQL document.

    Prefers the declared operation name, then the first root field, so that
    anonymous documents such as ``{ getAllEmployees { _id } }`` still log usefully.
    """
    if "__schema" in query or "IntrospectionQuery" in query:
        return "__introspection"

    kind = "mutation:" if query.lstrip().startswith("mutation") else ""

    match = _OPERATION_PATTERN.search(query)
    if match:
        return f"{kind}{match.group(2)}"

    match = _FIELD_PATTERN.search(query)
    if match:
        return f"{kind}{match.group(1)}"
    return "unnamed_operation"


async def extract_graphql_operation_name(request: Request) -> str | None:
    if request.url.path != "/graphql":
        return None

    if request.method == "GET":
        params = dict(request.query_params)
        op = params.get("operationName")
        if isinstance(op, str) and op:
            return op
        q = params.get("query", "")
        if not isinstance(q, str) or not q:
            return None
        return operation_name_from_query(q)

    if request.method == "POST":
        try:
            body = await request.body()
            if not body:
                return None
            data = json.loads(body)
            if not isinstance(data, dict):
                return None
            op = data.get("operationName")
            if isinstance(op, str) and op:
                return op
            q = data.get("query", "")
            if not isinstance(q, str) or not q:
                return None
            return operation_name_from_query(q)
        except (json.JSONDecodeError, UnicodeDecodeError):
            return None

    return None


class LoggingContextMiddleware(BaseHTTPMiddleware):
    """Middleware to set logging context for each request."""

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        """Process request and set logging context."""
        request_id = start_request_context()

        try:
            sanitized_params = None
            if request.query_params:
                sanitized_params = sanitize_query_params(dict(request.query_params))
                # GraphQL GET requests carry arguments (passwords included) in the query string
                if request.url.path == "/graphql":
                    for k in ("query", "variables", "extensions"):
                        if k in sanitized_params:
                            sanitized_params[k] = "[REDACTED]"

            graphql_operation = await extract_graphql_operation_name(request)

            log_data = {
                "method": request.method,
                "path": request.url.path,
                "query_params": sanitized_params,
                "user_agent": request.headers.get("user-agent"),
                "remote_addr": request.client.host if request.client else None,
            }
            if graphql_operation:
                log_data["graphql_operation"] = graphql_operation

            logger.info("Request started", **log_data)

            response = await call_next(request)
            response.headers["X-Request-ID"] = request_id

            logger.info(
                "Request completed",
                status_code=response.status_code,
                method=request.method,
                path=request.url.path,
                graphql_operation=graphql_operation,
            )

            return response

        except Exception as e:
            logger.error(
                "Request failed",
                method=request.method,
                path=request.url.path,
                error=str(e),
            )
            raise

        finally:
            clear_request_context()
