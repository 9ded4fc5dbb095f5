"""Structured error bodies and logging for the API exception handlers."""
from __future__ import annotations

import logging
from typing import Any

logger = logging.getLogger(__name__)


def node_for_path(path: str) -> str:
    """API area a request path belongs to: stories, tables or api."""
    if "/stories" in path:
        return "stories"
    if "/table" in path or path.startswith("/database/list"):
        return "tables"
    return "api"


def log_error_with_context(error: Exception, node_name: str, path: str, method: str) -> None:
    logger.error(
        "[%s] %s: %s (%s %s)",
        node_name,
        type(error).__name__,
        error,
        method,
        path,
        exc_info=error,
        extra={"node_name": node_name, "request_path": path, "request_method": method},
    )


def create_error_response(
    error_code: str,
    message: str,
    node: str,
    details: dict[str, Any],
) -> dict[str, Any]:
    return {"error_code": error_code, "message": message, "node": node, "details": details}
