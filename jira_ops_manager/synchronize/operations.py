"""Runs handler operations with a timeout and converts failures into error entries."""

import asyncio
from typing import Any, Awaitable, TypeVar

import structlog

from jira_ops_manager.provider.exceptions import JiraOpsError

logger: structlog.stdlib.BoundLogger = structlog.get_logger(__name__)

T = TypeVar("T")

OPERATION_ERRORS = (JiraOpsError, TimeoutError, ValueError)


async def run_operation(operation: Awaitable[T], timeout: float | None) -> T:
    """Await a handler operation, cancelling it once ``timeout`` seconds have elapsed."""
    return await asyncio.wait_for(operation, timeout=timeout)


def error_entry(address: str, operation: str, exc: Exception) -> dict[str, Any]:
    """Convert an operation failure into an error entry for results and logging."""
    if isinstance(exc, JiraOpsError):
        entry: dict[str, Any] = exc.as_dict()
    elif isinstance(exc, TimeoutError):
        entry = {"summary": "Operation Timeout", "detail": f"The {operation} operation did not complete in time.", "attribute": None}
    else:
        entry = {"summary": type(exc).__name__, "detail": str(exc), "attribute": None}
    entry["address"] = address
    entry["operation"] = operation
    logger.error("Operation failed", **entry)
    return entry
