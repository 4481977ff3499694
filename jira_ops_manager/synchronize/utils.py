"""Contains utility functions for synchronization actions."""

from typing import Any

import structlog

from jira_ops_manager.provider.schema import Schema
from jira_ops_manager.synchronize.models import SyncDecision

logger: structlog.stdlib.BoundLogger = structlog.get_logger(__name__)


async def value_is_noney(value: Any) -> bool:
    """Check if a value is None, an empty list, an empty string, or an empty dict."""
    if value is None:
        return True
    elif isinstance(value, list) and value == []:
        return True
    elif isinstance(value, str) and value == "":
        return True
    elif isinstance(value, dict) and not value:
        return True
    return False


async def compare_field(planned_value: Any, state_value: Any) -> SyncDecision:
    """Compare a planned value with a state value, and decide whether to update or no-op."""
    planned_value_is_noney = await value_is_noney(planned_value)
    state_value_is_noney = await value_is_noney(state_value)
    if planned_value_is_noney and state_value_is_noney:
        return SyncDecision.NOOP
    elif planned_value == state_value:
        return SyncDecision.NOOP
    return SyncDecision.UPDATE


async def decide_resource_sync_action(schema: Schema, planned: dict[str, Any], state: dict[str, Any] | None) -> SyncDecision:
    """Compare planned values and the current state, and decide whether to create, update, or no-op.

    Computed attributes without a planned value are known only after apply and are not compared.
    """
    if state is None:
        return SyncDecision.CREATE

    for name, attribute in schema.attributes.items():
        planned_value = planned.get(name)
        if planned_value is None and attribute.computed:
            continue
        if await compare_field(planned_value, state.get(name)) == SyncDecision.UPDATE:
            logger.info("Attribute differs from state", attribute=name, planned=planned_value, current=state.get(name))
            return SyncDecision.UPDATE
    return SyncDecision.NOOP
