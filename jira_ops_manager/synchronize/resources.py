"""Contains synchronization logic for resources."""

from typing import Any

import structlog

from jira_ops_manager.provider.provider import JiraProvider
from jira_ops_manager.schemas.declarations import DeclarationModel
from jira_ops_manager.synchronize.models import SyncDecision
from jira_ops_manager.synchronize.operations import OPERATION_ERRORS, error_entry, run_operation
from jira_ops_manager.synchronize.results import ResourceSynchronizationResult
from jira_ops_manager.synchronize.state import StateRecords
from jira_ops_manager.synchronize.utils import decide_resource_sync_action

logger: structlog.stdlib.BoundLogger = structlog.get_logger(__name__)


def resource_type_from_address(address: str) -> str:
    """Return the type part of a ``<type>.<name>`` address."""
    return address.split(".", 1)[0]


async def refresh_resource(provider: JiraProvider, address: str, state: dict[str, Any], timeout: float | None = None) -> dict[str, Any]:
    """Read a resource's current state from Jira."""
    resource = provider.get_resource(resource_type_from_address(address))
    refreshed = await run_operation(resource.read(resource.model(**state)), timeout)
    return refreshed.model_dump()


async def sync_resource(
    provider: JiraProvider,
    declaration: DeclarationModel,
    prior_state: dict[str, Any] | None,
    timeout: float | None = None,
) -> ResourceSynchronizationResult:
    """Refresh, plan, and create or update a single declared resource.

    Raises the first error encountered; nothing is returned for a failed resource.
    """
    resource = provider.get_resource(declaration.type)
    resource.schema.validate_config(declaration.config)

    current_state = prior_state
    if current_state is not None:
        current_state = await refresh_resource(provider, declaration.address, current_state, timeout)

    planned = resource.schema.plan(declaration.config, current_state)
    decision = await decide_resource_sync_action(resource.schema, planned, current_state)
    logger.info("Decided resource sync action", address=declaration.address, decision=decision.value)

    if decision == SyncDecision.CREATE:
        new_state = await run_operation(resource.create(resource.model(**planned)), timeout)
    elif decision == SyncDecision.UPDATE:
        new_state = await run_operation(resource.update(resource.model(**planned), resource.model(**current_state)), timeout)
    else:
        return ResourceSynchronizationResult(declaration.address, decision, current_state)
    return ResourceSynchronizationResult(declaration.address, decision, new_state.model_dump())


async def delete_resource(provider: JiraProvider, address: str, state: dict[str, Any], timeout: float | None = None) -> None:
    """Delete a resource that is no longer declared."""
    resource = provider.get_resource(resource_type_from_address(address))
    await run_operation(resource.delete(resource.model(**state)), timeout)


async def sync_resources(
    declarations: list[DeclarationModel],
    state: StateRecords,
    provider: JiraProvider,
    timeout: float | None = None,
) -> tuple[list[ResourceSynchronizationResult], StateRecords, list[dict[str, Any]]]:
    """Synchronize every declared resource and delete resources that are no longer declared.

    A failed operation leaves that resource's prior state untouched.
    """
    results: list[ResourceSynchronizationResult] = []
    errors: list[dict[str, Any]] = []
    new_state: StateRecords = dict(state)

    for declaration in declarations:
        logger.info("Processing resource", address=declaration.address)
        try:
            result = await sync_resource(provider, declaration, state.get(declaration.address), timeout)
        except OPERATION_ERRORS as exc:
            errors.append(error_entry(declaration.address, "sync", exc))
            continue
        results.append(result)
        if result.state is not None:
            new_state[declaration.address] = result.state

    declared_addresses = {declaration.address for declaration in declarations}
    for address in sorted(set(state) - declared_addresses):
        logger.info("Resource is no longer declared", address=address)
        try:
            await delete_resource(provider, address, state[address], timeout)
        except OPERATION_ERRORS as exc:
            errors.append(error_entry(address, "delete", exc))
            continue
        del new_state[address]
        results.append(ResourceSynchronizationResult(address, SyncDecision.DELETE, None))

    return results, new_state, errors
