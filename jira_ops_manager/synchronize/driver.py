"""Orchestrates the synchronization of Jira objects."""

import time
from pathlib import Path
from typing import Any

import structlog

from jira_ops_manager.processing.exceptions import DeclarationProcessingError
from jira_ops_manager.processing.yaml_processor import DeclarationsProcessor
from jira_ops_manager.provider.provider import JiraProvider
from jira_ops_manager.synchronize.data_sources import read_data_source, read_data_sources
from jira_ops_manager.synchronize.models import SyncDecision
from jira_ops_manager.synchronize.operations import OPERATION_ERRORS, error_entry
from jira_ops_manager.synchronize.resources import delete_resource, refresh_resource, sync_resources
from jira_ops_manager.synchronize.results import ApplyResult, ResourceSynchronizationResult
from jira_ops_manager.synchronize.state import StateFile

logger: structlog.stdlib.BoundLogger = structlog.get_logger(__name__)


async def run_apply_workflow(
    provider: JiraProvider,
    yaml_paths: list[Path],
    state_path: Path,
    timeout: float | None = None,
    raise_on_yaml_error: bool = True,
) -> ApplyResult:
    """Run the apply workflow: load declarations, read data sources, synchronize resources and save state."""
    processor = DeclarationsProcessor(raise_on_error=raise_on_yaml_error)
    try:
        declarations = processor.load_declarations_model([str(path) for path in yaml_paths])
    except DeclarationProcessingError as e:
        return ApplyResult(errors=e.errors)

    state = StateFile.load(state_path)

    start_time = time.time()
    logger.info("Reading data sources", data_source_count=len(declarations.data))
    data, data_errors = await read_data_sources(declarations.data, provider, timeout)

    logger.info("Processing resources", resource_count=len(declarations.resources))
    results, resource_state, resource_errors = await sync_resources(declarations.resources, state.resources, provider, timeout)
    end_time = time.time()
    logger.info(
        "Processed resources",
        duration=round(end_time - start_time, 2),
        created=sum(1 for r in results if r.decision == SyncDecision.CREATE),
        updated=sum(1 for r in results if r.decision == SyncDecision.UPDATE),
        deleted=sum(1 for r in results if r.decision == SyncDecision.DELETE),
        error_count=len(data_errors) + len(resource_errors),
    )

    state.resources = resource_state
    state.data = data
    state.save(state_path)
    return ApplyResult(results=results, data=data, errors=data_errors + resource_errors)


async def run_destroy_workflow(provider: JiraProvider, state_path: Path, timeout: float | None = None) -> ApplyResult:
    """Delete every resource recorded in state."""
    state = StateFile.load(state_path)
    results: list[ResourceSynchronizationResult] = []
    errors: list[dict[str, Any]] = []
    for address in sorted(state.resources):
        logger.info("Destroying resource", address=address)
        try:
            await delete_resource(provider, address, state.resources[address], timeout)
        except OPERATION_ERRORS as exc:
            errors.append(error_entry(address, "delete", exc))
            continue
        del state.resources[address]
        results.append(ResourceSynchronizationResult(address, SyncDecision.DELETE, None))
    state.save(state_path)
    return ApplyResult(results=results, errors=errors)


async def run_import_workflow(
    provider: JiraProvider,
    address: str,
    entity_id: str,
    state_path: Path,
    timeout: float | None = None,
) -> ApplyResult:
    """Import an existing Jira entity into state under ``address``."""
    state = StateFile.load(state_path)
    if address in state.resources:
        return ApplyResult(
            errors=[{"address": address, "operation": "import", "summary": "Resource already managed", "detail": f"{address} is already in state."}]
        )
    try:
        type_name, _ = address.split(".", 1)
        resource = provider.get_resource(type_name)
        imported = await resource.import_state(entity_id)
        refreshed = await refresh_resource(provider, address, imported.model_dump(), timeout)
    except OPERATION_ERRORS as exc:
        return ApplyResult(errors=[error_entry(address, "import", exc)])
    state.resources[address] = refreshed
    state.save(state_path)
    logger.info("Imported resource", address=address, entity_id=entity_id)
    return ApplyResult(results=[ResourceSynchronizationResult(address, SyncDecision.NOOP, refreshed)])


async def run_lookup_workflow(provider: JiraProvider, type_name: str, entity_id: str, timeout: float | None = None) -> dict[str, Any]:
    """Look up a single data source by ID and return its record."""
    return await read_data_source(provider, type_name, {"id": entity_id}, timeout)
