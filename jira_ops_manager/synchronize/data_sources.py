"""Contains the lookup logic for data sources."""

from typing import Any

import structlog

from jira_ops_manager.provider.provider import JiraProvider
from jira_ops_manager.schemas.declarations import DeclarationModel
from jira_ops_manager.synchronize.operations import OPERATION_ERRORS, error_entry, run_operation

logger: structlog.stdlib.BoundLogger = structlog.get_logger(__name__)


async def read_data_source(provider: JiraProvider, type_name: str, config: dict[str, Any], timeout: float | None = None) -> dict[str, Any]:
    """Validate a data source configuration, read it, and return the resulting record."""
    data_source = provider.get_data_source(type_name)
    data_source.schema.validate_config(config)
    record = await run_operation(data_source.read(data_source.model(**config)), timeout)
    return record.model_dump()


async def read_data_sources(
    declarations: list[DeclarationModel],
    provider: JiraProvider,
    timeout: float | None = None,
) -> tuple[dict[str, dict[str, Any]], list[dict[str, Any]]]:
    """Read every declared data source. Each read re-fetches from Jira."""
    records: dict[str, dict[str, Any]] = {}
    errors: list[dict[str, Any]] = []
    for declaration in declarations:
        logger.info("Reading data source", address=declaration.address)
        try:
            records[declaration.address] = await read_data_source(provider, declaration.type, declaration.config, timeout)
        except OPERATION_ERRORS as exc:
            errors.append(error_entry(declaration.address, "read", exc))
    return records, errors
