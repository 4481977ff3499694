"""Defines the Command Line Interface (CLI) using Typer."""

import asyncio
import logging
import sys
from pathlib import Path
from typing import Any, Awaitable, Callable, TypeVar

import structlog
import typer
from dotenv import load_dotenv
from typer import Argument, Option
from typing_extensions import Annotated

from jira_ops_manager.configuration.env import settings
from jira_ops_manager.configuration.exceptions import (
    JiraAuthenticationConfigurationUndefinedError,
    RequiredConfigurationElementError,
)
from jira_ops_manager.configuration.reconcile import validate_jira_api_url, validate_jira_authentication_configuration
from jira_ops_manager.provider.context import DEFAULT_PROVIDER_TYPE_NAME
from jira_ops_manager.provider.exceptions import JiraOpsError
from jira_ops_manager.provider.provider import DATA_SOURCE_TYPES, RESOURCE_TYPES, JiraProvider
from jira_ops_manager.synchronize.driver import run_apply_workflow, run_destroy_workflow, run_import_workflow, run_lookup_workflow
from jira_ops_manager.synchronize.models import SyncDecision
from jira_ops_manager.synchronize.results import ApplyResult
from jira_ops_manager.utils.yaml import dump_yaml_to_stream

load_dotenv()

typer_app = typer.Typer(pretty_exceptions_show_locals=False, help="Synchronize declarative Jira configuration.")

T = TypeVar("T")


def configure_logging(debug: bool) -> None:
    """Configure structlog to filter below DEBUG or INFO."""
    structlog.configure(wrapper_class=structlog.make_filtering_bound_logger(logging.DEBUG if debug else logging.INFO))


def main_callback(
    ctx: typer.Context,
    jira_api_url: Annotated[str | None, Option(envvar="JIRA_API_URL", help="Jira site URL, e.g. https://example.atlassian.net.")] = settings.JIRA_API_URL,
    jira_username: Annotated[str | None, Option(envvar="JIRA_USERNAME", help="Account email for basic authentication.")] = settings.JIRA_USERNAME,
    jira_api_token: Annotated[str | None, Option(envvar="JIRA_API_TOKEN", help="API token for basic authentication.")] = settings.JIRA_API_TOKEN,
    jira_pat_token: Annotated[str | None, Option(envvar="JIRA_PAT_TOKEN", help="Jira Personal Access Token.")] = settings.JIRA_PAT_TOKEN,
    timeout: Annotated[float, Option(envvar="JIRA_TIMEOUT", help="Timeout in seconds for each operation.")] = settings.JIRA_TIMEOUT,
    provider_type_name: Annotated[
        str, Option(envvar="JIRA_PROVIDER_TYPE_NAME", help="Prefix of every data source and resource type name.")
    ] = settings.JIRA_PROVIDER_TYPE_NAME,
    debug: Annotated[bool, Option(envvar="DEBUG", help="Enable debug logging.")] = settings.DEBUG,
) -> None:
    """Store the Jira connection settings for the current context."""
    configure_logging(debug)
    ctx.ensure_object(dict)
    ctx.obj["jira_api_url"] = jira_api_url
    ctx.obj["jira_username"] = jira_username
    ctx.obj["jira_api_token"] = jira_api_token
    ctx.obj["jira_pat_token"] = jira_pat_token
    ctx.obj["timeout"] = timeout
    ctx.obj["provider_type_name"] = provider_type_name


typer_app.callback()(main_callback)


async def _configure_provider(obj: dict[str, Any]) -> JiraProvider:
    jira_api_url = await validate_jira_api_url(obj["jira_api_url"])
    jira_auth_type = await validate_jira_authentication_configuration(
        jira_username=obj["jira_username"],
        jira_api_token=obj["jira_api_token"],
        jira_pat_token=obj["jira_pat_token"],
    )
    return await JiraProvider.configure(
        jira_auth_type=jira_auth_type,
        jira_api_url=jira_api_url,
        jira_username=obj["jira_username"],
        jira_api_token=obj["jira_api_token"],
        jira_pat_token=obj["jira_pat_token"],
        timeout=obj["timeout"],
        type_name=obj["provider_type_name"],
    )


def run_with_provider(ctx: typer.Context, workflow: Callable[[JiraProvider], Awaitable[T]]) -> T:
    """Configure the provider, run ``workflow`` with it, and close it afterwards."""

    async def runner() -> T:
        provider = await _configure_provider(ctx.obj)
        try:
            return await workflow(provider)
        finally:
            await provider.aclose()

    try:
        return asyncio.run(runner())
    except (JiraAuthenticationConfigurationUndefinedError, RequiredConfigurationElementError) as e:
        typer.echo(f"Configuration error: {e}", err=True)
        sys.exit(2)


def report_result(result: ApplyResult) -> None:
    """Print a summary of the result and exit non-zero on errors."""
    for resource_result in result.results:
        typer.echo(f"{resource_result.address}: {resource_result.decision.value}")
    typer.echo(
        f"Created: {result.count(SyncDecision.CREATE)}, updated: {result.count(SyncDecision.UPDATE)}, "
        f"unchanged: {result.count(SyncDecision.NOOP)}, deleted: {result.count(SyncDecision.DELETE)}"
    )
    if result.errors:
        typer.echo("Error(s) encountered:", err=True)
        for err in result.errors:
            location = err.get("address") or err.get("file")
            attribute = f" (attribute {err['attribute']})" if err.get("attribute") else ""
            typer.echo(f"  {location}{attribute}: {err.get('summary') or 'Invalid declarations'}: {err.get('detail', err.get('error'))}", err=True)
        sys.exit(1)


@typer_app.command(name="apply")
def apply_cli(
    ctx: typer.Context,
    yaml_paths: Annotated[list[Path], Argument(help="YAML files declaring data sources and resources.")],
    state_path: Annotated[Path, Option(envvar="STATE_PATH", help="Path to the state file.")] = Path("jira-state.yaml"),
) -> None:
    """Synchronize declared Jira resources and read declared data sources."""
    for yaml_path in yaml_paths:
        if not yaml_path.exists():
            error = f"YAML file not found: {yaml_path.absolute()}"
            typer.echo(error, err=True)
            raise FileNotFoundError(error)

    result = run_with_provider(
        ctx,
        lambda provider: run_apply_workflow(provider, yaml_paths, state_path, timeout=ctx.obj["timeout"]),
    )
    report_result(result)


@typer_app.command(name="destroy")
def destroy_cli(
    ctx: typer.Context,
    state_path: Annotated[Path, Option(envvar="STATE_PATH", help="Path to the state file.")] = Path("jira-state.yaml"),
) -> None:
    """Delete every Jira resource recorded in the state file."""
    result = run_with_provider(ctx, lambda provider: run_destroy_workflow(provider, state_path, timeout=ctx.obj["timeout"]))
    report_result(result)


@typer_app.command(name="import-project")
def import_project_cli(
    ctx: typer.Context,
    name: Annotated[str, Argument(help="Name of the project declaration.")],
    project_id: Annotated[str, Argument(help="ID of the existing Jira project.")],
    state_path: Annotated[Path, Option(envvar="STATE_PATH", help="Path to the state file.")] = Path("jira-state.yaml"),
) -> None:
    """Import an existing Jira project into the state file."""
    address = f"{ctx.obj['provider_type_name']}_jira_project.{name}"
    result = run_with_provider(
        ctx,
        lambda provider: run_import_workflow(provider, address, project_id, state_path, timeout=ctx.obj["timeout"]),
    )
    report_result(result)


@typer_app.command(name="lookup")
def lookup_cli(
    ctx: typer.Context,
    kind: Annotated[str, Argument(help="Data source kind: status, issue_screen or workflow_scheme.")],
    entity_id: Annotated[str, Argument(help="ID of the entity to look up.")],
) -> None:
    """Look up a single Jira status, issue screen or workflow scheme."""
    type_name = f"{ctx.obj['provider_type_name']}_jira_{kind}"
    try:
        record = run_with_provider(ctx, lambda provider: run_lookup_workflow(provider, type_name, entity_id, timeout=ctx.obj["timeout"]))
    except (JiraOpsError, TimeoutError, ValueError) as e:
        typer.echo(f"Lookup failed: {e}", err=True)
        sys.exit(1)
    dump_yaml_to_stream(record, sys.stdout)


@typer_app.command(name="schema")
def schema_cli(ctx: typer.Context) -> None:
    """Print the schema of every data source and resource."""
    prefix = ctx.obj.get("provider_type_name", DEFAULT_PROVIDER_TYPE_NAME)
    schemas = {
        "data_sources": {handler_type(None).type_name(prefix): handler_type.schema.describe() for handler_type in DATA_SOURCE_TYPES},
        "resources": {handler_type(None).type_name(prefix): handler_type.schema.describe() for handler_type in RESOURCE_TYPES},
    }
    dump_yaml_to_stream(schemas, sys.stdout)


if __name__ == "__main__":
    typer_app()
