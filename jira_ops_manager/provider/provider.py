"""The Jira provider: configuration and the registry of data sources and resources."""

from typing import Self

import structlog

from jira_ops_manager.configuration.models import JiraAuthenticationType
from jira_ops_manager.jira.abc import JiraClientBase
from jira_ops_manager.jira.adapter import JiraRestAdapter
from jira_ops_manager.provider.base import DataSource, Resource
from jira_ops_manager.provider.context import DEFAULT_PROVIDER_TYPE_NAME, ProviderContext
from jira_ops_manager.provider.data_sources.issue_screen import JiraIssueScreenDataSource
from jira_ops_manager.provider.data_sources.status import JiraStatusDataSource
from jira_ops_manager.provider.data_sources.workflow_scheme import JiraWorkflowSchemeDataSource
from jira_ops_manager.provider.resources.project import JiraProjectResource

logger: structlog.stdlib.BoundLogger = structlog.get_logger(__name__)

DATA_SOURCE_TYPES: tuple[type[DataSource], ...] = (
    JiraIssueScreenDataSource,
    JiraStatusDataSource,
    JiraWorkflowSchemeDataSource,
)

RESOURCE_TYPES: tuple[type[Resource], ...] = (JiraProjectResource,)


class JiraProvider:
    """Builds handlers that share a single configured provider context."""

    def __init__(self, context: ProviderContext) -> None:
        """Initialize the provider with an already-configured context."""
        self.context = context
        self._data_sources: dict[str, DataSource] = {}
        self._resources: dict[str, Resource] = {}
        for data_source_type in DATA_SOURCE_TYPES:
            data_source = data_source_type(context)
            self._data_sources[data_source.type_name()] = data_source
        for resource_type in RESOURCE_TYPES:
            resource = resource_type(context)
            self._resources[resource.type_name()] = resource

    @classmethod
    def from_client(cls, client: JiraClientBase, type_name: str = DEFAULT_PROVIDER_TYPE_NAME) -> Self:
        """Create a provider around an existing Jira client."""
        return cls(ProviderContext(client=client, type_name=type_name))

    @classmethod
    async def configure(
        cls,
        jira_auth_type: JiraAuthenticationType,
        jira_api_url: str,
        jira_username: str | None = None,
        jira_api_token: str | None = None,
        jira_pat_token: str | None = None,
        timeout: float = 30.0,
        type_name: str = DEFAULT_PROVIDER_TYPE_NAME,
    ) -> Self:
        """Create a provider with an authenticated Jira client."""
        client = await JiraRestAdapter.create(
            jira_auth_type=jira_auth_type,
            jira_api_url=jira_api_url,
            jira_username=jira_username,
            jira_api_token=jira_api_token,
            jira_pat_token=jira_pat_token,
            timeout=timeout,
        )
        logger.info("Configured Jira provider", type_name=type_name, jira_api_url=jira_api_url)
        return cls.from_client(client, type_name=type_name)

    @property
    def data_sources(self) -> dict[str, DataSource]:
        """Data sources keyed by type name."""
        return dict(self._data_sources)

    @property
    def resources(self) -> dict[str, Resource]:
        """Resources keyed by type name."""
        return dict(self._resources)

    def get_data_source(self, type_name: str) -> DataSource:
        """Return the data source registered under ``type_name``."""
        try:
            return self._data_sources[type_name]
        except KeyError:
            raise ValueError(f"Unknown data source type '{type_name}'. Known types: {', '.join(sorted(self._data_sources))}") from None

    def get_resource(self, type_name: str) -> Resource:
        """Return the resource registered under ``type_name``."""
        try:
            return self._resources[type_name]
        except KeyError:
            raise ValueError(f"Unknown resource type '{type_name}'. Known types: {', '.join(sorted(self._resources))}") from None

    async def aclose(self) -> None:
        """Close the Jira client if it holds network resources."""
        if isinstance(self.context.client, JiraRestAdapter):
            await self.context.client.aclose()
