"""Base classes for data sources and resources."""

from abc import ABC, abstractmethod
from typing import ClassVar, Generic, TypeVar

from jira_ops_manager.jira.abc import JiraClientBase
from jira_ops_manager.provider.context import ProviderContext
from jira_ops_manager.provider.exceptions import ProviderConfigurationError
from jira_ops_manager.provider.models import RecordModel
from jira_ops_manager.provider.schema import Schema

ModelT = TypeVar("ModelT", bound=RecordModel)


class Handler(ABC, Generic[ModelT]):
    """Common behaviour of data sources and resources."""

    type_name_suffix: ClassVar[str]
    schema: ClassVar[Schema]
    model: ClassVar[type[RecordModel]]

    def __init__(self, context: ProviderContext | None = None) -> None:
        """Initialize the handler with the shared provider context."""
        self._context = context

    def type_name(self, provider_type_name: str | None = None) -> str:
        """Return the full type name, e.g. ``atlassian_jira_project``."""
        if provider_type_name is None:
            provider_type_name = self._context.type_name if self._context else "atlassian"
        return provider_type_name + self.type_name_suffix

    @property
    def client(self) -> JiraClientBase:
        """The configured Jira client."""
        if self._context is None:
            raise ProviderConfigurationError(
                "Unconfigured Provider",
                f"{type(self).__name__} was used before the provider was configured.",
            )
        return self._context.client


class DataSource(Handler[ModelT]):
    """A read-only lookup of a Jira entity."""

    @abstractmethod
    async def read(self, config: ModelT) -> ModelT:
        """Produce a fully populated record from a configuration holding only an ID."""
        pass


class Resource(Handler[ModelT]):
    """A Jira entity managed through create, read, update and delete."""

    @abstractmethod
    async def create(self, plan: ModelT) -> ModelT:
        """Create the entity and return the new state."""
        pass

    @abstractmethod
    async def read(self, state: ModelT) -> ModelT:
        """Refresh the state from the remote entity."""
        pass

    @abstractmethod
    async def update(self, plan: ModelT, state: ModelT) -> ModelT:
        """Update the entity to match the plan and return the new state."""
        pass

    @abstractmethod
    async def delete(self, state: ModelT) -> None:
        """Delete the entity."""
        pass

    async def import_state(self, entity_id: str) -> ModelT:
        """Return a state record holding only the given ID."""
        return self.model(id=entity_id)  # type: ignore[return-value]
