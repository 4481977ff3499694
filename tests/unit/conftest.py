"""Fixtures for unit tests."""

from typing import Generator
from unittest.mock import AsyncMock

import pytest
import structlog

from jira_ops_manager.jira.abc import JiraClientBase
from jira_ops_manager.provider.context import ProviderContext
from jira_ops_manager.provider.provider import JiraProvider


@pytest.fixture(autouse=True)
def configure_structlog_for_caplog() -> Generator[None, None, None]:
    """Configure structlog for use with caplog."""
    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )
    yield
    structlog.reset_defaults()


@pytest.fixture
def mock_client() -> AsyncMock:
    """A Jira client whose every method is an AsyncMock."""
    return AsyncMock(spec=JiraClientBase)


@pytest.fixture
def context(mock_client: AsyncMock) -> ProviderContext:
    """A provider context around the mock client."""
    return ProviderContext(client=mock_client)


@pytest.fixture
def provider(mock_client: AsyncMock) -> JiraProvider:
    """A provider around the mock client."""
    return JiraProvider.from_client(mock_client)

