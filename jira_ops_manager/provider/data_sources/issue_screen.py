"""Jira issue screen data source."""

import structlog

from jira_ops_manager.provider.base import DataSource
from jira_ops_manager.provider.mapping import REMOTE_ERRORS, client_error, first_item, parse_numeric_id
from jira_ops_manager.provider.models import IssueScreenModel
from jira_ops_manager.provider.schema import Attribute, Schema

logger: structlog.stdlib.BoundLogger = structlog.get_logger(__name__)


class JiraIssueScreenDataSource(DataSource[IssueScreenModel]):
    """Looks up an issue screen by ID."""

    type_name_suffix = "_jira_issue_screen"
    model = IssueScreenModel
    schema = Schema(
        description="Jira Issue Screen Data Source",
        attributes={
            "id": Attribute(description="The ID of the screen.", required=True),
            "name": Attribute(description="The name of the screen.", computed=True),
            "description": Attribute(description="The description of the screen.", computed=True),
        },
    )

    async def read(self, config: IssueScreenModel) -> IssueScreenModel:
        """Read the issue screen named by ``config.id``."""
        logger.debug("Reading issue screen data source", read_config=config.model_dump())
        issue_screen_id = parse_numeric_id(config.id)

        try:
            page = await self.client.get_screens([issue_screen_id], start_at=0, max_results=50)
        except REMOTE_ERRORS as exc:
            raise client_error("get issue screen", exc) from exc
        logger.debug("Retrieved issue screens from API", issue_screen_id=issue_screen_id, count=len(page.values))

        screen = first_item(page.values, "issue screen", str(issue_screen_id))
        return config.model_copy(update={"name": screen.name, "description": screen.description})
