"""Jira status data source."""

import structlog

from jira_ops_manager.provider.base import DataSource
from jira_ops_manager.provider.mapping import REMOTE_ERRORS, client_error, first_item, require_id
from jira_ops_manager.provider.models import StatusModel
from jira_ops_manager.provider.schema import Attribute, Schema

logger: structlog.stdlib.BoundLogger = structlog.get_logger(__name__)


class JiraStatusDataSource(DataSource[StatusModel]):
    """Looks up a status by ID."""

    type_name_suffix = "_jira_status"
    model = StatusModel
    schema = Schema(
        description="Jira Status Data Source",
        attributes={
            "id": Attribute(description="The ID of the status.", required=True),
            "name": Attribute(
                description="The name of the status. The name must be unique. The maximum length is 255 characters.",
                computed=True,
            ),
            "description": Attribute(description="The description of the status. The maximum length is 255 characters.", computed=True),
            "category": Attribute(description="The category of the status.", computed=True),
        },
    )

    async def read(self, config: StatusModel) -> StatusModel:
        """Read the status named by ``config.id``."""
        logger.debug("Reading status data source", read_config=config.model_dump())
        status_id = require_id(config.id)

        try:
            statuses = await self.client.get_statuses([status_id])
        except REMOTE_ERRORS as exc:
            raise client_error("get Jira status", exc) from exc
        logger.debug("Retrieved statuses from API", status_id=status_id, count=len(statuses))

        status = first_item(statuses, "status", status_id)
        return config.model_copy(
            update={"name": status.name, "description": status.description, "category": status.status_category}
        )
