"""Jira workflow scheme data source."""

import structlog

from jira_ops_manager.provider.base import DataSource
from jira_ops_manager.provider.mapping import REMOTE_ERRORS, client_error, parse_numeric_id
from jira_ops_manager.provider.models import WorkflowSchemeModel
from jira_ops_manager.provider.schema import Attribute, Schema

logger: structlog.stdlib.BoundLogger = structlog.get_logger(__name__)


class JiraWorkflowSchemeDataSource(DataSource[WorkflowSchemeModel]):
    """Looks up a workflow scheme by ID."""

    type_name_suffix = "_jira_workflow_scheme"
    model = WorkflowSchemeModel
    schema = Schema(
        description="Jira Workflow Scheme Data Source",
        attributes={
            "id": Attribute(description="The ID of the workflow scheme.", required=True),
            "name": Attribute(description="The name of the workflow scheme.", computed=True),
            "description": Attribute(description="The description of the workflow scheme.", computed=True),
        },
    )

    async def read(self, config: WorkflowSchemeModel) -> WorkflowSchemeModel:
        """Read the workflow scheme named by ``config.id``."""
        logger.debug("Reading workflow scheme data source", read_config=config.model_dump())
        workflow_scheme_id = parse_numeric_id(config.id)

        try:
            workflow_scheme = await self.client.get_workflow_scheme(workflow_scheme_id, return_draft_if_exists=False)
        except REMOTE_ERRORS as exc:
            raise client_error("get Jira workflow scheme", exc) from exc
        logger.debug("Retrieved workflow scheme from API", workflow_scheme_id=workflow_scheme_id)

        return config.model_copy(update={"name": workflow_scheme.name, "description": workflow_scheme.description})
