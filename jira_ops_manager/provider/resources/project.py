"""Jira project resource."""

import structlog

from jira_ops_manager.provider.base import Resource
from jira_ops_manager.provider.mapping import (
    REMOTE_ERRORS,
    apply_project_response,
    client_error,
    find_issue_type_scheme_id,
    project_create_payload,
    project_update_payload,
)
from jira_ops_manager.provider.models import ProjectModel
from jira_ops_manager.provider.schema import Attribute, Schema, default_value, length_at_most, use_state_for_unknown

logger: structlog.stdlib.BoundLogger = structlog.get_logger(__name__)


class JiraProjectResource(Resource[ProjectModel]):
    """Manages a Jira project."""

    type_name_suffix = "_jira_project"
    model = ProjectModel
    schema = Schema(
        description="Jira Project Resource",
        version=1,
        attributes={
            "id": Attribute(
                description="The ID of the project.",
                computed=True,
                plan_modifiers=(use_state_for_unknown(),),
            ),
            "key": Attribute(
                description=(
                    "Project keys must be unique and start with an uppercase letter followed by one or more "
                    "uppercase alphanumeric characters. The maximum length is 10 characters."
                ),
                required=True,
                validators=(length_at_most(10),),
            ),
            "name": Attribute(description="The name of the project.", required=True),
            "description": Attribute(
                description="A brief description of the project.",
                optional=True,
                computed=True,
                plan_modifiers=(default_value(""),),
            ),
            "avatar_id": Attribute(description="An integer value for the project's avatar.", type=int, optional=True, computed=True),
            "field_configuration_scheme": Attribute(
                description="The ID of the field configuration scheme for the project.",
                type=int,
                optional=True,
            ),
            "issue_type_scheme": Attribute(
                description=(
                    "The ID of the issue type scheme for the project. "
                    "If you specify the issue type scheme you cannot specify the project template key."
                ),
                type=int,
                optional=True,
                computed=True,
            ),
            "issue_type_screen_scheme": Attribute(
                description=(
                    "The ID of the issue type screen scheme for the project. "
                    "If you specify the issue type screen scheme you cannot specify the project template key."
                ),
                type=int,
                optional=True,
            ),
            "workflow_scheme": Attribute(
                description=(
                    "The ID of the workflow scheme for the project. "
                    "If you specify the workflow scheme you cannot specify the project template key."
                ),
                type=int,
                optional=True,
            ),
            "lead_account_id": Attribute(
                description="The account ID of the project lead. Either lead or leadAccountId must be set when creating a project.",
                optional=True,
                computed=True,
            ),
            "project_type_key": Attribute(
                description=(
                    "The project type, which defines the application-specific feature set. "
                    "Valid values: software, service_desk, business"
                ),
                optional=True,
                computed=True,
            ),
            "url": Attribute(
                description="A link to information about this project, such as project documentation.",
                optional=True,
                computed=True,
                plan_modifiers=(default_value(""),),
            ),
        },
    )

    async def create(self, plan: ProjectModel) -> ProjectModel:
        """Create the project. Only the ID is taken from the response."""
        logger.debug("Creating project", create_plan=plan.model_dump())
        payload = project_create_payload(plan)

        try:
            created = await self.client.create_project(payload)
        except REMOTE_ERRORS as exc:
            raise client_error("create project", exc) from exc
        logger.debug("Created project", project_id=created.id, project_key=created.key)

        return plan.model_copy(update={"id": created.id})

    async def read(self, state: ProjectModel) -> ProjectModel:
        """Refresh the project and its issue type scheme association.

        If no association lists the project, ``issue_type_scheme`` keeps its prior value.
        """
        logger.debug("Reading project resource", read_state=state.model_dump())
        project_id = state.id or ""

        try:
            project = await self.client.get_project(project_id)
        except REMOTE_ERRORS as exc:
            raise client_error("get project", exc) from exc
        logger.debug("Retrieved project from API", project_id=project.id)

        new_state = apply_project_response(state, project)

        try:
            associations = await self.client.list_issue_type_scheme_projects([int(project.id)], start_at=0, max_results=1)
        except REMOTE_ERRORS as exc:
            raise client_error("get issue type schemes for project", exc) from exc

        issue_type_scheme_id = find_issue_type_scheme_id(associations.values, project.id)
        if issue_type_scheme_id is not None:
            new_state = new_state.model_copy(update={"issue_type_scheme": issue_type_scheme_id})
        else:
            logger.debug("No issue type scheme association found for project", project_id=project.id)

        logger.debug("Storing project into the state", read_new_state=new_state.model_dump())
        return new_state

    async def update(self, plan: ProjectModel, state: ProjectModel) -> ProjectModel:
        """Update the project identified by the prior state's ID."""
        logger.debug("Updating project resource", update_plan=plan.model_dump(), update_state=state.model_dump())
        project_id = state.id or ""
        payload = project_update_payload(plan)

        try:
            updated = await self.client.update_project(project_id, payload)
        except REMOTE_ERRORS as exc:
            raise client_error("update project", exc) from exc
        logger.debug("Updated project in API", project_id=updated.id)

        if plan.issue_type_scheme is not None:
            try:
                await self.client.assign_issue_type_scheme(str(plan.issue_type_scheme), updated.id)
            except REMOTE_ERRORS as exc:
                raise client_error("assign issue type scheme to project", exc) from exc
            logger.debug("Assigned issue type scheme to project", project_id=updated.id, issue_type_scheme=plan.issue_type_scheme)

        issue_type_scheme = plan.issue_type_scheme if plan.issue_type_scheme is not None else state.issue_type_scheme
        new_state = apply_project_response(
            ProjectModel(
                issue_type_scheme=issue_type_scheme,
                field_configuration_scheme=plan.field_configuration_scheme,
                issue_type_screen_scheme=plan.issue_type_screen_scheme,
                workflow_scheme=plan.workflow_scheme,
            ),
            updated,
        )
        logger.debug("Storing project into the state", update_new_state=new_state.model_dump())
        return new_state

    async def delete(self, state: ProjectModel) -> None:
        """Delete the project without keeping it in the recycle bin."""
        logger.debug("Deleting project resource", project_id=state.id)

        try:
            await self.client.delete_project(state.id or "", enable_undo=False)
        except REMOTE_ERRORS as exc:
            raise client_error("delete project", exc) from exc
        logger.debug("Deleted project from API", project_id=state.id)
