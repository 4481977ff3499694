"""Pydantic schema for the expected YAML declarations structure."""

from typing import Any

from pydantic import BaseModel, Field


class DeclarationModel(BaseModel):
    """A single data source or resource declaration."""

    type: str
    name: str
    config: dict[str, Any] = Field(default_factory=dict)

    @property
    def address(self) -> str:
        """Address of the declaration in state, e.g. ``atlassian_jira_project.main``."""
        return f"{self.type}.{self.name}"


class DeclarationsYAMLModel(BaseModel):
    """Pydantic model for the data sources and resources declared in YAML."""

    data: list[DeclarationModel] = Field(default_factory=list)
    resources: list[DeclarationModel] = Field(default_factory=list)
