"""Loads and saves the persisted state file."""

from pathlib import Path
from typing import Any

import structlog

from jira_ops_manager.utils.yaml import dump_yaml_to_file, load_yaml_file

logger: structlog.stdlib.BoundLogger = structlog.get_logger(__name__)

StateRecords = dict[str, dict[str, Any]]


class StateFile:
    """Persisted records of managed resources and looked-up data sources, keyed by address."""

    def __init__(self, resources: StateRecords | None = None, data: StateRecords | None = None) -> None:
        """Initialize the state with resource and data source records."""
        self.resources: StateRecords = resources or {}
        self.data: StateRecords = data or {}

    @classmethod
    def load(cls, path: Path) -> "StateFile":
        """Load state from ``path``, returning an empty state when the file does not exist."""
        if not path.exists():
            logger.info("No state file found, starting with empty state", path=str(path))
            return cls()
        content = load_yaml_file(path) or {}
        if not isinstance(content, dict):
            raise ValueError(f"State file is not a dictionary: {path.absolute()}")
        return cls(resources=dict(content.get("resources") or {}), data=dict(content.get("data") or {}))

    def save(self, path: Path) -> None:
        """Write the state to ``path``."""
        dump_yaml_to_file({"resources": self.resources, "data": self.data}, path)
        logger.info("Saved state", path=str(path), resource_count=len(self.resources), data_count=len(self.data))
