"""Handles reading and validating YAML declarations.

This module provides the DeclarationsProcessor class, which loads data source and
resource declarations from YAML files, merges them, rejects duplicate addresses and
collects validation errors. All logging is performed using structlog.
"""

from typing import Any

import structlog
from pydantic import ValidationError
from structlog.stdlib import BoundLogger

from jira_ops_manager.processing.exceptions import DeclarationProcessingError
from jira_ops_manager.schemas.declarations import DeclarationModel, DeclarationsYAMLModel
from jira_ops_manager.utils.yaml import load_yaml_file

logger: BoundLogger = structlog.get_logger(__name__)  # type: ignore

SECTIONS = ("data", "resources")


class DeclarationsProcessor:
    """Loads and validates declarations from one or more YAML files.

    Each YAML file may contain a top-level 'data' and/or 'resources' key holding a
    list of declarations with 'type', 'name' and 'config' keys.
    """

    def __init__(self, raise_on_error: bool = True) -> None:
        """Initialize DeclarationsProcessor.

        Args:
            raise_on_error (bool): Whether to raise a DeclarationProcessingError on validation errors.
        """
        self.raise_on_error = raise_on_error

    def load_declarations_model(self, yaml_paths: list[str]) -> DeclarationsYAMLModel:
        """Load and validate declarations from one or more YAML files."""
        merged: dict[str, list[DeclarationModel]] = {section: [] for section in SECTIONS}
        seen_addresses: dict[str, str] = {}
        errors: list[dict[str, Any]] = []
        for path in yaml_paths:
            data = self._load_yaml_file(path, errors)
            if data is None:
                continue
            unknown_sections = set(data.keys()) - set(SECTIONS)
            if unknown_sections:
                logger.warning("Unknown top-level keys will be ignored", file=path, keys=sorted(unknown_sections))
            for section in SECTIONS:
                entries = data.get(section) or []
                if not isinstance(entries, list):
                    logger.error("Section is not a list", file=path, section=section)
                    errors.append({"file": path, "section": section, "error": "Section is not a list"})
                    continue
                for idx, entry in enumerate(entries):
                    if not isinstance(entry, dict):
                        errors.append({"file": path, "section": section, "index": idx, "error": "Declaration entry is not a dict"})
                        continue
                    try:
                        declaration = DeclarationModel(**entry)
                    except ValidationError as ve:
                        logger.error("Validation error for declaration", file=path, section=section, index=idx, error=ve.errors())
                        errors.append({"file": path, "section": section, "index": idx, "error": ve.errors()})
                        continue
                    key = f"{section}.{declaration.address}"
                    if key in seen_addresses:
                        logger.error("Duplicate declaration address", address=declaration.address, file=path, first_file=seen_addresses[key])
                        errors.append({"file": path, "section": section, "index": idx, "error": f"Duplicate address {declaration.address}"})
                        continue
                    seen_addresses[key] = path
                    merged[section].append(declaration)
        if errors:
            logger.error("One or more errors occurred during YAML processing", errors=errors)
            if self.raise_on_error:
                raise DeclarationProcessingError(errors)
        return DeclarationsYAMLModel(data=merged["data"], resources=merged["resources"])

    def _load_yaml_file(self, path: str, errors: list[dict[str, Any]]) -> dict[str, Any] | None:
        try:
            data = load_yaml_file(path)
        except Exception as e:
            logger.error("Failed to parse YAML file", path=path, error=str(e))
            errors.append({"file": path, "error": str(e)})
            return None
        # If loaded data is not a dictionary, throw an error.
        if not isinstance(data, dict):
            logger.error("YAML file is not a dictionary", path=path)
            errors.append({"file": path, "error": "YAML file is not a dictionary"})
            return None
        return data
