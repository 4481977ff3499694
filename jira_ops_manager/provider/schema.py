"""Declarative attribute schemas for data sources and resources.

A schema names each attribute of an entity record and declares whether it is
required, optional and/or computed, which validators apply to configured
values and which plan modifiers fill in values that are not configured.
"""

from dataclasses import dataclass, field
from typing import Any, Callable

from jira_ops_manager.provider.exceptions import AttributeValidationError, SchemaValidationError

Validator = Callable[[str, Any], None]
PlanModifier = Callable[[Any, Any], Any]


# Validators
def length_at_most(maximum: int) -> Validator:
    """Reject string values longer than ``maximum`` characters."""

    def validate(attribute: str, value: Any) -> None:
        if value is not None and len(value) > maximum:
            raise AttributeValidationError(
                attribute,
                "Invalid Attribute Value Length",
                f"Attribute {attribute} string length must be at most {maximum}, got: {len(value)}",
            )

    return validate


# Plan modifiers
def use_state_for_unknown() -> PlanModifier:
    """Keep the prior state value when the attribute is not configured."""

    def modify(config_value: Any, prior_value: Any) -> Any:
        if config_value is None:
            return prior_value
        return config_value

    return modify


def default_value(default: Any) -> PlanModifier:
    """Use ``default`` when the attribute is not configured."""

    def modify(config_value: Any, prior_value: Any) -> Any:
        if config_value is None:
            return default
        return config_value

    return modify


@dataclass(frozen=True)
class Attribute:
    """A single attribute of an entity schema."""

    description: str
    type: type = str
    required: bool = False
    optional: bool = False
    computed: bool = False
    validators: tuple[Validator, ...] = ()
    plan_modifiers: tuple[PlanModifier, ...] = ()

    @property
    def configurable(self) -> bool:
        """Whether the attribute may be set in configuration."""
        return self.required or self.optional


@dataclass(frozen=True)
class Schema:
    """The schema of a data source or resource."""

    description: str
    attributes: dict[str, Attribute] = field(default_factory=dict)
    version: int = 0

    def validate_config(self, config: dict[str, Any]) -> None:
        """Validate a configuration against the declared attributes.

        Raises:
            SchemaValidationError: If an attribute is unknown, computed-only, missing or of the wrong type.
            AttributeValidationError: If a declared validator rejects a value.
        """
        for name in config:
            if name not in self.attributes:
                raise SchemaValidationError(name, "Unsupported argument", f'An argument named "{name}" is not expected here.')
        for name, attribute in self.attributes.items():
            value = config.get(name)
            if value is None:
                if attribute.required:
                    raise SchemaValidationError(name, "Missing required argument", f'The argument "{name}" is required, but no definition was found.')
                continue
            if not attribute.configurable:
                raise SchemaValidationError(
                    name,
                    "Invalid Configuration for Read-Only Attribute",
                    f'Cannot set value for attribute "{name}" as it is computed by the provider.',
                )
            if not isinstance(value, attribute.type) or (attribute.type is int and isinstance(value, bool)):
                raise SchemaValidationError(
                    name,
                    "Incorrect attribute value type",
                    f'Inappropriate value for attribute "{name}": {attribute.type.__name__} required.',
                )
            for validator in attribute.validators:
                validator(name, value)

    def plan(self, config: dict[str, Any], prior_state: dict[str, Any] | None = None) -> dict[str, Any]:
        """Build the planned values for every attribute from configuration and prior state."""
        prior_state = prior_state or {}
        planned: dict[str, Any] = {}
        for name, attribute in self.attributes.items():
            value = config.get(name)
            for modifier in attribute.plan_modifiers:
                value = modifier(value, prior_state.get(name))
            planned[name] = value
        return planned

    def describe(self) -> dict[str, Any]:
        """Return a plain description of the schema for display."""
        return {
            "description": self.description,
            "version": self.version,
            "attributes": {
                name: {
                    "type": attribute.type.__name__,
                    "required": attribute.required,
                    "optional": attribute.optional,
                    "computed": attribute.computed,
                    "description": attribute.description,
                }
                for name, attribute in self.attributes.items()
            },
        }
