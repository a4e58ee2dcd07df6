"""Validator models: locations, rule categories, options, error records and sanitize results."""

from enum import Enum
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from infivalidator.config import get_settings
from infivalidator.validators.messages import DEFAULT_TEMPLATES


class Location(str, Enum):
    """Top-level sections of a request input tree."""

    PARAMS = "params"
    QUERY = "query"
    BODY = "body"
    HEADERS = "headers"
    COOKIES = "cookies"


LOCATIONS = [loc.value for loc in Location]

# Locations rewritten by the injection cleaning pass, in cleaning order
SANITIZED_LOCATIONS = [Location.BODY.value, Location.PARAMS.value, Location.QUERY.value]


class RuleCategory(str, Enum):
    """Rule categories known to the registry."""

    GENERAL = "general"  # (value, options) -> bool
    CUSTOM = "custom"    # (value, options) -> SanitizeResult


class ValidatorOptions(BaseModel):
    """Options bag shared by the validator and every rule call.

    ``arg`` is empty on the validator itself and is filled per call for
    rules written as ``name:argument``.
    """

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    deep_level: int = Field(
        default_factory=lambda: get_settings().DEEP_LEVEL,
        alias="deepLevel",
        ge=1,
        le=500,
        description=(
            "Maximum traversal depth of the injection cleaner, between 1 and 500. "
            "The cleaner recurses once per level, so the upper bound stays under "
            "the interpreter's default recursion limit."
        ),
    )
    templates: dict[str, str] = Field(default_factory=dict, validate_default=True)
    arg: Optional[str] = None

    @field_validator("templates")
    @classmethod
    def merge_default_templates(cls, value: dict[str, str]) -> dict[str, str]:
        """Caller templates win over the built-in ones."""
        return {**DEFAULT_TEMPLATES, **value}

    def with_arg(self, arg: Optional[str]) -> "ValidatorOptions":
        return self.model_copy(update={"arg": arg})


class ValidationError(BaseModel):
    """A single failed check, as reported to the caller."""

    code: int = 400
    message: str


class SanitizeResult(BaseModel):
    """Output of the injection cleaner for one subtree."""

    data: Any = None
    is_nosql_injected: bool = False


class DepthState(BaseModel):
    """Depth tracker threaded through the injection traversal."""

    max_deep_level: int = 1
    curr_deep_level: int = 1


class InjectionAccumulator(BaseModel):
    """Whole-subtree findings threaded through the injection traversal."""

    is_nosql_injected: bool = False
