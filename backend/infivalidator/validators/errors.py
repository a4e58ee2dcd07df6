"""Validator exceptions.

Only structural and programmer errors are raised. Failed rules are collected
as ``ValidationError`` records on the validator instead.
"""


class InfiValidatorError(ValueError):
    """Base class for errors raised by the validator."""


class InvalidRequestError(InfiValidatorError):
    """The input object cannot represent a request."""


class InvalidLocationShapeError(InfiValidatorError, TypeError):
    """A request location holds something other than a mapping."""


class DuplicateRuleError(InfiValidatorError):
    """A rule name was registered twice in the same category."""


class RegistryFrozenError(InfiValidatorError):
    """A rule was registered after the registry was loaded."""


class MissingTemplateError(InfiValidatorError):
    """A general rule has no message template."""


class InvalidLocationError(InfiValidatorError):
    """``check_values`` was called with an unknown location name."""


class InvalidFieldsError(InfiValidatorError):
    """``check_values`` was called with an empty or non-mapping rule spec."""
