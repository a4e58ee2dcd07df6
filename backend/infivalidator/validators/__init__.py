"""Request validator: named rules over request fields plus an injection cleaner.

Usage:
    from infivalidator.validators import InfiValidator

    validator = InfiValidator({"params": req_params, "body": req_body})
    validator.check_values("params", {"docId": "isMongoId"}).clean_injections()
    if validator.has_errors():
        # Reply with validator.get_first_error()
"""

from infivalidator.validators.engine import InfiValidator
from infivalidator.validators.errors import (
    DuplicateRuleError,
    InfiValidatorError,
    InvalidFieldsError,
    InvalidLocationError,
    InvalidLocationShapeError,
    InvalidRequestError,
    MissingTemplateError,
    RegistryFrozenError,
)
from infivalidator.validators.injection import OPERATOR_KEYS, lookup_injection
from infivalidator.validators.messages import DEFAULT_TEMPLATES
from infivalidator.validators.models import (
    Location,
    RuleCategory,
    SanitizeResult,
    ValidationError,
    ValidatorOptions,
)
from infivalidator.validators.registry import RuleRegistry
from infivalidator.validators.rules import cast_correct_type, detect_op, register_rules

__all__ = [
    "InfiValidator",
    "InfiValidatorError",
    "InvalidRequestError",
    "InvalidLocationShapeError",
    "InvalidLocationError",
    "InvalidFieldsError",
    "DuplicateRuleError",
    "RegistryFrozenError",
    "MissingTemplateError",
    "Location",
    "RuleCategory",
    "ValidatorOptions",
    "ValidationError",
    "SanitizeResult",
    "RuleRegistry",
    "DEFAULT_TEMPLATES",
    "OPERATOR_KEYS",
    "lookup_injection",
    "register_rules",
    "cast_correct_type",
    "detect_op",
]
