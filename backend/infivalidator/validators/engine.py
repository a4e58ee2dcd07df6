"""Validation engine: runs named rules over request fields and builds a sanitized copy.

One instance serves one request. Rule failures are collected, not raised,
so every field can be checked in a single pass.

Usage:
    validator = InfiValidator(request_input)
    validator.check_values("params", {"docId": "isMongoId"}) \\
             .check_values("body", {"tags": ["isArray", "hasLength:3"]}) \\
             .clean_injections()

    if validator.has_errors():
        return validator.get_first_error()
    safe = validator.get_safe_object()
"""

import copy
from collections.abc import Mapping
from typing import Any, Iterable, Optional, Union

import structlog

from infivalidator.validators.errors import (
    InvalidFieldsError,
    InvalidLocationError,
    InvalidLocationShapeError,
    InvalidRequestError,
    MissingTemplateError,
)
from infivalidator.validators.messages import EMPTY_LOCATION_RULE, format_message
from infivalidator.validators.models import (
    LOCATIONS,
    SANITIZED_LOCATIONS,
    Location,
    RuleCategory,
    ValidationError,
    ValidatorOptions,
)
from infivalidator.validators.registry import Registrar, RuleRegistry
from infivalidator.validators.rules import detect_op, register_rules

logger = structlog.get_logger()

FieldRules = Mapping[str, Union[str, list[str], tuple[str, ...], None]]


class InfiValidator:
    """Validates and sanitizes the locations of a single request input.

    The input tree is a mapping holding up to five locations (``params``,
    ``query``, ``body``, ``headers``, ``cookies``) plus optional request
    metadata such as ``ip`` and ``currentUser``. It is never modified:
    ``clean_injections`` rewrites deep copies of ``body``, ``params`` and
    ``query``.
    """

    def __init__(
        self,
        input_tree: Optional[Mapping[str, Any]],
        options: Union[ValidatorOptions, Mapping[str, Any], None] = None,
        registrars: Optional[Iterable[Registrar]] = None,
    ):
        """Check the input, resolve options and load the rules.

        Args:
            input_tree: Request locations and metadata
            options: ``ValidatorOptions`` or a dict such as ``{"deepLevel": 10}``
            registrars: Extra rule registrars, run after the built-in one

        Raises:
            InvalidRequestError: empty input or no recognizable location
            InvalidLocationShapeError: a location is not a mapping
            DuplicateRuleError: a registrar loads an existing rule name
            MissingTemplateError: a general rule has no message template
        """
        self._input = self._check_input(input_tree)
        self._options = self._resolve_options(options)
        self._errors: list[ValidationError] = []
        self._safe_obj: dict[str, Any] = {}
        self._registry = self._load_rules(registrars)

    # ── Public API ──

    @property
    def options(self) -> ValidatorOptions:
        return self._options

    @property
    def registry(self) -> RuleRegistry:
        return self._registry

    def check_values(self, location: Union[str, Location], field_rules: FieldRules) -> "InfiValidator":
        """Check fields of one location against their rules.

        Args:
            location: One of params, query, body, headers, cookies
            field_rules: Field name -> rule name or list of rule names,
                each optionally written as 'name:argument'

        Returns:
            self, for chaining

        Raises:
            InvalidLocationError: unknown location name
            InvalidFieldsError: empty or non-mapping field rules
        """
        location = self._resolve_location(location)

        if not field_rules or not isinstance(field_rules, Mapping):
            raise InvalidFieldsError(f"Provided {location} in request object is not valid.")

        subtree = self._input.get(location)

        is_location_not_empty = self._registry.get(RuleCategory.GENERAL, "isNotEmpty")
        if not is_location_not_empty(subtree, self._options):
            self._add_error(rule=EMPTY_LOCATION_RULE, field=location)

        for field, ops in field_rules.items():
            if ops is None:
                continue

            if isinstance(ops, str):
                ops = [ops]
            elif not isinstance(ops, (list, tuple)):
                logger.warning("validator_rule_invalid", field=field, location=location, rule=repr(ops))
                continue

            value = subtree.get(field) if isinstance(subtree, Mapping) else None

            for op in ops:
                self._apply_rule(op, field, value, location)

        logger.debug(
            "validation_complete",
            location=location,
            fields=len(field_rules),
            total_errors=len(self._errors),
        )

        return self

    def clean_injections(self) -> "InfiValidator":
        """Build sanitized copies of body, params and query.

        Returns:
            self, for chaining
        """
        is_injected = self._registry.get(RuleCategory.CUSTOM, "isInjected")

        if not callable(is_injected):
            return self

        for loc in SANITIZED_LOCATIONS:
            if loc not in self._input:
                continue

            result = is_injected(copy.deepcopy(self._input[loc]), self._options)

            if result.is_nosql_injected:
                logger.warning(
                    "nosql_injection_detected",
                    location=loc,
                    user=self._user_token(),
                )

            self._safe_obj[loc] = result.data

        return self

    def has_errors(self) -> bool:
        return len(self._errors) > 0

    def get_first_error(self) -> Optional[ValidationError]:
        """Returns the first error, None otherwise."""
        if self._errors:
            return self._errors[0]
        return None

    def get_errors(self) -> list[ValidationError]:
        return list(self._errors)

    def get_safe_object(self) -> dict[str, Any]:
        """Return the sanitized body, params and query.

        Falls back to a copy of the ORIGINAL, unsanitized locations (with a
        warning) when ``clean_injections`` has not produced a result.
        """
        if not self._safe_obj or any(v is None for v in self._safe_obj.values()):
            logger.warning(
                "safe_object_unavailable",
                message="Cannot load safe object. Using original one now.",
            )
            return {
                loc: copy.deepcopy(self._input[loc])
                for loc in SANITIZED_LOCATIONS
                if loc in self._input
            }

        return copy.deepcopy(self._safe_obj)

    # ── Internals ──

    @staticmethod
    def _check_input(input_tree: Any) -> Mapping[str, Any]:
        if not input_tree:
            raise InvalidRequestError("A valid request object is required for validation.")

        if not isinstance(input_tree, Mapping):
            raise InvalidRequestError(
                f"A valid request object is required for validation, got {type(input_tree).__name__}."
            )

        if not any(loc in input_tree for loc in LOCATIONS):
            raise InvalidRequestError(
                f"Request object has none of the locations: {', '.join(LOCATIONS)}."
            )

        for loc in LOCATIONS:
            value = input_tree.get(loc)
            if value is None or isinstance(value, Mapping):
                continue
            # A JSON body may be a top-level array
            if loc == Location.BODY.value and isinstance(value, list):
                continue
            raise InvalidLocationShapeError(f"Provided {loc} in request object is not valid.")

        return input_tree

    @staticmethod
    def _resolve_options(options: Union[ValidatorOptions, Mapping[str, Any], None]) -> ValidatorOptions:
        if options is None:
            return ValidatorOptions()
        if isinstance(options, ValidatorOptions):
            return options
        return ValidatorOptions.model_validate(dict(options))

    @staticmethod
    def _resolve_location(location: Any) -> str:
        if isinstance(location, Location):
            return location.value

        if not isinstance(location, str) or location not in LOCATIONS:
            raise InvalidLocationError(f"Invalid location name: {location}")

        return location

    def _load_rules(self, registrars: Optional[Iterable[Registrar]]) -> RuleRegistry:
        registry = RuleRegistry().load_from([register_rules, *(registrars or [])])
        registry.freeze()

        required = [EMPTY_LOCATION_RULE, *registry.names(RuleCategory.GENERAL)]
        missing = [name for name in required if name not in self._options.templates]
        if missing:
            raise MissingTemplateError(f"No message template for rule(s): {', '.join(missing)}")

        return registry

    def _apply_rule(self, op: str, field: str, value: Any, location: str) -> None:
        if not isinstance(op, str):
            logger.warning("validator_rule_invalid", field=field, location=location, rule=repr(op))
            return

        op_name, arg = detect_op(op)
        rule = self._registry.get(RuleCategory.GENERAL, op_name)

        if rule is None:
            logger.warning("validator_rule_missing", rule=op_name, field=field, location=location)
            return

        if not rule(value, self._options.with_arg(arg)):
            self._add_error(rule=op_name, field=field, location=location)

    def _add_error(self, rule: str, field: str, location: Optional[str] = None, code: int = 400) -> None:
        message = format_message(self._options.templates[rule], field, location)
        self._errors.append(ValidationError(code=code, message=message))

    def _user_token(self) -> Any:
        """Authenticated user id if present, client address otherwise."""
        user = self._input.get("currentUser") or self._input.get("current_user")

        if user is not None:
            uid = user.get("uid") if isinstance(user, Mapping) else getattr(user, "uid", None)
            if uid is not None:
                return uid

        return self._input.get("ip")
