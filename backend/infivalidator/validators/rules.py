"""Built-in rules and their registrar.

To add a rule, write a ``(value, options) -> bool`` function, load it in a
registrar under the ``general`` category and give it a message template.
"""

import re
from typing import Any, Optional

from infivalidator.validators.injection import lookup_injection
from infivalidator.validators.models import RuleCategory, ValidatorOptions
from infivalidator.validators.registry import LoadFn

MONGO_ID_RE = re.compile(r"^[0-9a-fA-F]{24}$")
FIREBASE_ID_RE = re.compile(r"^(?!.*(\|\?))[a-zA-Z0-9]{28,32}$")
UUID_V1_RE = re.compile(r"^[0-9A-F]{8}-[0-9A-F]{4}-1[0-9A-F]{3}-[89AB][0-9A-F]{3}-[0-9A-F]{12}$", re.IGNORECASE)
UUID_V4_RE = re.compile(r"^[0-9A-F]{8}-[0-9A-F]{4}-4[0-9A-F]{3}-[89AB][0-9A-F]{3}-[0-9A-F]{12}$", re.IGNORECASE)

_NUMBER_RE = re.compile(r"^[+-]?(\d+\.?\d*|\.\d+)([eE][+-]?\d+)?$")
_INTEGER_RE = re.compile(r"^[+-]?\d+$")

_LITERALS = {
    "true": True,
    "false": False,
    "null": None,
    "undefined": None,
}


# ── Helpers ──

def cast_correct_type(value: Any) -> Any:
    """Convert a rule argument from its string form.

    '24' -> 24, '2.5' -> 2.5, 'true' -> True, 'null' / 'undefined' -> None,
    anything else is returned unchanged.
    """
    if not isinstance(value, str):
        return value

    if value in _LITERALS:
        return _LITERALS[value]

    if _INTEGER_RE.match(value):
        return int(value)

    if _NUMBER_RE.match(value):
        return float(value)

    return value


def detect_op(rule: str) -> tuple[str, Optional[str]]:
    """Split 'name:argument' on the first colon."""
    op_name, sep, arg = rule.partition(":")
    return op_name, (arg if sep else None)


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _size(value: Any) -> int:
    if isinstance(value, (str, list, tuple, dict)):
        return len(value)
    return 0


def _same_value(left: Any, right: Any) -> bool:
    # True == 1 in Python; rule arguments must not conflate them
    if isinstance(left, bool) or isinstance(right, bool):
        return type(left) is type(right) and left == right
    return left == right


def _matches(pattern: re.Pattern, value: Any) -> bool:
    return isinstance(value, str) and pattern.match(value) is not None


# ── General rules ──

def is_not_empty(value: Any, options: Optional[ValidatorOptions] = None) -> bool:
    if value is None:
        return False
    if isinstance(value, (dict, list)):
        return len(value) > 0
    if isinstance(value, str):
        return len(value.strip()) > 0
    return True


def is_exists(value: Any, options: Optional[ValidatorOptions] = None) -> bool:
    return value is not None


def is_string(value: Any, options: Optional[ValidatorOptions] = None) -> bool:
    return isinstance(value, str)


def is_number(value: Any, options: Optional[ValidatorOptions] = None) -> bool:
    return _is_number(value)


def is_boolean(value: Any, options: Optional[ValidatorOptions] = None) -> bool:
    return isinstance(value, bool)


def is_object(value: Any, options: Optional[ValidatorOptions] = None) -> bool:
    """Any container: mappings and arrays both count as objects."""
    return isinstance(value, (dict, list))


def is_array(value: Any, options: Optional[ValidatorOptions] = None) -> bool:
    return isinstance(value, list)


def is_mongo_id(value: Any, options: Optional[ValidatorOptions] = None) -> bool:
    return _matches(MONGO_ID_RE, value)


def is_firebase_id(value: Any, options: Optional[ValidatorOptions] = None) -> bool:
    return _matches(FIREBASE_ID_RE, value)


def is_uuid_v1(value: Any, options: Optional[ValidatorOptions] = None) -> bool:
    return _matches(UUID_V1_RE, value)


def is_uuid_v4(value: Any, options: Optional[ValidatorOptions] = None) -> bool:
    return _matches(UUID_V4_RE, value)


def has_length(value: Any, options: ValidatorOptions) -> bool:
    """'hasLength:3' -> value has exactly 3 characters, items or keys."""
    arg = options.arg
    expected = cast_correct_type(arg)

    if arg is None or not _is_number(expected):
        return False

    return _size(value) == expected


def has_array_item(value: Any, options: ValidatorOptions) -> bool:
    """'hasArrayItem:2' -> value is a list holding 2."""
    if not isinstance(value, list):
        return False

    expected = cast_correct_type(options.arg)
    return any(_same_value(item, expected) for item in value)


def has_object_key(value: Any, options: ValidatorOptions) -> bool:
    """'hasObjectKey:token' -> value is a mapping with a 'token' key."""
    arg = options.arg

    if arg is None or not isinstance(value, dict):
        return False

    expected = cast_correct_type(arg)
    return any(_same_value(key, expected) for key in value)


# ── Custom rules ──

def is_injected(value: Any, options: ValidatorOptions):
    return lookup_injection(value, options)


GENERAL_RULES = {
    "isNotEmpty": is_not_empty,
    "isExists": is_exists,
    "isString": is_string,
    "isNumber": is_number,
    "isBoolean": is_boolean,
    "isObject": is_object,
    "isArray": is_array,
    "isMongoId": is_mongo_id,
    "isFirebaseId": is_firebase_id,
    "isUUIDv1": is_uuid_v1,
    "isUUIDv4": is_uuid_v4,
    "hasLength": has_length,
    "hasArrayItem": has_array_item,
    "hasObjectKey": has_object_key,
}

CUSTOM_RULES = {
    "isInjected": is_injected,
}


def register_rules(load: LoadFn) -> None:
    """Registrar for the built-in rule set."""
    for name, fn in GENERAL_RULES.items():
        load(name, RuleCategory.GENERAL, fn)

    for name, fn in CUSTOM_RULES.items():
        load(name, RuleCategory.CUSTOM, fn)
