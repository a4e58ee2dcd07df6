"""Injection cleaner: recursive, depth-bounded walk over a request subtree.

String leaves are HTML-escaped and NoSQL query-operator keys (``$eq``,
``$ne``, ...) are defused by dropping their leading symbol. The walk rewrites
the tree it is given, so callers pass it a copy of anything they want to keep.
"""

import re
from typing import Any, Optional

import bleach
import structlog

from infivalidator.validators.models import (
    DepthState,
    InjectionAccumulator,
    SanitizeResult,
    ValidatorOptions,
)

logger = structlog.get_logger()

# Query operators that turn a filter document into an attacker-controlled query
OPERATOR_KEYS = frozenset({
    "$eq",
    "$ne",
    "$ni",
    "$gt",
    "$gte",
    "$lt",
    "$lte",
    "$regex",
    "$where",
})

_FIRST_SYMBOL = re.compile(r"[^A-Za-z0-9]")


def escape_string(value: str) -> str:
    """Escape markup in a string leaf. Existing entities are left as they are."""
    return bleach.clean(value, tags=set(), strip=False)


def defuse_operator_key(key: str) -> str:
    """Strip the first non-alphanumeric character: ``$eq`` -> ``eq``."""
    return _FIRST_SYMBOL.sub("", key, count=1)


def _is_container(value: Any) -> bool:
    return isinstance(value, (dict, list))


def lookup_injection(
    node: Any,
    options: ValidatorOptions,
    depth: Optional[DepthState] = None,
    accum: Optional[InjectionAccumulator] = None,
) -> SanitizeResult:
    """Sanitize ``node`` in place and report whether operator keys were found.

    Depth is counted per branch: ``curr_deep_level`` is the nesting level of
    the container being cleaned and is restored when a child returns, while
    ``max_deep_level`` records the deepest level reached. A container at or
    beyond ``options.deep_level`` is returned untouched; its siblings are
    still cleaned.

    When a defused key collides with an existing sibling (``$eq`` next to
    ``eq``), the defused operator's value wins and the sibling is dropped.

    Args:
        node: Mapping or list to clean; other values are returned unchanged
        options: Validator options; only ``deep_level`` is used
        depth: Depth tracker shared across the recursion
        accum: Findings shared across the recursion

    Returns:
        SanitizeResult with the cleaned node and the whole-subtree injection flag
    """
    if depth is None:
        depth = DepthState()
    if accum is None:
        accum = InjectionAccumulator()

    if not _is_container(node):
        return SanitizeResult(data=node, is_nosql_injected=accum.is_nosql_injected)

    depth.max_deep_level = max(depth.curr_deep_level, depth.max_deep_level)

    if depth.curr_deep_level >= options.deep_level:
        logger.warning(
            "traversal_depth_exceeded",
            depth=depth.curr_deep_level,
            max_depth=options.deep_level,
        )
        return SanitizeResult(data=node, is_nosql_injected=accum.is_nosql_injected)

    is_mapping = isinstance(node, dict)
    items = list(node.items()) if is_mapping else list(enumerate(node))
    defused_keys = set()

    for key, value in items:
        if is_mapping:
            # Sibling already overwritten by a defused operator key
            if key in defused_keys:
                continue

            if key in OPERATOR_KEYS:
                accum.is_nosql_injected = True
                new_key = defuse_operator_key(key)
                del node[key]
                node[new_key] = value
                defused_keys.add(new_key)
                key = new_key

        if isinstance(value, list):
            for index, item in enumerate(value):
                if _is_container(item):
                    depth.curr_deep_level += 1
                    lookup_injection(item, options, depth, accum)
                    depth.curr_deep_level -= 1
                elif isinstance(item, str):
                    value[index] = escape_string(item)
        elif isinstance(value, dict):
            depth.curr_deep_level += 1
            lookup_injection(value, options, depth, accum)
            depth.curr_deep_level -= 1
        elif isinstance(value, str):
            node[key] = escape_string(value)

    return SanitizeResult(data=node, is_nosql_injected=accum.is_nosql_injected)
