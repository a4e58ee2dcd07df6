"""Rule registry: category -> rule name -> rule function.

Rules are registered through registrars, plain callables that receive the
registry's ``load`` callback:

    def register(load):
        load("isEven", "general", lambda value, opts: value % 2 == 0)

Once the validator has run its registrars the registry is frozen.
"""

from typing import Any, Callable, Iterable, Optional, Union

import structlog

from infivalidator.validators.errors import DuplicateRuleError, RegistryFrozenError
from infivalidator.validators.models import RuleCategory

logger = structlog.get_logger()

RuleFn = Callable[[Any, Any], Any]
LoadFn = Callable[[str, Union[str, RuleCategory], RuleFn], None]
Registrar = Callable[[LoadFn], None]


def _category_key(category: Union[str, RuleCategory]) -> str:
    if isinstance(category, RuleCategory):
        return category.value
    return str(category)


class RuleRegistry:
    """Two-tier mapping of rule functions, open to new categories."""

    def __init__(self):
        self._rules: dict[str, dict[str, RuleFn]] = {}
        self._frozen = False

    def load(self, name: str, category: Union[str, RuleCategory], fn: RuleFn) -> None:
        """Register ``fn`` under ``category``/``name``.

        Raises:
            DuplicateRuleError: the name already exists in that category
            RegistryFrozenError: the registry no longer accepts rules
        """
        if self._frozen:
            raise RegistryFrozenError(f"Cannot register '{name}': rules are already loaded.")

        rules = self._rules.setdefault(_category_key(category), {})

        if name in rules:
            raise DuplicateRuleError(f"Validator named '{name}' already exists.")

        rules[name] = fn

    def load_from(self, registrars: Iterable[Registrar]) -> "RuleRegistry":
        """Run each registrar against this registry, in order."""
        for registrar in registrars:
            registrar(self.load)
        return self

    def freeze(self) -> None:
        self._frozen = True
        logger.debug(
            "validator_rules_loaded",
            categories={category: len(rules) for category, rules in self._rules.items()},
        )

    @property
    def frozen(self) -> bool:
        return self._frozen

    def get(self, category: Union[str, RuleCategory], name: str) -> Optional[RuleFn]:
        """Look up a rule; unknown categories and names yield None."""
        return self._rules.get(_category_key(category), {}).get(name)

    def has(self, category: Union[str, RuleCategory], name: str) -> bool:
        return self.get(category, name) is not None

    def names(self, category: Union[str, RuleCategory]) -> list[str]:
        """Rule names of a category, in registration order."""
        return list(self._rules.get(_category_key(category), {}))

    def __len__(self) -> int:
        return sum(len(rules) for rules in self._rules.values())
