"""Rule registry — the compiled, read-only table of per-field rules.

Mirrors the frozen lookup tables used elsewhere in the package: the
caller's mapping is copied once at construction into a read-only view, so
later changes to the caller's dict never leak into validators already
derived from it.

Free-threading safety:
    - RuleRegistry._rules is a MappingProxyType built once, never mutated
    - Rules themselves are treated as opaque callables
"""

import logging
from collections.abc import Iterator, Mapping, Sequence
from types import MappingProxyType
from typing import Any

from fieldcheck._internal.types import Rule
from fieldcheck.compose import combine

logger = logging.getLogger("fieldcheck")


def _compile_rule(spec: Any) -> Rule:
    """Turn one registry value into a single rule.

    A list or tuple of rules becomes one combined rule; anything else is
    stored as given. The value is not checked for being callable — a bad
    entry fails when its validator runs, like any other rule error.
    """
    if isinstance(spec, Sequence) and not isinstance(spec, str):
        return combine(*spec)
    return spec


class RuleRegistry(Mapping[str, Rule]):
    """Immutable mapping from field name to rule.

    Build it once from a plain dict (rule lists are combined in order)::

        registry = RuleRegistry({
            "email": check_email,
            "username": [required, username_available],
        })

    Passing a ``RuleRegistry`` to ``RuleRegistry()`` or
    ``create_validator()`` reuses its table without recompiling.
    """

    __slots__ = ("_rules",)

    def __init__(self, rules: Mapping[str, Any] | None = None) -> None:
        if isinstance(rules, RuleRegistry):
            self._rules: Mapping[str, Rule] = rules._rules
            return
        compiled = {name: _compile_rule(spec) for name, spec in (rules or {}).items()}
        self._rules = MappingProxyType(compiled)
        logger.debug("Compiled rule registry with %d field(s)", len(compiled))

    def __getitem__(self, field_name: str) -> Rule:
        return self._rules[field_name]

    def __iter__(self) -> Iterator[str]:
        return iter(self._rules)

    def __len__(self) -> int:
        return len(self._rules)

    def __contains__(self, field_name: object) -> bool:
        return field_name in self._rules

    @property
    def fields(self) -> tuple[str, ...]:
        """Registered field names, in registration order."""
        return tuple(self._rules)

    def __repr__(self) -> str:
        return f"RuleRegistry(fields={list(self._rules)!r})"
