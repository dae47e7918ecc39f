"""Validator factory — per-field async validators from a rule table.

Mirrors a router's compiled lookup: ``create_validator()`` compiles the
caller's rules once into a ``RuleRegistry`` and returns a
``ValidatorLookup``. Asking the lookup for a field returns a
``FieldValidator`` — a frozen pairing of field name and rule whose only job
is to run the rule and normalize what comes back.

Every field validator has the same contract no matter how its rule is
written::

    errors: list[str] = await validator(value)

Normalization for one call::

    1. Call the rule with the value as soon as the validator is called
       (no retry, no debouncing)
    2. If the result is awaitable, await it
    3. Drop falsy entries, keep the order of the rest
    4. Return the list — empty means valid

Exceptions from steps 1 and 2 propagate untouched. Findings are data,
failures are exceptions, and the two never mix.
"""

import logging
from collections.abc import Awaitable, Mapping
from dataclasses import dataclass
from typing import Any

from fieldcheck._internal.invoke import invoke
from fieldcheck._internal.types import Rule
from fieldcheck.config import DEFAULT_CONFIG, ValidatorConfig
from fieldcheck.errors import UnknownFieldError
from fieldcheck.findings import collect_findings
from fieldcheck.registry import RuleRegistry

logger = logging.getLogger("fieldcheck")


def _no_findings(value: Any) -> list[Any]:
    """Rule used for fields with nothing registered."""
    return []


async def _finish(pending: Awaitable[Any]) -> list[str]:
    return collect_findings(await pending)


@dataclass(frozen=True, slots=True)
class FieldValidator:
    """Async validator for one field. Immutable, stateless across calls.

    ``registered`` is False when the lookup had no rule for ``field`` and
    fell back to "always valid".
    """

    field: str
    rule: Rule
    registered: bool = True

    def __call__(self, value: Any) -> Awaitable[list[str]]:
        """Run the rule on *value* now; await the result for its error messages."""
        return _finish(invoke(self.rule, value))


class ValidatorLookup:
    """Compiled field → validator table. Immutable after creation.

    Call it with a field name to get that field's validator::

        lookup = create_validator({"email": check_email})
        errors = await lookup("email")("someone@example.com")

    Lookups of unregistered fields follow ``config.unknown_field``.
    """

    __slots__ = ("_config", "_registry")

    def __init__(self, registry: RuleRegistry, config: ValidatorConfig = DEFAULT_CONFIG) -> None:
        self._registry = registry
        self._config = config

    def __call__(self, field_name: str) -> FieldValidator:
        if field_name in self._registry:
            return FieldValidator(field=field_name, rule=self._registry[field_name])

        if self._config.unknown_field == "error":
            raise UnknownFieldError(field_name, self._registry.fields)

        logger.debug("No rule registered for field %r; treating it as always valid", field_name)
        return FieldValidator(field=field_name, rule=_no_findings, registered=False)

    def __contains__(self, field_name: object) -> bool:
        return field_name in self._registry

    def __len__(self) -> int:
        return len(self._registry)

    @property
    def fields(self) -> tuple[str, ...]:
        """Registered field names, in registration order."""
        return self._registry.fields

    @property
    def registry(self) -> RuleRegistry:
        return self._registry

    @property
    def config(self) -> ValidatorConfig:
        return self._config

    def __repr__(self) -> str:
        policy = self._config.unknown_field
        return f"ValidatorLookup(fields={list(self.fields)!r}, unknown_field={policy!r})"


def create_validator(
    rules: Mapping[str, Any] | RuleRegistry,
    config: ValidatorConfig | None = None,
) -> ValidatorLookup:
    """Build a field validator lookup from a mapping of per-field rules.

    Args:
        rules: Field name → rule. A rule takes the candidate value and
            returns a list of entries (messages or falsy markers), a single
            message, ``None``, or an awaitable producing any of those. A
            list or tuple of rules is combined into one. A ``RuleRegistry``
            is used as-is.
        config: Optional ``ValidatorConfig``. Defaults treat unregistered
            fields as always valid.

    Returns:
        A ``ValidatorLookup``: call it with a field name to get an async
        ``FieldValidator``.

    Construction never fails and never calls any rule. The mapping is
    snapshotted, so mutating it afterwards has no effect on the lookup.

    Example::

        validate = create_validator({
            "email": lambda v: [
                len(v) == 0 and "required",
                "@" not in v and "missing @",
            ],
        })
        await validate("email")("")         # ["required", "missing @"]
        await validate("email")("a@b.com")  # []
    """
    registry = rules if isinstance(rules, RuleRegistry) else RuleRegistry(rules)
    return ValidatorLookup(registry, config or DEFAULT_CONFIG)
