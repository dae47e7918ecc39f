"""Rule composition — several rules acting as one.

``combine()`` builds a single rule out of several, so a field can carry a
list of small checks::

    rules = {
        "username": combine(required, max_length(30), username_available),
    }

Pipeline for one call::

    1. Call every component rule with the value, in order
    2. Resolve the awaitable results concurrently (anyio task group)
    3. Normalize each component's entries and concatenate them in order

The combined rule is itself an ordinary rule: it returns a list (or an
awaitable of one) and can be nested or registered like any other.
"""

import inspect
from collections.abc import Awaitable
from typing import Any

import anyio

from fieldcheck._internal.types import Rule, RuleResult
from fieldcheck.findings import collect_findings


async def _resolve_pending(pending: dict[int, Awaitable[Any]]) -> dict[int, Any]:
    """Await all *pending* results concurrently, keyed by component index.

    The first failure cancels the rest and is re-raised as the same object,
    not wrapped in an exception group and without the group as its context.
    """
    results: dict[int, Any] = {}
    failure: BaseException | None = None

    async def _resolve(index: int, awaitable: Awaitable[Any]) -> None:
        results[index] = await awaitable

    try:
        async with anyio.create_task_group() as tg:
            for index, awaitable in pending.items():
                tg.start_soon(_resolve, index, awaitable)
    except BaseExceptionGroup as group:
        if len(group.exceptions) != 1:
            raise
        failure = group.exceptions[0]

    # Raised outside the handler so no context is chained onto the failure.
    if failure is not None:
        raise failure
    return results


def _discard(outcomes: list[Any]) -> None:
    # Unstarted coroutines are closed; scheduled futures and tasks are cancelled.
    for outcome in outcomes:
        if inspect.iscoroutine(outcome):
            outcome.close()
        elif inspect.isawaitable(outcome) and callable(getattr(outcome, "cancel", None)):
            outcome.cancel()


def _concatenate(outcomes: list[Any]) -> list[Any]:
    entries: list[Any] = []
    for outcome in outcomes:
        entries.extend(collect_findings(outcome))
    return entries


def combine(*rules: Rule) -> Rule:
    """Combine *rules* into one rule whose findings are all of theirs, in order.

    With no rules the combined rule always reports nothing. Each component
    may be sync or async independently of the others. If a component
    raises while being called, coroutines already returned by earlier
    components are closed, futures and tasks are cancelled, and the
    exception propagates.
    """
    components = tuple(rules)

    async def _gather(outcomes: list[Any], pending: dict[int, Awaitable[Any]]) -> list[Any]:
        resolved = await _resolve_pending(pending)
        return _concatenate([resolved.get(i, outcome) for i, outcome in enumerate(outcomes)])

    def combined(value: Any) -> RuleResult:
        outcomes: list[Any] = []
        try:
            for rule in components:
                outcomes.append(rule(value))
        except BaseException:
            _discard(outcomes)
            raise

        pending = {
            index: outcome
            for index, outcome in enumerate(outcomes)
            if inspect.isawaitable(outcome)
        }
        if not pending:
            return _concatenate(outcomes)
        return _gather(outcomes, pending)

    combined.rules = components  # type: ignore[attr-defined]
    return combined
