"""Shared type aliases used across fieldcheck modules."""

from collections.abc import Awaitable, Callable, Iterable
from typing import Any, TypeAlias

# What a rule hands back before it is awaited: a sequence of candidate
# entries, a single message, None, or an awaitable of any of those.
Entries: TypeAlias = Iterable[Any] | str | None
RuleResult: TypeAlias = Entries | Awaitable[Entries]

# Validation rule — called with the candidate value
Rule: TypeAlias = Callable[[Any], RuleResult]
