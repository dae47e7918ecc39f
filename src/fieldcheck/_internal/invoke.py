"""Invoke helpers — call sync or async rules uniformly.

Rules can be plain functions, ``async def`` functions, or plain functions
that return an awaitable (a task, a future, another coroutine). Any code
that calls a user-provided rule must handle every case. This module keeps
the sync/async check in exactly one place.

Usage::

    from fieldcheck._internal.invoke import invoke

    pending = invoke(rule, value)   # rule has already run
    entries = await pending
"""

import inspect
from collections.abc import Awaitable
from typing import Any


async def settle(result: Any) -> Any:
    """Await *result* if it is awaitable, otherwise return it unchanged."""
    if inspect.isawaitable(result):
        result = await result
    return result


async def _reraise(error: Exception) -> Any:
    raise error


def invoke(rule: Any, *args: Any, **kwargs: Any) -> Awaitable[Any]:
    """Call a rule now and return an awaitable for its settled result.

    Works with both sync and async callables::

        # sync — entries are ready, awaiting just hands them back
        def username(value):
            return [not value and "required"]

        # async — returns coroutine, awaited when the caller awaits
        async def username(value):
            taken = await users.exists(value)
            return [taken and "already taken"]

    The rule runs synchronously inside this call. An exception it raises
    is held and re-raised, as the same object, when the returned awaitable
    is awaited, so failures only ever arrive through ``await``.
    """
    try:
        result = rule(*args, **kwargs)
    except Exception as error:
        return _reraise(error)
    return settle(result)
