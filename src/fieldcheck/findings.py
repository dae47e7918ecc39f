"""Finding filters — turn raw rule output into an error list.

A rule reports its problems as a sequence of *candidate entries*. Entries
that are truthy are findings (error messages); falsy entries are markers
for "this check passed" and are dropped. This lets rules be written as a
list of ``condition and "message"`` expressions::

    def password(value: str) -> list[str | bool]:
        return [
            len(value) < 8 and "Must be at least 8 characters",
            value.isalpha() and "Must contain a digit or symbol",
        ]

Shorthand shapes are accepted as well, matching single-message validators
of the form ``(value) -> str | None`` and ``condition and "message"``:

- a falsy result (``None``, ``False``, ``0``, ``""``) means no entries at all
- a bare ``str`` is one entry (never iterated character by character), as
  is any other truthy value that is not iterable
"""

from collections.abc import Iterable
from typing import Any


def is_finding(entry: Any) -> bool:
    """True if *entry* should be kept in the error list.

    Dropped entries are exactly Python's falsy values: ``None``, ``False``,
    ``""``, ``0``, ``0.0`` and empty containers.
    """
    return bool(entry)


def collect_findings(entries: Any) -> list[Any]:
    """Filter *entries* down to findings, preserving producer order.

    Surviving entries are returned as-is: no trimming, de-duplication or
    conversion to ``str``.
    """
    if not entries:
        return []
    if isinstance(entries, str) or not isinstance(entries, Iterable):
        return [entries]
    return [entry for entry in entries if is_finding(entry)]
