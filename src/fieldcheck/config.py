"""Validator configuration.

ValidatorConfig is a frozen dataclass — immutable after creation, checked
once in ``__post_init__`` so bad values fail where they are written.
"""

from dataclasses import dataclass
from typing import Literal, TypeAlias

from fieldcheck.errors import ConfigurationError

UnknownFieldPolicy: TypeAlias = Literal["valid", "error"]

_UNKNOWN_FIELD_POLICIES: frozenset[str] = frozenset({"valid", "error"})


@dataclass(frozen=True, slots=True)
class ValidatorConfig:
    """Options for ``create_validator()``. Immutable after creation.

    The defaults match the common case. Override what you need::

        config = ValidatorConfig(unknown_field="error")
        lookup = create_validator(rules, config)

    ``unknown_field`` decides what looking up an unregistered field does:

    - ``"valid"`` (default) — the lookup returns a validator that always
      resolves to ``[]``. No rule means no findings.
    - ``"error"`` — the lookup raises ``UnknownFieldError`` immediately.
    """

    unknown_field: UnknownFieldPolicy = "valid"

    def __post_init__(self) -> None:
        if self.unknown_field not in _UNKNOWN_FIELD_POLICIES:
            options = ", ".join(sorted(_UNKNOWN_FIELD_POLICIES))
            msg = f"unknown_field must be one of: {options} (got {self.unknown_field!r})"
            raise ConfigurationError(msg)


DEFAULT_CONFIG = ValidatorConfig()
