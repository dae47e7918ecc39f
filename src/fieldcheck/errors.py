"""fieldcheck exception hierarchy.

Only configuration problems are raised by the library itself. Exceptions
raised by rules (or by the awaitables they return) are never wrapped: they
reach the caller exactly as the rule raised them.
"""


class FieldcheckError(Exception):
    """Base for all fieldcheck-specific errors."""


class ConfigurationError(FieldcheckError):
    """Raised when validator configuration is invalid.

    Typically surfaces when building a ``ValidatorConfig`` or, under the
    ``unknown_field="error"`` policy, when looking up an unregistered field.
    """


class UnknownFieldError(ConfigurationError, LookupError):
    """No rule is registered for the requested field.

    Only raised when the lookup was created with ``unknown_field="error"``.
    Includes the registered names so typos are easy to spot.
    """

    def __init__(self, field: str, known: tuple[str, ...] = ()) -> None:
        self.field = field
        self.known = known
        if known:
            msg = f"No rule registered for field {field!r}. Known fields: {', '.join(known)}"
        else:
            msg = f"No rule registered for field {field!r}. The registry is empty."
        super().__init__(msg)
