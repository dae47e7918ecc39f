"""fieldcheck — per-field validation with one async contract.

Rules can be sync or async; validators are always awaited the same way.

Usage::

    from fieldcheck import create_validator

    async def username_available(value: str) -> list[str | bool]:
        taken = await users.exists(value)
        return [taken and "That username is taken"]

    validate = create_validator({
        "email": lambda v: [
            not v and "This field is required",
            "@" not in v and "Must contain @",
        ],
        "username": username_available,
    })

    errors = await validate("email")(form["email"])
    if errors:
        return render_signup(form, errors={"email": errors})
"""

from fieldcheck._internal.types import Rule, RuleResult
from fieldcheck.compose import combine
from fieldcheck.config import ValidatorConfig
from fieldcheck.errors import ConfigurationError, FieldcheckError, UnknownFieldError
from fieldcheck.factory import FieldValidator, ValidatorLookup, create_validator
from fieldcheck.findings import collect_findings, is_finding
from fieldcheck.registry import RuleRegistry

__version__ = "0.1.0"
__all__ = [
    "ConfigurationError",
    "FieldValidator",
    "FieldcheckError",
    "Rule",
    "RuleRegistry",
    "RuleResult",
    "UnknownFieldError",
    "ValidatorConfig",
    "ValidatorLookup",
    "collect_findings",
    "combine",
    "create_validator",
    "is_finding",
]
