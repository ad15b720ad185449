"""
Operation Outcomes

Result-style wrapper around registry operations. attempt() runs an operation
and turns a UniversityError into a failed Outcome carrying its ErrorCode, so
callers can branch on the variant without exception handling. Programmer
errors such as UnhandledRoleError are not converted and still propagate.
"""

from collections.abc import Callable
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from registry.domain.exceptions import ErrorCode, UniversityError


class Outcome(BaseModel):
    """Immutable result of a registry operation."""

    model_config = ConfigDict(frozen=True)

    ok: bool
    value: Any = None
    error_code: ErrorCode | None = None
    message: str | None = None
    context: dict[str, Any] = Field(default_factory=dict)

    @classmethod
    def success(cls, value: Any = None) -> "Outcome":
        return cls(ok=True, value=value)

    @classmethod
    def failure(cls, error: UniversityError) -> "Outcome":
        return cls(
            ok=False,
            error_code=error.error_code,
            message=error.message,
            context=dict(error.context),
        )


def attempt(operation: Callable[..., Any], *args: Any, **kwargs: Any) -> Outcome:
    """
    Run a registry operation and capture its result.

    Args:
        operation: Bound method or function to call
        *args: Positional arguments for the operation
        **kwargs: Keyword arguments for the operation

    Returns:
        Outcome: Successful outcome with the return value, or a failed
        outcome describing the registry error that was raised
    """
    try:
        value = operation(*args, **kwargs)
    except UniversityError as error:
        return Outcome.failure(error)
    return Outcome.success(value)
