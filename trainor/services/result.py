from dataclasses import dataclass
from typing import Any, Generic, TypeVar

from postgrest.exceptions import APIError

T = TypeVar("T")

NOT_AUTHENTICATED = "User not authenticated"


@dataclass(frozen=True)
class Result(Generic[T]):
    """
    Envelope returned by every service operation instead of raising.
    """

    success: bool
    data: T | None = None
    error: Any = None

    @classmethod
    def ok(cls, data: T | None = None) -> "Result[T]":
        return cls(success=True, data=data)

    @classmethod
    def fail(cls, error: Any) -> "Result[T]":
        return cls(success=False, error=error)


def remote_error(error: Any) -> Any:
    """
    The backend error behind a repository error, found by following
    `__cause__`. Errors with no remote cause are returned unchanged.
    """
    current = error
    while isinstance(current, BaseException):
        if isinstance(current, APIError):
            return current
        current = current.__cause__
    return error


def describe_error(error: Any) -> str:
    """
    Human readable message for whatever ended up in Result.error.
    Supabase auth and PostgREST errors both carry a `.message`.
    """
    if error is None:
        return ""
    if isinstance(error, str):
        return error
    message = getattr(error, "message", None)
    if message:
        return str(message)
    return str(error) or error.__class__.__name__
