"""
Result type shared by use cases.

Use cases never raise for expected failures. They return ``Return.ok(value)``
or ``Return.err(Error(...))`` and the API layer decides how to render it.
"""

from enum import Enum
from typing import Generic, Optional, TypeVar

T = TypeVar("T")


class ErrorKind(str, Enum):
    """Category of a failure, used by the API layer to pick a status code"""

    validation = "validation"
    not_found = "not_found"
    unauthorized = "unauthorized"
    forbidden = "forbidden"
    conflict = "conflict"
    internal = "internal"


class Error:
    def __init__(self, code: str, message: str, kind: ErrorKind = ErrorKind.internal):
        self.code = code
        self.message = message
        self.kind = kind

    def __repr__(self) -> str:
        return f"Error(code={self.code!r}, message={self.message!r}, kind={self.kind.value})"

    def __eq__(self, other) -> bool:
        if not isinstance(other, Error):
            return NotImplemented
        return (self.code, self.message, self.kind) == (other.code, other.message, other.kind)


class Result(Generic[T]):
    def __init__(self, value: Optional[T] = None, error: Optional[Error] = None):
        self.value = value
        self.error = error

    def is_ok(self) -> bool:
        return self.error is None

    def is_err(self) -> bool:
        return self.error is not None


class Return:
    @staticmethod
    def ok(value: Optional[T] = None) -> Result[T]:
        return Result(value=value)

    @staticmethod
    def err(error: Error) -> Result:
        return Result(error=error)
