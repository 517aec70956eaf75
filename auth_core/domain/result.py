"""
Result type used by every use case.

Errors are values, not exceptions: a use case returns either Return.ok(value)
or Return.err(Error(...)) and the caller branches on is_ok()/is_err().
"""

from dataclasses import dataclass, field
from typing import Generic, List, Optional, TypeVar

T = TypeVar("T")


@dataclass(frozen=True)
class Error:
    code: str
    message: str
    field: Optional[str] = None


@dataclass
class Result(Generic[T]):
    value: Optional[T] = None
    errors: List[Error] = field(default_factory=list)

    def is_ok(self) -> bool:
        return not self.errors

    def is_err(self) -> bool:
        return bool(self.errors)

    @property
    def error(self) -> Optional[Error]:
        """First error, or None for a successful result"""
        return self.errors[0] if self.errors else None


class Return:
    @staticmethod
    def ok(value: T = None) -> Result[T]:
        return Result(value=value)

    @staticmethod
    def err(*errors: Error) -> Result:
        if not errors:
            raise ValueError("Return.err requires at least one Error")
        return Result(errors=list(errors))
