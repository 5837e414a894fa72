"""Result[T, E] — Ok and Err variants.

Attempt outcomes flow through the resilience pipeline as values of this type
rather than as raised exceptions, so each policy can inspect them without
try/except nesting. Both variants support structural pattern matching::

    match outcome:
        case Ok(value):
            ...
        case Err(error):
            ...
"""

from __future__ import annotations

import dataclasses
from typing import Any, Callable, Generic, NoReturn, TypeAlias, TypeVar

T = TypeVar("T")
U = TypeVar("U")
E = TypeVar("E", bound=Exception)


@dataclasses.dataclass(frozen=True, slots=True)
class Ok(Generic[T]):
    """Successful result variant."""

    value: T

    def is_ok(self) -> bool:
        return True

    def is_err(self) -> bool:
        return False

    def unwrap(self) -> T:
        return self.value

    def unwrap_or(self, default: Any) -> T:  # noqa: ARG002
        return self.value

    def unwrap_or_else(self, func: Callable[[Any], Any]) -> T:  # noqa: ARG002
        return self.value

    def map(self, func: Callable[[T], U]) -> Ok[U]:
        return Ok(func(self.value))


@dataclasses.dataclass(frozen=True, slots=True, eq=False)
class Err(Generic[E]):
    """Error result variant.

    Two ``Err`` values are equal only when they wrap the very same exception
    object; exceptions have no useful value equality.
    """

    error: E

    def is_ok(self) -> bool:
        return False

    def is_err(self) -> bool:
        return True

    def unwrap(self) -> NoReturn:
        raise self.error

    def unwrap_or(self, default: T) -> T:
        return default

    def unwrap_or_else(self, func: Callable[[E], T]) -> T:
        return func(self.error)

    def map(self, func: Callable[[Any], Any]) -> Err[E]:  # noqa: ARG002
        return self

    def __eq__(self, other: object) -> bool:
        return isinstance(other, Err) and other.error is self.error

    def __hash__(self) -> int:
        return id(self.error)


Result: TypeAlias = Ok[T] | Err[E]

__all__ = ["Err", "Ok", "Result"]
