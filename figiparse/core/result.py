"""Result[T, E] — parse outcomes as values.

Every validator and grammar combinator in figiparse returns Ok[T] or Err[E]
instead of raising. Callers pattern-match on the two variants:

    match FIGI.parse(raw):
        case Ok(figi): ...
        case Err(error): ...
"""

from __future__ import annotations

from collections.abc import Callable, Iterable
from dataclasses import dataclass
from typing import Any, Generic, NoReturn, TypeVar, Union, final

T = TypeVar("T")
U = TypeVar("U")
E = TypeVar("E")
F = TypeVar("F")


@final
@dataclass(frozen=True, slots=True)
class Ok(Generic[T]):
    """Successful parse."""

    value: T

    def map(self, f: Callable[[T], U]) -> Ok[U]:
        return Ok(f(self.value))

    def and_then(self, f: Callable[[T], Ok[U] | Err[E]]) -> Ok[U] | Err[E]:
        """Chain a further fallible step onto the parsed value."""
        return f(self.value)

    def unwrap(self) -> T:
        return self.value

    def map_err(self, f: Callable[[Any], Any]) -> Ok[T]:  # noqa: ARG002
        return self


@final
@dataclass(frozen=True, slots=True)
class Err(Generic[E]):
    """Failed parse, carrying the error value."""

    error: E

    def map(self, f: Callable[[Any], Any]) -> Err[E]:  # noqa: ARG002
        return self

    def and_then(self, f: Callable[[Any], Any]) -> Err[E]:  # noqa: ARG002
        """Short-circuit: the chained step never runs."""
        return self

    def unwrap(self) -> NoReturn:
        """Raise RuntimeError. Test and boundary code only."""
        raise RuntimeError(f"Called unwrap on Err: {self.error}")

    def map_err(self, f: Callable[[E], F]) -> Err[F]:
        """Transform the error, e.g. to wrap it with enclosing context."""
        return Err(f(self.error))


Result = Union[Ok[T], Err[E]]


def unwrap(result: Ok[T] | Err[Any]) -> T:
    """Extract the Ok value or raise RuntimeError. Test/boundary code only."""
    if isinstance(result, Ok):
        return result.value
    if isinstance(result, Err):
        raise RuntimeError(f"unwrap on Err: {result.error}")
    raise TypeError(f"Expected Ok or Err, got {type(result).__name__}")


def sequence(results: Iterable[Ok[T] | Err[E]]) -> Ok[list[T]] | Err[E]:
    """All-or-nothing collection: the first Err wins, otherwise Ok(list)."""
    values: list[T] = []
    for r in results:
        if isinstance(r, Err):
            return r
        values.append(r.value)
    return Ok(values)
