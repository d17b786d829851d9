"""Tagged success/failure outcomes for the content parser.

Binders, normalizers and the parser return ``Ok`` or ``Err`` instead of
raising, so a failed step is a value that can be inspected, wrapped and
threaded through the pipeline. ``Err`` always carries an ``AppError``; the
orchestration layer turns it back into an exception with ``unwrap()``.

Examples
--------
>>> from jander.exceptions import EmptyTagListError
>>> Ok(3).unwrap()
3
>>> Err(EmptyTagListError()).is_ok()
False
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Generic, NoReturn, TypeVar, Union

from jander.exceptions import AppError

T = TypeVar("T")
U = TypeVar("U")


@dataclass(frozen=True)
class Ok(Generic[T]):
    """Successful outcome wrapping ``value``."""

    value: T

    def is_ok(self) -> bool:
        return True

    def unwrap(self) -> T:
        return self.value

    def map(self, func: Callable[[T], U]) -> Ok[U]:
        """Apply ``func`` to the wrapped value."""
        return Ok(func(self.value))

    def then(self, func: Callable[[T], Result[U]]) -> Result[U]:
        """Chain a step that itself returns an outcome."""
        return func(self.value)


@dataclass(frozen=True)
class Err:
    """Failed outcome carrying the ``AppError`` that describes the failure."""

    error: AppError

    def is_ok(self) -> bool:
        return False

    def unwrap(self) -> NoReturn:
        """Raise the carried error."""
        raise self.error

    def map(self, func: Callable[[object], object]) -> Err:
        return self

    def then(self, func: Callable[[object], object]) -> Err:
        return self


Result = Union[Ok[T], Err]
