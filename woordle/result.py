"""
Explicit success/error values for the service facade.

The engine and word pipeline raise; `WordService` catches `WoordleError`
at its boundary and hands back a `Result` so a presentation layer can
switch on `result.kind` (e.g. UNRECOGNIZED_WORD vs DICTIONARY_UNAVAILABLE)
instead of juggling exception types.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Generic, Optional, TypeVar

from .errors import ErrorKind, WoordleError

T = TypeVar("T")


@dataclass(frozen=True)
class Result(Generic[T]):
    value: Optional[T] = None
    error: Optional[WoordleError] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @property
    def kind(self) -> Optional[ErrorKind]:
        return None if self.error is None else self.error.kind

    @property
    def message(self) -> str:
        return "" if self.error is None else self.error.message

    def unwrap(self) -> T:
        """Return the value, or raise the stored error."""
        if self.error is not None:
            raise self.error
        return self.value  # type: ignore[return-value]


def capture(fn: Callable[..., T], *args, **kwargs) -> Result[T]:
    """Call `fn`; wrap its return value or any WoordleError it raises."""
    try:
        return Result(value=fn(*args, **kwargs))
    except WoordleError as e:
        return Result(error=e)
