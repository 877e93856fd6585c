"""
Tagged call results.

``FTCClient.attempt`` returns ``Ok`` or ``Err`` instead of raising, so
callers can branch with ``match`` rather than try/except.
"""

from dataclasses import dataclass
from typing import Any, Generic, TypeVar

T = TypeVar("T")


@dataclass(frozen=True)
class Ok(Generic[T]):
    """Successful call carrying the decoded response."""

    value: T

    @property
    def is_ok(self) -> bool:
        return True

    def unwrap(self) -> T:
        return self.value


@dataclass(frozen=True)
class Err:
    """Failed call carrying the error that would have been raised."""

    error: Exception

    @property
    def is_ok(self) -> bool:
        return False

    def unwrap(self) -> Any:
        """Re-raise the captured error."""
        raise self.error


Result = Ok[Any] | Err
