"""Guard result: an explicit success/failure discriminant.

Combinators decide whether a branch matched by looking at the result
type, never at the truthiness of the narrowed value. ``Passed(0)`` is a
success; only ``Failed`` is falsy.
"""

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True, slots=True)
class Passed[T]:
    """A validator accepted the input and narrowed it to ``value``."""

    value: T

    def __bool__(self) -> bool:
        return True


@dataclass(frozen=True, slots=True)
class Failed:
    """A validator rejected the input.

    ``error`` is usually a ``GuardError``; shape code inside ``record()``
    may also fail with a plain exception (``KeyError``, ``TypeError``).
    """

    error: Exception

    def __bool__(self) -> bool:
        return False


type GuardResult[T] = Passed[T] | Failed


def value_or_none(result: GuardResult[Any]) -> Any:
    """Return the narrowed value, or ``None`` on failure."""
    if isinstance(result, Passed):
        return result.value
    return None
