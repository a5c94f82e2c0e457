"""Primitive guards — one per scalar kind.

Each guard has the signature::

    def guard(value: Any) -> T:
        '''Return value narrowed to T, or raise TypeMismatch.'''

No coercion is ever performed: ``number("5")`` fails, ``integer(1.0)``
fails, and ``bool`` is never accepted where a number is expected.
"""

from collections.abc import Callable, Mapping
from typing import Any

from torchflower.errors import ShapeAssertionFailed, TypeMismatch


def assert_(condition: object, message: str = "") -> None:
    """Raise ``ShapeAssertionFailed`` with *message* if *condition* is falsy.

    Intended for cross-field rules inside a ``record()`` shape::

        guard.assert_(end >= start, "end must not precede start")
    """
    if not condition:
        raise ShapeAssertionFailed(message)


# ---------------------------------------------------------------------------
# Scalars
# ---------------------------------------------------------------------------


def string(value: Any) -> str:
    """Value must be a ``str``."""
    if not isinstance(value, str):
        raise TypeMismatch("string", value)
    return value


def number(value: Any) -> int | float:
    """Value must be an ``int`` or ``float`` (``bool`` excluded)."""
    if isinstance(value, bool) or not isinstance(value, int | float):
        raise TypeMismatch("number", value)
    return value


def integer(value: Any) -> int:
    """Value must be an ``int`` of any size (``bool`` excluded)."""
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeMismatch("integer", value)
    return value


def boolean(value: Any) -> bool:
    """Value must be ``True`` or ``False``."""
    if not isinstance(value, bool):
        raise TypeMismatch("boolean", value)
    return value


def callback(value: Any) -> Callable[..., Any]:
    """Value must be callable."""
    if not callable(value):
        raise TypeMismatch("callable", value)
    return value


# ---------------------------------------------------------------------------
# Structure
# ---------------------------------------------------------------------------


def object_(value: Any) -> Mapping[str, Any]:
    """Value must be a structured object (any ``Mapping``, never ``None``)."""
    if not isinstance(value, Mapping):
        raise TypeMismatch("object", value)
    return value
