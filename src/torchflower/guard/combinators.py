"""Guard combinators — build compound validators out of simpler ones.

Every combinator returns a plain callable with the guard signature
``(value) -> T``. Failures are raised, and propagate through the whole
composition, with two exceptions:

- ``or_`` and ``and_`` evaluate their branches through ``attempt()`` and
  decide by the ``Passed``/``Failed`` discriminant, so a branch that
  narrows to ``0``, ``""`` or ``False`` still counts as a match.
- ``check`` is the trust-boundary adapter: it turns any failure into
  ``None``.

Composition example::

    priority = guard.or_(
        guard.string_literal("Critical"),
        guard.or_(guard.string_literal("Medium"), guard.string_literal("Low")),
    )

    is_task = guard.check(
        guard.record(lambda value: {
            "name": guard.string(value["name"]),
            "priority": priority(value["priority"]),
        })
    )
"""

import logging
from collections.abc import Callable, Iterator, Mapping
from dataclasses import dataclass
from typing import Any

from torchflower.errors import IntersectionMismatch, LiteralMismatch, UnionMismatch
from torchflower.guard.primitives import object_
from torchflower.guard.result import Failed, GuardResult, Passed, value_or_none

logger = logging.getLogger("torchflower.guard")

# A validator: narrows an unknown value to T or raises
type Guard[T] = Callable[[Any], T]

# A validator wrapped by check(): narrows to T or returns None
type CheckedGuard[T] = Callable[[Any], T | None]


# ---------------------------------------------------------------------------
# Absent fields
# ---------------------------------------------------------------------------


@dataclass(frozen=True, slots=True)
class Missing:
    """Sentinel for a field that is absent from a record.

    Falsy, and rejected by every primitive guard. ``optional()`` treats
    it the same as ``None``.
    """

    def __bool__(self) -> bool:
        return False

    def __repr__(self) -> str:
        return "MISSING"


MISSING: Missing = Missing()


class Fields(Mapping[str, Any]):
    """Read-only view of a record's fields handed to the shape function.

    Indexing an absent key yields ``MISSING`` instead of raising
    ``KeyError``, so the field's own guard decides whether absence is
    acceptable.
    """

    __slots__ = ("_data",)

    def __init__(self, data: Mapping[str, Any]) -> None:
        self._data = data

    def __getitem__(self, key: str) -> Any:
        try:
            return self._data[key]
        except KeyError:
            return MISSING

    def get(self, key: str, default: Any = None) -> Any:
        """Return the field's value, or *default* when it is absent."""
        return self._data.get(key, default)

    def __contains__(self, key: object) -> bool:
        return key in self._data

    def __iter__(self) -> Iterator[str]:
        return iter(self._data)

    def __len__(self) -> int:
        return len(self._data)

    def __repr__(self) -> str:
        return f"Fields({dict(self._data)!r})"


# ---------------------------------------------------------------------------
# Non-throwing entry points
# ---------------------------------------------------------------------------


def attempt[T](guard: Guard[T], value: Any) -> GuardResult[T]:
    """Run *guard* on *value* and capture the outcome instead of raising."""
    try:
        return Passed(guard(value))
    except Exception as exc:
        return Failed(exc)


def check[T](guard: Guard[T]) -> CheckedGuard[T]:
    """Wrap *guard* so that any failure returns ``None`` instead of raising.

    Use exactly once, where untrusted input enters the application::

        metadata = is_task(await request.json())
        if metadata is None:
            return Response("400 Bad Request", status=400)
    """

    def checked(value: Any) -> T | None:
        result = attempt(guard, value)
        if isinstance(result, Failed):
            logger.debug("Rejected input: %r", result.error)
        return value_or_none(result)

    return checked


# ---------------------------------------------------------------------------
# Literals
# ---------------------------------------------------------------------------


def _is_number(value: object) -> bool:
    return isinstance(value, int | float) and not isinstance(value, bool)


def _strictly_equal(expected: object, value: object) -> bool:
    # int and float are a single numeric kind; every other pairing needs
    # identical types so that True never equals 1 and "0" never equals 0.
    if _is_number(expected) and _is_number(value):
        return expected == value
    return type(expected) is type(value) and expected == value


def literal[T](expected: T) -> Guard[T]:
    """Value must be strictly equal to *expected*.

    Use ``string_literal`` for strings so the narrowed type is the
    specific string rather than ``str``.
    """

    def guard(value: Any) -> T:
        if not _strictly_equal(expected, value):
            raise LiteralMismatch(expected, value)
        return value

    return guard


def string_literal[S: str](expected: S) -> Guard[S]:
    """Value must be exactly the string *expected*."""
    if not isinstance(expected, str):
        msg = f"string_literal() expects a str, got {type(expected).__name__}"
        raise TypeError(msg)
    return literal(expected)


# ---------------------------------------------------------------------------
# Logic
# ---------------------------------------------------------------------------


def or_(left: Guard[Any], right: Guard[Any], *rest: Guard[Any]) -> Guard[Any]:
    """Value must satisfy *left* or *right*; the first match wins.

    Alternatives are tried left to right and the narrowed value of the
    first one that passes is returned. ``or_(a, b, c)`` is the same as
    ``or_(a, or_(b, c))``.
    """
    if rest:
        right = or_(right, *rest)

    def guard(value: Any) -> Any:
        result = attempt(left, value)
        if isinstance(result, Passed):
            return result.value

        result = attempt(right, value)
        if isinstance(result, Passed):
            return result.value

        raise UnionMismatch(value)

    return guard


def and_(left: Guard[Any], right: Guard[Any], *rest: Guard[Any]) -> Guard[Any]:
    """Value must satisfy both *left* and *right*.

    Returns the original value unchanged; the narrowed results are not
    merged. *right* is not evaluated when *left* fails.
    """
    if rest:
        right = and_(right, *rest)

    def guard(value: Any) -> Any:
        if isinstance(attempt(left, value), Failed):
            raise IntersectionMismatch(value)
        if isinstance(attempt(right, value), Failed):
            raise IntersectionMismatch(value)
        return value

    return guard


# ---------------------------------------------------------------------------
# Structure
# ---------------------------------------------------------------------------


def optional[T](guard: Guard[T]) -> Guard[T | None]:
    """Absent values (``None`` or ``MISSING``) pass as ``None``.

    Present values, including falsy ones like ``0`` and ``""``, are
    narrowed by *guard* and its failures propagate.
    """

    def wrapped(value: Any = MISSING) -> T | None:
        if value is None or isinstance(value, Missing):
            return None
        return guard(value)

    return wrapped


def record[T](shape: Callable[[Fields], T]) -> Guard[T]:
    """Value must be an object; *shape* then extracts its fields.

    *shape* receives a ``Fields`` view and narrows each field with the
    guards above. The first failing field aborts the whole record.
    """

    def guard(value: Any) -> T:
        return shape(Fields(object_(value)))

    return guard
