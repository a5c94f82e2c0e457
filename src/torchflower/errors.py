"""Torchflower exception hierarchy.

Shared across Router, App, the server pipeline, and the guard engine so
every module raises and catches the same types.
"""

from typing import Any


class TorchflowerError(Exception):
    """Base for all torchflower-specific errors."""


class ConfigurationError(TorchflowerError):
    """Raised when app or route configuration is invalid.

    Typically raised during setup, before the app serves a request.
    """


# ---------------------------------------------------------------------------
# Guard failures
# ---------------------------------------------------------------------------


class GuardError(TorchflowerError):
    """A validator rejected its input.

    Guard failures propagate through every combinator until a
    ``guard.check()`` wrapper turns them into ``None``. One that escapes
    a route handler is reported by the error hook as a 500.
    """


class TypeMismatch(GuardError):  # noqa: N818
    """The input's runtime type is not the expected kind."""

    def __init__(self, expected: str, value: Any) -> None:
        self.expected = expected
        self.value = value
        super().__init__(f"Expected {expected}, got {type(value).__name__}")


class LiteralMismatch(GuardError):  # noqa: N818
    """The input is not strictly equal to the expected literal."""

    def __init__(self, expected: Any, value: Any) -> None:
        self.expected = expected
        self.value = value
        super().__init__(f"Expected literal {expected!r}, got {value!r}")


class UnionMismatch(GuardError):  # noqa: N818
    """No alternative of an ``or_`` accepted the input."""

    def __init__(self, value: Any) -> None:
        self.value = value
        super().__init__(f"Union check failed for {value!r}")


class IntersectionMismatch(GuardError):  # noqa: N818
    """At least one side of an ``and_`` rejected the input."""

    def __init__(self, value: Any) -> None:
        self.value = value
        super().__init__(f"Intersection check failed for {value!r}")


class ShapeAssertionFailed(GuardError):  # noqa: N818
    """A ``guard.assert_()`` inside a record shape did not hold."""

    def __init__(self, message: str = "") -> None:
        self.message = message
        super().__init__(message or "Assertion failed")
