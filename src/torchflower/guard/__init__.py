"""Runtime guards — composable validators that narrow untrusted values.

Usage::

    from torchflower import guard

    priority = guard.or_(
        guard.string_literal("Critical"),
        guard.string_literal("Medium"),
        guard.string_literal("Low"),
    )

    is_task = guard.check(
        guard.record(lambda value: {
            "name": guard.string(value["name"]),
            "priority": priority(value["priority"]),
            "note": guard.optional(guard.string)(value["note"]),
        })
    )

    @app.post("/task")
    async def create_task(request: Request):
        task = is_task(await request.json())
        if task is None:
            return Response("400 Bad Request", status=400)
        ...

Guards raise a ``GuardError`` subclass on failure. Wrap the outermost
guard in ``check()`` at the trust boundary; an unchecked failure that
escapes a handler is answered by the error hook as a 500.
"""

from torchflower.errors import (
    GuardError,
    IntersectionMismatch,
    LiteralMismatch,
    ShapeAssertionFailed,
    TypeMismatch,
    UnionMismatch,
)
from torchflower.guard.combinators import (
    MISSING,
    CheckedGuard,
    Fields,
    Guard,
    Missing,
    and_,
    attempt,
    check,
    literal,
    optional,
    or_,
    record,
    string_literal,
)
from torchflower.guard.primitives import (
    assert_,
    boolean,
    callback,
    integer,
    number,
    object_,
    string,
)
from torchflower.guard.result import Failed, GuardResult, Passed

__all__ = [
    "MISSING",
    "CheckedGuard",
    "Failed",
    "Fields",
    "Guard",
    "GuardError",
    "GuardResult",
    "IntersectionMismatch",
    "LiteralMismatch",
    "Missing",
    "Passed",
    "ShapeAssertionFailed",
    "TypeMismatch",
    "UnionMismatch",
    "and_",
    "assert_",
    "attempt",
    "boolean",
    "callback",
    "check",
    "integer",
    "literal",
    "number",
    "object_",
    "optional",
    "or_",
    "record",
    "string",
    "string_literal",
]
