"""Tests for torchflower.guard.combinators — literals, logic, structure, check."""

import copy
import math
from typing import Any

import pytest

from torchflower.errors import (
    GuardError,
    IntersectionMismatch,
    LiteralMismatch,
    ShapeAssertionFailed,
    TypeMismatch,
    UnionMismatch,
)
from torchflower.guard import (
    MISSING,
    Failed,
    Fields,
    Missing,
    Passed,
    and_,
    assert_,
    attempt,
    check,
    integer,
    literal,
    number,
    optional,
    or_,
    record,
    string,
    string_literal,
)


def _spy(guard: Any) -> tuple[Any, list[Any]]:
    """Wrap *guard* and record every value it is called with."""
    calls: list[Any] = []

    def wrapped(value: Any) -> Any:
        calls.append(value)
        return guard(value)

    return wrapped, calls


def _fail(value: Any) -> Any:
    raise TypeMismatch("nothing", value)


# ---------------------------------------------------------------------------
# Literals
# ---------------------------------------------------------------------------


class TestLiteral:
    def test_equal_value(self) -> None:
        assert literal("Medium")("Medium") == "Medium"

    def test_zero_matches_zero(self) -> None:
        assert literal(0)(0) == 0

    def test_zero_rejects_string_zero(self) -> None:
        with pytest.raises(LiteralMismatch):
            literal(0)("0")

    def test_bool_is_not_int(self) -> None:
        with pytest.raises(LiteralMismatch):
            literal(1)(True)
        with pytest.raises(LiteralMismatch):
            literal(False)(0)

    def test_int_and_float_are_one_number_kind(self) -> None:
        assert literal(1)(1.0) == 1.0

    def test_none_literal(self) -> None:
        assert literal(None)(None) is None
        with pytest.raises(LiteralMismatch):
            literal(None)(MISSING)

    def test_nan_never_matches(self) -> None:
        with pytest.raises(LiteralMismatch):
            literal(math.nan)(math.nan)

    def test_mismatch_carries_expected(self) -> None:
        with pytest.raises(LiteralMismatch) as exc_info:
            literal("Low")("High")
        assert exc_info.value.expected == "Low"
        assert exc_info.value.value == "High"


class TestStringLiteral:
    def test_matches(self) -> None:
        assert string_literal("Critical")("Critical") == "Critical"

    def test_rejects_other_string(self) -> None:
        with pytest.raises(LiteralMismatch):
            string_literal("Critical")("critical")

    def test_rejects_non_str_argument(self) -> None:
        with pytest.raises(TypeError):
            string_literal(5)  # type: ignore[arg-type]


# ---------------------------------------------------------------------------
# OR
# ---------------------------------------------------------------------------


class TestOr:
    def test_left_match(self) -> None:
        assert or_(string, number)("x") == "x"

    def test_right_match(self) -> None:
        assert or_(string, number)(5) == 5

    def test_neither_raises_union_mismatch(self) -> None:
        with pytest.raises(UnionMismatch):
            or_(string, number)(None)

    def test_left_preferred_when_both_succeed(self) -> None:
        left = lambda value: "left"  # noqa: E731
        right = lambda value: "right"  # noqa: E731
        assert or_(left, right)("anything") == "left"

    def test_right_not_evaluated_on_left_match(self) -> None:
        right, calls = _spy(number)
        or_(string, right)("x")
        assert calls == []

    def test_chained_priority(self) -> None:
        priority = or_(
            string_literal("Critical"),
            or_(string_literal("Medium"), string_literal("Low")),
        )
        assert priority("Critical") == "Critical"
        assert priority("Medium") == "Medium"
        assert priority("Low") == "Low"
        with pytest.raises(UnionMismatch):
            priority("Urgent")

    def test_variadic_matches_nested(self) -> None:
        priority = or_(string_literal("A"), string_literal("B"), string_literal("C"))
        assert priority("C") == "C"
        with pytest.raises(UnionMismatch):
            priority("D")

    def test_falsy_narrowed_value_counts_as_match(self) -> None:
        # A truthiness test would treat literal(0) narrowing 0 as a failed
        # branch and fall through to the right side (here: a union failure).
        # The Passed/Failed discriminant keeps 0 as a match.
        assert or_(literal(0), _fail)(0) == 0
        assert or_(literal(""), _fail)("") == ""
        assert or_(literal(False), _fail)(False) is False

    def test_branch_failure_does_not_escape(self) -> None:
        def explodes(value: Any) -> Any:
            raise KeyError("boom")

        assert or_(explodes, string)("x") == "x"


# ---------------------------------------------------------------------------
# AND
# ---------------------------------------------------------------------------


class TestAnd:
    def test_both_pass_returns_original(self) -> None:
        value = 5
        assert and_(number, integer)(value) is value

    def test_left_fails(self) -> None:
        with pytest.raises(IntersectionMismatch):
            and_(string, number)(5)

    def test_right_fails(self) -> None:
        with pytest.raises(IntersectionMismatch):
            and_(number, integer)(2.5)

    def test_right_skipped_when_left_fails(self) -> None:
        right, calls = _spy(number)
        with pytest.raises(IntersectionMismatch):
            and_(string, right)(5)
        assert calls == []

    def test_does_not_merge_results(self) -> None:
        value = {"a": 1}
        combined = and_(lambda v: {"x": 1}, lambda v: {"y": 2})
        assert combined(value) is value

    def test_falsy_value_passes(self) -> None:
        assert and_(number, integer)(0) == 0

    def test_variadic(self) -> None:
        is_zero = and_(number, integer, literal(0))
        assert is_zero(0) == 0
        with pytest.raises(IntersectionMismatch):
            is_zero(1)


# ---------------------------------------------------------------------------
# optional
# ---------------------------------------------------------------------------


class TestOptional:
    def test_none_skips_guard(self) -> None:
        inner, calls = _spy(string)
        assert optional(inner)(None) is None
        assert calls == []

    def test_missing_skips_guard(self) -> None:
        inner, calls = _spy(string)
        assert optional(inner)(MISSING) is None
        assert calls == []

    def test_copied_missing_is_absent(self) -> None:
        inner, calls = _spy(string)
        assert optional(inner)(copy.deepcopy(MISSING)) is None
        assert optional(inner)(Missing()) is None
        assert calls == []

    def test_no_argument_is_absent(self) -> None:
        assert optional(string)() is None

    def test_present_value_delegates(self) -> None:
        assert optional(string)("note") == "note"

    def test_present_falsy_value_delegates(self) -> None:
        inner, calls = _spy(number)
        assert optional(inner)(0) == 0
        assert calls == [0]
        assert optional(string)("") == ""

    def test_failure_propagates(self) -> None:
        with pytest.raises(TypeMismatch):
            optional(string)(5)


# ---------------------------------------------------------------------------
# record
# ---------------------------------------------------------------------------


def _task_shape(value: Fields) -> dict[str, Any]:
    return {
        "name": string(value["name"]),
        "priority": or_(
            string_literal("Critical"),
            or_(string_literal("Medium"), string_literal("Low")),
        )(value["priority"]),
        "note": optional(string)(value["note"]),
    }


class TestRecord:
    def test_valid(self) -> None:
        task = record(_task_shape)({"name": "x", "priority": "Medium"})
        assert task == {"name": "x", "priority": "Medium", "note": None}

    def test_rejects_non_object(self) -> None:
        with pytest.raises(TypeMismatch):
            record(_task_shape)(None)
        with pytest.raises(TypeMismatch):
            record(_task_shape)(["x", "Medium"])

    def test_shape_not_called_for_non_object(self) -> None:
        shape, calls = _spy(_task_shape)
        with pytest.raises(TypeMismatch):
            record(shape)("x")
        assert calls == []

    def test_missing_field_fails(self) -> None:
        with pytest.raises(TypeMismatch):
            record(_task_shape)({"priority": "Low"})

    def test_one_bad_field_fails_the_record(self) -> None:
        with pytest.raises(UnionMismatch):
            record(_task_shape)({"name": "x", "priority": "Urgent"})

    def test_fields_view(self) -> None:
        seen: dict[str, Any] = {}

        def shape(value: Fields) -> None:
            seen["missing"] = value["absent"]
            seen["contains"] = "a" in value
            seen["len"] = len(value)

        record(shape)({"a": 1})
        assert seen == {"missing": MISSING, "contains": True, "len": 1}

    def test_fields_get_uses_default_for_absent_key(self) -> None:
        def shape(value: Fields) -> dict[str, Any]:
            return {
                "name": string(value.get("name", "")),
                "note": string(value.get("note", "none")),
                "tag": value.get("tag"),
            }

        assert record(shape)({"name": "x"}) == {"name": "x", "note": "none", "tag": None}

    def test_assert_inside_shape(self) -> None:
        def shape(value: Fields) -> tuple[int, int]:
            start, end = integer(value["start"]), integer(value["end"])
            assert_(end >= start, "end must not precede start")
            return start, end

        assert record(shape)({"start": 1, "end": 2}) == (1, 2)
        with pytest.raises(ShapeAssertionFailed):
            record(shape)({"start": 2, "end": 1})


# ---------------------------------------------------------------------------
# attempt / check
# ---------------------------------------------------------------------------


class TestAttempt:
    def test_passed(self) -> None:
        result = attempt(number, 0)
        assert result == Passed(0)
        assert result

    def test_failed(self) -> None:
        result = attempt(number, "0")
        assert isinstance(result, Failed)
        assert isinstance(result.error, TypeMismatch)
        assert not result


class TestCheck:
    def test_success_returns_value(self) -> None:
        assert check(string)("x") == "x"

    def test_failure_returns_none(self) -> None:
        assert check(string)(5) is None

    @pytest.mark.parametrize(
        "error",
        [TypeMismatch("x", 1), KeyError("k"), TypeError("t"), ValueError("v")],
    )
    def test_never_raises(self, error: Exception) -> None:
        def guard(value: Any) -> Any:
            raise error

        assert check(guard)(object()) is None

    def test_end_to_end_task(self) -> None:
        is_task = check(record(_task_shape))
        assert is_task({"name": "x", "priority": "Medium"}) == {
            "name": "x",
            "priority": "Medium",
            "note": None,
        }
        assert is_task({"name": "x", "priority": "Urgent"}) is None
        assert is_task("not an object") is None

    def test_inner_failures_propagate_without_check(self) -> None:
        with pytest.raises(GuardError):
            record(_task_shape)({"name": 1, "priority": "Low"})

    def test_logs_rejection_at_debug(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level("DEBUG", logger="torchflower.guard"):
            check(string)(5)
        assert any("Rejected input" in r.getMessage() for r in caplog.records)
