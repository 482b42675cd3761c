import pytest

from rangealgebra.builtin import FloatInterval, IntegerInterval
from rangealgebra.endpoint import UNBOUNDED, exclusive, inclusive
from rangealgebra.errors import InvalidPointError, NotNormalizedError
from rangealgebra.predicates import (
    adjacent,
    adjacent_left_of,
    adjacent_right_of,
    contains,
    contains_point,
    overlaps,
    strictly_left_of,
    strictly_right_of,
)


def ints(left: int | None, right: int | None, bounds: str = "[)") -> IntegerInterval:
    return IntegerInterval.new(left, right, bounds)


def floats(left: float | None, right: float | None, bounds: str = "[)") -> FloatInterval:
    return FloatInterval.new(left, right, bounds)


class TestStrictlyLeftOf:
    def test_touching_half_open(self) -> None:
        assert strictly_left_of(ints(1, 3), ints(3, 5))
        assert strictly_left_of(floats(1.0, 3.0), floats(3.0, 5.0, "(]"))

    def test_shared_point(self) -> None:
        assert not strictly_left_of(floats(1.0, 3.0, "[]"), floats(3.0, 5.0, "[]"))

    def test_overlapping(self) -> None:
        assert not strictly_left_of(ints(1, 4), ints(3, 5))

    def test_unbounded(self) -> None:
        assert strictly_left_of(ints(None, 3), ints(5, None))
        assert not strictly_left_of(ints(1, None), ints(5, 6))
        assert not strictly_left_of(ints(1, 2), ints(None, 6))

    def test_empty(self) -> None:
        assert not strictly_left_of(IntegerInterval.empty(), ints(1, 2))
        assert not strictly_left_of(ints(1, 2), IntegerInterval.empty())


class TestStrictlyRightOf:
    def test_mirrors_left_of(self) -> None:
        assert strictly_right_of(ints(3, 5), ints(1, 3))
        assert not strictly_right_of(ints(1, 3), ints(3, 5))
        assert not strictly_right_of(floats(3.0, 5.0, "[]"), floats(1.0, 3.0, "[]"))

    def test_unbounded(self) -> None:
        assert strictly_right_of(ints(5, None), ints(None, 3))
        assert not strictly_right_of(ints(None, 9), ints(1, 2))
        assert not strictly_right_of(ints(5, 9), ints(1, None))


class TestAdjacent:
    def test_discrete(self) -> None:
        assert adjacent_left_of(ints(1, 2), ints(2, 3))
        assert not adjacent_left_of(ints(1, 2), ints(3, 4))
        assert adjacent_right_of(ints(2, 3), ints(1, 2))
        # Closed inputs are normalized to [1,3) and [3,5)
        assert adjacent(ints(1, 2, "[]"), ints(3, 4, "[]"))

    def test_continuous(self) -> None:
        assert adjacent_left_of(floats(1.0, 2.0), floats(2.0, 3.0, "[]"))
        assert adjacent_left_of(floats(1.0, 2.0, "[]"), floats(2.0, 3.0, "()"))
        # 2.0 is in neither
        assert not adjacent_left_of(floats(1.0, 2.0), floats(2.0, 3.0, "()"))
        # 2.0 is in both
        assert not adjacent_left_of(floats(1.0, 2.0, "[]"), floats(2.0, 3.0, "[]"))

    def test_direction_matters(self) -> None:
        assert not adjacent_left_of(ints(2, 3), ints(1, 2))
        assert not adjacent_right_of(ints(1, 2), ints(2, 3))
        assert adjacent(ints(2, 3), ints(1, 2))

    def test_unbounded_and_empty(self) -> None:
        assert adjacent_left_of(ints(None, 2), ints(2, None))
        assert not adjacent_left_of(ints(1, None), ints(2, 3))
        assert not adjacent(IntegerInterval.empty(), ints(1, 2))

    def test_non_normalized_discrete_input_raises(self) -> None:
        raw_right = IntegerInterval(left=UNBOUNDED, right=inclusive(1))
        with pytest.raises(NotNormalizedError):
            adjacent_left_of(raw_right, ints(2, 3))

        raw_left = IntegerInterval(left=exclusive(1), right=UNBOUNDED)
        with pytest.raises(NotNormalizedError):
            adjacent_right_of(raw_left, ints(0, 1))

    def test_continuous_raw_input_is_allowed(self) -> None:
        raw = FloatInterval(left=UNBOUNDED, right=inclusive(1.0))
        assert adjacent_left_of(raw, floats(1.0, None, "("))


class TestOverlaps:
    def test_overlapping(self) -> None:
        assert overlaps(ints(1, 3), ints(2, 4))
        assert overlaps(floats(1.0, 2.0, "[]"), floats(2.0, 3.0, "[]"))
        assert overlaps(ints(1, 10), ints(3, 4))

    def test_touching_is_not_overlapping(self) -> None:
        assert not overlaps(ints(1, 2), ints(2, 3))
        assert not overlaps(floats(1.0, 2.0), floats(2.0, 3.0))

    def test_unbounded(self) -> None:
        assert overlaps(ints(None, None), ints(None, None))
        assert overlaps(ints(None, 3), ints(2, None))
        assert not overlaps(ints(None, 2), ints(2, None))

    def test_empty_overlaps_nothing(self) -> None:
        assert not overlaps(IntegerInterval.empty(), IntegerInterval.empty())
        assert not overlaps(IntegerInterval.empty(), ints(None, None))

    def test_mixed_types(self) -> None:
        with pytest.raises(TypeError):
            overlaps(ints(1, 2), floats(1.0, 2.0))  # type: ignore[arg-type]


class TestContains:
    def test_inclusive_contains_exclusive(self) -> None:
        assert contains(floats(1.0, 4.0, "[]"), floats(1.0, 4.0, "()"))
        assert not contains(floats(1.0, 4.0, "()"), floats(1.0, 4.0, "[]"))

    def test_partial_overlap(self) -> None:
        assert not contains(ints(1, 3), ints(2, 4))

    def test_unbounded(self) -> None:
        assert contains(ints(None, 1, ")"), ints(0, 1))
        assert contains(ints(None, None), ints(None, 5))
        assert not contains(ints(0, None), ints(None, 5))

    def test_empty(self) -> None:
        assert contains(ints(1, 3), IntegerInterval.empty())
        assert contains(IntegerInterval.empty(), IntegerInterval.empty())
        assert not contains(IntegerInterval.empty(), ints(1, 3))

    def test_method_and_operator(self) -> None:
        assert ints(0, 5).contains(ints(1, 2))
        assert ints(1, 2) in ints(0, 5)
        assert ints(1, 2).overlaps(ints(0, 5))


class TestContainsPoint:
    def test_discrete(self) -> None:
        assert contains_point(ints(1, 3), 2)
        assert contains_point(ints(1, 3), 1)
        assert not contains_point(ints(1, 3), 3)

    def test_continuous_bounds(self) -> None:
        ivl = floats(1.0, 2.0, "()")
        assert not contains_point(ivl, 1.0)
        assert contains_point(ivl, 1.5)
        assert not contains_point(ivl, 2.0)
        assert contains_point(floats(1.0, 2.0, "[]"), 2.0)

    def test_unbounded_and_empty(self) -> None:
        assert contains_point(ints(None, None), 1000)
        assert not contains_point(IntegerInterval.empty(), 1)

    def test_in_operator(self) -> None:
        assert 2 in ints(1, 3)
        assert 3 not in ints(1, 3)

    def test_invalid_point(self) -> None:
        with pytest.raises(InvalidPointError):
            contains_point(ints(1, 3), "a")


class TestNoneIsNotAPoint:
    """None means unbounded only where a bound is expected, never as a point."""

    def test_contains_point(self) -> None:
        with pytest.raises(InvalidPointError):
            contains_point(ints(None, None), None)

    def test_in_operator(self) -> None:
        with pytest.raises(InvalidPointError):
            _ = None in ints(None, None)

    def test_single(self) -> None:
        with pytest.raises(InvalidPointError):
            IntegerInterval.single(None)  # type: ignore[arg-type]
        with pytest.raises(InvalidPointError):
            FloatInterval.single(None)  # type: ignore[arg-type]
