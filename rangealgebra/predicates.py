"""Relational predicates between intervals.

Every predicate reduces to ``compare_bounds`` once emptiness and
unboundedness are out of the way. All relations are False when either
operand is empty, except ``contains``: the empty interval is contained in
every interval.
"""

from typing import Any, TypeVar

from rangealgebra.endpoint import Bounded, compare_bounds
from rangealgebra.errors import NotNormalizedError
from rangealgebra.interval import Interval, ensure_same_type

P = TypeVar("P")


def strictly_left_of(a: Interval[P], b: Interval[P]) -> bool:
    """True if every point of ``a`` is less than every point of ``b``.

    Example:
        a: [---)
        b:     [---)
        r: true

        a: [---]
        b:     [---]
        r: false (share the boundary point)
    """
    ensure_same_type(a, b)
    if a.is_empty or b.is_empty or a.right_unbounded or b.left_unbounded:
        return False
    return compare_bounds(a.points, "right", a.right, "left", b.left) == "lt"


def strictly_right_of(a: Interval[P], b: Interval[P]) -> bool:
    """True if every point of ``a`` is greater than every point of ``b``."""
    ensure_same_type(a, b)
    if a.is_empty or b.is_empty or a.left_unbounded or b.right_unbounded:
        return False
    return compare_bounds(a.points, "left", a.left, "right", b.right) == "gt"


def adjacent_left_of(a: Interval[P], b: Interval[P]) -> bool:
    """True if ``a`` ends exactly where ``b`` starts, with no shared point.

    Example:
        a: [---)
        b:     [---)
        r: true

        a: (---)
        b:     (---)
        r: false (the boundary point is in neither)

    Raises:
        NotNormalizedError: If a discrete operand is not in ``[)`` form
    """
    ensure_same_type(a, b)
    _require_normalized(a, b)
    if a.is_empty or b.is_empty or a.right_unbounded or b.left_unbounded:
        return False
    return _touching(a, a.right, b.left)


def adjacent_right_of(a: Interval[P], b: Interval[P]) -> bool:
    """True if ``a`` starts exactly where ``b`` ends, with no shared point.

    Raises:
        NotNormalizedError: If a discrete operand is not in ``[)`` form
    """
    ensure_same_type(a, b)
    _require_normalized(a, b)
    if a.is_empty or b.is_empty or a.left_unbounded or b.right_unbounded:
        return False
    return _touching(a, a.left, b.right)


def adjacent(a: Interval[P], b: Interval[P]) -> bool:
    """True if ``a`` and ``b`` touch on either side without overlapping."""
    return adjacent_left_of(a, b) or adjacent_right_of(a, b)


def overlaps(a: Interval[P], b: Interval[P]) -> bool:
    """True if ``a`` and ``b`` share at least one point.

    Example:
        a: [---)
        b:   [---)
        r: true

        a: [---)
        b:     [---)
        r: false
    """
    return (
        not a.is_empty
        and not b.is_empty
        and not strictly_left_of(a, b)
        and not strictly_right_of(a, b)
    )


def contains(a: Interval[P], b: Interval[P]) -> bool:
    """True if every point of ``b`` is also in ``a``.

    Example:
        a: [-------]
        b:   [---]
        r: true

        a: [---]
        b: (---)
        r: true

        a: (---)
        b: [---]
        r: false
    """
    ensure_same_type(a, b)
    if b.is_empty:
        return True
    if a.is_empty:
        return False
    points = a.points
    return compare_bounds(points, "left", a.left, "left", b.left) != "gt" and (
        compare_bounds(points, "right", a.right, "right", b.right) != "lt"
    )


def contains_point(a: Interval[P], x: P) -> bool:
    return contains(a, type(a).single(x))


def _touching(a: Interval[Any], end: Bounded[Any], start: Bounded[Any]) -> bool:
    return (
        a.points.compare(end.point, start.point) == "eq"
        and end.inclusive != start.inclusive
    )


def _require_normalized(*intervals: Interval[Any]) -> None:
    for interval in intervals:
        if not interval.points.discrete:
            continue
        if interval.left_exclusive or interval.right_inclusive:
            raise NotNormalizedError(
                f"Adjacency on discrete intervals requires [) bounds.\n"
                f"Got: {interval!r}\n"
                f"Hint: Build intervals with {type(interval).__name__}.new() "
                f"or pass them through normalize()"
            )
