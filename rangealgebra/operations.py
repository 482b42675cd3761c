from functools import reduce
from typing import Any, TypeVar

from rangealgebra.endpoint import Bounded, Endpoint, Side, compare_bounds
from rangealgebra.errors import NonContiguousDifferenceError, NonContiguousUnionError
from rangealgebra.interval import Interval, ensure_same_type
from rangealgebra.predicates import adjacent, contains, overlaps

IvlT = TypeVar("IvlT", bound=Interval[Any])


def union(*intervals: IvlT) -> IvlT:
    """Smallest interval holding every point of the given intervals.

    Folds left over the arguments (equivalent to chaining ``|``). Each step
    must overlap or touch the accumulated result.

    Raises:
        NonContiguousUnionError: If two operands are separated by a gap

    Example:
        >>> union(IntegerInterval.new(1, 2), IntegerInterval.new(2, 3))
        IntegerInterval<[1, 3)>
    """
    if not intervals:
        raise ValueError(
            f"union() requires at least one interval argument.\n"
            f"Example: union(a, b, c)"
        )
    return reduce(_union2, intervals)


def intersection(*intervals: IvlT) -> IvlT:
    """Interval of points shared by all arguments (equivalent to chaining ``&``)."""
    if not intervals:
        raise ValueError(
            f"intersection() requires at least one interval argument.\n"
            f"Example: intersection(a, b, c)"
        )
    return reduce(_intersection2, intervals)


def _union2(a: IvlT, b: IvlT) -> IvlT:
    ensure_same_type(a, b)
    if a.is_empty:
        return b
    if b.is_empty:
        return a
    if not (overlaps(a, b) or adjacent(a, b)):
        raise NonContiguousUnionError(
            f"Cannot union {a!r} and {b!r}: there is a gap between them.\n"
            f"The result would not be a single interval.\n"
            f"Hint: Check overlaps(a, b) or adjacent(a, b) first"
        )
    return type(a).from_endpoints(
        _outermost(a, "left", a.left, b.left),
        _outermost(a, "right", a.right, b.right),
    )


def _intersection2(a: IvlT, b: IvlT) -> IvlT:
    ensure_same_type(a, b)
    if not overlaps(a, b):
        return type(a).empty()
    return type(a).from_endpoints(
        _innermost(a, "left", a.left, b.left),
        _innermost(a, "right", a.right, b.right),
    )


def difference(a: IvlT, b: IvlT) -> IvlT:
    """Points of ``a`` that are not in ``b``.

    Example:
        a: [------)
        b:    [------)
        r: [--)

        a: [-----------]
        b:    (----)
        r: error (two pieces would remain)

    Raises:
        NonContiguousDifferenceError: If ``b`` lies strictly inside ``a``
    """
    ensure_same_type(a, b)
    if a.is_empty:
        return type(a).empty()
    if b.is_empty or not overlaps(a, b):
        return a
    if contains(b, a):
        return type(a).empty()

    points = a.points
    keeps_left = compare_bounds(points, "left", a.left, "left", b.left) == "lt"
    keeps_right = compare_bounds(points, "right", a.right, "right", b.right) == "gt"

    if keeps_left and keeps_right:
        raise NonContiguousDifferenceError(
            f"Cannot subtract {b!r} from {a!r}: it splits the interval in two.\n"
            f"Hint: Use partition(a, b) to get the pieces on either side"
        )
    if keeps_left:
        return type(a).from_endpoints(a.left, _flip(b.left))
    return type(a).from_endpoints(_flip(b.right), a.right)


def partition(a: IvlT, x: "IvlT | Any") -> list[IvlT]:
    """Split ``a`` into the parts left of, inside, and right of ``x``.

    ``x`` is a point or an interval of the same type. Returns three intervals
    whose union is ``a`` (outer pieces may be empty), or an empty list when
    ``a`` does not contain ``x``.

    Example:
        a: [-------)
        x:    [-)
        r: [--) [-) [--)
    """
    cls = type(a)
    if not isinstance(x, Interval):
        x = cls.single(x)
    ensure_same_type(a, x)

    if x.is_empty or not contains(a, x):
        return []

    before = cls.empty()
    after = cls.empty()
    if isinstance(x.left, Bounded):
        before = cls.from_endpoints(a.left, x.left.invert())
    if isinstance(x.right, Bounded):
        after = cls.from_endpoints(x.right.invert(), a.right)
    return [before, x, after]


def _outermost(a: Interval[Any], side: Side, p: Endpoint, q: Endpoint) -> Endpoint:
    ordering = compare_bounds(a.points, side, p, side, q)
    if side == "left":
        return q if ordering == "gt" else p
    return q if ordering == "lt" else p


def _innermost(a: Interval[Any], side: Side, p: Endpoint, q: Endpoint) -> Endpoint:
    ordering = compare_bounds(a.points, side, p, side, q)
    if side == "left":
        return q if ordering == "lt" else p
    return q if ordering == "gt" else p


def _flip(endpoint: Endpoint) -> Endpoint:
    # Only called on endpoints the caller has shown to be finite
    if not isinstance(endpoint, Bounded):
        raise TypeError(f"Expected a bounded endpoint, got {endpoint!r}")
    return endpoint.invert()
