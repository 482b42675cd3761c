from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, ClassVar, Generic, Self, TypeVar

from rangealgebra.endpoint import (
    EMPTY,
    UNBOUNDED,
    Bound,
    Bounded,
    Endpoint,
    exclusive,
    inclusive,
)
from rangealgebra.errors import InvalidIntervalError
from rangealgebra.point import PointType
from rangealgebra.util import BOUND_SPECS, DEFAULT_BOUNDS, BoundKind

if TYPE_CHECKING:
    from rangealgebra.codec import ParseResult

P = TypeVar("P")


@dataclass(frozen=True)
class Interval(Generic[P]):
    """The set of points between two endpoints.

    Concrete interval types subclass this and bind ``points`` to the domain's
    ``PointType``. Build values with ``new``, ``from_endpoints``, ``single`` or
    ``empty``; they all return the normalized form, so two intervals holding
    the same points compare equal.

    Calling the dataclass constructor directly skips normalization. That is
    useful for inspecting raw bounds but the result should be passed through
    ``normalize`` before it is used with the algebra.
    """

    left: Endpoint
    right: Endpoint

    points: ClassVar[PointType[Any]]

    def __post_init__(self) -> None:
        if getattr(type(self), "points", None) is None:
            raise TypeError(
                f"{type(self).__name__} has no point type.\n"
                f"Hint: Use a concrete interval class such as IntegerInterval, "
                f"or subclass Interval and set `points`:\n"
                f"  class MyInterval(Interval[MyPoint]):\n"
                f"      points = MyPoints()"
            )
        for side, endpoint in (("left", self.left), ("right", self.right)):
            if not (
                endpoint is UNBOUNDED or endpoint is EMPTY or isinstance(endpoint, Bounded)
            ):
                raise TypeError(
                    f"Interval {side} endpoint must be Bounded, UNBOUNDED or EMPTY.\n"
                    f"Got {type(endpoint).__name__!r}: {endpoint!r}\n"
                    f"Hint: Pass raw points to {type(self).__name__}.new() instead"
                )
        if (self.left is EMPTY) != (self.right is EMPTY):
            raise InvalidIntervalError(
                f"EMPTY must be used for both endpoints, "
                f"got left={self.left!r}, right={self.right!r}"
            )

    @classmethod
    def new(
        cls,
        left: P | None = None,
        right: P | None = None,
        bounds: str = DEFAULT_BOUNDS,
    ) -> Self:
        """Create a normalized interval from raw points and a bound spec.

        Args:
            left: Left point, or None for unbounded
            right: Right point, or None for unbounded
            bounds: One of "[)", "[]", "(]", "()", or a single bracket
                ("[", "(", "]", ")") to leave the other side unbounded, or ""
                for fully unbounded

        Raises:
            InvalidPointError: If a point is not valid for this interval type
            InvalidIntervalError: If bounds is unknown or left > right

        Example:
            >>> IntegerInterval.new(1, 3, "[]")
            IntegerInterval<[1, 4)>
        """
        try:
            left_kind, right_kind = BOUND_SPECS[bounds]
        except KeyError:
            valid = ", ".join(repr(spec) for spec in BOUND_SPECS)
            raise InvalidIntervalError(
                f"Unknown bounds {bounds!r}. Valid bounds: {valid}"
            ) from None

        return cls.from_endpoints(
            _raw_endpoint(left, left_kind),
            _raw_endpoint(right, right_kind),
        )

    @classmethod
    def from_endpoints(cls, left: Endpoint, right: Endpoint) -> Self:
        return normalize(cls(left=left, right=right))

    @classmethod
    def single(cls, point: P) -> Self:
        """Interval containing exactly one point.

        Raises:
            InvalidPointError: If ``point`` is not valid for this interval type,
                including None
        """
        return cls.from_endpoints(inclusive(point), inclusive(point))

    @classmethod
    def empty(cls) -> Self:
        return cls(left=EMPTY, right=EMPTY)

    @classmethod
    def parse(cls, text: str) -> "ParseResult[Self]":
        from rangealgebra import codec

        return codec.parse(text, cls)

    @property
    def is_empty(self) -> bool:
        """True if the interval contains no points.

        Computed from the bounds rather than trusting the EMPTY marker, so
        raw (non-normalized) values answer correctly too.
        """
        left, right = self.left, self.right
        if left is EMPTY:
            return True
        if not (isinstance(left, Bounded) and isinstance(right, Bounded)):
            return False

        ordering = self.points.compare(left.point, right.point)
        if ordering == "gt":
            return True
        if ordering == "eq":
            return not (left.inclusive and right.inclusive)
        # (p, p+1) holds nothing in a discrete domain
        if self.points.discrete and not left.inclusive and not right.inclusive:
            return self.points.compare(self.points.step(left.point, 1), right.point) == "eq"
        return False

    @property
    def left_unbounded(self) -> bool:
        return self.left is UNBOUNDED

    @property
    def right_unbounded(self) -> bool:
        return self.right is UNBOUNDED

    @property
    def left_inclusive(self) -> bool:
        return isinstance(self.left, Bounded) and self.left.inclusive

    @property
    def right_inclusive(self) -> bool:
        return isinstance(self.right, Bounded) and self.right.inclusive

    @property
    def left_exclusive(self) -> bool:
        return isinstance(self.left, Bounded) and not self.left.inclusive

    @property
    def right_exclusive(self) -> bool:
        return isinstance(self.right, Bounded) and not self.right.inclusive

    @property
    def left_point(self) -> P | None:
        """Left point value, or None when unbounded or empty."""
        if isinstance(self.left, Bounded):
            return self.left.point
        return None

    @property
    def right_point(self) -> P | None:
        """Right point value, or None when unbounded or empty."""
        if isinstance(self.right, Bounded):
            return self.right.point
        return None

    def overlaps(self, other: "Interval[P]") -> bool:
        from rangealgebra.predicates import overlaps

        return overlaps(self, other)

    def contains(self, other: "Interval[P]") -> bool:
        from rangealgebra.predicates import contains

        return contains(self, other)

    def partition(self, x: "Interval[P] | P") -> list[Self]:
        from rangealgebra.operations import partition

        return partition(self, x)

    def __contains__(self, item: "Interval[P] | P") -> bool:
        from rangealgebra.predicates import contains, contains_point

        if isinstance(item, Interval):
            return contains(self, item)
        return contains_point(self, item)

    def __or__(self, other: Self) -> Self:
        from rangealgebra.operations import union

        return union(self, other)

    def __and__(self, other: Self) -> Self:
        from rangealgebra.operations import intersection

        return intersection(self, other)

    def __sub__(self, other: Self) -> Self:
        from rangealgebra.operations import difference

        return difference(self, other)

    def __repr__(self) -> str:
        name = type(self).__name__
        if self.left is EMPTY:
            return f"{name}<empty>"

        left = right = ""
        if isinstance(self.left, Bounded):
            left = f"{'[' if self.left.inclusive else '('}{self.left.point!r}"
        if isinstance(self.right, Bounded):
            right = f"{self.right.point!r}{']' if self.right.inclusive else ')'}"
        return f"{name}<{left}, {right}>"

    def __str__(self) -> str:
        """Text form such as ``[1,3)`` when the point type can format points."""
        if self.points.supports("format"):
            from rangealgebra import codec

            return codec.format(self)
        return repr(self)


IvlT = TypeVar("IvlT", bound=Interval[Any])


def normalize(interval: IvlT) -> IvlT:
    """Return the canonical form of ``interval``.

    - Points are validated through the point type's ``normalize``.
    - Any interval holding no points becomes the EMPTY interval.
    - Discrete intervals are rewritten to ``[)`` bounds, so ``[1,2]``,
      ``(0,3)`` and ``[1,3)`` all become ``[1,3)``.

    Normalizing an already normalized interval returns an equal value.

    Raises:
        InvalidPointError: If a point is not valid for the interval's domain
        InvalidIntervalError: If the left point is greater than the right point
    """
    cls = type(interval)
    points = cls.points
    if interval.left is EMPTY:
        return cls.empty()

    left = _normalize_point(points, interval.left)
    right = _normalize_point(points, interval.right)

    if isinstance(left, Bounded) and isinstance(right, Bounded):
        ordering = points.compare(left.point, right.point)
        if ordering == "gt":
            raise InvalidIntervalError(
                f"{cls.__name__} left point must be <= right point.\n"
                f"Got left={left.point!r}, right={right.point!r}"
            )
        if ordering == "eq" and not (left.inclusive and right.inclusive):
            return cls.empty()

    if not points.discrete:
        return cls(left=left, right=right)

    if isinstance(left, Bounded) and not left.inclusive:
        left = inclusive(points.step(left.point, 1))
    if isinstance(right, Bounded) and right.inclusive:
        right = exclusive(points.step(right.point, 1))

    # (1,2) over integers became [2,2)
    if isinstance(left, Bounded) and isinstance(right, Bounded):
        if points.compare(left.point, right.point) != "lt":
            return cls.empty()

    return cls(left=left, right=right)


def size(interval: Interval[Any]) -> Any:
    """Distance between the left and right points, ignoring bounds.

    Discrete intervals are always ``[)``, so this is their number of points.
    Returns None for intervals unbounded on either side and the domain's
    zero for the empty interval.
    """
    points = interval.points
    if interval.is_empty:
        return points.zero
    left, right = interval.left, interval.right
    if not (isinstance(left, Bounded) and isinstance(right, Bounded)):
        return None
    return points.subtract(right.point, left.point)


def ensure_same_type(a: Interval[Any], b: Any) -> None:
    if type(a) is not type(b):
        raise TypeError(
            f"Both operands must be the same interval type.\n"
            f"Got: {type(a).__name__} and {type(b).__name__}\n"
            f"Hint: Convert one side first, e.g. {type(a).__name__}.new(...)"
        )


def _raw_endpoint(point: Any, kind: BoundKind | None) -> Endpoint:
    if point is None or kind is None:
        return UNBOUNDED
    return Bounded(Bound(kind), point)


def _normalize_point(points: PointType[Any], endpoint: Endpoint) -> Endpoint:
    if isinstance(endpoint, Bounded):
        return Bounded(endpoint.bound, points.normalize(endpoint.point))
    return endpoint
