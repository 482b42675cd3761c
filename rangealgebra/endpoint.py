from dataclasses import dataclass
from enum import Enum
from typing import Any, Generic, Literal, TypeAlias, TypeVar

from rangealgebra.errors import InvalidComparisonError
from rangealgebra.point import Ordering, PointType, natural_compare

P = TypeVar("P")

Side = Literal["left", "right"]


class Marker(Enum):
    UNBOUNDED = "unbounded"
    EMPTY = "empty"

    def __repr__(self) -> str:
        return self.name


UNBOUNDED = Marker.UNBOUNDED
EMPTY = Marker.EMPTY


class Bound(Enum):
    INCLUSIVE = "inclusive"
    EXCLUSIVE = "exclusive"

    def invert(self) -> "Bound":
        if self is Bound.INCLUSIVE:
            return Bound.EXCLUSIVE
        return Bound.INCLUSIVE


@dataclass(frozen=True)
class Bounded(Generic[P]):
    """A finite endpoint: a point plus whether the point itself is included."""

    bound: Bound
    point: P

    @property
    def inclusive(self) -> bool:
        return self.bound is Bound.INCLUSIVE

    def invert(self) -> "Bounded[P]":
        """Same point, opposite inclusivity (the boundary of the complement)."""
        return Bounded(self.bound.invert(), self.point)

    def __repr__(self) -> str:
        return f"{self.bound.name}({self.point!r})"


Endpoint: TypeAlias = Bounded[Any] | Literal[Marker.UNBOUNDED, Marker.EMPTY]


def inclusive(point: P) -> Bounded[P]:
    return Bounded(Bound.INCLUSIVE, point)


def exclusive(point: P) -> Bounded[P]:
    return Bounded(Bound.EXCLUSIVE, point)


def compare_bounds(
    points: PointType[Any],
    side_a: Side,
    a: Endpoint,
    side_b: Side,
    b: Endpoint,
) -> Ordering:
    """Order two endpoints, taking the side each one bounds into account.

    Unbounded endpoints sit at -inf when bounding the left side and +inf when
    bounding the right side. Finite endpoints order by point first; at the
    same point an exclusive left bound sits just after the point and an
    exclusive right bound just before it.

    Raises:
        InvalidComparisonError: If either endpoint is the EMPTY marker
    """
    if a is EMPTY or b is EMPTY:
        raise InvalidComparisonError(
            f"Cannot compare the endpoint of an empty interval.\n"
            f"Got: {side_a}={a!r}, {side_b}={b!r}\n"
            f"Hint: Check is_empty before comparing bounds"
        )

    if a is UNBOUNDED and b is UNBOUNDED:
        if side_a == side_b:
            return "eq"
        return "lt" if side_a == "left" else "gt"
    if a is UNBOUNDED:
        return "lt" if side_a == "left" else "gt"
    if b is UNBOUNDED:
        return "gt" if side_b == "left" else "lt"

    ordering = points.compare(a.point, b.point)
    if ordering != "eq":
        return ordering
    return natural_compare(_offset(side_a, a), _offset(side_b, b))


def _offset(side: Side, endpoint: Bounded[Any]) -> int:
    if endpoint.inclusive:
        return 0
    return 1 if side == "left" else -1
