"""Built-in point types and interval classes for common Python values.

Discrete domains (int, date) are normalized to ``[)`` bounds; continuous
domains (float, Decimal, datetime) keep the bounds they were given.
Datetimes come in two flavours, timezone-aware and naive, which never mix.
"""

from datetime import date, datetime, timedelta
from decimal import Decimal, InvalidOperation
from typing import Any

from dateutil.parser import isoparse
from typing_extensions import override

from rangealgebra.interval import Interval
from rangealgebra.point import Ordering, PointType, natural_compare
from rangealgebra.util import DEFAULT_BOUNDS


class IntegerPoints(PointType[int]):
    discrete = True
    zero = 0

    @override
    def compare(self, a: int, b: int) -> Ordering:
        return natural_compare(a, b)

    @override
    def normalize(self, raw: Any) -> int:
        if isinstance(raw, bool) or not isinstance(raw, int):
            raise self.invalid(raw, "an int")
        return raw

    @override
    def step(self, point: int, n: int) -> int:
        return point + n

    @override
    def subtract(self, a: int, b: int) -> int:
        return a - b

    @override
    def format(self, point: int) -> str:
        return str(point)

    @override
    def parse(self, text: str) -> int:
        return int(text)


class FloatPoints(PointType[float]):
    zero = 0.0

    @override
    def compare(self, a: float, b: float) -> Ordering:
        return natural_compare(a, b)

    @override
    def normalize(self, raw: Any) -> float:
        if isinstance(raw, bool) or not isinstance(raw, (int, float)):
            raise self.invalid(raw, "a float")
        value = float(raw)
        # NaN is unordered
        if value != value:
            raise self.invalid(raw, "a float that is not NaN")
        # -0.0 == 0.0 but they format differently
        if value == 0.0:
            return 0.0
        return value

    @override
    def subtract(self, a: float, b: float) -> float:
        return a - b

    @override
    def format(self, point: float) -> str:
        return repr(point)

    @override
    def parse(self, text: str) -> float:
        return float(text)


class DecimalPoints(PointType[Decimal]):
    zero = Decimal(0)

    @override
    def compare(self, a: Decimal, b: Decimal) -> Ordering:
        return natural_compare(a, b)

    @override
    def normalize(self, raw: Any) -> Decimal:
        if isinstance(raw, bool) or not isinstance(raw, (int, Decimal)):
            raise self.invalid(raw, "a Decimal or int (floats are inexact)")
        value = Decimal(raw)
        if value.is_nan():
            raise self.invalid(raw, "a Decimal that is not NaN")
        if value.is_zero():
            return abs(value)
        return value

    @override
    def subtract(self, a: Decimal, b: Decimal) -> Decimal:
        return a - b

    @override
    def format(self, point: Decimal) -> str:
        return str(point)

    @override
    def parse(self, text: str) -> Decimal:
        try:
            return Decimal(text)
        except InvalidOperation:
            raise ValueError(f"Invalid decimal: {text!r}") from None


class DatePoints(PointType[date]):
    discrete = True
    zero = 0

    @override
    def compare(self, a: date, b: date) -> Ordering:
        return natural_compare(a, b)

    @override
    def normalize(self, raw: Any) -> date:
        # datetime subclasses date but belongs to a continuous domain
        if isinstance(raw, datetime) or not isinstance(raw, date):
            raise self.invalid(raw, "a date")
        return raw

    @override
    def step(self, point: date, n: int) -> date:
        return point + timedelta(days=n)

    @override
    def subtract(self, a: date, b: date) -> int:
        """Number of days between the dates."""
        return (a - b).days

    @override
    def format(self, point: date) -> str:
        return point.isoformat()

    @override
    def parse(self, text: str) -> date:
        return date.fromisoformat(text)


class DateTimePoints(PointType[datetime]):
    """Timezone-aware datetimes."""

    zero = timedelta(0)

    @override
    def compare(self, a: datetime, b: datetime) -> Ordering:
        return natural_compare(a, b)

    @override
    def normalize(self, raw: Any) -> datetime:
        if not isinstance(raw, datetime):
            raise self.invalid(raw, "a timezone-aware datetime")
        if raw.tzinfo is None or raw.utcoffset() is None:
            raise self.invalid(
                raw,
                "a timezone-aware datetime\n"
                "Hint: Add timezone info: datetime(..., tzinfo=timezone.utc), "
                "or use NaiveDateTimeInterval",
            )
        return raw

    @override
    def subtract(self, a: datetime, b: datetime) -> timedelta:
        return a - b

    @override
    def format(self, point: datetime) -> str:
        return point.isoformat()

    @override
    def parse(self, text: str) -> datetime:
        return isoparse(text)


class NaiveDateTimePoints(PointType[datetime]):
    """Datetimes without timezone info."""

    zero = timedelta(0)

    @override
    def compare(self, a: datetime, b: datetime) -> Ordering:
        return natural_compare(a, b)

    @override
    def normalize(self, raw: Any) -> datetime:
        if not isinstance(raw, datetime) or raw.tzinfo is not None:
            raise self.invalid(raw, "a naive datetime (tzinfo=None)")
        return raw

    @override
    def subtract(self, a: datetime, b: datetime) -> timedelta:
        return a - b

    @override
    def format(self, point: datetime) -> str:
        return point.isoformat()

    @override
    def parse(self, text: str) -> datetime:
        return isoparse(text)


class IntegerInterval(Interval[int]):
    points = IntegerPoints()


class FloatInterval(Interval[float]):
    points = FloatPoints()


class DecimalInterval(Interval[Decimal]):
    points = DecimalPoints()


class DateInterval(Interval[date]):
    points = DatePoints()


class DateTimeInterval(Interval[datetime]):
    points = DateTimePoints()


class NaiveDateTimeInterval(Interval[datetime]):
    points = NaiveDateTimePoints()


_REGISTRY: dict[type, type[Interval[Any]]] = {
    int: IntegerInterval,
    float: FloatInterval,
    Decimal: DecimalInterval,
    date: DateInterval,
}


def register_interval_class(point_type: type, cls: type[Interval[Any]]) -> None:
    """Make ``interval()`` build ``cls`` for points of ``point_type``."""
    _REGISTRY[point_type] = cls


def interval_class_for(value: Any) -> type[Interval[Any]]:
    """Look up the interval class for a point value.

    Raises:
        TypeError: If no interval class is registered for the value's type
    """
    if isinstance(value, datetime):
        return DateTimeInterval if value.tzinfo is not None else NaiveDateTimeInterval
    if not isinstance(value, bool):
        for kind in type(value).__mro__:
            if kind in _REGISTRY:
                return _REGISTRY[kind]
    raise TypeError(
        f"No interval class registered for {type(value).__name__!r}: {value!r}\n"
        f"Hint: Register one with register_interval_class({type(value).__name__}, "
        f"MyInterval)"
    )


def interval(
    left: Any = None,
    right: Any = None,
    bounds: str = DEFAULT_BOUNDS,
) -> Interval[Any]:
    """Build an interval, picking its class from the type of the points.

    Example:
        >>> interval(1, 3)
        IntegerInterval<[1, 3)>
        >>> interval(date(2025, 1, 1), date(2025, 1, 31), "[]")
        DateInterval<[datetime.date(2025, 1, 1), datetime.date(2025, 2, 1))>
    """
    sample = left if left is not None else right
    if sample is None:
        raise TypeError(
            f"interval() cannot infer a point type without a left or right point.\n"
            f"Hint: Call the class directly, e.g. IntegerInterval.new()"
        )
    return interval_class_for(sample).new(left, right, bounds)
