"""Text form of intervals.

The grammar follows SQL range literals::

    interval := "empty" | ("[" | "(") [point] "," [point] ("]" | ")")

A missing point means the interval is unbounded on that side, in which case
the bracket is omitted too: ``",5)"``, ``"[1,"`` and ``","``.

``format`` always writes the normalized form, so ``parse(format(x))``
returns ``x``. ``parse`` reports bad input as a ``ParseResult`` instead of
raising; call ``unwrap()`` on the result for the raising behaviour.
"""

import logging
from dataclasses import dataclass
from typing import Any, Generic, Literal, TypeVar

from rangealgebra.endpoint import UNBOUNDED, Bound, Bounded, Endpoint, Side
from rangealgebra.errors import InvalidIntervalError, IntervalParseError
from rangealgebra.interval import Interval
from rangealgebra.util import EMPTY_LITERAL, LEFT_BRACKETS, RIGHT_BRACKETS, SEPARATOR

logger = logging.getLogger(__name__)

IvlT = TypeVar("IvlT", bound=Interval[Any])

Reason = Literal[
    "missing_comma",
    "invalid_point",
    "missing_bound",
    "not_implemented",
    "invalid_interval",
]


@dataclass(frozen=True)
class ParseError:
    """Why a piece of text is not an interval.

    Attributes:
        reason: Failure kind
        side: Side the failure was found on, if it is side specific
        text: The offending point text ("invalid_point"), the detail message
            ("invalid_interval") or the interval class name ("not_implemented")
        hook: Missing point type hook, "point_format" or "point_parse"
            ("not_implemented")
    """

    reason: Reason
    side: Side | None = None
    text: str | None = None
    hook: str | None = None

    def __str__(self) -> str:
        where = f"{self.side}: " if self.side else ""
        if self.reason == "missing_comma":
            return "missing ',' between the left and right endpoints"
        if self.reason == "missing_bound":
            bracket = "'[' or '('" if self.side == "left" else "']' or ')'"
            return f"{where}missing bound, expected {bracket}"
        if self.reason == "invalid_point":
            return f"{where}invalid point {self.text!r}"
        if self.reason == "not_implemented":
            return f"the point type of {self.text} does not implement {self.hook}"
        return f"invalid interval: {self.text}"


@dataclass(frozen=True)
class ParseResult(Generic[IvlT]):
    """Result of parsing interval text.

    Attributes:
        success: True if the text was a valid interval
        interval: The parsed interval if successful, None otherwise
        error: The reason parsing failed, None if successful
    """

    success: bool
    interval: IvlT | None
    error: ParseError | None

    def unwrap(self) -> IvlT:
        """Return the parsed interval.

        Raises:
            IntervalParseError: If parsing failed
        """
        if self.error is not None:
            raise IntervalParseError(self.error)
        return self.interval  # pyright: ignore[reportReturnType]


def format(interval: Interval[Any]) -> str:
    """Write ``interval`` in its text form.

    Raises:
        NotImplementedError: If the point type has no ``format`` hook
    """
    points = interval.points
    if not points.supports("format"):
        raise NotImplementedError(
            f"{type(interval).__name__} cannot be formatted: "
            f"{type(points).__name__} does not implement point_format"
        )
    if interval.is_empty:
        return EMPTY_LITERAL

    left = right = ""
    if isinstance(interval.left, Bounded):
        bracket = "[" if interval.left.inclusive else "("
        left = bracket + points.format(interval.left.point)
    if isinstance(interval.right, Bounded):
        bracket = "]" if interval.right.inclusive else ")"
        right = points.format(interval.right.point) + bracket
    return f"{left}{SEPARATOR}{right}"


def parse(text: str, cls: type[IvlT]) -> ParseResult[IvlT]:
    """Read an interval of type ``cls`` from ``text``.

    Example:
        >>> parse("[1,3]", IntegerInterval).unwrap()
        IntegerInterval<[1, 4)>
        >>> parse("1,3]", IntegerInterval).error
        ParseError(reason='missing_bound', side='left', text=None, hook=None)
    """
    if not cls.points.supports("parse"):
        return _failed(
            ParseError("not_implemented", text=cls.__name__, hook="point_parse"),
            text,
        )
    if text == EMPTY_LITERAL:
        return ParseResult(success=True, interval=cls.empty(), error=None)

    left_text, separator, right_text = text.partition(SEPARATOR)
    if not separator:
        return _failed(ParseError("missing_comma"), text)

    left = _read_endpoint(cls, "left", left_text)
    if isinstance(left, ParseError):
        return _failed(left, text)
    right = _read_endpoint(cls, "right", right_text)
    if isinstance(right, ParseError):
        return _failed(right, text)

    try:
        interval = cls.from_endpoints(left, right)
    except InvalidIntervalError as e:
        return _failed(ParseError("invalid_interval", text=str(e)), text)
    return ParseResult(success=True, interval=interval, error=None)


def _read_endpoint(
    cls: type[Interval[Any]], side: Side, text: str
) -> Endpoint | ParseError:
    if not text:
        return UNBOUNDED

    if side == "left":
        kind, point_text = LEFT_BRACKETS.get(text[0]), text[1:]
    else:
        kind, point_text = RIGHT_BRACKETS.get(text[-1]), text[:-1]
    if kind is None:
        return ParseError("missing_bound", side=side)

    points = cls.points
    try:
        point = points.normalize(points.parse(point_text))
    except (ValueError, TypeError):
        return ParseError("invalid_point", side=side, text=point_text)
    return Bounded(Bound(kind), point)


def _failed(error: ParseError, text: str) -> ParseResult[Any]:
    logger.debug("Rejected interval text %r: %s", text, error)
    return ParseResult(success=False, interval=None, error=error)
