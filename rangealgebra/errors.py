from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from rangealgebra.codec import ParseError


class InvalidIntervalError(ValueError):
    """Raised when raw bounds cannot form an interval (e.g. left > right)."""


class InvalidPointError(InvalidIntervalError):
    """Raised when a point type rejects a raw point value."""


class IntervalOperationError(ValueError):
    """An operation is not defined for the given operands.

    The inputs are valid intervals; the result just cannot be expressed as a
    single interval.
    """


class NonContiguousUnionError(IntervalOperationError):
    pass


class NonContiguousDifferenceError(IntervalOperationError):
    pass


class IntervalInvariantError(RuntimeError):
    """A caller broke a precondition of the algebra."""


class InvalidComparisonError(IntervalInvariantError):
    pass


class NotNormalizedError(IntervalInvariantError):
    pass


class IntervalParseError(ValueError):
    def __init__(self, error: "ParseError"):
        super().__init__(str(error))
        self.error: "ParseError" = error
