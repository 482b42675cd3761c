from .builtin import (
    DateInterval,
    DatePoints,
    DateTimeInterval,
    DateTimePoints,
    DecimalInterval,
    DecimalPoints,
    FloatInterval,
    FloatPoints,
    IntegerInterval,
    IntegerPoints,
    NaiveDateTimeInterval,
    NaiveDateTimePoints,
    interval,
    interval_class_for,
    register_interval_class,
)
from .codec import ParseError, ParseResult, format, parse
from .endpoint import EMPTY, UNBOUNDED, Bound, Bounded, compare_bounds
from .errors import (
    IntervalInvariantError,
    IntervalOperationError,
    IntervalParseError,
    InvalidComparisonError,
    InvalidIntervalError,
    InvalidPointError,
    NonContiguousDifferenceError,
    NonContiguousUnionError,
    NotNormalizedError,
)
from .interval import Interval, normalize, size
from .operations import difference, intersection, partition, union
from .point import PointType
from .predicates import (
    adjacent,
    adjacent_left_of,
    adjacent_right_of,
    contains,
    contains_point,
    overlaps,
    strictly_left_of,
    strictly_right_of,
)
from .serialize import from_dict, to_dict

__all__ = [
    "Interval",
    "PointType",
    "Bound",
    "Bounded",
    "UNBOUNDED",
    "EMPTY",
    "compare_bounds",
    "normalize",
    "size",
    "strictly_left_of",
    "strictly_right_of",
    "adjacent_left_of",
    "adjacent_right_of",
    "adjacent",
    "overlaps",
    "contains",
    "contains_point",
    "union",
    "intersection",
    "difference",
    "partition",
    "format",
    "parse",
    "ParseResult",
    "ParseError",
    "to_dict",
    "from_dict",
    "IntegerInterval",
    "FloatInterval",
    "DecimalInterval",
    "DateInterval",
    "DateTimeInterval",
    "NaiveDateTimeInterval",
    "IntegerPoints",
    "FloatPoints",
    "DecimalPoints",
    "DatePoints",
    "DateTimePoints",
    "NaiveDateTimePoints",
    "interval",
    "interval_class_for",
    "register_interval_class",
    "InvalidIntervalError",
    "InvalidPointError",
    "IntervalOperationError",
    "NonContiguousUnionError",
    "NonContiguousDifferenceError",
    "IntervalInvariantError",
    "InvalidComparisonError",
    "NotNormalizedError",
    "IntervalParseError",
]
