"""Mapping between intervals and JSON-ready dicts.

The dict shape is::

    {"left": {"inclusive": bool, "value": point} | None,
     "right": {"inclusive": bool, "value": point} | None,
     "empty": bool}

``None`` on a side means unbounded on that side. Point values are stored as
is; encoding them (e.g. dates to strings) is left to the JSON encoder.
"""

from typing import Any, TypeVar

from rangealgebra.endpoint import UNBOUNDED, Bound, Bounded, Endpoint
from rangealgebra.interval import Interval

IvlT = TypeVar("IvlT", bound=Interval[Any])


def to_dict(interval: Interval[Any]) -> dict[str, Any]:
    """Describe ``interval`` as a plain dict.

    Example:
        >>> to_dict(IntegerInterval.new(1, 3))
        {'left': {'inclusive': True, 'value': 1},
         'right': {'inclusive': False, 'value': 3}, 'empty': False}
    """
    if interval.is_empty:
        return {"left": None, "right": None, "empty": True}
    return {
        "left": _endpoint_to_dict(interval.left),
        "right": _endpoint_to_dict(interval.right),
        "empty": False,
    }


def from_dict(data: dict[str, Any], cls: type[IvlT]) -> IvlT:
    """Build a normalized ``cls`` interval from a ``to_dict`` style dict.

    Raises:
        ValueError: If the dict does not have the expected shape
        InvalidIntervalError: If the described interval is invalid
    """
    if not isinstance(data, dict):
        raise _malformed(data, f"expected a dict, got {type(data).__name__!r}")
    empty = data.get("empty", False)
    if not isinstance(empty, bool):
        raise _malformed(data, f"'empty' must be a bool, got {empty!r}")
    if empty:
        return cls.empty()
    if "left" not in data or "right" not in data:
        raise _malformed(data, "missing 'left' or 'right'")
    left = _endpoint_from_dict(data, data["left"])
    right = _endpoint_from_dict(data, data["right"])
    return cls.from_endpoints(left, right)


def _endpoint_to_dict(endpoint: Endpoint) -> dict[str, Any] | None:
    if isinstance(endpoint, Bounded):
        return {"inclusive": endpoint.inclusive, "value": endpoint.point}
    return None


def _endpoint_from_dict(data: dict[str, Any], side: Any) -> Endpoint:
    if side is None:
        return UNBOUNDED
    if not isinstance(side, dict) or "value" not in side:
        raise _malformed(data, f"malformed endpoint {side!r}")
    inclusive = side.get("inclusive")
    # "false" is truthy, so only real bools are accepted
    if not isinstance(inclusive, bool):
        raise _malformed(data, f"'inclusive' must be a bool, got {inclusive!r}")
    bound = Bound.INCLUSIVE if inclusive else Bound.EXCLUSIVE
    return Bounded(bound, side["value"])


def _malformed(data: Any, detail: str) -> ValueError:
    return ValueError(
        f"Cannot read an interval from {data!r}: {detail}.\n"
        f"Hint: Expected keys 'left', 'right' and 'empty', with each side "
        f"either None or {{'inclusive': bool, 'value': point}}"
    )
