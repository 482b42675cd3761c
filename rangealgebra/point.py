"""The contract a point domain implements to be usable in an interval.

The algebra never looks at point values directly. Everything it needs to know
about a domain (ordering, discreteness, stepping, validation, text
conversion) goes through a ``PointType``.
"""

from abc import ABC, abstractmethod
from typing import Any, Generic, Literal, TypeVar

from rangealgebra.errors import InvalidPointError

P = TypeVar("P")

Ordering = Literal["lt", "eq", "gt"]


class PointType(ABC, Generic[P]):
    """Capabilities of a point domain.

    Subclasses must implement ``compare`` and ``normalize``. Discrete domains
    set ``discrete = True`` and implement ``step``. ``format`` and ``parse``
    are only needed by the text codec, and ``subtract`` only by ``size``.
    """

    discrete: bool = False

    # Size of an empty interval in this domain
    zero: Any = 0

    @abstractmethod
    def compare(self, a: P, b: P) -> Ordering:
        """Total order over points."""
        pass

    @abstractmethod
    def normalize(self, raw: Any) -> P:
        """Validate ``raw`` and return its canonical point value.

        Raises:
            InvalidPointError: If ``raw`` is not a valid point of this domain
        """
        pass

    def step(self, point: P, n: int) -> P:
        """Move a discrete point ``n`` positions (negative steps go left)."""
        raise NotImplementedError(
            f"{type(self).__name__} is continuous and cannot step points"
        )

    def subtract(self, a: P, b: P) -> Any:
        """Return the distance ``a - b`` in this domain's size unit."""
        raise NotImplementedError(f"{type(self).__name__} does not implement subtract")

    def format(self, point: P) -> str:
        raise NotImplementedError(f"{type(self).__name__} does not implement format")

    def parse(self, text: str) -> P:
        """Parse a point from its text form, raising ValueError on bad input."""
        raise NotImplementedError(f"{type(self).__name__} does not implement parse")

    def supports(self, hook: Literal["format", "parse", "subtract"]) -> bool:
        """True if this point type overrides the optional ``hook``."""
        return getattr(type(self), hook) is not getattr(PointType, hook)

    def invalid(self, raw: Any, expected: str) -> InvalidPointError:
        return InvalidPointError(
            f"{type(self).__name__} expects {expected}.\n"
            f"Got {type(raw).__name__!r}: {raw!r}"
        )


def natural_compare(a: Any, b: Any) -> Ordering:
    """Ordering for values that already support ``<`` and ``>``."""
    if a < b:
        return "lt"
    if a > b:
        return "gt"
    return "eq"
