"""Constants shared by the normalizer and the text codec.

Bound specs are the bracket strings accepted by ``Interval.new``.
Each maps to the (left, right) bound kinds it describes; ``None`` marks an
unbounded side.
"""

from typing import Literal

BoundKind = Literal["inclusive", "exclusive"]

DEFAULT_BOUNDS = "[)"

BOUND_SPECS: dict[str, tuple[BoundKind | None, BoundKind | None]] = {
    # Fully unbounded
    "": (None, None),
    # Unbounded on one side
    "[": ("inclusive", None),
    "(": ("exclusive", None),
    "]": (None, "inclusive"),
    ")": (None, "exclusive"),
    # Bounded on both sides
    "[]": ("inclusive", "inclusive"),
    "[)": ("inclusive", "exclusive"),
    "(]": ("exclusive", "inclusive"),
    "()": ("exclusive", "exclusive"),
}

# Text codec tokens
EMPTY_LITERAL = "empty"
SEPARATOR = ","
LEFT_BRACKETS = {"[": "inclusive", "(": "exclusive"}
RIGHT_BRACKETS = {"]": "inclusive", ")": "exclusive"}
