"""Data model for link geometry."""

from __future__ import annotations

import math
from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from enum import Enum


class LineType(Enum):
    """Visual style of a link."""

    STRAIGHT = "STRAIGHT"
    CURVE_SMOOTH = "CURVE_SMOOTH"
    CURVE_FULL = "CURVE_FULL"


def resolve_line_type(value: object) -> LineType:
    """Return the LineType for a member or an exact member name.

    Anything else (other casing, typos, None) falls back to STRAIGHT.
    """
    if isinstance(value, LineType):
        return value
    if isinstance(value, str):
        return LineType.__members__.get(value, LineType.STRAIGHT)
    return LineType.STRAIGHT


@dataclass(frozen=True)
class Point:
    """A 2D coordinate. Undefined coordinates are NaN."""

    x: float = math.nan
    y: float = math.nan

    @classmethod
    def coerce(cls, value: object) -> Point:
        """Build a Point from a Point, an {x, y} mapping, an (x, y) pair or None."""
        if value is None:
            return cls()
        if isinstance(value, Point):
            return value
        if isinstance(value, Mapping):
            return cls(_coord(value.get("x")), _coord(value.get("y")))
        if isinstance(value, Sequence) and not isinstance(value, str):
            if len(value) != 2:
                raise ValueError(
                    f"Expected an (x, y) pair, got a sequence of length {len(value)}"
                )
            return cls(_coord(value[0]), _coord(value[1]))
        raise ValueError(
            f"Cannot interpret {value!r} as a point. "
            "Use a Point, a mapping with 'x'/'y' keys, or an (x, y) pair."
        )


def _coord(value: object) -> float:
    if value is None:
        return math.nan
    return float(value)
