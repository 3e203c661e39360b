"""Numeric intervals that can be stepped through."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Iterator, Union

Number = Union[int, float]


class IntervalType(Enum):
    """Which ends of an interval are included."""

    OPEN = 0  # (a, b)
    CLOSED = 1  # [a, b]
    HALF_OPEN_LEFT = 2  # (a, b]
    HALF_OPEN_RIGHT = 3  # [a, b)


@dataclass(frozen=True)
class Interval:
    """An interval from ``left`` to ``right``.

    Floating-point stepping allows a tolerance of 1e-6 at the bounds.
    """

    left: Number
    right: Number
    interval_type: IntervalType = IntervalType.CLOSED

    def range(self, step: Number = 1) -> Iterator[Number]:
        """Yield the values of the interval from ``left`` towards ``right`` by ``step``."""
        if step == 0:
            raise ValueError("Interval step must not be zero")
        floating = any(isinstance(v, float) for v in (self.left, self.right, step))
        eps = 1e-6 if floating else 0
        end = self.right
        kind = self.interval_type

        if kind in (IntervalType.OPEN, IntervalType.HALF_OPEN_LEFT):
            current = self.left + step
        else:
            current = self.left

        if kind in (IntervalType.OPEN, IntervalType.HALF_OPEN_RIGHT):
            if step > 0:
                def inside(value: Number) -> bool:
                    return value + eps < end
            else:
                def inside(value: Number) -> bool:
                    return value - eps > end
        else:
            if step > 0:
                def inside(value: Number) -> bool:
                    return value - eps <= end
            else:
                def inside(value: Number) -> bool:
                    return value + eps >= end

        while inside(current):
            yield current
            current += step

    def __iter__(self) -> Iterator[Number]:
        return self.range(1)