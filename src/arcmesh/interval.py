"""Scalar building blocks for piecewise curves: intervals and phases."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from math import inf

from arcmesh.geom import inverse_lerp


@dataclass(frozen=True)
class Interval:
    """A closed scalar range whose ends may be switched off.

    An unbounded side ignores its limit for ``contains`` and ``clamp``;
    the limit is still used by ``progress_from_lower_to_upper``.
    """

    lower: float
    upper: float
    bounded_below: bool = True
    bounded_above: bool = True

    def __post_init__(self):
        if self.lower > self.upper:
            raise ValueError(
                f'Interval: lower bound {self.lower} exceeds upper bound {self.upper}')

    @classmethod
    def unbounded(cls) -> "Interval":
        return cls(-inf, inf, False, False)

    def contains(self, x: float) -> bool:
        if self.bounded_below and x < self.lower:
            return False
        if self.bounded_above and x > self.upper:
            return False
        return True

    def progress_from_lower_to_upper(self, x: float) -> float:
        """Where ``x`` sits between the bounds; 0 at ``lower`` and 1 at
        ``upper``.  Not clamped."""
        return inverse_lerp(self.lower, self.upper, x)

    def clamp(self, x: float) -> float:
        if self.bounded_below and x < self.lower:
            return self.lower
        if self.bounded_above and x > self.upper:
            return self.upper
        return x

    def upper_minus_lower(self) -> float:
        return self.upper - self.lower


class PhaseKind(Enum):
    LINEAR = 'linear'
    PARABOLIC = 'parabolic'


@dataclass(frozen=True)
class Phase:
    """``c2*t**2 + c1*t + c0``; a LINEAR phase ignores ``c2``."""

    kind: PhaseKind
    c0: float
    c1: float = 0.0
    c2: float = 0.0

    @classmethod
    def linear(cls, c0: float, c1: float) -> "Phase":
        return cls(PhaseKind.LINEAR, c0, c1)

    @classmethod
    def parabolic(cls, c0: float, c1: float, c2: float) -> "Phase":
        return cls(PhaseKind.PARABOLIC, c0, c1, c2)

    def evaluate(self, t: float) -> float:
        if self.kind is PhaseKind.LINEAR:
            return self.c1 * t + self.c0
        if self.kind is PhaseKind.PARABOLIC:
            return self.c2 * t * t + self.c1 * t + self.c0
        raise ValueError(f'Phase.evaluate: unknown kind {self.kind!r}')

    def derivative(self, t: float) -> float:
        if self.kind is PhaseKind.LINEAR:
            return self.c1
        if self.kind is PhaseKind.PARABOLIC:
            return 2.0 * self.c2 * t + self.c1
        raise ValueError(f'Phase.derivative: unknown kind {self.kind!r}')


__all__ = ['Interval', 'Phase', 'PhaseKind']
