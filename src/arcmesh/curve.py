"""Piecewise curves: scalar phases over time and planar paths of arcs.

Both curve types keep an ordered list of ``(Interval, element)`` pairs.
A query finds the pair whose interval contains the queried value by a
linear scan that starts at the pair found last time and wraps around,
so queries that move steadily along the curve are found on the first
probe.
"""

from __future__ import annotations

import logging
from typing import List, Optional, Sequence, Tuple, TypeVar

from arcmesh.arc import Arc
from arcmesh.errors import CurveDomainError
from arcmesh.geom import mod
from arcmesh.interval import Interval, Phase

logger = logging.getLogger(__name__)

T = TypeVar('T')


def locate(pairs: Sequence[Tuple[Interval, T]], value: float,
           hint: int = 0) -> Tuple[int, Interval, T]:
    """Find the first pair, scanning from ``hint`` and wrapping, whose
    interval contains ``value``.

    Returns ``(index, interval, element)``; feed ``index`` back in as
    the next ``hint``.  Raises ``CurveDomainError`` when no interval
    contains ``value``.
    """

    n = len(pairs)
    if n:
        start = hint % n
        for k in range(n):
            i = (start + k) % n
            interval, element = pairs[i]
            if interval.contains(value):
                return i, interval, element
    logger.error('no interval of %d contains %r', n, value)
    raise CurveDomainError(f'locate: no interval contains {value!r}')


class CurveOfPhases:
    """A scalar function of time built from polynomial phases.

    Each phase is a polynomial in absolute time, valid over its
    interval.
    """

    def __init__(self, pairs: Optional[Sequence[Tuple[Interval, Phase]]] = None):
        self._pairs: List[Tuple[Interval, Phase]] = list(pairs or [])
        self._hint = 0

    @property
    def pairs(self) -> Tuple[Tuple[Interval, Phase], ...]:
        return tuple(self._pairs)

    def set_pairs(self, pairs: Sequence[Tuple[Interval, Phase]]) -> None:
        self._pairs = list(pairs)
        self._hint = 0

    def _phase_at(self, t: float) -> Phase:
        self._hint, _, phase = locate(self._pairs, t, self._hint)
        return phase

    def evaluate(self, t: float) -> float:
        return self._phase_at(t).evaluate(t)

    def derivative(self, t: float) -> float:
        return self._phase_at(t).derivative(t)


class CurveOfArcs:
    """A planar path of arcs parameterised by distance travelled.

    The path is periodic: distances wrap modulo ``total_distance``.
    """

    def __init__(self, arcs: Optional[Sequence[Arc]] = None):
        self._pairs: List[Tuple[Interval, Arc]] = []
        self.total_distance = 0.0
        self._hint = 0
        if arcs is not None:
            self.set_arcs(arcs)

    @property
    def pairs(self) -> Tuple[Tuple[Interval, Arc], ...]:
        return tuple(self._pairs)

    @property
    def arcs(self) -> List[Arc]:
        return [arc for _, arc in self._pairs]

    def set_arcs(self, arcs: Sequence[Arc]) -> None:
        """Lay ``arcs`` end to end; each gets the interval
        ``[start, start + length]`` in distance along the path."""
        pairs = []
        total = 0.0
        for arc in arcs:
            length = arc.arc_length()
            pairs.append((Interval(total, total + length), arc))
            total += length
        self.set_interval_arc_pairs(pairs, total)

    def set_interval_arc_pairs(self, pairs: Sequence[Tuple[Interval, Arc]],
                               total_distance: float) -> None:
        self._pairs = list(pairs)
        self.total_distance = total_distance
        self._hint = 0

    @staticmethod
    def position_on_arc(arc: Arc, progress: float) -> list:
        return arc.position_at(progress)

    def position_from_distance(self, distance: float) -> list:
        if not self._pairs or self.total_distance <= 0.0:
            logger.error('position_from_distance on empty path (%d arcs, total %r)',
                         len(self._pairs), self.total_distance)
            raise CurveDomainError('position_from_distance: path has no length')
        d = mod(distance, self.total_distance)
        self._hint, interval, arc = locate(self._pairs, d, self._hint)
        if interval.upper_minus_lower() == 0.0:
            return arc.position_at(0.0)
        return arc.position_at(interval.progress_from_lower_to_upper(d))


__all__ = ['locate', 'CurveOfPhases', 'CurveOfArcs']
