"""Build smooth paths of arcs through waypoints.

A waypoint is either a point the path passes through or a circle the
path turns around, left (counter-clockwise) or right (clockwise).
Consecutive waypoints are joined by their tangent edge, and the path
follows each turning circle from the point where the incoming edge
arrives to the point where the outgoing edge leaves.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import List, Sequence

from arcmesh.arc import Arc, MotionType
from arcmesh.curve import CurveOfArcs
from arcmesh.geom import epsilon, dist, topoint
from arcmesh.tangent import tangent_edge

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Waypoint:
    center: list
    radius: float = 0.0
    motion: MotionType = MotionType.LINEAR

    def __post_init__(self):
        object.__setattr__(self, 'center', topoint(self.center))
        if self.radius < 0:
            raise ValueError('Waypoint: negative radius')
        if self.motion is not MotionType.LINEAR and self.radius <= 0:
            raise ValueError('Waypoint: a turning waypoint needs a positive radius')

    @classmethod
    def left(cls, center, radius):
        return cls(center, radius, MotionType.LEFT_TURN)

    @classmethod
    def right(cls, center, radius):
        return cls(center, radius, MotionType.RIGHT_TURN)

    @property
    def turns(self) -> bool:
        return self.motion is not MotionType.LINEAR


def _edge(a: Waypoint, b: Waypoint, i: int, j: int):
    edge = tangent_edge(a.motion, a.radius, a.center, b.motion, b.radius, b.center)
    if not edge:
        raise ValueError(f'no tangent edge from waypoint {i} to waypoint {j}: {edge.reason}')
    return edge


def arcs_from_waypoints(waypoints: Sequence[Waypoint], closed: bool = True) -> List[Arc]:
    """Return the arcs of the path through ``waypoints``.

    A closed path also joins the last waypoint back to the first.  In an
    open path the first and last waypoints only contribute the end of
    their edge, so they should normally be points.
    """

    n = len(waypoints)
    if n < 2:
        raise ValueError('arcs_from_waypoints: need at least two waypoints')
    count = n if closed else n - 1
    edges = [_edge(waypoints[i], waypoints[(i + 1) % n], i, (i + 1) % n)
             for i in range(count)]

    arcs: List[Arc] = []
    for i, edge in enumerate(edges):
        if dist(edge.p0, edge.p1) > epsilon:
            arcs.append(Arc.linear(edge.p0, edge.p1))
        if not closed and i == count - 1:
            break
        wp = waypoints[(i + 1) % n]
        if not wp.turns:
            continue
        outgoing = edges[(i + 1) % count]
        if dist(edge.p1, outgoing.p0) <= epsilon:
            continue
        arcs.append(Arc(wp.motion, edge.p1, outgoing.p0, wp.radius, wp.center))
    logger.debug('built %d arcs from %d waypoints', len(arcs), n)
    return arcs


def curve_from_waypoints(waypoints: Sequence[Waypoint], closed: bool = True) -> CurveOfArcs:
    return CurveOfArcs(arcs_from_waypoints(waypoints, closed))


__all__ = ['Waypoint', 'arcs_from_waypoints', 'curve_from_waypoints']
