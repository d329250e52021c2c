## tangent edges between points and turning circles for arcmesh
## Copyright (c) 2020 Richard DeVaul

# Permission is hereby granted, free of charge, to any person
# obtaining a copy of this software and associated documentation files
# (the "Software"), to deal in the Software without restriction,
# including without limitation the rights to use, copy, modify, merge,
# publish, distribute, sublicense, and/or sell copies of the Software,
# and to permit persons to whom the Software is furnished to do so,
# subject to the following conditions:
#
# The above copyright notice and this permission notice shall be
# included in all copies or substantial portions of the Software.
#
# THE SOFTWARE IS PROVIDED "AS IS", WITHOUT WARRANTY OF ANY KIND,
# EXPRESS OR IMPLIED, INCLUDING BUT NOT LIMITED TO THE WARRANTIES OF
# MERCHANTABILITY, FITNESS FOR A PARTICULAR PURPOSE AND
# NONINFRINGEMENT. IN NO EVENT SHALL THE AUTHORS OR COPYRIGHT HOLDERS
# BE LIABLE FOR ANY CLAIM, DAMAGES OR OTHER LIABILITY, WHETHER IN AN
# ACTION OF CONTRACT, TORT OR OTHERWISE, ARISING FROM, OUT OF OR IN
# CONNECTION WITH THE SOFTWARE OR THE USE OR OTHER DEALINGS IN THE
# SOFTWARE.

"""straight tangent edges between points and circles in the XY plane

A path that has to go *around* a circle is described by the circle's
center, its radius, and the direction of travel: counter-clockwise
(``MotionType.LEFT_TURN``) or clockwise (``RIGHT_TURN``).  A plain
waypoint is a point with ``MotionType.LINEAR``.

The functions in this module compute the straight edge that leaves the
first element and arrives at the second so that the direction of travel
is continuous at both ends.  The names say which kind of element is at
each end, *e.g.* ``edge_left_turn_to_point()``.

Every function returns an ``Edge``.  An ``Edge`` is truthy when the
geometry is defined, in which case ``p0`` is where the path leaves the
first element and ``p1`` is where it arrives at the second.  When the
geometry is undefined (nested circles, overlapping circles for a
crossing tangent, a point inside the circle it should be tangent to),
the ``Edge`` is falsy and ``reason`` says why.

The two construction primitives are the homothetic center of two
circles, through which the shared tangent lines pass, and the
displacement pair ``(u, v)`` that locates the tangent points of the
lines from a point to a circle: ``u`` runs from the center toward the
point with length ``r**2/d``, ``v`` is perpendicular to it (rotated
left) with length ``sqrt(r**2 - |u|**2)``.  Tangent points are then
``c + u + v`` or ``c + u - v`` depending on the direction of travel.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional

import mpmath as mpm

from arcmesh.arc import MotionType
from arcmesh.geom import (add, dist, epsilon, norm, rotate_left_90,
                          rotate_right_90, scale3, sub, topoint)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Edge:
    ok: bool
    p0: Optional[list] = None
    p1: Optional[list] = None
    reason: str = ''

    # the end points are lists
    __hash__ = None

    def __bool__(self) -> bool:
        return self.ok

    def __iter__(self):
        if not self.ok:
            raise ValueError('undefined tangent edge: {}'.format(self.reason))
        yield self.p0
        yield self.p1

    def length(self) -> float:
        if not self.ok:
            raise ValueError('undefined tangent edge: {}'.format(self.reason))
        return dist(self.p0, self.p1)


def _defined(p0, p1) -> Edge:
    return Edge(True, topoint(p0), topoint(p1))


def _undefined(reason: str) -> Edge:
    logger.debug('tangent edge undefined: %s', reason)
    return Edge(False, reason=reason)


## scalar construction primitives
## ------------------------------

def homothetic_center(r0, r1, c0, c1):
    """Weighted center ``(r1/(r0+r1))*c0 + (r0/(r0+r1))*c1``.

    With both radii positive this is the internal homothetic center of
    the two circles, where the crossing tangents meet.  Passing ``-r0``
    gives the external center, where the outer tangents meet.
    """
    s = r0 + r1
    return add(scale3(c0, r1/s), scale3(c1, r0/s))


def generic_disps_point_to_circle(r, p, c):
    """Return ``(u, v)`` locating the tangent points of the lines from
    point ``p`` to the circle of radius ``r`` about ``c``.

    ``p`` must lie outside the circle, or on it to within ``epsilon``;
    a point on the circle gives ``v`` of zero length.
    """
    disp = sub(p, c)
    d = dist(p, c)
    if d == 0.0 or r - d > epsilon:
        raise ValueError('generic_disps_point_to_circle: point lies inside circle')
    mpr = mpm.mpf(r)
    ulen = mpr*mpr/mpm.mpf(max(d, r))
    vlen = float(mpm.sqrt(max(mpr*mpr - ulen*ulen, 0)))
    unit_u = scale3(disp, 1.0/d)
    unit_v = rotate_left_90(unit_u)
    return scale3(unit_u, float(ulen)), scale3(unit_v, vlen)


## edges involving points
## ----------------------

def edge_point_to_point(c0, c1):
    return _defined(c0, c1)


def _point_outside(r, p, c, what):
    if r - dist(p, c) > epsilon:
        return _undefined('{}: point lies inside circle of radius {}'.format(what, r))
    return None


def edge_point_to_left_turn(r1, c0, c1):
    failed = _point_outside(r1, c0, c1, 'edge_point_to_left_turn')
    if failed is not None:
        return failed
    u, v = generic_disps_point_to_circle(r1, c0, c1)
    return _defined(c0, add(c1, add(u, v)))


def edge_point_to_right_turn(r1, c0, c1):
    failed = _point_outside(r1, c0, c1, 'edge_point_to_right_turn')
    if failed is not None:
        return failed
    u, v = generic_disps_point_to_circle(r1, c0, c1)
    return _defined(c0, add(c1, sub(u, v)))


def edge_left_turn_to_point(r0, c0, c1):
    failed = _point_outside(r0, c1, c0, 'edge_left_turn_to_point')
    if failed is not None:
        return failed
    u, v = generic_disps_point_to_circle(r0, c1, c0)
    return _defined(add(c0, sub(u, v)), c1)


def edge_right_turn_to_point(r0, c0, c1):
    failed = _point_outside(r0, c1, c0, 'edge_right_turn_to_point')
    if failed is not None:
        return failed
    u, v = generic_disps_point_to_circle(r0, c1, c0)
    return _defined(add(c0, add(u, v)), c1)


## edges between two circles
## -------------------------

def _nested(r0, r1, c0, c1):
    d = dist(c0, c1)
    return r1 - (d + r0) > epsilon or r0 - (d + r1) > epsilon


def _overlapping(r0, r1, c0, c1):
    return r0 + r1 - dist(c0, c1) > epsilon


def edge_left_turn_to_left_turn(r0, r1, c0, c1):
    """outer tangent leaving circle ``c0`` and arriving at ``c1``, both
    travelled counter-clockwise"""
    if _nested(r0, r1, c0, c1):
        return _undefined('edge_left_turn_to_left_turn: one circle lies inside the other')
    disp = sub(c1, c0)
    if abs(r0 - r1) < epsilon:
        if dist(c0, c1) < epsilon:
            return _undefined('edge_left_turn_to_left_turn: coincident circles')
        perp = scale3(rotate_right_90(norm(disp)), r0)
        p0 = add(c0, perp)
        return _defined(p0, add(p0, disp))
    hom = homothetic_center(-r0, r1, c0, c1)
    u0, v0 = generic_disps_point_to_circle(r0, hom, c0)
    u1, v1 = generic_disps_point_to_circle(r1, hom, c1)
    if r0 > r1:
        return _defined(add(c0, sub(u0, v0)), add(c1, sub(u1, v1)))
    return _defined(add(c0, add(u0, v0)), add(c1, add(u1, v1)))


def edge_right_turn_to_right_turn(r0, r1, c0, c1):
    """outer tangent leaving circle ``c0`` and arriving at ``c1``, both
    travelled clockwise"""
    if _nested(r0, r1, c0, c1):
        return _undefined('edge_right_turn_to_right_turn: one circle lies inside the other')
    disp = sub(c1, c0)
    if abs(r0 - r1) < epsilon:
        if dist(c0, c1) < epsilon:
            return _undefined('edge_right_turn_to_right_turn: coincident circles')
        perp = scale3(rotate_left_90(norm(disp)), r0)
        p0 = add(c0, perp)
        return _defined(p0, add(p0, disp))
    hom = homothetic_center(-r0, r1, c0, c1)
    u0, v0 = generic_disps_point_to_circle(r0, hom, c0)
    u1, v1 = generic_disps_point_to_circle(r1, hom, c1)
    if r0 < r1:
        return _defined(add(c0, sub(u0, v0)), add(c1, sub(u1, v1)))
    return _defined(add(c0, add(u0, v0)), add(c1, add(u1, v1)))


def edge_left_turn_to_right_turn(r0, r1, c0, c1):
    """crossing tangent from a counter-clockwise circle to a clockwise one"""
    if _overlapping(r0, r1, c0, c1):
        return _undefined('edge_left_turn_to_right_turn: circles overlap')
    hom = homothetic_center(r0, r1, c0, c1)
    u0, v0 = generic_disps_point_to_circle(r0, hom, c0)
    u1, v1 = generic_disps_point_to_circle(r1, hom, c1)
    return _defined(add(c0, sub(u0, v0)), add(c1, sub(u1, v1)))


def edge_right_turn_to_left_turn(r0, r1, c0, c1):
    """crossing tangent from a clockwise circle to a counter-clockwise one"""
    if _overlapping(r0, r1, c0, c1):
        return _undefined('edge_right_turn_to_left_turn: circles overlap')
    hom = homothetic_center(r0, r1, c0, c1)
    u0, v0 = generic_disps_point_to_circle(r0, hom, c0)
    u1, v1 = generic_disps_point_to_circle(r1, hom, c1)
    return _defined(add(c0, add(u0, v0)), add(c1, add(u1, v1)))


def tangent_edge(m0, r0, c0, m1, r1, c1):
    """Edge from element ``(m0, r0, c0)`` to element ``(m1, r1, c1)``.

    A ``MotionType.LINEAR`` element is a point; its radius is ignored.
    """
    c0 = topoint(c0)
    c1 = topoint(c1)
    L = MotionType.LINEAR
    LT = MotionType.LEFT_TURN
    RT = MotionType.RIGHT_TURN
    if m0 is L:
        if m1 is L:
            return edge_point_to_point(c0, c1)
        if m1 is LT:
            return edge_point_to_left_turn(r1, c0, c1)
        if m1 is RT:
            return edge_point_to_right_turn(r1, c0, c1)
    elif m0 is LT:
        if m1 is L:
            return edge_left_turn_to_point(r0, c0, c1)
        if m1 is LT:
            return edge_left_turn_to_left_turn(r0, r1, c0, c1)
        if m1 is RT:
            return edge_left_turn_to_right_turn(r0, r1, c0, c1)
    elif m0 is RT:
        if m1 is L:
            return edge_right_turn_to_point(r0, c0, c1)
        if m1 is LT:
            return edge_right_turn_to_left_turn(r0, r1, c0, c1)
        if m1 is RT:
            return edge_right_turn_to_right_turn(r0, r1, c0, c1)
    raise ValueError('tangent_edge: bad motion types {} and {}'.format(m0, m1))


__all__ = [
    'Edge',
    'homothetic_center',
    'generic_disps_point_to_circle',
    'edge_point_to_point',
    'edge_point_to_left_turn',
    'edge_point_to_right_turn',
    'edge_left_turn_to_point',
    'edge_right_turn_to_point',
    'edge_left_turn_to_left_turn',
    'edge_right_turn_to_right_turn',
    'edge_left_turn_to_right_turn',
    'edge_right_turn_to_left_turn',
    'tangent_edge',
]
