## circular arc and straight segment path pieces for arcmesh
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

"""path pieces for **arcmesh** curves

An ``Arc`` is one piece of a planar path: either a straight segment
(``MotionType.LINEAR``) or a circular arc travelled counter-clockwise
(``LEFT_TURN``) or clockwise (``RIGHT_TURN``) about a center ``c`` with
radius ``r``.  Both end points are XY points, as returned by
``arcmesh.geom.point(x,y)``.

Arcs are sampled over a local progress parameter ``0 <= u <= 1`` with
``u=0`` at ``p0`` and ``u=1`` at ``p1``, in the same way yapCAD samples
its lines and arcs.
"""

from enum import Enum

from arcmesh.geom import (add, angle_from_vec2, dist, lerp, normalise_angle_positive_rad,
                          pi2, scale3, sub, topoint, vec2_from_angle, vlerp)


class MotionType(Enum):
    LINEAR = 'linear'
    LEFT_TURN = 'left'
    RIGHT_TURN = 'right'

    def opposite(self):
        if self is MotionType.LEFT_TURN:
            return MotionType.RIGHT_TURN
        if self is MotionType.RIGHT_TURN:
            return MotionType.LEFT_TURN
        return self


class Arc:
    """a straight segment or circular arc between ``p0`` and ``p1``"""

    __slots__ = ('motion_type', 'p0', 'p1', 'r', 'c')

    def __init__(self, motion_type, p0, p1, r=0.0, c=None):
        if not isinstance(motion_type, MotionType):
            raise ValueError('bad motion type passed to Arc: {}'.format(motion_type))
        if r < 0:
            raise ValueError('negative radius passed to Arc')
        if motion_type is not MotionType.LINEAR and c is None:
            raise ValueError('turning Arc requires a center')
        self.motion_type = motion_type
        self.p0 = topoint(p0)
        self.p1 = topoint(p1)
        self.r = r
        self.c = topoint(c) if c is not None else None

    @classmethod
    def linear(cls, p0, p1):
        return cls(MotionType.LINEAR, p0, p1)

    def __repr__(self):
        if self.motion_type is MotionType.LINEAR:
            return 'Arc({}, {}, {})'.format(self.motion_type.name, self.p0, self.p1)
        return 'Arc({}, {}, {}, r={}, c={})'.format(
            self.motion_type.name, self.p0, self.p1, self.r, self.c)

    def __eq__(self, other):
        if not isinstance(other, Arc):
            return NotImplemented
        return (self.motion_type is other.motion_type and self.p0 == other.p0
                and self.p1 == other.p1 and self.r == other.r and self.c == other.c)

    def start_angle(self):
        return angle_from_vec2(sub(self.p0, self.c))

    def end_angle(self):
        return angle_from_vec2(sub(self.p1, self.c))

    def sweep(self):
        """ angle turned through, in radians, always non-negative"""
        if self.motion_type is MotionType.LINEAR:
            return 0.0
        turned = normalise_angle_positive_rad(self.end_angle() - self.start_angle())
        if self.motion_type is MotionType.LEFT_TURN:
            return turned
        if self.motion_type is MotionType.RIGHT_TURN:
            return pi2 - turned
        raise ValueError('unknown motion type {}'.format(self.motion_type))

    def arc_length(self):
        if self.motion_type is MotionType.LINEAR:
            return dist(self.p0, self.p1)
        return self.r * self.sweep()

    def position_at(self, u):
        """ sample the arc at local progress ``u``"""
        if self.motion_type is MotionType.LINEAR:
            return vlerp(self.p0, self.p1, u)

        start = self.start_angle()
        end = self.end_angle()
        if self.motion_type is MotionType.LEFT_TURN:
            while end < start:
                end += pi2
        elif self.motion_type is MotionType.RIGHT_TURN:
            while start < end:
                start += pi2
        else:
            raise ValueError('unknown motion type {}'.format(self.motion_type))
        theta = lerp(start, end, u)
        return add(self.c, scale3(vec2_from_angle(theta), self.r))

    def reversed(self):
        """ the same geometry traversed from ``p1`` back to ``p0``"""
        return Arc(self.motion_type.opposite(), self.p1, self.p0, self.r, self.c)


__all__ = ['MotionType', 'Arc']
