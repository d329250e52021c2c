## triangulated polyhedron model for arcmesh
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

"""triangulated polyhedra for height slicing and nearest-point queries

=====================
polyhedron structure
=====================

A ``Polyhedron`` is a named bundle of three independent populations:

* faces -- each ``Face`` is a planar group of triangles plus three
  points that define its plane,

* edges -- named ``Edge3D`` segments, normally the outlines of the
  faces,

* corners -- bare points.

All mesh geometry is *y-up*: the y coordinate of a point is its
height.  Polyhedra are values.  Operations such as ``exclude_above()``
return a new ``Polyhedron`` and never modify the one they are called
on.

=====================
projection axes
=====================

Two dimensional tests on 3D triangles and edges (point containment,
parameter intervals) are done after dropping one coordinate axis.  The
``BasisDir`` chosen for a triangle is the one that maximizes its
projected area; for an edge, the one that maximizes its projected
length.  A triangle or edge with no usable axis is degenerate.
"""

from __future__ import annotations

import logging
from enum import IntEnum
from typing import Iterable, Iterator, List, Optional, Sequence

from arcmesh.errors import Degenerate, resolve
from arcmesh.geom import (cross, dist, point, sub, topoint, triangle_area,
                          triangle_normal, vstr)
from arcmesh.interval import Interval
from arcmesh.planes import affine_coords

logger = logging.getLogger(__name__)


class BasisDir(IntEnum):
    X = 0
    Y = 1
    Z = 2


## the two coordinates that survive dropping each axis
_KEPT_AXES = {
    BasisDir.X: (1, 2),
    BasisDir.Y: (0, 2),
    BasisDir.Z: (0, 1),
}


def project_down_dir(p, d):
    """Drop axis ``d`` from 3D point ``p``, giving a 2D point."""
    i, j = _KEPT_AXES[BasisDir(d)]
    return point(p[i], p[j])


def project_to_dir(p, d):
    """Coordinate of ``p`` along axis ``d``."""
    return p[BasisDir(d)]


class Triangle2D:
    """a triangle in a 2D projection plane"""

    __slots__ = ('p1', 'p2', 'p3')

    def __init__(self, p1, p2, p3):
        self.p1 = topoint(p1)
        self.p2 = topoint(p2)
        self.p3 = topoint(p3)

    def __repr__(self):
        return 'Triangle2D({}, {}, {})'.format(vstr(self.p1), vstr(self.p2), vstr(self.p3))

    def area(self):
        return abs(cross(sub(self.p2, self.p1), sub(self.p3, self.p1))[2])/2.0

    def affine_coords(self, p):
        return affine_coords(self.p1, self.p2, self.p3, p)

    def contains(self, p):
        return all(s >= 0 for s in self.affine_coords(p))


class Three3DPoints:
    """A triangle in 3D, also used to describe the plane of a face."""

    __slots__ = ('p1', 'p2', 'p3')

    def __init__(self, p1, p2, p3):
        self.p1 = topoint(p1)
        self.p2 = topoint(p2)
        self.p3 = topoint(p3)

    def __repr__(self):
        return 'Three3DPoints({}, {}, {})'.format(vstr(self.p1), vstr(self.p2), vstr(self.p3))

    def __iter__(self):
        yield self.p1
        yield self.p2
        yield self.p3

    def points(self):
        return [self.p1, self.p2, self.p3]

    def project_down_dir(self, d):
        return Triangle2D(project_down_dir(self.p1, d),
                          project_down_dir(self.p2, d),
                          project_down_dir(self.p3, d))

    def best_projection_dir(self):
        """Axis whose projection has the largest area, or ``Degenerate``
        (falling back to ``BasisDir.X``) when every projection is flat."""
        best = None
        best_area = 0.0
        for d in BasisDir:
            a = self.project_down_dir(d).area()
            if a > best_area:
                best = d
                best_area = a
        if best is None:
            return Degenerate('triangle {} has zero area in every projection'.format(self),
                              BasisDir.X)
        return best

    def height_interval(self):
        ys = [self.p1[1], self.p2[1], self.p3[1]]
        return Interval(min(ys), max(ys))

    def normal(self):
        return triangle_normal(self.p1, self.p2, self.p3)

    def area(self):
        return triangle_area(self.p1, self.p2, self.p3)


class Edge3D:
    """a named straight segment between two 3D points"""

    __slots__ = ('name', 'p1', 'p2', '_projection')

    def __init__(self, name, p1, p2):
        self.name = name
        self.p1 = topoint(p1)
        self.p2 = topoint(p2)
        self._projection = self._find_projection_dir()

    def __repr__(self):
        return 'Edge3D({!r}, {}, {})'.format(self.name, vstr(self.p1), vstr(self.p2))

    def _find_projection_dir(self):
        disp = sub(self.p2, self.p1)
        best = None
        best_len = 0.0
        for d in BasisDir:
            length = abs(disp[d])
            if length > best_len:
                best = d
                best_len = length
        if best is None:
            return Degenerate('edge {!r} has zero length'.format(self.name), BasisDir.Y)
        return best

    def best_projection_dir(self):
        """Axis along which the edge is longest, or ``Degenerate``
        (falling back to ``BasisDir.Y``) for a zero-length edge."""
        return self._projection

    def project_to_dir(self, d):
        a = project_to_dir(self.p1, d)
        b = project_to_dir(self.p2, d)
        return Interval(min(a, b), max(a, b))

    def height_interval(self):
        return self.project_to_dir(BasisDir.Y)

    def length(self):
        return dist(self.p1, self.p2)


class Face:
    """A named planar group of triangles.

    The projection axis used for containment tests is worked out once,
    from ``plane``.  A degenerate plane is logged and falls back to
    ``BasisDir.X``.
    """

    __slots__ = ('name', 'plane', 'triangles', 'degenerate', 'preferred_projection_dir')

    def __init__(self, name, plane: Three3DPoints, triangles: Iterable[Three3DPoints]):
        self.name = name
        self.plane = plane
        self.triangles = tuple(triangles)
        outcome = plane.best_projection_dir()
        self.degenerate: Optional[Degenerate] = outcome if isinstance(outcome, Degenerate) else None
        self.preferred_projection_dir = resolve(outcome, logger)

    def __repr__(self):
        return 'Face({!r}, {} triangles)'.format(self.name, len(self.triangles))

    def points(self) -> Iterator[list]:
        for tri in self.triangles:
            yield from tri

    def height_interval(self):
        ys = [p[1] for p in self.points()] or [p[1] for p in self.plane]
        return Interval(min(ys), max(ys))


class Polyhedron:
    """A named collection of faces, edges and corners."""

    __slots__ = ('name', 'faces', 'edges', 'corners')

    def __init__(self, name, faces: Sequence[Face] = (), edges: Sequence[Edge3D] = (),
                 corners: Sequence = ()):
        self.name = name
        self.faces = tuple(faces)
        self.edges = tuple(edges)
        self.corners = tuple(topoint(c) for c in corners)

    def __repr__(self):
        return 'Polyhedron({!r}, {} faces, {} edges, {} corners)'.format(
            self.name, len(self.faces), len(self.edges), len(self.corners))

    def triangles(self) -> List[Three3DPoints]:
        return [tri for face in self.faces for tri in face.triangles]

    def height_interval(self):
        ys = [p[1] for face in self.faces for p in face.points()]
        ys += [p[1] for e in self.edges for p in (e.p1, e.p2)]
        ys += [c[1] for c in self.corners]
        if not ys:
            raise ValueError('height_interval of empty polyhedron {!r}'.format(self.name))
        return Interval(min(ys), max(ys))

    def exclude_above(self, new_name, h):
        """New polyhedron holding only the part of this one at or below
        height ``h``; see ``arcmesh.slicing.exclude_above``."""
        from arcmesh.slicing import exclude_above
        return exclude_above(self, h, new_name)

    def get_nearest_point(self, p):
        from arcmesh.nearest import get_nearest_point
        return get_nearest_point(self, p)

    def find_nearest(self, p):
        from arcmesh.nearest import find_nearest
        return find_nearest(self, p)


__all__ = [
    'BasisDir',
    'project_down_dir',
    'project_to_dir',
    'Triangle2D',
    'Three3DPoints',
    'Edge3D',
    'Face',
    'Polyhedron',
]
