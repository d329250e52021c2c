"""Point, line and plane helpers for y-up mesh geometry.

Planes are given by three points ``a, b, c`` and have the normal
``cross(a - c, b - c)``.  Functions that can meet degenerate input
(collinear plane points, a zero-length line, parallel planes) return a
``Degenerate`` outcome carrying a fallback value instead of dividing by
zero; see ``arcmesh.errors.resolve``.
"""

from __future__ import annotations

from math import inf
from typing import Tuple

from arcmesh.errors import Degenerate
from arcmesh.geom import (add, cross, dot, inverse_lerp, point, scale3, sub, topoint,
                          vlerp)

## parallel-plane threshold on |n1 x n2|**2
PLANE_DENOM_EPSILON = 1e-6


def plane_normal(a, b, c):
    """unnormalised normal of the plane through ``a, b, c``"""
    return cross(sub(a, c), sub(b, c))


def nearest_point_of_plane(p, a, b, c):
    """Orthogonal projection of ``p`` onto the plane through ``a, b, c``."""
    n = plane_normal(a, b, c)
    nn = dot(n, n)
    if nn == 0.0:
        return Degenerate('nearest_point_of_plane: plane points are collinear', topoint(p))
    return sub(p, scale3(n, dot(sub(p, c), n)/nn))


def nearest_point_of_line(p, origin, vec):
    """Orthogonal projection of ``p`` onto the infinite line ``origin + t*vec``."""
    vv = dot(vec, vec)
    if vv == 0.0:
        return Degenerate('nearest_point_of_line: zero direction vector', topoint(origin))
    return add(origin, scale3(vec, dot(sub(p, origin), vec)/vv))


def nearest_point_of_line_from_points(p, a, b):
    return nearest_point_of_line(p, a, sub(b, a))


def affine_coords(p0, p1, p2, p) -> Tuple[float, float, float]:
    """Affine (barycentric) coordinates of 2D point ``p`` with respect to
    the triangle ``p0, p1, p2``.  Only the first two components of each
    point are used.  A degenerate triangle gives ``(1, 0, 0)``.
    """
    x0, y0 = p0[0], p0[1]
    x1, y1 = p1[0], p1[1]
    x2, y2 = p2[0], p2[1]
    x, y = p[0], p[1]
    denom = (y2 - y0)*(x1 - x0) + (x0 - x2)*(y1 - y0)
    if denom == 0.0:
        return 1.0, 0.0, 0.0
    s1 = ((y2 - y0)*(x - x0) + (x0 - x2)*(y - y0))/denom
    s2 = ((y0 - y1)*(x - x0) + (x1 - x0)*(y - y0))/denom
    return 1.0 - s1 - s2, s1, s2


def point_on_line_at_height(p1, p2, h):
    """Point at height ``h`` on the line through ``p1`` and ``p2``."""
    lo, hi = (p1, p2) if p1[1] <= p2[1] else (p2, p1)
    if hi[1] == lo[1]:
        return Degenerate('point_on_line_at_height: line is horizontal', topoint(lo))
    return vlerp(lo, hi, inverse_lerp(lo[1], hi[1], h))


def plane_plane_intersection(n1, p1, n2, p2):
    """Line where the plane through ``p1`` with normal ``n1`` meets the
    plane through ``p2`` with normal ``n2``.

    Returns ``(line_point, line_vec)``.  Parallel planes give a
    ``Degenerate`` whose fallback puts the line point at ``y = -inf``.
    """
    u = cross(n1, n2)
    denom = dot(u, u)
    if denom < PLANE_DENOM_EPSILON:
        return Degenerate('plane_plane_intersection: planes are parallel',
                          (point(0.0, -inf, 0.0), u))
    h1 = dot(n1, p1)
    h2 = dot(n2, p2)
    line_point = scale3(cross(sub(scale3(n2, h1), scale3(n1, h2)), u), 1.0/denom)
    return line_point, u


def plane_plane_intersection_from_points(a1, b1, c1, a2, b2, c2):
    return plane_plane_intersection(plane_normal(a1, b1, c1), c1,
                                    plane_normal(a2, b2, c2), c2)


def plane_intersection_with_horizontal_plane(y, a, b, c):
    """Line where the plane through ``a, b, c`` crosses height ``y``."""
    return plane_plane_intersection(plane_normal(a, b, c), c,
                                    [0.0, 1.0, 0.0, 1.0], point(0.0, y, 0.0))


def nearest_point_to_triangle_on_vertical(p, a, b, c):
    """Point of triangle ``a, b, c`` directly above or below ``p``.

    The height is ``-inf`` when the vertical through ``p`` misses the
    triangle.
    """
    flat = [point(q[0], q[2]) for q in (a, b, c)]
    missed = point(p[0], -inf, p[2])
    if abs(cross(sub(flat[1], flat[0]), sub(flat[2], flat[0]))[2]) == 0.0:
        return Degenerate('nearest_point_to_triangle_on_vertical: triangle is vertical', missed)
    s0, s1, s2 = affine_coords(flat[0], flat[1], flat[2], point(p[0], p[2]))
    if s0 < 0 or s1 < 0 or s2 < 0:
        return missed
    return point(p[0], s0*a[1] + s1*b[1] + s2*c[1], p[2])


def project_to_plane_down_y(p, a, b, c):
    """Move ``p`` vertically onto the plane through ``a, b, c``."""
    n = plane_normal(a, b, c)
    if n[1] == 0.0:
        return Degenerate('project_to_plane_down_y: plane is vertical',
                          point(p[0], -inf, p[2]))
    y = c[1] - (n[0]*(p[0] - c[0]) + n[2]*(p[2] - c[2]))/n[1]
    return point(p[0], y, p[2])


__all__ = [
    'PLANE_DENOM_EPSILON',
    'plane_normal',
    'nearest_point_of_plane',
    'nearest_point_of_line',
    'nearest_point_of_line_from_points',
    'affine_coords',
    'point_on_line_at_height',
    'plane_plane_intersection',
    'plane_plane_intersection_from_points',
    'plane_intersection_with_horizontal_plane',
    'nearest_point_to_triangle_on_vertical',
    'project_to_plane_down_y',
]
