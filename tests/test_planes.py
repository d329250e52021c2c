import math

import pytest

from arcmesh.errors import Degenerate
from arcmesh.geom import point, vclose
from arcmesh.planes import (affine_coords, nearest_point_of_line, nearest_point_of_line_from_points,
                            nearest_point_of_plane, nearest_point_to_triangle_on_vertical,
                            plane_intersection_with_horizontal_plane, plane_normal,
                            plane_plane_intersection, plane_plane_intersection_from_points,
                            point_on_line_at_height, project_to_plane_down_y)

GROUND = (point(0, 0, 0), point(1, 0, 0), point(0, 0, 1))
SLOPE = (point(0, 0, 0), point(2, 2, 0), point(0, 4, 2))


def test_plane_normal():
    n = plane_normal(*SLOPE)
    assert n[:3] == [4, -4, 8]


def test_nearest_point_of_plane():
    assert vclose(nearest_point_of_plane(point(1, 5, 2), *GROUND), point(1, 0, 2))
    q = nearest_point_of_plane(point(3, -2, 7), *SLOPE)
    # the offset to the plane is along its normal
    n = plane_normal(*SLOPE)
    d = [3 - q[0], -2 - q[1], 7 - q[2]]
    assert abs(d[0]*n[1] - d[1]*n[0]) < 1e-9
    assert abs(d[1]*n[2] - d[2]*n[1]) < 1e-9


def test_nearest_point_of_plane_collinear():
    q = nearest_point_of_plane(point(1, 1, 1), point(0, 0, 0), point(1, 1, 1), point(2, 2, 2))
    assert isinstance(q, Degenerate)
    assert q.fallback == point(1, 1, 1)


def test_nearest_point_of_line():
    assert vclose(nearest_point_of_line_from_points(point(1, 1, 0), point(0, 0, 0), point(2, 0, 0)),
                  point(1, 0, 0))
    assert vclose(nearest_point_of_line(point(5, 3, 3), point(0, 0, 0), point(0, 0, 2)),
                  point(0, 0, 3))
    assert isinstance(nearest_point_of_line(point(1, 1, 1), point(0, 0, 0), point(0, 0, 0)),
                      Degenerate)


def test_affine_coords():
    p0, p1, p2 = point(0, 0), point(2, 0), point(0, 2)
    assert affine_coords(p0, p1, p2, p0) == pytest.approx((1, 0, 0))
    assert affine_coords(p0, p1, p2, p1) == pytest.approx((0, 1, 0))
    assert affine_coords(p0, p1, p2, point(0.5, 0.5)) == pytest.approx((0.5, 0.25, 0.25))
    assert min(affine_coords(p0, p1, p2, point(3, 3))) < 0


def test_affine_coords_degenerate():
    assert affine_coords(point(0, 0), point(1, 1), point(2, 2), point(5, 0)) == (1.0, 0.0, 0.0)


def test_point_on_line_at_height():
    assert vclose(point_on_line_at_height(point(0, 0, 0), point(2, 4, 0), 1), point(0.5, 1, 0))
    assert vclose(point_on_line_at_height(point(2, 4, 0), point(0, 0, 0), 1), point(0.5, 1, 0))
    assert isinstance(point_on_line_at_height(point(0, 1, 0), point(2, 1, 0), 1), Degenerate)


def test_plane_plane_intersection():
    p, u = plane_plane_intersection(point(1, 0, 0), point(1, 0, 0),
                                    point(0, 1, 0), point(0, 2, 0))
    assert vclose(p, point(1, 2, 0))
    assert vclose(u, point(0, 0, 1))


def test_plane_plane_intersection_from_points():
    p, u = plane_plane_intersection_from_points(point(1, 0, 0), point(1, 1, 0), point(1, 0, 1),
                                                *GROUND)
    # meets the ground along the line x = 1
    assert abs(p[0] - 1) < 1e-9 and abs(p[1]) < 1e-9
    assert abs(u[0]) < 1e-9 and abs(u[1]) < 1e-9


def test_parallel_planes():
    result = plane_plane_intersection(point(0, 1, 0), point(0, 0, 0),
                                      point(0, 2, 0), point(0, 3, 0))
    assert isinstance(result, Degenerate)
    assert result.fallback[0][1] == -math.inf


def test_plane_intersection_with_horizontal_plane():
    p, u = plane_intersection_with_horizontal_plane(1.0, point(0, 0, 0), point(1, 1, 0),
                                                    point(0, 0, 1))
    assert vclose(p, point(1, 1, 0))
    assert vclose(u, point(0, 0, 1))


def test_nearest_point_to_triangle_on_vertical():
    assert vclose(nearest_point_to_triangle_on_vertical(point(0.5, 10, 0.5), *SLOPE),
                  point(0.5, 1.5, 0.5))
    missed = nearest_point_to_triangle_on_vertical(point(3, 0, 3), *SLOPE)
    assert missed[1] == -math.inf
    wall = (point(0, 0, 0), point(0, 1, 0), point(0, 0, 1))
    assert isinstance(nearest_point_to_triangle_on_vertical(point(0, 5, 0.5), *wall), Degenerate)


def test_project_to_plane_down_y():
    assert vclose(project_to_plane_down_y(point(0.5, 10, 0.5), *SLOPE), point(0.5, 1.5, 0.5))
    # works outside the triangle too
    q = project_to_plane_down_y(point(3, 0, 3), *SLOPE)
    assert q[0] == 3 and q[2] == 3
    wall = (point(0, 0, 0), point(0, 1, 0), point(0, 0, 1))
    assert isinstance(project_to_plane_down_y(point(1, 1, 1), *wall), Degenerate)
