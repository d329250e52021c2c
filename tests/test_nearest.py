import logging
import math

from arcmesh.geom import point, vclose
from arcmesh.mesh import box_polyhedron, polyhedron_from_mesh
from arcmesh.nearest import find_nearest, get_nearest_point
from arcmesh.polyhedron import Edge3D, Polyhedron


def _square():
    verts = [(0, 0, 0), (1, 0, 0), (1, 0, 1), (0, 0, 1)]
    return polyhedron_from_mesh('square', verts, [(0, 1, 2), (0, 2, 3)], [[0, 1]])


class TestSquare:
    def test_point_above_face(self):
        assert vclose(get_nearest_point(_square(), point(0.5, 5, 0.5)), point(0.5, 0, 0.5))
        found = find_nearest(_square(), point(0.5, 5, 0.5))
        assert found.kind == 'face'
        assert math.isclose(found.distance, 5.0)

    def test_point_beside_face_hits_edge(self):
        found = find_nearest(_square(), point(2, 5, 0.5))
        assert found.kind == 'edge'
        assert vclose(found.point, point(1, 0, 0.5))

    def test_point_off_the_corner(self):
        found = find_nearest(_square(), point(2, 5, 2))
        assert found.kind == 'corner'
        assert vclose(found.point, point(1, 0, 1))

    def test_tie_goes_to_face(self):
        found = find_nearest(_square(), point(0, 5, 0))
        assert found.kind == 'face'
        assert vclose(found.point, point(0, 0, 0))

    def test_method(self):
        sq = _square()
        assert vclose(sq.get_nearest_point(point(0.25, -3, 0.75)), point(0.25, 0, 0.75))
        assert sq.find_nearest(point(0.25, -3, 0.75)).name == 'square.f0'


class TestBox:
    def test_outside_each_side(self):
        box = box_polyhedron('box', (0, 0, 0), (2, 2, 2))
        assert vclose(box.get_nearest_point(point(1, 10, 1)), point(1, 2, 1))
        assert vclose(box.get_nearest_point(point(-4, 1, 1.5)), point(0, 1, 1.5))
        assert vclose(box.get_nearest_point(point(1, 1, 9)), point(1, 1, 2))

    def test_inside_finds_closest_wall(self):
        box = box_polyhedron('box', (0, 0, 0), (2, 2, 2))
        found = box.find_nearest(point(1, 1.75, 1))
        assert found.kind == 'face'
        assert found.name == 'box.top'

    def test_sliced_box(self):
        lower = box_polyhedron('box', (0, 0, 0), (2, 2, 2)).exclude_above('lower', 1.0)
        found = lower.find_nearest(point(1, 5, 1))
        assert found.kind == 'edge'
        assert vclose(found.point, point(1, 1, 0)) or vclose(found.point, point(1, 1, 2)) \
            or vclose(found.point, point(0, 1, 1)) or vclose(found.point, point(2, 1, 1))


class TestFallbacks:
    def test_empty(self, caplog):
        with caplog.at_level(logging.WARNING, logger='arcmesh'):
            found = find_nearest(Polyhedron('empty'), point(3, 4, 5))
        assert found.point[0] == 3 and found.point[2] == 5
        assert found.point[1] == -math.inf
        assert found.kind == 'none'
        assert 'no candidate' in caplog.text

    def test_zero_length_edge(self, caplog):
        poly = Polyhedron('dot', edges=[Edge3D('dot', point(1, 1, 1), point(1, 1, 1))])
        with caplog.at_level(logging.WARNING, logger='arcmesh'):
            found = find_nearest(poly, point(1, 5, 1))
        assert found.kind == 'edge'
        assert vclose(found.point, point(1, 1, 1))
        assert 'zero length' in caplog.text

    def test_corners_only(self):
        poly = Polyhedron('pts', corners=[point(0, 0, 0), point(5, 0, 0)])
        assert vclose(poly.get_nearest_point(point(4, 1, 0)), point(5, 0, 0))
