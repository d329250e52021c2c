import logging

import pytest

from arcmesh.errors import Degenerate
from arcmesh.geom import close, point, vclose
from arcmesh.interval import Interval
from arcmesh.polyhedron import (BasisDir, Edge3D, Face, Polyhedron, Three3DPoints, Triangle2D,
                                project_down_dir, project_to_dir)


class TestProjection:
    def test_project_down_dir(self):
        p = point(1, 2, 3)
        assert project_down_dir(p, BasisDir.X) == point(2, 3)
        assert project_down_dir(p, BasisDir.Y) == point(1, 3)
        assert project_down_dir(p, BasisDir.Z) == point(1, 2)

    def test_project_to_dir(self):
        p = point(1, 2, 3)
        assert [project_to_dir(p, d) for d in BasisDir] == [1, 2, 3]


class TestTriangle2D:
    def test_area_ignores_winding(self):
        assert close(Triangle2D(point(0, 0), point(2, 0), point(0, 2)).area(), 2.0)
        assert close(Triangle2D(point(0, 0), point(0, 2), point(2, 0)).area(), 2.0)

    def test_contains(self):
        t = Triangle2D(point(0, 0), point(2, 0), point(0, 2))
        assert t.contains(point(0.5, 0.5))
        assert t.contains(point(0, 0))
        assert t.contains(point(1, 1))
        assert not t.contains(point(1.5, 1.5))
        assert not t.contains(point(-0.1, 0.5))


class TestThree3DPoints:
    def test_horizontal_triangle_projects_down_y(self):
        t = Three3DPoints(point(0, 1, 0), point(1, 1, 0), point(0, 1, 1))
        assert t.best_projection_dir() is BasisDir.Y
        assert t.height_interval() == Interval(1, 1)

    def test_vertical_triangle(self):
        t = Three3DPoints(point(0, 0, 5), point(1, 0, 5), point(0, 1, 5))
        assert t.best_projection_dir() is BasisDir.Z
        t = Three3DPoints(point(5, 0, 0), point(5, 1, 0), point(5, 0, 1))
        assert t.best_projection_dir() is BasisDir.X

    def test_sloped_triangle_picks_largest_area(self):
        # steeper than 45 degrees, so the x projection is biggest
        t = Three3DPoints(point(0, 0, 0), point(1, 3, 0), point(0, 0, 1))
        assert t.best_projection_dir() is BasisDir.X

    def test_degenerate(self):
        t = Three3DPoints(point(0, 0, 0), point(1, 1, 1), point(2, 2, 2))
        outcome = t.best_projection_dir()
        assert isinstance(outcome, Degenerate)
        assert outcome.fallback is BasisDir.X

    def test_normal_and_area(self):
        t = Three3DPoints(point(0, 0, 0), point(0, 0, 1), point(1, 0, 0))
        assert vclose(t.normal(), point(0, 1, 0))
        assert close(t.area(), 0.5)

    def test_points_are_copied(self):
        p = point(0, 0, 0)
        t = Three3DPoints(p, point(1, 0, 0), point(0, 0, 1))
        p[1] = 7
        assert t.p1[1] == 0


class TestEdge3D:
    def test_best_projection_dir(self):
        assert Edge3D('e', point(0, 0, 0), point(0.1, 0.2, 3)).best_projection_dir() is BasisDir.Z
        assert Edge3D('e', point(0, 0, 0), point(-4, 0.2, 3)).best_projection_dir() is BasisDir.X

    def test_degenerate_edge(self):
        outcome = Edge3D('dot', point(1, 1, 1), point(1, 1, 1)).best_projection_dir()
        assert isinstance(outcome, Degenerate)
        assert outcome.fallback is BasisDir.Y

    def test_intervals(self):
        e = Edge3D('e', point(3, 2, 0), point(1, 5, 0))
        assert e.project_to_dir(BasisDir.X) == Interval(1, 3)
        assert e.height_interval() == Interval(2, 5)
        assert close(e.length(), 13 ** 0.5)


class TestFace:
    def test_height_interval_covers_all_triangles(self):
        plane = Three3DPoints(point(0, 0, 0), point(1, 0, 0), point(0, 1, 0))
        tris = [Three3DPoints(point(0, 0, 0), point(1, 0, 0), point(0, 1, 0)),
                Three3DPoints(point(0, 3, 0), point(0, 1, 0), point(1, 0, 0))]
        face = Face('f', plane, tris)
        assert face.height_interval() == Interval(0, 3)
        assert face.preferred_projection_dir is BasisDir.Z
        assert face.degenerate is None

    def test_degenerate_plane_warns(self, caplog):
        plane = Three3DPoints(point(0, 0, 0), point(1, 0, 0), point(2, 0, 0))
        with caplog.at_level(logging.WARNING, logger='arcmesh'):
            face = Face('flat', plane, [])
        assert face.preferred_projection_dir is BasisDir.X
        assert isinstance(face.degenerate, Degenerate)
        assert 'zero area' in caplog.text
        assert face.height_interval() == Interval(0, 0)


class TestPolyhedron:
    def test_construction(self):
        plane = Three3DPoints(point(0, 0, 0), point(1, 0, 0), point(0, 0, 1))
        face = Face('f', plane, [plane])
        corner = point(0, 0, 0)
        poly = Polyhedron('p', [face], [Edge3D('e', point(0, 0, 0), point(0, 2, 0))], [corner])
        corner[1] = 9
        assert poly.corners[0][1] == 0
        assert poly.height_interval() == Interval(0, 2)
        assert len(poly.triangles()) == 1
        assert 'p' in repr(poly)

    def test_empty_height_interval(self):
        with pytest.raises(ValueError):
            Polyhedron('empty').height_interval()
