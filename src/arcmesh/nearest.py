"""Closest point on a polyhedron to a query point.

Candidates come from three populations, considered in order:

* faces -- the projection of the query onto the face plane, when it
  lands inside one of the face's triangles (tested in the face's
  preferred projection),
* edges -- the projection of the query onto the edge's line, when it
  lands within the edge (tested along the edge's longest axis),
* corners -- always candidates.

The closest candidate wins; on a tie the one found first is kept.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from math import inf

from arcmesh.errors import isdegenerate, resolve
from arcmesh.geom import dist, point, topoint
from arcmesh.planes import nearest_point_of_line_from_points, nearest_point_of_plane
from arcmesh.polyhedron import Polyhedron, project_down_dir, project_to_dir

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class NearestPoint:
    point: list
    distance: float
    kind: str
    name: object = None


def _face_candidates(polyhedron, p):
    for face in polyhedron.faces:
        q = nearest_point_of_plane(p, *face.plane)
        if isdegenerate(q):
            logger.warning('face %r: %s', face.name, q.reason)
            continue
        d = face.preferred_projection_dir
        flat = project_down_dir(q, d)
        for tri in face.triangles:
            tri2 = tri.project_down_dir(d)
            if tri2.area() == 0.0:
                logger.warning('face %r has a degenerate triangle %r', face.name, tri)
                continue
            if tri2.contains(flat):
                yield NearestPoint(q, dist(p, q), 'face', face.name)
                break


def _edge_candidates(polyhedron, p):
    for edge in polyhedron.edges:
        q = nearest_point_of_line_from_points(p, edge.p1, edge.p2)
        if isdegenerate(q):
            # a zero-length edge still has its end point as a candidate
            q = q.fallback
        d = resolve(edge.best_projection_dir(), logger)
        if edge.project_to_dir(d).contains(project_to_dir(q, d)):
            yield NearestPoint(q, dist(p, q), 'edge', edge.name)


def _corner_candidates(polyhedron, p):
    for corner in polyhedron.corners:
        yield NearestPoint(corner, dist(p, corner), 'corner')


def find_nearest(polyhedron: Polyhedron, p) -> NearestPoint:
    """Closest face, edge or corner point of ``polyhedron`` to ``p``.

    An empty polyhedron logs a warning and gives the point straight
    below ``p`` at height ``-inf``.
    """

    p = topoint(p)
    best = None
    for populate in (_face_candidates, _edge_candidates, _corner_candidates):
        for candidate in populate(polyhedron, p):
            if best is None or candidate.distance < best.distance:
                best = candidate
    if best is None:
        logger.warning('polyhedron %r has no candidate points for %r', polyhedron.name, p)
        return NearestPoint(point(p[0], -inf, p[2]), inf, 'none')
    return best


def get_nearest_point(polyhedron: Polyhedron, p) -> list:
    return find_nearest(polyhedron, p).point


__all__ = ['NearestPoint', 'find_nearest', 'get_nearest_point']
