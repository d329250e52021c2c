"""Cut a polyhedron with a horizontal plane and keep what lies below.

Faces, triangles and edges are classified by their height interval
``[lo, hi]`` against the cut height ``h``:

* preserved -- ``hi <= h``, kept unchanged,
* excluded -- ``lo > h``, dropped,
* chopped -- ``lo <= h < hi``, clipped to the part at or below ``h``.

A chopped triangle is clipped by walking its corners in order, keeping
each corner at or below ``h`` and inserting the crossing point wherever
an edge passes through the cut.  One surviving corner gives a triangle,
two give a quadrilateral that is split into two triangles.  Both keep
the winding of the original triangle, and pieces of zero area left by a
corner lying on the cut are dropped.  The two crossing points form the
triangle's cut segment.  The connected, collinear cut segments of a face
are merged into single cut edges.

Set ``ARCMESH_SLICE_DEBUG=1`` to log every classification decision at
debug level.
"""

from __future__ import annotations

import logging
import os
from enum import Enum
from typing import List, Optional, Sequence, Tuple

from arcmesh.errors import ChopError, resolve
from arcmesh.geom import cross, dist, epsilon, mag, sub, vclose
from arcmesh.interval import Interval
from arcmesh.planes import point_on_line_at_height
from arcmesh.polyhedron import Edge3D, Face, Polyhedron, Three3DPoints

logger = logging.getLogger(__name__)

_debug = os.environ.get('ARCMESH_SLICE_DEBUG', '').lower() in ('1', 'true', 'yes')


class Placement(Enum):
    PRESERVED = 'preserved'
    CHOPPED = 'chopped'
    EXCLUDED = 'excluded'


def classify(interval: Interval, h: float) -> Placement:
    if interval.upper <= h:
        return Placement.PRESERVED
    if interval.lower > h:
        return Placement.EXCLUDED
    return Placement.CHOPPED


def _crossing(a, b, h):
    return resolve(point_on_line_at_height(a, b, h), logger)


def chop_triangle(tri: Three3DPoints, h: float) -> Tuple[List[Three3DPoints], Tuple[list, list]]:
    """Clip ``tri`` to the half-space at or below ``h``.

    Returns ``(triangles, (c0, c1))`` where ``c0, c1`` are the two points
    where the triangle's boundary crosses the cut.  Pieces of zero area,
    left where a corner lies on the cut, are dropped, so ``triangles``
    can be empty.  Raises ``ChopError`` unless exactly one or two
    corners lie at or below ``h``.
    """

    corners = tri.points()
    below = [p[1] <= h for p in corners]
    kept = sum(below)
    if kept not in (1, 2):
        logger.error('cannot chop triangle %r at %s: %d corners at or below the cut',
                     tri, h, kept)
        raise ChopError(f'chop_triangle: {kept} corners at or below {h}, expected 1 or 2')

    outline = []
    cut = []
    for i, p in enumerate(corners):
        q = corners[(i + 1) % 3]
        if below[i]:
            outline.append(p)
        if below[i] != below[(i + 1) % 3]:
            c = _crossing(p, q, h)
            outline.append(c)
            cut.append(c)

    if kept == 1:
        tris = [Three3DPoints(*outline)]
    else:
        a, b, c, d = outline
        tris = [Three3DPoints(a, b, c), Three3DPoints(a, c, d)]
    tris = [t for t in tris if t.area() > epsilon*epsilon]
    return tris, (cut[0], cut[1])


def chop_edge(edge: Edge3D, h: float, name=None) -> Edge3D:
    """lower part of an edge that crosses height ``h``"""
    low, high = (edge.p1, edge.p2) if edge.p1[1] <= edge.p2[1] else (edge.p2, edge.p1)
    return Edge3D(edge.name if name is None else name, low, _crossing(low, high, h))


def _collinear(s, t) -> bool:
    ds = sub(s[1], s[0])
    dt = sub(t[1], t[0])
    return mag(cross(ds, dt)) <= epsilon*mag(ds)*mag(dt)


def _join(s, t) -> Optional[Tuple[list, list]]:
    if not _collinear(s, t):
        return None
    if vclose(s[1], t[0]):
        return s[0], t[1]
    if vclose(t[1], s[0]):
        return t[0], s[1]
    if vclose(s[0], t[0]):
        return s[1], t[1]
    if vclose(s[1], t[1]):
        return s[0], t[0]
    return None


def merge_segments(segments: Sequence[Tuple[list, list]]) -> List[Tuple[list, list]]:
    """Drop zero-length segments and merge connected collinear ones."""
    merged = [s for s in segments if dist(s[0], s[1]) > epsilon]
    joined = True
    while joined:
        joined = False
        for i in range(len(merged)):
            for j in range(i + 1, len(merged)):
                seg = _join(merged[i], merged[j])
                if seg is not None:
                    merged[i] = seg
                    del merged[j]
                    joined = True
                    break
            if joined:
                break
    return merged


def _cut_edges(face: Face, segments) -> List[Edge3D]:
    merged = merge_segments(segments)
    if len(merged) == 1:
        return [Edge3D('{}.cut'.format(face.name), *merged[0])]
    return [Edge3D('{}.cut{}'.format(face.name, k), *seg) for k, seg in enumerate(merged)]


def chop_face(face: Face, h: float) -> Tuple[Optional[Face], List[Edge3D]]:
    """Rebuild ``face`` from its triangles at or below ``h``.

    Returns ``(face, cut_edges)``; ``face`` is ``None``, with no cut
    edges, when no part of it with area lies at or below ``h``.
    """

    triangles = []
    segments = []
    for tri in face.triangles:
        placement = classify(tri.height_interval(), h)
        if _debug:
            logger.debug('face %r triangle %r: %s', face.name, tri, placement.value)
        if placement is Placement.PRESERVED:
            triangles.append(tri)
        elif placement is Placement.CHOPPED:
            tris, cut = chop_triangle(tri, h)
            triangles.extend(tris)
            segments.append(cut)
    if not triangles:
        return None, []
    return Face(face.name, face.plane, triangles), _cut_edges(face, segments)


def exclude_above(polyhedron: Polyhedron, h: float, new_name) -> Polyhedron:
    """New polyhedron named ``new_name`` holding the part of
    ``polyhedron`` at or below height ``h``."""

    faces = []
    edges = []
    cut_edges = []
    for face in polyhedron.faces:
        placement = classify(face.height_interval(), h)
        if _debug:
            logger.debug('face %r: %s', face.name, placement.value)
        if placement is Placement.PRESERVED:
            faces.append(face)
        elif placement is Placement.CHOPPED:
            rebuilt, cuts = chop_face(face, h)
            if rebuilt is not None:
                faces.append(rebuilt)
            cut_edges.extend(cuts)

    for edge in polyhedron.edges:
        placement = classify(edge.height_interval(), h)
        if _debug:
            logger.debug('edge %r: %s', edge.name, placement.value)
        if placement is Placement.PRESERVED:
            edges.append(edge)
        elif placement is Placement.CHOPPED:
            lower = chop_edge(edge, h)
            if lower.length() > epsilon:
                edges.append(lower)

    corners = [c for c in polyhedron.corners if c[1] <= h]

    logger.debug('exclude_above %r at %s: %d faces, %d edges (%d cut), %d corners',
                 polyhedron.name, h, len(faces), len(edges) + len(cut_edges),
                 len(cut_edges), len(corners))
    return Polyhedron(new_name, faces, edges + cut_edges, corners)


__all__ = [
    'Placement',
    'classify',
    'chop_triangle',
    'chop_edge',
    'chop_face',
    'merge_segments',
    'exclude_above',
]
