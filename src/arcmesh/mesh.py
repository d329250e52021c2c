"""Build polyhedra from indexed triangle meshes."""

from __future__ import annotations

from collections import Counter
from typing import List, Optional, Sequence

import numpy as np

from arcmesh.geom import epsilon, point
from arcmesh.polyhedron import Edge3D, Face, Polyhedron, Three3DPoints


def _edge_key(a: int, b: int) -> tuple[int, int]:
    return (a, b) if a < b else (b, a)


def weld_vertices(vertices, triangles, tol: float = epsilon):
    """Merge vertices closer than ``tol`` (on a grid of size ``tol``).

    Returns ``(vertices, triangles)`` with the triangles re-indexed onto
    the merged vertex array.
    """
    verts = np.asarray(vertices, dtype=float)
    tris = np.asarray(triangles, dtype=int)
    keys = np.round(verts / tol).astype(np.int64)
    _, first, inverse = np.unique(keys, axis=0, return_index=True, return_inverse=True)
    inverse = inverse.reshape(-1)
    return verts[first], inverse[tris]


def polyhedron_from_mesh(name, vertices, triangles,
                         face_groups: Optional[Sequence[Sequence[int]]] = None,
                         face_names: Optional[Sequence] = None,
                         weld: bool = False) -> Polyhedron:
    """Make a ``Polyhedron`` from an ``(N, 3)`` vertex array and an
    ``(M, 3)`` array of triangle vertex indices.

    ``face_groups`` lists, for every face, the indices of its triangles;
    by default each triangle is its own face.  The triangles of a group
    should be coplanar.  The polyhedron's edges are the face outlines
    (triangle edges used by only one triangle of their face), each
    shared outline edge listed once.  Its corners are the vertices used
    by any triangle.
    """

    verts = np.asarray(vertices, dtype=float)
    tris = np.asarray(triangles, dtype=int)
    if verts.ndim != 2 or verts.shape[1] != 3:
        raise ValueError('polyhedron_from_mesh: vertices must have shape (N, 3)')
    if tris.ndim != 2 or tris.shape[1] != 3:
        raise ValueError('polyhedron_from_mesh: triangles must have shape (M, 3)')
    if tris.size and (tris.min() < 0 or tris.max() >= len(verts)):
        raise ValueError('polyhedron_from_mesh: triangle index out of range')
    if weld:
        verts, tris = weld_vertices(verts, tris)

    if face_groups is None:
        face_groups = [[i] for i in range(len(tris))]
    if face_names is not None and len(face_names) != len(face_groups):
        raise ValueError('polyhedron_from_mesh: one name per face group is required')

    pts = [point(float(x), float(y), float(z)) for x, y, z in verts]

    faces: List[Face] = []
    edges: List[Edge3D] = []
    seen = set()
    for k, group in enumerate(face_groups):
        if len(group) == 0:
            raise ValueError(f'polyhedron_from_mesh: face group {k} is empty')
        idx = tris[list(group)]
        triangles3 = [Three3DPoints(pts[a], pts[b], pts[c]) for a, b, c in idx]
        plane = max(triangles3, key=lambda t: t.area())
        fname = face_names[k] if face_names is not None else f'{name}.f{k}'
        faces.append(Face(fname, plane, triangles3))

        counts = Counter()
        for a, b, c in idx:
            counts[_edge_key(a, b)] += 1
            counts[_edge_key(b, c)] += 1
            counts[_edge_key(c, a)] += 1
        for key, count in counts.items():
            if count == 1 and key not in seen:
                seen.add(key)
                edges.append(Edge3D(f'{name}.e{len(edges)}', pts[key[0]], pts[key[1]]))

    corners = [pts[i] for i in np.unique(tris)]
    return Polyhedron(name, faces, edges, corners)


## outward-wound quads of an axis-aligned box, two triangles each
_BOX_TRIANGLES = [
    (0, 1, 2), (0, 2, 3),   # bottom
    (4, 6, 5), (4, 7, 6),   # top
    (0, 4, 5), (0, 5, 1),   # front (low z)
    (3, 2, 6), (3, 6, 7),   # back (high z)
    (0, 3, 7), (0, 7, 4),   # left (low x)
    (1, 5, 6), (1, 6, 2),   # right (high x)
]
_BOX_FACES = ['bottom', 'top', 'front', 'back', 'left', 'right']


def box_polyhedron(name, lo=(0.0, 0.0, 0.0), hi=(1.0, 1.0, 1.0)) -> Polyhedron:
    """axis-aligned box spanning ``lo`` to ``hi``, one face per side"""
    x0, y0, z0 = lo[0], lo[1], lo[2]
    x1, y1, z1 = hi[0], hi[1], hi[2]
    if x0 >= x1 or y0 >= y1 or z0 >= z1:
        raise ValueError('box_polyhedron: lo must be below hi on every axis')
    verts = [
        (x0, y0, z0), (x1, y0, z0), (x1, y0, z1), (x0, y0, z1),
        (x0, y1, z0), (x1, y1, z0), (x1, y1, z1), (x0, y1, z1),
    ]
    groups = [[2*k, 2*k + 1] for k in range(len(_BOX_FACES))]
    names = [f'{name}.{side}' for side in _BOX_FACES]
    return polyhedron_from_mesh(name, verts, _BOX_TRIANGLES, groups, names)


__all__ = ['weld_vertices', 'polyhedron_from_mesh', 'box_polyhedron']
