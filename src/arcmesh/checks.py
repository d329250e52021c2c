"""Validation helpers for polyhedra and slicing results."""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Sequence

from arcmesh.geom import dist, epsilon
from arcmesh.polyhedron import BasisDir, Edge3D, Polyhedron


@dataclass
class CheckResult:
    ok: bool
    warnings: List[str]

    def __bool__(self) -> bool:
        return self.ok


def below_height(polyhedron: Polyhedron, h: float, tol: float = epsilon) -> CheckResult:
    """every triangle vertex, edge end and corner lies at or below ``h``"""

    warnings: List[str] = []
    for face in polyhedron.faces:
        high = [p for p in face.points() if p[1] > h + tol]
        if high:
            warnings.append(f'face {face.name!r} has {len(high)} vertices above {h}')
    for edge in polyhedron.edges:
        if max(edge.p1[1], edge.p2[1]) > h + tol:
            warnings.append(f'edge {edge.name!r} rises above {h}')
    high = [c for c in polyhedron.corners if c[1] > h + tol]
    if high:
        warnings.append(f'{len(high)} corners above {h}')
    return CheckResult(not warnings, warnings)


def cut_edges_closed(edges: Sequence[Edge3D], tol: float = epsilon) -> CheckResult:
    """Every end point of ``edges`` is shared by exactly two of them, so
    the edges form closed loops."""

    ends: List[list] = []
    counts: List[int] = []
    for edge in edges:
        for p in (edge.p1, edge.p2):
            for i, q in enumerate(ends):
                if dist(p, q) <= tol:
                    counts[i] += 1
                    break
            else:
                ends.append(p)
                counts.append(1)
    if not edges:
        return CheckResult(True, ['no edges'])
    bad = [ends[i] for i, n in enumerate(counts) if n != 2]
    if bad:
        return CheckResult(False, [f'{len(bad)} end points not shared by exactly two edges'])
    return CheckResult(True, [])


def nondegenerate_triangles(polyhedron: Polyhedron) -> CheckResult:
    warnings = []
    for face in polyhedron.faces:
        flat = [i for i, tri in enumerate(face.triangles) if tri.area() <= epsilon*epsilon]
        if flat:
            warnings.append(f'face {face.name!r} has degenerate triangles {flat}')
    return CheckResult(not warnings, warnings)


def projected_area(polyhedron: Polyhedron, d: BasisDir = BasisDir.Y) -> float:
    """Total area of all triangles projected along axis ``d``; along
    ``BasisDir.Y`` this is the horizontal footprint area."""

    return sum(tri.project_down_dir(d).area() for tri in polyhedron.triangles())


__all__ = [
    'CheckResult',
    'below_height',
    'cut_edges_closed',
    'nondegenerate_triangles',
    'projected_area',
]
