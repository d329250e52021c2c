"""Error and diagnostic types shared by arcmesh modules.

Two channels are used.  Broken invariants (a curve queried outside of
every interval, a triangle that cannot be chopped) raise a
``GeometryContractError``.  Degenerate but recoverable inputs (a zero-area
face, a zero-length edge) are reported as a ``Degenerate`` outcome that
carries the value the caller should continue with; ``resolve`` logs the
reason and hands back that fallback.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Optional


class GeometryContractError(ValueError):
    """An internal invariant of a geometry operation was violated."""


class CurveDomainError(GeometryContractError):
    """No interval of a piecewise curve contains the queried value."""


class ChopError(GeometryContractError):
    """A triangle straddling the cut height produced an impossible split."""


@dataclass(frozen=True)
class Degenerate:
    reason: str
    fallback: Any = None

    def __bool__(self) -> bool:
        return False


def isdegenerate(outcome: Any) -> bool:
    return isinstance(outcome, Degenerate)


def resolve(outcome: Any, log: Optional[logging.Logger] = None) -> Any:
    """Return ``outcome``, or its fallback after logging a warning if it
    is ``Degenerate``."""

    if isinstance(outcome, Degenerate):
        (log or logging.getLogger(__name__)).warning(
            '%s; continuing with %r', outcome.reason, outcome.fallback)
        return outcome.fallback
    return outcome


__all__ = [
    'GeometryContractError',
    'CurveDomainError',
    'ChopError',
    'Degenerate',
    'isdegenerate',
    'resolve',
]
