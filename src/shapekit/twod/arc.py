"""Circular arcs and circles."""

from __future__ import annotations

import math
from typing import Type

from .path import P, Path, Trail, path_like
from .segment import Arc
from .transform import scale
from .types import P2, CircleFrac, frac_to_rad


def arc(start: CircleFrac, end: CircleFrac, kind: Type[P] = Trail) -> P:
    """Unit-radius arc sweeping counterclockwise from ``start`` to ``end``.

    Angles are turn fractions. Located results start on the unit circle at
    ``start``; use :func:`shapekit.twod.transform.scale` to set the radius.
    """

    theta = frac_to_rad(start)
    origin = P2(math.cos(theta), math.sin(theta))
    return path_like(origin, False, [Arc(start, end)], kind=kind)


def circle(r: float, kind: Type[P] = Path) -> P:
    """A closed circle of radius ``r`` centered at the origin, starting at ``(r, 0)``."""
    outline = path_like(P2(1.0, 0.0), True, [Arc(0.0, 1.0)], kind=kind)
    return scale(outline, r)


__all__ = ["arc", "circle"]
