"""Various two-dimensional shapes.

Every constructor takes a ``kind`` argument selecting the result
representation (:class:`~shapekit.twod.path.Trail`,
:class:`~shapekit.twod.path.LocatedTrail` or
:class:`~shapekit.twod.path.Path`, the default).
"""

from __future__ import annotations

import itertools
import logging
import math
from typing import Sequence, Type, TypeVar

from .path import P, Path, path_like
from .polygons import PolygonOpts, PolyOrientation, PolyRegular, PolySides, polygon
from .segment import Arc, Linear, Segment
from .transform import scale, scale_x, scale_y
from .types import P2, sub

logger = logging.getLogger(__name__)

# Miscellaneous


def hrule(d: float, kind: Type[P] = Path) -> P:
    """Create a centered horizontal (L-R) line of the given length."""
    return path_like(P2(-d / 2, 0.0), False, [Linear((d, 0.0))], kind=kind)


def vrule(d: float, kind: Type[P] = Path) -> P:
    """Create a centered vertical (T-B) line of the given length."""
    return path_like(P2(0.0, d / 2), False, [Linear((0.0, -d))], kind=kind)


# Squares and rectangles


def unit_square(kind: Type[P] = Path) -> P:
    """A square with its center at the origin and sides of length 1,
    oriented parallel to the axes."""
    opts = PolygonOpts(poly_type=PolyRegular(4, math.sqrt(2) / 2), orientation=PolyOrientation.HORIZONTAL)
    return polygon(opts, kind=kind)


def square(d: float, kind: Type[P] = Path) -> P:
    """A square centered at the origin with sides of length ``d``."""
    return scale(unit_square(kind), d)


def rect(w: float, h: float, kind: Type[P] = Path) -> P:
    """``rect(w, h)`` is an axis-aligned rectangle of width ``w`` and height
    ``h``, centered at the origin."""
    return scale_y(scale_x(unit_square(kind), w), h)


# Regular polygons


def reg_poly(n: int, l: float, kind: Type[P] = Path) -> P:
    """Create a regular polygon from its number of sides and the *length*
    of the sides (compare :class:`PolyRegular`, which takes a radius).

    The polygon is oriented with one edge parallel to the x-axis.
    """
    turns = itertools.repeat(1.0 / n, n) if n > 0 else ()
    opts = PolygonOpts(poly_type=PolySides(turns, [l] * (n - 1)), orientation=PolyOrientation.HORIZONTAL)
    return polygon(opts, kind=kind)


def eq_triangle(l: float, kind: Type[P] = Path) -> P:
    """An equilateral triangle with sides of length ``l`` and base parallel
    to the x-axis."""
    return reg_poly(3, l, kind=kind)


def pentagon(l: float, kind: Type[P] = Path) -> P:
    return reg_poly(5, l, kind=kind)


def hexagon(l: float, kind: Type[P] = Path) -> P:
    return reg_poly(6, l, kind=kind)


def septagon(l: float, kind: Type[P] = Path) -> P:
    return reg_poly(7, l, kind=kind)


def octagon(l: float, kind: Type[P] = Path) -> P:
    return reg_poly(8, l, kind=kind)


def nonagon(l: float, kind: Type[P] = Path) -> P:
    return reg_poly(9, l, kind=kind)


def decagon(l: float, kind: Type[P] = Path) -> P:
    return reg_poly(10, l, kind=kind)


def hendecagon(l: float, kind: Type[P] = Path) -> P:
    return reg_poly(11, l, kind=kind)


def dodecagon(l: float, kind: Type[P] = Path) -> P:
    return reg_poly(12, l, kind=kind)


# Other shapes


def rounded_rect(v: Sequence[float], r: float, kind: Type[P] = Path) -> P:
    """Axis-aligned rectangle with diagonal ``v`` and circular corners of radius ``r``.

    ``r`` is clamped to ``[0, min(v) / 2]``. The outline is closed, begins
    with the right edge and proceeds counterclockwise. A clamped radius of
    zero yields a plain rectangle with no arc segments.
    """

    w, h = float(v[0]), float(v[1])
    max_r = min(w, h) / 2
    r_clamped = clamp(r, 0.0, max_r)
    if r_clamped != r:
        logger.debug("rounded_rect radius %r clamped to %r", r, r_clamped)
    x_off, y_off = sub((w, h), (2 * r_clamped, 2 * r_clamped))

    def corner(k: int) -> list[Segment]:
        if r_clamped == 0:
            return []
        return [scale(Arc(k / 4, (k + 1) / 4), r_clamped)]

    segments: list[Segment] = []
    segments += [Linear((0.0, y_off))] + corner(0)
    segments += [Linear((-x_off, 0.0))] + corner(1)
    segments += [Linear((0.0, -y_off))] + corner(2)
    segments += [Linear((x_off, 0.0))] + corner(3)
    return path_like(P2(x_off / 2 + r_clamped, -y_off / 2), True, segments, kind=kind)


T = TypeVar("T")


def clamp(x: T, lo: T, hi: T) -> T:
    """Clamp ``x`` to lie between ``lo`` and ``hi`` inclusive.

    Returns ``lo`` if ``x < lo``, ``hi`` if ``hi < x`` and ``x`` otherwise.
    ``lo <= hi`` is not checked.
    """
    if x < lo:
        return lo
    if x > hi:
        return hi
    return x


__all__ = [
    "clamp",
    "decagon",
    "dodecagon",
    "eq_triangle",
    "hendecagon",
    "hexagon",
    "hrule",
    "nonagon",
    "octagon",
    "pentagon",
    "rect",
    "reg_poly",
    "rounded_rect",
    "septagon",
    "square",
    "unit_square",
    "vrule",
]
