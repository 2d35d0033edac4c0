"""Polygon construction: vertex generation, centering and orientation.

Three ways to describe a polygon are supported:

* :class:`PolyRegular`: side count and circumradius;
* :class:`PolyPolar`: central angles between successive vertices and the
  radius of each vertex;
* :class:`PolySides`: the turn taken at each vertex and the length of each
  side but the last, which is implied by closing the loop.

Each is then optionally rotated so that an edge lies flat against the
bottom (:attr:`PolyOrientation.HORIZONTAL`) or the right
(:attr:`PolyOrientation.VERTICAL`).
"""

from __future__ import annotations

import itertools
import logging
import math
from dataclasses import dataclass, field
from enum import Enum
from typing import Iterable, Sequence, Type, Union

import numpy as np

from .path import P, Path, path_like
from .segment import Linear
from .types import P2, CircleFrac, scale_vec, unit_x, unit_y

logger = logging.getLogger(__name__)

_TIE_TOLERANCE = 1e-9


@dataclass(frozen=True)
class PolyPolar:
    angles: Sequence[CircleFrac]
    radii: Sequence[float]

    def __post_init__(self) -> None:
        object.__setattr__(self, "angles", tuple(float(a) for a in self.angles))
        object.__setattr__(self, "radii", tuple(float(r) for r in self.radii))


@dataclass(frozen=True)
class PolyRegular:
    sides: int
    radius: float


@dataclass(frozen=True)
class PolySides:
    turns: Sequence[CircleFrac]
    lengths: Sequence[float]

    def __post_init__(self) -> None:
        object.__setattr__(self, "turns", tuple(float(a) for a in self.turns))
        object.__setattr__(self, "lengths", tuple(float(v) for v in self.lengths))


PolyType = Union[PolyPolar, PolyRegular, PolySides]


class PolyOrientation(Enum):
    NONE = "none"
    HORIZONTAL = "horizontal"
    VERTICAL = "vertical"


@dataclass(frozen=True)
class PolygonOpts:
    poly_type: PolyType = field(default_factory=lambda: PolyRegular(5, 1.0))
    orientation: PolyOrientation = PolyOrientation.NONE


def _polar_vertices(angles: Sequence[CircleFrac], radii: Sequence[float]) -> np.ndarray:
    if not radii:
        return np.zeros((0, 2), dtype=float)
    fracs = np.fromiter(itertools.accumulate(itertools.chain([0.0], angles)), dtype=float)
    fracs = fracs[: len(radii)]
    radii_arr = np.asarray(radii[: len(fracs)], dtype=float)
    theta = fracs * 2.0 * math.pi
    return np.column_stack([np.cos(theta), np.sin(theta)]) * radii_arr[:, None]


def _sides_vertices(turns: Sequence[CircleFrac], lengths: Sequence[float]) -> np.ndarray:
    headings = itertools.accumulate(itertools.chain([0.0], turns))
    offsets = [
        scale_vec((math.cos(2.0 * math.pi * h), math.sin(2.0 * math.pi * h)), length)
        for h, length in zip(headings, lengths)
    ]
    pts = np.vstack([np.zeros((1, 2))] + [np.asarray(offsets, dtype=float).reshape(-1, 2)])
    pts = np.cumsum(pts, axis=0)
    return pts - pts.mean(axis=0)


def _wrap(angle: float) -> float:
    return (angle + math.pi) % (2.0 * math.pi) - math.pi


def _alignment_angle(edge: np.ndarray, direction: np.ndarray) -> float:
    """Smallest rotation that turns ``edge`` perpendicular to ``direction``."""
    heading = math.atan2(edge[1], edge[0])
    target = math.atan2(direction[1], direction[0])
    options = [_wrap(target + math.pi / 2.0 - heading), _wrap(target - math.pi / 2.0 - heading)]
    return min(options, key=abs)


def _orientation_angle(vertices: np.ndarray, direction: Sequence[float]) -> float:
    if vertices.shape[0] < 2:
        return 0.0
    d = np.asarray(direction, dtype=float)
    d = d / np.linalg.norm(d)
    reach = vertices @ d
    idx = int(np.flatnonzero(reach >= reach.max() - _TIE_TOLERANCE)[0])
    n = vertices.shape[0]
    current = vertices[idx]
    a_next = _alignment_angle(vertices[(idx + 1) % n] - current, d)
    a_prev = _alignment_angle(vertices[(idx - 1) % n] - current, d)
    if abs(a_prev) < abs(a_next) - _TIE_TOLERANCE:
        return a_prev
    return a_next


_ORIENT_DIRECTIONS = {
    PolyOrientation.HORIZONTAL: scale_vec(unit_y, -1.0),
    PolyOrientation.VERTICAL: unit_x,
}


def polygon_vertices(opts: PolygonOpts | None = None) -> np.ndarray:
    """Return the ``(k, 2)`` vertex array described by ``opts``."""

    opts = PolygonOpts() if opts is None else opts
    poly = opts.poly_type
    if isinstance(poly, PolyRegular):
        n = int(poly.sides)
        vertices = _polar_vertices([1.0 / n] * (n - 1) if n > 0 else [], [float(poly.radius)] * max(n, 0))
    elif isinstance(poly, PolyPolar):
        vertices = _polar_vertices(poly.angles, poly.radii)
    elif isinstance(poly, PolySides):
        vertices = _sides_vertices(poly.turns, poly.lengths)
    else:
        raise TypeError(f"Unsupported polygon type {type(poly).__name__}.")

    direction = _ORIENT_DIRECTIONS.get(opts.orientation)
    if direction is None:
        return vertices
    angle = _orientation_angle(vertices, direction)
    logger.debug("orienting %d-vertex polygon %s by %.6g rad", vertices.shape[0], opts.orientation.value, angle)
    if angle == 0.0:
        return vertices
    c, s = math.cos(angle), math.sin(angle)
    rot = np.array([[c, -s], [s, c]])
    return vertices @ rot.T


def _closed_offsets(vertices: np.ndarray) -> Iterable[Linear]:
    n = vertices.shape[0]
    for i in range(n):
        edge = vertices[(i + 1) % n] - vertices[i]
        yield Linear((float(edge[0]), float(edge[1])))


def polygon(opts: PolygonOpts | None = None, kind: Type[P] = Path) -> P:
    """Closed outline through the vertices described by ``opts``."""

    vertices = polygon_vertices(opts)
    if vertices.shape[0] == 0:
        return path_like(P2.origin(), True, [], kind=kind)
    start = P2(float(vertices[0, 0]), float(vertices[0, 1]))
    return path_like(start, True, list(_closed_offsets(vertices)), kind=kind)


__all__ = [
    "PolyOrientation",
    "PolyPolar",
    "PolyRegular",
    "PolySides",
    "PolyType",
    "PolygonOpts",
    "polygon",
    "polygon_vertices",
]
