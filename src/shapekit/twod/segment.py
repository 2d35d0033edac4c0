from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Union

import numpy as np

from .transform import IDENTITY, Matrix2, Transformation, _as_matrix
from .types import R2, CircleFrac, frac_to_rad, vec2


@dataclass(frozen=True)
class Linear:
    """A straight segment, stored as the offset from its start to its end."""

    offset: R2

    def __post_init__(self) -> None:
        object.__setattr__(self, "offset", vec2(self.offset, "offset"))

    def transform(self, t: Transformation) -> "Linear":
        return Linear(t.apply_vector(self.offset))

    def sample(self, segments_per_circle: int = 64) -> np.ndarray:
        return np.array([[0.0, 0.0], list(self.offset)], dtype=float)


@dataclass(frozen=True)
class Arc:
    """A counterclockwise circular arc between two turn fractions.

    The arc starts on the circle of ``radius`` at angle ``start`` and sweeps
    to ``end``; when ``end < start`` the sweep wraps around by whole turns.
    ``matrix`` collects the linear part of any transform that is not a plain
    positive uniform scale, so the segment stays exact under mirroring and
    per-axis scaling (where it becomes elliptical).
    """

    start: CircleFrac
    end: CircleFrac
    radius: float = 1.0
    matrix: Matrix2 = IDENTITY

    def __post_init__(self) -> None:
        if not (np.isfinite(self.start) and np.isfinite(self.end)):
            raise ValueError("arc angles must be finite.")
        if not np.isfinite(self.radius):
            raise ValueError("radius must be finite.")
        object.__setattr__(self, "start", float(self.start))
        object.__setattr__(self, "end", float(self.end))
        object.__setattr__(self, "radius", float(self.radius))
        object.__setattr__(self, "matrix", _as_matrix(self.matrix))

    @property
    def sweep(self) -> CircleFrac:
        span = self.end - self.start
        if span < 0:
            span %= 1.0
        return span

    def _relative(self, fracs: np.ndarray) -> np.ndarray:
        theta0 = frac_to_rad(self.start)
        theta = fracs * 2.0 * math.pi
        local = np.column_stack(
            [np.cos(theta) - math.cos(theta0), np.sin(theta) - math.sin(theta0)]
        ) * self.radius
        return local @ np.asarray(self.matrix, dtype=float).T

    @property
    def offset(self) -> R2:
        rel = self._relative(np.array([self.start + self.sweep]))[0]
        return (float(rel[0]), float(rel[1]))

    def transform(self, t: Transformation) -> "Arc":
        lin = t.linear()
        if lin[0, 1] == 0.0 and lin[1, 0] == 0.0 and lin[0, 0] == lin[1, 1] and lin[0, 0] > 0:
            return Arc(self.start, self.end, self.radius * float(lin[0, 0]), self.matrix)
        mat = lin @ np.asarray(self.matrix, dtype=float)
        return Arc(self.start, self.end, self.radius, mat)

    def sample(self, segments_per_circle: int = 64) -> np.ndarray:
        if segments_per_circle < 3:
            raise ValueError("segments_per_circle must be >= 3.")
        span = self.sweep
        steps = max(int(np.ceil(segments_per_circle * span)), 2)
        fracs = np.linspace(self.start, self.start + span, steps, endpoint=True)
        return self._relative(fracs)


Segment = Union[Linear, Arc]


def is_straight(segment: Segment) -> bool:
    return isinstance(segment, Linear)


__all__ = ["Arc", "Linear", "Segment", "is_straight"]
