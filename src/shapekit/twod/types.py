from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Sequence, Tuple

import numpy as np

R2 = Tuple[float, float]
"""A displacement in the plane."""

Angle = float
"""An angle in radians."""

CircleFrac = float
"""An angle as a fraction of a full turn (1.0 == 360 degrees)."""

unit_x: R2 = (1.0, 0.0)
unit_y: R2 = (0.0, 1.0)


def _require_vec2(value: Sequence[float], label: str) -> np.ndarray:
    try:
        arr = np.asarray(value, dtype=float).reshape(2)
    except Exception as exc:
        raise ValueError(f"{label} must be a 2D coordinate.") from exc
    if not np.all(np.isfinite(arr)):
        raise ValueError(f"{label} must be finite.")
    return arr


def vec2(value: Sequence[float], label: str = "vector") -> R2:
    """Normalize any 2-element sequence into an ``R2`` tuple of floats."""
    arr = _require_vec2(value, label)
    return (float(arr[0]), float(arr[1]))


def add(a: R2, b: R2) -> R2:
    return (a[0] + b[0], a[1] + b[1])


def sub(a: R2, b: R2) -> R2:
    return (a[0] - b[0], a[1] - b[1])


def scale_vec(v: R2, s: float) -> R2:
    return (v[0] * s, v[1] * s)


def frac_to_rad(frac: CircleFrac) -> Angle:
    return frac * 2.0 * math.pi


def rad_to_frac(angle: Angle) -> CircleFrac:
    return angle / (2.0 * math.pi)


@dataclass(frozen=True)
class P2:
    """A location in the plane, as opposed to an ``R2`` displacement."""

    x: float
    y: float

    def __post_init__(self) -> None:
        coords = _require_vec2((self.x, self.y), "point")
        object.__setattr__(self, "x", float(coords[0]))
        object.__setattr__(self, "y", float(coords[1]))

    @classmethod
    def origin(cls) -> "P2":
        return cls(0.0, 0.0)

    @classmethod
    def from_vec(cls, value: Sequence[float]) -> "P2":
        x, y = vec2(value, "point")
        return cls(x, y)

    def to_vec(self) -> R2:
        return (self.x, self.y)

    def as_array(self) -> np.ndarray:
        return np.array([self.x, self.y], dtype=float)

    def __add__(self, offset: Sequence[float]) -> "P2":
        return P2(*add(self.to_vec(), vec2(offset, "offset")))

    def __sub__(self, other: "P2 | Sequence[float]") -> "R2 | P2":
        if isinstance(other, P2):
            return sub(self.to_vec(), other.to_vec())
        return P2(*sub(self.to_vec(), vec2(other, "offset")))


__all__ = [
    "Angle",
    "CircleFrac",
    "P2",
    "R2",
    "add",
    "frac_to_rad",
    "rad_to_frac",
    "scale_vec",
    "sub",
    "unit_x",
    "unit_y",
    "vec2",
]
