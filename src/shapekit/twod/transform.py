from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Protocol, Sequence, Tuple, TypeVar

import numpy as np

from .types import P2, R2, Angle, CircleFrac, frac_to_rad, vec2

Matrix2 = Tuple[Tuple[float, float], Tuple[float, float]]

IDENTITY: Matrix2 = ((1.0, 0.0), (0.0, 1.0))


def _as_matrix(value: Sequence[Sequence[float]]) -> Matrix2:
    arr = np.asarray(value, dtype=float).reshape(2, 2)
    return ((float(arr[0, 0]), float(arr[0, 1])), (float(arr[1, 0]), float(arr[1, 1])))


@dataclass(frozen=True)
class Transformation:
    """An affine map of the plane: ``p -> matrix @ p + translation``."""

    matrix: Matrix2 = IDENTITY
    translation: R2 = (0.0, 0.0)

    def __post_init__(self) -> None:
        object.__setattr__(self, "matrix", _as_matrix(self.matrix))
        object.__setattr__(self, "translation", vec2(self.translation, "translation"))

    def linear(self) -> np.ndarray:
        return np.asarray(self.matrix, dtype=float)

    def apply_vector(self, v: Sequence[float]) -> R2:
        """Vectors are displacements, so only the linear part applies."""
        out = self.linear() @ np.asarray(v, dtype=float).reshape(2)
        return (float(out[0]), float(out[1]))

    def apply_point(self, p: P2) -> P2:
        x, y = self.apply_vector(p.to_vec())
        return P2(x + self.translation[0], y + self.translation[1])

    def compose(self, other: "Transformation") -> "Transformation":
        """Return the transformation applying ``other`` first, then ``self``."""
        mat = self.linear() @ other.linear()
        shift = self.linear() @ np.asarray(other.translation, dtype=float) + np.asarray(self.translation)
        return Transformation(matrix=mat, translation=(float(shift[0]), float(shift[1])))

    def __matmul__(self, other: "Transformation") -> "Transformation":
        return self.compose(other)


def scaling(s: float) -> Transformation:
    return Transformation(matrix=((s, 0.0), (0.0, s)))


def scaling_x(s: float) -> Transformation:
    return Transformation(matrix=((s, 0.0), (0.0, 1.0)))


def scaling_y(s: float) -> Transformation:
    return Transformation(matrix=((1.0, 0.0), (0.0, s)))


def translation(offset: Sequence[float]) -> Transformation:
    return Transformation(translation=vec2(offset, "offset"))


def rotation(angle: Angle) -> Transformation:
    """Counterclockwise rotation about the origin, angle in radians."""
    c, s = math.cos(angle), math.sin(angle)
    return Transformation(matrix=((c, -s), (s, c)))


def rotation_by(frac: CircleFrac) -> Transformation:
    return rotation(frac_to_rad(frac))


class Transformable(Protocol):
    def transform(self, t: Transformation) -> "Transformable":
        ...


T = TypeVar("T", bound=Transformable)


def scale(obj: T, s: float) -> T:
    """Return a uniformly scaled copy of ``obj``."""
    return obj.transform(scaling(s))


def scale_x(obj: T, s: float) -> T:
    return obj.transform(scaling_x(s))


def scale_y(obj: T, s: float) -> T:
    return obj.transform(scaling_y(s))


def translate(obj: T, offset: Sequence[float]) -> T:
    """Return a translated copy of ``obj``."""
    return obj.transform(translation(offset))


def rotate(obj: T, angle: Angle) -> T:
    return obj.transform(rotation(angle))


def rotate_by(obj: T, frac: CircleFrac) -> T:
    return obj.transform(rotation_by(frac))


__all__ = [
    "IDENTITY",
    "Matrix2",
    "Transformable",
    "Transformation",
    "rotate",
    "rotate_by",
    "rotation",
    "rotation_by",
    "scale",
    "scale_x",
    "scale_y",
    "scaling",
    "scaling_x",
    "scaling_y",
    "translate",
    "translation",
]
