"""Two-dimensional outlines: points, segments, trails and shape constructors."""

from __future__ import annotations

from .types import P2, R2, Angle, CircleFrac, frac_to_rad, rad_to_frac, unit_x, unit_y, vec2
from .transform import (
    Transformation,
    rotate,
    rotate_by,
    rotation,
    rotation_by,
    scale,
    scale_x,
    scale_y,
    scaling,
    scaling_x,
    scaling_y,
    translate,
    translation,
)
from .segment import Arc, Linear, Segment
from .path import LocatedTrail, Path, PathLike, Trail, path_like, to_located_trail, to_path, to_trail
from .arc import arc, circle
from .polygons import PolygonOpts, PolyOrientation, PolyPolar, PolyRegular, PolySides, polygon, polygon_vertices
from .shapes import (
    clamp,
    decagon,
    dodecagon,
    eq_triangle,
    hendecagon,
    hexagon,
    hrule,
    nonagon,
    octagon,
    pentagon,
    rect,
    reg_poly,
    rounded_rect,
    septagon,
    square,
    unit_square,
    vrule,
)

__all__ = [
    "Angle",
    "Arc",
    "CircleFrac",
    "Linear",
    "LocatedTrail",
    "P2",
    "Path",
    "PathLike",
    "PolyOrientation",
    "PolyPolar",
    "PolyRegular",
    "PolySides",
    "PolygonOpts",
    "R2",
    "Segment",
    "Trail",
    "Transformation",
    "arc",
    "circle",
    "clamp",
    "decagon",
    "dodecagon",
    "eq_triangle",
    "frac_to_rad",
    "hendecagon",
    "hexagon",
    "hrule",
    "nonagon",
    "octagon",
    "path_like",
    "pentagon",
    "polygon",
    "polygon_vertices",
    "rad_to_frac",
    "rect",
    "reg_poly",
    "rotate",
    "rotate_by",
    "rotation",
    "rotation_by",
    "rounded_rect",
    "scale",
    "scale_x",
    "scale_y",
    "scaling",
    "scaling_x",
    "scaling_y",
    "septagon",
    "square",
    "to_located_trail",
    "to_path",
    "to_trail",
    "translate",
    "translation",
    "unit_square",
    "unit_x",
    "unit_y",
    "vec2",
    "vrule",
]
