"""Every fixed-count regular polygon, laid out on a row."""

from __future__ import annotations

from shapekit.twod import (
    decagon,
    dodecagon,
    eq_triangle,
    hendecagon,
    hexagon,
    nonagon,
    octagon,
    pentagon,
    septagon,
    translate,
)


def build():
    makers = [eq_triangle, pentagon, hexagon, septagon, octagon, nonagon, decagon, hendecagon, dodecagon]
    return [translate(make(1.0), (4.0 * i, 0.0)) for i, make in enumerate(makers)]
