"""Regular hexagon with a flat base."""

from __future__ import annotations

from shapekit.twod import hexagon


def build():
    return hexagon(1.0)
