"""Rounded rectangle next to the plain rectangle it degenerates to."""

from __future__ import annotations

from shapekit.twod import LocatedTrail, rect, rounded_rect, translate


def build():
    card = rounded_rect((10.0, 6.0), 2.0, kind=LocatedTrail)
    plain = translate(rect(10.0, 6.0, kind=LocatedTrail), (12.0, 0.0))
    return [card, plain]
