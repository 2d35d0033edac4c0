"""Crossed horizontal and vertical rules."""

from __future__ import annotations

from shapekit.twod import hrule, vrule


def build():
    return [hrule(4.0), vrule(4.0)]
