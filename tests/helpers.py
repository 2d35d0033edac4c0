from __future__ import annotations

import numpy as np


def offsets_of(outline) -> np.ndarray:
    return np.asarray([seg.offset for seg in outline.segments], dtype=float)


def exterior_turns(offsets: np.ndarray) -> np.ndarray:
    """Signed heading change at each vertex of a closed polyline, in radians."""
    headings = np.arctan2(offsets[:, 1], offsets[:, 0])
    turns = np.roll(headings, -1) - headings
    return np.mod(turns + np.pi, 2 * np.pi) - np.pi
