from __future__ import annotations

import itertools
import math

import numpy as np
import pytest

from shapekit.twod import (
    Arc,
    Linear,
    LocatedTrail,
    P2,
    Path,
    Trail,
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
from tests.helpers import exterior_turns, offsets_of


@pytest.mark.parametrize("d", [4.0, 1.0, 0.0, -3.0])
def test_hrule_single_centered_segment(d):
    rule = hrule(d, kind=LocatedTrail)
    assert not rule.closed
    assert rule.start == P2(-d / 2, 0.0)
    assert rule.segments == (Linear((d, 0.0)),)


def test_vrule_runs_top_to_bottom():
    rule = vrule(2.0, kind=LocatedTrail)
    assert not rule.closed
    assert len(rule.segments) == 1
    assert np.allclose(rule.vertices(), [[0.0, 1.0], [0.0, -1.0]])


def test_rules_default_to_path():
    path = hrule(3.0)
    assert isinstance(path, Path)
    assert len(path.trails) == 1
    assert isinstance(hrule(3.0, kind=Trail), Trail)


def test_unit_square_vertices():
    sq = unit_square(kind=LocatedTrail)
    assert sq.closed
    assert all(isinstance(seg, Linear) for seg in sq.segments)
    expected = [[0.5, -0.5], [0.5, 0.5], [-0.5, 0.5], [-0.5, -0.5]]
    assert np.allclose(sq.vertices(), expected, atol=1e-12)


def test_square_matches_scaled_unit_square():
    unit = unit_square(kind=LocatedTrail).vertices()
    assert np.allclose(square(1.0, kind=LocatedTrail).vertices(), unit)
    assert np.allclose(square(3.5, kind=LocatedTrail).vertices(), unit * 3.5)


@pytest.mark.parametrize("w,h", [(4.0, 2.0), (1.0, 7.5), (-4.0, 2.0), (3.0, -1.0)])
def test_rect_extent_and_center(w, h):
    outline = rect(w, h, kind=LocatedTrail)
    pts = outline.vertices()
    assert pts.shape == (4, 2)
    assert np.allclose(np.ptp(pts, axis=0), [abs(w), abs(h)])
    assert np.allclose(pts.mean(axis=0), [0.0, 0.0], atol=1e-12)
    assert np.allclose(np.sort(np.abs(pts[:, 0])), [abs(w) / 2] * 4)
    assert np.allclose(np.sort(np.abs(pts[:, 1])), [abs(h) / 2] * 4)


def test_rect_traversal_order():
    pts = rect(4.0, 2.0, kind=LocatedTrail).vertices()
    assert np.allclose(pts, [[2.0, -1.0], [2.0, 1.0], [-2.0, 1.0], [-2.0, -1.0]])


@pytest.mark.parametrize("n", [3, 5, 6, 7, 8, 9, 10, 11, 12])
def test_reg_poly_sides_and_turns(n):
    outline = reg_poly(n, 1.5, kind=LocatedTrail)
    assert outline.closed
    assert len(outline.segments) == n
    assert all(isinstance(seg, Linear) for seg in outline.segments)
    offsets = offsets_of(outline)
    assert np.allclose(np.linalg.norm(offsets, axis=1), 1.5)
    assert np.allclose(offsets.sum(axis=0), [0.0, 0.0], atol=1e-9)
    turns = exterior_turns(offsets)
    assert np.allclose(turns, 2 * math.pi / n)
    assert math.isclose(turns.sum() / (2 * math.pi), 1.0)


@pytest.mark.parametrize("n", [3, 4, 5, 6, 9, 12])
def test_reg_poly_flat_base_and_centered(n):
    pts = reg_poly(n, 2.0, kind=LocatedTrail).vertices()
    ys = np.sort(pts[:, 1])
    assert math.isclose(ys[0], ys[1], abs_tol=1e-9)
    assert ys[2] > ys[1] + 1e-6
    assert np.allclose(pts.mean(axis=0), [0.0, 0.0], atol=1e-9)


def test_reg_poly_first_edge_along_x():
    outline = reg_poly(5, 1.0, kind=LocatedTrail)
    assert np.allclose(outline.segments[0].offset, (1.0, 0.0))


@pytest.mark.parametrize(
    "alias,n",
    [
        (eq_triangle, 3),
        (pentagon, 5),
        (hexagon, 6),
        (septagon, 7),
        (octagon, 8),
        (nonagon, 9),
        (decagon, 10),
        (hendecagon, 11),
        (dodecagon, 12),
    ],
)
def test_polygon_aliases(alias, n):
    assert alias(2.0) == reg_poly(n, 2.0)
    assert alias(2.0, kind=Trail) == reg_poly(n, 2.0, kind=Trail)


def test_reg_poly_degenerate_counts_do_not_raise():
    assert reg_poly(0, 1.0, kind=LocatedTrail).vertices().shape == (1, 2)
    pts = reg_poly(2, 1.0, kind=LocatedTrail).vertices()
    assert np.allclose(pts, [[-0.5, 0.0], [0.5, 0.0]])


@pytest.mark.parametrize("r", [0.0, -1.0, -100.0])
def test_rounded_rect_without_radius_is_rect(r):
    rounded = rounded_rect((10.0, 6.0), r, kind=LocatedTrail)
    assert not any(isinstance(seg, Arc) for seg in rounded.segments)
    assert len(rounded.segments) == 4
    assert np.allclose(rounded.vertices(), rect(10.0, 6.0, kind=LocatedTrail).vertices())


@pytest.mark.parametrize("r", [3.0, 3.5, 50.0])
def test_rounded_rect_clamps_large_radius(r):
    assert rounded_rect((10.0, 6.0), r) == rounded_rect((10.0, 6.0), 3.0)


def test_rounded_rect_worked_example():
    outline = rounded_rect((10.0, 6.0), 2.0, kind=LocatedTrail)
    assert outline.closed
    assert outline.start == P2(5.0, -1.0)
    lines = [seg for seg in outline.segments if isinstance(seg, Linear)]
    arcs = [seg for seg in outline.segments if isinstance(seg, Arc)]
    assert len(lines) == 4
    assert len(arcs) == 4
    assert all(math.isclose(a.radius, 2.0) for a in arcs)
    assert math.isclose(sum(a.sweep for a in arcs), 1.0)
    assert [type(seg) for seg in outline.segments] == [Linear, Arc] * 4
    expected = [
        [5.0, -1.0],
        [5.0, 1.0],
        [3.0, 3.0],
        [-3.0, 3.0],
        [-5.0, 1.0],
        [-5.0, -1.0],
        [-3.0, -3.0],
        [3.0, -3.0],
    ]
    assert np.allclose(outline.vertices(), expected)


def test_rounded_rect_samples_stay_inside_bounds():
    pts = rounded_rect((10.0, 6.0), 2.0, kind=LocatedTrail).sample(segments_per_circle=32)
    assert np.allclose(pts[0], pts[-1])
    assert np.all(np.abs(pts[:, 0]) <= 5.0 + 1e-9)
    assert np.all(np.abs(pts[:, 1]) <= 3.0 + 1e-9)
    # corner points lie on the corner circles
    corner = pts[(pts[:, 0] > 3.0 + 1e-9) & (pts[:, 1] > 1.0 + 1e-9)]
    assert corner.shape[0] > 0
    assert np.allclose(np.linalg.norm(corner - [3.0, 1.0], axis=1), 2.0)


def test_rounded_rect_square_becomes_circle():
    outline = rounded_rect((4.0, 4.0), 10.0, kind=LocatedTrail)
    pts = outline.sample(segments_per_circle=64)
    assert np.allclose(np.linalg.norm(pts, axis=1), 2.0)


def test_clamp_cases():
    assert clamp(5, 0, 3) == 3
    assert clamp(-1, 0, 3) == 0
    assert clamp(2, 0, 3) == 2
    assert clamp("m", "a", "k") == "k"


def test_clamp_inverted_bounds_follow_comparisons():
    assert clamp(1, 2, 0) == 2
    assert clamp(3, 2, 0) == 0


def test_clamp_stays_within_bounds():
    values = [-2.0, -0.5, 0.0, 0.25, 1.0, 3.0]
    for x, lo, hi in itertools.product(values, repeat=3):
        if lo > hi:
            continue
        result = clamp(x, lo, hi)
        assert lo <= result <= hi
        assert (result == x) == (lo <= x <= hi)


@pytest.mark.parametrize(
    "build",
    [
        lambda: hrule(3.0),
        lambda: vrule(3.0),
        lambda: unit_square(),
        lambda: rect(2.0, 5.0),
        lambda: reg_poly(7, 1.25),
        lambda: rounded_rect((8.0, 5.0), 1.5),
    ],
)
def test_constructors_are_pure(build):
    assert build() == build()
