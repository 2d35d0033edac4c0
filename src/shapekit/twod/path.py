from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, List, Sequence, Tuple, Type, TypeVar, Union

import numpy as np
import pyvista as pv

from shapekit._config import get_sampling_settings

from .segment import Linear, Segment
from .transform import Transformation
from .types import P2, R2


def _resolve_sampling(segments_per_circle: int | None, tolerance: float | None) -> tuple[int, float]:
    if segments_per_circle is not None and tolerance is not None:
        return int(segments_per_circle), float(tolerance)
    settings = get_sampling_settings()
    spc = settings.segments_per_circle if segments_per_circle is None else int(segments_per_circle)
    tol = settings.tolerance if tolerance is None else float(tolerance)
    return spc, tol


def _check_segments(segments: Iterable[Segment]) -> Tuple[Segment, ...]:
    segs = tuple(segments)
    for seg in segs:
        if not hasattr(seg, "offset") or not hasattr(seg, "sample"):
            raise ValueError(f"{seg!r} is not a segment.")
    return segs


@dataclass(frozen=True)
class Trail:
    """A position-free sequence of segments, optionally closed."""

    segments: Tuple[Segment, ...] = ()
    closed: bool = False

    def __post_init__(self) -> None:
        object.__setattr__(self, "segments", _check_segments(self.segments))
        object.__setattr__(self, "closed", bool(self.closed))

    @classmethod
    def from_parts(cls, start: P2, closed: bool, segments: Iterable[Segment]) -> "Trail":
        return cls(segments=tuple(segments), closed=closed)

    @classmethod
    def from_offsets(cls, offsets: Iterable[Sequence[float]], closed: bool = False) -> "Trail":
        return cls(segments=tuple(Linear(o) for o in offsets), closed=closed)

    def offsets(self) -> List[R2]:
        return [seg.offset for seg in self.segments]

    def transform(self, t: Transformation) -> "Trail":
        return Trail(tuple(seg.transform(t) for seg in self.segments), self.closed)

    def at(self, location: P2) -> "LocatedTrail":
        return LocatedTrail(self, location)

    def vertices(self, origin: P2 | None = None, tolerance: float | None = None) -> np.ndarray:
        """Return the join points of the trail when it starts at ``origin``.

        A closed trail whose last segment returns to the start does not
        repeat the start point.
        """

        start = P2.origin() if origin is None else origin
        pts = [start.as_array()]
        for seg in self.segments:
            pts.append(pts[-1] + np.asarray(seg.offset, dtype=float))
        arr = np.vstack(pts)
        if self.closed and arr.shape[0] > 1:
            tol = get_sampling_settings().tolerance if tolerance is None else float(tolerance)
            if np.allclose(arr[0], arr[-1], atol=tol):
                arr = arr[:-1]
        return arr

    def sample(
        self,
        origin: P2 | None = None,
        segments_per_circle: int | None = None,
        tolerance: float | None = None,
    ) -> np.ndarray:
        spc, tol = _resolve_sampling(segments_per_circle, tolerance)
        start = P2.origin() if origin is None else origin
        cursor = start.as_array()
        if not self.segments:
            return cursor.reshape(1, 2)
        points = []
        for idx, segment in enumerate(self.segments):
            seg_points = segment.sample(spc) + cursor
            if idx > 0 and seg_points.shape[0] > 0:
                seg_points = seg_points[1:]
            points.append(seg_points)
            cursor = cursor + np.asarray(segment.offset, dtype=float)
        pts = np.vstack(points)
        if self.closed and not np.allclose(pts[0], pts[-1], atol=tol):
            pts = np.vstack([pts, pts[0]])
        return pts


@dataclass(frozen=True)
class LocatedTrail:
    """A trail anchored at its start point."""

    trail: Trail
    location: P2

    @classmethod
    def from_parts(cls, start: P2, closed: bool, segments: Iterable[Segment]) -> "LocatedTrail":
        return cls(Trail(tuple(segments), closed), start)

    @property
    def segments(self) -> Tuple[Segment, ...]:
        return self.trail.segments

    @property
    def closed(self) -> bool:
        return self.trail.closed

    @property
    def start(self) -> P2:
        return self.location

    def transform(self, t: Transformation) -> "LocatedTrail":
        return LocatedTrail(self.trail.transform(t), t.apply_point(self.location))

    def vertices(self, tolerance: float | None = None) -> np.ndarray:
        return self.trail.vertices(self.location, tolerance=tolerance)

    def sample(self, segments_per_circle: int | None = None, tolerance: float | None = None) -> np.ndarray:
        return self.trail.sample(self.location, segments_per_circle=segments_per_circle, tolerance=tolerance)


@dataclass(frozen=True)
class Path:
    """A fillable collection of located trails."""

    trails: Tuple[LocatedTrail, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "trails", tuple(self.trails))

    @classmethod
    def from_parts(cls, start: P2, closed: bool, segments: Iterable[Segment]) -> "Path":
        return cls((LocatedTrail.from_parts(start, closed, segments),))

    @property
    def segments(self) -> Tuple[Segment, ...]:
        return tuple(seg for tr in self.trails for seg in tr.segments)

    @property
    def closed(self) -> bool:
        return bool(self.trails) and all(tr.closed for tr in self.trails)

    @property
    def start(self) -> P2 | None:
        return self.trails[0].location if self.trails else None

    def transform(self, t: Transformation) -> "Path":
        return Path(tuple(tr.transform(t) for tr in self.trails))

    def vertices(self, tolerance: float | None = None) -> list[np.ndarray]:
        return [tr.vertices(tolerance=tolerance) for tr in self.trails]

    def sample(self, segments_per_circle: int | None = None, tolerance: float | None = None) -> list[np.ndarray]:
        return [tr.sample(segments_per_circle=segments_per_circle, tolerance=tolerance) for tr in self.trails]

    def to_polydata(self, z: float = 0.0, segments_per_circle: int | None = None) -> pv.PolyData:
        """Lift each trail into a pyvista polyline lying in the plane ``z``."""

        loops = self.sample(segments_per_circle=segments_per_circle)
        if not loops:
            return pv.PolyData()
        points = []
        cells = []
        offset = 0
        for loop in loops:
            n_pts = loop.shape[0]
            points.append(np.column_stack([loop, np.full((n_pts, 1), float(z))]))
            cells.append(np.hstack(([n_pts], np.arange(offset, offset + n_pts))))
            offset += n_pts
        return pv.PolyData(np.vstack(points), lines=np.hstack(cells).astype(np.int64))


PathLike = Union[Trail, LocatedTrail, Path]
P = TypeVar("P", Trail, LocatedTrail, Path)


def path_like(start: P2, closed: bool, segments: Iterable[Segment], kind: Type[P] = Path) -> P:
    """Build the representation ``kind`` from a start point, closure flag and segments."""
    return kind.from_parts(start, closed, segments)


def _single_trail(path: Path) -> LocatedTrail:
    if len(path.trails) != 1:
        raise ValueError(f"Path has {len(path.trails)} trails; expected exactly one.")
    return path.trails[0]


def to_trail(value: PathLike) -> Trail:
    if isinstance(value, Trail):
        return value
    if isinstance(value, LocatedTrail):
        return value.trail
    return _single_trail(value).trail


def to_located_trail(value: PathLike, location: P2 | None = None) -> LocatedTrail:
    if isinstance(value, Trail):
        return value.at(P2.origin() if location is None else location)
    if isinstance(value, LocatedTrail):
        return value
    return _single_trail(value)


def to_path(value: PathLike) -> Path:
    if isinstance(value, Path):
        return value
    return Path((to_located_trail(value),))


__all__ = [
    "LocatedTrail",
    "Path",
    "PathLike",
    "Trail",
    "path_like",
    "to_located_trail",
    "to_path",
    "to_trail",
]
