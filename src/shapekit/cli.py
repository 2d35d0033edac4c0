from __future__ import annotations

import importlib.util
import logging
import pathlib
import sys
import traceback
from dataclasses import dataclass
from types import ModuleType
from typing import Callable, List, Sequence

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.panel import Panel
from rich.table import Table

from shapekit._config import ensure_user_config, get_sampling_settings
from shapekit.twod import shapes
from shapekit.twod.path import LocatedTrail, Path, Trail, to_path
from shapekit.twod.segment import Arc

console = Console()
app = typer.Typer(help="Build 2D outlines and inspect their segments and vertices.")
logger = logging.getLogger("shapekit")

KINDS = {"trail": Trail, "located": LocatedTrail, "path": Path}


@dataclass(frozen=True)
class ShapeEntry:
    builder: Callable[..., object]
    params: tuple[str, ...]
    summary: str

    def build(self, args: Sequence[str], kind: type) -> object:
        if len(args) != len(self.params):
            raise ValueError(f"expected {len(self.params)} argument(s) ({', '.join(self.params) or 'none'}), got {len(args)}.")
        values: list[object] = []
        for name, raw in zip(self.params, args):
            values.append(int(raw) if name == "n" else float(raw))
        return self.builder(*values, kind=kind)


def _rounded_rect(w: float, h: float, r: float, kind: type = Path) -> object:
    return shapes.rounded_rect((w, h), r, kind=kind)


SHAPES = {
    "hrule": ShapeEntry(shapes.hrule, ("d",), "centered horizontal line"),
    "vrule": ShapeEntry(shapes.vrule, ("d",), "centered vertical line"),
    "unit-square": ShapeEntry(shapes.unit_square, (), "square with unit sides"),
    "square": ShapeEntry(shapes.square, ("d",), "square with sides of length d"),
    "rect": ShapeEntry(shapes.rect, ("w", "h"), "axis-aligned w x h rectangle"),
    "reg-poly": ShapeEntry(shapes.reg_poly, ("n", "l"), "regular n-gon with sides of length l"),
    "eq-triangle": ShapeEntry(shapes.eq_triangle, ("l",), "equilateral triangle"),
    "pentagon": ShapeEntry(shapes.pentagon, ("l",), "regular pentagon"),
    "hexagon": ShapeEntry(shapes.hexagon, ("l",), "regular hexagon"),
    "septagon": ShapeEntry(shapes.septagon, ("l",), "regular septagon"),
    "octagon": ShapeEntry(shapes.octagon, ("l",), "regular octagon"),
    "nonagon": ShapeEntry(shapes.nonagon, ("l",), "regular nonagon"),
    "decagon": ShapeEntry(shapes.decagon, ("l",), "regular decagon"),
    "hendecagon": ShapeEntry(shapes.hendecagon, ("l",), "regular hendecagon"),
    "dodecagon": ShapeEntry(shapes.dodecagon, ("l",), "regular dodecagon"),
    "rounded-rect": ShapeEntry(_rounded_rect, ("w", "h", "r"), "rectangle with rounded corners"),
}


class ModelBuildError(RuntimeError):
    """Raised when a model module cannot provide usable outlines."""


def _format_exception(exc: BaseException) -> str:
    return "".join(traceback.format_exception(exc))


def _load_module(path: pathlib.Path) -> ModuleType:
    module_name = "shapekit_user_model"
    if module_name in sys.modules:
        del sys.modules[module_name]

    spec = importlib.util.spec_from_file_location(module_name, path)
    if spec is None or spec.loader is None:
        raise typer.BadParameter(f"Unable to import model at {path}")

    module = importlib.util.module_from_spec(spec)
    # Register module so features relying on sys.modules (e.g., dataclasses) work.
    sys.modules[module_name] = module
    spec.loader.exec_module(module)
    return module


def _build_model(model_path: pathlib.Path) -> List[object]:
    module = _load_module(model_path)
    builder = getattr(module, "build", None)
    if builder is None or not callable(builder):
        raise ModelBuildError(f"{model_path} must define a callable build() function.")
    result = builder()
    items = list(result) if isinstance(result, (list, tuple)) else [result]
    for item in items:
        if not isinstance(item, (Trail, LocatedTrail, Path)):
            raise ModelBuildError(f"build() returned {type(item).__name__}, expected a Trail, LocatedTrail or Path.")
    return items


def _segment_label(segment: object) -> str:
    if isinstance(segment, Arc):
        return f"arc {segment.start:g}->{segment.end:g} turn, r={segment.radius:g}"
    dx, dy = segment.offset
    return f"line ({dx:.6g}, {dy:.6g})"


def _describe(title: str, value: object, samples: bool) -> None:
    if isinstance(value, Trail):
        label = "trail"
    elif isinstance(value, LocatedTrail):
        label = "located trail"
    else:
        label = "path"
    path = to_path(value)

    for index, located in enumerate(path.trails):
        table = Table(title=f"{title} ({label}, {'closed' if located.closed else 'open'})")
        table.add_column("#", justify="right")
        table.add_column("segment")
        table.add_column("from", justify="right")
        vertices = located.vertices()
        for i, segment in enumerate(located.segments):
            if i < vertices.shape[0]:
                x, y = vertices[i]
                start = f"({x:.6g}, {y:.6g})"
            else:
                start = "-"
            table.add_row(str(i), _segment_label(segment), start)
        console.print(table)
        if samples:
            settings = get_sampling_settings()
            pts = located.sample(segments_per_circle=settings.segments_per_circle)
            console.print(
                f"[cyan]Trail {index}: {pts.shape[0]} sampled points at {settings.segments_per_circle} segments per circle.[/cyan]"
            )


@app.callback()
def main(verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging.")) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=console, show_path=False)],
    )
    ensure_user_config()


@app.command("shapes")
def list_shapes() -> None:
    """
    List the available shape constructors and their arguments.
    """

    table = Table(title="Shapes")
    table.add_column("name", style="green")
    table.add_column("arguments")
    table.add_column("description")
    for name, entry in SHAPES.items():
        table.add_row(name, " ".join(entry.params) or "-", entry.summary)
    console.print(table)


@app.command()
def describe(
    shape: str = typer.Argument(..., help="Shape name, see `shapekit shapes`."),
    args: List[str] = typer.Argument(None, help="Numeric shape arguments."),
    kind: str = typer.Option("path", "--kind", "-k", help="Result kind: trail, located or path."),
    samples: bool = typer.Option(False, "--samples", help="Also report the sampled point count."),
) -> None:
    """
    Build a shape and print its segments and vertices.
    """

    entry = SHAPES.get(shape)
    if entry is None:
        raise typer.BadParameter(f"Unknown shape '{shape}'. Run `shapekit shapes` for the list.")
    result_kind = KINDS.get(kind.lower())
    if result_kind is None:
        raise typer.BadParameter(f"Unknown kind '{kind}'. Choose from: {', '.join(KINDS)}.")
    try:
        value = entry.build(args or [], result_kind)
    except ValueError as exc:
        raise typer.BadParameter(f"{shape}: {exc}") from exc
    logger.debug("built %s with %d segment(s)", shape, len(value.segments))
    _describe(shape, value, samples)


@app.command()
def inspect(
    model: pathlib.Path = typer.Argument(..., help="Python module defining build() that returns outlines."),
    samples: bool = typer.Option(False, "--samples", help="Also report the sampled point count."),
) -> None:
    """
    Load a model module, call build(), and describe every outline it returns.
    """

    if not model.exists():
        raise typer.BadParameter(f"Model path {model} does not exist.")

    try:
        items = _build_model(model)
    except ModelBuildError as exc:
        raise typer.BadParameter(str(exc)) from exc
    except Exception as exc:
        console.print(Panel.fit(_format_exception(exc), title="Model build failed", style="red"))
        raise typer.BadParameter(f"Model execution failed: {exc}") from exc

    console.rule("shapekit")
    console.print(f"Using model [green]{model}[/green]")
    for idx, item in enumerate(items):
        _describe(f"{model.stem} #{idx}", item, samples)
