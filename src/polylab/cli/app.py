"""CLI application entry point for polylab.

This module provides the main CLI interface using Typer.
"""

import random
import time
from dataclasses import dataclass
from pathlib import Path
from typing import Annotated

import typer

from polylab import __version__
from polylab.cli.output import (
    console,
    print_error,
    print_header,
    print_properties,
    print_saved,
    print_solution,
    print_step,
    print_summary,
)
from polylab.config import CanvasConfig, LoggingConfig, LogLevel, PolylabSettings
from polylab.core import SceneRenderer, Surface, compute_properties, randomize, solve_side_length
from polylab.domain import MIN_SIDES, ArtComposition, PolygonProperties, QuantityKind, known_quantity
from polylab.exceptions import ImageSaveError, PolylabError
from polylab.io import SurfaceWriter
from polylab.utils import RenderLogger, configure_logging

SCENES = ("intro", "explorer")

# Create the Typer app
app = typer.Typer(
    name="polylab",
    help="Compute, solve and draw regular polygons.",
    add_completion=False,
    no_args_is_help=True,
)


@dataclass
class AppState:
    """Per-invocation state shared by the commands."""

    settings: PolylabSettings
    render_logger: RenderLogger
    quiet: bool = False


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        console.print(f"[bold blue]Polylab[/bold blue] v{__version__}")
        raise typer.Exit()


@app.callback()
def main_callback(
    ctx: typer.Context,
    log_file: Annotated[
        Path | None,
        typer.Option(
            "--log-file",
            help="Write detailed logs to file",
        ),
    ] = None,
    log_level: Annotated[
        LogLevel,
        typer.Option(
            "--log-level",
            help="Console logging level",
            case_sensitive=False,
        ),
    ] = LogLevel.WARNING,
    quiet: Annotated[
        bool,
        typer.Option(
            "--quiet",
            "-q",
            help="Minimal console output",
        ),
    ] = False,
    _version: Annotated[  # noqa: ARG001
        bool | None,
        typer.Option(
            "--version",
            "-V",
            help="Show version and exit",
            callback=version_callback,
            is_eager=True,
        ),
    ] = None,
) -> None:
    """Compute, solve and draw regular polygons."""
    settings = PolylabSettings(
        logging=LoggingConfig(log_file=log_file, log_level=log_level),
    )
    logger = configure_logging(
        log_file=settings.logging.log_file,
        console_level=settings.logging.log_level.value,
        file_level=settings.logging.file_log_level.value,
        quiet=quiet,
    )
    ctx.obj = AppState(settings=settings, render_logger=RenderLogger(logger), quiet=quiet)


@app.command()
def properties(
    sides: Annotated[int, typer.Argument(help="Number of sides", show_default=False)],
    side_length: Annotated[
        float,
        typer.Option("--side-length", "-l", help="Length of each side"),
    ] = 1.0,
) -> None:
    """Show the angles, perimeter, area and apothem of a regular polygon.

    Example:
        polylab properties 6 --side-length 2
    """
    props = _properties_or_exit(sides, side_length)
    print_properties(props)


@app.command()
def solve(
    ctx: typer.Context,
    sides: Annotated[int, typer.Argument(help="Number of sides", show_default=False)],
    value: Annotated[float, typer.Argument(help="The known value", show_default=False)],
    known: Annotated[
        str,
        typer.Option(
            "--from",
            "-f",
            help="Which quantity VALUE is (side|perimeter|area|apothem)",
        ),
    ] = "side",
    output: Annotated[
        Path | None,
        typer.Option("--output", "-o", help="Also draw the polygon to this image"),
    ] = None,
) -> None:
    """Solve the side length from a known quantity and show the properties.

    Example:
        polylab solve 5 --from area 6.8819
    """
    state: AppState = ctx.obj

    try:
        quantity = known_quantity(known.lower(), value)
    except ValueError:
        print_error(
            f"Invalid quantity: {known}",
            details="Valid values: " + ", ".join(k.value for k in QuantityKind),
        )
        raise typer.Exit(code=1)

    _check_sides(sides)

    try:
        side_length = solve_side_length(sides, quantity)
    except ValueError as e:
        print_error(f"Cannot solve from {known} {value}", details=str(e))
        raise typer.Exit(code=1)

    props = _properties_or_exit(sides, side_length)

    if not state.quiet:
        print_step("Solving side length")
        print_solution(QuantityKind(known.lower()).value, value, side_length)
    print_properties(props)

    if output is not None:
        scenes = _scene_renderer(state.settings)
        surface = _new_surface(state.settings.canvas)
        started = time.perf_counter()
        scenes.render_calculator(surface, sides, quantity)
        state.render_logger.log_scene_rendered(
            "calculator", sides, (time.perf_counter() - started) * 1000
        )
        _save(state, surface, output)


@app.command()
def draw(
    ctx: typer.Context,
    sides: Annotated[int, typer.Argument(help="Number of sides", show_default=False)],
    side_length: Annotated[
        float,
        typer.Option("--side-length", "-l", help="Side length (explorer scene)"),
    ] = 1.0,
    scene: Annotated[
        str,
        typer.Option("--scene", "-s", help="Scene to draw (intro|explorer)"),
    ] = "intro",
    size: Annotated[
        int,
        typer.Option("--size", help="Canvas width and height in pixels", min=50, max=4096),
    ] = 400,
    background: Annotated[
        str | None,
        typer.Option("--background", "-b", help="Background colour (default: transparent)"),
    ] = None,
    output: Annotated[
        Path | None,
        typer.Option("--output", "-o", help="Output path (default: {name}-{scene}.png)"),
    ] = None,
) -> None:
    """Draw a regular polygon with labelled vertices to an image.

    Example:
        polylab draw 6 --scene explorer --side-length 1.5 -o hexagon.png
    """
    state: AppState = ctx.obj

    if scene not in SCENES:
        print_error(f"Invalid scene: {scene}", details="Valid values: " + ", ".join(SCENES))
        raise typer.Exit(code=1)

    _properties_or_exit(sides, side_length)

    if not state.quiet:
        print_header(__version__)
        print_step(f"Drawing {scene} scene")

    canvas = state.settings.canvas.model_copy(update={"width": size, "height": size})
    scenes = _scene_renderer(state.settings)
    surface = _new_surface(canvas)

    started = time.perf_counter()
    if scene == "intro":
        props = scenes.render_intro(surface, sides)
    else:
        props = scenes.render_explorer(surface, sides, side_length)
    state.render_logger.log_scene_rendered(scene, sides, (time.perf_counter() - started) * 1000)

    if not state.quiet:
        print_properties(props)

    _save(state, surface, output or SurfaceWriter.get_default_path(sides, scene), background)


@app.command()
def art(
    ctx: typer.Context,
    count: Annotated[
        int,
        typer.Option("--count", "-n", help="Number of polygons", min=1, max=5),
    ] = 3,
    seed: Annotated[
        int | None,
        typer.Option("--seed", help="Random seed for repeatable art"),
    ] = None,
    size: Annotated[
        int,
        typer.Option("--size", help="Canvas width and height in pixels", min=50, max=4096),
    ] = 500,
    background: Annotated[
        str | None,
        typer.Option("--background", "-b", help="Background colour (default: transparent)"),
    ] = None,
    output: Annotated[
        Path,
        typer.Option("--output", "-o", help="Output path"),
    ] = Path("polygon-art.png"),
) -> None:
    """Create random polygon art from overlapping regular polygons.

    Example:
        polylab art --count 4 --seed 7 -o art.png
    """
    state: AppState = ctx.obj
    art_config = state.settings.art

    composition = ArtComposition(palette=tuple(art_config.palette))
    composition.resize(count, default_sides=art_config.default_sides)
    randomize(composition, random.Random(seed), art_config)

    if not state.quiet:
        print_header(__version__)
        print_step(f"Composing {count} polygons")
        for polygon in composition:
            console.print(
                f"  {polygon.sides} sides · size {polygon.size:.1f} · "
                f"rotation {polygon.rotation:.0f}° · {polygon.color}"
            )

    canvas = state.settings.canvas.model_copy(update={"width": size, "height": size})
    scenes = _scene_renderer(state.settings)
    surface = _new_surface(canvas)

    started = time.perf_counter()
    scenes.render_art(surface, composition)
    state.render_logger.log_scene_rendered(
        "art", len(composition), (time.perf_counter() - started) * 1000
    )

    _save(state, surface, output, background)


def _check_sides(sides: int) -> None:
    """Exit with an error when the side count does not describe a polygon."""
    if sides < MIN_SIDES:
        print_error(
            f"Not a polygon: {sides} sides",
            details=f"A polygon needs at least {MIN_SIDES} sides.",
        )
        raise typer.Exit(code=1)


def _properties_or_exit(sides: int, side_length: float) -> PolygonProperties:
    """Compute properties, exiting with an error for fewer than three sides."""
    props = compute_properties(sides, side_length)
    if props is None:
        _check_sides(sides)
        raise typer.Exit(code=1)
    return props


def _scene_renderer(settings: PolylabSettings) -> SceneRenderer:
    return SceneRenderer(render=settings.render, canvas=settings.canvas, art=settings.art)


def _new_surface(canvas: CanvasConfig) -> Surface:
    return Surface(canvas.width, canvas.height)


def _save(
    state: AppState,
    surface: Surface,
    output: Path,
    background: str | None = None,
) -> None:
    """Write the surface, reporting failures as CLI errors."""
    try:
        writer = SurfaceWriter(background=background)
        path = writer.save(surface, output)
    except ImageSaveError as e:
        state.render_logger.log_error(str(output), e)
        print_error(f"Could not save image: {e.reason}")
        raise typer.Exit(code=1)
    except PolylabError as e:
        state.render_logger.log_error(str(output), e)
        print_error(str(e))
        raise typer.Exit(code=1)

    state.render_logger.log_image_saved(path, surface.width, surface.height)
    stats = state.render_logger.finish()
    if not state.quiet:
        print_saved(str(path), surface.width, surface.height)
        print_summary(stats)


def cli() -> None:
    """Entry point for the CLI application."""
    app()


def main() -> None:
    """Entry point for the CLI application (alias for cli)."""
    cli()


if __name__ == "__main__":
    cli()
