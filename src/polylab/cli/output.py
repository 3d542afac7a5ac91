"""Rich console output helpers for the CLI.

This module provides user-friendly console output using Rich library
with property tables and formatted messages.
"""

from rich.console import Console
from rich.table import Table
from rich.text import Text

from polylab.core.geometry import polygon_name
from polylab.domain import PolygonProperties
from polylab.utils import RenderStats

console = Console()

# Unicode symbols for consistent visual language
SYM_STEP = "▸"  # Step indicator
SYM_OK = "✓"  # Success
SYM_ERR = "✗"  # Error
SYM_DOT = "·"  # Separator/secondary info
SYM_DEG = "°"


def format_angle(degrees: float, precision: int = 2) -> str:
    """Format an angle in degrees for display."""
    return f"{degrees:.{precision}f}{SYM_DEG}"


def format_length(value: float, precision: int = 3) -> str:
    """Format a length, area or other scalar for display."""
    return f"{value:.{precision}f}"


def print_header(version: str) -> None:
    """Print application header.

    Args:
        version: Application version string
    """
    console.print(f"\n[bold]Polylab[/bold] v{version}")
    console.print("─" * 44)


def print_step(message: str) -> None:
    """Print a processing step indicator.

    Args:
        message: Step description message
    """
    console.print(f"\n{SYM_STEP} {message}")


def build_properties_table(props: PolygonProperties) -> Table:
    """Build a two-column table of polygon properties.

    Args:
        props: Properties to show

    Returns:
        Rich table ready for printing
    """
    table = Table(
        title=f"Regular {polygon_name(props.side_count)}",
        show_header=False,
        box=None,
        padding=(0, 2),
    )
    table.add_column("Property", style="bold")
    table.add_column("Value", justify="right")

    table.add_row("Sides", str(props.side_count))
    table.add_row("Side length", format_length(props.side_length))
    table.add_row("Interior angle", format_angle(props.interior_angle))
    table.add_row("Exterior angle", format_angle(props.exterior_angle))
    table.add_row("Central angle", format_angle(props.central_angle))
    table.add_row("Sum of interior angles", format_angle(props.interior_angle_sum, 0))
    table.add_row("Perimeter", format_length(props.perimeter))
    table.add_row("Area", format_length(props.area))
    table.add_row("Apothem", format_length(props.apothem))
    table.add_row("Circumradius", format_length(props.circumradius))
    return table


def print_properties(props: PolygonProperties) -> None:
    """Print polygon properties as a table."""
    console.print(build_properties_table(props))


def print_solution(kind: str, value: float, side_length: float) -> None:
    """Print the side length solved from a known quantity.

    Args:
        kind: Name of the known quantity
        value: The known value
        side_length: Solved side length
    """
    console.print(
        f"  {kind} {format_length(value)} {SYM_DOT} "
        f"side length [bold]{format_length(side_length)}[/bold]"
    )


def print_saved(output_path: str, width: int, height: int) -> None:
    """Print confirmation that an image was written.

    Args:
        output_path: Path to output file
        width: Image width in pixels
        height: Image height in pixels
    """
    line = Text(f"\n{SYM_OK} Saved ", style="bold green")
    line.append(output_path, style="bold")
    line.append(f" ({width}×{height})")
    console.print(line)


def _format_time(seconds: float) -> str:
    """Format seconds into human-readable time string."""
    if seconds < 1:
        return f"{seconds * 1000:.0f}ms"
    return f"{seconds:.1f}s"


def print_summary(stats: RenderStats) -> None:
    """Print the counters collected over one CLI run.

    Args:
        stats: Finished render statistics
    """
    console.print(
        f"\n[bold green]{SYM_OK} Complete[/bold green] in {_format_time(stats.duration_seconds)}"
    )
    error_style = "red" if stats.error_count > 0 else "green"
    console.print(
        f"  {stats.rendered_count} rendered {SYM_DOT} {stats.saved_count} saved {SYM_DOT} "
        f"[{error_style}]{stats.error_count} errors[/{error_style}]"
    )


def print_error(message: str, details: str | None = None) -> None:
    """Print error message.

    Args:
        message: Main error message
        details: Optional detailed error information
    """
    console.print(f"\n[bold red]{SYM_ERR} Error:[/bold red] {message}")
    if details:
        console.print(f"  {details}")
