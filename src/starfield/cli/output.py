"""
CLI Output Utilities

Rich console helpers shared by the starfield commands.
"""

from rich.console import Console


console = Console()
err_console = Console(stderr=True)

_use_unicode = console.is_terminal and not console.legacy_windows


def print_error(message: str) -> None:
    """Print error message in red."""
    err_console.print(f"[red]✗[/red] {message}", style="red")


def print_info(message: str) -> None:
    """Print info message in blue."""
    info_icon = "ℹ" if _use_unicode else "i"
    console.print(f"[blue]{info_icon}[/blue] {message}")


def format_ra(ra_hours: float) -> str:
    """
    Format Right Ascension for display.

    Args:
        ra_hours: RA in hours (0-24)

    Returns:
        Formatted string (e.g., "12h 30m 45.6s")
    """
    # Round before splitting so that 59.96s carries into the minutes
    total = round(ra_hours * 3600.0, 1)
    hours = int(total // 3600) % 24
    minutes = int(total % 3600 // 60)
    seconds = total % 60
    return f"{hours}h {minutes:02d}m {seconds:04.1f}s"


def format_dec(dec_degrees: float) -> str:
    """
    Format Declination (or any signed angle) for display.

    Args:
        dec_degrees: Angle in degrees

    Returns:
        Formatted string (e.g., "+45° 30' 15.2\"")
    """
    sign = "+" if dec_degrees >= 0 else "-"
    total = round(abs(dec_degrees) * 3600.0, 1)
    degrees = int(total // 3600)
    minutes = int(total % 3600 // 60)
    seconds = total % 60
    return f"{sign}{degrees}° {minutes:02d}' {seconds:04.1f}\""
