"""
Starfield CLI - Main Application

Compute the sky for a given instant and place from the command line.
"""

import logging
from dataclasses import replace
from datetime import UTC, datetime
from pathlib import Path

import typer
from dotenv import load_dotenv
from rich.logging import RichHandler
from rich.table import Table

from starfield.api.astronomy import sidereal_time
from starfield.api.catalogs.satellites import SatelliteCatalogue
from starfield.api.config import SkyConfig, load_config, load_satellite_catalogue, load_star_catalogue
from starfield.api.coordinates.conversions import EquatorialToHorizontalConversion
from starfield.api.coordinates.types import HorizontalCoordinates
from starfield.api.core.exceptions import StarfieldError
from starfield.api.math import angle
from starfield.api.observed_sky import ObservedSky
from starfield.cli.output import console, format_dec, format_ra, print_error, print_info


app = typer.Typer(
    name="starfield",
    help="Apparent positions of the Sun, Moon, planets and stars",
    add_completion=False,
    rich_markup_mode="rich",
)

# Global state for CLI
state: dict[str, Path | None | bool] = {
    "config": None,
    "verbose": False,
}


@app.callback()
def main(
    config: Path | None = typer.Option(
        None,
        "--config",
        "-c",
        help="YAML configuration file",
        envvar="STARFIELD_CONFIG",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Enable debug logging",
    ),
) -> None:
    """
    Starfield sky calculator

    [bold green]Examples:[/bold green]

        starfield sky --when 2020-04-17T21:00:00+02:00
        starfield closest --az 120 --alt 35
        starfield sidereal --lon 6.57

    [bold blue]Environment Variables:[/bold blue]

        STARFIELD_CONFIG   - Default configuration file
        STARFIELD_LON_DEG  - Observer longitude (also LAT_DEG, CENTER_AZ_DEG, ...)
    """
    state["config"] = config
    state["verbose"] = verbose

    load_dotenv()

    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=console, show_path=False)],
        force=True,
    )


def _load(**overrides: float | None) -> SkyConfig:
    config_path = state["config"]
    config = load_config(config_path if isinstance(config_path, Path) else None)
    changes = {key: value for key, value in overrides.items() if value is not None}
    if changes:
        config = replace(config, **changes)
    return config


def _parse_when(when: str | None) -> datetime:
    if when is None:
        return datetime.now(UTC)
    try:
        parsed = datetime.fromisoformat(when)
    except ValueError as e:
        raise typer.BadParameter(f"'{when}' is not an ISO 8601 date and time", param_hint="--when") from e
    return parsed if parsed.tzinfo is not None else parsed.replace(tzinfo=UTC)


def _sky(config: SkyConfig, when: datetime) -> ObservedSky:
    catalogue = load_star_catalogue(config.stars, config.asterisms)
    satellites: SatelliteCatalogue | None = None
    if config.satellites is not None:
        satellites = load_satellite_catalogue(config.satellites)
    return ObservedSky(when, config.observer(), config.projection(), catalogue, satellites)


@app.command()
def sky(
    when: str | None = typer.Option(None, "--when", "-t", help="ISO 8601 instant (default: now, UTC)"),
    lon: float | None = typer.Option(None, "--lon", help="Observer longitude in degrees, positive east"),
    lat: float | None = typer.Option(None, "--lat", help="Observer latitude in degrees"),
    center_az: float | None = typer.Option(None, "--center-az", help="Projection centre azimuth in degrees"),
    center_alt: float | None = typer.Option(None, "--center-alt", help="Projection centre altitude in degrees"),
) -> None:
    """
    Show the Sun, the Moon and the planets.

    Example:
        starfield sky
        starfield sky --when 2020-02-17T20:15:00+01:00 --lon 6.57 --lat 46.52
    """
    try:
        config = _load(lon_deg=lon, lat_deg=lat, center_az_deg=center_az, center_alt_deg=center_alt)
        observed = _sky(config, _parse_when(when))
    except StarfieldError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e

    to_horizontal = EquatorialToHorizontalConversion(observed.when, observed.where)
    table = Table(title=f"Sky at {observed.when.isoformat()} from {observed.where}", header_style="bold magenta")
    table.add_column("Object", style="cyan")
    table.add_column("RA", justify="right")
    table.add_column("Dec", justify="right")
    table.add_column("Az", justify="right")
    table.add_column("Alt", justify="right")
    table.add_column("x", justify="right", style="green")
    table.add_column("y", justify="right", style="green")
    table.add_column("Mag", justify="right", style="yellow")

    bodies = [observed.sun, observed.moon, *observed.planets]
    for body in bodies:
        horizontal = to_horizontal.apply(body.equatorial_pos)
        position = observed.position_of(body)
        table.add_row(
            body.info(),
            format_ra(body.equatorial_pos.ra_hr),
            format_dec(body.equatorial_pos.dec_deg),
            f"{horizontal.az_deg:.2f}° {horizontal.az_octant_name('N', 'E', 'S', 'W')}",
            format_dec(horizontal.alt_deg),
            f"{position.x:.4f}",
            f"{position.y:.4f}",
            f"{body.magnitude:.2f}",
        )
    console.print(table)
    print_info(
        f"{len(observed.stars)} stars, {len(observed.asterisms)} asterisms, {len(observed.satellites)} satellites"
    )


@app.command()
def closest(
    az: float = typer.Option(..., "--az", help="Azimuth of the point in degrees"),
    alt: float = typer.Option(..., "--alt", help="Altitude of the point in degrees"),
    radius: float | None = typer.Option(None, "--radius", "-r", help="Search radius in plane units"),
    when: str | None = typer.Option(None, "--when", "-t", help="ISO 8601 instant (default: now, UTC)"),
) -> None:
    """
    Find the object nearest to a point of the sky.

    Example:
        starfield closest --az 120 --alt 35 --radius 0.1
    """
    try:
        config = _load(search_radius=radius)
        observed = _sky(config, _parse_when(when))
        point = observed.projection.apply(HorizontalCoordinates.of_deg(az, alt))
        found = observed.object_closest_to(point, config.search_radius)
    except StarfieldError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e

    if found is None:
        print_info(f"No object found within {config.search_radius} of {point}")
        return
    console.print(f"[bold]{found.info()}[/bold] ({found.kind}) at {observed.position_of(found)}")


@app.command()
def sidereal(
    when: str | None = typer.Option(None, "--when", "-t", help="ISO 8601 instant (default: now, UTC)"),
    lon: float | None = typer.Option(None, "--lon", help="Observer longitude in degrees, positive east"),
) -> None:
    """
    Show Greenwich and local sidereal time.

    Example:
        starfield sidereal --when 1980-04-22T14:36:51.67+00:00
    """
    try:
        config = _load(lon_deg=lon)
        instant = _parse_when(when)
        greenwich = sidereal_time.greenwich(instant)
        local = sidereal_time.local(instant, config.observer())
    except StarfieldError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e

    table = Table(title=f"Sidereal time at {instant.isoformat()}", header_style="bold magenta")
    table.add_column("Meridian", style="cyan")
    table.add_column("Hours", justify="right", style="green")
    table.add_column("HMS", justify="right")
    table.add_row("Greenwich", f"{angle.to_hr(greenwich):.6f}", format_ra(angle.to_hr(greenwich)))
    table.add_row(f"Local ({config.lon_deg:+.2f}°)", f"{angle.to_hr(local):.6f}", format_ra(angle.to_hr(local)))
    console.print(table)


@app.command()
def version() -> None:
    """Show the CLI version."""
    from starfield.cli import __version__

    console.print(f"[bold]Starfield[/bold] version [cyan]{__version__}[/cyan]")


if __name__ == "__main__":
    app()
