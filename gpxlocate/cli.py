from __future__ import annotations

import sys
from pathlib import Path
from typing import List, Optional

import typer

from .core.datatypes import SearchResult
from .core.errors import GpxLocateError, NoTimedPointsFound, NoTrackPointsFound
from .core.gpx_loader import read_gpx_file
from .core.resolver import resolve, resolve_image
from .core.timestamps import DEFAULT_TIMEZONE
from .core.units import (
    format_coordinate,
    format_coordinate_labelled,
    format_instant_utc,
    format_seconds,
    google_maps_link,
)
from .utils.logging import get_logger


app = typer.Typer(
    add_completion=False,
    help="Find the GPX track point recorded closest to a given time.",
)
log = get_logger(__name__)

EXIT_NO_MATCH = 1
EXIT_INVALID = 2


def _clean_gap(gap: Optional[str]) -> Optional[str]:
    # "\-00:13:00" is how a negative gap survives some shells
    return gap.lstrip("\\") if gap is not None else None


def _exit_code(e: GpxLocateError) -> int:
    if isinstance(e, (NoTrackPointsFound, NoTimedPointsFound)):
        return EXIT_NO_MATCH
    return EXIT_INVALID


def _echo_result(result: SearchResult) -> None:
    if result.target is not None:
        typer.echo(f"Time to search:   {format_instant_utc(result.target)}")
    typer.echo(f"Time difference:  {format_seconds(result.time_difference_seconds)}")
    typer.echo(f"Coordinate:       {format_coordinate_labelled(result.coordinate)}")
    typer.echo(f"Coordinate:       {format_coordinate(result.coordinate)}")
    typer.echo(f"Google link:      {google_maps_link(result.coordinate)}")


def _load(file: Path) -> bytes:
    try:
        return read_gpx_file(file)
    except OSError as e:
        typer.echo(f"Unable to read {file}: {e}")
        raise typer.Exit(code=EXIT_INVALID)


@app.command("read")
def read(
    file: Path = typer.Argument(
        ..., exists=True, dir_okay=False, readable=True, help="The GPX file to be read."
    ),
    date: str = typer.Option(
        ..., "--date", help="The date that should be found within the given GPX file."
    ),
    gap: Optional[str] = typer.Option(
        None, "--gap", help="The time gap from the camera to the GPX file, e.g. -00:13:00."
    ),
    tz: str = typer.Option(
        DEFAULT_TIMEZONE, "--timezone", envvar="GPXLOCATE_TZ",
        help="Timezone of --date (IANA name or UTC+HH:MM)."
    ),
):
    """Print the coordinate recorded closest to --date."""

    document = _load(file)
    log.info(f"Searching {file.name} for {date} ({tz})...")
    try:
        result = resolve(document, date, tz, _clean_gap(gap))
    except GpxLocateError as e:
        typer.echo(str(e))
        raise typer.Exit(code=_exit_code(e))
    _echo_result(result)


@app.command("read-image")
def read_image(
    file: Path = typer.Argument(
        ..., exists=True, dir_okay=False, readable=True, help="The GPX file to be read."
    ),
    image: Path = typer.Option(
        ..., "--image", exists=True, dir_okay=False, readable=True,
        help="Image whose EXIF capture time is searched for.",
    ),
    gap: Optional[str] = typer.Option(
        None, "--gap", help="The time gap from the camera to the GPX file, e.g. -00:13:00."
    ),
    tz: str = typer.Option(
        DEFAULT_TIMEZONE, "--timezone", envvar="GPXLOCATE_TZ",
        help="Timezone the camera clock is set to."
    ),
):
    """Print the coordinate recorded closest to an image's capture time."""

    document = _load(file)
    log.info(f"Searching {file.name} for the capture time of {image.name} ({tz})...")
    try:
        result = resolve_image(document, image, tz, _clean_gap(gap))
    except GpxLocateError as e:
        typer.echo(str(e))
        raise typer.Exit(code=_exit_code(e))
    _echo_result(result)


def main(argv: Optional[List[str]] = None) -> None:
    app(args=argv, standalone_mode=True)  # Typer handles sys.exit


if __name__ == "__main__":
    main(sys.argv[1:])
