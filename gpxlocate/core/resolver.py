from __future__ import annotations

from datetime import datetime, tzinfo
from pathlib import Path
from typing import Optional, Union

from .datatypes import SearchResult
from .errors import MissingCaptureTime
from .gpx_loader import parse_track
from .image_meta import get_image_taken
from .search import nearest_point
from .time_sync import apply_gap
from .timestamps import parse_gap, parse_target_time, resolve_timezone
from ..utils.logging import get_logger


log = get_logger(__name__)


def resolve(
    document: Union[str, bytes],
    target_time: str,
    target_timezone: Union[str, tzinfo],
    gap: Optional[str] = None,
    now: Optional[datetime] = None,
) -> SearchResult:
    """Find the track point recorded closest to ``target_time``.

    ``target_time`` is read in ``target_timezone`` and shifted by the
    optional clock ``gap`` before the track is searched. Any failure raises a
    GpxLocateError subclass; nothing is returned partially.
    """
    track = parse_track(document)
    target = parse_target_time(target_time, target_timezone, now=now)
    offset = parse_gap(gap) if gap is not None else None
    effective = apply_gap(target, offset)
    log.debug("Searching %d timed points for %s", len(track.points), effective.isoformat())
    return nearest_point(track, effective)


def resolve_image(
    document: Union[str, bytes],
    image: Path,
    target_timezone: Union[str, tzinfo],
    gap: Optional[str] = None,
) -> SearchResult:
    """Like resolve(), with the target time taken from an image's EXIF data."""
    taken = get_image_taken(image)
    if taken is None:
        raise MissingCaptureTime(f"The image {image} does not have a taken date.")
    zone = resolve_timezone(target_timezone)
    return resolve(document, taken.strftime("%Y-%m-%d %H:%M:%S"), zone, gap)
