from __future__ import annotations

import math
import xml.etree.ElementTree as ET
from datetime import datetime, timezone
from pathlib import Path
from typing import Optional, Union

from dateutil.parser import isoparse

from .datatypes import Track, TrackPoint
from .errors import MalformedDocument, NoTrackPointsFound
from ..utils.logging import get_logger


log = get_logger(__name__)


def _parse_iso8601_utc(s: str) -> Optional[datetime]:
    try:
        dt = isoparse(s.strip())
        if dt.tzinfo is None:
            dt = dt.replace(tzinfo=timezone.utc)
        return dt.astimezone(timezone.utc)
    except (ValueError, OverflowError):
        return None


def _parse_root(document: Union[str, bytes]):
    """Return (root, default_namespace) for the given XML text.

    Only namespace declarations made before the root's start tag count, i.e.
    the ones declared on the root element itself.
    """
    parser = ET.XMLPullParser(events=("start-ns", "start"))
    try:
        parser.feed(document)
        parser.close()
    except ET.ParseError as e:
        raise MalformedDocument(f"Unable to parse gpx content: {e}") from e

    default_ns = None
    root = None
    for event, payload in parser.read_events():
        if event == "start-ns":
            prefix, uri = payload
            if prefix == "":
                default_ns = uri
            continue
        root = payload
        break
    if root is None:
        raise MalformedDocument("Unable to parse gpx content: no root element")
    if not default_ns:
        raise MalformedDocument("No default namespace declared on the gpx root element")
    return root, default_ns


def _read_float(el: ET.Element, attr: str) -> float:
    raw = el.get(attr)
    if raw is None:
        raise MalformedDocument(f"Track point without '{attr}' attribute")
    try:
        value = float(raw)
    except ValueError as e:
        raise MalformedDocument(f"Invalid '{attr}' value on track point: {raw!r}") from e
    if not math.isfinite(value):
        raise MalformedDocument(f"Invalid '{attr}' value on track point: {raw!r}")
    return value


def parse_track(document: Union[str, bytes]) -> Track:
    """Extract all timed <trkpt> elements of a GPX document, in document order.

    The lookup is document-wide, so every track and segment contributes.
    Points without a <time> child (or with an unreadable one) are skipped.
    """
    root, ns = _parse_root(document)
    elements = list(root.iter(f"{{{ns}}}trkpt"))
    if not elements:
        raise NoTrackPointsFound("Unable to find trkpt elements within given gpx content.")

    track = Track(raw_count=len(elements))
    for el in elements:
        lat = _read_float(el, "lat")
        lon = _read_float(el, "lon")
        time_el = el.find(f"{{{ns}}}time")
        if time_el is None or not (time_el.text or "").strip():
            continue
        ts = _parse_iso8601_utc(time_el.text)
        if ts is None:
            log.warning("Skipping track point at %s, %s: unreadable time %r", lat, lon, time_el.text)
            continue
        track.points.append(TrackPoint(timestamp=ts, latitude=lat, longitude=lon))

    log.debug(
        "Parsed %d track points (%d with time)", track.raw_count, len(track.points)
    )
    return track


def read_gpx_file(path: Path) -> bytes:
    """Raw file content; the XML declaration decides the encoding."""
    return Path(path).read_bytes()
