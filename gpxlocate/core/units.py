from __future__ import annotations

from datetime import datetime, timezone

from .datatypes import Coordinate


GOOGLE_MAPS_URL = "https://www.google.com/maps/place/{lat},{lon}"


def format_coordinate(c: Coordinate) -> str:
    return f"{c.latitude}, {c.longitude}"


def format_coordinate_labelled(c: Coordinate) -> str:
    return f"lat={c.latitude}; lon={c.longitude}"


def google_maps_link(c: Coordinate) -> str:
    return GOOGLE_MAPS_URL.format(lat=c.latitude, lon=c.longitude)


def format_seconds(sec: int) -> str:
    return f"{sec}s"


def format_instant_utc(dt: datetime) -> str:
    return dt.astimezone(timezone.utc).strftime("%d.%m.%Y %H:%M:%S UTC")
