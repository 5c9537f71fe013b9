from pathlib import Path

import pytest


DATA_DIR = Path(__file__).parent / "data"

GPX_NS = "http://www.topografix.com/GPX/1/1"


def make_gpx(*points: str, ns: str = GPX_NS) -> str:
    body = "\n".join(points)
    return f'<gpx xmlns="{ns}" version="1.1"><trk><trkseg>{body}</trkseg></trk></gpx>'


def trkpt(lat, lon, time=None) -> str:
    inner = f"<time>{time}</time>" if time is not None else ""
    return f'<trkpt lat="{lat}" lon="{lon}">{inner}</trkpt>'


@pytest.fixture
def hike_gpx_path() -> Path:
    return DATA_DIR / "2024-05-05.gpx"


@pytest.fixture
def hike_gpx(hike_gpx_path) -> str:
    return hike_gpx_path.read_text(encoding="utf-8")
