from __future__ import annotations

from datetime import datetime
from pathlib import Path
from typing import Optional

from PIL import Image, UnidentifiedImageError


EXIF_IFD = 0x8769
TAG_DATETIME_ORIGINAL = 36867
TAG_DATETIME = 306
EXIF_DATETIME_FORMAT = "%Y:%m:%d %H:%M:%S"


def get_image_taken(path: Path) -> Optional[datetime]:
    """Return the camera clock reading stored in an image's EXIF data.

    Prefers DateTimeOriginal (Exif IFD), then DateTime (IFD0). The value is
    naive: cameras store local wall-clock time without a zone.
    Returns None if the file is not an image or carries no usable date.
    """
    try:
        with Image.open(path) as img:
            exif = img.getexif()
    except (UnidentifiedImageError, OSError):
        return None

    raw = exif.get_ifd(EXIF_IFD).get(TAG_DATETIME_ORIGINAL) or exif.get(
        TAG_DATETIME_ORIGINAL
    ) or exif.get(TAG_DATETIME)
    if not raw:
        return None
    if isinstance(raw, bytes):
        raw = raw.decode("ascii", "ignore")
    try:
        return datetime.strptime(str(raw).strip("\x00 "), EXIF_DATETIME_FORMAT)
    except ValueError:
        return None
