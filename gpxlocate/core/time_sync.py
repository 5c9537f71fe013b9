from __future__ import annotations

from datetime import datetime
from typing import Optional

from .datatypes import GapOffset


def apply_gap(target: datetime, gap: Optional[GapOffset]) -> datetime:
    """Shift a target instant by a device clock gap.

    A camera running 13 minutes ahead gets the gap "-00:13:00": its clock
    reading minus the gap is the true time recorded by the GPS device.
    """
    if gap is None:
        return target
    return target + gap.signed()
