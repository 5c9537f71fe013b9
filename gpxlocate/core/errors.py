from __future__ import annotations


class GpxLocateError(Exception):
    """Base class for every failure surfaced by the resolve pipeline."""


class MalformedDocument(GpxLocateError):
    """Not well-formed XML, no default namespace, or a point without lat/lon."""


class NoTrackPointsFound(GpxLocateError):
    pass


class MalformedTimestamp(GpxLocateError):
    pass


class UnknownTimezone(GpxLocateError):
    pass


class MalformedGapString(GpxLocateError):
    pass


class NoTimedPointsFound(GpxLocateError):
    """Points exist, but none of them carries a usable <time>."""


class MissingCaptureTime(GpxLocateError):
    pass
