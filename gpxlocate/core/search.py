from __future__ import annotations

from datetime import datetime, timedelta, timezone
from typing import Optional

from .datatypes import SearchResult, Track, TrackPoint
from .errors import NoTimedPointsFound


_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)


def epoch_seconds(dt: datetime) -> int:
    """Whole seconds since the epoch, floored."""
    return (dt - _EPOCH) // timedelta(seconds=1)


def nearest_point(track: Track, target: datetime) -> SearchResult:
    """Return the timed point closest in time to ``target``.

    Single pass in document order; a later point only wins when it is strictly
    closer, so ties go to the earlier point.
    """
    t_query = epoch_seconds(target)
    best: Optional[TrackPoint] = None
    best_diff: Optional[int] = None
    for point in track.points:
        diff = abs(epoch_seconds(point.timestamp) - t_query)
        if best_diff is not None and diff >= best_diff:
            continue
        best, best_diff = point, diff

    if best is None or best_diff is None:
        raise NoTimedPointsFound(
            f"No coordinate was found at: {target.strftime('%Y-%m-%d %H:%M:%S')} "
            f"({track.raw_count} track points, none with a time)"
        )
    return SearchResult(
        coordinate=best.coordinate,
        time_difference_seconds=best_diff,
        target=target,
        timestamp=best.timestamp,
    )
