from __future__ import annotations

import re
from datetime import datetime, timedelta, timezone, tzinfo
from typing import Optional, Union
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from dateutil import parser as date_parser

from .datatypes import GapOffset, GapSign
from .errors import MalformedGapString, MalformedTimestamp, UnknownTimezone


DEFAULT_TIMEZONE = "Europe/Berlin"

_OFFSET_RE = re.compile(r"^(?:UTC|GMT)?\s*([+-])([0-9]{1,2})(?::?([0-9]{2}))?$", re.IGNORECASE | re.ASCII)
# dateutil reads "UTC+2" POSIX-style (inverted), so such a suffix is split off first
_NAMED_OFFSET_SUFFIX_RE = re.compile(
    r"\s*((?:UTC|GMT)\s*[+-][0-9]{1,2}(?::?[0-9]{2})?)$", re.IGNORECASE | re.ASCII
)
_GAP_RE = re.compile(r"^([0-9]+):([0-5][0-9]):([0-5][0-9])$")

# Midnight-relative day keywords; "now" is handled separately.
_RELATIVE_DAYS = {"today": 0, "yesterday": -1, "tomorrow": 1}


def resolve_timezone(tz: Union[str, tzinfo]) -> tzinfo:
    """Turn a timezone identifier into a tzinfo.

    Accepts an existing tzinfo, "UTC"/"Z", fixed offsets such as "UTC+2",
    "+02:00" or "GMT-0530", and IANA names like "Europe/Berlin".
    """
    if isinstance(tz, tzinfo):
        return tz
    name = tz.strip()
    if not name:
        raise UnknownTimezone("Empty timezone identifier")
    if name.upper() in ("UTC", "Z", "GMT"):
        return timezone.utc
    m = _OFFSET_RE.match(name)
    if m:
        sign, hours, minutes = m.group(1), int(m.group(2)), int(m.group(3) or 0)
        if hours > 23 or minutes > 59:
            raise UnknownTimezone(f"Unsupported timezone offset: {tz}")
        offset = timedelta(hours=hours, minutes=minutes)
        return timezone(-offset if sign == "-" else offset)
    try:
        return ZoneInfo(name)
    except (ZoneInfoNotFoundError, ValueError, OSError) as e:
        raise UnknownTimezone(f"Unknown timezone: {tz}") from e


def parse_target_time(
    value: str, tz: Union[str, tzinfo], now: Optional[datetime] = None
) -> datetime:
    """Parse a free-form date/time string and return it as UTC.

    Formats:
    - 2024-05-05 13:04:16
    - 05.05.2024 13:04
    - today / yesterday / tomorrow (midnight) and now

    Strings without an offset are taken to be in ``tz``.
    """
    zone = resolve_timezone(tz)
    text = (value or "").strip()
    if not text:
        raise MalformedTimestamp("Empty date/time string")

    keyword = text.lower()
    if keyword == "now" or keyword in _RELATIVE_DAYS:
        ref = (now or datetime.now(timezone.utc)).astimezone(zone)
        if keyword == "now":
            return ref.astimezone(timezone.utc)
        day = ref.date() + timedelta(days=_RELATIVE_DAYS[keyword])
        local = datetime(day.year, day.month, day.day, tzinfo=zone)
        return local.astimezone(timezone.utc)

    suffix = _NAMED_OFFSET_SUFFIX_RE.search(text)
    if suffix:
        zone = resolve_timezone(suffix.group(1))
        text = text[: suffix.start()]

    try:
        dt = date_parser.parse(text)
    except (ValueError, OverflowError) as e:
        raise MalformedTimestamp(f"Unable to parse date/time: {value!r}") from e
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=zone)
    return dt.astimezone(timezone.utc)


def parse_gap(value: str) -> GapOffset:
    """Parse a signed clock gap like "-00:13:00" or "+26:00:00".

    A missing sign means "+". Hours are unbounded so gaps of a day or more
    work; minutes and seconds must be below 60.
    """
    text = (value or "").strip()
    sign = GapSign.add
    if text.startswith(GapSign.add.value):
        text = text[1:]
    elif text.startswith(GapSign.subtract.value):
        sign = GapSign.subtract
        text = text[1:]

    m = _GAP_RE.match(text)
    if not m:
        raise MalformedGapString(f"Unable to parse time gap: {value!r} (expected [+|-]HH:MM:SS)")
    hours, minutes, seconds = (int(g) for g in m.groups())
    return GapOffset(magnitude=timedelta(hours=hours, minutes=minutes, seconds=seconds), sign=sign)
