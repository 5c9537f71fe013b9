"""Tests for target time, timezone and gap parsing."""

from datetime import datetime, timedelta, timezone

import pytest

from gpxlocate.core.datatypes import GapOffset, GapSign
from gpxlocate.core.errors import MalformedGapString, MalformedTimestamp, UnknownTimezone
from gpxlocate.core.timestamps import parse_gap, parse_target_time, resolve_timezone


class TestResolveTimezone:
    """Tests for resolve_timezone."""

    @pytest.mark.parametrize("name", ["UTC", "utc", "Z", "GMT"])
    def test_utc_aliases(self, name):
        assert resolve_timezone(name) is timezone.utc

    @pytest.mark.parametrize(
        "name, offset",
        [
            ("UTC+2", timedelta(hours=2)),
            ("+02:00", timedelta(hours=2)),
            ("GMT-0530", timedelta(hours=-5, minutes=-30)),
            ("UTC-11", timedelta(hours=-11)),
        ],
    )
    def test_fixed_offsets(self, name, offset):
        assert resolve_timezone(name).utcoffset(None) == offset

    def test_iana_name(self):
        tz = resolve_timezone("Europe/Berlin")

        assert datetime(2024, 5, 5, 12, tzinfo=tz).utcoffset() == timedelta(hours=2)
        assert datetime(2024, 1, 5, 12, tzinfo=tz).utcoffset() == timedelta(hours=1)

    def test_tzinfo_passes_through(self):
        tz = timezone(timedelta(hours=3))

        assert resolve_timezone(tz) is tz

    @pytest.mark.parametrize("name", ["Mars/Olympus_Mons", "UTC+30", ""])
    def test_unknown(self, name):
        with pytest.raises(UnknownTimezone):
            resolve_timezone(name)


class TestParseTargetTime:
    """Tests for parse_target_time."""

    def test_local_time_is_converted_to_utc(self):
        dt = parse_target_time("2024-05-05 13:04:16", "Europe/Berlin")

        assert dt == datetime(2024, 5, 5, 11, 4, 16, tzinfo=timezone.utc)
        assert dt.tzinfo == timezone.utc

    def test_fixed_offset_zone(self):
        dt = parse_target_time("2024-05-05 13:04:16", "UTC+2")

        assert dt == datetime(2024, 5, 5, 11, 4, 16, tzinfo=timezone.utc)

    def test_offset_in_string_wins(self):
        dt = parse_target_time("2024-05-05T13:04:16+00:00", "Europe/Berlin")

        assert dt == datetime(2024, 5, 5, 13, 4, 16, tzinfo=timezone.utc)

    def test_other_formats(self):
        dt = parse_target_time("5 May 2024 13:04", "UTC")

        assert dt == datetime(2024, 5, 5, 13, 4, tzinfo=timezone.utc)

    @pytest.mark.parametrize(
        "keyword, expected",
        [
            ("today", datetime(2024, 5, 4, 22, 0, tzinfo=timezone.utc)),
            ("Yesterday", datetime(2024, 5, 3, 22, 0, tzinfo=timezone.utc)),
            ("tomorrow", datetime(2024, 5, 5, 22, 0, tzinfo=timezone.utc)),
            ("now", datetime(2024, 5, 5, 9, 30, tzinfo=timezone.utc)),
        ],
    )
    def test_relative_keywords(self, keyword, expected):
        """Day keywords mean local midnight in the input timezone."""
        now = datetime(2024, 5, 5, 9, 30, tzinfo=timezone.utc)

        assert parse_target_time(keyword, "Europe/Berlin", now=now) == expected

    @pytest.mark.parametrize("suffix", ["UTC+2", "GMT+02:00", "utc +0200"])
    def test_named_offset_in_string_matches_timezone_argument(self, suffix):
        """A UTC+2 suffix means the same offset as the timezone argument UTC+2."""
        in_string = parse_target_time(f"2024-05-05 13:04:16 {suffix}", "Europe/London")

        assert in_string == parse_target_time("2024-05-05 13:04:16", "UTC+2")
        assert in_string == datetime(2024, 5, 5, 11, 4, 16, tzinfo=timezone.utc)

    def test_negative_named_offset_in_string(self):
        dt = parse_target_time("2024-05-05 13:04:16 GMT-05:30", "UTC")

        assert dt == datetime(2024, 5, 5, 18, 34, 16, tzinfo=timezone.utc)

    @pytest.mark.parametrize("value", ["not-a-date", "", "   ", "2024-13-45 99:99:99"])
    def test_malformed(self, value):
        with pytest.raises(MalformedTimestamp):
            parse_target_time(value, "UTC")


class TestParseGap:
    """Tests for parse_gap."""

    def test_negative(self):
        assert parse_gap("-00:13:00") == GapOffset(timedelta(minutes=13), GapSign.subtract)

    def test_positive(self):
        assert parse_gap("+02:13:00") == GapOffset(timedelta(hours=2, minutes=13), GapSign.add)

    def test_unsigned_defaults_to_add(self):
        assert parse_gap(" 02:13:05 ") == GapOffset(
            timedelta(hours=2, minutes=13, seconds=5), GapSign.add
        )

    def test_gaps_of_a_day_and_more(self):
        gap = parse_gap("-26:00:30")

        assert gap.magnitude == timedelta(days=1, hours=2, seconds=30)
        assert gap.signed() == -timedelta(days=1, hours=2, seconds=30)

    @pytest.mark.parametrize("value", ["abc", "", "-", "00:60:00", "00:00:60", "13:00", "+-00:01:00", "1:2:3", "\u0660\u0660:13:00", "00:\u0661\u0663:00"])
    def test_malformed(self, value):
        with pytest.raises(MalformedGapString):
            parse_gap(value)
