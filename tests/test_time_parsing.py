"""Tests for duration parsing and time range resolution."""

from datetime import UTC, datetime, timedelta

import pytest

from volgen.errors import DurationParseError, TimestampParseError
from volgen.generation.duration import parse_duration, parse_duration_value_and_unit
from volgen.generation.time_range import resolve_time_range

FMT = "%Y-%m-%dT%H:%M:%S.%f%z"
START = "2022-01-01T00:00:00.000+00:00"


class TestDurationValueAndUnit:
    def test_simple_value(self) -> None:
        assert parse_duration_value_and_unit("10m") == (10, "m")

    def test_trailing_garbage_stays_in_unit(self) -> None:
        assert parse_duration_value_and_unit("10m3d") == (10, "m3d")

    def test_no_numeric_prefix(self) -> None:
        assert parse_duration_value_and_unit("m10") is None

    def test_no_unit(self) -> None:
        assert parse_duration_value_and_unit("10") is None

    def test_empty(self) -> None:
        assert parse_duration_value_and_unit("") is None


class TestParseDuration:
    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            ("10s", timedelta(seconds=10)),
            ("10m", timedelta(minutes=10)),
            ("3h", timedelta(hours=3)),
            ("2d", timedelta(days=2)),
            ("0m", timedelta(0)),
        ],
    )
    def test_supported_units(self, value: str, expected: timedelta) -> None:
        assert parse_duration(value) == expected

    def test_unsupported_unit_is_zero(self) -> None:
        assert parse_duration("10m3d") == timedelta(0)
        assert parse_duration("5w") == timedelta(0)

    def test_unparsable_raises(self) -> None:
        with pytest.raises(DurationParseError, match="failed to parse time duration value and unit"):
            parse_duration("f10m")

    def test_error_keeps_value(self) -> None:
        with pytest.raises(DurationParseError) as info:
            parse_duration("m10")
        assert info.value.value == "m10"

    @pytest.mark.parametrize("value", ["99999999999d", "9999999999999999h", "999999999999999999999s"])
    def test_out_of_range_raises(self, value: str) -> None:
        with pytest.raises(DurationParseError) as info:
            parse_duration(value)
        assert info.value.value == value
        assert isinstance(info.value.__cause__, OverflowError)


class TestResolveTimeRange:
    def test_fixed_start(self) -> None:
        window = resolve_time_range(False, START, FMT, "10m")
        assert window.start == datetime(2022, 1, 1, tzinfo=UTC)
        assert window.end == datetime(2022, 1, 1, 0, 10, tzinfo=UTC)
        assert window.duration_in_seconds == 600

    def test_offset_normalised_to_utc(self) -> None:
        window = resolve_time_range(False, "2022-01-01T02:00:00.000+02:00", FMT, "1h")
        assert window.start == datetime(2022, 1, 1, tzinfo=UTC)
        assert window.start.tzinfo == UTC

    def test_naive_timestamp_taken_as_utc(self) -> None:
        window = resolve_time_range(False, "2022-01-01 00:00:00", "%Y-%m-%d %H:%M:%S", "10s")
        assert window.start == datetime(2022, 1, 1, tzinfo=UTC)
        assert window.end == datetime(2022, 1, 1, 0, 0, 10, tzinfo=UTC)

    def test_invalid_format(self) -> None:
        with pytest.raises(TimestampParseError) as info:
            resolve_time_range(False, START, "invalid-simply", "10m")
        message = str(info.value)
        assert START in message
        assert "invalid-simply" in message
        assert info.value.reason

    def test_invalid_timestamp(self) -> None:
        with pytest.raises(TimestampParseError, match="invalid-timestamp-value"):
            resolve_time_range(False, "invalid-timestamp-value", FMT, "10m")

    def test_missing_start_timestamp(self) -> None:
        with pytest.raises(TimestampParseError):
            resolve_time_range(False, None, FMT, "10m")

    def test_now_injected(self) -> None:
        now = datetime(2024, 6, 1, 12, 0, tzinfo=UTC)
        window = resolve_time_range(True, generation_duration="10m", now=now)
        assert window.start == now
        assert window.end == now + timedelta(minutes=10)

    def test_unset_use_now_means_now(self) -> None:
        now = datetime(2024, 6, 1, 12, 0, tzinfo=UTC)
        window = resolve_time_range(None, START, FMT, "1m", now=now)
        assert window.start == now

    def test_now_read_once(self) -> None:
        before = datetime.now(UTC)
        window = resolve_time_range(True, generation_duration="10m")
        after = datetime.now(UTC)
        assert before <= window.start <= after
        # Both ends derive from one clock read, so the span is exact.
        assert window.end - window.start == timedelta(minutes=10)

    def test_no_duration_gives_empty_window(self) -> None:
        window = resolve_time_range(False, START, FMT, None)
        assert window.start == window.end
        assert window.duration_in_seconds == 0

    def test_unsupported_unit_gives_empty_window(self) -> None:
        window = resolve_time_range(False, START, FMT, "10x")
        assert window.duration_in_seconds == 0

    def test_bad_duration_propagates(self) -> None:
        with pytest.raises(DurationParseError):
            resolve_time_range(False, START, FMT, "m10")

    def test_window_end_past_year_9999_raises(self) -> None:
        with pytest.raises(DurationParseError, match="out of range"):
            resolve_time_range(False, START, FMT, "999999999d")

    def test_huge_duration_raises(self) -> None:
        with pytest.raises(DurationParseError):
            resolve_time_range(False, START, FMT, "99999999999d")

    def test_start_out_of_range_in_utc_raises(self) -> None:
        with pytest.raises(TimestampParseError, match="out of range"):
            resolve_time_range(False, "0001-01-01T00:00:00.000+05:00", FMT, "1m")
