"""Resolve the generation window from configuration values."""

from __future__ import annotations

import logging
from datetime import UTC, datetime

from volgen.errors import DurationParseError, TimestampParseError
from volgen.generation.duration import parse_duration
from volgen.models.datapoint import TimeWindow

logger = logging.getLogger(__name__)


def parse_start_timestamp(value: str | None, fmt: str | None) -> datetime:
    """Parse a fixed start timestamp and normalise it to UTC.

    Values without an offset are taken to be UTC already.
    """
    if value is None or fmt is None:
        raise TimestampParseError(value, fmt, "start_timestamp and timestamp_format are required")
    try:
        parsed = datetime.strptime(value, fmt)
    except ValueError as exc:
        raise TimestampParseError(value, fmt, str(exc)) from exc
    if parsed.tzinfo is None:
        return parsed.replace(tzinfo=UTC)
    try:
        return parsed.astimezone(UTC)
    except OverflowError as exc:
        raise TimestampParseError(value, fmt, "out of range once converted to UTC") from exc


def resolve_time_range(
    use_now: bool | None,
    start_timestamp: str | None = None,
    timestamp_format: str | None = None,
    generation_duration: str | None = None,
    now: datetime | None = None,
) -> TimeWindow:
    """Work out the ``(start, end)`` window of a generation run.

    Args:
        use_now: Start at the current instant when true or unset.
        start_timestamp: Fixed start, used only when ``use_now`` is false.
        timestamp_format: ``strptime`` format for ``start_timestamp``.
        generation_duration: Duration string such as ``"10m"``; the window
            is empty when omitted.
        now: Override for the current instant. The clock is read at most
            once per call, so both ends derive from the same value.

    Raises:
        TimestampParseError: if the fixed start cannot be parsed.
        DurationParseError: if the duration string cannot be parsed or the
            window end falls outside the datetime range.
    """
    if use_now is None or use_now:
        start = now if now is not None else datetime.now(UTC)
    else:
        start = parse_start_timestamp(start_timestamp, timestamp_format)

    end = start
    if generation_duration is not None:
        duration = parse_duration(generation_duration)
        try:
            end = start + duration
        except OverflowError as exc:
            raise DurationParseError(
                generation_duration, f"window end past {start.isoformat()} is out of range"
            ) from exc

    logger.debug("Resolved generation window %s -> %s", start.isoformat(), end.isoformat())
    return TimeWindow(start=start, end=end)
