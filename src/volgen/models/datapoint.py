"""Value types produced by the distributors.

A DataPoint is a one-second bucket holding how many rows to emit at that
instant. Counts are kept inside the signed 16-bit range so downstream
writers can store them in a smallint column.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timedelta

from volgen.errors import CountOverflowError

MAX_COUNT = 32767
ONE_SECOND = timedelta(seconds=1)


def check_count(count: int) -> int:
    """Return count unchanged if it fits in a DataPoint, else raise."""
    if count < 0:
        raise CountOverflowError(f"count {count} is negative")
    if count > MAX_COUNT:
        raise CountOverflowError(
            f"count {count} exceeds the per-second maximum of {MAX_COUNT}; "
            "lower number_of_entries or lengthen generation_duration"
        )
    return count


@dataclass(frozen=True)
class DataPoint:
    """Number of rows to generate at one second of the window."""

    timestamp: datetime
    count: int

    def __post_init__(self) -> None:
        check_count(self.count)


@dataclass
class DataZone:
    """A candidate span of the window used by sparse fill.

    ``end_time`` is the last second covered, so a zone starting and ending
    at the same instant spans one second.
    """

    start_time: datetime
    end_time: datetime
    allocated_count: int = 0

    @property
    def span_seconds(self) -> int:
        return int((self.end_time - self.start_time).total_seconds()) + 1

    @property
    def is_gap(self) -> bool:
        return self.allocated_count == 0


@dataclass(frozen=True)
class TimeWindow:
    """Start and end instants of a generation run."""

    start: datetime
    end: datetime

    @property
    def duration(self) -> timedelta:
        return self.end - self.start

    @property
    def duration_in_seconds(self) -> int:
        # Sub-second remainders are dropped; slots are whole seconds.
        return int(self.duration.total_seconds())
