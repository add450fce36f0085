"""Exception types raised by the generation engine.

Every error derives from VolgenError so callers (the CLI in particular)
can catch one type and report it without a traceback.
"""

from __future__ import annotations


class VolgenError(ValueError):
    """Base class for all recoverable volgen errors."""


class TimestampParseError(VolgenError):
    """The fixed start timestamp does not match the configured format."""

    def __init__(self, value: str | None, fmt: str | None, reason: str) -> None:
        self.value = value
        self.fmt = fmt
        self.reason = reason
        super().__init__(
            f"failed to parse start_timestamp [{value}] with format [{fmt}]: {reason}"
        )


class DurationParseError(VolgenError):
    """A duration string has no numeric prefix followed by a unit, or is out of range."""

    def __init__(self, value: str, reason: str | None = None) -> None:
        self.value = value
        self.reason = reason
        message = f"failed to parse time duration value and unit from [{value}]"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)


class UnsupportedModelError(VolgenError):
    """The requested distribution model is not registered."""

    def __init__(self, name: str, available: list[str]) -> None:
        self.name = name
        self.available = available
        super().__init__(f"Unknown distribution model '{name}'. Available: {available}")


class ZeroDurationError(VolgenError):
    """The generation window is empty, so there are no slots to fill."""

    def __init__(self, duration_in_seconds: int) -> None:
        self.duration_in_seconds = duration_in_seconds
        super().__init__(
            f"generation window must be at least 1 second long, got {duration_in_seconds}s "
            "(check generation_duration and its unit)"
        )


class CountOverflowError(VolgenError):
    """A per-second count left the range a DataPoint can hold."""


class ConfigError(VolgenError):
    """Configuration could not be read or failed validation."""
