"""Parse compact duration strings such as ``"10m"`` or ``"3h"``.

The numeric prefix runs up to the first non-digit character; everything
after it is the unit. Units other than s/m/h/d are accepted and mean a
zero-length duration, which the dispatcher later rejects as an empty
window.
"""

from __future__ import annotations

import logging
from datetime import timedelta

from volgen.errors import DurationParseError

logger = logging.getLogger(__name__)

_UNITS: dict[str, str] = {
    "s": "seconds",
    "m": "minutes",
    "h": "hours",
    "d": "days",
}


def parse_duration_value_and_unit(value: str) -> tuple[int, str] | None:
    """Split ``value`` into its integer prefix and unit suffix.

    Returns None when there is no unit boundary or the prefix is not an
    integer (e.g. ``"m10"`` or ``"10"``).
    """
    idx = next((i for i, c in enumerate(value) if not ("0" <= c <= "9")), None)
    if idx is None:
        return None
    num, unit = value[:idx], value[idx:]
    try:
        return int(num), unit
    except ValueError:
        return None


def parse_duration(value: str) -> timedelta:
    """Parse ``value`` into a timedelta.

    Raises:
        DurationParseError: if no numeric prefix and unit can be found, or the
            value is too large for a timedelta.
    """
    parsed = parse_duration_value_and_unit(value)
    if parsed is None:
        raise DurationParseError(value)

    num, unit = parsed
    field = _UNITS.get(unit)
    if field is None:
        logger.warning("Unsupported duration unit %r in %r, using a zero duration", unit, value)
        return timedelta(0)
    try:
        return timedelta(**{field: num})
    except OverflowError as exc:
        raise DurationParseError(value, str(exc)) from exc
