"""Even distribution: a flat base with a random redistribution pass.

Every second of the window gets a data point. The base fill gives each
slot ``total // duration`` rows and the last slot the remainder; then
``round(total * 0.2)`` random moves between slot pairs roughen the shape.
"""

from __future__ import annotations

import random
from datetime import datetime, timedelta

from volgen.distributions.base import BaseDistributor
from volgen.distributions.slots import base_allocation, perturb
from volgen.errors import ZeroDurationError
from volgen.models.datapoint import MAX_COUNT, DataPoint

SHUFFLE_RATIO = 0.2


def fill_even(
    start: datetime,
    duration_in_seconds: int,
    total: int,
    rng: random.Random,
) -> list[DataPoint]:
    """Even-fill ``total`` rows over ``duration_in_seconds`` seconds from ``start``.

    Also used by sparse fill for each occupied zone.

    Raises:
        ZeroDurationError: if the span is shorter than one second.
        CountOverflowError: if ``total`` exceeds ``MAX_COUNT`` rows for every second of the span.
    """
    if duration_in_seconds <= 0:
        raise ZeroDurationError(duration_in_seconds)

    # A remainder too big for the last second spills back into earlier ones.
    counts = base_allocation(total, duration_in_seconds, limits=MAX_COUNT)

    perturb(counts, round(total * SHUFFLE_RATIO), rng, ceiling=MAX_COUNT)

    return [
        DataPoint(timestamp=start + timedelta(seconds=i), count=count)
        for i, count in enumerate(counts)
    ]


class EvenDistributor(BaseDistributor):
    @property
    def name(self) -> str:
        return "even"

    @property
    def description(self) -> str:
        return "Every second gets rows; flat base roughened by random moves"

    def distribute(
        self,
        start: datetime,
        duration_in_seconds: int,
        total: int,
        rng: random.Random,
    ) -> list[DataPoint]:
        return fill_even(start, duration_in_seconds, total, rng)
