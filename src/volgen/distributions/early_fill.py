"""Early-fill distribution: spend the budget as soon as possible.

Each second draws a random count up to 1% of the total until the total
is reached. Seconds after that point get no data point at all, so the
output is usually shorter than the window.
"""

from __future__ import annotations

import logging
import math
import random
from datetime import datetime, timedelta

from volgen.distributions.base import BaseDistributor
from volgen.distributions.slots import fit_to_limits
from volgen.models.datapoint import MAX_COUNT, DataPoint

logger = logging.getLogger(__name__)

CEILING_PERCENT = 1


def draw_ceiling(total: int) -> int:
    """Upper bound of a single per-second draw."""
    return min(MAX_COUNT, max(1, math.ceil(total * CEILING_PERCENT / 100)))


class EarlyFillDistributor(BaseDistributor):
    @property
    def name(self) -> str:
        return "early_fill"

    @property
    def description(self) -> str:
        return "Front-loaded random counts; stops once the total is reached"

    def distribute(
        self,
        start: datetime,
        duration_in_seconds: int,
        total: int,
        rng: random.Random,
    ) -> list[DataPoint]:
        """Draw per-second counts until ``total`` is spent or the window ends.

        Raises:
            CountOverflowError: if ``total`` exceeds ``MAX_COUNT`` rows for
                every second of the window.
        """
        ceiling = draw_ceiling(total)
        last_index = duration_in_seconds - 1
        counts: list[int] = []
        allocated = 0

        for i in range(duration_in_seconds):
            remaining = total - allocated
            if remaining == 0:
                logger.info("%d rows early filled at second %d of %d", total, i, duration_in_seconds)
                break
            if i == last_index:
                logger.info(
                    "Window of %ds ended with %d of %d rows left; placing them in the last seconds",
                    duration_in_seconds,
                    remaining,
                    total,
                )
                counts.append(remaining)
                # Leftover too big for the last second spills back into earlier ones.
                fit_to_limits(counts, MAX_COUNT)
                break
            count = min(rng.randint(1, ceiling), remaining)
            counts.append(count)
            allocated += count

        return [
            DataPoint(timestamp=start + timedelta(seconds=i), count=count)
            for i, count in enumerate(counts)
        ]
