"""Top-level generation orchestrator.

Resolves the window from a validated config, builds a seeded random
source and hands both to the configured distribution model.
"""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass, field
from datetime import datetime

from volgen.distributions.registry import distribute
from volgen.generation.time_range import resolve_time_range
from volgen.models.config import GenerationConfig
from volgen.models.datapoint import DataPoint, TimeWindow

logger = logging.getLogger(__name__)


@dataclass
class GenerationResult:
    """Result of a single generation run."""

    config: GenerationConfig
    window: TimeWindow
    seed: int
    datapoints: list[DataPoint] = field(default_factory=list)

    @property
    def model(self) -> str:
        return self.config.distribution_by.lower()

    @property
    def duration_in_seconds(self) -> int:
        return self.window.duration_in_seconds

    @property
    def total_count(self) -> int:
        return sum(dp.count for dp in self.datapoints)


def generate(
    config: GenerationConfig,
    seed: int | None = None,
    now: datetime | None = None,
) -> GenerationResult:
    """Generate the data points described by ``config``.

    Args:
        config: Validated generation config.
        seed: Random seed for reproducibility; drawn at random when omitted
            and recorded on the result either way.
        now: Override for the current instant when the config starts "now".

    Returns:
        GenerationResult with the window and the ordered data points.
    """
    window = resolve_time_range(
        config.use_now_as_timestamp,
        config.start_timestamp,
        config.timestamp_format,
        config.generation_duration,
        now=now,
    )

    master_seed = seed if seed is not None else random.randint(0, 2**31)
    rng = random.Random(master_seed)

    datapoints = distribute(
        config.distribution_by,
        window.start,
        window.duration_in_seconds,
        config.number_of_entries,
        rng,
    )

    result = GenerationResult(config=config, window=window, seed=master_seed, datapoints=datapoints)
    logger.info(
        "Generated %d rows in %d data points with model %s (seed=%d)",
        result.total_count,
        len(datapoints),
        result.model,
        master_seed,
    )
    return result
