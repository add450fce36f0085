"""Sparse-fill distribution: a few busy zones separated by empty gaps.

The window is cut into ``GENERATION_FACTOR * zone_count`` equal candidate
zones. The total is split across ``zone_count`` of them, chosen at
random, and each chosen zone is then even-filled on its own. Candidates
that get nothing produce no data points, so the output has holes in the
time axis.
"""

from __future__ import annotations

import logging
import random
from datetime import datetime, timedelta

from volgen.distributions.base import BaseDistributor
from volgen.distributions.even import fill_even
from volgen.distributions.slots import base_allocation, perturb
from volgen.models.datapoint import MAX_COUNT, ONE_SECOND, DataPoint, DataZone

logger = logging.getLogger(__name__)

GENERATION_FACTOR = 3
MIN_ZONES = 3
MAX_ZONES = 6
ZONE_SHUFFLES_PER_ZONE = 5


def partition_window(
    start: datetime,
    duration_in_seconds: int,
    candidate_count: int,
) -> list[DataZone]:
    """Cut the window into ``candidate_count`` contiguous, non-overlapping zones.

    All zones are ``duration_in_seconds // candidate_count`` seconds long
    except the last, which also takes the remainder so the zones end
    exactly at the end of the window.
    """
    if candidate_count <= 0 or candidate_count > duration_in_seconds:
        raise ValueError(
            f"cannot cut {duration_in_seconds}s into {candidate_count} zones of at least 1s"
        )
    span = duration_in_seconds // candidate_count
    zones: list[DataZone] = []
    for i in range(candidate_count):
        zone_start = start + timedelta(seconds=i * span)
        if i == candidate_count - 1:
            zone_end = start + timedelta(seconds=duration_in_seconds) - ONE_SECOND
        else:
            zone_end = zone_start + timedelta(seconds=span) - ONE_SECOND
        zones.append(DataZone(start_time=zone_start, end_time=zone_end))
    return zones


def allocate_zone_totals(
    total: int,
    capacities: list[int],
    rng: random.Random,
) -> list[int]:
    """Split ``total`` across zones holding at most ``capacities`` rows each.

    Starts from a flat split and then runs a random redistribution pass.

    Raises:
        CountOverflowError: if ``total`` exceeds the combined capacity.
    """
    zone_count = len(capacities)
    totals = base_allocation(total, zone_count, limits=capacities)
    perturb(totals, zone_count * ZONE_SHUFFLES_PER_ZONE, rng, ceiling=capacities)
    return totals


class SparseFillDistributor(BaseDistributor):
    def __init__(self, generation_factor: int = GENERATION_FACTOR) -> None:
        self.generation_factor = generation_factor

    @property
    def name(self) -> str:
        return "sparse_fill"

    @property
    def description(self) -> str:
        return "Random busy zones with empty gaps between them"

    def build_zones(
        self,
        start: datetime,
        duration_in_seconds: int,
        total: int,
        rng: random.Random,
    ) -> list[DataZone]:
        """Return every candidate zone in time order, gaps included.

        Raises:
            CountOverflowError: if the chosen zones cannot hold ``total`` rows
                at ``MAX_COUNT`` rows per second.
        """
        zone_count = rng.randint(MIN_ZONES, MAX_ZONES)
        # Very short windows cannot hold that many one-second candidates.
        candidate_count = min(self.generation_factor * zone_count, duration_in_seconds)
        zone_count = min(zone_count, candidate_count)

        zones = partition_window(start, duration_in_seconds, candidate_count)
        occupied = [zones[i] for i in rng.sample(range(candidate_count), zone_count)]
        capacities = [zone.span_seconds * MAX_COUNT for zone in occupied]
        totals = allocate_zone_totals(total, capacities, rng)
        for zone, zone_total in zip(occupied, totals):
            zone.allocated_count = zone_total

        logger.debug(
            "Placed %d zones on %d candidates: %s",
            zone_count,
            candidate_count,
            [z.allocated_count for z in zones],
        )
        return zones

    def distribute(
        self,
        start: datetime,
        duration_in_seconds: int,
        total: int,
        rng: random.Random,
    ) -> list[DataPoint]:
        datapoints: list[DataPoint] = []
        for zone in self.build_zones(start, duration_in_seconds, total, rng):
            if zone.allocated_count > 0:
                datapoints.extend(
                    fill_even(zone.start_time, zone.span_seconds, zone.allocated_count, rng)
                )
        return datapoints
