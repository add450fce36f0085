"""Helpers shared by the distributors: base allocation and perturbation.

Both work on plain lists of integer counts so the same code serves
per-second slots and sparse-fill zone totals. Limits are given either as
one int for every slot or as a sequence with one limit per slot.
"""

from __future__ import annotations

import logging
import random
from collections.abc import Sequence

from volgen.errors import CountOverflowError

logger = logging.getLogger(__name__)

Limits = int | Sequence[int]


def _limit_at(limits: Limits, index: int) -> int:
    return limits if isinstance(limits, int) else limits[index]


def pick_slot_pair(bound: int, rng: random.Random) -> tuple[int, int]:
    """Pick two distinct indices in ``range(bound)``."""
    if bound < 2:
        raise ValueError(f"need at least 2 slots to pick a pair, got {bound}")
    first, second = rng.sample(range(bound), 2)
    return first, second


def fit_to_limits(counts: list[int], limits: Limits) -> None:
    """Clamp every count to its limit, in place, and hand the excess to earlier slots.

    The excess is given back starting from the last slot with headroom, so
    a remainder piled on the final slot spreads backwards. The sum of
    ``counts`` never changes.

    Raises:
        CountOverflowError: if the counts cannot fit under the limits at all.
    """
    total = sum(counts)
    capacity = sum(_limit_at(limits, i) for i in range(len(counts)))
    if total > capacity:
        raise CountOverflowError(
            f"{total} rows do not fit in {len(counts)} slots holding {capacity} at most; "
            "lower number_of_entries or lengthen generation_duration"
        )

    excess = 0
    for i, count in enumerate(counts):
        limit = _limit_at(limits, i)
        if count > limit:
            excess += count - limit
            counts[i] = limit
    for i in reversed(range(len(counts))):
        if not excess:
            break
        moved = min(_limit_at(limits, i) - counts[i], excess)
        counts[i] += moved
        excess -= moved


def base_allocation(total: int, slots: int, limits: Limits | None = None) -> list[int]:
    """Spread ``total`` flat across ``slots``; the last slot takes the remainder.

    With ``limits`` the result is passed through ``fit_to_limits``.
    """
    base = total // slots
    counts = [base] * slots
    counts[-1] = total - base * (slots - 1)
    if limits is not None:
        fit_to_limits(counts, limits)
    return counts


def perturb(
    counts: list[int],
    iterations: int,
    rng: random.Random,
    ceiling: Limits | None = None,
) -> int:
    """Randomly move counts between pairs of slots, in place.

    Each iteration takes a delta in ``[1, counts[first])`` from ``first``
    and gives it to ``second``. Sources holding fewer than 2 are skipped,
    so no count ever drops below 1 through a move. When ``ceiling`` is
    set the delta is clamped to the receiver's headroom. The sum of
    ``counts`` never changes.

    Returns the number of moves actually made.
    """
    if len(counts) < 2:
        return 0

    moves = 0
    for _ in range(iterations):
        first, second = pick_slot_pair(len(counts), rng)
        source = counts[first]
        if source < 2:
            continue
        delta = rng.randrange(1, source)
        if ceiling is not None:
            delta = min(delta, _limit_at(ceiling, second) - counts[second])
            if delta <= 0:
                continue
        counts[first] -= delta
        counts[second] += delta
        moves += 1

    logger.debug("Perturbation made %d of %d moves over %d slots", moves, iterations, len(counts))
    return moves
