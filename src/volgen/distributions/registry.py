"""Maps model name → distributor class and dispatches generation requests."""

from __future__ import annotations

import logging
import random
from datetime import datetime

from volgen.distributions.base import BaseDistributor
from volgen.distributions.early_fill import EarlyFillDistributor
from volgen.distributions.even import EvenDistributor
from volgen.distributions.sparse_fill import SparseFillDistributor
from volgen.errors import UnsupportedModelError, ZeroDurationError
from volgen.models.datapoint import DataPoint

logger = logging.getLogger(__name__)

DISTRIBUTOR_REGISTRY: dict[str, type[BaseDistributor]] = {
    "even": EvenDistributor,
    "early_fill": EarlyFillDistributor,
    "sparse_fill": SparseFillDistributor,
}


def get_distributor(model: str) -> BaseDistributor:
    """Get an instance of the distributor for ``model`` (case-insensitive)."""
    cls = DISTRIBUTOR_REGISTRY.get(model.lower())
    if cls is None:
        raise UnsupportedModelError(model, list(DISTRIBUTOR_REGISTRY.keys()))
    return cls()


def distribute(
    model: str,
    start: datetime,
    duration_in_seconds: int,
    total: int,
    rng: random.Random,
) -> list[DataPoint]:
    """Run the named distributor over a window.

    Raises:
        UnsupportedModelError: if ``model`` is not registered.
        ZeroDurationError: if the window is shorter than one second.
    """
    distributor = get_distributor(model)
    if duration_in_seconds <= 0:
        raise ZeroDurationError(duration_in_seconds)

    logger.debug(
        "Distributing %d rows over %ds with model %s", total, duration_in_seconds, distributor.name
    )
    return distributor.distribute(start, duration_in_seconds, total, rng)
