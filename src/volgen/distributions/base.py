"""Abstract base class for distribution models."""

from __future__ import annotations

import random
from abc import ABC, abstractmethod
from datetime import datetime

from volgen.models.datapoint import DataPoint


class BaseDistributor(ABC):
    """Spreads a total row count over the seconds of a window."""

    @property
    @abstractmethod
    def name(self) -> str:
        """Short identifier used in configuration (e.g., 'even')."""

    @property
    @abstractmethod
    def description(self) -> str:
        """Human-readable description of the resulting shape."""

    @abstractmethod
    def distribute(
        self,
        start: datetime,
        duration_in_seconds: int,
        total: int,
        rng: random.Random,
    ) -> list[DataPoint]:
        """Return data points whose counts sum to exactly ``total``.

        ``duration_in_seconds`` is at least 1; the dispatcher checks it.
        """
