"""Print generated data points to the console.

By default only the first and last data points are printed in full; in
between, the running row total is reported every ``progress_every``
points. Verbose mode prints every data point.
"""

from __future__ import annotations

import logging

from rich.console import Console

from volgen.errors import ConfigError
from volgen.generation.engine import GenerationResult
from volgen.models.config import ExporterConfig, GenerationConfig
from volgen.models.datapoint import DataPoint

logger = logging.getLogger(__name__)

DEFAULT_PROGRESS_EVERY = 100


def _format_point(dp: DataPoint) -> str:
    return f"{dp.timestamp.isoformat()}  rows={dp.count}"


class StdoutExporter:
    """Writes a generation result to a rich console."""

    def __init__(
        self,
        console: Console,
        verbose: bool = False,
        fields: dict[str, str] | None = None,
    ) -> None:
        self.console = console
        self.verbose = verbose
        fields = fields or {}
        try:
            progress_every = int(fields.get("progress_every", DEFAULT_PROGRESS_EVERY))
        except ValueError as exc:
            raise ConfigError(f"stdout exporter: progress_every must be an integer: {exc}") from exc
        self.progress_every = max(1, progress_every)

    def export(self, result: GenerationResult) -> None:
        points = result.datapoints
        if not points:
            self.console.print("[yellow]No data points generated.[/yellow]")
            return

        last_index = len(points) - 1
        running = 0
        for i, dp in enumerate(points):
            running += dp.count
            if self.verbose or i in (0, last_index):
                self.console.print(_format_point(dp))
            elif (i + 1) % self.progress_every == 0:
                self.console.print(f"  ... {running} rows after {i + 1} data points")


EXPORTER_REGISTRY: dict[str, type[StdoutExporter]] = {
    "stdout": StdoutExporter,
}


def build_exporter(config: ExporterConfig, console: Console) -> StdoutExporter | None:
    """Instantiate the exporter named in ``config``, or None if it is unknown."""
    cls = EXPORTER_REGISTRY.get(config.name)
    if cls is None:
        logger.warning(
            "Exporter '%s' is not supported, skipping. Available: %s",
            config.name,
            list(EXPORTER_REGISTRY.keys()),
        )
        return None
    return cls(console, verbose=config.verbose, fields=config.fields)


def build_exporters(config: GenerationConfig, console: Console) -> list[StdoutExporter]:
    """Instantiate every enabled exporter in ``config``."""
    exporters = [build_exporter(e, console) for e in config.enabled_exporters()]
    return [e for e in exporters if e is not None]
