"""Text histogram of a distribution, one line per data point."""

from __future__ import annotations

from volgen.models.datapoint import DataPoint


def render_histogram(datapoints: list[DataPoint], width: int = 60) -> list[str]:
    """Render ``timestamp | count | bar`` lines with bars scaled to ``width``."""
    if not datapoints:
        return []
    peak = max(dp.count for dp in datapoints)
    count_width = len(str(peak))
    lines = []
    for dp in datapoints:
        bar_len = round(dp.count / peak * width) if peak else 0
        # Any non-zero count shows at least one mark.
        if dp.count and not bar_len:
            bar_len = 1
        lines.append(f"{dp.timestamp.isoformat()} | {dp.count:>{count_width}} | {'.' * bar_len}")
    return lines
