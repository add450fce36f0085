#!/usr/bin/env python3
"""Basic example: generate volume distributions programmatically.

This script demonstrates using the volgen API directly (without the CLI)
to build a config, generate each distribution model over the same window,
and inspect the results.
"""

from volgen.distributions.registry import DISTRIBUTOR_REGISTRY
from volgen.export.histogram import render_histogram
from volgen.generation.engine import generate
from volgen.models.config import GenerationConfig


def main() -> None:
    for model in DISTRIBUTOR_REGISTRY:
        # 2000 entries over 2 minutes from a fixed start, deterministic seed
        config = GenerationConfig(
            number_of_entries=2000,
            use_now_as_timestamp=False,
            start_timestamp="2022-01-01T00:00:00.000+00:00",
            generation_duration="2m",
            distribution_by=model,
        )
        result = generate(config, seed=42)

        print(f"Model:       {result.model}")
        print(f"Window:      {result.window.start.isoformat()} -> {result.window.end.isoformat()}")
        print(f"Data points: {len(result.datapoints)}")
        print(f"Total rows:  {result.total_count}")
        print()
        for line in render_histogram(result.datapoints, width=40)[:20]:
            print(line)
        print()


if __name__ == "__main__":
    main()
