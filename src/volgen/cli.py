"""Typer CLI for volgen: generate and inspect synthetic volume distributions."""

from __future__ import annotations

from pathlib import Path
from typing import Annotated

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from volgen.config_loader import DEFAULT_CONFIG_PATH, load_config
from volgen.distributions.registry import DISTRIBUTOR_REGISTRY
from volgen.errors import VolgenError
from volgen.export.histogram import render_histogram
from volgen.export.stdout import build_exporters
from volgen.generation.engine import generate
from volgen.log import configure_logging

app = typer.Typer(
    name="volgen",
    help="Synthetic row-volume generator: spread N entries over a time window.",
    no_args_is_help=True,
)
console = Console()

ConfigOption = Annotated[
    Path | None, typer.Option("-c", "--config", help="Custom TOML config")
]
DefaultsOption = Annotated[
    Path, typer.Option("--defaults", help="TOML file supplying missing keys")
]


@app.command("generate")
def generate_cmd(
    config: ConfigOption = None,
    defaults: DefaultsOption = DEFAULT_CONFIG_PATH,
    model: Annotated[
        str | None, typer.Option("-m", "--model", help="Distribution model")
    ] = None,
    entries: Annotated[
        int | None, typer.Option("-n", "--entries", help="Number of entries")
    ] = None,
    duration: Annotated[
        str | None, typer.Option("-d", "--duration", help="Window length, e.g. 10m")
    ] = None,
    start: Annotated[
        str | None, typer.Option("--start", help="Fixed start timestamp (disables now)")
    ] = None,
    timestamp_format: Annotated[
        str | None, typer.Option("--format", help="strptime format of --start")
    ] = None,
    seed: Annotated[
        int | None, typer.Option("--seed", help="Random seed")
    ] = None,
    histogram: Annotated[
        bool, typer.Option("--histogram", help="Print a text histogram")
    ] = False,
    log_level: Annotated[
        str, typer.Option("--log-level", help="Logging level")
    ] = "INFO",
) -> None:
    """Generate a distribution and run the enabled exporters."""
    configure_logging(log_level)

    overrides = {
        "distribution_by": model,
        "number_of_entries": entries,
        "generation_duration": duration,
        "start_timestamp": start,
        "timestamp_format": timestamp_format,
        "use_now_as_timestamp": False if start is not None else None,
    }
    try:
        cfg = load_config(config, defaults, overrides)
        result = generate(cfg, seed=seed)
        exporters = build_exporters(cfg, console)
    except VolgenError as exc:
        console.print(f"[red]{escape(str(exc))}[/red]")
        raise typer.Exit(1) from exc

    for exporter in exporters:
        exporter.export(result)

    if histogram:
        console.print()
        for line in render_histogram(result.datapoints):
            console.print(line, markup=False, highlight=False)

    # Summary
    console.print()
    table = Table(title="Generation Summary")
    table.add_column("Metric", style="bold")
    table.add_column("Value", justify="right")
    table.add_row("Model", result.model)
    table.add_row("Window start", result.window.start.isoformat())
    table.add_row("Window end", result.window.end.isoformat())
    table.add_row("Window seconds", str(result.duration_in_seconds))
    table.add_row("Requested entries", str(cfg.number_of_entries))
    table.add_row("Generated entries", str(result.total_count))
    table.add_row("Data points", str(len(result.datapoints)))
    table.add_row("Seed", str(result.seed))
    console.print(table)


@app.command("list-models")
def list_models() -> None:
    """List available distribution models."""
    table = Table(title="Available Models")
    table.add_column("Name", style="bold")
    table.add_column("Description")

    for name, cls in DISTRIBUTOR_REGISTRY.items():
        table.add_row(name, cls().description)

    console.print(table)


@app.command("show-config")
def show_config(
    config: ConfigOption = None,
    defaults: DefaultsOption = DEFAULT_CONFIG_PATH,
) -> None:
    """Print the merged, validated configuration as JSON."""
    try:
        cfg = load_config(config, defaults)
    except VolgenError as exc:
        console.print(f"[red]{escape(str(exc))}[/red]")
        raise typer.Exit(1) from exc
    console.print_json(cfg.model_dump_json(by_alias=True))
