"""Load generation config from TOML, back-filled from packaged defaults.

A custom config only needs the keys it changes. Anything it leaves out
comes from the defaults file; ``[[exporter]]`` tables are matched by
name so a custom file can enable one exporter without restating the rest.
"""

from __future__ import annotations

import logging
import tomllib
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from volgen.errors import ConfigError
from volgen.models.config import GenerationConfig

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = Path(__file__).resolve().parent / "defaults" / "config.toml"


def read_toml(path: Path) -> dict[str, Any]:
    """Read a TOML file into a dict."""
    try:
        with open(path, "rb") as f:
            return tomllib.load(f)
    except FileNotFoundError as exc:
        raise ConfigError(f"config file not found: {path}") from exc
    except tomllib.TOMLDecodeError as exc:
        raise ConfigError(f"invalid TOML in {path}: {exc}") from exc


def _back_fill_exporter(custom: dict[str, Any], default: dict[str, Any]) -> dict[str, Any]:
    result = {**default, **custom}
    fields = dict(default.get("fields") or {})
    fields.update(custom.get("fields") or {})
    result["fields"] = fields
    return result


def back_fill_exporters(
    custom: list[dict[str, Any]],
    defaults: list[dict[str, Any]],
) -> list[dict[str, Any]]:
    """Merge exporter tables by name; default-only exporters are appended."""
    defaults_by_name = {e.get("name"): e for e in defaults}
    merged: list[dict[str, Any]] = []
    seen: set[str] = set()
    for exporter in custom:
        name = exporter.get("name")
        seen.add(name)
        merged.append(_back_fill_exporter(exporter, defaults_by_name.get(name, {})))
    for exporter in defaults:
        if exporter.get("name") not in seen:
            merged.append(_back_fill_exporter({}, exporter))
    return merged


def back_fill(custom: dict[str, Any], defaults: dict[str, Any]) -> dict[str, Any]:
    """Fill every key missing from ``custom`` with the value from ``defaults``."""
    result = dict(defaults)
    for key, value in custom.items():
        if key == "exporter":
            continue
        result[key] = value
    result["exporter"] = back_fill_exporters(
        custom.get("exporter", []), defaults.get("exporter", [])
    )
    return result


def load_config(
    config_path: Path | None = None,
    defaults_path: Path = DEFAULT_CONFIG_PATH,
    overrides: dict[str, Any] | None = None,
) -> GenerationConfig:
    """Load, back-fill and validate a generation config.

    Args:
        config_path: Custom TOML file; only the defaults are used when None.
        defaults_path: TOML file that supplies missing keys.
        overrides: Values that win over both files (None values are ignored).

    Raises:
        ConfigError: if a file is missing or invalid, or validation fails.
    """
    data = read_toml(defaults_path)
    if config_path is not None:
        data = back_fill(read_toml(config_path), data)
        logger.debug("Back-filled %s from %s", config_path, defaults_path)

    for key, value in (overrides or {}).items():
        if value is not None:
            data[key] = value

    try:
        return GenerationConfig.model_validate(data)
    except ValidationError as exc:
        raise ConfigError(f"invalid configuration: {exc}") from exc
