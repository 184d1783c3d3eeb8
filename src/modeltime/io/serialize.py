"""Serialization for configs and period schedule export."""

from __future__ import annotations

import csv
import hashlib
import io
import json
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from modeltime.config.schema import ModeltimeConfig
from modeltime.core.modeltime import Modeltime
from modeltime.utils.exceptions import ConfigError

# Configuration files may nest the fields under this key.
CONFIG_KEY = "modeltime"


def compute_config_hash(config: ModeltimeConfig) -> str:
    """Compute a deterministic SHA-256 hash of a config.

    Uses canonical JSON (sorted keys, no whitespace) so the same
    logical config always produces the same hash.
    """
    canonical = json.dumps(config.model_dump(), sort_keys=True, separators=(",", ":"))
    return hashlib.sha256(canonical.encode()).hexdigest()


def dump_config(config: ModeltimeConfig) -> str:
    """Serialize a config to a JSON string."""
    return json.dumps({CONFIG_KEY: config.model_dump()}, indent=2)


def config_from_data(data: Any) -> ModeltimeConfig:
    """Validate parsed file content into a ModeltimeConfig.

    Raises:
        ConfigError: If the content is not a mapping or fails validation.
    """
    if isinstance(data, dict) and CONFIG_KEY in data:
        data = data[CONFIG_KEY]
    if not isinstance(data, dict):
        raise ConfigError(f"Expected a mapping of modeltime fields, got {type(data).__name__}")
    try:
        return ModeltimeConfig.model_validate(data)
    except ValidationError as e:
        raise ConfigError(f"Invalid modeltime configuration:\n{e}") from e


def load_config(json_str: str) -> ModeltimeConfig:
    """Deserialize a config from a JSON string."""
    try:
        data = json.loads(json_str)
    except json.JSONDecodeError as e:
        raise ConfigError(f"Malformed JSON configuration: {e}") from e
    return config_from_data(data)


def read_config_file(path: Path) -> ModeltimeConfig:
    """Read a config from a ``.yaml``/``.yml`` or JSON file.

    Raises:
        ConfigError: If the file cannot be read or decoded as UTF-8, or its
            content is not a valid configuration.
    """
    if path.suffix.lower() in (".yaml", ".yml"):
        try:
            with open(path, encoding="utf-8") as f:
                data = yaml.safe_load(f)
        except (OSError, UnicodeDecodeError) as e:
            raise ConfigError(f"Cannot read configuration file {path}: {e}") from e
        except yaml.YAMLError as e:
            raise ConfigError(f"Malformed YAML configuration in {path}: {e}") from e
        return config_from_data(data)
    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise ConfigError(f"Cannot read configuration file {path}: {e}") from e
    return load_config(text)


def dump_schedule_csv(modeltime: Modeltime) -> str:
    """Export the period schedule as CSV.

    Returns:
        CSV string with Period, Year, TimeStep columns, one row per period.
    """
    output = io.StringIO()
    writer = csv.writer(output)
    writer.writerow(["Period", "Year", "TimeStep"])
    for period, (year, step) in enumerate(
        zip(modeltime.model_period_to_year, modeltime.period_to_time_step)
    ):
        writer.writerow([period, int(year), int(step)])
    return output.getvalue()
