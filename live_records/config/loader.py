from __future__ import annotations

import json
from pathlib import Path
from typing import Any
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

import jsonschema
import yaml
from jsonschema.exceptions import ValidationError

from ..models.config_models import ExtractConfig, RecordLayout

"""Config loader.

Responsibilities:
- Load YAML config (default config/extract.yml)
- Validate against config_schema.json (shipped next to this module)
- Apply defaults (timezone=UTC, output_directory=./output, sheet names)
"""

__all__ = [
    "ConfigError",
    "DEFAULT_CONFIG_PATH",
    "SCHEMA_PATH",
    "load_config",
]

DEFAULT_CONFIG_PATH = Path("config/extract.yml")
SCHEMA_PATH = Path(__file__).parent / "config_schema.json"


class ConfigError(Exception):
    pass


def _validate_config_schema(data: dict[str, Any]) -> None:
    """Validate config data against JSON schema.

    Raises:
        ConfigError: If the schema file is missing or not valid JSON, or the
            config data fails schema validation (missing required keys, wrong
            types, unknown keys).
    """
    if not SCHEMA_PATH.exists():
        raise ConfigError(f"config schema not found: {SCHEMA_PATH}")

    try:
        schema = json.loads(SCHEMA_PATH.read_text(encoding="utf-8"))
        jsonschema.validate(data, schema)
    except json.JSONDecodeError as e:
        raise ConfigError(f"invalid schema file: {e}") from e
    except ValidationError as e:
        raise ConfigError(f"config validation failed: {e.message}") from e


def _validate_timezone(name: str) -> str:
    try:
        ZoneInfo(name)
    except (ZoneInfoNotFoundError, ValueError) as e:
        raise ConfigError(f"config validation failed: unknown timezone '{name}'") from e
    return name


def load_config(path: Path = DEFAULT_CONFIG_PATH) -> ExtractConfig:
    if not path.exists():
        raise ConfigError(f"config file not found: {path}")
    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
    except yaml.YAMLError as e:
        raise ConfigError(f"invalid yaml: {e}") from e
    if not isinstance(data, dict):
        raise ConfigError("config validation failed: top level must be a mapping")

    _validate_config_schema(data)

    defaults = ExtractConfig(source_directory=data["source_directory"])
    return ExtractConfig(
        source_directory=data["source_directory"],
        output_directory=data.get("output_directory", defaults.output_directory),
        timezone=_validate_timezone(data.get("timezone", defaults.timezone)),
        records_sheet=data.get("records_sheet", defaults.records_sheet),
        album_sheet=data.get("album_sheet", defaults.album_sheet),
        keep_na_strings=tuple(data.get("keep_na_strings", ())),
        layout=RecordLayout.from_mapping(data.get("layout")),
    )
