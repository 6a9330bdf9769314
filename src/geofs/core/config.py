"""Facade configuration files.

A config file is a flat YAML or JSON mapping whose keys mirror the
`FacadeContext` fields. Unknown keys are rejected.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from .context import FacadeContext
from .errors import ConfigError

FACADE_CONFIG_SCHEMA: dict[str, Any] = {
    "$schema": "https://json-schema.org/draft/2020-12/schema",
    "type": "object",
    "additionalProperties": False,
    "properties": {
        "input_root": {"type": "string", "minLength": 1},
        "encoding": {"type": "string", "minLength": 1},
        "run_id": {"type": "string", "minLength": 1},
        "log_json": {"type": "boolean"},
        "log_level": {"enum": ["debug", "info", "warning", "error"]},
    },
}


def _parse(path: Path, text: str) -> Any:
    if path.suffix in {".yaml", ".yml"}:
        import yaml

        try:
            return yaml.safe_load(text)
        except yaml.YAMLError as exc:
            raise ConfigError(f"unable to parse config {path}: {exc}", path=str(path)) from exc
    try:
        return json.loads(text)
    except json.JSONDecodeError as exc:
        raise ConfigError(f"unable to parse config {path}: {exc}", path=str(path)) from exc


def validate_config(payload: Any, source: str = "<memory>") -> None:
    import jsonschema

    try:
        jsonschema.validate(payload, FACADE_CONFIG_SCHEMA)
    except jsonschema.ValidationError as exc:
        pointer = "/".join(str(p) for p in exc.absolute_path)
        loc = pointer or "<root>"
        raise ConfigError(f"{source}: schema validation failed at {loc}: {exc.message}", path=source) from exc


def load_context(path: Path | str) -> FacadeContext:
    cfg_path = Path(path)
    try:
        text = cfg_path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise ConfigError(f"unable to read config {cfg_path}: {exc}", path=str(cfg_path)) from exc
    payload = _parse(cfg_path, text)
    if payload is None:
        payload = {}
    validate_config(payload, str(cfg_path))
    return FacadeContext.from_args(**payload)
