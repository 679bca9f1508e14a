from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml

from dcos_checks.config import Settings, settings
from dcos_checks.models import CLIConfigFlags, ConfigFile


def load_config_file(path: Path) -> ConfigFile:
    if not path.exists():
        raise FileNotFoundError(f"Missing config file at {path}")

    try:
        data = yaml.safe_load(path.read_text()) or {}
    except yaml.YAMLError as exc:
        raise ValueError(f"Config file {path} is not valid YAML: {exc}") from exc
    if not isinstance(data, dict):
        raise ValueError(f"Config file {path} must contain a mapping")
    return ConfigFile.model_validate(data)


def build_config(
    flags: dict[str, Any],
    config_path: Path | None = None,
    env: Settings | None = None,
) -> CLIConfigFlags:
    """
    Merge defaults, the config file, the environment and explicit flags,
    later sources winning. Flags left at None are treated as unset.
    """
    env = env or settings
    merged: dict[str, Any] = {}

    if config_path is None and env.DCOS_CHECKS_CONFIG:
        config_path = Path(env.DCOS_CHECKS_CONFIG)
    if config_path is not None:
        merged.update(load_config_file(config_path).model_dump(exclude_none=True))

    merged.update(env.overrides())
    merged.update({k: v for k, v in flags.items() if v is not None})

    return CLIConfigFlags.model_validate(merged)
