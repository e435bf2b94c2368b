"""Load and merge configuration from .housestyle.toml, CLI flags, and env vars."""

from __future__ import annotations

import dataclasses
import os
import sys
from pathlib import Path
from typing import Any, Dict, Optional

if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib

from housestyle.config.schema import (
    OUTPUT_FORMATS,
    CheckConfig,
    HouseStyleConfig,
    OutputConfig,
    RulesConfig,
)

CONFIG_FILENAME = ".housestyle.toml"


class ConfigError(Exception):
    """Raised when config is malformed or unreadable."""


def find_config_file(root: Path, override: Optional[str] = None) -> Optional[Path]:
    """Locate the config file. *override* takes precedence."""
    if override:
        p = Path(override)
        if not p.is_file():
            raise ConfigError(f"Config file not found: {override}")
        return p
    candidate = root / CONFIG_FILENAME
    return candidate if candidate.is_file() else None


def _parse_toml(path: Path) -> Dict[str, Any]:
    try:
        with open(path, "rb") as f:
            return tomllib.load(f)
    except (OSError, tomllib.TOMLDecodeError) as exc:
        raise ConfigError(f"Failed to parse {path}: {exc}") from exc


def _merge_env_overrides(cfg: HouseStyleConfig) -> None:
    """Apply HOUSESTYLE_* environment variable overrides."""
    if val := os.environ.get("HOUSESTYLE_FORMAT"):
        if val in OUTPUT_FORMATS:
            cfg.output.format = val  # type: ignore[assignment]
    if val := os.environ.get("HOUSESTYLE_CONTEXT"):
        try:
            cfg.check.context_window = max(0, int(val))
        except ValueError:
            pass
    if val := os.environ.get("HOUSESTYLE_DISABLE_RULES"):
        cfg.rules.disable.extend(r.strip() for r in val.split(",") if r.strip())
    if os.environ.get("HOUSESTYLE_NO_TENTATIVE") == "1":
        cfg.check.include_tentative = False


def _build_section(data: Dict[str, Any], cls: type, section: str):
    """Build a dataclass from a TOML section dict, ignoring unknown keys."""
    valid_fields = {f.name for f in dataclasses.fields(cls)}
    raw = data.get(section, {})
    if not isinstance(raw, dict):
        raise ConfigError(f"[{section}] must be a table")
    filtered = {k: v for k, v in raw.items() if k in valid_fields}
    return cls(**filtered)


def load_config(
    root: Path,
    config_override: Optional[str] = None,
) -> HouseStyleConfig:
    """Load, validate, and return a HouseStyleConfig."""
    config_path = find_config_file(root, config_override)

    if config_path is None:
        cfg = HouseStyleConfig()
    else:
        raw = _parse_toml(config_path)
        cfg = HouseStyleConfig(
            version=raw.get("version", "1.0"),
            check=_build_section(raw, CheckConfig, "check"),
            output=_build_section(raw, OutputConfig, "output"),
            rules=_build_section(raw, RulesConfig, "rules"),
        )
        if cfg.output.format not in OUTPUT_FORMATS:
            raise ConfigError(f"Unknown output format: {cfg.output.format}")

    _merge_env_overrides(cfg)
    return cfg
