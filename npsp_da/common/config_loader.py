"""Configuration loading and validation."""

from __future__ import annotations

from pathlib import Path
from typing import Any

from npsp_da.common.constants import (
    DEFAULT_DATABASE,
    DEFAULT_LOOKBACK_MONTHS,
    DEFAULT_MAIN_URL,
    DEFAULT_SEARCH_URL_TEMPLATE,
)
from npsp_da.common.errors import ConfigError
from npsp_da.common.fs import read_yaml
from npsp_da.common.schema import validate_scraper_config

CONFIG_FILENAME = "npsp.yml"


def default_config() -> dict:
    return {
        "portal": {
            "main_url": DEFAULT_MAIN_URL,
            "search_url_template": DEFAULT_SEARCH_URL_TEMPLATE,
        },
        "search": {"lookback_months": DEFAULT_LOOKBACK_MONTHS},
        "storage": {"database": DEFAULT_DATABASE},
        "http": {"connect_timeout": 20.0, "read_timeout": 120.0},
    }


def _deep_merge(base: Any, overlay: Any) -> Any:
    if isinstance(base, dict) and isinstance(overlay, dict):
        merged = dict(base)
        for key, value in overlay.items():
            if key in merged:
                merged[key] = _deep_merge(merged[key], value)
            else:
                merged[key] = value
        return merged
    return overlay


def _read_mapping(path: Path) -> dict:
    payload = read_yaml(path)
    if payload is None:
        return {}
    if not isinstance(payload, dict):
        raise ConfigError(f"Config file {path} must contain a mapping")
    return payload


def load_config(
    config_dir: Path,
    *,
    allow_unknown: bool = False,
    overlay_config_dir: Path | None = None,
) -> dict:
    """Load ``npsp.yml`` from ``config_dir`` over the built-in defaults.

    A missing base file falls back to the defaults; an overlay file, when
    present, is deep-merged on top.
    """
    cfg = default_config()
    base_path = config_dir / CONFIG_FILENAME
    if base_path.exists():
        cfg = _deep_merge(cfg, _read_mapping(base_path))

    if overlay_config_dir is not None:
        overlay_path = overlay_config_dir / CONFIG_FILENAME
        if overlay_path.exists():
            cfg = _deep_merge(cfg, _read_mapping(overlay_path))

    return validate_scraper_config(cfg, allow_unknown=allow_unknown)
