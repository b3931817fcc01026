"""Minimal strict schemas for YAML config validation."""

from __future__ import annotations

from npsp_da.common.errors import ConfigError


def _assert_mapping(obj: object, ctx: str) -> dict:
    if not isinstance(obj, dict):
        raise ConfigError(f"{ctx} must be a mapping")
    return obj


def _assert_required_keys(obj: dict, required: set[str], ctx: str) -> None:
    missing = required - set(obj)
    if missing:
        missing_str = ", ".join(sorted(missing))
        raise ConfigError(f"Missing keys in {ctx}: {missing_str}")


def _assert_no_unknown_keys(obj: dict, known: set[str], ctx: str, allow_unknown: bool) -> None:
    if allow_unknown:
        return
    unknown = set(obj) - known
    if unknown:
        unknown_str = ", ".join(sorted(unknown))
        raise ConfigError(f"Unknown keys in {ctx}: {unknown_str}")


def _assert_positive_number(value: object, ctx: str) -> None:
    if isinstance(value, bool) or not isinstance(value, (int, float)) or value <= 0:
        raise ConfigError(f"{ctx} must be a positive number")


def validate_scraper_config(cfg: object, *, allow_unknown: bool = False) -> dict:
    cfg = _assert_mapping(cfg, "scraper config")
    top_required = {"portal", "search", "storage", "http"}
    _assert_required_keys(cfg, top_required, "scraper config")
    _assert_no_unknown_keys(cfg, top_required, "scraper config", allow_unknown)

    portal = _assert_mapping(cfg["portal"], "portal")
    _assert_required_keys(portal, {"main_url", "search_url_template"}, "portal")
    _assert_no_unknown_keys(portal, {"main_url", "search_url_template"}, "portal", allow_unknown)
    for placeholder in ("{date_from}", "{date_to}"):
        if placeholder not in str(portal["search_url_template"]):
            raise ConfigError(f"portal.search_url_template is missing {placeholder}")

    search = _assert_mapping(cfg["search"], "search")
    _assert_required_keys(search, {"lookback_months"}, "search")
    _assert_no_unknown_keys(search, {"lookback_months"}, "search", allow_unknown)
    lookback = search["lookback_months"]
    if isinstance(lookback, bool) or not isinstance(lookback, int) or lookback < 1:
        raise ConfigError("search.lookback_months must be a positive integer")

    storage = _assert_mapping(cfg["storage"], "storage")
    _assert_required_keys(storage, {"database"}, "storage")
    _assert_no_unknown_keys(storage, {"database"}, "storage", allow_unknown)

    http = _assert_mapping(cfg["http"], "http")
    _assert_required_keys(http, {"connect_timeout", "read_timeout"}, "http")
    _assert_no_unknown_keys(http, {"connect_timeout", "read_timeout", "user_agent"}, "http", allow_unknown)
    _assert_positive_number(http["connect_timeout"], "http.connect_timeout")
    _assert_positive_number(http["read_timeout"], "http.read_timeout")

    return cfg
