from pathlib import Path

import pytest

from npsp_da.common.config_loader import default_config, load_config
from npsp_da.common.constants import DEFAULT_MAIN_URL, DEFAULT_SEARCH_URL_TEMPLATE
from npsp_da.common.errors import ConfigError
from npsp_da.common.schema import validate_scraper_config

REPO_CONFIG_DIR = Path(__file__).resolve().parents[2] / "config"


def test_load_config_from_repo_config_dir():
    cfg = load_config(REPO_CONFIG_DIR)
    assert cfg["portal"]["main_url"] == DEFAULT_MAIN_URL
    assert cfg["portal"]["search_url_template"] == DEFAULT_SEARCH_URL_TEMPLATE
    assert cfg["search"]["lookback_months"] == 1
    assert cfg["storage"]["database"] == "data.sqlite"


def test_load_config_without_files_uses_defaults(tmp_path: Path):
    assert load_config(tmp_path) == default_config()


def test_load_config_applies_overlay_values(tmp_path: Path):
    base = tmp_path / "base"
    overlay = tmp_path / "overlay"
    base.mkdir()
    overlay.mkdir()
    (base / "npsp.yml").write_text(
        """search:
  lookback_months: 2
storage:
  database: base.sqlite
""",
        encoding="utf-8",
    )
    (overlay / "npsp.yml").write_text(
        """storage:
  database: overlay.sqlite
http:
  user_agent: overlay-agent
""",
        encoding="utf-8",
    )

    cfg = load_config(base, overlay_config_dir=overlay)

    assert cfg["search"]["lookback_months"] == 2
    assert cfg["storage"]["database"] == "overlay.sqlite"
    assert cfg["http"]["user_agent"] == "overlay-agent"
    assert cfg["http"]["read_timeout"] == 120.0


def test_load_config_ignores_empty_overlay_file(tmp_path: Path):
    overlay = tmp_path / "overlay"
    overlay.mkdir()
    (overlay / "npsp.yml").write_text("", encoding="utf-8")

    assert load_config(tmp_path, overlay_config_dir=overlay) == default_config()


def test_load_config_rejects_non_mapping_file(tmp_path: Path):
    (tmp_path / "npsp.yml").write_text("- not\n- a\n- mapping\n", encoding="utf-8")
    with pytest.raises(ConfigError):
        load_config(tmp_path)


def test_load_config_rejects_unknown_keys(tmp_path: Path):
    (tmp_path / "npsp.yml").write_text("search:\n  lookback_months: 1\n  pages: 3\n", encoding="utf-8")
    with pytest.raises(ConfigError):
        load_config(tmp_path)
    assert load_config(tmp_path, allow_unknown=True)["search"]["pages"] == 3


@pytest.mark.parametrize("lookback", [0, -1, "1", True])
def test_validate_rejects_bad_lookback(lookback):
    cfg = default_config()
    cfg["search"]["lookback_months"] = lookback
    with pytest.raises(ConfigError):
        validate_scraper_config(cfg)


def test_validate_requires_date_placeholders():
    cfg = default_config()
    cfg["portal"]["search_url_template"] = "https://portal.example/search?dateFrom={date_from}"
    with pytest.raises(ConfigError, match="date_to"):
        validate_scraper_config(cfg)


def test_validate_rejects_non_positive_timeouts():
    cfg = default_config()
    cfg["http"]["connect_timeout"] = 0
    with pytest.raises(ConfigError):
        validate_scraper_config(cfg)
