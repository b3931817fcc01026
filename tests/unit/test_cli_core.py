from npsp_da.cli import parse_args


def test_parse_args_defaults():
    args = parse_args([])
    assert args.config_dir == "./config"
    assert args.data_dir == "./data"
    assert args.overlay_config_dir is None
    assert args.run_date is None
    assert args.log_level == "INFO"


def test_parse_args_accepts_overlay_config_dir():
    args = parse_args(["--overlay-config-dir", "config/live", "--run-date", "2026-10-19"])
    assert args.overlay_config_dir == "config/live"
    assert args.run_date == "2026-10-19"
