from datetime import date

from npsp_da.common.ids import generate_run_id
from npsp_da.common.models import DevelopmentApplication
from npsp_da.common.time_utils import parse_run_date


def test_generate_run_id_prefix():
    assert generate_run_id().startswith("run-")


def test_parse_run_date_defaults_and_iso():
    assert parse_run_date("2026-02-17") == date(2026, 2, 17)
    assert isinstance(parse_run_date(None), date)


def test_has_required_fields_needs_number_and_address():
    complete = DevelopmentApplication("1/2023", "1 High St", "", "https://x", "", "2026-10-19")
    assert complete.has_required_fields() is True
    assert DevelopmentApplication("", "1 High St", "", "https://x", "", "2026-10-19").has_required_fields() is False
    assert DevelopmentApplication("1/2023", "", "", "https://x", "", "2026-10-19").has_required_fields() is False
