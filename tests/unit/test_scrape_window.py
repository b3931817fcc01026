from datetime import date

import pytest

from npsp_da.pipeline.scrape import compute_search_window


@pytest.mark.parametrize(
    "today, lookback, expected",
    [
        (date(2026, 10, 19), 1, ("19/09/2026", "19/10/2026")),
        (date(2026, 1, 5), 1, ("05/12/2025", "05/01/2026")),
        (date(2026, 3, 31), 1, ("28/02/2026", "31/03/2026")),
        (date(2024, 3, 31), 1, ("29/02/2024", "31/03/2024")),
        (date(2026, 10, 19), 3, ("19/07/2026", "19/10/2026")),
    ],
)
def test_compute_search_window(today, lookback, expected):
    assert compute_search_window(today, lookback) == expected
