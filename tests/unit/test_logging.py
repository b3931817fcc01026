import json
from pathlib import Path

from npsp_da.common.constants import JSON_LOG_FIELDS
from npsp_da.common.logging import build_logger, close_logger, log_event


def test_log_lines_are_json_with_stable_keys(tmp_path: Path):
    logger = build_logger("run-log", data_dir=tmp_path)
    log_event(logger, "saved", stage="store", event="RECORD_SAVED", status="ok", application_number="1/2023")
    close_logger(logger)

    lines = (tmp_path / "run_meta" / "run-log.log.jsonl").read_text(encoding="utf-8").splitlines()
    payload = json.loads(lines[-1])

    assert set(JSON_LOG_FIELDS) <= set(payload)
    assert payload["event"] == "RECORD_SAVED"
    assert payload["application_number"] == "1/2023"
    assert payload["run_id"] is None
    assert payload["level"] == "INFO"
    assert payload["message"] == "saved"
