"""CLI entrypoint for the Norwood Payneham & St Peters development application scraper."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from npsp_da.common.config_loader import load_config
from npsp_da.common.constants import EXIT_FAILURE, EXIT_SUCCESS
from npsp_da.common.errors import PipelineError
from npsp_da.common.ids import generate_run_id
from npsp_da.common.logging import build_logger, close_logger, log_event
from npsp_da.common.time_utils import parse_run_date
from npsp_da.pipeline.reports import write_run_summary
from npsp_da.pipeline.scrape import run_scrape
from npsp_da.pipeline.store import ApplicationStore


def parse_args(argv: list[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("--config-dir", default="./config")
    parser.add_argument("--overlay-config-dir", default=None)
    parser.add_argument("--data-dir", default="./data")
    parser.add_argument("--run-date", default=None)
    parser.add_argument("--run-id", default=None)
    parser.add_argument("--log-level", default="INFO", choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    return parser.parse_args(argv)


def run_command(args: argparse.Namespace, *, http_client=None) -> int:
    run_id = args.run_id or generate_run_id()
    run_date = parse_run_date(args.run_date)
    data_dir = Path(args.data_dir)
    overlay_config_dir = Path(args.overlay_config_dir) if args.overlay_config_dir else None

    logger = build_logger(run_id, data_dir=data_dir, level=args.log_level)
    log_event(logger, "run start", run_id=run_id, stage="run", event="RUN_START", status="ok")
    try:
        config = load_config(Path(args.config_dir), overlay_config_dir=overlay_config_dir)
        database_path = data_dir / config["storage"]["database"]
        with ApplicationStore(database_path, logger=logger) as store:
            result = run_scrape(
                config,
                store=store,
                run_id=run_id,
                run_date=run_date,
                logger=logger,
                http_client=http_client,
            )
    except Exception as exc:
        error_code = getattr(exc, "error_code", "UNEXPECTED_ERROR")
        log_event(
            logger,
            f"run failed: {exc}",
            level=logging.ERROR,
            run_id=run_id,
            stage="run",
            event="RUN_FAIL",
            status="error",
            error_code=error_code,
        )
        write_run_summary(data_dir, run_id=run_id, run_date=run_date.isoformat(), status="error", error_code=error_code)
        print(f"Failed: {exc}")
        close_logger(logger)
        return EXIT_FAILURE

    status = "error" if result.failed else "success"
    write_run_summary(data_dir, run_id=run_id, run_date=run_date.isoformat(), status=status, result=result)
    close_logger(logger)
    if result.failed:
        print(f"Failed: {result.failed} application(s) could not be saved.")
        return EXIT_FAILURE
    print("Complete.")
    return EXIT_SUCCESS


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv if argv is not None else sys.argv[1:])
    try:
        return run_command(args)
    except (PipelineError, ValueError, OSError) as exc:
        print(f"Failed: {exc}")
        return EXIT_FAILURE


if __name__ == "__main__":
    raise SystemExit(main())
