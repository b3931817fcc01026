"""SQLite persistence for development applications."""

from __future__ import annotations

import logging
import sqlite3
from pathlib import Path
from types import TracebackType

from npsp_da.common.errors import StorageError
from npsp_da.common.fs import ensure_dir
from npsp_da.common.logging import log_event
from npsp_da.common.models import DevelopmentApplication

COLUMNS = (
    "council_reference",
    "address",
    "description",
    "info_url",
    "date_received",
    "date_scraped",
)


class ApplicationStore:
    def __init__(self, path: Path | str, *, logger: logging.Logger | None = None) -> None:
        self.path = Path(path)
        self.logger = logger
        if str(path) != ":memory:":
            ensure_dir(self.path.parent)
        self.conn = sqlite3.connect(str(path))

    def close(self) -> None:
        self.conn.close()

    def __enter__(self) -> "ApplicationStore":
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()

    def ensure_schema(self) -> None:
        try:
            self.conn.execute(
                """
                CREATE TABLE IF NOT EXISTS data (
                    council_reference TEXT PRIMARY KEY,
                    address TEXT,
                    description TEXT,
                    info_url TEXT,
                    date_received TEXT,
                    date_scraped TEXT
                )
                """
            )
            self.conn.commit()
        except sqlite3.Error as exc:
            raise StorageError(f"Could not create schema in {self.path}: {exc}") from exc

    def upsert(self, application: DevelopmentApplication) -> None:
        """Insert ``application``, replacing any row with the same council reference."""
        row = application.to_dict()
        try:
            self.conn.execute(
                f"INSERT OR REPLACE INTO data ({', '.join(COLUMNS)}) VALUES (?, ?, ?, ?, ?, ?)",
                tuple(row[column] for column in COLUMNS),
            )
            self.conn.commit()
        except sqlite3.Error as exc:
            self.conn.rollback()
            if self.logger is not None:
                log_event(
                    self.logger,
                    f"could not save application {application.application_number}: {exc}",
                    level=logging.ERROR,
                    stage="store",
                    event="RECORD_FAILED",
                    status="error",
                    error_code=StorageError.error_code,
                    application_number=application.application_number,
                )
            raise StorageError(f"Could not save application {application.application_number}") from exc

        if self.logger is not None:
            log_event(
                self.logger,
                f'saved application "{application.application_number}" with address '
                f'"{application.address}" and reason "{application.reason}"',
                stage="store",
                event="RECORD_SAVED",
                status="ok",
                application_number=application.application_number,
            )

    def get(self, application_number: str) -> dict[str, str] | None:
        found = self.conn.execute(
            f"SELECT {', '.join(COLUMNS)} FROM data WHERE council_reference = ?",
            (application_number,),
        ).fetchone()
        if found is None:
            return None
        return dict(zip(COLUMNS, found))

    def count(self) -> int:
        return self.conn.execute("SELECT COUNT(*) FROM data").fetchone()[0]
