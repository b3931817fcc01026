"""Data models used across the scraper."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class DevelopmentApplication:
    application_number: str
    address: str
    reason: str
    info_url: str
    date_received: str
    date_scraped: str

    def has_required_fields(self) -> bool:
        return bool(self.application_number) and bool(self.address)

    def to_dict(self) -> dict[str, str]:
        return {
            "council_reference": self.application_number,
            "address": self.address,
            "description": self.reason,
            "info_url": self.info_url,
            "date_received": self.date_received,
            "date_scraped": self.date_scraped,
        }
