"""Record extraction from the portal's search results HTML."""

from __future__ import annotations

from typing import Callable, Iterator

from bs4 import BeautifulSoup
from bs4.element import Tag

from npsp_da.common.constants import LODGED_DATE_PATTERN
from npsp_da.common.models import DevelopmentApplication
from npsp_da.common.text import format_date, normalise_whitespace, parse_lenient_date


def _lodged_date(value: str) -> str:
    return format_date(parse_lenient_date(value, LODGED_DATE_PATTERN))


def _as_is(value: str) -> str:
    return value


# Row label -> (record field, converter). Labels not listed here are ignored.
FIELD_RESOLVERS: dict[str, tuple[str, Callable[[str], str]]] = {
    "Type of Work": ("reason", _as_is),
    "Application No.": ("application_number", _as_is),
    "Date Lodged": ("date_received", _lodged_date),
}


def _child_text(row: Tag, class_name: str) -> str:
    children = row.find_all("span", class_=class_name, recursive=False)
    return "".join(child.get_text() for child in children).strip()


def _details_blocks(heading: Tag) -> Iterator[Tag]:
    sibling = heading.find_next_sibling()
    while sibling is not None and sibling.name == "div":
        yield sibling
        sibling = sibling.find_next_sibling()


def _resolve_fields(heading: Tag) -> dict[str, str]:
    fields = {"application_number": "", "reason": "", "date_received": ""}
    for block in _details_blocks(heading):
        for row in block.select("p.rowDataOnly"):
            resolver = FIELD_RESOLVERS.get(_child_text(row, "key"))
            if resolver is None:
                continue
            field_name, convert = resolver
            fields[field_name] = convert(_child_text(row, "inputField"))
    return fields


def iter_development_applications(
    html: str,
    *,
    info_url: str,
    date_scraped: str,
) -> Iterator[DevelopmentApplication]:
    """Yield one candidate record per ``h4.non_table_headers`` heading.

    Records may lack an application number or address; filtering them is the
    caller's job.
    """
    soup = BeautifulSoup(html, "html.parser")
    for heading in soup.select("h4.non_table_headers"):
        fields = _resolve_fields(heading)
        yield DevelopmentApplication(
            application_number=fields["application_number"],
            address=normalise_whitespace(heading.get_text()),
            reason=fields["reason"],
            info_url=info_url,
            date_received=fields["date_received"],
            date_scraped=date_scraped,
        )
