"""Version table extraction: turns a package page into :class:`VersionRecord`s."""

from __future__ import annotations

from functools import lru_cache
from typing import List

import soupsieve
from bs4 import BeautifulSoup, Tag

from rawhide_check.scraper.errors import SelectorError
from rawhide_check.scraper.models import VersionRecord

ROW_SELECTOR = "table#version-table > tbody > tr"


@lru_cache(maxsize=None)
def compile_selector(selector: str) -> soupsieve.SoupSieve:
    """Compile a CSS *selector*, raising :class:`SelectorError` on bad syntax."""
    try:
        return soupsieve.compile(selector)
    except soupsieve.SelectorSyntaxError as exc:
        raise SelectorError(f"selector error: {exc}") from exc


def _parse_row(row: Tag) -> VersionRecord | None:
    """Return the record held by the first two child elements of *row*."""
    cells = row.find_all(True, recursive=False, limit=2)
    if len(cells) < 2:
        return None
    distribution, version = cells
    return VersionRecord(
        distribution=distribution.get_text().strip(),
        version=version.get_text().strip(),
    )


def extract_versions(document: str) -> List[VersionRecord]:
    """Parse the ``#version-table`` body rows of *document*, in row order.

    Pages without the table yield ``[]``.  Header, separator and other rows
    with fewer than two cells are skipped.

    Raises:
        SelectorError: Only if the row selector is invalid.
    """
    row_selector = compile_selector(ROW_SELECTOR)

    # html5lib applies the HTML5 tree rules: implied <tbody>, optional end tags.
    soup = BeautifulSoup(document, "html5lib")

    records: List[VersionRecord] = []
    for row in row_selector.select(soup):
        record = _parse_row(row)
        if record is not None:
            records.append(record)
    return records
