"""Extract manifest rows from the rendered subreddit wiki page."""

from __future__ import annotations

from typing import TYPE_CHECKING, Final

from bs4 import BeautifulSoup

from launchsync.domain.errors import DocumentStructureError
from launchsync.domain.model import MANIFEST_ROW_LIMIT, ManifestRow

if TYPE_CHECKING:
    from bs4 import Tag

ROW_STRIDE: Final = 8
DATE_COLUMN: Final = 0
SITE_COLUMN: Final = 2
PAYLOAD_COLUMN: Final = 5


def _cell_texts(row: Tag) -> list[str]:
    return [cell.get_text(" ", strip=True) for cell in row.find_all(["td", "th"])]


def extract_manifest_rows(
    html: str,
    *,
    selector: str,
    limit: int = MANIFEST_ROW_LIMIT,
) -> list[ManifestRow]:
    """Return the first ``limit`` manifest rows of the table matched by ``selector``.

    Raises ``DocumentStructureError`` if the table is missing or empty, or if a row
    does not have the expected number of columns.
    """

    soup = BeautifulSoup(html, "html.parser")
    body = soup.select_one(selector)
    if body is None:
        raise DocumentStructureError(f"Broken manifest selector: {selector}")

    table_rows = body.find_all("tr")
    if not table_rows:
        raise DocumentStructureError(f"Manifest table is empty: {selector}")

    rows: list[ManifestRow] = []
    for row_index, table_row in enumerate(table_rows[:limit]):
        cells = _cell_texts(table_row)
        if len(cells) != ROW_STRIDE:
            raise DocumentStructureError(
                f"Manifest row {row_index} has {len(cells)} columns, expected {ROW_STRIDE}: "
                f"{' | '.join(cells)}"
            )
        rows.append(
            ManifestRow(
                raw_date=cells[DATE_COLUMN],
                payload_label=cells[PAYLOAD_COLUMN],
                site_label=cells[SITE_COLUMN],
                row_index=row_index,
            )
        )
    return rows
