from __future__ import annotations

import pytest

from launchsync.adapters.reddit import extract_manifest_rows
from launchsync.config.manifest import DEFAULT_MANIFEST_SELECTOR
from launchsync.domain.errors import DocumentStructureError

SELECTOR = "table#manifest > tbody"


def _row(date: str, payload: str, site: str) -> str:
    cells = [date, "F9 B5", site, "B1060", "LEO", payload, "SpaceX", "Notes"]
    return "<tr>" + "".join(f"<td>{cell}</td>" for cell in cells) + "</tr>"


def _table(*rows: str) -> str:
    return (
        '<table id="manifest"><thead><tr><th>Date</th></tr></thead>'
        f"<tbody>{''.join(rows)}</tbody></table>"
    )


def test_rows_keep_columns_aligned() -> None:
    html = _table(
        _row("2021 Jan 20", "GPS III SV05", "SLC-40"),
        _row("2021 Mar", "<strong>Starlink 23</strong> <em>v1.0</em>", "SLC-40 / LC-39A"),
    )

    rows = extract_manifest_rows(html, selector=SELECTOR)

    assert [r.row_index for r in rows] == [0, 1]
    assert rows[0].raw_date == "2021 Jan 20"
    assert rows[0].payload_label == "GPS III SV05"
    assert rows[1].payload_label == "Starlink 23 v1.0"
    assert rows[1].site_label == "SLC-40 / LC-39A"


def test_rows_are_truncated_to_the_limit() -> None:
    html = _table(*(_row("2022", f"Payload {n}", "SLC-40") for n in range(40)))

    rows = extract_manifest_rows(html, selector=SELECTOR)

    assert len(rows) == 30
    assert rows[-1].payload_label == "Payload 29"


def test_default_selector_finds_wiki_table() -> None:
    filler = "".join(f"<p>paragraph {n}</p>" for n in range(6))
    html = (
        '<html><body><div class="content"><div><div class="md wiki">'
        f"{filler}<table><tbody>{_row('2021 Q2', 'CRS-22', 'LC-39A')}</tbody></table>"
        "</div></div></div></body></html>"
    )

    rows = extract_manifest_rows(html, selector=DEFAULT_MANIFEST_SELECTOR)

    assert [r.payload_label for r in rows] == ["CRS-22"]


def test_missing_table_raises() -> None:
    with pytest.raises(DocumentStructureError, match="Broken manifest selector"):
        extract_manifest_rows("<html><body><p>moved</p></body></html>", selector=SELECTOR)


def test_empty_table_raises() -> None:
    with pytest.raises(DocumentStructureError, match="empty"):
        extract_manifest_rows(_table(), selector=SELECTOR)


def test_row_with_wrong_stride_raises() -> None:
    html = _table("<tr><td>2021 Q2</td><td>CRS-22</td></tr>")

    with pytest.raises(DocumentStructureError, match="expected 8"):
        extract_manifest_rows(html, selector=SELECTOR)
