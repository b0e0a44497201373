"""Small BeautifulSoup helpers shared by the page parsers."""

from __future__ import annotations

from typing import List, Sequence

from bs4 import Tag  # type: ignore

_ROW_GROUPS = ("thead", "tbody", "tfoot")


def raw_text(node: Tag | None) -> str:
    """Text content exactly as extracted; no stripping or whitespace folding."""
    return node.get_text() if node is not None else ""


def table_rows(table: Tag) -> List[Tag]:
    """Rows belonging to ``table`` itself, in document order.

    Includes rows nested in a direct thead/tbody/tfoot but never rows of a
    table nested inside one of the cells.
    """
    rows: List[Tag] = []
    for child in table.find_all(True, recursive=False):
        if child.name == "tr":
            rows.append(child)
        elif child.name in _ROW_GROUPS:
            rows.extend(child.find_all("tr", recursive=False))
    return rows


def row_cells(row: Tag, names: Sequence[str] = ("td",)) -> List[Tag]:
    return row.find_all(list(names), recursive=False)


def cell_at(row: Tag, index: int, names: Sequence[str] = ("td",)) -> Tag | None:
    cells = row_cells(row, names)
    return cells[index] if 0 <= index < len(cells) else None
