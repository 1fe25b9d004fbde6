"""Text and dict renderings of a pagination sequence."""

from __future__ import annotations

from typing import Iterable

from ..models import PageItem, PaginationItem


def render_sequence(items: Iterable[PaginationItem], current: int, width: int = 2) -> str:
    """Render a sequence as a single compact line.

    ``current`` is bracketed, other pages are space padded and gaps
    show as ``..``:

        render_sequence(build(7, 12), 7)
        ' 01 - 02 - .. - 05 - 06 -[07]- 08 - 09 - 10 - 11 - 12 '
    """
    cells = []
    for item in items:
        if isinstance(item, PageItem):
            label = str(item.page).zfill(width)
            cells.append(f"[{label}]" if item.page == current else f" {label} ")
        else:
            cells.append(" " + ".".rjust(width, ".") + " ")
    return "-".join(cells)


def sequence_payload(items: Iterable[PaginationItem]) -> list[dict]:
    """Convert a sequence to a list of dicts for JSON output."""
    return [item.to_dict() for item in items]
