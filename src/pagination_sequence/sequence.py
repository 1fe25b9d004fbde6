"""Pagination sequence builder.

Turns a (page, pages, edges, neighbors) request into the ordered list of
page numbers and gap markers a paginator should render.

The sequence is laid out in one of four shapes:

```
compact   1 2 3 4 5 6 7 8 9 10 11
start     1 2 3 4 5 6 7 8 .. 24 25
end       1 2 .. 18 19 20 21 22 23 24 25
middle    1 2 .. 10 11 12 13 14 .. 24 25
```

A gap of exactly one hidden page between the start edge and the center
cluster is filled with that page instead of a gap marker. The end side
of the middle shape has no such check and always uses a marker.
"""

from __future__ import annotations

import logging
import math

from .models import (
    EllipsisItem,
    EllipsisPosition,
    PageItem,
    PaginationArgs,
    PaginationItem,
)
from .models.item import DEFAULT_EDGES, DEFAULT_NEIGHBORS
from .ranges import range_inclusive

logger = logging.getLogger(__name__)


class InvalidArgumentError(ValueError):
    """Raised when a pagination request is out of its valid domain."""

    def __init__(self, name: str, value: object, requirement: str) -> None:
        super().__init__(f"invalid {name}: {value!r} ({requirement})")
        self.name = name
        self.value = value


def _require_int(name: str, value: object) -> None:
    # bool is an int subclass but never a meaningful page count
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidArgumentError(name, value, "must be an integer")


def validate_args(page: int, pages: int, edges: int, neighbors: int) -> None:
    """Check a request before any cluster is computed.

    ``page`` only has to be an integer; out-of-range values are clamped
    by the builder.

    Raises:
        InvalidArgumentError: On the first argument that is invalid.
    """
    for name, value in (("page", page), ("pages", pages), ("edges", edges), ("neighbors", neighbors)):
        _require_int(name, value)
    if pages < 1:
        raise InvalidArgumentError("pages", pages, "must be at least 1")
    if edges < 0:
        raise InvalidArgumentError("edges", edges, "must not be negative")
    if neighbors < 0:
        raise InvalidArgumentError("neighbors", neighbors, "must not be negative")


def display_length(edges: int = DEFAULT_EDGES, neighbors: int = DEFAULT_NEIGHBORS) -> int:
    """Number of slots below which no page is ever hidden.

    Current page, both neighbor runs, both edge runs and two gap markers.
    """
    return 1 + 2 * neighbors + 2 * edges + 2


def _pages(numbers: list[int]) -> list[PaginationItem]:
    return [PageItem(n) for n in numbers]


def build(
    page: int,
    pages: int,
    edges: int = DEFAULT_EDGES,
    neighbors: int = DEFAULT_NEIGHBORS,
) -> list[PaginationItem]:
    """Build the pagination sequence for one request.

    Args:
        page: Current page. Clamped down to ``pages``; never clamped up.
        pages: Total number of pages (>= 1).
        edges: Pages always shown at each end (>= 0).
        neighbors: Pages always shown on each side of ``page`` (>= 0).

    Returns:
        Ordered list of PageItem / EllipsisItem.

    Raises:
        InvalidArgumentError: If the request is invalid.
    """
    validate_args(page, pages, edges, neighbors)

    length = display_length(edges, neighbors)

    if pages <= length:
        logger.debug("compact sequence: pages=%d length=%d", pages, length)
        return _pages(range_inclusive(1, pages))

    half = length / 2
    current = min(page, pages)

    if current < half:
        logger.debug("start sequence: current=%d half=%.1f", current, half)
        start = range_inclusive(1, math.ceil(half) + neighbors)
        end = range_inclusive(pages - edges + 1, pages) if edges > 0 else []
        return [*_pages(start), EllipsisItem(EllipsisPosition.END), *_pages(end)]

    if current > pages - half:
        logger.debug("end sequence: current=%d half=%.1f", current, half)
        start = range_inclusive(1, edges) if edges > 0 else []
        end = range_inclusive(
            min(pages - math.floor(half) - neighbors, current - neighbors),
            pages,
        )
        return [*_pages(start), EllipsisItem(EllipsisPosition.START), *_pages(end)]

    logger.debug("middle sequence: current=%d half=%.1f", current, half)
    start = range_inclusive(1, edges)
    center = range_inclusive(current - neighbors, current + neighbors)
    end = range_inclusive(pages - edges + 1, pages)

    if center[0] == edges + 2:
        bridge: PaginationItem = PageItem(edges + 1)
    else:
        bridge = EllipsisItem(EllipsisPosition.START)

    return [
        *_pages(start),
        bridge,
        *_pages(center),
        EllipsisItem(EllipsisPosition.END),
        *_pages(end),
    ]


def create_pagination(args: PaginationArgs) -> list[PaginationItem]:
    """Build the pagination sequence for a PaginationArgs request."""
    return build(args.page, args.pages, args.edges, args.neighbors)
