"""Request and item models for pagination sequences."""

from dataclasses import dataclass
from enum import Enum
from typing import ClassVar, Union

DEFAULT_EDGES = 2
DEFAULT_NEIGHBORS = 2


class EllipsisPosition(Enum):
    """Which side of the visible window a gap marker sits on."""
    START = "start"
    END = "end"


@dataclass(frozen=True)
class PageItem:
    """A page number to render."""

    type: ClassVar[str] = "page"

    page: int

    def to_dict(self) -> dict:
        return {"type": self.type, "page": self.page}


@dataclass(frozen=True)
class EllipsisItem:
    """A gap marker standing in for two or more hidden pages."""

    type: ClassVar[str] = "ellipsis"

    position: EllipsisPosition

    def to_dict(self) -> dict:
        return {"type": self.type, "position": self.position.value}


PaginationItem = Union[PageItem, EllipsisItem]


def item_from_dict(data: dict) -> PaginationItem:
    """Create a PaginationItem from its dict form."""
    kind = data.get("type")
    if kind == PageItem.type:
        return PageItem(page=int(data["page"]))
    if kind == EllipsisItem.type:
        return EllipsisItem(position=EllipsisPosition(data["position"]))
    raise ValueError(f"Unknown pagination item type: {kind!r}")


@dataclass(frozen=True)
class PaginationArgs:
    """A single pagination request."""

    page: int  # Current page, clamped down to `pages` when it overshoots
    pages: int  # Total page count
    edges: int = DEFAULT_EDGES  # Pages pinned at each end
    neighbors: int = DEFAULT_NEIGHBORS  # Pages shown on each side of `page`

    def to_dict(self) -> dict:
        """Convert to dictionary for JSON serialization."""
        return {
            "page": self.page,
            "pages": self.pages,
            "edges": self.edges,
            "neighbors": self.neighbors,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "PaginationArgs":
        """Create PaginationArgs from dictionary."""
        return cls(
            page=data["page"],
            pages=data["pages"],
            edges=data.get("edges", DEFAULT_EDGES),
            neighbors=data.get("neighbors", DEFAULT_NEIGHBORS),
        )
