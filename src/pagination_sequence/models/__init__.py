"""Data models for Pagination Sequence."""

from .item import (
    EllipsisItem,
    EllipsisPosition,
    PageItem,
    PaginationArgs,
    PaginationItem,
    item_from_dict,
)

__all__ = [
    "EllipsisItem",
    "EllipsisPosition",
    "PageItem",
    "PaginationArgs",
    "PaginationItem",
    "item_from_dict",
]
