"""Pagination Sequence - compact page-link sequences with ellipsis gaps."""

__version__ = "0.1.0"

from .models import EllipsisItem, EllipsisPosition, PageItem, PaginationArgs, PaginationItem
from .sequence import InvalidArgumentError, build, create_pagination

__all__ = [
    "EllipsisItem",
    "EllipsisPosition",
    "PageItem",
    "PaginationArgs",
    "PaginationItem",
    "InvalidArgumentError",
    "build",
    "create_pagination",
]
