"""Inclusive integer ranges."""


def range_inclusive(start: int, end: int) -> list[int]:
    """Return ``start..end`` ascending, inclusive of both bounds.

    Inverted bounds give an empty list rather than an error; empty edge
    clusters rely on this.
    """
    return list(range(start, end + 1))
