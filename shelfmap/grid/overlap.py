"""Rectangle overlap predicate used to police obstacle placement."""

from __future__ import annotations

from typing import Protocol


class Rect(Protocol):
    x: int
    y: int
    w: int
    h: int


def overlaps(a: Rect, b: Rect) -> bool:
    """Return True if rectangles ``a`` and ``b`` share at least one cell.

    Rectangles that only touch along an edge do not overlap.
    """
    return a.x < b.x + b.w and a.x + a.w > b.x and a.y < b.y + b.h and a.y + a.h > b.y
