from __future__ import annotations
from enum import Enum
from typing import Dict

from .constants import NARROW_MAX_WIDTH, MEDIUM_MAX_WIDTH


class LayoutMode(str, Enum):
    NARROW = "narrow"
    MEDIUM = "medium"
    WIDE = "wide"


GRID_COLUMNS: Dict[LayoutMode, int] = {
    LayoutMode.NARROW: 1,
    LayoutMode.MEDIUM: 2,
    LayoutMode.WIDE: 3,
}


def layout_for_width(width: float) -> LayoutMode:
    """Picks the layout mode for a viewport width in pixels. Thresholds are inclusive."""
    if width < 0:
        raise ValueError(f"Viewport width must be non-negative, got {width}")
    if width <= NARROW_MAX_WIDTH:
        return LayoutMode.NARROW
    if width <= MEDIUM_MAX_WIDTH:
        return LayoutMode.MEDIUM
    return LayoutMode.WIDE


def grid_columns(mode: LayoutMode) -> int:
    return GRID_COLUMNS[mode]


def is_stacked(mode: LayoutMode) -> bool:
    """Narrow screens stack side-by-side blocks into a single column."""
    return mode is LayoutMode.NARROW


def media_query(mode: LayoutMode) -> str:
    """The CSS media query matching exactly the widths `layout_for_width` maps to `mode`."""
    if mode is LayoutMode.NARROW:
        return f"(max-width: {NARROW_MAX_WIDTH}px)"
    if mode is LayoutMode.MEDIUM:
        return f"(min-width: {NARROW_MAX_WIDTH + 1}px) and (max-width: {MEDIUM_MAX_WIDTH}px)"
    return f"(min-width: {MEDIUM_MAX_WIDTH + 1}px)"
