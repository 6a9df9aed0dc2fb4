"""Bento layout presets: explicit cell placements per preset and breakpoint.

Every layout covers its grid exactly: no holes, no overlaps. The same preset
and breakpoint always produce the same placements.
"""

from __future__ import annotations

from brandbento.models.layout import Breakpoint, CellPlacement, LayoutConfig

# Minimum viewport width (px) for each breakpoint
BREAKPOINTS: dict[str, int] = {
    "mobile": 0,
    "tablet": 768,
    "desktop": 1024,
}

# (id, col_start, row_start, col_span, row_span)
_Cell = tuple[str, int, int, int, int]

_RAW_LAYOUTS: dict[str, dict[str, tuple[int, int, int, list[_Cell]]]] = {
    "balanced": {
        "mobile": (2, 6, 12, [
            ("hero", 1, 1, 2, 2),
            ("b", 1, 3, 1, 2),
            ("c", 2, 3, 1, 2),
            ("d", 1, 5, 2, 1),
            ("e", 1, 6, 1, 1),
            ("f", 2, 6, 1, 1),
        ]),
        "tablet": (3, 3, 14, [
            ("hero", 1, 1, 1, 2),
            ("b", 2, 1, 2, 1),
            ("c", 2, 2, 1, 1),
            ("d", 3, 2, 1, 2),
            ("e", 1, 3, 1, 1),
            ("f", 2, 3, 1, 1),
        ]),
        "desktop": (3, 3, 16, [
            ("hero", 1, 1, 1, 2),
            ("b", 2, 1, 2, 1),
            ("c", 2, 2, 1, 1),
            ("d", 3, 2, 1, 2),
            ("e", 1, 3, 1, 1),
            ("f", 2, 3, 1, 1),
        ]),
    },
    "geos": {
        "mobile": (2, 6, 10, [
            ("hero", 1, 1, 2, 2),
            ("image", 1, 3, 2, 1),
            ("buttons", 1, 4, 2, 1),
            ("editorial", 1, 5, 2, 1),
            ("logo", 1, 6, 1, 1),
            ("colors", 2, 6, 1, 1),
        ]),
        "tablet": (3, 3, 10, [
            ("hero", 1, 1, 1, 2),
            ("image", 2, 1, 2, 1),
            ("buttons", 1, 3, 1, 1),
            ("editorial", 2, 2, 1, 2),
            ("logo", 3, 2, 1, 1),
            ("colors", 3, 3, 1, 1),
        ]),
        "desktop": (3, 3, 12, [
            ("hero", 1, 1, 1, 2),
            ("image", 2, 1, 2, 1),
            ("buttons", 1, 3, 1, 1),
            ("editorial", 2, 2, 1, 2),
            ("logo", 3, 2, 1, 1),
            ("colors", 3, 3, 1, 1),
        ]),
    },
    "foodDrink": {
        "mobile": (2, 6, 10, [
            ("image", 1, 1, 2, 1),
            ("logo", 1, 2, 2, 1),
            ("hero", 1, 3, 2, 2),
            ("buttons", 1, 5, 2, 1),
            ("editorial", 1, 6, 1, 1),
            ("colors", 2, 6, 1, 1),
        ]),
        "tablet": (3, 4, 12, [
            ("image", 1, 1, 2, 1),
            ("logo", 3, 1, 1, 1),
            ("hero", 1, 2, 2, 2),
            ("buttons", 3, 2, 1, 2),
            ("editorial", 1, 4, 1, 1),
            ("colors", 2, 4, 2, 1),
        ]),
        "desktop": (4, 3, 14, [
            ("image", 1, 1, 2, 1),
            ("logo", 3, 1, 2, 1),
            ("hero", 1, 2, 2, 2),
            ("buttons", 3, 2, 1, 2),
            ("editorial", 4, 2, 1, 1),
            ("colors", 4, 3, 1, 1),
        ]),
    },
    "heroCenter": {
        "mobile": (2, 6, 12, [
            ("hero", 1, 1, 2, 2),
            ("a", 1, 3, 1, 1),
            ("b", 2, 3, 1, 1),
            ("c", 1, 4, 2, 1),
            ("d", 1, 5, 1, 1),
            ("e", 2, 5, 1, 1),
            ("f", 1, 6, 2, 1),
        ]),
        "tablet": (3, 3, 14, [
            ("a", 1, 1, 1, 1),
            ("hero", 2, 1, 2, 2),
            ("b", 1, 2, 1, 2),
            ("c", 2, 3, 1, 1),
            ("d", 3, 3, 1, 1),
        ]),
        "desktop": (3, 3, 16, [
            ("a", 1, 1, 1, 1),
            ("hero", 2, 1, 2, 2),
            ("b", 1, 2, 1, 2),
            ("c", 2, 3, 1, 1),
            ("d", 3, 3, 1, 1),
        ]),
    },
    "heroLeft": {
        "mobile": (2, 6, 12, [
            ("hero", 1, 1, 2, 3),
            ("d", 1, 4, 1, 2),
            ("a", 2, 4, 1, 1),
            ("b", 2, 5, 1, 1),
            ("c", 1, 6, 1, 1),
            ("e", 2, 6, 1, 1),
        ]),
        "tablet": (3, 3, 14, [
            ("hero", 1, 1, 1, 3),
            ("d", 2, 1, 1, 2),
            ("a", 3, 1, 1, 1),
            ("b", 3, 2, 1, 1),
            ("c", 2, 3, 1, 1),
            ("e", 3, 3, 1, 1),
        ]),
        "desktop": (3, 3, 16, [
            ("hero", 1, 1, 1, 3),
            ("d", 2, 1, 1, 2),
            ("a", 3, 1, 1, 1),
            ("b", 3, 2, 1, 1),
            ("c", 2, 3, 1, 1),
            ("e", 3, 3, 1, 1),
        ]),
    },
    "stacked": {
        "mobile": (2, 6, 12, [
            ("hero", 1, 1, 2, 2),
            ("a", 1, 3, 1, 1),
            ("b", 2, 3, 1, 1),
            ("c", 1, 4, 2, 1),
            ("d", 1, 5, 1, 1),
            ("e", 2, 5, 1, 1),
            ("f", 1, 6, 2, 1),
        ]),
        "tablet": (3, 4, 14, [
            ("hero", 1, 1, 3, 1),
            ("a", 1, 2, 1, 2),
            ("b", 2, 2, 2, 1),
            ("c", 2, 3, 1, 1),
            ("d", 3, 3, 1, 2),
            ("e", 1, 4, 1, 1),
            ("f", 2, 4, 1, 1),
        ]),
        "desktop": (3, 4, 16, [
            ("hero", 1, 1, 3, 1),
            ("a", 1, 2, 1, 2),
            ("b", 2, 2, 2, 1),
            ("c", 2, 3, 1, 1),
            ("d", 3, 3, 1, 2),
            ("e", 1, 4, 1, 1),
            ("f", 2, 4, 1, 1),
        ]),
    },
    # Large hero with two supporting tiles
    "minimal": {
        "mobile": (2, 3, 12, [
            ("hero", 1, 1, 2, 2),
            ("c", 1, 3, 1, 1),
            ("b", 2, 3, 1, 1),
        ]),
        "tablet": (3, 2, 14, [
            ("hero", 1, 1, 2, 2),
            ("c", 3, 1, 1, 1),
            ("b", 3, 2, 1, 1),
        ]),
        "desktop": (3, 2, 16, [
            ("hero", 1, 1, 2, 2),
            ("c", 3, 1, 1, 1),
            ("b", 3, 2, 1, 1),
        ]),
    },
    # Hero with up to three supporting tiles; mobile drops "c"
    "duo": {
        "mobile": (2, 3, 12, [
            ("hero", 1, 1, 2, 2),
            ("a", 1, 3, 1, 1),
            ("b", 2, 3, 1, 1),
        ]),
        "tablet": (3, 2, 14, [
            ("hero", 1, 1, 1, 2),
            ("a", 2, 1, 2, 1),
            ("b", 2, 2, 1, 1),
            ("c", 3, 2, 1, 1),
        ]),
        "desktop": (3, 2, 16, [
            ("hero", 1, 1, 1, 2),
            ("a", 2, 1, 2, 1),
            ("b", 2, 2, 1, 1),
            ("c", 3, 2, 1, 1),
        ]),
    },
}


def _build(raw: tuple[int, int, int, list[_Cell]]) -> LayoutConfig:
    columns, rows, gap, cells = raw
    return LayoutConfig(
        columns=columns,
        rows=rows,
        gap=gap,
        placements=[
            CellPlacement(id=c[0], col_start=c[1], row_start=c[2], col_span=c[3], row_span=c[4])
            for c in cells
        ],
    )


LAYOUTS: dict[str, dict[str, LayoutConfig]] = {
    preset: {bp: _build(raw) for bp, raw in by_bp.items()}
    for preset, by_bp in _RAW_LAYOUTS.items()
}


def preset_names() -> list[str]:
    return list(LAYOUTS)


def get_layout(preset: str, breakpoint: str) -> LayoutConfig:
    """Look up a layout. Raises KeyError for an unknown preset or breakpoint."""
    try:
        return LAYOUTS[preset][breakpoint]
    except KeyError:
        raise KeyError(f"No layout for preset={preset!r} breakpoint={breakpoint!r}") from None


def breakpoint_for_width(width: int) -> Breakpoint:
    if width >= BREAKPOINTS["desktop"]:
        return "desktop"
    if width >= BREAKPOINTS["tablet"]:
        return "tablet"
    return "mobile"


def covered_cells(layout: LayoutConfig) -> list[tuple[int, int]]:
    """All (col, row) cells covered by the layout's placements, duplicates kept."""
    cells: list[tuple[int, int]] = []
    for p in layout.placements:
        for col in range(p.col_start, p.col_start + p.col_span):
            for row in range(p.row_start, p.row_start + p.row_span):
                cells.append((col, row))
    return cells
