from dataclasses import dataclass

from rules.rules import (
    BOX_SIZE,
    CELL_HEIGHT,
    CELL_WIDTH,
    DIVIDER_HEIGHT,
    DIVIDER_WIDTH,
    GRID_SIZE,
    GRID_TOP,
)

from .help import HELP_LINES
from .validation import validate_terminal_size


GRID_WIDTH = CELL_WIDTH * GRID_SIZE + DIVIDER_WIDTH * (GRID_SIZE // BOX_SIZE - 1)
GRID_HEIGHT = CELL_HEIGHT * GRID_SIZE + DIVIDER_HEIGHT * (GRID_SIZE // BOX_SIZE - 1)


@dataclass(frozen=True)
class Rect:
    x: int
    y: int
    width: int
    height: int

    @property
    def right(self) -> int:
        return self.x + self.width

    @property
    def bottom(self) -> int:
        return self.y + self.height

    def is_empty(self) -> bool:
        return self.width <= 0 or self.height <= 0

    def intersection(self, other: "Rect") -> "Rect":
        x = max(self.x, other.x)
        y = max(self.y, other.y)
        right = min(self.right, other.right)
        bottom = min(self.bottom, other.bottom)
        return Rect(x, y, max(0, right - x), max(0, bottom - y))

    def centred(self, width: int, height: int) -> "Rect":
        x = self.x + max(0, self.width - width) // 2
        y = self.y + max(0, self.height - height) // 2
        return Rect(x, y, min(width, self.width), min(height, self.height))

    def to_dict(self) -> dict[str, int]:
        return {"x": self.x, "y": self.y, "width": self.width, "height": self.height}


@dataclass(frozen=True)
class CellLayout:
    x: int
    y: int
    area: Rect
    region: Rect
    right_thick: bool
    bottom_thick: bool


@dataclass(frozen=True)
class GridLayout:
    bounds: Rect
    grid_area: Rect
    cells: tuple[CellLayout, ...]
    vertical_dividers: tuple[int, ...]
    horizontal_dividers: tuple[int, ...]
    mode_area: Rect
    help_area: Rect

    def cell_at(self, x: int, y: int) -> CellLayout:
        return self.cells[y * GRID_SIZE + x]


def cell_offset(x: int, y: int) -> tuple[int, int]:
    # each passed box adds one divider column/row
    return x * CELL_WIDTH + x // BOX_SIZE, y * CELL_HEIGHT + y // BOX_SIZE


def divider_offsets(cell_size: int) -> tuple[int, ...]:
    return tuple(b * BOX_SIZE * cell_size + (b - 1) for b in range(1, GRID_SIZE // BOX_SIZE))


def compute_layout(width: int, height: int) -> GridLayout:
    width, height = validate_terminal_size(width, height)
    bounds = Rect(0, 0, width, height)

    grid_x = max(0, (width - GRID_WIDTH) // 2)
    grid_y = GRID_TOP
    grid_area = Rect(grid_x, grid_y, GRID_WIDTH, GRID_HEIGHT)

    cells: list[CellLayout] = []
    for y in range(GRID_SIZE):
        for x in range(GRID_SIZE):
            offset_x, offset_y = cell_offset(x, y)
            area = Rect(grid_x + offset_x, grid_y + offset_y, CELL_WIDTH, CELL_HEIGHT)
            cells.append(
                CellLayout(
                    x=x,
                    y=y,
                    area=area,
                    region=area.intersection(bounds),
                    right_thick=x % BOX_SIZE == BOX_SIZE - 1,
                    bottom_thick=y % BOX_SIZE == BOX_SIZE - 1,
                )
            )

    mode_area = Rect(0, grid_area.bottom, width, 1)
    help_area = Rect(grid_x, mode_area.bottom, GRID_WIDTH, len(HELP_LINES) + 2)

    return GridLayout(
        bounds=bounds,
        grid_area=grid_area,
        cells=tuple(cells),
        vertical_dividers=tuple(grid_x + offset for offset in divider_offsets(CELL_WIDTH)),
        horizontal_dividers=tuple(grid_y + offset for offset in divider_offsets(CELL_HEIGHT)),
        mode_area=mode_area.intersection(bounds),
        help_area=help_area.intersection(bounds),
    )


def layout_to_dict(layout: GridLayout) -> dict[str, object]:
    return {
        "bounds": layout.bounds.to_dict(),
        "grid_area": layout.grid_area.to_dict(),
        "vertical_dividers": list(layout.vertical_dividers),
        "horizontal_dividers": list(layout.horizontal_dividers),
        "mode_area": layout.mode_area.to_dict(),
        "help_area": layout.help_area.to_dict(),
        "cells": [
            {
                "x": cell.x,
                "y": cell.y,
                "area": cell.area.to_dict(),
                "region": cell.region.to_dict(),
                "right_thick": cell.right_thick,
                "bottom_thick": cell.bottom_thick,
            }
            for cell in layout.cells
        ],
    }
