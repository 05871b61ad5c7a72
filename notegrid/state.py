from dataclasses import dataclass, field
from enum import Enum

from .cells import Cell, Grid, cell_to_dict, empty_grid, load_grid


class InputMode(str, Enum):
    NORMAL = "normal"
    CORNER = "corner"
    CENTRE = "centre"


@dataclass
class SessionState:
    grid: Grid = field(default_factory=empty_grid)
    cursor_x: int = 0
    cursor_y: int = 0
    mode: InputMode = InputMode.NORMAL

    @property
    def cursor(self) -> tuple[int, int]:
        return self.cursor_x, self.cursor_y

    def cell_at(self, x: int, y: int) -> Cell:
        return self.grid[y][x]

    def selected_cell(self) -> Cell:
        return self.grid[self.cursor_y][self.cursor_x]


def build_initial_state(puzzle_text: str) -> SessionState:
    return SessionState(grid=load_grid(puzzle_text))


def snapshot_grid(state: SessionState) -> list[list[dict[str, object]]]:
    return [[cell_to_dict(cell) for cell in row] for row in state.grid]
