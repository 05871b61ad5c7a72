from typing import Iterable, Optional

from rules.rules import (
    GRID_SIZE,
    KEY_CENTRE_MODE,
    KEY_CORNER_MODE,
    KEY_NORMAL_MODE,
    KEY_QUIT,
    MOVEMENT_KEYS,
)

from .cells import Cell, set_main, toggle_centre, toggle_corner
from .state import InputMode, SessionState
from .types import KeySymbol, TraceLog
from .utils import clamp, trace


MODE_KEYS = {
    KEY_NORMAL_MODE: InputMode.NORMAL,
    KEY_CORNER_MODE: InputMode.CORNER,
    KEY_CENTRE_MODE: InputMode.CENTRE,
}


def apply_key(
    state: SessionState,
    key: KeySymbol,
    trace_enabled: bool = False,
    trace_log: Optional[TraceLog] = None,
) -> bool:
    if key == KEY_QUIT:
        trace(trace_enabled, trace_log, "Key 'q': end session")
        return False

    if key in MOVEMENT_KEYS:
        dx, dy = MOVEMENT_KEYS[key]
        before = state.cursor
        state.cursor_x = clamp(state.cursor_x + dx, 0, GRID_SIZE - 1)
        state.cursor_y = clamp(state.cursor_y + dy, 0, GRID_SIZE - 1)
        trace(trace_enabled, trace_log, f"Key '{key}': cursor {before} -> {state.cursor}")
        return True

    if key in MODE_KEYS:
        state.mode = MODE_KEYS[key]
        trace(trace_enabled, trace_log, f"Key '{key}': mode -> {state.mode.value}")
        return True

    if len(key) != 1 or key not in "123456789":
        trace(trace_enabled, trace_log, f"Key {key!r} ignored")
        return True

    _apply_digit(state, int(key), trace_enabled, trace_log)
    return True


def apply_keys(
    state: SessionState,
    keys: Iterable[KeySymbol],
    trace_enabled: bool = False,
    trace_log: Optional[TraceLog] = None,
) -> bool:
    for key in keys:
        if not apply_key(state, key, trace_enabled=trace_enabled, trace_log=trace_log):
            return False
    return True


def _apply_digit(state: SessionState, digit: int, trace_enabled: bool, trace_log: Optional[TraceLog]) -> None:
    x, y = state.cursor
    cell = state.selected_cell()

    if state.mode is InputMode.NORMAL:
        changed = set_main(state.grid, x, y, digit)
    elif state.mode is InputMode.CORNER:
        changed = toggle_corner(state.grid, x, y, digit)
    elif state.mode is InputMode.CENTRE:
        changed = toggle_centre(state.grid, x, y, digit)
    else:
        raise ValueError(f"unknown input mode: {state.mode}")

    if changed:
        trace(trace_enabled, trace_log, f"Key '{digit}': {state.mode.value} digit at ({x}, {y}) -> {_describe_cell(cell)}")
    elif cell.is_fixed:
        trace(trace_enabled, trace_log, f"Key '{digit}': cell ({x}, {y}) is fixed, no change")
    else:
        trace(trace_enabled, trace_log, f"Key '{digit}': cell ({x}, {y}) holds main number {cell.main_number}, no change")


def _describe_cell(cell: Cell) -> str:
    if cell.main_number is not None:
        return f"main={cell.main_number}"
    return f"corner={cell.corner_numbers.to_list()} centre={cell.centre_numbers.to_list()}"
