import curses
from typing import Optional

from rules.rules import KEY_DOWN, KEY_LEFT, KEY_RIGHT, KEY_UP, POLL_INTERVAL_MS

from .controller import apply_key
from .render import BOX, FILL, HLINE, TEXT, VLINE, DrawInstruction, render_frame
from .state import SessionState
from .types import KeySymbol, TraceLog
from .utils import trace


CURSES_ARROWS = {
    curses.KEY_UP: KEY_UP,
    curses.KEY_DOWN: KEY_DOWN,
    curses.KEY_LEFT: KEY_LEFT,
    curses.KEY_RIGHT: KEY_RIGHT,
}

BASE_COLORS = {
    "black": curses.COLOR_BLACK,
    "white": curses.COLOR_WHITE,
    "green": curses.COLOR_GREEN,
    "yellow": curses.COLOR_YELLOW,
    "blue": curses.COLOR_BLUE,
}


def translate_key(code: int) -> Optional[KeySymbol]:
    if code in CURSES_ARROWS:
        return CURSES_ARROWS[code]
    if 0 <= code < 256:
        ch = chr(code)
        if ch.isprintable():
            return ch
    return None


class CursesPainter:
    def __init__(self, window: "curses.window") -> None:
        self._window = window
        self._pairs: dict[tuple[int, int], int] = {}
        self._has_colors = curses.has_colors()
        if self._has_colors:
            curses.start_color()

    def paint(self, instructions: list[DrawInstruction]) -> None:
        self._window.erase()
        for instruction in instructions:
            self._paint_one(instruction)
        self._window.refresh()

    def _paint_one(self, instruction: DrawInstruction) -> None:
        rect = instruction.rect
        attr = self._attr(instruction.fg, instruction.bg)
        if instruction.kind == FILL:
            for y in range(rect.y, rect.bottom):
                self._addstr(y, rect.x, " " * rect.width, attr)
        elif instruction.kind == BOX:
            self._box(instruction, attr)
        elif instruction.kind == TEXT:
            self._addstr(rect.y, rect.x, instruction.text, attr)
        elif instruction.kind == VLINE:
            for y in range(rect.y, rect.bottom):
                self._addstr(y, rect.x, "│", attr)
        elif instruction.kind == HLINE:
            self._addstr(rect.y, rect.x, "─" * rect.width, attr)

    def _box(self, instruction: DrawInstruction, attr: int) -> None:
        rect = instruction.rect
        if rect.width < 2 or rect.height < 2:
            return
        inner = " " * (rect.width - 2)
        self._addstr(rect.y, rect.x, "┌" + "─" * (rect.width - 2) + "┐", attr)
        for y in range(rect.y + 1, rect.bottom - 1):
            self._addstr(y, rect.x, "│" + inner + "│", attr)
        self._addstr(rect.bottom - 1, rect.x, "└" + "─" * (rect.width - 2) + "┘", attr)

    def _attr(self, fg: Optional[str], bg: Optional[str]) -> int:
        if not self._has_colors or (fg is None and bg is None):
            return curses.A_NORMAL
        key = (self._color(fg, curses.COLOR_WHITE), self._color(bg, curses.COLOR_BLACK))
        if key not in self._pairs:
            pair_id = len(self._pairs) + 1
            if pair_id >= curses.COLOR_PAIRS:
                return curses.A_NORMAL
            curses.init_pair(pair_id, key[0], key[1])
            self._pairs[key] = pair_id
        return curses.color_pair(self._pairs[key])

    def _color(self, name: Optional[str], default: int) -> int:
        if name is None:
            return default
        if name == "dark_gray":
            # bright black needs 16 colors; magenta is no digit or border color
            return 8 if curses.COLORS >= 16 else curses.COLOR_MAGENTA
        return BASE_COLORS.get(name, default)

    def _addstr(self, row: int, col: int, text: str, attr: int) -> None:
        max_y, max_x = self._window.getmaxyx()
        if row < 0 or row >= max_y or col < 0 or col >= max_x:
            return
        text = text[: max_x - col]
        try:
            self._window.addstr(row, col, text, attr)
        except curses.error:
            # the bottom-right cell raises after the character is written
            pass


def session_loop(
    window: "curses.window",
    state: SessionState,
    poll_ms: int = POLL_INTERVAL_MS,
    trace_enabled: bool = False,
    trace_log: Optional[TraceLog] = None,
) -> None:
    try:
        curses.curs_set(0)
    except curses.error:
        pass
    window.keypad(True)
    window.timeout(poll_ms)
    painter = CursesPainter(window)

    while True:
        height, width = window.getmaxyx()
        painter.paint(render_frame(state, width, height))

        code = window.getch()
        if code == -1:
            continue
        key = translate_key(code)
        if key is None:
            trace(trace_enabled, trace_log, f"Input code {code} ignored")
            continue
        if not apply_key(state, key, trace_enabled=trace_enabled, trace_log=trace_log):
            return


def run_session(
    state: SessionState,
    poll_ms: int = POLL_INTERVAL_MS,
    trace_enabled: bool = False,
    trace_log: Optional[TraceLog] = None,
) -> SessionState:
    curses.wrapper(session_loop, state, poll_ms, trace_enabled, trace_log)
    return state
