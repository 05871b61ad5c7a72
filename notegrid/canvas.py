from .layout import Rect
from .render import BOX, FILL, HLINE, TEXT, VLINE, DrawInstruction, render_frame
from .state import SessionState
from .types import FrameRows


HORIZONTAL = "─"
VERTICAL = "│"
TOP_LEFT = "┌"
TOP_RIGHT = "┐"
BOTTOM_LEFT = "└"
BOTTOM_RIGHT = "┘"


class Canvas:
    def __init__(self, width: int, height: int) -> None:
        self.width = width
        self.height = height
        self._cells = [[" "] * width for _ in range(height)]

    def put(self, x: int, y: int, ch: str) -> None:
        if 0 <= x < self.width and 0 <= y < self.height:
            self._cells[y][x] = ch

    def paint(self, instructions: list[DrawInstruction]) -> None:
        for instruction in instructions:
            self.paint_one(instruction)

    def paint_one(self, instruction: DrawInstruction) -> None:
        rect = instruction.rect
        if instruction.kind == FILL:
            self._fill(rect, " ")
        elif instruction.kind == BOX:
            self._box(rect)
        elif instruction.kind == TEXT:
            for offset, ch in enumerate(instruction.text):
                self.put(rect.x + offset, rect.y, ch)
        elif instruction.kind == VLINE:
            for y in range(rect.y, rect.bottom):
                self.put(rect.x, y, VERTICAL)
        elif instruction.kind == HLINE:
            for x in range(rect.x, rect.right):
                self.put(x, rect.y, HORIZONTAL)
        else:
            raise ValueError(f"unknown draw instruction kind: {instruction.kind}")

    def rows(self) -> FrameRows:
        return ["".join(row) for row in self._cells]

    def text(self) -> str:
        return "\n".join(self.rows())

    def _fill(self, rect: Rect, ch: str) -> None:
        for y in range(rect.y, rect.bottom):
            for x in range(rect.x, rect.right):
                self.put(x, y, ch)

    def _box(self, rect: Rect) -> None:
        if rect.width < 2 or rect.height < 2:
            self._fill(rect, " ")
            return
        self._fill(Rect(rect.x + 1, rect.y + 1, rect.width - 2, rect.height - 2), " ")
        for x in range(rect.x + 1, rect.right - 1):
            self.put(x, rect.y, HORIZONTAL)
            self.put(x, rect.bottom - 1, HORIZONTAL)
        for y in range(rect.y + 1, rect.bottom - 1):
            self.put(rect.x, y, VERTICAL)
            self.put(rect.right - 1, y, VERTICAL)
        self.put(rect.x, rect.y, TOP_LEFT)
        self.put(rect.right - 1, rect.y, TOP_RIGHT)
        self.put(rect.x, rect.bottom - 1, BOTTOM_LEFT)
        self.put(rect.right - 1, rect.bottom - 1, BOTTOM_RIGHT)


def render_text(state: SessionState, width: int, height: int) -> FrameRows:
    canvas = Canvas(width, height)
    canvas.paint(render_frame(state, width, height))
    return canvas.rows()
