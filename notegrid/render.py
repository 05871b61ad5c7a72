from dataclasses import dataclass
from typing import Optional

from rules.rules import (
    COLOR_BACKGROUND,
    COLOR_CENTRE,
    COLOR_CORNER,
    COLOR_DIVIDER,
    COLOR_ENTERED,
    COLOR_FIXED,
    COLOR_SELECTED,
    COLOR_TEXT,
    MAX_CORNER_MARKS,
)

from .cells import Cell
from .help import HELP_LINES, HELP_TITLE, MODE_LABELS
from .layout import GridLayout, Rect, compute_layout
from .state import InputMode, SessionState
from .types import Color
from .utils import format_digits


FILL = "fill"
BOX = "box"
TEXT = "text"
VLINE = "vline"
HLINE = "hline"


@dataclass(frozen=True)
class DrawInstruction:
    kind: str
    rect: Rect
    text: str = ""
    fg: Color = None
    bg: Color = None


def corner_slots(region: Rect) -> list[tuple[int, int]]:
    # clockwise from top-left, inside the cell border
    return [
        (region.x + 1, region.y + 1),
        (region.right - 2, region.y + 1),
        (region.right - 2, region.bottom - 2),
        (region.x + 1, region.bottom - 2),
    ]


def render_cell(
    cell: Cell,
    region: Rect,
    is_selected: bool,
    right_thick: bool,
    bottom_thick: bool,
) -> list[DrawInstruction]:
    background = COLOR_SELECTED if is_selected else COLOR_BACKGROUND
    instructions = [DrawInstruction(BOX, region, bg=background)]

    if cell.main_number is not None:
        instructions.append(
            DrawInstruction(
                TEXT,
                region.centred(1, 1),
                str(cell.main_number),
                fg=COLOR_FIXED if cell.is_fixed else COLOR_ENTERED,
                bg=background,
            )
        )
    else:
        for (x, y), digit in zip(corner_slots(region), list(cell.corner_numbers)[:MAX_CORNER_MARKS]):
            instructions.append(DrawInstruction(TEXT, Rect(x, y, 1, 1), str(digit), fg=COLOR_CORNER, bg=background))

        if cell.centre_numbers:
            run = format_digits(cell.centre_numbers.to_list())
            area = region.centred(len(run), 1)
            instructions.append(DrawInstruction(TEXT, area, run[: area.width], fg=COLOR_CENTRE, bg=background))

    if right_thick:
        instructions.append(DrawInstruction(VLINE, Rect(region.right, region.y, 1, region.height), fg=COLOR_DIVIDER))
    if bottom_thick:
        instructions.append(DrawInstruction(HLINE, Rect(region.x, region.bottom, region.width, 1), fg=COLOR_DIVIDER))

    return instructions


def render_dividers(layout: GridLayout) -> list[DrawInstruction]:
    grid_area = layout.grid_area
    instructions = [
        DrawInstruction(HLINE, Rect(grid_area.x, y, grid_area.width, 1), fg=COLOR_DIVIDER)
        for y in layout.horizontal_dividers
    ]
    instructions.extend(
        DrawInstruction(VLINE, Rect(x, grid_area.y, 1, grid_area.height), fg=COLOR_DIVIDER)
        for x in layout.vertical_dividers
    )
    return instructions


def render_mode_indicator(mode: InputMode, area: Rect) -> list[DrawInstruction]:
    label = MODE_LABELS[mode]
    return [
        DrawInstruction(FILL, area),
        DrawInstruction(TEXT, area.centred(len(label), 1), label[: area.width], fg=COLOR_TEXT),
    ]


def render_help(area: Rect) -> list[DrawInstruction]:
    instructions = [
        DrawInstruction(BOX, area),
        DrawInstruction(TEXT, Rect(area.x + 1, area.y, len(HELP_TITLE), 1), HELP_TITLE),
    ]
    inner_width = max(0, area.width - 2)
    for row, line in enumerate(HELP_LINES):
        x = area.x + 1
        y = area.y + 1 + row
        if y >= area.bottom - 1:
            break
        for text, color in line:
            remaining = area.x + 1 + inner_width - x
            if remaining <= 0:
                break
            chunk = text[:remaining]
            instructions.append(DrawInstruction(TEXT, Rect(x, y, len(chunk), 1), chunk, fg=color))
            x += len(chunk)
    return instructions


def clip_instruction(instruction: DrawInstruction, bounds: Rect) -> Optional[DrawInstruction]:
    clipped = instruction.rect.intersection(bounds)
    if clipped.is_empty():
        return None
    if instruction.kind == BOX:
        # border placement depends on the full rectangle; backends drop off-screen writes
        return instruction
    text = instruction.text
    if instruction.kind == TEXT:
        start = clipped.x - instruction.rect.x
        text = text[start : start + clipped.width]
    return DrawInstruction(instruction.kind, clipped, text, fg=instruction.fg, bg=instruction.bg)


def render_frame(state: SessionState, width: int, height: int) -> list[DrawInstruction]:
    layout = compute_layout(width, height)

    instructions = render_dividers(layout)
    for cell_layout in layout.cells:
        instructions.extend(
            render_cell(
                state.cell_at(cell_layout.x, cell_layout.y),
                cell_layout.area,
                (cell_layout.x, cell_layout.y) == state.cursor,
                cell_layout.right_thick,
                cell_layout.bottom_thick,
            )
        )
    instructions.extend(render_mode_indicator(state.mode, layout.mode_area))
    instructions.extend(render_help(layout.help_area))

    clipped = (clip_instruction(instruction, layout.bounds) for instruction in instructions)
    return [instruction for instruction in clipped if instruction is not None]
