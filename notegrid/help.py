from typing import Optional

from rules.rules import (
    COLOR_CENTRE,
    COLOR_CORNER,
    COLOR_ENTERED,
    COLOR_FIXED,
    COLOR_TEXT,
    MAX_CORNER_MARKS,
)

from .state import InputMode


HelpLine = list[tuple[str, Optional[str]]]

HELP_TITLE = "Help"

HELP_LINES: list[HelpLine] = [
    [("Movement: ", COLOR_TEXT), ("↑ ↓ ← →", COLOR_CORNER), (" arrow keys to navigate the grid", None)],
    [("Modes: ", COLOR_TEXT)],
    [("/", COLOR_CORNER), (" - Normal mode (enter numbers directly)", None)],
    [(",", COLOR_CORNER), (" - Corner mode (small numbers in corners)", None)],
    [(".", COLOR_CORNER), (" - Centre mode (small numbers in centre)", None)],
    [("Numbers: ", COLOR_TEXT), ("Use keys 1-9 to enter values", None)],
    [("Color coding:", COLOR_TEXT)],
    [("Green", COLOR_FIXED), (" - Fixed numbers (unchangeable)", None)],
    [("White", COLOR_ENTERED), (" - User-entered numbers", None)],
    [("Yellow", COLOR_CORNER), (f" - Corner numbers (first {MAX_CORNER_MARKS} shown)", None)],
    [("Blue", COLOR_CENTRE), (" - Centre numbers", None)],
    [("Exit: ", COLOR_TEXT), ("q", COLOR_CORNER), (" to quit the application", None)],
]

MODE_LABELS = {
    InputMode.NORMAL: "Mode: Normal (/)",
    InputMode.CORNER: "Mode: Corner (,)",
    InputMode.CENTRE: "Mode: Centre (.)",
}
