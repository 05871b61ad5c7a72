GRID_SIZE = 9
BOX_SIZE = 3
MIN_DIGIT = 1
MAX_DIGIT = 9

CELL_WIDTH = 8
CELL_HEIGHT = 5
DIVIDER_WIDTH = 1
DIVIDER_HEIGHT = 1
GRID_TOP = 0

MAX_CORNER_MARKS = 4

DEFAULT_PUZZLE_PATH = "sudoku.txt"
DEFAULT_FRAME_WIDTH = 80
DEFAULT_FRAME_HEIGHT = 66
POLL_INTERVAL_MS = 100

KEY_UP = "up"
KEY_DOWN = "down"
KEY_LEFT = "left"
KEY_RIGHT = "right"
MOVEMENT_KEYS = {
    KEY_UP: (0, -1),
    KEY_DOWN: (0, 1),
    KEY_LEFT: (-1, 0),
    KEY_RIGHT: (1, 0),
}

KEY_NORMAL_MODE = "/"
KEY_CORNER_MODE = ","
KEY_CENTRE_MODE = "."
KEY_QUIT = "q"

COLOR_BACKGROUND = "black"
COLOR_SELECTED = "dark_gray"
COLOR_FIXED = "green"
COLOR_ENTERED = "white"
COLOR_CORNER = "yellow"
COLOR_CENTRE = "blue"
COLOR_DIVIDER = "white"
COLOR_TEXT = "white"
