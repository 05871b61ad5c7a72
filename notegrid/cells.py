from dataclasses import dataclass, field
from typing import Iterable, Iterator, Optional

from rules.rules import GRID_SIZE, MAX_DIGIT, MIN_DIGIT

from .validation import validate_digit, validate_position


class DigitSet:
    # bit (d - 1) is set when digit d is a member
    __slots__ = ("_mask",)

    def __init__(self, digits: Iterable[int] = ()) -> None:
        self._mask = 0
        for digit in digits:
            self._mask |= 1 << (validate_digit(digit) - 1)

    def toggle(self, digit: int) -> None:
        self._mask ^= 1 << (digit - 1)

    def clear(self) -> None:
        self._mask = 0

    def to_list(self) -> list[int]:
        return list(self)

    def __contains__(self, digit: object) -> bool:
        if not isinstance(digit, int) or digit < MIN_DIGIT or digit > MAX_DIGIT:
            return False
        return bool(self._mask & (1 << (digit - 1)))

    def __iter__(self) -> Iterator[int]:
        for digit in range(MIN_DIGIT, MAX_DIGIT + 1):
            if self._mask & (1 << (digit - 1)):
                yield digit

    def __len__(self) -> int:
        return bin(self._mask).count("1")

    def __bool__(self) -> bool:
        return self._mask != 0

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, DigitSet):
            return NotImplemented
        return self._mask == other._mask

    def __repr__(self) -> str:
        return f"DigitSet({self.to_list()})"


@dataclass
class Cell:
    main_number: Optional[int] = None
    corner_numbers: DigitSet = field(default_factory=DigitSet)
    centre_numbers: DigitSet = field(default_factory=DigitSet)
    is_fixed: bool = False


Grid = list[list[Cell]]


def empty_grid() -> Grid:
    return [[Cell() for _ in range(GRID_SIZE)] for _ in range(GRID_SIZE)]


def load_grid(text: str) -> Grid:
    grid = empty_grid()
    # rows end at "\n" only; other control characters are ordinary non-digits
    for y, line in enumerate(text.split("\n")):
        if y >= GRID_SIZE:
            break
        line = line.removesuffix("\r")
        for x, ch in enumerate(line):
            if x >= GRID_SIZE:
                break
            if ch in "123456789":
                grid[y][x].main_number = int(ch)
                grid[y][x].is_fixed = True
    return grid


def set_main(grid: Grid, x: int, y: int, digit: int) -> bool:
    validate_position(x, y)
    validate_digit(digit)
    cell = grid[y][x]
    if cell.is_fixed:
        return False
    cell.corner_numbers.clear()
    cell.centre_numbers.clear()
    if cell.main_number == digit:
        cell.main_number = None
    else:
        cell.main_number = digit
    return True


def toggle_corner(grid: Grid, x: int, y: int, digit: int) -> bool:
    validate_position(x, y)
    validate_digit(digit)
    cell = grid[y][x]
    if cell.is_fixed or cell.main_number is not None:
        return False
    cell.corner_numbers.toggle(digit)
    return True


def toggle_centre(grid: Grid, x: int, y: int, digit: int) -> bool:
    validate_position(x, y)
    validate_digit(digit)
    cell = grid[y][x]
    if cell.is_fixed or cell.main_number is not None:
        return False
    cell.centre_numbers.toggle(digit)
    return True


def cell_to_dict(cell: Cell) -> dict[str, object]:
    return {
        "main_number": cell.main_number,
        "corner_numbers": cell.corner_numbers.to_list(),
        "centre_numbers": cell.centre_numbers.to_list(),
        "is_fixed": cell.is_fixed,
    }
