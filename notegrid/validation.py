from rules.rules import GRID_SIZE, MAX_DIGIT, MIN_DIGIT


def validate_digit(digit: int) -> int:
    if isinstance(digit, bool) or not isinstance(digit, int):
        raise ValueError("digit must be an integer")
    if digit < MIN_DIGIT or digit > MAX_DIGIT:
        raise ValueError(f"digit must be between {MIN_DIGIT} and {MAX_DIGIT}")
    return digit


def validate_position(x: int, y: int) -> tuple[int, int]:
    for axis_name, value in (("x", x), ("y", y)):
        if isinstance(value, bool) or not isinstance(value, int):
            raise ValueError(f"{axis_name} must be an integer")
        if value < 0 or value >= GRID_SIZE:
            raise ValueError(f"{axis_name} must be between 0 and {GRID_SIZE - 1}")
    return x, y


def validate_terminal_size(width: int, height: int) -> tuple[int, int]:
    for axis_name, value in (("width", width), ("height", height)):
        if isinstance(value, bool) or not isinstance(value, int):
            raise ValueError(f"{axis_name} must be an integer")
        if value < 0:
            raise ValueError(f"{axis_name} must not be negative")
    return width, height
