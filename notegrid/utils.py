from typing import Optional

from .types import TraceLog


def trace(enabled: bool, trace_log: Optional[TraceLog], message: str) -> None:
    if not enabled:
        return
    if trace_log is not None:
        trace_log.append(message)
    else:
        print(message)


def clamp(value: int, lower: int, upper: int) -> int:
    return max(lower, min(upper, value))


def format_digits(digits: list[int]) -> str:
    return "".join(str(digit) for digit in digits)
