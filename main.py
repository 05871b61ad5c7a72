import argparse
from typing import Iterable, Optional

from notegrid.canvas import render_text
from notegrid.controller import apply_keys
from notegrid.puzzle import load_puzzle_text
from notegrid.state import SessionState, build_initial_state
from rules.rules import DEFAULT_FRAME_HEIGHT, DEFAULT_FRAME_WIDTH, DEFAULT_PUZZLE_PATH


def run(
    puzzle_text: str,
    keys: Optional[Iterable[str]] = None,
    width: int = DEFAULT_FRAME_WIDTH,
    height: int = DEFAULT_FRAME_HEIGHT,
) -> tuple[SessionState, list[str]]:
    # boundary validation
    if not isinstance(puzzle_text, str):
        raise ValueError("puzzle_text must be a string")
    if not isinstance(width, int) or width < 0:
        raise ValueError("width must be a non-negative integer")
    if not isinstance(height, int) or height < 0:
        raise ValueError("height must be a non-negative integer")

    state = build_initial_state(puzzle_text)
    apply_keys(state, keys or [])
    return state, render_text(state, width, height)


def run_with_trace(
    puzzle_text: str,
    keys: Optional[Iterable[str]] = None,
    width: int = DEFAULT_FRAME_WIDTH,
    height: int = DEFAULT_FRAME_HEIGHT,
) -> tuple[SessionState, list[str], list[str]]:
    trace_log: list[str] = []
    state = build_initial_state(puzzle_text)
    apply_keys(state, keys or [], trace_enabled=True, trace_log=trace_log)
    return state, render_text(state, width, height), trace_log


def run_interactive(puzzle_text: str, trace_enabled: bool = False) -> tuple[SessionState, list[str]]:
    from notegrid.terminal import run_session

    trace_log: list[str] = []
    state = build_initial_state(puzzle_text)
    run_session(state, trace_enabled=trace_enabled, trace_log=trace_log)
    return state, trace_log


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Take notes on a 9x9 sudoku grid in the terminal")
    parser.add_argument("--input", default=DEFAULT_PUZZLE_PATH, help="Path to the puzzle text file (up to 9 lines of 9 characters)")
    parser.add_argument("--trace", action="store_true", help="Print the key handling trace when the session ends")
    parser.add_argument("--dump", action="store_true", help="Render one frame as text instead of starting a session")
    parser.add_argument("--width", type=int, default=DEFAULT_FRAME_WIDTH, help="Frame width used with --dump")
    parser.add_argument("--height", type=int, default=DEFAULT_FRAME_HEIGHT, help="Frame height used with --dump")
    parser.add_argument("--keys", nargs="*", default=[], help="Keys applied before --dump renders, arrows as up/down/left/right")
    return parser


if __name__ == "__main__":
    args = _build_parser().parse_args()

    try:
        puzzle_text = load_puzzle_text(args.input)
        if args.dump:
            if args.trace:
                _, rows, trace_log = run_with_trace(puzzle_text, args.keys, width=args.width, height=args.height)
            else:
                _, rows = run(puzzle_text, args.keys, width=args.width, height=args.height)
                trace_log = []
            print("\n".join(row.rstrip() for row in rows))
        else:
            _, trace_log = run_interactive(puzzle_text, trace_enabled=args.trace)
        for line in trace_log:
            print(line)
    except ValueError as exc:
        raise SystemExit(f"Error: {exc}")
