import unittest
from unittest import mock

try:
    import curses
except ImportError:
    curses = None

if curses is not None:
    from notegrid.terminal import CursesPainter, session_loop, translate_key

from notegrid.cells import Cell, DigitSet
from notegrid.layout import Rect
from notegrid.render import DrawInstruction, TEXT, render_cell
from notegrid.state import InputMode, build_initial_state


class FakeWindow:
    def __init__(self, codes: list[int], width: int = 80, height: int = 66) -> None:
        self._codes = list(codes)
        self.width = width
        self.height = height
        self.frames = 0
        self.writes: list[tuple[int, int, str]] = []
        self.poll_ms = None

    def getmaxyx(self) -> tuple[int, int]:
        return self.height, self.width

    def keypad(self, flag: bool) -> None:
        pass

    def timeout(self, delay: int) -> None:
        self.poll_ms = delay

    def erase(self) -> None:
        self.writes = []

    def refresh(self) -> None:
        self.frames += 1

    def addstr(self, row: int, col: int, text: str, attr: int = 0) -> None:
        self.writes.append((row, col, text))

    def getch(self) -> int:
        return self._codes.pop(0)


@unittest.skipIf(curses is None, "curses is not available on this platform")
class TestTranslateKey(unittest.TestCase):
    def test_arrow_keys_map_to_movement_symbols(self) -> None:
        self.assertEqual(translate_key(curses.KEY_UP), "up")
        self.assertEqual(translate_key(curses.KEY_DOWN), "down")
        self.assertEqual(translate_key(curses.KEY_LEFT), "left")
        self.assertEqual(translate_key(curses.KEY_RIGHT), "right")

    def test_printable_characters_pass_through(self) -> None:
        self.assertEqual(translate_key(ord("7")), "7")
        self.assertEqual(translate_key(ord(",")), ",")
        self.assertEqual(translate_key(ord("q")), "q")

    def test_other_codes_are_dropped(self) -> None:
        self.assertIsNone(translate_key(-1))
        self.assertIsNone(translate_key(27))
        self.assertIsNone(translate_key(curses.KEY_RESIZE))
        self.assertIsNone(translate_key(curses.KEY_F1))


@unittest.skipIf(curses is None, "curses is not available on this platform")
class TestSessionLoop(unittest.TestCase):
    def test_loop_applies_keys_until_quit(self) -> None:
        state = build_initial_state("53..7....")
        window = FakeWindow([curses.KEY_RIGHT, curses.KEY_RIGHT, -1, ord(","), ord("3"), ord("7"), ord("q"), ord("1")])

        with mock.patch("curses.curs_set"), mock.patch("curses.has_colors", return_value=False):
            session_loop(window, state, poll_ms=50)

        self.assertEqual(window.poll_ms, 50)
        self.assertEqual(window.frames, 7)
        self.assertEqual(state.cursor, (2, 0))
        self.assertIs(state.mode, InputMode.CORNER)
        self.assertEqual(state.cell_at(2, 0).corner_numbers.to_list(), [3, 7])

    def test_loop_traces_ignored_codes(self) -> None:
        trace_log: list[str] = []
        window = FakeWindow([27, ord("q")])

        with mock.patch("curses.curs_set"), mock.patch("curses.has_colors", return_value=False):
            session_loop(window, build_initial_state(""), trace_enabled=True, trace_log=trace_log)

        self.assertEqual(trace_log, ["Input code 27 ignored", "Key 'q': end session"])

    def test_painter_drops_writes_outside_window(self) -> None:
        window = FakeWindow([], width=10, height=3)
        with mock.patch("curses.has_colors", return_value=False):
            painter = CursesPainter(window)
        painter.paint(
            [
                DrawInstruction(TEXT, Rect(8, 0, 5, 1), "abcde"),
                DrawInstruction(TEXT, Rect(0, 5, 1, 1), "z"),
            ]
        )
        self.assertEqual(window.writes, [(0, 8, "ab")])
        self.assertEqual(window.frames, 1)


@unittest.skipIf(curses is None, "curses is not available on this platform")
class TestCursesColors(unittest.TestCase):
    def paint_with_eight_colors(self, instructions: list[DrawInstruction]) -> dict[int, tuple[int, int]]:
        pairs: dict[int, tuple[int, int]] = {}

        def init_pair(pair_id: int, fg: int, bg: int) -> None:
            pairs[pair_id] = (fg, bg)

        with mock.patch("curses.has_colors", return_value=True), \
                mock.patch("curses.start_color"), \
                mock.patch.object(curses, "COLORS", 8, create=True), \
                mock.patch.object(curses, "COLOR_PAIRS", 64, create=True), \
                mock.patch("curses.init_pair", side_effect=init_pair), \
                mock.patch("curses.color_pair", return_value=0):
            CursesPainter(FakeWindow([], width=20, height=10)).paint(instructions)
        return pairs

    def test_selected_cell_stays_readable_on_eight_colors(self) -> None:
        pairs = self.paint_with_eight_colors(render_cell(Cell(main_number=4), Rect(0, 0, 8, 5), True, False, False))

        self.assertTrue(pairs)
        for fg, bg in pairs.values():
            self.assertNotEqual(fg, bg)

    def test_selected_annotations_stay_readable_on_eight_colors(self) -> None:
        cells = [
            Cell(main_number=6, is_fixed=True),
            Cell(corner_numbers=DigitSet([1, 2]), centre_numbers=DigitSet([5])),
        ]
        instructions: list[DrawInstruction] = []
        for cell in cells:
            instructions.extend(render_cell(cell, Rect(0, 0, 8, 5), True, True, True))
        pairs = self.paint_with_eight_colors(instructions)

        self.assertGreaterEqual(len(pairs), 3)
        for fg, bg in pairs.values():
            self.assertNotEqual(fg, bg)


if __name__ == "__main__":
    unittest.main()
