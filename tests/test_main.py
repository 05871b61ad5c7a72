import contextlib
import io
import runpy
import sys
import tempfile
import unittest
from pathlib import Path

from main import run, run_with_trace
from notegrid.puzzle import load_puzzle_text
from notegrid.state import InputMode


PUZZLE = "53..7....\n6..195...\n.98....6.\n"


def write_temp_text(test_case: unittest.TestCase, text: str) -> str:
    tmp_file = tempfile.NamedTemporaryFile(mode="w", suffix=".txt", delete=False, encoding="utf-8")
    tmp_file.write(text)
    tmp_file.flush()
    tmp_file.close()
    test_case.addCleanup(lambda: Path(tmp_file.name).unlink(missing_ok=True))
    return tmp_file.name


class TestPuzzleFileInput(unittest.TestCase):
    def test_loads_puzzle_text(self) -> None:
        file_path = write_temp_text(self, PUZZLE)
        self.assertEqual(load_puzzle_text(file_path), PUZZLE)

    def test_raises_when_file_is_missing(self) -> None:
        with tempfile.TemporaryDirectory() as temp_dir:
            with self.assertRaises(ValueError) as ctx:
                load_puzzle_text(str(Path(temp_dir) / "missing.txt"))
        self.assertIn("not found", str(ctx.exception))

    def test_raises_when_path_is_a_directory(self) -> None:
        with tempfile.TemporaryDirectory() as temp_dir:
            with self.assertRaises(ValueError):
                load_puzzle_text(temp_dir)

    def test_malformed_content_is_not_an_error(self) -> None:
        file_path = write_temp_text(self, "abc\n\n\n0000000000000\nzzzz\n" * 5)
        state, rows = run(load_puzzle_text(file_path))
        self.assertTrue(all(cell.main_number is None for row in state.grid for cell in row))
        self.assertEqual(len(rows), 66)


class TestRun(unittest.TestCase):
    def test_run_applies_keys_and_renders(self) -> None:
        state, rows = run(PUZZLE, ["right", "right", ",", "3", "7"], width=80, height=66)

        self.assertEqual(state.cursor, (2, 0))
        self.assertIs(state.mode, InputMode.CORNER)
        self.assertEqual(state.cell_at(2, 0).corner_numbers.to_list(), [3, 7])
        self.assertEqual(rows[47].strip(), "Mode: Corner (,)")

    def test_run_with_trace_collects_messages(self) -> None:
        _, rows, trace_log = run_with_trace(PUZZLE, ["5", "q"], width=40, height=20)

        self.assertEqual(len(rows), 20)
        self.assertEqual(len(trace_log), 2)
        self.assertIn("is fixed", trace_log[0])

    def test_run_rejects_negative_size(self) -> None:
        with self.assertRaises(ValueError):
            run(PUZZLE, width=-5)


class TestCommandLine(unittest.TestCase):
    def test_dump_prints_frame(self) -> None:
        file_path = write_temp_text(self, PUZZLE)
        output = self._run_main(["--input", file_path, "--dump", "--keys", ".", "4"])
        self.assertIn("Mode: Centre (.)", output)

    def test_dump_with_trace_prints_trace(self) -> None:
        file_path = write_temp_text(self, PUZZLE)
        output = self._run_main(["--input", file_path, "--dump", "--trace", "--keys", "right"])
        self.assertIn("cursor (0, 0) -> (1, 0)", output)

    def test_missing_puzzle_exits_with_error(self) -> None:
        with tempfile.TemporaryDirectory() as temp_dir:
            with self.assertRaises(SystemExit) as ctx:
                self._run_main(["--input", str(Path(temp_dir) / "nope.txt"), "--dump"])
        self.assertTrue(str(ctx.exception.code).startswith("Error: puzzle file not found"))

    def _run_main(self, argv: list[str]) -> str:
        main_path = Path(__file__).resolve().parent.parent / "main.py"
        buffer = io.StringIO()
        old_argv = sys.argv
        sys.argv = [str(main_path)] + argv
        try:
            with contextlib.redirect_stdout(buffer):
                runpy.run_path(str(main_path), run_name="__main__")
        finally:
            sys.argv = old_argv
        return buffer.getvalue()


if __name__ == "__main__":
    unittest.main()
