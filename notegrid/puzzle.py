from pathlib import Path


def load_puzzle_text(input_path: str) -> str:
    path = Path(input_path)
    try:
        return path.read_text(encoding="utf-8")
    except FileNotFoundError as exc:
        raise ValueError(f"puzzle file not found: {input_path}") from exc
    except (OSError, UnicodeDecodeError) as exc:
        raise ValueError(f"puzzle file could not be read: {input_path}") from exc
