from typing import Optional

from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel, Field

from notegrid.canvas import render_text
from notegrid.controller import apply_keys
from notegrid.layout import compute_layout, layout_to_dict
from notegrid.state import InputMode, build_initial_state, snapshot_grid
from rules.rules import DEFAULT_FRAME_HEIGHT, DEFAULT_FRAME_WIDTH


class PlayRequest(BaseModel):
    puzzle: str = Field(default="", description="Puzzle text: up to 9 lines of up to 9 characters, digits 1-9 are givens")
    keys: list[str] = Field(
        default_factory=list,
        description="Key symbols applied in order: up/down/left/right, '/', ',', '.', digits, 'q' ends the replay",
    )
    width: int = Field(default=DEFAULT_FRAME_WIDTH, ge=0, le=1000, description="Terminal width used to render the frame")
    height: int = Field(default=DEFAULT_FRAME_HEIGHT, ge=0, le=1000, description="Terminal height used to render the frame")
    trace: bool = Field(default=False, description="Include key handling trace output in the response")


class CellResponse(BaseModel):
    main_number: Optional[int] = None
    corner_numbers: list[int]
    centre_numbers: list[int]
    is_fixed: bool


class PlayResponse(BaseModel):
    grid: list[list[CellResponse]]
    cursor: tuple[int, int]
    mode: InputMode
    ended: bool
    frame_rows: list[str]
    frame_text: str
    trace: Optional[list[str]] = None


class RectResponse(BaseModel):
    x: int
    y: int
    width: int
    height: int


class CellLayoutResponse(BaseModel):
    x: int
    y: int
    area: RectResponse
    region: RectResponse
    right_thick: bool
    bottom_thick: bool


class LayoutResponse(BaseModel):
    bounds: RectResponse
    grid_area: RectResponse
    vertical_dividers: list[int]
    horizontal_dividers: list[int]
    mode_area: RectResponse
    help_area: RectResponse
    cells: list[CellLayoutResponse]


app = FastAPI(
    title="Sudoku Notes API",
    description="Replay key presses against a sudoku note-taking grid and render the resulting frame.",
    version="0.1.0",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["http://127.0.0.1:5173", "http://localhost:5173"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.get("/health")
def health() -> dict[str, str]:
    return {"status": "ok"}


@app.post("/play", response_model=PlayResponse)
def play(request: PlayRequest) -> PlayResponse:
    try:
        trace_log: list[str] = []
        state = build_initial_state(request.puzzle)
        running = apply_keys(state, request.keys, trace_enabled=request.trace, trace_log=trace_log)
        frame_rows = render_text(state, request.width, request.height)
        return PlayResponse(
            grid=[[CellResponse(**cell) for cell in row] for row in snapshot_grid(state)],
            cursor=state.cursor,
            mode=state.mode,
            ended=not running,
            frame_rows=frame_rows,
            frame_text="\n".join(frame_rows),
            trace=trace_log if request.trace else None,
        )
    except ValueError as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc


@app.get("/layout", response_model=LayoutResponse)
def layout(width: int = DEFAULT_FRAME_WIDTH, height: int = DEFAULT_FRAME_HEIGHT) -> LayoutResponse:
    try:
        return LayoutResponse(**layout_to_dict(compute_layout(width, height)))
    except ValueError as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc
