from typing import Optional


KeySymbol = str
TraceLog = list[str]
Color = Optional[str]
FrameRows = list[str]
