"""Default trace formatter: captured exception/trace → printable lines.

Frames are ordered innermost first, one line per frame:
    test_login() - /app/tests/test_auth.py, line 42
"""

from __future__ import annotations

import traceback
from collections.abc import Sequence
from traceback import FrameSummary
from types import TracebackType

TraceHandle = BaseException | TracebackType | Sequence[FrameSummary] | None


def extract_frames(handle: TraceHandle) -> list[FrameSummary]:
    """Extract frames from a trace handle, innermost first.

    Sequences of FrameSummary are expected in traceback order (outermost first).

    Raises:
        TypeError: handle is not a supported trace handle
    """
    match handle:
        case None:
            frames: list[FrameSummary] = []
        case BaseException():
            frames = list(traceback.extract_tb(handle.__traceback__))
        case TracebackType():
            frames = list(traceback.extract_tb(handle))
        case str() | bytes():
            raise TypeError(f"unsupported trace handle: {type(handle).__name__}")
        case Sequence():
            frames = list(handle)
            for frame in frames:
                if not isinstance(frame, FrameSummary):
                    raise TypeError(f"unsupported trace frame: {type(frame).__name__}")
        case _:
            raise TypeError(f"unsupported trace handle: {type(handle).__name__}")
    frames.reverse()
    return frames


def format_frame(frame: FrameSummary) -> str:
    """Format one frame as: func() - file, line N."""
    return f"{frame.name}() - {frame.filename}, line {frame.lineno}"


def format_trace(handle: TraceHandle, start: int = 0, depth: int | None = None) -> str:
    """Render a trace handle, optionally restricted to a frame window.

    Args:
        handle: Exception, traceback object or FrameSummary sequence
        start: Index of the first frame, 0 = innermost
        depth: Number of frames to render. None = all remaining frames.

    Returns:
        Frame lines joined by newlines, "" when no frame is in the window.
    """
    if start < 0:
        raise ValueError(f"start must be >= 0, got {start}")
    if depth is not None and depth < 0:
        raise ValueError(f"depth must be >= 0, got {depth}")

    frames = extract_frames(handle)
    stop = None if depth is None else start + depth
    return "\n".join(format_frame(frame) for frame in frames[start:stop])
