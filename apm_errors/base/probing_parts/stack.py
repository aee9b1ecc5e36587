"""Stack capture helper for errors implementing ``StackTracer``."""
from __future__ import annotations

import traceback
from traceback import FrameSummary
from typing import Optional, Tuple


def capture_stack(skip: int = 0, limit: Optional[int] = None) -> Tuple[FrameSummary, ...]:
    """Capture the caller's stack, oldest frame first.

    Args:
        skip: Number of innermost frames to drop in addition to this
            function's own frame (``skip=1`` also hides the caller, which is
            what an error's ``__init__`` usually wants).
        limit: Keep at most this many of the innermost remaining frames.

    Returns:
        An immutable tuple of ``FrameSummary`` entries.

    Raises:
        ValueError: If ``skip`` is negative.
    """
    if skip < 0:
        raise ValueError("skip must be >= 0")
    frames = traceback.extract_stack()[: -(skip + 1)]
    if limit is not None:
        frames = frames[-limit:] if limit > 0 else []
    return tuple(frames)


def traceback_frames(err: object) -> Tuple[FrameSummary, ...]:
    """Return the frames of a raised exception's ``__traceback__`` (empty otherwise)."""
    tb = getattr(err, "__traceback__", None)
    if tb is None:
        return ()
    return tuple(traceback.extract_tb(tb))


__all__ = ["capture_stack", "traceback_frames"]
