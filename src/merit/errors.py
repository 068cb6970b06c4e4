"""Errors raised by the merit-order core."""


class FrameOutOfRangeError(IndexError):
    """Raised when a frame index falls outside ``[0, horizon)``."""

    def __init__(self, frame: int, horizon: int):
        self.frame = frame
        self.horizon = horizon
        super().__init__(f"Frame {frame} is outside the horizon [0, {horizon})")


def check_frame(frame: int, horizon: int) -> int:
    """Return ``frame`` unchanged, or raise if it is not a valid index."""
    if frame < 0 or frame >= horizon:
        raise FrameOutOfRangeError(frame, horizon)
    return frame
