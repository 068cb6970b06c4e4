"""
Reserve
=======

Stored-energy buffer for storage-backed technologies:
- Volume ceiling on the amount stored
- Lazy resolution of each frame from the frame before it
- Injectable decay between consecutive frames
"""

from __future__ import annotations

import math
from typing import Dict, Optional, Tuple

from ..config import DEFAULT_HORIZON, validate_horizon
from ..errors import check_frame
from .decay import DecayRule, NoDecay


class Reserve:
    """
    Energy stored at the end of each frame.

    Frame 0 starts empty. A frame which has not been written is resolved
    on first access as the previous frame's amount less decay, and the
    result is cached. Writing to a frame does not invalidate frames
    which were already resolved after it.

    Attributes:
        volume: Maximum amount which may be stored
        horizon: Number of frames
    """

    def __init__(
        self,
        volume: float,
        decay: Optional[DecayRule] = None,
        horizon: int = DEFAULT_HORIZON
    ):
        """
        Create a reserve.

        Args:
            volume: Maximum amount which may be stored
            decay: Rule giving the amount lost at the start of each frame;
                defaults to no decay
            horizon: Number of frames
        """
        if volume < 0:
            raise ValueError("volume must be non-negative")

        self.volume = float(volume)
        self.horizon = validate_horizon(horizon)
        self._decay = decay if decay is not None else NoDecay()
        self._store: Dict[int, float] = {0: 0.0}
        # frame -> (previous stored amount, decay evaluated for it)
        self._decays: Dict[int, Tuple[float, float]] = {}

    @classmethod
    def without_decay(cls, volume: float, horizon: int = DEFAULT_HORIZON) -> "Reserve":
        """Create a reserve whose stored energy never decays."""
        return cls(volume, NoDecay(), horizon)

    def at(self, frame: int) -> float:
        """
        Amount stored at the end of ``frame``.

        Resolves and caches every unresolved frame between the nearest
        resolved frame before it and ``frame`` itself.
        """
        check_frame(frame, self.horizon)

        if frame in self._store:
            return self._store[frame]

        start = frame
        while start > 0 and start - 1 not in self._store:
            start -= 1

        if start == 0:
            self._store[0] = 0.0
            start = 1

        for current in range(start, frame + 1):
            self._store[current] = self._store[current - 1] - self._decay_from(
                current, self._store[current - 1]
            )

        return self._store[frame]

    def set(self, frame: int, amount: float) -> None:
        """
        Set the amount stored in ``frame``.

        Ignores the volume; callers are responsible for staying within it.
        """
        self._store[check_frame(frame, self.horizon)] = amount

    def add(self, frame: int, amount: float) -> float:
        """
        Store energy in ``frame`` without exceeding the volume.

        Returns:
            The amount actually added. This may be less than ``amount``,
            and is 0.0 for a negative or NaN amount.
        """
        stored = self.at(frame)

        if math.isnan(amount) or amount < 0:
            return 0.0

        assign = amount
        if stored + amount > self.volume:
            assign = self.volume - stored

        self.set(frame, stored + assign)
        return assign

    def take(self, frame: int, amount: float) -> float:
        """
        Remove energy from ``frame``.

        Returns:
            The amount removed. This is less than ``amount`` if not enough
            was stored, and 0.0 for a negative or NaN amount.
        """
        check_frame(frame, self.horizon)
        if math.isnan(amount) or amount < 0:
            return 0.0

        stored = self.at(frame)

        if stored > amount:
            self.set(frame, stored - amount)
            return amount

        self.set(frame, 0.0)
        return stored

    def decay_at(self, frame: int) -> float:
        """Energy lost at the start of ``frame``; never more than was stored."""
        check_frame(frame, self.horizon)
        if frame == 0:
            return 0.0

        return self._decay_from(frame, self.at(frame - 1))

    def _decay_from(self, frame: int, previous: float) -> float:
        cached = self._decays.get(frame)
        if cached is not None and cached[0] == previous:
            return cached[1]

        decay = min(self._decay(frame, previous), previous)
        self._decays[frame] = (previous, decay)
        return decay

    def resolved_frames(self) -> int:
        """Number of frames with a cached amount."""
        return len(self._store)
