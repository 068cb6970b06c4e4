"""
Decay Rules
===========

A decay rule is any callable ``(frame, stored) -> amount`` returning how
much of the energy stored at the end of the previous frame is lost at
the start of ``frame``. Rules must be pure; the reserve evaluates each
at most once per frame.
"""

from dataclasses import dataclass
from typing import Callable

DecayRule = Callable[[int, float], float]


@dataclass(frozen=True)
class NoDecay:
    """Stored energy never decays."""

    def __call__(self, frame: int, stored: float) -> float:
        return 0.0


@dataclass(frozen=True)
class ConstantDecay:
    """A fixed amount is lost every frame."""
    amount: float

    def __post_init__(self):
        if self.amount < 0:
            raise ValueError("amount must be non-negative")

    def __call__(self, frame: int, stored: float) -> float:
        return self.amount


@dataclass(frozen=True)
class ProportionalDecay:
    """
    Self-discharge of a fixed fraction of the stored energy per frame.

    Attributes:
        rate: Fraction lost per frame (0-1)
    """
    rate: float

    def __post_init__(self):
        if not (0 <= self.rate <= 1):
            raise ValueError("rate must be between 0 and 1")

    def __call__(self, frame: int, stored: float) -> float:
        return stored * self.rate
