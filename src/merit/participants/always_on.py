"""
Always-On Supply
================

Must-run producers (wind, solar, run-of-river, CHP) whose output is
fixed by their profile and is never adjusted by the dispatch engine.
"""

from dataclasses import dataclass
from typing import Sequence

import numpy as np

from ..errors import check_frame
from ..profiles import as_profile


@dataclass(eq=False)
class AlwaysOn:
    """
    Must-run supply participant.

    Attributes:
        key: Participant identifier
        profile: Per-frame utilisation (nominally 0-1, not enforced)
        total_production: Nameplate production the profile is scaled by
    """
    key: str
    profile: Sequence[float]
    total_production: float

    def __post_init__(self):
        self.profile = as_profile(self.profile)
        self.total_production = float(self.total_production)

    @property
    def horizon(self) -> int:
        return len(self.profile)

    def load_at(self, frame: int) -> float:
        """Production in the given frame."""
        return float(self.profile[check_frame(frame, self.horizon)] * self.total_production)

    def loads(self) -> np.ndarray:
        """Production for every frame."""
        return self.profile * self.total_production
