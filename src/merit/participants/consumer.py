"""
Consumer Demand
===============

Exogenous demand for energy, expressed as a normalised profile and a
total demand which it is scaled by.
"""

from dataclasses import dataclass
from typing import Sequence

import numpy as np

from ..errors import check_frame
from ..profiles import as_profile


@dataclass(eq=False)
class Consumer:
    """
    Demand participant.

    Attributes:
        key: Participant identifier
        profile: Per-frame share of total demand
        total_demand: Demand the profile is scaled by
    """
    key: str
    profile: Sequence[float]
    total_demand: float

    def __post_init__(self):
        self.profile = as_profile(self.profile)
        self.total_demand = float(self.total_demand)

    @property
    def horizon(self) -> int:
        return len(self.profile)

    def load_at(self, frame: int) -> float:
        """Demand in the given frame."""
        return float(self.profile[check_frame(frame, self.horizon)] * self.total_demand)

    def loads(self) -> np.ndarray:
        return self.profile * self.total_demand
