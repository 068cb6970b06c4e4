"""
Dispatchable Supply
===================

Controllable producers which the dispatch engine loads, cheapest
first, until residual demand is met.
"""

from dataclasses import dataclass, field

import numpy as np

from ..config import DEFAULT_HORIZON, validate_horizon
from ..errors import check_frame


@dataclass(eq=False)
class Dispatchable:
    """
    Dispatchable supply participant.

    The engine writes the assigned load for each frame exactly once. The
    setter itself does not enforce capacity; the engine never assigns more
    than ``total_capacity``.

    Attributes:
        key: Participant identifier
        cost: Marginal cost, used as the merit-order sort key
        capacity: Output capacity of a single unit
        units: Number of units
        horizon: Number of frames the load array covers
    """
    key: str
    cost: float
    capacity: float
    units: float
    horizon: int = DEFAULT_HORIZON
    _load: np.ndarray = field(init=False, repr=False)

    def __post_init__(self):
        """Validate parameters and allocate the load array."""
        if self.capacity < 0:
            raise ValueError("capacity must be non-negative")
        if self.units < 0:
            raise ValueError("units must be non-negative")

        self.cost = float(self.cost)
        self.capacity = float(self.capacity)
        self.units = float(self.units)
        self.horizon = validate_horizon(self.horizon)
        self._load = np.zeros(self.horizon, dtype=float)

    @property
    def total_capacity(self) -> float:
        """Combined capacity of every unit."""
        return self.capacity * self.units

    @property
    def loads(self) -> np.ndarray:
        """Read-only view of the assigned load in every frame."""
        view = self._load.view()
        view.setflags(write=False)
        return view

    def load_at(self, frame: int) -> float:
        return float(self._load[check_frame(frame, self.horizon)])

    def set_load_at(self, frame: int, amount: float) -> float:
        """
        Set the load assigned in ``frame``.

        Returns:
            The amount which was set

        Raises:
            FrameOutOfRangeError: if ``frame`` is outside the horizon
        """
        self._load[check_frame(frame, self.horizon)] = amount
        return amount

    def reset_loads(self) -> None:
        self._load[:] = 0.0

    def total_load(self) -> float:
        """Energy produced over the whole horizon."""
        return float(self._load.sum())
