"""
Simulation Settings
===================

Validated configuration shared by the order, the dispatch engine and
the reserve model.
"""

from __future__ import annotations

from pydantic import BaseModel, Field

DEFAULT_HORIZON = 8760  # one non-leap year at hourly resolution


class SimulationSettings(BaseModel):
    horizon: int = Field(DEFAULT_HORIZON, ge=1, description="Number of frames in one calculation.")
    sort_dispatchables: bool = Field(
        True,
        description=(
            "If True, dispatchables are stably sorted by ascending marginal cost "
            "before a calculation. If False they are dispatched in registration order."
        ),
    )


def validate_horizon(value: int) -> int:
    """Validate a horizon value, raising pydantic's ValidationError if invalid."""
    return SimulationSettings(horizon=value).horizon
