"""
Merit
=====

Hourly merit-order dispatch simulator:
- Must-run supply is subtracted from consumer demand each frame
- Dispatchable supply is loaded cheapest-first against the remainder
- The marginal dispatchable is recorded as the frame's price setter

Architecture:
- participants/: Load models (always-on, consumer, dispatchable)
- order.py: Participant registration and demand aggregation
- dispatch/: Dispatch engine and result summaries
- storage/: Reserve buffer with decaying stored energy
"""

from .config import DEFAULT_HORIZON, SimulationSettings
from .dispatch import DispatchSummary, calculate, calculate_frame
from .errors import FrameOutOfRangeError
from .order import Order
from .participants import AlwaysOn, Consumer, Dispatchable
from .storage import Reserve

__version__ = "1.0.0"

__all__ = [
    "DEFAULT_HORIZON",
    "SimulationSettings",
    "DispatchSummary",
    "calculate",
    "calculate_frame",
    "FrameOutOfRangeError",
    "Order",
    "AlwaysOn",
    "Consumer",
    "Dispatchable",
    "Reserve",
]
