"""
Dispatch Engine
===============

Greedy single-pass merit-order dispatch. For each frame:
- Residual demand = consumer demand - always-on production
- Dispatchables are loaded in order, each up to its total capacity,
  until residual demand is exhausted
- The first unit whose capacity is not strictly less than the residual
  demand is the marginal unit and sets the price

If every dispatchable is saturated before demand is met, no price
setter is recorded for the frame.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Dict, Optional

from ..config import SimulationSettings
from ..errors import check_frame
from ..order import Order

logger = logging.getLogger(__name__)


@dataclass
class FrameAllocation:
    """
    Loads assigned in a single frame.

    Attributes:
        frame: Frame index
        loads: Assigned load keyed by dispatchable index. Units which
            receive no write are absent.
        price_setter: Index of the marginal unit, or None on shortage
    """
    frame: int
    loads: Dict[int, float] = field(default_factory=dict)
    price_setter: Optional[int] = None


def allocate_frame(frame: int, order: Order) -> FrameAllocation:
    """Compute the allocation for ``frame`` without modifying ``order``."""
    check_frame(frame, order.horizon)
    allocation = FrameAllocation(frame=frame)
    remaining = order.demand_at(frame) - order.always_on_at(frame)

    for index, participant in enumerate(order.dispatchables):
        max_load = participant.total_capacity

        if max_load < remaining:
            allocation.loads[index] = max_load
            remaining -= max_load
            continue

        # remaining is negative when always-on supply exceeds demand.
        if remaining > 0.0:
            allocation.loads[index] = remaining

        allocation.price_setter = index
        break

    return allocation


def commit_allocation(allocation: FrameAllocation, order: Order) -> None:
    check_frame(allocation.frame, order.horizon)
    for index, amount in allocation.loads.items():
        order.dispatchables[index].set_load_at(allocation.frame, amount)
    order.price_setters[allocation.frame] = allocation.price_setter


def calculate_frame(frame: int, order: Order) -> FrameAllocation:
    """Dispatch a single frame, writing the result into ``order``."""
    allocation = allocate_frame(frame, order)
    commit_allocation(allocation, order)
    return allocation


def calculate(order: Order, settings: Optional[SimulationSettings] = None) -> None:
    """
    Run the dispatch for every frame of the order's horizon.

    Mutates the dispatchable loads and price setters of ``order`` in
    place. Call ``order.reset()`` before calculating the same order again.

    Args:
        order: The merit order to calculate
        settings: Simulation settings; defaults sort dispatchables by cost
    """
    if settings is None:
        settings = SimulationSettings()

    if settings.sort_dispatchables:
        order.sort_dispatchables()

    logger.debug(
        "Calculating %d frames: %d always-on, %d consumers, %d dispatchables",
        order.horizon,
        len(order.always_ons),
        len(order.consumers),
        len(order.dispatchables),
    )

    for frame in range(order.horizon):
        calculate_frame(frame, order)

    logger.debug("Calculation finished")
