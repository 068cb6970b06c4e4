"""
Merit Order
===========

Collects the participants of a calculation and the per-frame price
setter results written by the dispatch engine.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import List, Optional, Union

from .config import DEFAULT_HORIZON, validate_horizon
from .errors import check_frame
from .participants import AlwaysOn, Consumer, Dispatchable

logger = logging.getLogger(__name__)


@dataclass(eq=False)
class Order:
    """
    Participants in the merit order.

    Dispatchables are dispatched in the order they are stored. Register
    them in ascending cost order, or call ``sort_dispatchables`` (the
    engine does so by default) before a calculation.

    Attributes:
        horizon: Number of frames in a calculation
        always_ons: Must-run producers
        consumers: Demand participants
        dispatchables: Dispatchable producers, in dispatch order
        price_setters: Per frame, the index into ``dispatchables`` of the
            marginal unit, or None when demand was not met
    """
    horizon: int = DEFAULT_HORIZON
    always_ons: List[AlwaysOn] = field(default_factory=list)
    consumers: List[Consumer] = field(default_factory=list)
    dispatchables: List[Dispatchable] = field(default_factory=list)
    price_setters: List[Optional[int]] = field(init=False, repr=False)

    def __post_init__(self):
        self.horizon = validate_horizon(self.horizon)
        self.price_setters = [None] * self.horizon

        for participant in (*self.always_ons, *self.consumers, *self.dispatchables):
            self._check_horizon(participant)

    def _check_horizon(self, participant: Union[AlwaysOn, Consumer, Dispatchable]) -> None:
        if participant.horizon != self.horizon:
            raise ValueError(
                f"{participant.key!r} covers {participant.horizon} frames; "
                f"the order has a horizon of {self.horizon}"
            )

    def add_always_on(self, participant: AlwaysOn) -> None:
        """Add an always-on participant to the order."""
        self._check_horizon(participant)
        self.always_ons.append(participant)

    def add_consumer(self, participant: Consumer) -> None:
        """Add a consumer to the order."""
        self._check_horizon(participant)
        self.consumers.append(participant)

    def add_dispatchable(self, participant: Dispatchable) -> None:
        """Add a dispatchable participant to the end of the order."""
        self._check_horizon(participant)
        self.dispatchables.append(participant)

    def demand_at(self, frame: int) -> float:
        """Total demand for energy in ``frame``."""
        check_frame(frame, self.horizon)
        total = 0.0
        for consumer in self.consumers:
            total += consumer.load_at(frame)
        return total

    def always_on_at(self, frame: int) -> float:
        """Total must-run production in ``frame``."""
        check_frame(frame, self.horizon)
        total = 0.0
        for producer in self.always_ons:
            total += producer.load_at(frame)
        return total

    def sort_dispatchables(self) -> bool:
        """
        Sort dispatchables by ascending cost.

        The sort is stable, so participants with equal cost keep their
        registration order. Price setters index the previous order, so
        they are cleared when the order changes.

        Returns:
            True if the dispatch order changed
        """
        before = list(self.dispatchables)
        self.dispatchables.sort(key=lambda participant: participant.cost)

        changed = any(a is not b for a, b in zip(before, self.dispatchables))
        if changed:
            self.price_setters = [None] * self.horizon
            logger.debug(
                "Reordered dispatchables by cost: %s",
                [participant.key for participant in self.dispatchables],
            )
        return changed

    def price_setter_at(self, frame: int) -> Optional[Dispatchable]:
        """The participant which set the price in ``frame``, if any."""
        index = self.price_setters[check_frame(frame, self.horizon)]
        if index is None:
            return None
        return self.dispatchables[index]

    def shortage_frames(self) -> List[int]:
        """Frames in which the dispatchables could not meet demand."""
        return [frame for frame, index in enumerate(self.price_setters) if index is None]

    def reset(self) -> None:
        """Clear all results so the order may be calculated again."""
        self.price_setters = [None] * self.horizon
        for participant in self.dispatchables:
            participant.reset_loads()
