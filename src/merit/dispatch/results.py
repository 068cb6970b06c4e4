"""
Dispatch Results
================

Read-only summaries of a calculated Order:
- Per-frame demand, must-run supply and dispatched load
- Price setter per frame and how often each participant set it
- Frames with unmet demand
"""

from dataclasses import dataclass, field
from typing import Dict, List, Optional

import numpy as np
import pandas as pd

from ..order import Order


@dataclass
class FrameResult:
    """Results for a single frame."""
    frame: int
    demand: float
    always_on: float
    dispatched: float
    price_setter_key: Optional[str] = None

    @property
    def shortage(self) -> bool:
        """True when no dispatchable could set the price."""
        return self.price_setter_key is None

    def to_dict(self) -> dict:
        return {
            "frame": self.frame,
            "demand": self.demand,
            "always_on": self.always_on,
            "dispatched": self.dispatched,
            "price_setter": self.price_setter_key,
            "shortage": self.shortage,
        }


@dataclass
class DispatchSummary:
    """
    Summary of a calculated order.

    Attributes:
        horizon: Number of frames
        frames: Per-frame results
        dispatched_energy: Total load assigned to each dispatchable key
        price_setter_counts: Number of frames each key set the price
        shortage_frames: Frames in which demand was not met
    """
    horizon: int
    frames: List[FrameResult] = field(default_factory=list)
    dispatched_energy: Dict[str, float] = field(default_factory=dict)
    price_setter_counts: Dict[str, int] = field(default_factory=dict)
    shortage_frames: List[int] = field(default_factory=list)
    loads: Optional[pd.DataFrame] = field(default=None, repr=False, compare=False)

    @classmethod
    def from_order(cls, order: Order) -> "DispatchSummary":
        index = pd.RangeIndex(order.horizon, name="frame")
        if order.dispatchables:
            # Keys need not be unique, so build from columns rather than a dict.
            loads = pd.DataFrame(
                np.column_stack([participant.loads for participant in order.dispatchables]),
                index=index,
                columns=[participant.key for participant in order.dispatchables],
            )
        else:
            loads = pd.DataFrame(index=index)

        summary = cls(horizon=order.horizon, loads=loads)

        for participant in order.dispatchables:
            summary.dispatched_energy[participant.key] = (
                summary.dispatched_energy.get(participant.key, 0.0) + participant.total_load()
            )

        dispatched = loads.sum(axis=1).to_numpy(dtype=float)

        for frame in range(order.horizon):
            setter = order.price_setter_at(frame)
            key = setter.key if setter is not None else None

            summary.frames.append(FrameResult(
                frame=frame,
                demand=order.demand_at(frame),
                always_on=order.always_on_at(frame),
                dispatched=float(dispatched[frame]),
                price_setter_key=key,
            ))

            if key is None:
                summary.shortage_frames.append(frame)
            else:
                summary.price_setter_counts[key] = summary.price_setter_counts.get(key, 0) + 1

        return summary

    @property
    def shortage_count(self) -> int:
        return len(self.shortage_frames)

    def to_frame(self) -> pd.DataFrame:
        """Per-dispatchable loads, one column per participant, indexed by frame."""
        if self.loads is None:
            return pd.DataFrame(index=pd.RangeIndex(self.horizon, name="frame"))
        return self.loads.copy()

    def to_dict(self) -> dict:
        return {
            "horizon": self.horizon,
            "shortage_count": self.shortage_count,
            "shortage_frames": list(self.shortage_frames),
            "dispatched_energy": dict(self.dispatched_energy),
            "price_setter_counts": dict(self.price_setter_counts),
        }
