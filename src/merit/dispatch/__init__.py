"""
Dispatch
========

Merit-order dispatch of an Order and read-only summaries of the result.
"""

from .engine import FrameAllocation, calculate, calculate_frame
from .results import DispatchSummary, FrameResult

__all__ = ["FrameAllocation", "calculate", "calculate_frame", "DispatchSummary", "FrameResult"]
