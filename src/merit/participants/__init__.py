"""
Participants
============

Load models for the members of a merit order:
- AlwaysOn: must-run supply scaled from a profile
- Consumer: exogenous demand scaled from a profile
- Dispatchable: controllable supply loaded by the dispatch engine
"""

from .always_on import AlwaysOn
from .consumer import Consumer
from .dispatchable import Dispatchable

__all__ = ["AlwaysOn", "Consumer", "Dispatchable"]
