"""
Storage
=======

Reserve model for stored energy and the decay rules it accepts.
"""

from .decay import ConstantDecay, DecayRule, NoDecay, ProportionalDecay
from .reserve import Reserve

__all__ = ["Reserve", "DecayRule", "NoDecay", "ConstantDecay", "ProportionalDecay"]
