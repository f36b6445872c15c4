"""
Core module - shared building blocks for the simulation.

This module contains:
- physics: 2D vector math, toroidal wrap and arena dimensions
- sampling: Random source with floored rejection sampling
- sizes: Asteroid size classes with radius, score and split size
- cues: Audio event identifiers
"""

from spacerocks.core.physics import ArenaConfig
from spacerocks.core.cues import Cue
from spacerocks.core.sizes import AsteroidSize
from spacerocks.core.sampling import Sampler, SamplingError

__all__ = [
    "ArenaConfig",
    "Cue",
    "AsteroidSize",
    "Sampler",
    "SamplingError",
]
