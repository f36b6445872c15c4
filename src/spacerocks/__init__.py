"""
SpaceRocks - real-time simulation core for an arcade asteroid shooter.

This package provides the simulation layer of the game:
- Player ship flight model with lasers and an explosion state machine
- Procedurally generated, continuously replenished asteroid field
- Asteroid splitting, debris particles and scoring
- Toroidal 2D arena physics
- Per-tick renderable snapshots and audio cue queues

Drawing, audio playback, windowing and device polling are left to the
host application.
"""

__version__ = "0.1.0"

from spacerocks.simulation.simulator import Simulator, SimulatorConfig
from spacerocks.ship.controls import Control, ShipInputs
from spacerocks.core.cues import Cue

__all__ = ["Simulator", "SimulatorConfig", "Control", "ShipInputs", "Cue", "__version__"]
