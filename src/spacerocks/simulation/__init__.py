"""
Simulation module - Per-tick game loop.

This module contains:
- Simulator: Main loop driving ship and asteroid updates
- World: Owned simulation state (ship, asteroids, random source, score)
"""

from spacerocks.simulation.simulator import Simulator, SimulatorConfig, TickResult
from spacerocks.simulation.world import World

__all__ = [
    "Simulator",
    "SimulatorConfig",
    "TickResult",
    "World",
]
