"""
Ship module - the player craft.

Includes:
- Ship: Flight model, firing, collision and explosion
- Laser: Projectiles owned by the ship
- Fragment: Tumbling outline edges shown while exploding
- Controls: Input capability interface
"""

from spacerocks.ship.controls import Control, ShipControls, ShipInputs
from spacerocks.ship.laser import Laser
from spacerocks.ship.fragment import Fragment
from spacerocks.ship.ship import Ship, ShipConfig, ShipState, FlightState

__all__ = [
    "Control",
    "ShipControls",
    "ShipInputs",
    "Laser",
    "Fragment",
    "Ship",
    "ShipConfig",
    "ShipState",
    "FlightState",
]
