"""
Laser - projectile fired by the ship.

Lasers are owned by the ship. Asteroids only read their position and
set the hit flag; the ship removes flagged lasers on its next update.
"""

from dataclasses import dataclass
import numpy as np

from spacerocks.core.physics import ArenaConfig, integrate


@dataclass
class Laser:
    """Single laser bolt."""
    position: np.ndarray       # Arena-centered
    direction: np.ndarray      # Unit vector, fixed at spawn
    hit: bool = False          # Set by the asteroid it struck
    
    def update(self, dt: float, speed: float) -> None:
        """Move the laser along its direction.
        
        Args:
            dt: Time step in seconds
            speed: Travel speed in arena units per second
        """
        self.position = integrate(self.position, self.direction * speed, dt)
    
    def is_expired(self, arena: ArenaConfig) -> bool:
        """Check whether the laser should be culled.
        
        Args:
            arena: Arena dimensions
        
        Returns:
            True if the laser hit something or left the arena
        """
        return self.hit or not arena.contains(self.position)
