"""
Fragment - one tumbling edge of the ship's outline during an explosion.
"""

from dataclasses import dataclass, field
import numpy as np

from spacerocks.core.physics import rotate


@dataclass
class Fragment:
    """Ship outline edge drifting away after a collision."""
    start: np.ndarray          # Edge endpoints in ship-local space
    end: np.ndarray
    direction: np.ndarray      # Unit drift direction, fixed at explosion
    spin: float                # rad/s
    speed: float               # Arena units/s
    displacement: np.ndarray = field(default_factory=lambda: np.zeros(2))
    rotation: float = 0.0
    
    def update(self, dt: float, drag: float) -> None:
        """Drift, tumble and slow down.
        
        Args:
            dt: Time step in seconds
            drag: Exponential speed decay rate (1/s)
        """
        self.displacement = self.displacement + self.direction * self.speed * dt
        self.rotation += self.spin * dt
        self.speed *= np.exp(-drag * dt)
    
    def segment(self, origin: np.ndarray, angle: float) -> np.ndarray:
        """Current edge in arena space.
        
        The edge spins about its own midpoint, then moves with the ship
        transform frozen at the moment of the explosion.
        
        Args:
            origin: Ship position when it exploded
            angle: Ship angle when it exploded
        
        Returns:
            Array of shape (2, 2) with both endpoints
        """
        midpoint = (self.start + self.end) / 2
        local = rotate(np.array([self.start, self.end]) - midpoint, self.rotation) + midpoint
        return rotate(local, angle) + origin + self.displacement
