"""
Particle - debris left behind by a destroyed tiny asteroid.
"""

from dataclasses import dataclass, field
import numpy as np

from spacerocks.core.physics import integrate, length


@dataclass
class Particle:
    """Single debris particle.
    
    Position is relative to the owning asteroid's position, so the
    dispersal check is a plain distance from the origin.
    """
    direction: np.ndarray
    speed: float
    position: np.ndarray = field(default_factory=lambda: np.zeros(2))
    age: float = 0.0
    
    def update(self, dt: float, drag: float) -> None:
        """Advance particle and decay its speed.
        
        Args:
            dt: Time step in seconds
            drag: Exponential speed decay rate (1/s)
        """
        self.position = integrate(self.position, self.direction * self.speed, dt)
        self.speed *= np.exp(-drag * dt)
        self.age += dt
    
    @property
    def spread(self) -> float:
        """Distance travelled from the parent asteroid."""
        return length(self.position)
