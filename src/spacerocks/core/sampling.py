"""
Sampling - random draws used by procedural generation.

Provides:
- Uniform draws in [0, 1)
- Rejection-sampled draws with a minimum floor
- Uniform choice over asteroid size classes
"""

from typing import Optional
import numpy as np

from spacerocks.core.sizes import AsteroidSize


# Floors for minimum() draws. Each keeps a generated magnitude away
# from zero while staying uniform above the floor.
ASTEROID_SPEED_FLOOR = 0.25
OUTLINE_FLOOR = 0.5
PARTICLE_SPEED_FLOOR = 0.35
FRAGMENT_FLOOR = 0.5

DEFAULT_MAX_ATTEMPTS = 10000


class SamplingError(RuntimeError):
    """A bounded rejection loop ran out of attempts."""


class Sampler:
    """Random source for the simulation.
    
    Wraps a numpy Generator so a whole run can be seeded from one place.
    
    Usage:
        sampler = Sampler(seed=42)
        speed = sampler.minimum(ASTEROID_SPEED_FLOOR) * max_speed
    """
    
    def __init__(
        self,
        seed: int | None = None,
        max_attempts: int = DEFAULT_MAX_ATTEMPTS,
    ):
        """Initialize sampler.
        
        Args:
            seed: Random seed (None for random)
            max_attempts: Retry limit for rejection loops
        """
        self.seed = seed
        self.max_attempts = max_attempts
        self._rng = np.random.default_rng(seed)
    
    def reseed(self, seed: Optional[int]) -> None:
        """Restart the random stream from a new seed."""
        self.seed = seed
        self._rng = np.random.default_rng(seed)
    
    def uniform(self) -> float:
        """Draw a float in [0, 1)."""
        return float(self._rng.random())
    
    def minimum(self, floor: float) -> float:
        """Draw uniformly from [floor, 1) by rejection.
        
        Args:
            floor: Lower bound, must be in [0, 1)
        
        Returns:
            First uniform draw that is >= floor
        
        Raises:
            SamplingError: If no draw met the floor within max_attempts
        """
        assert 0.0 <= floor < 1.0, f"floor must be in [0, 1), got {floor}"
        
        for _ in range(self.max_attempts):
            value = self.uniform()
            if value >= floor:
                return value
        
        raise SamplingError(
            f"No draw >= {floor} after {self.max_attempts} attempts"
        )
    
    def weighted_size(self) -> AsteroidSize:
        """Draw one of the asteroid size classes with equal probability."""
        sizes = list(AsteroidSize)
        return sizes[int(self._rng.integers(0, len(sizes)))]
    
    def integers(self, low: int, high: int) -> int:
        """Draw an integer in [low, high] (inclusive)."""
        return int(self._rng.integers(low, high + 1))
    
    def angle(self) -> float:
        """Draw an angle in [0, 2*pi)."""
        return self.uniform() * 2 * np.pi
    
    def unit_vector(self) -> np.ndarray:
        """Draw a random unit direction."""
        theta = self.angle()
        return np.array([np.cos(theta), np.sin(theta)])
    
    def sign(self) -> float:
        """Draw -1.0 or 1.0."""
        return 1.0 if self.uniform() < 0.5 else -1.0
    
    def point_in(self, half_width: float, half_height: float) -> np.ndarray:
        """Draw a point uniformly inside a centered rectangle.
        
        Args:
            half_width: Half extent along X
            half_height: Half extent along Y
        
        Returns:
            Point [x, y]
        """
        return np.array([
            self._rng.uniform(-half_width, half_width),
            self._rng.uniform(-half_height, half_height),
        ])
