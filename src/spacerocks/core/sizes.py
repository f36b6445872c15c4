"""
Asteroid size classes.

Each size carries its collision radius, score value and the size it
splits into when shot. All three are resolved through the tables below
so per-size values live in exactly one place.
"""

from enum import Enum
from typing import Optional


class AsteroidSize(Enum):
    """Asteroid size class, ordered from smallest to largest."""
    TINY = 0
    SMALL = 1
    MEDIUM = 2
    LARGE = 3
    HUGE = 4
    
    @property
    def rank(self) -> int:
        """Ordering index (TINY = 0)."""
        return self.value
    
    @property
    def radius(self) -> float:
        """Collision radius in arena units."""
        return _RADIUS[self]
    
    @property
    def score(self) -> int:
        """Points awarded for hitting an asteroid of this size."""
        return _SCORE[self]
    
    @property
    def split_size(self) -> Optional["AsteroidSize"]:
        """Size of the fragments produced when shot (None for TINY)."""
        if self is AsteroidSize.TINY:
            return None
        return AsteroidSize(self.value - 1)
    
    def __lt__(self, other: "AsteroidSize") -> bool:
        if not isinstance(other, AsteroidSize):
            return NotImplemented
        return self.value < other.value


_RADIUS = {
    AsteroidSize.TINY: 8.0,
    AsteroidSize.SMALL: 16.0,
    AsteroidSize.MEDIUM: 28.0,
    AsteroidSize.LARGE: 40.0,
    AsteroidSize.HUGE: 56.0,
}

_SCORE = {
    AsteroidSize.TINY: 100,
    AsteroidSize.SMALL: 80,
    AsteroidSize.MEDIUM: 50,
    AsteroidSize.LARGE: 30,
    AsteroidSize.HUGE: 20,
}
