"""
Asteroid generator - procedural asteroid creation.

Generates:
- Fresh asteroids spawned just outside the visible arena, aimed inward
- Split fragments at a parent's position
- Jagged closed outlines with a randomized point count
"""

from dataclasses import dataclass
from typing import List
import logging
import numpy as np

from spacerocks.core.physics import ArenaConfig, length, normalize
from spacerocks.core.sampling import (
    ASTEROID_SPEED_FLOOR,
    OUTLINE_FLOOR,
    Sampler,
    SamplingError,
)
from spacerocks.core.sizes import AsteroidSize
from spacerocks.field.asteroid import Asteroid, AsteroidConfig

logger = logging.getLogger(__name__)


@dataclass
class GeneratorConfig:
    """Configuration for procedural asteroid generation."""
    # Motion
    max_speed: float = 80.0            # Arena units/s
    speed_floor: float = ASTEROID_SPEED_FLOOR
    
    # Spawn region, as a multiple of the arena half extents
    spawn_margin: float = 1.5
    max_spawn_attempts: int = 1000
    
    # Outline
    min_outline_points: int = 8
    max_outline_points: int = 13
    outline_floor: float = OUTLINE_FLOOR
    
    # Splitting
    min_split: int = 2
    max_split: int = 3
    
    def __post_init__(self):
        if self.max_speed <= 0:
            raise ValueError(f"max_speed must be positive, got {self.max_speed}")
        if not 0.0 < self.speed_floor < 1.0 or not 0.0 < self.outline_floor < 1.0:
            raise ValueError("speed_floor and outline_floor must be in (0, 1)")
        if self.spawn_margin <= 1.0:
            raise ValueError("spawn_margin must be > 1 to spawn outside the arena")
        if self.min_outline_points < 3 or self.min_outline_points > self.max_outline_points:
            raise ValueError(
                f"Invalid outline point range "
                f"{self.min_outline_points}-{self.max_outline_points}"
            )
        if self.min_split < 1 or self.min_split > self.max_split:
            raise ValueError(f"Invalid split range {self.min_split}-{self.max_split}")


class AsteroidGenerator:
    """Procedural asteroid generator.
    
    New asteroids appear outside the visible arena and drift toward a
    random point inside it, so the field keeps refilling from the edges.
    
    Usage:
        generator = AsteroidGenerator(sampler=Sampler(seed=1))
        asteroid = generator.generate()
        small = generator.generate(AsteroidSize.SMALL, position=vec(0, 0))
    """
    
    def __init__(
        self,
        config: GeneratorConfig | None = None,
        sampler: Sampler | None = None,
        arena: ArenaConfig | None = None,
        asteroid_config: AsteroidConfig | None = None,
    ):
        """Initialize generator.
        
        Args:
            config: Generator configuration. Uses defaults if None.
            sampler: Random source. A fresh unseeded one if None.
            arena: Arena dimensions
            asteroid_config: Debris configuration handed to each asteroid
        """
        self.config = config or GeneratorConfig()
        self.sampler = sampler or Sampler()
        self.arena = arena or ArenaConfig()
        self.asteroid_config = asteroid_config or AsteroidConfig()
    
    def generate(
        self,
        size: AsteroidSize | None = None,
        position: np.ndarray | None = None,
    ) -> Asteroid:
        """Generate a new asteroid.
        
        Args:
            size: Size class (uniform over all sizes if None)
            position: Spawn position (outside the arena if None)
        
        Returns:
            New asteroid
        """
        if size is None:
            size = self.sampler.weighted_size()
        
        if position is None:
            position = self._sample_spawn_point()
        else:
            position = np.array(position, dtype=float)
        
        velocity = self._sample_velocity(position)
        outline = self.generate_outline(size.radius)
        
        logger.debug(
            "Spawned %s asteroid at (%.1f, %.1f)", size.name, position[0], position[1]
        )
        
        return Asteroid(
            size=size,
            position=position,
            velocity=velocity,
            outline=outline,
            config=self.asteroid_config,
            arena=self.arena,
        )
    
    def split(self, asteroid: Asteroid) -> List[Asteroid]:
        """Generate the fragments of a shot asteroid.
        
        Args:
            asteroid: Parent asteroid
        
        Returns:
            2-3 asteroids of the next smaller size at the parent's
            position (empty for TINY)
        """
        child_size = asteroid.size.split_size
        if child_size is None:
            return []
        
        count = self.sampler.integers(self.config.min_split, self.config.max_split)
        return [
            self.generate(child_size, position=asteroid.position.copy())
            for _ in range(count)
        ]
    
    def generate_outline(self, radius: float) -> np.ndarray:
        """Generate a jagged closed outline.
        
        Rays are cast at equal angular spacing, each with a random length
        between outline_floor * radius and radius.
        
        Args:
            radius: Nominal radius
        
        Returns:
            Points of shape (n + 1, 2), last point repeating the first
        """
        n = self.sampler.integers(
            self.config.min_outline_points,
            self.config.max_outline_points,
        )
        step = 2 * np.pi / n
        
        points = []
        for i in range(n):
            ray = radius * self.sampler.minimum(self.config.outline_floor)
            points.append((np.cos(i * step) * ray, np.sin(i * step) * ray))
        points.append(points[0])
        
        return np.array(points, dtype=float)
    
    def _sample_spawn_point(self) -> np.ndarray:
        """Rejection-sample a point outside the visible arena."""
        half_w = self.arena.half_width
        half_h = self.arena.half_height
        margin = self.config.spawn_margin
        
        for _ in range(self.config.max_spawn_attempts):
            point = self.sampler.point_in(half_w * margin, half_h * margin)
            if not self.arena.contains(point):
                return point
        
        raise SamplingError(
            f"No spawn point outside the arena after "
            f"{self.config.max_spawn_attempts} attempts"
        )
    
    def _sample_velocity(self, position: np.ndarray) -> np.ndarray:
        """Aim at a random interior point with a floored random speed."""
        target = self.sampler.point_in(self.arena.half_width, self.arena.half_height)
        offset = target - position
        if length(offset) > 1e-9:
            direction = normalize(offset)
        else:
            # Split children can start exactly on the drawn target.
            direction = self.sampler.unit_vector()
        
        speed = self.sampler.minimum(self.config.speed_floor) * self.config.max_speed
        return direction * speed
