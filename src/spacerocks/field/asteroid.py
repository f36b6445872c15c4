"""
Asteroid - a breakable rock drifting through the arena.

Handles:
- Per-tick integration and exit culling
- Laser hit detection and scoring
- Splitting into smaller asteroids
- Particle dispersal once a tiny asteroid is destroyed
"""

from dataclasses import dataclass, field
from typing import List, TYPE_CHECKING
import logging
import numpy as np

from spacerocks.core.cues import Cue
from spacerocks.core.physics import (
    ArenaConfig,
    distance,
    dot,
    integrate,
    normalize,
)
from spacerocks.core.sampling import PARTICLE_SPEED_FLOOR
from spacerocks.core.sizes import AsteroidSize
from spacerocks.field.particle import Particle

if TYPE_CHECKING:
    from spacerocks.field.generator import AsteroidGenerator
    from spacerocks.ship.laser import Laser

logger = logging.getLogger(__name__)


@dataclass
class AsteroidConfig:
    """Debris behaviour for destroyed asteroids."""
    particle_count: int = 6
    particle_max_speed: float = 120.0   # Arena units/s
    particle_drag: float = 1.0          # Exponential decay rate (1/s)
    particle_spread: float = 24.0       # Dispersal radius before removal
    
    def __post_init__(self):
        if self.particle_count < 1:
            raise ValueError(f"particle_count must be at least 1, got {self.particle_count}")
        if self.particle_max_speed <= 0 or self.particle_spread <= 0:
            raise ValueError("particle_max_speed and particle_spread must be positive")
        if self.particle_drag < 0:
            raise ValueError(f"particle_drag must be non-negative, got {self.particle_drag}")
        
        # With exponential drag the slowest particle coasts at most
        # floor * max_speed / drag, so the spread must lie inside that.
        if self.particle_drag > 0:
            reach = PARTICLE_SPEED_FLOOR * self.particle_max_speed / self.particle_drag
            if self.particle_spread >= reach:
                raise ValueError(
                    f"particle_spread {self.particle_spread} is never reached; "
                    f"slowest particles stop within {reach:.1f}"
                )


@dataclass
class AsteroidEvents:
    """What a single asteroid update produced."""
    spawned: List["Asteroid"] = field(default_factory=list)
    hits: int = 0
    score: int = 0
    cues: List[Cue] = field(default_factory=list)


class Asteroid:
    """Single asteroid.
    
    The destroyed and stale flags only ever go from False to True.
    A destroyed asteroid no longer collides; it only moves its
    particles until they have dispersed, then goes stale.
    """
    
    def __init__(
        self,
        size: AsteroidSize,
        position: np.ndarray,
        velocity: np.ndarray,
        outline: np.ndarray,
        config: AsteroidConfig | None = None,
        arena: ArenaConfig | None = None,
    ):
        """Initialize asteroid.
        
        Args:
            size: Size class
            position: Arena-centered position
            velocity: Velocity in arena units per second (non-zero)
            outline: Closed polygon in local space, shape (n + 1, 2)
            config: Debris configuration
            arena: Arena dimensions
        """
        self.size = size
        self.position = np.asarray(position, dtype=float)
        self.velocity = np.asarray(velocity, dtype=float)
        self.outline = np.asarray(outline, dtype=float)
        self.config = config or AsteroidConfig()
        self.arena = arena or ArenaConfig()
        
        self.particles: List[Particle] = []
        self._destroyed = False
        self._stale = False
    
    @property
    def radius(self) -> float:
        """Collision radius."""
        return self.size.radius
    
    @property
    def destroyed(self) -> bool:
        """True once reduced to a particle cloud."""
        return self._destroyed
    
    @property
    def stale(self) -> bool:
        """True once eligible for removal."""
        return self._stale
    
    @property
    def collidable(self) -> bool:
        """Whether the ship and lasers can still hit this asteroid."""
        return not (self._destroyed or self._stale)
    
    def mark_stale(self) -> None:
        """Flag for removal at the end of the tick."""
        self._stale = True
    
    def mark_destroyed(self) -> None:
        """Flag as destroyed; collisions stop from here on."""
        self._destroyed = True
    
    def world_outline(self) -> np.ndarray:
        """Outline translated to arena space."""
        return self.outline + self.position
    
    def world_particles(self) -> np.ndarray:
        """Particle positions in arena space, shape (n, 2)."""
        if not self.particles:
            return np.zeros((0, 2))
        return np.array([p.position for p in self.particles]) + self.position
    
    def update(
        self,
        dt: float,
        lasers: List["Laser"],
        generator: "AsteroidGenerator",
    ) -> AsteroidEvents:
        """Advance asteroid by one time step.
        
        Args:
            dt: Time step in seconds
            lasers: Ship's lasers (read and hit-flagged, never resized)
            generator: Source for split asteroids and particle draws
        
        Returns:
            Spawned asteroids, score gained and cues for this tick
        """
        events = AsteroidEvents()
        
        if self._stale:
            return events
        
        if self._destroyed:
            self._update_particles(dt)
            return events
        
        self.position = integrate(self.position, self.velocity, dt)
        
        if self._has_left_arena():
            self.mark_stale()
            return events
        
        for laser in lasers:
            if laser.hit:
                continue
            if distance(laser.position, self.position) >= self.radius:
                continue
            
            laser.hit = True
            events.hits += 1
            events.score += self.size.score
            events.cues.append(Cue.ASTEROID)
            
            if self.size is AsteroidSize.TINY:
                self._destroy(generator)
                break
            
            # Overlapping lasers in one tick each split the rock again.
            self.mark_stale()
            children = generator.split(self)
            events.spawned.extend(children)
            logger.debug(
                "%s asteroid split into %d at (%.1f, %.1f)",
                self.size.name, len(children), self.position[0], self.position[1],
            )
        
        return events
    
    def _has_left_arena(self) -> bool:
        """Check whether the asteroid is fully outside and moving away.
        
        Tests the trailing edge of the disc, so asteroids that are still
        entering the view are kept.
        """
        trailing_edge = self.position - normalize(self.velocity) * self.radius
        if self.arena.contains(trailing_edge):
            return False
        return dot(self.velocity, -self.position) < 0
    
    def _destroy(self, generator: "AsteroidGenerator") -> None:
        """Reduce the asteroid to a particle cloud."""
        self.mark_destroyed()
        sampler = generator.sampler
        for _ in range(self.config.particle_count):
            speed = sampler.minimum(PARTICLE_SPEED_FLOOR) * self.config.particle_max_speed
            self.particles.append(Particle(
                direction=sampler.unit_vector(),
                speed=speed,
            ))
    
    def _update_particles(self, dt: float) -> None:
        """Advance particles; go stale once any has dispersed."""
        for particle in self.particles:
            particle.update(dt, self.config.particle_drag)
        
        if any(p.spread > self.config.particle_spread for p in self.particles):
            self.mark_stale()
    
    def get_state(self) -> dict:
        """Get asteroid state for inspection.
        
        Returns:
            Dictionary with asteroid data
        """
        return {
            "size": self.size.name,
            "x": float(self.position[0]),
            "y": float(self.position[1]),
            "vx": float(self.velocity[0]),
            "vy": float(self.velocity[1]),
            "destroyed": self._destroyed,
            "stale": self._stale,
            "particles": len(self.particles),
        }
