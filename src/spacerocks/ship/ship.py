"""
Ship - the player-controlled craft.

Integrates:
- Input-driven flight model (turn, thrust, drag, toroidal wrap)
- Laser firing and laser lifecycle
- Collision with asteroids
- Explosion state machine with tumbling outline fragments
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Sequence
import logging
import numpy as np

from spacerocks.core.cues import Cue
from spacerocks.core.physics import (
    ArenaConfig,
    distance,
    heading_vector,
    rotate,
    wrap_position,
)
from spacerocks.core.sampling import FRAGMENT_FLOOR, Sampler
from spacerocks.field.asteroid import Asteroid
from spacerocks.ship.controls import Control, ShipControls
from spacerocks.ship.fragment import Fragment
from spacerocks.ship.laser import Laser

logger = logging.getLogger(__name__)


# Unit outline, nose along +Y. Closed: last point repeats the first.
SHIP_OUTLINE = np.array([
    [-0.35, 0.0],
    [0.0, 1.0],
    [0.35, 0.0],
    [-0.35, 0.0],
])
NOSE_INDEX = 1


@dataclass
class ShipConfig:
    """Ship handling configuration."""
    # Geometry
    scale: float = 25.0                  # Outline scale in arena units
    
    # Flight model
    turn_rate: float = 4.0               # rad/s
    thrust: float = 6.0                  # Velocity gain per second of thrust
    drag: float = 0.01                   # Velocity fraction lost per tick
    
    # Weapons
    laser_speed: float = 400.0           # Arena units/s
    fire_cooldown: float = 0.25          # Seconds between shots
    max_lasers: int = 5                  # Concurrent lasers in flight
    
    # Explosion
    explosion_duration: float = 2.0      # Seconds before respawn
    fragment_drag: float = 1.5           # Exponential decay rate (1/s)
    fragment_max_speed: float = 60.0     # Arena units/s
    fragment_max_spin: float = 6.0       # rad/s
    
    lives: int = 3
    
    def __post_init__(self):
        if self.fire_cooldown <= 0:
            raise ValueError(f"fire_cooldown must be positive, got {self.fire_cooldown}")
        if not 0.0 <= self.drag < 1.0:
            raise ValueError(f"drag must be in [0, 1), got {self.drag}")
        if self.lives < 1:
            raise ValueError(f"lives must be at least 1, got {self.lives}")


class FlightState(Enum):
    """Ship flight state."""
    FLYING = "flying"
    EXPLODING = "exploding"


@dataclass
class ShipState:
    """Current ship state for physics integration."""
    position: np.ndarray = field(default_factory=lambda: np.zeros(2))
    velocity: np.ndarray = field(default_factory=lambda: np.zeros(2))  # Units per tick
    angle: float = 0.0                   # Radians, 0 = facing +Y
    lives: int = 3
    flight_state: FlightState = FlightState.FLYING
    explosion_time: float = 0.0
    fire_cooldown: float = 0.0


class Ship:
    """Player ship.
    
    The ship owns its lasers and, while exploding, its fragments.
    Asteroids may flag a laser as hit; the ship drops flagged lasers at
    the start of its next update, after every asteroid has seen them.
    
    Usage:
        ship = Ship()
        cues = ship.update(dt, ShipInputs(thrust=True), asteroids, sampler)
    """
    
    def __init__(
        self,
        config: ShipConfig | None = None,
        arena: ArenaConfig | None = None,
    ):
        """Initialize ship at the arena center.
        
        Args:
            config: Ship configuration. Uses defaults if None.
            arena: Arena dimensions
        """
        self.config = config or ShipConfig()
        self.arena = arena or ArenaConfig()
        
        self.outline = SHIP_OUTLINE * self.config.scale
        self.state = ShipState(lives=self.config.lives)
        self.lasers: List[Laser] = []
        self.fragments: List[Fragment] = []
    
    @property
    def position(self) -> np.ndarray:
        """Current position."""
        return self.state.position
    
    @property
    def velocity(self) -> np.ndarray:
        """Current velocity (arena units per tick)."""
        return self.state.velocity
    
    @property
    def angle(self) -> float:
        """Facing angle in radians."""
        return self.state.angle
    
    @property
    def lives(self) -> int:
        """Remaining lives."""
        return self.state.lives
    
    @property
    def is_exploding(self) -> bool:
        """Whether the explosion animation is running."""
        return self.state.flight_state is FlightState.EXPLODING
    
    @property
    def nose(self) -> np.ndarray:
        """Nose position in arena space."""
        return self.state.position + rotate(self.outline[NOSE_INDEX], self.state.angle)
    
    def world_outline(self) -> np.ndarray:
        """Closed outline in arena space."""
        return rotate(self.outline, self.state.angle) + self.state.position
    
    def fragment_segments(self) -> List[np.ndarray]:
        """Arena-space segments of the exploding outline."""
        return [
            fragment.segment(self.state.position, self.state.angle)
            for fragment in self.fragments
        ]
    
    def update(
        self,
        dt: float,
        controls: ShipControls,
        asteroids: Sequence[Asteroid],
        sampler: Sampler,
    ) -> List[Cue]:
        """Advance ship by one time step.
        
        Args:
            dt: Time step in seconds
            controls: Input capabilities for this tick
            asteroids: Asteroids to test for collision
            sampler: Random source for explosion fragments
        
        Returns:
            Cues emitted this tick
        """
        cues: List[Cue] = []
        state = self.state
        
        state.fire_cooldown = max(0.0, state.fire_cooldown - dt)
        self._update_lasers(dt)
        
        if state.explosion_time > self.config.explosion_duration:
            self.respawn()
        
        if self.is_exploding:
            for fragment in self.fragments:
                fragment.update(dt, self.config.fragment_drag)
            state.explosion_time += dt
            return cues
        
        # Steering and thrust
        if controls.is_active(Control.TURN_LEFT):
            state.angle += self.config.turn_rate * dt
        if controls.is_active(Control.TURN_RIGHT):
            state.angle -= self.config.turn_rate * dt
        if controls.is_active(Control.THRUST):
            state.velocity = state.velocity + heading_vector(state.angle) * self.config.thrust * dt
            cues.append(Cue.THRUST)
        
        if controls.is_active(Control.FIRE) and self._can_fire():
            self._fire()
            cues.append(Cue.SHOOT)
        
        # Exponential drag, then integrate
        state.velocity = state.velocity * (1.0 - self.config.drag)
        state.position = wrap_position(
            state.position + state.velocity,
            self.arena.width,
            self.arena.height,
        )
        
        for asteroid in asteroids:
            if not asteroid.collidable:
                continue
            if distance(state.position, asteroid.position) < asteroid.radius:
                self.explode(sampler)
                cues.append(Cue.EXPLODE)
                break
        
        return cues
    
    def explode(self, sampler: Sampler) -> None:
        """Lose a life and start the explosion animation.
        
        Args:
            sampler: Random source for fragment motion
        """
        state = self.state
        state.lives = max(0, state.lives - 1)
        state.flight_state = FlightState.EXPLODING
        state.explosion_time = 0.0
        
        self.fragments = []
        for start, end in zip(self.outline[:-1], self.outline[1:]):
            self.fragments.append(Fragment(
                start=start.copy(),
                end=end.copy(),
                direction=sampler.unit_vector(),
                spin=sampler.sign() * sampler.minimum(FRAGMENT_FLOOR) * self.config.fragment_max_spin,
                speed=sampler.minimum(FRAGMENT_FLOOR) * self.config.fragment_max_speed,
            ))
        
        logger.info(
            "Ship destroyed at (%.1f, %.1f), %d lives left",
            state.position[0], state.position[1], state.lives,
        )
    
    def respawn(self) -> None:
        """Return to flight at the arena center."""
        state = self.state
        state.position = np.zeros(2)
        state.velocity = np.zeros(2)
        state.angle = 0.0
        state.explosion_time = 0.0
        state.flight_state = FlightState.FLYING
        self.fragments = []
        logger.debug("Ship respawned")
    
    def restore_lives(self) -> None:
        """Refill lives to the configured count."""
        self.state.lives = self.config.lives
    
    def reset(self) -> None:
        """Reset ship to initial state."""
        self.state = ShipState(lives=self.config.lives)
        self.lasers = []
        self.fragments = []
    
    def _can_fire(self) -> bool:
        return (
            self.state.fire_cooldown <= 0.0
            and len(self.lasers) < self.config.max_lasers
        )
    
    def _fire(self) -> None:
        """Spawn a laser at the nose along the current heading."""
        self.lasers.append(Laser(
            position=self.nose,
            direction=heading_vector(self.state.angle),
        ))
        self.state.fire_cooldown = self.config.fire_cooldown
        logger.debug("Laser fired (%d in flight)", len(self.lasers))
    
    def _update_lasers(self, dt: float) -> None:
        """Move lasers and drop the ones that hit or left the arena."""
        for laser in self.lasers:
            laser.update(dt, self.config.laser_speed)
        self.lasers = [
            laser for laser in self.lasers
            if not laser.is_expired(self.arena)
        ]
    
    def get_state(self) -> dict:
        """Get ship state for inspection.
        
        Returns:
            Dictionary with ship data
        """
        return {
            "x": float(self.state.position[0]),
            "y": float(self.state.position[1]),
            "vx": float(self.state.velocity[0]),
            "vy": float(self.state.velocity[1]),
            "angle": self.state.angle,
            "lives": self.state.lives,
            "flight_state": self.state.flight_state.value,
            "explosion_time": self.state.explosion_time,
            "fire_cooldown": self.state.fire_cooldown,
            "lasers": len(self.lasers),
        }
