"""
World - simulation state owned by the driver.

Manages:
- The ship
- The asteroid population
- Random source and asteroid generator
- Scoreboard
- Global time
"""

from typing import List, Dict, Any

from spacerocks.core.physics import ArenaConfig
from spacerocks.core.sampling import Sampler
from spacerocks.field.asteroid import Asteroid, AsteroidConfig
from spacerocks.field.generator import AsteroidGenerator, GeneratorConfig
from spacerocks.scoring.scoreboard import Scoreboard
from spacerocks.ship.ship import Ship, ShipConfig


class World:
    """World state container for the simulation.
    
    Every update receives its state from here; nothing lives in module
    globals. The world owns the ship and the asteroid list, and only the
    world adds or removes asteroids.
    """
    
    def __init__(
        self,
        arena: ArenaConfig | None = None,
        ship_config: ShipConfig | None = None,
        generator_config: GeneratorConfig | None = None,
        asteroid_config: AsteroidConfig | None = None,
        seed: int | None = None,
    ):
        """Initialize world.
        
        Args:
            arena: Arena dimensions
            ship_config: Ship configuration
            generator_config: Asteroid generation configuration
            asteroid_config: Asteroid debris configuration
            seed: Random seed (None for random)
        """
        self.arena = arena or ArenaConfig()
        self.sampler = Sampler(seed)
        self.generator = AsteroidGenerator(
            generator_config,
            sampler=self.sampler,
            arena=self.arena,
            asteroid_config=asteroid_config,
        )
        self.ship = Ship(ship_config, arena=self.arena)
        self.scoreboard = Scoreboard()
        
        self._asteroids: List[Asteroid] = []
        self._time: float = 0.0
        self._frame: int = 0
    
    @property
    def time(self) -> float:
        """Current simulation time in seconds."""
        return self._time
    
    @property
    def frame(self) -> int:
        """Current frame number."""
        return self._frame
    
    @property
    def asteroids(self) -> List[Asteroid]:
        """Live asteroid list (mutate only through World methods)."""
        return self._asteroids
    
    @property
    def asteroid_count(self) -> int:
        """Number of asteroids in the world."""
        return len(self._asteroids)
    
    def add_asteroid(self, asteroid: Asteroid) -> None:
        """Add an asteroid to the world.
        
        Args:
            asteroid: Asteroid to add
        """
        self._asteroids.append(asteroid)
    
    def add_asteroids(self, asteroids: List[Asteroid]) -> None:
        """Add several asteroids at once."""
        self._asteroids.extend(asteroids)
    
    def remove_stale(self) -> int:
        """Drop every asteroid flagged stale.
        
        Only call this after all updates for the tick have finished.
        
        Returns:
            Number of asteroids removed
        """
        before = len(self._asteroids)
        self._asteroids = [a for a in self._asteroids if not a.stale]
        return before - len(self._asteroids)
    
    def top_up(self, target: int) -> int:
        """Generate fresh asteroids until the population reaches target.
        
        Args:
            target: Desired asteroid count
        
        Returns:
            Number of asteroids generated
        """
        missing = max(0, target - len(self._asteroids))
        for _ in range(missing):
            self._asteroids.append(self.generator.generate())
        return missing
    
    def check_game_over(self) -> bool:
        """Restart the game if the ship is out of lives.
        
        Returns:
            True if a game over was processed
        """
        if self.ship.lives > 0:
            return False
        
        self.scoreboard.game_over()
        self.ship.restore_lives()
        return True
    
    def advance_time(self, dt: float) -> None:
        """Advance simulation time.
        
        Args:
            dt: Time step in seconds
        """
        self._time += dt
        self._frame += 1
    
    def reset(self, seed: int | None = None) -> None:
        """Reset world state.
        
        Args:
            seed: New random seed (keeps the current stream if None)
        """
        if seed is not None:
            self.sampler.reseed(seed)
        self.ship.reset()
        self.scoreboard.reset()
        self._asteroids = []
        self._time = 0.0
        self._frame = 0
    
    def get_state(self) -> Dict[str, Any]:
        """Get world state for inspection.
        
        Returns:
            Dictionary containing world state
        """
        destroyed = sum(1 for a in self._asteroids if a.destroyed)
        return {
            "time": self._time,
            "frame": self._frame,
            "asteroid_count": len(self._asteroids),
            "destroyed_asteroids": destroyed,
            "arena": {
                "width": self.arena.width,
                "height": self.arena.height,
            },
            "ship": self.ship.get_state(),
            "scoring": self.scoreboard.get_state(),
        }
