"""
Simulator - Main simulation loop and controller.

Provides:
- High-level simulation control
- Per-tick orchestration of ship and asteroid updates
- Asteroid population maintenance
- Score, lives and cue output for external collaborators
"""

from dataclasses import dataclass, field
from typing import List, Dict, Any, Callable, Optional
import logging

from spacerocks.core.cues import Cue
from spacerocks.core.physics import ArenaConfig
from spacerocks.field.asteroid import Asteroid, AsteroidConfig
from spacerocks.field.generator import GeneratorConfig
from spacerocks.render.snapshot import Snapshot, build_snapshot
from spacerocks.ship.controls import ShipControls, ShipInputs
from spacerocks.ship.ship import Ship, ShipConfig
from spacerocks.simulation.world import World

logger = logging.getLogger(__name__)


@dataclass
class SimulatorConfig:
    """Simulator configuration."""
    # Time stepping
    fixed_dt: float = 1.0 / 60.0     # Default tick length (60 Hz)
    max_dt: float = 0.1              # Longest tick accepted; longer frames are clamped
    
    # Population
    target_asteroids: int = 12
    
    # Random seed (None for random)
    seed: int | None = None
    
    # Component configs
    arena: ArenaConfig | None = None
    ship: ShipConfig | None = None
    generator: GeneratorConfig | None = None
    asteroid: AsteroidConfig | None = None
    
    def __post_init__(self):
        if self.fixed_dt <= 0 or self.max_dt <= 0:
            raise ValueError("fixed_dt and max_dt must be positive")
        if self.target_asteroids < 0:
            raise ValueError(
                f"target_asteroids must be non-negative, got {self.target_asteroids}"
            )


@dataclass
class TickResult:
    """Output of one simulation tick."""
    score: int
    lives: int
    cues: List[Cue] = field(default_factory=list)
    snapshot: Optional[Snapshot] = None
    time: float = 0.0
    frame: int = 0
    game_over: bool = False


class Simulator:
    """Main game simulator.
    
    Runs one tick per rendered frame. Within a tick the ship always
    updates before the asteroids, so a laser fired this tick can hit
    this tick, and stale asteroids are only removed once every update
    has finished.
    
    Usage:
        sim = Simulator(SimulatorConfig(seed=7))
        sim.start()
        
        while sim.is_running:
            result = sim.step(ShipInputs(fire=True), dt)
            audio.play(result.cues)
    """
    
    def __init__(self, config: SimulatorConfig | None = None):
        """Initialize simulator.
        
        Args:
            config: Simulator configuration. Uses defaults if None.
        """
        self.config = config or SimulatorConfig()
        
        self.world = World(
            arena=self.config.arena,
            ship_config=self.config.ship,
            generator_config=self.config.generator,
            asteroid_config=self.config.asteroid,
            seed=self.config.seed,
        )
        
        # State
        self._running: bool = False
        self._paused: bool = False
        
        # Step callbacks
        self._pre_step_callbacks: List[Callable] = []
        self._post_step_callbacks: List[Callable] = []
    
    @property
    def is_running(self) -> bool:
        """Check if simulation is running."""
        return self._running
    
    @property
    def is_paused(self) -> bool:
        """Check if simulation is paused."""
        return self._paused
    
    @property
    def time(self) -> float:
        """Current simulation time."""
        return self.world.time
    
    @property
    def ship(self) -> Ship:
        """Player ship."""
        return self.world.ship
    
    @property
    def asteroids(self) -> List[Asteroid]:
        """Current asteroids."""
        return self.world.asteroids
    
    @property
    def score(self) -> int:
        """Current score."""
        return self.world.scoreboard.score
    
    @property
    def lives(self) -> int:
        """Ship lives remaining."""
        return self.world.ship.lives
    
    def add_pre_step_callback(self, callback: Callable) -> None:
        """Add callback called before each step.
        
        Args:
            callback: Function taking (simulator, dt) arguments
        """
        self._pre_step_callbacks.append(callback)
    
    def add_post_step_callback(self, callback: Callable) -> None:
        """Add callback called after each step.
        
        Args:
            callback: Function taking (simulator, tick_result) arguments
        """
        self._post_step_callbacks.append(callback)
    
    def start(self) -> None:
        """Start the simulation, filling the asteroid field."""
        self.world.top_up(self.config.target_asteroids)
        self._running = True
        self._paused = False
        logger.info(
            "Simulation started with %d asteroids", self.world.asteroid_count
        )
    
    def stop(self) -> None:
        """Stop the simulation."""
        self._running = False
        logger.info(
            "Simulation stopped at t=%.2fs, score %d",
            self.world.time, self.world.scoreboard.score,
        )
    
    def pause(self) -> None:
        """Pause the simulation."""
        self._paused = True
    
    def resume(self) -> None:
        """Resume the simulation."""
        self._paused = False
    
    def step(
        self,
        controls: ShipControls | None = None,
        dt: float | None = None,
    ) -> Optional[TickResult]:
        """Advance simulation by one tick.
        
        Args:
            controls: Input capabilities (nothing held if None)
            dt: Elapsed time in seconds (uses fixed_dt if None)
        
        Returns:
            Tick output, or None if not running or paused
        """
        if not self._running or self._paused:
            return None
        
        if dt is None:
            dt = self.config.fixed_dt
        dt = min(max(dt, 0.0), self.config.max_dt)
        
        if controls is None:
            controls = ShipInputs()
        
        for callback in self._pre_step_callbacks:
            callback(self, dt)
        
        world = self.world
        game_over = world.check_game_over()
        
        # Ship first: lasers fired now are visible to the asteroids below
        cues = world.ship.update(dt, controls, world.asteroids, world.sampler)
        
        spawned: List[Asteroid] = []
        for asteroid in world.asteroids:
            events = asteroid.update(dt, world.ship.lasers, world.generator)
            if events.hits:
                world.scoreboard.add(events.score)
                world.scoreboard.record_hit(asteroid.size, events.hits)
            spawned.extend(events.spawned)
            cues.extend(events.cues)
        
        world.remove_stale()
        world.add_asteroids(spawned)
        world.top_up(self.config.target_asteroids)
        world.advance_time(dt)
        
        result = TickResult(
            score=world.scoreboard.score,
            lives=world.ship.lives,
            cues=cues,
            snapshot=build_snapshot(world),
            time=world.time,
            frame=world.frame,
            game_over=game_over,
        )
        
        for callback in self._post_step_callbacks:
            callback(self, result)
        
        return result
    
    def step_until(
        self,
        condition: Callable[["Simulator"], bool],
        controls_provider: Callable[["Simulator"], ShipControls] | None = None,
        max_steps: int = 100000,
    ) -> int:
        """Step simulation until condition is met.
        
        Args:
            condition: Function returning True when should stop
            controls_provider: Function providing controls for each tick
            max_steps: Maximum steps to take
        
        Returns:
            Number of steps taken
        """
        steps = 0
        
        while self._running and steps < max_steps:
            if condition(self):
                break
            
            controls = controls_provider(self) if controls_provider else None
            self.step(controls)
            steps += 1
        
        return steps
    
    def reset(self, seed: int | None = None) -> None:
        """Reset simulation.
        
        Args:
            seed: New random seed (keeps the current stream if None)
        """
        self.world.reset(seed)
        self._running = False
        self._paused = False
    
    def get_state(self) -> Dict[str, Any]:
        """Get complete simulation state.
        
        Returns:
            Dictionary containing simulation state
        """
        return {
            "config": {
                "fixed_dt": self.config.fixed_dt,
                "max_dt": self.config.max_dt,
                "target_asteroids": self.config.target_asteroids,
                "seed": self.config.seed,
            },
            "running": self._running,
            "paused": self._paused,
            "world": self.world.get_state(),
        }
