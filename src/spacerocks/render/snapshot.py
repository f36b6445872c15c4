"""
Snapshot - renderable view of the world after a tick.

The renderer receives plain arrays in arena space (origin at the
center, Y up) and converts them with to_draw_space() before drawing.
"""

from dataclasses import dataclass, field, replace
from typing import List, TYPE_CHECKING
import numpy as np

from spacerocks.core.physics import to_draw_space

if TYPE_CHECKING:
    from spacerocks.simulation.world import World


@dataclass(frozen=True)
class Snapshot:
    """Everything a renderer needs to draw one frame."""
    ship_outline: np.ndarray                          # (n, 2), empty while exploding
    ship_fragments: List[np.ndarray] = field(default_factory=list)  # (2, 2) each
    lasers: np.ndarray = field(default_factory=lambda: np.zeros((0, 2)))
    asteroid_outlines: List[np.ndarray] = field(default_factory=list)
    particles: np.ndarray = field(default_factory=lambda: np.zeros((0, 2)))
    score: int = 0
    lives: int = 0
    exploding: bool = False
    
    def to_draw_space(self, width: float, height: float) -> "Snapshot":
        """Convert every point to display coordinates.
        
        Args:
            width: Display width
            height: Display height
        
        Returns:
            New snapshot in top-left, Y-down coordinates
        """
        def convert(points: np.ndarray) -> np.ndarray:
            return to_draw_space(points, width, height)
        
        return replace(
            self,
            ship_outline=convert(self.ship_outline),
            ship_fragments=[convert(s) for s in self.ship_fragments],
            lasers=convert(self.lasers),
            asteroid_outlines=[convert(o) for o in self.asteroid_outlines],
            particles=convert(self.particles),
        )


def build_snapshot(world: "World") -> Snapshot:
    """Capture the renderable state of a world.
    
    Args:
        world: World to capture
    
    Returns:
        Snapshot in arena coordinates
    """
    ship = world.ship
    
    if ship.is_exploding:
        outline = np.zeros((0, 2))
        fragments = ship.fragment_segments()
    else:
        outline = ship.world_outline()
        fragments = []
    
    if ship.lasers:
        lasers = np.array([laser.position for laser in ship.lasers])
    else:
        lasers = np.zeros((0, 2))
    
    outlines = []
    particle_sets = []
    for asteroid in world.asteroids:
        if asteroid.destroyed:
            particle_sets.append(asteroid.world_particles())
        else:
            outlines.append(asteroid.world_outline())
    
    particles = np.vstack(particle_sets) if particle_sets else np.zeros((0, 2))
    
    return Snapshot(
        ship_outline=outline,
        ship_fragments=fragments,
        lasers=lasers,
        asteroid_outlines=outlines,
        particles=particles,
        score=world.scoreboard.score,
        lives=ship.lives,
        exploding=ship.is_exploding,
    )
