"""
Scoreboard - score bookkeeping for a play session.

Provides:
- Running score for the current game
- Session high score (kept in memory only)
- Hit statistics per asteroid size
"""

from typing import Dict, Any
import logging

from spacerocks.core.sizes import AsteroidSize

logger = logging.getLogger(__name__)


class Scoreboard:
    """Score tracking for the simulation.
    
    The score runs until the ship is out of lives; game_over() then
    zeroes it. The high score only ever rises for the lifetime of the
    object.
    """
    
    def __init__(self):
        """Initialize an empty scoreboard."""
        self._score: int = 0
        self._high_score: int = 0
        self._games_played: int = 0
        self._hits: Dict[AsteroidSize, int] = {size: 0 for size in AsteroidSize}
    
    @property
    def score(self) -> int:
        """Score of the current game."""
        return self._score
    
    @property
    def high_score(self) -> int:
        """Best score seen this session."""
        return self._high_score
    
    @property
    def games_played(self) -> int:
        """Number of finished games."""
        return self._games_played
    
    @property
    def asteroids_hit(self) -> int:
        """Total asteroid hits across all sizes."""
        return sum(self._hits.values())
    
    def add(self, points: int) -> int:
        """Add points to the running score.
        
        Args:
            points: Points to add (non-negative)
        
        Returns:
            New score
        """
        self._score += max(0, int(points))
        self._high_score = max(self._high_score, self._score)
        return self._score
    
    def record_hit(self, size: AsteroidSize, count: int = 1) -> None:
        """Tally laser hits on an asteroid.
        
        Points are credited separately through add().
        
        Args:
            size: Size of the asteroid that was hit
            count: Number of lasers that hit it
        """
        self._hits[size] += count
    
    def game_over(self) -> int:
        """End the current game and clear the score.
        
        Returns:
            Final score of the finished game
        """
        final_score = self._score
        self._games_played += 1
        self._score = 0
        logger.info(
            "Game over: final score %d (high score %d)", final_score, self._high_score
        )
        return final_score
    
    def reset(self) -> None:
        """Clear all scoring, including the high score."""
        self._score = 0
        self._high_score = 0
        self._games_played = 0
        self._hits = {size: 0 for size in AsteroidSize}
    
    def get_state(self) -> Dict[str, Any]:
        """Get scoring state.
        
        Returns:
            Dictionary with scoring data
        """
        return {
            "score": self._score,
            "high_score": self._high_score,
            "games_played": self._games_played,
            "hits": {size.name: count for size, count in self._hits.items()},
        }
