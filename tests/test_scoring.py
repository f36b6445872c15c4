"""Tests for the SpaceRocks scoreboard."""

from spacerocks.core.sizes import AsteroidSize
from spacerocks.scoring.scoreboard import Scoreboard


class TestScoreboard:
    """Test scoreboard."""
    
    def test_creation(self):
        """Scoreboard starts empty."""
        board = Scoreboard()
        assert board.score == 0
        assert board.high_score == 0
        assert board.games_played == 0
    
    def test_record_hit(self):
        """Hits are tallied per size without crediting points."""
        board = Scoreboard()
        board.record_hit(AsteroidSize.MEDIUM)
        board.record_hit(AsteroidSize.TINY, count=2)
        
        assert board.score == 0
        assert board.asteroids_hit == 3
        assert board.get_state()["hits"]["TINY"] == 2
        assert board.get_state()["hits"]["MEDIUM"] == 1
    
    def test_game_over_keeps_high_score(self):
        """Game over clears the score but not the high score."""
        board = Scoreboard()
        board.add(500)
        
        final = board.game_over()
        
        assert final == 500
        assert board.score == 0
        assert board.high_score == 500
        assert board.games_played == 1
    
    def test_high_score_never_decreases(self):
        """A lower second game leaves the high score alone."""
        board = Scoreboard()
        board.add(300)
        board.game_over()
        board.add(100)
        assert board.high_score == 300
    
    def test_negative_points_ignored(self):
        """Scores only go up during a game."""
        board = Scoreboard()
        board.add(50)
        board.add(-20)
        assert board.score == 50
    
    def test_reset(self):
        """Reset clears everything."""
        board = Scoreboard()
        board.add(200)
        board.game_over()
        board.reset()
        assert board.high_score == 0
        assert board.games_played == 0
        assert board.asteroids_hit == 0
