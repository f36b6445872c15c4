"""
Scoring module - score and high score tracking.
"""

from spacerocks.scoring.scoreboard import Scoreboard

__all__ = ["Scoreboard"]
