"""
Cues - named audio events emitted by the simulation.

Cues are collected into a fresh list every tick and handed to the audio
collaborator; nothing in the core keeps them past the tick.
"""

from enum import Enum


class Cue(str, Enum):
    """Audio event identifiers."""
    SHOOT = "shoot"
    EXPLODE = "explode"
    ASTEROID = "asteroid"
    THRUST = "thrust"
