"""
Field module - the asteroid field.

This module contains:
- Asteroid: Breakable rock with splitting and debris
- AsteroidGenerator: Procedural asteroid and outline generation
- Particle: Debris from destroyed tiny asteroids
"""

from spacerocks.field.particle import Particle
from spacerocks.field.asteroid import Asteroid, AsteroidConfig, AsteroidEvents
from spacerocks.field.generator import AsteroidGenerator, GeneratorConfig

__all__ = [
    "Particle",
    "Asteroid",
    "AsteroidConfig",
    "AsteroidEvents",
    "AsteroidGenerator",
    "GeneratorConfig",
]
