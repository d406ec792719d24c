"""A collection of small arcade games: Space Invaders and a Pong lobby."""

__version__ = "0.1.0"