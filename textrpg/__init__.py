"""A terminal role-playing game with a tile map, NPCs and turn-based battles."""

__version__ = "0.1.0"