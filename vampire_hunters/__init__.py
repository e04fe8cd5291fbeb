"""Rules for a top-down survival arcade game: geometry, collisions, weapons and player statistics."""

__version__ = "0.1.0"