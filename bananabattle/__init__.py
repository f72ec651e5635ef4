"""A turn-based banana battle game: entities, attacks, skills and a pygame battle screen."""

__version__ = "0.1.0"
__all__ = ["attacks", "entity", "errors", "game", "prompt", "skill"]