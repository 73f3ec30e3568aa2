"""Configuration module using Pydantic Settings.

Usage:
    from storyecs.config import GameSettings

    settings = GameSettings(prompt="? ")
"""

from storyecs.config.settings import GameSettings

__all__ = [
    "GameSettings",
]
