"""Configuration settings using Pydantic Settings.

Usage:
    from storyecs.config import GameSettings

    # Load from environment variables (STORYECS_*)
    settings = GameSettings()

    # Or override with explicit values
    settings = GameSettings(debug_commands=True, max_turns=10)
"""

from __future__ import annotations

from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class GameSettings(BaseSettings):  # type: ignore[misc]
    """Configuration for the turn loop and console front end.

    Attributes:
        prompt: Text shown before each command.
        debug_commands: Enable the ``dump`` and ``list`` commands.
        log_level: Level passed to ``logging.basicConfig``.
        max_turns: Stop after this many turns (None for no limit).

    Environment Variables:
        STORYECS_PROMPT
        STORYECS_DEBUG_COMMANDS
        STORYECS_LOG_LEVEL
        STORYECS_MAX_TURNS
    """

    model_config = SettingsConfigDict(
        env_prefix="STORYECS_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    prompt: str = "> "
    debug_commands: bool = False
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "WARNING"
    max_turns: int | None = Field(default=None, ge=1)
