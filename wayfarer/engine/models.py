"""
Engine Data Models for Wayfarer.

Defines the core data structures for the game loop:
- Command: Classified player input
- SessionState: Where the state machine is
- TurnResult: What a single turn did
- EngineConfig: Runtime settings
"""

from __future__ import annotations

import os
from enum import Enum

from pydantic import BaseModel, Field, field_validator


class CommandType(str, Enum):
    """Categories of player command, in dispatch priority order."""

    MOVE = "move"
    ATTACK = "attack"
    QUIT = "quit"
    INVALID = "invalid"


class Command(BaseModel):
    """A classified command token."""

    type: CommandType
    token: str = Field(description="Trimmed, upper-cased input")
    original_input: str = Field(description="The player's raw line")

    # Independent classification flags; a token may satisfy more than one
    is_direction: bool = False
    is_action: bool = False
    is_quit: bool = False


class SessionState(str, Enum):
    """States of the session state machine."""

    EXPLORING = "exploring"
    ENDED = "ended"


class TurnResult(BaseModel):
    """Result of processing one command."""

    command: Command | None = Field(default=None, description="None when no turn was processed")
    valid: bool = Field(description="Whether the command did something")
    state: SessionState
    location_id: str = Field(description="Current location after the turn")
    player_hp: int
    player_died: bool = False
    messages: list[str] = Field(default_factory=list)


class EngineConfig(BaseModel):
    """Engine configuration."""

    # Output
    wrap_width: int = Field(default=60, ge=10, description="Column to wrap output at")

    # World
    start_location_id: str = Field(default="courtyard", description="Where the player begins")

    # Logging
    log_level: str = Field(default="WARNING")

    @field_validator("log_level")
    @classmethod
    def _normalize_log_level(cls, value: str) -> str:
        level = value.upper()
        if level not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
            raise ValueError(f"Unknown log level: {value}")
        return level

    @classmethod
    def from_env(cls, **overrides: object) -> EngineConfig:
        """
        Build config from WAYFARER_* environment variables.

        Environment variables:
            WAYFARER_WRAP_WIDTH: Output wrap column
            WAYFARER_START_LOCATION: Starting location id
            WAYFARER_LOG_LEVEL: Logging level name

        Keyword overrides that are not None win over the environment.
        """
        data: dict[str, object] = {}

        if os.getenv("WAYFARER_WRAP_WIDTH"):
            data["wrap_width"] = os.getenv("WAYFARER_WRAP_WIDTH")

        if os.getenv("WAYFARER_START_LOCATION"):
            data["start_location_id"] = os.getenv("WAYFARER_START_LOCATION")

        if os.getenv("WAYFARER_LOG_LEVEL"):
            data["log_level"] = os.getenv("WAYFARER_LOG_LEVEL")

        data.update({key: value for key, value in overrides.items() if value is not None})
        return cls.model_validate(data)
