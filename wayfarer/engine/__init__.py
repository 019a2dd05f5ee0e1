"""
Core Engine for Wayfarer.

The engine runs the turn loop:
- Command parsing (direction, attack or quit)
- Skill dispatch (movement and combat resolution)
- Terminal checks (player death, quitting)
"""

from __future__ import annotations

from wayfarer.engine.game import GameSession
from wayfarer.engine.intent import CommandParser, normalize
from wayfarer.engine.models import (
    Command,
    CommandType,
    EngineConfig,
    SessionState,
    TurnResult,
)
from wayfarer.engine.output import BufferedOutput, GameOutput

__all__ = [
    # Main session
    "GameSession",
    # Models
    "Command",
    "CommandType",
    "EngineConfig",
    "SessionState",
    "TurnResult",
    # Parsing
    "CommandParser",
    "normalize",
    # Output
    "BufferedOutput",
    "GameOutput",
]
