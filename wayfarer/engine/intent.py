"""
Command Parser for Wayfarer.

Classifies one line of player input into a Command. Input is a single
token: a direction, a combat action, or QUIT.
"""

from __future__ import annotations

from wayfarer.engine.models import Command, CommandType
from wayfarer.models.world import Action, Direction

QUIT_TOKEN = "QUIT"


def normalize(player_input: str) -> str:
    """Trim and upper-case raw input."""
    return player_input.strip().upper()


class CommandParser:
    """Token classifier for the three command vocabularies."""

    def parse(self, player_input: str) -> Command:
        """
        Classify player input.

        The three checks run independently. When a token passes more than
        one, direction beats action beats quit. Empty input and tokens that
        pass none of the checks come back as INVALID.

        Args:
            player_input: Raw line from the player

        Returns:
            Command with its dispatch type and the individual flags
        """
        token = normalize(player_input)

        if not token:
            return Command(type=CommandType.INVALID, token=token, original_input=player_input)

        is_direction = Direction.from_token(token) is not None
        is_action = Action.from_token(token) is not None
        is_quit = token == QUIT_TOKEN

        if is_direction:
            command_type = CommandType.MOVE
        elif is_action:
            command_type = CommandType.ATTACK
        elif is_quit:
            command_type = CommandType.QUIT
        else:
            command_type = CommandType.INVALID

        return Command(
            type=command_type,
            token=token,
            original_input=player_input,
            is_direction=is_direction,
            is_action=is_action,
            is_quit=is_quit,
        )
