"""
Movement Skill.

Matches a direction token against the exits of the current location.
"""

from __future__ import annotations

from pydantic import BaseModel

from wayfarer.models.world import Location, WorldGraph


class MoveResult(BaseModel):
    """Outcome of a movement attempt."""

    success: bool
    destination: Location | None = None
    exit_id: str | None = None


def resolve_move(world: WorldGraph, location: Location, token: str) -> MoveResult:
    """
    Find the exit a direction token refers to.

    Exits are scanned in stored order and the first whose full direction
    name or abbreviation equals the token wins. The caller owns the
    side effects of a successful move (relocating and healing the player).

    Args:
        world: Graph used to resolve the destination
        location: Where the player currently stands
        token: Trimmed, upper-cased command token

    Returns:
        MoveResult with the destination on success
    """
    for exit_ in world.exits_of(location):
        if exit_.direction_name == token or exit_.short_direction_name == token:
            return MoveResult(
                success=True,
                destination=world.location_at(exit_),
                exit_id=exit_.id,
            )

    return MoveResult(success=False)
