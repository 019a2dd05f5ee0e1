"""Pre-built game content for Wayfarer."""

from wayfarer.content.starter_world import (
    STARTING_LOCATION,
    StarterWorldResult,
    create_starter_world,
)

__all__ = [
    "STARTING_LOCATION",
    "StarterWorldResult",
    "create_starter_world",
]
