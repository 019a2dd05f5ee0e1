"""
Starter World for Wayfarer.

Provides the pre-built map: an abandoned farm, a mountain pass, and a
ruined castle, with a bear and a troll standing guard.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from wayfarer.models import Direction, Location, NPCKind, WorldGraph, create_npc
from wayfarer.skills.dice import DamageSource

logger = logging.getLogger(__name__)

STARTING_LOCATION = "courtyard"


@dataclass
class StarterWorldResult:
    """Result of creating the starter world."""

    world: WorldGraph
    starting_location_id: str


def create_starter_world(
    npc_damage: dict[NPCKind, DamageSource] | None = None,
) -> StarterWorldResult:
    """
    Build the complete starter world.

    Returns a world with:
    - Nine locations, from the bottom of a well to a castle dungeon
    - Sixteen one-way exits, most of them paired with a way back
    - A bear at the base of the mountain and a troll outside the castle

    Args:
        npc_damage: Optional damage sources per NPC kind, for tests

    Returns:
        StarterWorldResult with the graph and where the player starts
    """
    npc_damage = npc_damage or {}
    world = WorldGraph()

    # =========================================================================
    # Create Locations
    # =========================================================================

    rooms = [
        Location(
            id="well",
            title="Bottom of the Well",
            description=(
                "You have reached the bottom of a deep and rather smelly well. "
                "Less than a foot of water remains, and it looks undrinkable."
            ),
        ),
        Location(
            id="courtyard",
            title="Courtyard",
            description=(
                "At the centre of the courtyard is an old stone well. A strong and "
                "sturdy rope is attached to the well, and descends into the darkness. "
                "The only other items of interest are the farmhouse to the north, "
                "and a path to the east."
            ),
        ),
        Location(
            id="farmhouse",
            title="Farmhouse Entrance",
            description=(
                "The door to the farmhouse hangs crooked, and is slightly ajar. "
                "Obviously no-one has lived here for some time, and you can only "
                "guess at what lies within."
            ),
        ),
        Location(
            id="blood_room",
            title="Blood-Stained Room",
            description=(
                "Dried blood stains can be seen on the walls and stone floor of the "
                "farmhouse. Whatever massacre occurred here long ago, you can only "
                "guess. With the absence of bodies, however, you may never know."
            ),
        ),
        Location(
            id="path",
            title="Long Windy Path",
            description=(
                "You are standing on a long, windy path, leading from the mountains "
                "in the far east, to a small farm that lies to the west."
            ),
        ),
        Location(
            id="mountain_base",
            title="Base of the Mountain",
            description=(
                "At the base of the mountain is a path that leads westward beyond a "
                "large boulder. Climbing such a mountain would be difficult - if not "
                "impossible."
            ),
        ),
        Location(
            id="mountain_top",
            title="Top of the Mountain",
            description=(
                "From this vantage point, you can see all that lies on the plains "
                "below. Large boulders dot the landscape, and just within view to the "
                "west you make out some sort of a building - though its details are "
                "too hard to make out from this distance."
            ),
        ),
        Location(
            id="castle",
            title="Outside Castle",
            description=(
                "You are standing outside a rather large and obviously abandoned "
                "castle.  The drawbridge is up, but a cracked and broken door lays "
                "open headed downward into the castle dungeon."
            ),
        ),
        Location(
            id="dungeon",
            title="Castle Dungeon",
            description=(
                "You enter a dimly lit room.  Along two of the walls, several "
                "skeletons lay slumped over and several more are chained to the "
                "wall.  It's apparent from the tracks on the ground that some kind "
                "of large animal has been here, but is now long gone."
            ),
        ),
    ]

    for room in rooms:
        world.add_location(room)

    # =========================================================================
    # Connect Locations
    # =========================================================================

    connections = [
        ("1", "well", Direction.UP, "courtyard"),
        ("2", "courtyard", Direction.DOWN, "well"),
        ("3", "courtyard", Direction.NORTH, "farmhouse"),
        ("4", "farmhouse", Direction.SOUTH, "courtyard"),
        ("5", "farmhouse", Direction.NORTH, "blood_room"),
        ("6", "blood_room", Direction.SOUTH, "farmhouse"),
        ("7", "courtyard", Direction.EAST, "path"),
        ("8", "path", Direction.WEST, "courtyard"),
        ("9", "path", Direction.EAST, "mountain_base"),
        ("10", "mountain_base", Direction.WEST, "path"),
        ("11", "mountain_base", Direction.UP, "mountain_top"),
        ("12", "mountain_top", Direction.DOWN, "mountain_base"),
        ("13", "mountain_top", Direction.WEST, "castle"),
        ("14", "castle", Direction.EAST, "mountain_top"),
        ("15", "castle", Direction.DOWN, "dungeon"),
        ("16", "dungeon", Direction.UP, "castle"),
    ]

    for exit_id, from_id, direction, to_id in connections:
        world.connect(exit_id, from_id, direction, to_id)

    # =========================================================================
    # Place NPCs
    # =========================================================================

    bear = create_npc("bear", NPCKind.BEAR, damage_source=npc_damage.get(NPCKind.BEAR))
    world.get_location("mountain_base").add_character(bear)

    troll = create_npc("troll", NPCKind.TROLL, damage_source=npc_damage.get(NPCKind.TROLL))
    world.get_location("castle").add_character(troll)

    logger.info("World initialized.")

    return StarterWorldResult(
        world=world,
        starting_location_id=STARTING_LOCATION,
    )
