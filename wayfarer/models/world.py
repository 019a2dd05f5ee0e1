"""
World Models for Wayfarer.

Defines the static map of the game:
- Direction / Action: the fixed command vocabularies
- Exit: a one-way, direction-labelled edge between locations
- Location: a node with text, exits and resident NPCs
- WorldGraph: the arena that owns every location and resolves exits

Exits point at their destination by id rather than by object, so the map
may freely contain cycles (a well leads up to a courtyard which leads back
down the well).
"""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field

from wayfarer.models.character import NPC


class Direction(str, Enum):
    """Compass and vertical directions, keyed by full name."""

    UNDEFINED = "NULL"
    NORTH = "N"
    SOUTH = "S"
    EAST = "E"
    WEST = "W"
    UP = "U"
    DOWN = "D"
    NORTHEAST = "NE"
    NORTHWEST = "NW"
    SOUTHEAST = "SE"
    SOUTHWEST = "SW"
    IN = "I"
    OUT = "O"

    @property
    def abbreviation(self) -> str:
        return self.value

    def matches(self, token: str) -> bool:
        """Check an upper-cased token against the full name or abbreviation."""
        return token == self.name or token == self.abbreviation

    @classmethod
    def from_token(cls, token: str) -> Direction | None:
        """Look up a direction by full name or abbreviation."""
        for direction in cls:
            if direction.matches(token):
                return direction
        return None


class Action(str, Enum):
    """Combat verbs the player may type."""

    UNDEFINED = "NULL"
    KILL = "K"
    ATTACK = "A"

    @property
    def abbreviation(self) -> str:
        return self.value

    def matches(self, token: str) -> bool:
        """Check an upper-cased token against the full name or abbreviation."""
        return token == self.name or token == self.abbreviation

    @classmethod
    def from_token(cls, token: str) -> Action | None:
        """Look up an action by full name or abbreviation."""
        for action in cls:
            if action.matches(token):
                return action
        return None


ATTACK_ACTIONS = frozenset({Action.KILL, Action.ATTACK})


class Exit(BaseModel):
    """A one-way passage out of a location."""

    model_config = ConfigDict(frozen=True)

    id: str
    direction: Direction
    destination_id: str = Field(description="Id of the location this exit leads to")

    @property
    def direction_name(self) -> str:
        return self.direction.name

    @property
    def short_direction_name(self) -> str:
        return self.direction.abbreviation

    def __str__(self) -> str:
        return self.direction.name


class Location(BaseModel):
    """
    A place the player can stand.

    The exit list is fixed once the world is built; NPCs stay in the list
    even after they die.
    """

    id: str
    title: str
    description: str = ""
    exits: list[Exit] = Field(default_factory=list)
    characters: list[NPC] = Field(default_factory=list)

    def add_exit(self, exit_: Exit) -> None:
        self.exits.append(exit_)

    def add_character(self, npc: NPC) -> None:
        self.characters.append(npc)

    def has_characters(self) -> bool:
        """Presence check, dead NPCs included."""
        return len(self.characters) > 0

    @property
    def active_character_count(self) -> int:
        return sum(1 for npc in self.characters if npc.is_alive)

    def __str__(self) -> str:
        return self.title


class WorldGraph(BaseModel):
    """
    Arena of every location in the game.

    Topology is read-only after construction. The only state that changes
    during play is NPC hit points and aliveness, mutated in place by combat.
    """

    locations: dict[str, Location] = Field(default_factory=dict)

    def add_location(self, location: Location) -> Location:
        """Register a location; ids must be unique."""
        if location.id in self.locations:
            raise ValueError(f"Duplicate location id: {location.id}")
        self.locations[location.id] = location
        return location

    def connect(
        self,
        exit_id: str,
        from_id: str,
        direction: Direction,
        to_id: str,
    ) -> Exit:
        """
        Add a one-way exit between two registered locations.

        Raises:
            ValueError: If either end is not a location in this graph
        """
        source = self.get_location(from_id)
        self.get_location(to_id)

        exit_ = Exit(id=exit_id, direction=direction, destination_id=to_id)
        source.add_exit(exit_)
        return exit_

    def get_location(self, location_id: str) -> Location:
        """Fetch a location by id, raising ValueError when unknown."""
        location = self.locations.get(location_id)
        if location is None:
            raise ValueError(f"Unknown location: {location_id}")
        return location

    def location_at(self, exit_: Exit) -> Location:
        """Resolve the destination of an exit."""
        return self.get_location(exit_.destination_id)

    def exits_of(self, location: Location) -> list[Exit]:
        """Copies of a location's exits, in stored order."""
        return [exit_.model_copy() for exit_ in location.exits]

    def npcs_of(self, location: Location) -> list[NPC]:
        return location.characters

    def active_npc_count(self, location: Location) -> int:
        return location.active_character_count
