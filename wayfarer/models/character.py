"""
Character Models for Wayfarer.

Player and NPCs share one record shape (hit points plus aliveness) and the
same small combat capability: roll attack damage, take damage. NPC
archetypes are rows in a profile table rather than subclasses, so adding a
new monster is a data change.

Damage is drawn from an injectable source so tests can pin the numbers.
"""

from __future__ import annotations

from enum import Enum
from typing import Protocol

from pydantic import BaseModel, ConfigDict, Field

from wayfarer.skills.dice import DamageSource, damage_roller

PLAYER_MAX_HP = 50
PLAYER_MAX_DAMAGE = 25


class Combatant(Protocol):
    """Anything that can trade blows."""

    hit_points: int
    is_alive: bool

    def attack_damage(self) -> int:
        """Roll the damage for one attack."""
        ...

    def receive_damage(self, damage: int) -> None:
        """Subtract damage from hit points, without clamping."""
        ...

    def kill(self) -> None:
        """Clamp hit points to zero and mark dead."""
        ...


class Hostile(Combatant, Protocol):
    """A combatant that announces its attacks."""

    @property
    def name(self) -> str:
        ...

    def attack_message(self) -> str:
        ...


class CharacterBase(BaseModel):
    """Fields common to the player and every NPC."""

    hit_points: int = Field(description="Current hit points; may dip below zero before clamping")
    is_alive: bool = True
    damage_source: DamageSource | None = Field(
        default=None,
        exclude=True,
        repr=False,
        description="Override for attack damage, mainly for tests",
    )

    def receive_damage(self, damage: int) -> None:
        self.hit_points -= damage

    def kill(self) -> None:
        """Clamp hit points to zero and mark dead."""
        self.hit_points = 0
        self.is_alive = False


class Player(CharacterBase):
    """The adventurer. Has no canned attack message."""

    hit_points: int = PLAYER_MAX_HP
    max_hit_points: int = PLAYER_MAX_HP

    def attack_damage(self) -> int:
        """Damage uniformly distributed over [0, 25]."""
        source = self.damage_source or _PLAYER_ROLLER
        return source()

    def restore(self) -> None:
        """Heal back to full hit points."""
        self.hit_points = self.max_hit_points


_PLAYER_ROLLER = damage_roller(0, PLAYER_MAX_DAMAGE)


class NPCKind(str, Enum):
    """NPC archetypes."""

    BEAR = "bear"
    TROLL = "troll"


class NPCProfile(BaseModel):
    """Static stats and text for one NPC archetype."""

    model_config = ConfigDict(frozen=True)

    kind: NPCKind
    starting_hp: int = Field(ge=1)
    min_damage: int = Field(default=0, ge=0)
    max_damage: int = Field(ge=0, description="Inclusive upper bound")
    description: str
    dead_description: str
    attack_message: str


NPC_PROFILES: dict[NPCKind, NPCProfile] = {
    NPCKind.BEAR: NPCProfile(
        kind=NPCKind.BEAR,
        starting_hp=50,
        max_damage=11,
        description="There is a large menacing bear here!",
        dead_description="There is a large menacing bear here! The bear is dead.",
        attack_message="The bear swipes his massive paw at you.",
    ),
    NPCKind.TROLL: NPCProfile(
        kind=NPCKind.TROLL,
        starting_hp=500,
        max_damage=249,
        description="There is a somewhat docile troll here.",
        dead_description="There is a somewhat dead troll here.",
        attack_message=(
            "The troll is no longer somewhat docile.  "
            "The troll swings his huge club down on your head, crushing your skull."
        ),
    ),
}


class NPC(CharacterBase):
    """A stationary hostile bound to one location."""

    id: str
    kind: NPCKind

    @property
    def profile(self) -> NPCProfile:
        return NPC_PROFILES[self.kind]

    @property
    def name(self) -> str:
        return self.kind.value

    def attack_message(self) -> str:
        return self.profile.attack_message

    def attack_damage(self) -> int:
        if self.damage_source is not None:
            return self.damage_source()
        return _NPC_ROLLERS[self.kind]()

    def describe(self) -> str:
        """Description, reworded once the NPC is dead."""
        if self.is_alive:
            return self.profile.description
        return self.profile.dead_description

    def __str__(self) -> str:
        return self.describe()


_NPC_ROLLERS = {
    kind: damage_roller(profile.min_damage, profile.max_damage)
    for kind, profile in NPC_PROFILES.items()
}


def create_npc(
    npc_id: str,
    kind: NPCKind,
    damage_source: DamageSource | None = None,
) -> NPC:
    """Factory function to create an NPC at full health for its archetype."""
    return NPC(
        id=npc_id,
        kind=kind,
        hit_points=NPC_PROFILES[kind].starting_hp,
        damage_source=damage_source,
    )
