"""
Core Data Models for Wayfarer.

These models define the game world: the location graph, the command
vocabularies, and the characters that fight in it.
"""

from wayfarer.models.character import (
    NPC,
    NPC_PROFILES,
    PLAYER_MAX_DAMAGE,
    PLAYER_MAX_HP,
    Combatant,
    Hostile,
    NPCKind,
    NPCProfile,
    Player,
    create_npc,
)
from wayfarer.models.world import (
    ATTACK_ACTIONS,
    Action,
    Direction,
    Exit,
    Location,
    WorldGraph,
)

__all__ = [
    # Characters
    "Combatant",
    "Hostile",
    "Player",
    "PLAYER_MAX_HP",
    "PLAYER_MAX_DAMAGE",
    "NPC",
    "NPCKind",
    "NPCProfile",
    "NPC_PROFILES",
    "create_npc",
    # World
    "Action",
    "ATTACK_ACTIONS",
    "Direction",
    "Exit",
    "Location",
    "WorldGraph",
]
