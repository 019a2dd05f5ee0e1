"""
Combat Skill.

Resolves one exchange of blows between the player and the first NPC in a
location. The player always strikes first; a surviving NPC strikes back.
"""

from __future__ import annotations

from pydantic import BaseModel, Field

from wayfarer.models.character import Combatant, Hostile
from wayfarer.models.world import ATTACK_ACTIONS, Location


class CombatResult(BaseModel):
    """Outcome of one combat exchange."""

    success: bool
    player_damage: int | None = Field(default=None, description="Damage dealt by the player")
    npc_damage: int | None = Field(default=None, description="Damage dealt back by the NPC")
    npc_killed: bool = False
    player_killed: bool = False
    messages: list[str] = Field(
        default_factory=list, description="Lines to show; empty string is a blank line"
    )


def is_attack_command(token: str) -> bool:
    """True for KILL / ATTACK in full or abbreviated form."""
    return any(action.matches(token) for action in ATTACK_ACTIONS)


def status_lines(player: Combatant, location: Location) -> list[str]:
    """
    Hit point readout shown after every exchange.

    NPC hit points are listed only when the location holds no characters,
    which in practice means they are never listed.
    """
    lines = [f"The Player has {player.hit_points} HP"]
    if not location.characters:
        lines.extend(f"The {npc.name} has {npc.hit_points} HP" for npc in location.characters)
    lines.append("")
    return lines


def resolve_exchange(attacker: Combatant, target: Hostile) -> CombatResult:
    """
    Trade one round of blows, attacker first.

    A target brought to zero or below dies and does not strike back.
    Both sides are mutated in place.
    """
    messages: list[str] = []

    player_damage = attacker.attack_damage()
    target.receive_damage(player_damage)
    messages.append(f"The {target.name} receives {player_damage} hp damage.")

    npc_damage: int | None = None
    npc_killed = False
    player_killed = False

    if target.hit_points <= 0:
        target.kill()
        npc_killed = True
        messages.append(f"The {target.name} is dead!")
    else:
        npc_damage = target.attack_damage()
        attacker.receive_damage(npc_damage)
        messages.append(target.attack_message())
        messages.append(f"You receive {npc_damage} hp damage.")

        # Zero hit points still counts as surviving the hit
        if attacker.hit_points >= 0:
            messages.append("You survive the hit!")
        else:
            attacker.kill()
            player_killed = True

    return CombatResult(
        success=True,
        player_damage=player_damage,
        npc_damage=npc_damage,
        npc_killed=npc_killed,
        player_killed=player_killed,
        messages=messages,
    )


def resolve_combat(player: Combatant, location: Location, token: str) -> CombatResult:
    """
    Fight the NPC at position 0 of the location.

    Other NPCs in the same location are never targeted, even once the
    first one is dead.

    Args:
        player: The attacking player; mutated in place
        location: Current location; its first NPC is mutated in place
        token: Trimmed, upper-cased command token

    Returns:
        CombatResult; success is False when no NPC is alive here or the
        token is not an attack command, and nothing changes in that case
    """
    if location.active_character_count <= 0 or not is_attack_command(token):
        return CombatResult(success=False)

    result = resolve_exchange(player, location.characters[0])
    return result.model_copy(
        update={"messages": result.messages + status_lines(player, location)}
    )
