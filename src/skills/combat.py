"""
Guardian Combat Skill for the Simple Dungeon.

A confrontation with the guardian is a single comparison:
- Attack power at or above the guardian's health wins outright
- Anything less means the guardian strikes once and the player flees

The resolver only reports what happened. Applying the damage and
sending the player back is the game engine's job.
"""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, Field


class GuardianProfile(BaseModel):
    """Fixed stats of the guardian blocking the final location."""

    health: int = Field(default=80, ge=1, description="Attack power needed to win")
    attack: int = Field(default=15, ge=0, description="Damage dealt when the player loses")


class CombatOutcome(str, Enum):
    """How a confrontation ended."""

    VICTORY = "victory"
    RETREAT = "retreat"


class CombatResult(BaseModel):
    """Result of resolving a confrontation."""

    outcome: CombatOutcome
    attack_power: int = Field(ge=0, description="Player attack power used")
    guardian_health: int = Field(ge=1, description="Guardian health threshold")
    damage: int = Field(default=0, ge=0, description="Damage the player must take")
    narration: list[str] = Field(default_factory=list)

    @property
    def is_victory(self) -> bool:
        return self.outcome == CombatOutcome.VICTORY


def resolve_encounter(
    attack_power: int,
    guardian: GuardianProfile | None = None,
) -> CombatResult:
    """
    Resolve a confrontation with the guardian.

    Args:
        attack_power: The player's current attack power
        guardian: Guardian stats (defaults to the standard guardian)

    Returns:
        CombatResult with VICTORY (no damage) or RETREAT (guardian's attack as damage)
    """
    if attack_power < 0:
        raise ValueError(f"Attack power must be non-negative, got {attack_power}")

    guardian = guardian or GuardianProfile()

    narration = [
        "!!! A MONSTER APPEARS !!!",
        "You must defeat it to proceed.",
        f"Monster Health: {guardian.health}",
        f"Your Attack Power: {attack_power}",
    ]

    if attack_power >= guardian.health:
        narration.append("You unleash a powerful blow and instantly defeat the monster!")
        return CombatResult(
            outcome=CombatOutcome.VICTORY,
            attack_power=attack_power,
            guardian_health=guardian.health,
            narration=narration,
        )

    narration.append("The monster strikes back! You take damage and flee.")
    return CombatResult(
        outcome=CombatOutcome.RETREAT,
        attack_power=attack_power,
        guardian_health=guardian.health,
        damage=guardian.attack,
        narration=narration,
    )
