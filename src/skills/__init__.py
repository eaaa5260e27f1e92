"""
Stateless Skills for the Simple Dungeon.

Skills are pure functions that:
- Take structured input (Pydantic models)
- Execute game logic (combat rules)
- Return structured output
- NEVER maintain state between calls
- NEVER mutate the player or the world
"""

from src.skills.combat import (
    CombatOutcome,
    CombatResult,
    GuardianProfile,
    resolve_encounter,
)

__all__ = [
    # Combat
    "CombatOutcome",
    "CombatResult",
    "GuardianProfile",
    "resolve_encounter",
]
