"""
Game Content for the Simple Dungeon.

Pre-built worlds ready to play.
"""

from src.content.starter_world import (
    ANCIENT_ALTAR,
    DARK_CORRIDOR,
    STARTER_CONNECTIONS,
    STARTING_CHAMBER,
    TREASURE_VAULT,
    create_starter_world,
)

__all__ = [
    "ANCIENT_ALTAR",
    "DARK_CORRIDOR",
    "STARTER_CONNECTIONS",
    "STARTING_CHAMBER",
    "TREASURE_VAULT",
    "create_starter_world",
]
