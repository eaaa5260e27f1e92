"""
Core Data Models for the Simple Dungeon.

These models define the ontology - the structure of the dungeon,
the things lying around in it, and the player exploring it.

- Entities: Items, Locations, the Player
- World: the fixed location graph and its directional connections
"""

from src.models.entity import (
    Direction,
    Item,
    Location,
    Player,
    create_item,
    create_location,
    create_player,
)
from src.models.world import Connections, World

__all__ = [
    # Entity
    "Direction",
    "Item",
    "Location",
    "Player",
    "create_item",
    "create_location",
    "create_player",
    # World
    "Connections",
    "World",
]
