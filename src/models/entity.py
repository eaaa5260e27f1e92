"""
Entity Models for the Simple Dungeon.

Defines the core data structures for game entities:
Items, Locations, and the Player.

Locations and items are built once by the world factory; after that only
a location's items and guardian flag change. The player is mutated
throughout the session by the game engine.
"""

from __future__ import annotations

from enum import Enum
from uuid import UUID, uuid4

from pydantic import BaseModel, Field


class Direction(str, Enum):
    """Compass directions a player can move in."""

    NORTH = "north"
    SOUTH = "south"
    EAST = "east"
    WEST = "west"

    @property
    def label(self) -> str:
        """Display name, e.g. 'North'."""
        return self.value.capitalize()


class Item(BaseModel):
    """
    A collectible item that boosts the holder's attack power.

    Items are immutable; ownership moves from a location to the player
    exactly once.
    """

    model_config = {"frozen": True}

    id: UUID = Field(default_factory=uuid4)
    name: str = Field(min_length=1, max_length=255)
    description: str = Field(default="")
    power_boost: int = Field(default=0, ge=0, description="Attack power granted on pickup")


class Location(BaseModel):
    """A room in the dungeon."""

    id: int = Field(ge=0, frozen=True, description="Stable key used by the adjacency table")
    name: str = Field(min_length=1, max_length=255)
    description: str = Field(default="")
    exits: tuple[Direction, ...] = Field(
        default=(), frozen=True, description="Listed exits, in order"
    )
    items: list[Item] = Field(default_factory=list, description="Front-to-back pickup order")
    guardian_present: bool = False

    def has_items(self) -> bool:
        """Check if anything is left to pick up here."""
        return bool(self.items)

    def exit_labels(self) -> list[str]:
        """Display names of the listed exits."""
        return [direction.label for direction in self.exits]


class Player(BaseModel):
    """
    The player character.

    Mutation methods return the notifications they produce so the
    caller can hand them to whatever is rendering the game.
    """

    name: str = Field(default="Hero", min_length=1, max_length=255)
    location_id: int = Field(ge=0)
    health: int = Field(default=100, ge=0, description="Saturates at zero")
    attack_power: int = Field(default=10, ge=0)
    inventory: list[Item] = Field(default_factory=list)

    def relocate(self, new_location_id: int) -> str:
        """
        Move to another location.

        No validation happens here; the engine only passes destinations
        the world graph produced.
        """
        self.location_id = new_location_id
        return "*** You move to a new location. ***"

    def owns(self, item: Item) -> bool:
        """Check if this exact item is already in the inventory."""
        return any(owned.id == item.id for owned in self.inventory)

    def absorb(self, item: Item) -> list[str]:
        """
        Pick up an item and apply its power boost.

        Args:
            item: The item being transferred to the player

        Returns:
            Notifications describing the pickup and the new attack power

        Raises:
            ValueError: If this item was already absorbed
        """
        if self.owns(item):
            raise ValueError(f"Item '{item.name}' ({item.id}) is already in the inventory")

        self.attack_power += item.power_boost
        self.inventory.append(item)
        return [
            f"You found and picked up a {item.name}!",
            f"Your attack power is now {self.attack_power}!",
        ]

    def apply_damage(self, amount: int) -> int:
        """Reduce health by ``amount``, never below zero. Returns the new health."""
        if amount < 0:
            raise ValueError(f"Damage must be non-negative, got {amount}")
        self.health = max(0, self.health - amount)
        return self.health

    def is_alive(self) -> bool:
        return self.health > 0

    def health_report(self) -> str:
        return f"*** {self.name}'s Health: {self.health} ***"


def create_item(name: str, description: str = "", power_boost: int = 0) -> Item:
    """Factory function to create an item."""
    return Item(name=name, description=description, power_boost=power_boost)


def create_location(
    location_id: int,
    name: str,
    description: str = "",
    exits: list[Direction] | None = None,
    items: list[Item] | None = None,
    guardian_present: bool = False,
) -> Location:
    """Factory function to create a location."""
    return Location(
        id=location_id,
        name=name,
        description=description,
        exits=tuple(exits or ()),
        items=items or [],
        guardian_present=guardian_present,
    )


def create_player(
    name: str,
    location_id: int,
    health: int = 100,
    attack_power: int = 10,
) -> Player:
    """Factory function to create a player with an empty inventory."""
    return Player(
        name=name,
        location_id=location_id,
        health=health,
        attack_power=attack_power,
    )
