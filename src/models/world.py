"""
World Graph for the Simple Dungeon.

Holds the fixed set of locations and the directional connections
between them. Connectivity never changes after construction; only the
contents of a location (items, guardian) do.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from types import MappingProxyType

from src.models.entity import Direction, Item, Location

# (from_location_id, direction) -> to_location_id
Connections = Mapping[tuple[int, Direction], int]


@dataclass(frozen=True)
class World:
    """
    The dungeon: locations plus an explicit adjacency table.

    Edges are one-way; a return path exists only if it is wired
    separately. The location and connection tables are read-only views.
    """

    locations: Mapping[int, Location]
    connections: Connections
    start_location_id: int
    final_location_id: int
    fallback_location_id: int

    def __post_init__(self) -> None:
        """Validate wiring. A bad world is a construction error."""
        for key, location in self.locations.items():
            if key != location.id:
                raise ValueError(
                    f"Location '{location.name}' stored under id {key}, has id {location.id}"
                )

        object.__setattr__(self, "locations", MappingProxyType(dict(self.locations)))
        object.__setattr__(self, "connections", MappingProxyType(dict(self.connections)))

        for role, location_id in (
            ("start", self.start_location_id),
            ("final", self.final_location_id),
            ("fallback", self.fallback_location_id),
        ):
            if location_id not in self.locations:
                raise ValueError(f"Unknown {role} location id: {location_id}")

        for (from_id, direction), to_id in self.connections.items():
            if from_id not in self.locations:
                raise ValueError(f"Connection from unknown location {from_id}")
            if to_id not in self.locations:
                raise ValueError(
                    f"Connection {from_id} {direction.value} leads to unknown location {to_id}"
                )
            if direction not in self.locations[from_id].exits:
                raise ValueError(
                    f"Connection {from_id} {direction.value} is not listed as an exit of "
                    f"'{self.locations[from_id].name}'"
                )

        for location in self.locations.values():
            for direction in location.exits:
                if (location.id, direction) not in self.connections:
                    raise ValueError(
                        f"Exit {direction.value} of '{location.name}' does not lead anywhere"
                    )

    def adjacency(self, location_id: int, direction: Direction) -> int | None:
        """
        Look up where a direction leads from a location.

        Returns:
            Destination location id, or None if there is no way through
        """
        return self.connections.get((location_id, direction))

    def get_location(self, location_id: int) -> Location:
        """Get a location by id. Raises KeyError for unknown ids."""
        return self.locations[location_id]

    def take_first_item(self, location_id: int) -> Item | None:
        """Remove and return the front item of a location, if any."""
        location = self.get_location(location_id)
        if not location.items:
            return None
        return location.items.pop(0)

    def clear_guardian(self, location_id: int) -> None:
        """Mark the guardian of a location as defeated."""
        self.get_location(location_id).guardian_present = False

    def is_guarded(self, location_id: int) -> bool:
        return self.get_location(location_id).guardian_present

    def all_items(self) -> list[Item]:
        """Items still lying around anywhere in the world."""
        return [item for location in self.locations.values() for item in location.items]
