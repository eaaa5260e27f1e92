"""
Starter World for the Simple Dungeon.

Provides the fixed four-room dungeon the game is played in.
"""

from __future__ import annotations

from src.models import Connections, Direction, World, create_item, create_location

STARTING_CHAMBER = 0
DARK_CORRIDOR = 1
TREASURE_VAULT = 2
ANCIENT_ALTAR = 3

# Edges are one-way. The vault and the altar each have a single way out.
STARTER_CONNECTIONS: Connections = {
    (STARTING_CHAMBER, Direction.NORTH): DARK_CORRIDOR,
    (STARTING_CHAMBER, Direction.EAST): TREASURE_VAULT,
    (DARK_CORRIDOR, Direction.SOUTH): STARTING_CHAMBER,
    (DARK_CORRIDOR, Direction.WEST): ANCIENT_ALTAR,
    (TREASURE_VAULT, Direction.WEST): STARTING_CHAMBER,
    (ANCIENT_ALTAR, Direction.EAST): DARK_CORRIDOR,
}


def create_starter_world() -> World:
    """
    Create the dungeon for a new game.

    Returns a world with:
    - Starting Chamber (start), holding an Old Torch (+0)
    - Dark Corridor, where a beaten player retreats to
    - Treasure Vault, holding the Sword of Glory (+50)
    - Ancient Altar (final), guarded by the monster

    Every call builds fresh locations, so games never share state.
    """
    # =========================================================================
    # Create Items
    # =========================================================================
    torch = create_item(
        name="Old Torch",
        description="It flickers dimly.",
        power_boost=0,
    )
    sword = create_item(
        name="Sword of Glory",
        description="Gives a massive boost.",
        power_boost=50,
    )

    # =========================================================================
    # Create Locations
    # =========================================================================
    chamber = create_location(
        STARTING_CHAMBER,
        name="Starting Chamber",
        description="A dusty, circular room. There is a chill in the air.",
        exits=[Direction.NORTH, Direction.EAST],
        items=[torch],
    )
    corridor = create_location(
        DARK_CORRIDOR,
        name="Dark Corridor",
        description="The walls are lined with strange runes. You hear dripping water.",
        exits=[Direction.SOUTH, Direction.WEST],
    )
    vault = create_location(
        TREASURE_VAULT,
        name="Treasure Vault",
        description="A small room filled with glittering dust and a single glowing sword.",
        exits=[Direction.WEST],
        items=[sword],
    )
    altar = create_location(
        ANCIENT_ALTAR,
        name="Ancient Altar",
        description=(
            "A massive chamber dominated by an altar. A fearsome monster blocks the exit!"
        ),
        exits=[Direction.EAST],
        guardian_present=True,
    )

    return World(
        locations={loc.id: loc for loc in (chamber, corridor, vault, altar)},
        connections=dict(STARTER_CONNECTIONS),
        start_location_id=STARTING_CHAMBER,
        final_location_id=ANCIENT_ALTAR,
        fallback_location_id=DARK_CORRIDOR,
    )
