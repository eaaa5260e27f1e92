"""
Intent Parser for the Simple Dungeon.

Parses player input into structured Intent objects.
Matching is exact against a fixed token table; anything unknown is
an INVALID intent rather than an error.
"""

from __future__ import annotations

from src.engine.models import Intent
from src.models.entity import Direction

# Token definitions for the command table
MOVE_TOKENS: dict[str, Direction] = {
    "n": Direction.NORTH,
    "north": Direction.NORTH,
    "s": Direction.SOUTH,
    "south": Direction.SOUTH,
    "e": Direction.EAST,
    "east": Direction.EAST,
    "w": Direction.WEST,
    "west": Direction.WEST,
}

QUIT_TOKENS: frozenset[str] = frozenset({"q", "quit"})


def normalize(player_input: str) -> str:
    """Trim surrounding whitespace and lowercase."""
    return player_input.strip().lower()


class PatternIntentParser:
    """Table-driven intent parser."""

    def parse(self, player_input: str) -> Intent:
        """
        Parse player input into an Intent.

        Args:
            player_input: Raw text from the player

        Returns:
            MOVE with a direction, QUIT, or INVALID
        """
        token = normalize(player_input)

        direction = MOVE_TOKENS.get(token)
        if direction is not None:
            return Intent.move(direction, original_input=player_input)

        if token in QUIT_TOKENS:
            return Intent.quit(original_input=player_input)

        return Intent.invalid(original_input=player_input)


_default_parser = PatternIntentParser()


def interpret(player_input: str) -> Intent:
    """Parse one line of player input with the default parser."""
    return _default_parser.parse(player_input)
