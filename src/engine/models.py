"""
Engine Data Models for the Simple Dungeon.

Defines the core data structures for the game loop:
- Intent: Parsed player command
- GameStatus: Where the session is in its lifecycle
- EngineConfig: Starting values and the guardian profile
- TurnResult: Everything that happened in one turn
"""

from __future__ import annotations

import os
from enum import Enum
from typing import Any

from pydantic import BaseModel, Field, model_validator

from src.models.entity import Direction
from src.skills.combat import CombatResult, GuardianProfile


class IntentType(str, Enum):
    """Categories of player intent."""

    MOVE = "move"
    QUIT = "quit"
    INVALID = "invalid"


class Intent(BaseModel):
    """
    Parsed player command.

    A move always carries a direction; quit and invalid never do.
    """

    type: IntentType
    direction: Direction | None = Field(default=None, description="Where to go (MOVE only)")
    original_input: str = Field(default="", description="The player's original input")

    @model_validator(mode="after")
    def direction_matches_type(self) -> Intent:
        if self.type == IntentType.MOVE and self.direction is None:
            raise ValueError("A move intent needs a direction")
        if self.type != IntentType.MOVE and self.direction is not None:
            raise ValueError(f"A {self.type.value} intent cannot carry a direction")
        return self

    @classmethod
    def move(cls, direction: Direction, original_input: str = "") -> Intent:
        return cls(type=IntentType.MOVE, direction=direction, original_input=original_input)

    @classmethod
    def quit(cls, original_input: str = "") -> Intent:
        return cls(type=IntentType.QUIT, original_input=original_input)

    @classmethod
    def invalid(cls, original_input: str = "") -> Intent:
        return cls(type=IntentType.INVALID, original_input=original_input)

    @property
    def is_move(self) -> bool:
        return self.type == IntentType.MOVE


class GameStatus(str, Enum):
    """Lifecycle of a game session."""

    EXPLORING = "exploring"
    WON = "won"
    LOST = "lost"
    QUIT = "quit"

    @property
    def is_terminal(self) -> bool:
        return self != GameStatus.EXPLORING


class EngineConfig(BaseModel):
    """
    Engine configuration.

    The world layout is fixed; only the player's starting values and
    the guardian's stats live here.

    Configuration via environment variables (see ``from_env``):
        DUNGEON_PLAYER_NAME: Name for the player character
    """

    player_name: str = Field(default="Hero", min_length=1, max_length=255)
    starting_health: int = Field(default=100, ge=1)
    starting_attack_power: int = Field(default=10, ge=0)
    guardian: GuardianProfile = Field(default_factory=GuardianProfile)

    @classmethod
    def from_env(cls, **overrides: Any) -> EngineConfig:
        """Build a config, taking the player name from the environment if set."""
        values: dict[str, Any] = {}
        if os.getenv("DUNGEON_PLAYER_NAME"):
            values["player_name"] = os.getenv("DUNGEON_PLAYER_NAME")
        values.update(overrides)
        return cls(**values)


class TurnResult(BaseModel):
    """Result of a single turn."""

    turn_number: int = Field(ge=1)
    status: GameStatus

    # None when the turn ended before a command was read (victory)
    intent: Intent | None = None
    combat: CombatResult | None = None

    messages: list[str] = Field(default_factory=list, description="Every line shown this turn")
