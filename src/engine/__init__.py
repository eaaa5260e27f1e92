"""
Core Engine for the Simple Dungeon.

The engine orchestrates:
- Intent parsing (understanding player commands)
- Movement through the world graph
- Item pickup
- Guardian combat (via the combat skill)
- Win, loss and quit detection
"""

from __future__ import annotations

from src.engine.game import (
    COMMAND_PROMPT,
    CommandSource,
    GameEngine,
    InputUnavailableError,
    Narrator,
)
from src.engine.intent import MOVE_TOKENS, QUIT_TOKENS, PatternIntentParser, interpret
from src.engine.models import (
    EngineConfig,
    GameStatus,
    Intent,
    IntentType,
    TurnResult,
)

__all__ = [
    # Main engine
    "GameEngine",
    "CommandSource",
    "Narrator",
    "InputUnavailableError",
    "COMMAND_PROMPT",
    # Models
    "EngineConfig",
    "GameStatus",
    "Intent",
    "IntentType",
    "TurnResult",
    # Intent parsing
    "MOVE_TOKENS",
    "QUIT_TOKENS",
    "PatternIntentParser",
    "interpret",
]
