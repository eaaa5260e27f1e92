"""
Shared fixtures and test doubles for the Simple Dungeon tests.
"""

from __future__ import annotations

import pytest

from src.engine import EngineConfig, GameEngine


class ScriptedCommands:
    """Command source that replays a fixed list of inputs."""

    def __init__(self, *lines: str) -> None:
        self.lines = list(lines)
        self.prompts: list[str] = []

    def read_command(self, prompt: str) -> str:
        self.prompts.append(prompt)
        if not self.lines:
            raise EOFError("script exhausted")
        return self.lines.pop(0)


class RecordingNarrator:
    """Narrator that keeps every line it is asked to show."""

    def __init__(self) -> None:
        self.lines: list[str] = []

    def say(self, text: str) -> None:
        self.lines.append(text)

    def text(self) -> str:
        return "\n".join(self.lines)


@pytest.fixture
def narrator() -> RecordingNarrator:
    """Create a recording narrator."""
    return RecordingNarrator()


@pytest.fixture
def make_engine(narrator):
    """Build a starter-world engine that plays the given commands."""

    def _make(*lines: str, config: EngineConfig | None = None) -> GameEngine:
        return GameEngine.new_game(
            commands=ScriptedCommands(*lines),
            narrator=narrator,
            config=config,
        )

    return _make


@pytest.fixture
def scripted():
    """Factory for scripted command sources."""
    return ScriptedCommands
