"""
Interactive REPL for the Simple Dungeon.

Provides a text-based interface for playing the game.
"""

from __future__ import annotations

import argparse
import logging
import sys

from src.engine import EngineConfig, GameEngine, GameStatus, InputUnavailableError

logger = logging.getLogger(__name__)

WELCOME_MESSAGE = "--- Welcome to The Simple Dungeon! ---"


class ConsoleNarrator:
    """Writes game output to stdout, flushing every line."""

    def say(self, text: str) -> None:
        print(text, flush=True)


class ConsoleCommandSource:
    """Reads player commands from stdin."""

    def read_command(self, prompt: str) -> str:
        return input(prompt)


class GameREPL:
    """
    Interactive REPL for playing the Simple Dungeon.

    Wires the console to a fresh game engine and runs it to the end.
    """

    def __init__(self, *, config: EngineConfig | None = None) -> None:
        self.config = config or EngineConfig.from_env()

    def _print_banner(self) -> None:
        """Print the game banner."""
        print(WELCOME_MESSAGE, flush=True)

    def create_engine(self) -> GameEngine:
        return GameEngine.new_game(
            commands=ConsoleCommandSource(),
            narrator=ConsoleNarrator(),
            config=self.config,
        )

    def run(self) -> GameStatus:
        """
        Run the game until it is won, lost or quit.

        Raises:
            InputUnavailableError: If stdin closes or fails mid-game
        """
        engine = self.create_engine()
        self._print_banner()
        return engine.run()


def run_game(character_name: str | None = None) -> GameStatus:
    """
    Run the Simple Dungeon.

    Args:
        character_name: Name for the player character (defaults to the
            environment or "Hero")
    """
    overrides = {"player_name": character_name} if character_name else {}
    repl = GameREPL(config=EngineConfig.from_env(**overrides))
    return repl.run()


def main(argv: list[str] | None = None) -> int:
    """Command-line entry point. Returns the process exit code."""
    parser = argparse.ArgumentParser(description="The Simple Dungeon")
    parser.add_argument("--name", default=None, help="Character name")
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Log engine activity to stderr",
    )
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.debug else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    try:
        status = run_game(character_name=args.name)
    except InputUnavailableError:
        print("\nInput closed. The game cannot continue.", file=sys.stderr)
        return 1
    except KeyboardInterrupt:
        print("\n")
        return 1

    logger.debug("Session ended with status %s", status.value)
    return 0


if __name__ == "__main__":
    sys.exit(main())
