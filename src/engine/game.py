"""
Game Engine for the Simple Dungeon.

The main orchestration layer that processes player turns.
Coordinates rendering, item pickup, intent parsing, movement,
guardian combat, and the win/loss checks.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Protocol

from src.content import create_starter_world
from src.engine.intent import PatternIntentParser
from src.engine.models import EngineConfig, GameStatus, Intent, IntentType, TurnResult
from src.models import Direction, Location, Player, World, create_player
from src.skills.combat import CombatResult, resolve_encounter

logger = logging.getLogger(__name__)

COMMAND_PROMPT = "What do you do? (N/S/E/W or Quit): "
SEPARATOR = "-" * 41

CANT_GO_MESSAGE = "You can't go that way."
INVALID_MESSAGE = "Invalid command. Please use N, S, E, W, or Quit."
WIN_MESSAGE = "*** CONGRATULATIONS! You have defeated the boss and won the game! ***"
LOSS_MESSAGE = "!!! Your health dropped to zero. Game Over. !!!"
QUIT_MESSAGE = "Thank you for playing!"


class CommandSource(Protocol):
    """Interface for reading player commands."""

    def read_command(self, prompt: str) -> str:
        """
        Block until the player enters one line.

        Raises:
            EOFError: If the input stream is exhausted
            OSError: If the underlying read fails
        """
        ...


class Narrator(Protocol):
    """Interface for showing game output to the player."""

    def say(self, text: str) -> None:
        """Show one line. Must be visible before the next command is read."""
        ...


class InputUnavailableError(RuntimeError):
    """The next command could not be read; the session cannot continue."""


@dataclass
class GameEngine:
    """
    Main game engine orchestrating the game loop.

    Owns the world and the player for the whole session. Each call to
    ``play_turn`` runs one turn in a fixed order:
    render -> victory check -> pickup -> read command -> dispatch -> death check.
    """

    world: World
    player: Player
    commands: CommandSource
    narrator: Narrator
    config: EngineConfig = field(default_factory=EngineConfig)

    intent_parser: PatternIntentParser = field(init=False)
    status: GameStatus = field(init=False, default=GameStatus.EXPLORING)
    turn_count: int = field(init=False, default=0)
    _messages: list[str] = field(init=False, default_factory=list)

    def __post_init__(self) -> None:
        """Initialize engine components."""
        self.intent_parser = PatternIntentParser()
        assert self.player.location_id in self.world.locations, (
            f"Player starts in unknown location {self.player.location_id}"
        )

    @classmethod
    def new_game(
        cls,
        commands: CommandSource,
        narrator: Narrator,
        config: EngineConfig | None = None,
    ) -> GameEngine:
        """
        Start a fresh game in the starter world.

        Args:
            commands: Where player commands come from
            narrator: Where game output goes
            config: Starting values (defaults to EngineConfig())

        Returns:
            Engine ready for its first turn
        """
        config = config or EngineConfig()
        world = create_starter_world()
        player = create_player(
            name=config.player_name,
            location_id=world.start_location_id,
            health=config.starting_health,
            attack_power=config.starting_attack_power,
        )
        return cls(
            world=world,
            player=player,
            commands=commands,
            narrator=narrator,
            config=config,
        )

    @property
    def is_over(self) -> bool:
        return self.status.is_terminal

    def run(self) -> GameStatus:
        """Play turns until the game reaches a terminal status."""
        while not self.is_over:
            self.play_turn()
        logger.info("Game finished after %d turns: %s", self.turn_count, self.status.value)
        return self.status

    def play_turn(self) -> TurnResult:
        """
        Play exactly one turn.

        Returns:
            TurnResult with the status after the turn and everything shown

        Raises:
            InputUnavailableError: If the command could not be read
            RuntimeError: If the game is already over
        """
        if self.is_over:
            raise RuntimeError(f"Game is already over ({self.status.value})")

        self.turn_count += 1
        self._messages = []
        location = self._current_location()
        logger.debug("Turn %d starting in %s", self.turn_count, location.name)

        self._render(location)

        # Victory shows up on the turn after the guardian falls
        if location.id == self.world.final_location_id and not location.guardian_present:
            return self._finish(GameStatus.WON, WIN_MESSAGE)

        if location.has_items():
            self._pick_up(location)

        self._say(f"Exits available: {' '.join(location.exit_labels())}")

        intent = self.intent_parser.parse(self._read_command())
        logger.debug("Parsed %r as %s", intent.original_input, intent.type.value)

        combat: CombatResult | None = None
        if intent.type == IntentType.QUIT:
            return self._finish(GameStatus.QUIT, QUIT_MESSAGE, intent=intent)
        if intent.is_move:
            assert intent.direction is not None
            combat = self._move(location, intent.direction)
        else:
            self._say(INVALID_MESSAGE)

        if not self.player.is_alive():
            self.status = GameStatus.LOST
            self._say(LOSS_MESSAGE)

        return self._result(intent=intent, combat=combat)

    # =========================================================================
    # Turn steps
    # =========================================================================

    def _current_location(self) -> Location:
        location_id = self.player.location_id
        assert location_id in self.world.locations, f"Player is in unknown location {location_id}"
        return self.world.get_location(location_id)

    def _render(self, location: Location) -> None:
        self._say(SEPARATOR)
        self._say(f"You are in the: {location.name}")
        self._say(location.description)
        self._say(self.player.health_report())

    def _pick_up(self, location: Location) -> None:
        """Move the first item of the location into the player's inventory."""
        item = location.items[0]
        for line in self.player.absorb(item):
            self._say(line)
        taken = self.world.take_first_item(location.id)
        assert taken is item
        logger.debug("%s picked up %s in %s", self.player.name, item.name, location.name)

    def _read_command(self) -> str:
        try:
            return self.commands.read_command(COMMAND_PROMPT)
        except (EOFError, OSError) as e:
            logger.error("Input channel lost on turn %d: %s", self.turn_count, e)
            raise InputUnavailableError("Could not read the next command") from e

    def _move(self, location: Location, direction: Direction) -> CombatResult | None:
        """Follow an exit, fighting the guardian if one blocks the way."""
        destination_id = self.world.adjacency(location.id, direction)
        if destination_id is None:
            self._say(CANT_GO_MESSAGE)
            return None

        if self.world.is_guarded(destination_id):
            return self._fight(destination_id)

        self._say(self.player.relocate(destination_id))
        return None

    def _fight(self, destination_id: int) -> CombatResult:
        """Resolve the guardian encounter and apply its consequences."""
        result = resolve_encounter(self.player.attack_power, self.config.guardian)
        for line in result.narration:
            self._say(line)

        if result.is_victory:
            self._say(self.player.relocate(destination_id))
            self.world.clear_guardian(destination_id)
            logger.info("%s defeated the guardian", self.player.name)
        else:
            self.player.apply_damage(result.damage)
            self._say(self.player.health_report())
            # Forced retreat, not a chosen move: skips the adjacency table
            self.player.location_id = self.world.fallback_location_id
            logger.info(
                "%s retreated with %d health left", self.player.name, self.player.health
            )

        return result

    def _finish(
        self,
        status: GameStatus,
        message: str,
        intent: Intent | None = None,
    ) -> TurnResult:
        self.status = status
        self._say(message)
        return self._result(intent=intent)

    def _result(
        self,
        intent: Intent | None = None,
        combat: CombatResult | None = None,
    ) -> TurnResult:
        return TurnResult(
            turn_number=self.turn_count,
            status=self.status,
            intent=intent,
            combat=combat,
            messages=list(self._messages),
        )

    def _say(self, text: str) -> None:
        self._messages.append(text)
        self.narrator.say(text)
