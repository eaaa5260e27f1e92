"""
End-to-end gameplay tests for the Simple Dungeon.

Plays whole sessions through the engine with scripted commands,
including the boundary scenario where the default dungeon cannot be
won by combat.
"""

from __future__ import annotations

from src.content import ANCIENT_ALTAR, DARK_CORRIDOR, create_starter_world
from src.engine import EngineConfig, GameStatus
from src.engine.game import LOSS_MESSAGE, WIN_MESSAGE
from src.models import Direction
from src.skills.combat import CombatOutcome

# =============================================================================
# Default values
# =============================================================================


class TestDefaultDungeon:
    """Sessions with the default starting values."""

    def test_sword_then_first_fight_is_lost(self, make_engine):
        """Collect the sword, walk to the altar, and get thrown back."""
        engine = make_engine("e", "w", "n", "w")

        engine.play_turn()  # chamber: torch, go east
        assert engine.player.attack_power == 10

        engine.play_turn()  # vault: sword, go west
        assert engine.player.attack_power == 60

        engine.play_turn()  # chamber: go north
        fight = engine.play_turn()  # corridor: go west into the altar

        assert fight.combat.outcome == CombatOutcome.RETREAT
        assert fight.combat.attack_power == 60
        assert engine.player.health == 85
        assert engine.player.location_id == DARK_CORRIDOR
        assert engine.world.is_guarded(ANCIENT_ALTAR)
        assert engine.status == GameStatus.EXPLORING

    def test_maximum_attack_power_is_sixty(self):
        """Every item in the world together is not enough to beat the guardian."""
        world = create_starter_world()
        config = EngineConfig()

        boosts = sorted(item.power_boost for item in world.all_items())
        best = config.starting_attack_power + sum(boosts)

        assert boosts == [0, 50]
        assert best == 60
        assert best < config.guardian.health

    def test_default_game_cannot_be_won(self, make_engine):
        """Collect every item, then keep charging the altar until dead."""
        commands = ["e", "w", "n", "s", "n"] + ["w"] * 7
        engine = make_engine(*commands)

        results = []
        while not engine.is_over:
            results.append(engine.play_turn())

        fights = [r.combat for r in results if r.combat is not None]
        assert len(fights) == 7
        assert all(f.outcome == CombatOutcome.RETREAT for f in fights)
        assert engine.player.attack_power == 60
        assert engine.world.all_items() == []
        assert engine.status == GameStatus.LOST
        assert engine.player.health == 0
        assert results[-1].messages[-1] == LOSS_MESSAGE

    def test_damage_sequence(self, make_engine):
        engine = make_engine("n", *["w"] * 7)
        engine.play_turn()

        health = []
        while not engine.is_over:
            engine.play_turn()
            health.append(engine.player.health)

        assert health == [85, 70, 55, 40, 25, 10, 0]

    def test_quit_mid_game(self, make_engine, narrator):
        engine = make_engine("e", "w", "quit")
        assert engine.run() == GameStatus.QUIT
        assert engine.player.attack_power == 60
        assert narrator.lines[-1] == "Thank you for playing!"


# =============================================================================
# Raised starting values
# =============================================================================


class TestWinnableDungeon:
    """With enough starting power the sword tips the balance."""

    def test_sword_wins_with_thirty_starting_power(self, make_engine, narrator):
        engine = make_engine(
            "e", "w", "n", "w",
            config=EngineConfig(starting_attack_power=30),
        )

        assert engine.run() == GameStatus.WON
        assert engine.turn_count == 5
        assert engine.player.attack_power == 80
        assert engine.player.health == 100
        assert engine.player.location_id == ANCIENT_ALTAR
        assert narrator.lines[-1] == WIN_MESSAGE

    def test_twenty_nine_is_one_short(self, make_engine):
        engine = make_engine(
            "e", "w", "n", "w", "q",
            config=EngineConfig(starting_attack_power=29),
        )

        assert engine.run() == GameStatus.QUIT
        assert engine.player.health == 85
        assert engine.world.is_guarded(ANCIENT_ALTAR)

    def test_win_only_on_next_render(self, make_engine, narrator):
        engine = make_engine("n", "w", config=EngineConfig(starting_attack_power=80))

        engine.play_turn()
        victory_turn = engine.play_turn()
        assert victory_turn.status == GameStatus.EXPLORING
        assert narrator.lines.count(WIN_MESSAGE) == 0

        final_turn = engine.play_turn()
        assert final_turn.status == GameStatus.WON
        assert narrator.lines.count(WIN_MESSAGE) == 1

    def test_win_preempts_next_command(self, make_engine):
        """Standing in the cleared altar wins before any command is read."""
        engine = make_engine("n", "w", "e", config=EngineConfig(starting_attack_power=80))
        engine.play_turn()
        engine.play_turn()

        engine.play_turn()
        assert engine.status == GameStatus.WON
        assert engine.commands.lines == ["e"]

    def test_cleared_altar_keeps_its_exit(self, make_engine):
        """After defeating the guardian, the altar is an ordinary room."""
        engine = make_engine("n", "w", config=EngineConfig(starting_attack_power=80))
        engine.play_turn()
        engine.play_turn()

        assert not engine.world.is_guarded(ANCIENT_ALTAR)
        assert engine.world.adjacency(ANCIENT_ALTAR, Direction.EAST) == DARK_CORRIDOR
