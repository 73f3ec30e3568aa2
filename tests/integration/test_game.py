"""Tests for the turn loop and the console entry point."""

import pytest

from storyecs import (
    DIRTY,
    EntityId,
    Game,
    GameSettings,
    Print,
    SetFlag,
    UnknownEntityError,
    cli,
)

def test_turn_before_start_is_an_error(demo_world):
    with pytest.raises(RuntimeError, match="not started"):
        Game(demo_world).turn("look")

def test_start_validates_rules(small_world):
    small_world.create("broken").once(lambda w: True).action(SetFlag(EntityId(42), DIRTY))

    with pytest.raises(UnknownEntityError):
        Game(small_world).start()

def test_each_turn_advances_the_clock(small_world):
    game = Game(small_world)
    game.start()

    game.turn("look")
    game.turn("nonsense")

    assert small_world.clock == 2

def test_quit_ends_game_without_running_rules(small_world):
    small_world.create("chime").always(lambda w: True).action(Print("Ding."))
    game = Game(small_world)
    game.start()

    report = game.turn("quit")

    assert report.finished
    assert report.messages == ["Bye, then."]
    assert game.finished
    assert small_world.clock == 0
    with pytest.raises(RuntimeError, match="over"):
        game.turn("look")


def test_rule_output_follows_command_output(small_world):
    small_world.create("chime").always(lambda w: True).action(Print("Ding."))
    game = Game(small_world)
    game.start()

    report = game.turn("n")

    assert report.messages == ["Study\nBooks everywhere.", "Ding."]
    assert not report.finished

def test_run_stops_at_turn_limit(small_world):
    game = Game(small_world, GameSettings(max_turns=2))
    emitted = []

    clock = game.run(["look", "n", "s", "look"], emit=emitted.append)

    assert clock == 2
    assert game.finished
    assert emitted == ["Hall\nA long hall.", "Hall\nA long hall.", "Study\nBooks everywhere."]

def test_run_skips_blank_lines_and_stops_at_end_of_input(small_world):
    game = Game(small_world)
    emitted = []

    clock = game.run(["", "   ", "n"], emit=emitted.append)

    assert clock == 1
    assert emitted[-1] == "Study\nBooks everywhere."

def test_run_stops_at_quit(small_world):
    game = Game(small_world)
    emitted = []

    clock = game.run(["quit", "n"], emit=emitted.append)

    assert clock == 0
    assert emitted[-1] == "Bye, then."
    assert small_world.loc(small_world.pid) == small_world.lookup_id("hall")

def test_debug_commands_follow_settings(small_world):
    game = Game(small_world, GameSettings(debug_commands=True))
    game.start()

    report = game.turn("list")

    assert "[1] hall (Hall)" in report.messages[0]

class TestCli:
    @pytest.fixture
    def feed(self, monkeypatch):
        def _feed(*lines):
            pending = iter(lines)

            def fake_input(prompt=""):
                try:
                    return next(pending)
                except StopIteration:
                    raise EOFError from None

            monkeypatch.setattr("builtins.input", fake_input)

        return _feed

    def test_plays_until_quit(self, feed, capsys):
        feed("get note", "quit", "e")

        assert cli.main([]) == 0

        out = capsys.readouterr().out
        assert out.startswith("Clearing\n")
        assert "Taken.\n" in out
        assert out.rstrip().endswith("Bye, then.")
        assert "Trail" not in out

    def test_end_of_input(self, feed, capsys):
        feed("e")

        assert cli.main(["--log-level", "ERROR"]) == 0
        assert "Trail\nA trail from hither to yon." in capsys.readouterr().out

    def test_turn_limit_and_debug(self, feed, capsys):
        feed("list", "e", "e")

        assert cli.main(["--debug", "--max-turns", "2"]) == 0

        out = capsys.readouterr().out
        assert "[0] limbo (limbo)" in out
        assert "[4] bridge (Bridge)" in out
        assert "Trail\nA trail from hither to yon." in out
        assert "Bridge\nThe trail crosses" not in out
