"""Turn loop driver.

One turn is: run the player's command, run the per-turn systems (rules),
advance the clock. A ``quit`` command ends the loop without ending the
process.

Usage:
    game = Game(scenario.build(), GameSettings())
    game.run(["e", "e", "wash hands", "quit"], emit=print)
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable
from dataclasses import dataclass

from storyecs.commands import CommandResult, describe_location, execute
from storyecs.config import GameSettings
from storyecs.core.types import Detail
from storyecs.systems import validate_rules
from storyecs.world.world import World

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class TurnReport:
    """Everything one turn produced."""

    result: CommandResult
    messages: list[str]
    finished: bool


class Game:
    """Owns the world for the length of one session.

    Args:
        world: Fully built world; the game is its only mutator from here on.
        settings: Loop and command settings.
    """

    def __init__(self, world: World, settings: GameSettings | None = None):
        self._world = world
        self._settings = settings or GameSettings()
        self._started = False
        self._finished = False

    @property
    def world(self) -> World:
        return self._world

    @property
    def finished(self) -> bool:
        return self._finished

    def start(self) -> list[str]:
        """Check the scenario and describe the starting location.

        Raises:
            UnknownEntityError: If a rule refers to an entity that does not exist.
        """
        validate_rules(self._world)
        self._started = True
        logger.info("Game started with %d rules", len(self._world.rule_ids()))
        here = self._world.loc(self._world.pid)
        return [describe_location(self._world, here, Detail.FULL)]

    def turn(self, line: str) -> TurnReport:
        """Play one turn.

        Raises:
            RuntimeError: If the game has not started or is already over.
        """
        if not self._started:
            raise RuntimeError("Game not started; call start() first")
        if self._finished:
            raise RuntimeError("Game is over")

        result = execute(self._world, line, debug=self._settings.debug_commands)
        messages = list(result.messages)
        if result.finished:
            self._finished = True
            return TurnReport(result=result, messages=messages, finished=True)

        messages.extend(self._world.tick())
        clock = self._world.advance_clock()

        max_turns = self._settings.max_turns
        if max_turns is not None and clock >= max_turns:
            logger.info("Turn limit %d reached", max_turns)
            self._finished = True
        return TurnReport(result=result, messages=messages, finished=self._finished)

    def run(self, lines: Iterable[str], emit: Callable[[str], None]) -> int:
        """Play until quit, the turn limit, or the end of input.

        Args:
            lines: Player input, one command per item.
            emit: Called with each piece of text to show.

        Returns:
            The clock when the loop ended.
        """
        for message in self.start():
            emit(message)

        for line in lines:
            if not line.strip():
                continue
            report = self.turn(line)
            for message in report.messages:
                emit(message)
            if report.finished:
                break

        self._finished = True
        logger.info("Game over at clock %d", self._world.clock)
        return self._world.clock
