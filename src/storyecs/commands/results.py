"""Command results.

A command either did something (``OK``), did nothing and says why
(``FAILED``), or asks the turn loop to stop (``QUIT``). None of these is an
exception: bad player input is ordinary.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, auto


class Outcome(Enum):
    """How a command ended."""

    OK = auto()
    FAILED = auto()
    QUIT = auto()


@dataclass(slots=True)
class CommandResult:
    """Outcome of one player command plus the text to show for it."""

    outcome: Outcome
    messages: list[str] = field(default_factory=list)

    @classmethod
    def ok(cls, *messages: str) -> CommandResult:
        return cls(Outcome.OK, [m for m in messages if m])

    @classmethod
    def fail(cls, message: str) -> CommandResult:
        return cls(Outcome.FAILED, [message])

    @classmethod
    def quit(cls, message: str) -> CommandResult:
        return cls(Outcome.QUIT, [message])

    @property
    def succeeded(self) -> bool:
        return self.outcome is Outcome.OK

    @property
    def finished(self) -> bool:
        """True if the game should end after this command."""
        return self.outcome is Outcome.QUIT
