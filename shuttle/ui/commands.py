"""Commands the host UI sends to a search session, and their outcome."""

from dataclasses import dataclass
from typing import Optional


class Command:
    """Base class for session commands."""


@dataclass(frozen=True)
class AppendText(Command):
    """Append typed text to the query."""

    text: str


@dataclass(frozen=True)
class Backspace(Command):
    """Remove the last character of the query."""


@dataclass(frozen=True)
class DeleteWord(Command):
    """Remove the last word of the query."""


@dataclass(frozen=True)
class Clear(Command):
    """Empty the query."""


@dataclass(frozen=True)
class MoveUp(Command):
    """Select the previous item, wrapping to the last one."""


@dataclass(frozen=True)
class MoveDown(Command):
    """Select the next item, wrapping to the first one."""


@dataclass(frozen=True)
class Activate(Command):
    """Launch the selected item."""


@dataclass(frozen=True)
class Quit(Command):
    """End the session without launching anything."""


@dataclass(frozen=True)
class CommandOutcome:
    """Result of applying a command.

    ``terminate`` tells the host to tear down; ``activated`` carries the value
    to launch when an item was activated.
    """

    activated: Optional[str] = None
    terminate: bool = False
