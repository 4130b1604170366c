from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from command_source.ports.command_source import CommandSource


# CommandHandler is the interpreter boundary: the session driver hands it every command.
@runtime_checkable
class CommandHandler(Protocol):
    def handle(self, command: str, source: "CommandSource") -> bool:
        """Act on one command; return False to stop the session."""
        raise NotImplementedError("CommandHandler is a port; use a concrete handler.")
