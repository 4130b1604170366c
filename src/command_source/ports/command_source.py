from __future__ import annotations

from typing import Protocol, runtime_checkable


# CommandSource port supplies command strings to an interpreter loop and relays its output.
@runtime_checkable
class CommandSource(Protocol):
    def get_command(self) -> str:
        """Return the next command string."""
        # Port contract has no implementation; calling it directly is a wiring error.
        raise NotImplementedError("CommandSource is a port; use a concrete adapter.")

    def display_message(self, text: str) -> None:
        """Write a message line to standard output."""
        raise NotImplementedError("CommandSource is a port; use a concrete adapter.")

    def display_error(self, text: str) -> None:
        """Report an error; batch sources terminate the process afterwards."""
        raise NotImplementedError("CommandSource is a port; use a concrete adapter.")

    def close(self) -> None:
        """Release the underlying reader. Idempotent and never raises."""
        raise NotImplementedError("CommandSource is a port; use a concrete adapter.")
