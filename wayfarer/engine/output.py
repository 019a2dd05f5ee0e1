"""
Output seam for Wayfarer.

The engine composes whole message lines and hands them to a GameOutput.
Line wrapping and the actual stream belong to the implementation.
"""

from __future__ import annotations

from typing import Protocol


class GameOutput(Protocol):
    """Interface for anything that can display game text."""

    def println(self, text: str = "") -> None:
        """Write one message; an empty string is a blank line."""
        ...


class BufferedOutput:
    """Collects lines in memory, for tests and for replaying a turn."""

    def __init__(self) -> None:
        self.lines: list[str] = []

    def println(self, text: str = "") -> None:
        self.lines.append(text)

    @property
    def text(self) -> str:
        return "\n".join(self.lines)

    def clear(self) -> None:
        self.lines.clear()
