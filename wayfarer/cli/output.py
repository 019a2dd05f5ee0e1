"""
Console output for Wayfarer.

Word-wraps each message to a fixed column before writing it.
"""

from __future__ import annotations

import sys
import textwrap
from typing import TextIO


class ConsoleOutput:
    """
    GameOutput that writes wrapped lines to a text stream.

    Lines are broken between words so that no line reaches the configured
    width. A single word longer than the width is written unbroken.
    """

    def __init__(self, stream: TextIO | None = None, width: int = 60) -> None:
        if width < 2:
            raise ValueError(f"Wrap width must be at least 2, got {width}")
        self.stream = stream if stream is not None else sys.stdout
        self.width = width

    def wrap(self, text: str) -> list[str]:
        return textwrap.wrap(
            " ".join(text.split()),
            width=self.width - 1,
            break_long_words=False,
            break_on_hyphens=False,
        )

    def println(self, text: str = "") -> None:
        lines = self.wrap(text)
        if not lines:
            self.stream.write("\n")
        for line in lines:
            self.stream.write(line + "\n")
        self.stream.flush()
