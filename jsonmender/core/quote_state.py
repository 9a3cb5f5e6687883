"""
Quote scanning for single lines of JSON text.

A line is scanned left to right with a two-state machine. In ``NORMAL`` a
backslash moves to ``ESCAPE_PENDING`` and a double quote is counted; in
``ESCAPE_PENDING`` the next character is consumed verbatim and the machine
returns to ``NORMAL``.
"""

from dataclasses import dataclass, field
from enum import Enum


class ScanState(Enum):
    """States of the quote scanner."""

    NORMAL = "normal"
    ESCAPE_PENDING = "escape_pending"


@dataclass
class QuoteState:
    """Running quote statistics for one line."""

    count: int = 0
    positions: list[int] = field(default_factory=list)
    state: ScanState = ScanState.NORMAL

    @property
    def balanced(self) -> bool:
        """True when the line holds an even number of unescaped quotes."""
        return self.count % 2 == 0

    def feed(self, index: int, char: str) -> None:
        """Advance the scanner by one character."""
        if self.state is ScanState.ESCAPE_PENDING:
            self.state = ScanState.NORMAL
            return

        if char == "\\":
            self.state = ScanState.ESCAPE_PENDING
        elif char == '"':
            self.count += 1
            self.positions.append(index)

    @classmethod
    def scan(cls, line: str) -> "QuoteState":
        """Scan a whole line and return its final state."""
        state = cls()
        for index, char in enumerate(line):
            state.feed(index, char)
        return state


def count_unescaped_quotes(line: str) -> int:
    """Count double quotes in a line that are not preceded by an escape."""
    return QuoteState.scan(line).count


def unescaped_quote_positions(line: str) -> list[int]:
    """Return the indices of unescaped double quotes in a line."""
    return QuoteState.scan(line).positions
