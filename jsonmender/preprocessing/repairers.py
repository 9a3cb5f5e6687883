"""
Structure repair steps.

This module contains repair steps that restore missing structural
punctuation between records.
"""

from enum import Enum

import regex

from ..utils.config import RepairConfig
from .base import RepairStepBase, StepResult

OBJECT_END_PATTERN = regex.compile(r"}(\s*)$")


class Lookahead(Enum):
    """What follows a line that closes an object."""

    NEW_OBJECT = "new_object"
    CLOSING = "closing"
    SAME_OBJECT = "same_object"
    END_OF_INPUT = "end_of_input"


class CommaInserter(RepairStepBase):
    """Adds the comma missing between two adjacent objects in an array."""

    name = "missing_commas"
    toggle = "insert_missing_commas"

    def process(self, text: str, config: RepairConfig) -> StepResult:
        lines = text.split("\n")
        result = StepResult(text)

        for i, line in enumerate(lines):
            trimmed = line.strip()
            if not trimmed.endswith("}"):
                continue

            if self._look_ahead(lines, i + 1) is Lookahead.NEW_OBJECT:
                lines[i] = OBJECT_END_PATTERN.sub(r"},\1", line, count=1)
                result.fixes.append(
                    self.fix(
                        f"Added missing comma after object on line {i + 1}", line=i + 1
                    )
                )

        if result.fixes:
            config.get_logger(__name__).info(
                "Added %d commas between objects", len(result.fixes)
            )
            result.text = "\n".join(lines)
        return result

    @staticmethod
    def _look_ahead(lines: list[str], start: int) -> Lookahead:
        """Classify the next structurally meaningful line."""
        for j in range(start, len(lines)):
            next_line = lines[j].strip()
            if not next_line:
                continue
            if next_line.startswith("{"):
                return Lookahead.NEW_OBJECT
            if next_line.startswith(("]", "}")):
                return Lookahead.CLOSING
            if ":" in next_line:
                return Lookahead.SAME_OBJECT
        return Lookahead.END_OF_INPUT
