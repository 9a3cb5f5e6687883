"""
Line filters that drop non-JSON noise.

This module contains repair steps that remove whole lines: markdown fences
and labels left behind by the generator, and closing brackets that end the
top-level array too early.
"""

from enum import Enum
from typing import Optional

from ..utils.config import RepairConfig
from .base import RepairStepBase, StepResult


class LineJunkFilter(RepairStepBase):
    """Removes lines whose trimmed content is a known junk token."""

    name = "junk_lines"
    toggle = "remove_junk_lines"

    def process(self, text: str, config: RepairConfig) -> StepResult:
        junk = set(config.junk_lines)
        kept: list[str] = []
        result = StepResult(text)

        for index, line in enumerate(text.split("\n"), 1):
            trimmed = line.strip()
            if trimmed in junk:
                result.fixes.append(
                    self.fix(f'Removed junk line {index}: "{trimmed}"', line=index)
                )
                continue
            kept.append(line)

        if result.fixes:
            config.get_logger(__name__).info(
                "Removed %d junk lines", len(result.fixes)
            )
            result.text = "\n".join(kept)
        return result


class BracketDecision(Enum):
    """Outcome of looking past a lone closing bracket."""

    REMOVE = "remove"
    KEEP = "keep"
    UNDECIDED = "undecided"


class StrayBracketFilter(RepairStepBase):
    """
    Removes lone ``]`` lines that close the top-level array too early.

    A bracket is stray when the next non-blank line within the lookahead
    window opens another record, either with ``{`` or with the identifier
    field. Anything else keeps the bracket.
    """

    name = "stray_brackets"
    toggle = "remove_stray_brackets"

    def process(self, text: str, config: RepairConfig) -> StepResult:
        lines = text.split("\n")
        kept: list[str] = []
        result = StepResult(text)
        record_start = f'"{config.id_field}"'

        for i, line in enumerate(lines):
            if line.strip() == "]":
                decision = self._look_ahead(
                    lines, i + 1, config.bracket_lookahead, record_start
                )
                if decision is BracketDecision.REMOVE:
                    result.fixes.append(
                        self.fix(f"Removed stray ] on line {i + 1}", line=i + 1)
                    )
                    continue
            kept.append(line)

        if result.fixes:
            config.get_logger(__name__).info(
                "Removed %d stray closing brackets", len(result.fixes)
            )
            result.text = "\n".join(kept)
        return result

    @staticmethod
    def _look_ahead(
        lines: list[str], start: int, window: int, record_start: str
    ) -> BracketDecision:
        """Classify the first non-blank line within the window."""
        next_line: Optional[str] = None
        for j in range(start, min(start + window, len(lines))):
            candidate = lines[j].strip()
            if candidate:
                next_line = candidate
                break

        if next_line is None:
            return BracketDecision.UNDECIDED
        if next_line.startswith(("{", record_start)):
            return BracketDecision.REMOVE
        return BracketDecision.KEEP
