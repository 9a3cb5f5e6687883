"""
Quote normalization repair steps.

This module escapes double quotes that sit inside HTML text: first the quotes
around inline ``name="value"`` attributes, then single stray quotes on lines
whose unescaped quote count is odd.
"""

from typing import Optional

import regex

from ..core.constants import field_marker
from ..core.quote_state import QuoteState
from ..utils.config import RepairConfig
from .base import RepairStepBase, StepResult

ATTRIBUTE_PATTERN = regex.compile(r'(?<!\\)(\w+)="([^"\n]*)"')
TERMINATED_ENDINGS = ('",', '"}', '"},')


class QuoteNormalizer(RepairStepBase):
    """
    Escapes quotes inside HTML fragments embedded in JSON strings.

    Attribute quoting is not scoped to any field by default: every
    ``name="value"`` fragment in the document is rewritten to
    ``name=\\"value\\"``. Set ``scope_attributes_to_text_field`` to limit it
    to lines carrying the text-field key.
    """

    name = "quotes"
    toggle = "normalize_quotes"

    def process(self, text: str, config: RepairConfig) -> StepResult:
        result = StepResult(text)
        logger = config.get_logger(__name__)

        result.text, count = self._escape_attribute_quotes(result.text, config)
        if count:
            result.fixes.append(self.fix(f"Escaped quotes in {count} HTML attributes"))
            logger.info("Escaped quotes in %d HTML attributes", count)

        result.text = self._repair_unpaired_quotes(result.text, config, result)
        return result

    @staticmethod
    def _escape_attribute_quotes(text: str, config: RepairConfig) -> tuple[str, int]:
        """Rewrite ``name="value"`` to ``name=\\"value\\"``."""
        replacement = r'\1=\\"\2\\"'
        if not config.scope_attributes_to_text_field:
            return ATTRIBUTE_PATTERN.subn(replacement, text)

        marker = field_marker(config.text_field)
        total = 0
        lines = text.split("\n")
        for i, line in enumerate(lines):
            if marker in line:
                lines[i], count = ATTRIBUTE_PATTERN.subn(replacement, line)
                total += count
        return "\n".join(lines), total

    def _repair_unpaired_quotes(
        self, text: str, config: RepairConfig, result: StepResult
    ) -> str:
        """Escape one stray quote on text-field lines with an odd quote count."""
        marker = field_marker(config.text_field)
        lines = text.split("\n")
        repaired = 0

        for i, line in enumerate(lines):
            state = QuoteState.scan(line)
            if state.balanced:
                continue

            fixed = None
            if marker in line:
                fixed = self.repair_text_line(line, marker, state)
            if fixed is None:
                result.errors.append(
                    self.error(
                        f"Unpaired quotes on line {i + 1}",
                        config,
                        line=i + 1,
                        source=line,
                    )
                )
                continue

            lines[i] = fixed
            repaired += 1
            result.fixes.append(
                self.fix(f"Escaped unpaired quote on line {i + 1}", line=i + 1)
            )

        if repaired:
            config.get_logger(__name__).info(
                "Fixed %d lines with unpaired quotes", repaired
            )
        return "\n".join(lines)

    @staticmethod
    def repair_text_line(
        line: str, marker: str, state: Optional[QuoteState] = None
    ) -> Optional[str]:
        """
        Escape the last stray quote in a text-field line.

        The candidate is the last unescaped quote that lies inside the field
        value and is not the line's final character. Returns None when the
        line already ends in a field terminator or no candidate exists.
        """
        content_end = line.rstrip()
        if marker not in line or content_end.endswith(TERMINATED_ENDINGS):
            return None

        state = state or QuoteState.scan(line)
        marker_end = line.find(marker) + len(marker)
        value_quotes = [pos for pos in state.positions if pos >= marker_end]
        if not value_quotes:
            return None

        last = len(content_end) - 1
        candidates = [pos for pos in value_quotes[1:] if pos != last]
        if not candidates:
            return None

        target = candidates[-1]
        return line[:target] + "\\" + line[target:]
