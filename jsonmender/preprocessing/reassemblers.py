"""
Reassembly of text fields split across several lines.

The generator sometimes breaks an HTML text field in the middle of its value
and never closes the string. This module rejoins the pieces into a single,
properly terminated line.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional

import regex

from ..core.constants import field_marker
from ..utils.config import RepairConfig
from .base import RepairStepBase, StepResult

TERMINATED_ENDINGS = ('",', '"', '"}', '"},')
STRUCTURE_STARTS = ("{", "}", "[", "]")
CLOSING_STARTS = ("}", "]")


class ReassemblyState(Enum):
    """States of the reassembler."""

    IDLE = "idle"
    BROKEN = "broken"


@dataclass
class PendingField:
    """A text field being collected across lines."""

    first_line: str
    start_index: int
    raw_lines: list[str] = field(default_factory=list)
    fragments: list[str] = field(default_factory=list)

    def add(self, line: str) -> None:
        self.raw_lines.append(line)
        trimmed = line.strip()
        if trimmed:
            self.fragments.append(trimmed)

    @property
    def end_index(self) -> int:
        return self.start_index + len(self.raw_lines)

    def joined(self) -> str:
        return " ".join([self.first_line.rstrip(), *self.fragments])


class MultilineFieldReassembler(RepairStepBase):
    """
    Merges a text field whose value runs over several physical lines.

    A line opens a broken field when it carries the text-field key, does not
    end in a closed string, and contains an HTML tag opener. Following lines
    are collected until one of them closes the string itself, or a sibling
    field key or a structural line appears. In the latter case the value is
    closed and emitted as one line, followed by the line that ended it.
    """

    name = "multiline_fields"
    toggle = "reassemble_multiline_fields"

    def process(self, text: str, config: RepairConfig) -> StepResult:
        marker = field_marker(config.text_field)
        triggers = tuple(field_marker(name) for name in config.terminator_fields)
        prefix_pattern = regex.compile(
            r"^(.*?" + regex.escape(marker) + r'\s*")(.*?)(\s*)$'
        )

        result = StepResult(text)
        output: list[str] = []
        state = ReassemblyState.IDLE
        pending: Optional[PendingField] = None

        for index, line in enumerate(text.split("\n"), 1):
            trimmed = line.strip()

            if state is ReassemblyState.IDLE:
                if self._opens_broken_field(trimmed, marker):
                    pending = PendingField(first_line=line, start_index=index)
                    state = ReassemblyState.BROKEN
                else:
                    output.append(line)
                continue

            assert pending is not None
            if trimmed.startswith(triggers + STRUCTURE_STARTS):
                closing = '"' if trimmed.startswith(CLOSING_STARTS) else '",'
                output.extend(
                    self._close(pending, prefix_pattern, closing, config, result)
                )
                output.append(line)
            elif trimmed.endswith(TERMINATED_ENDINGS):
                pending.add(line)
                output.extend(self._close(pending, prefix_pattern, "", config, result))
            else:
                pending.add(line)
                continue
            pending = None
            state = ReassemblyState.IDLE

        if state is ReassemblyState.BROKEN:
            assert pending is not None
            output.append(pending.first_line)
            output.extend(pending.raw_lines)
            result.errors.append(
                self.error(
                    f"Unterminated {config.text_field} field starting on line "
                    f"{pending.start_index} reaches end of input",
                    config,
                    line=pending.start_index,
                    source=pending.first_line,
                )
            )

        if result.fixes:
            config.get_logger(__name__).info(
                "Reassembled %d multi-line %s fields",
                len(result.fixes),
                config.text_field,
            )
        result.text = "\n".join(output)
        return result

    @staticmethod
    def _opens_broken_field(trimmed: str, marker: str) -> bool:
        return (
            marker in trimmed
            and not trimmed.endswith(TERMINATED_ENDINGS)
            and "<" in trimmed
        )

    def _close(
        self,
        pending: PendingField,
        prefix_pattern: "regex.Pattern[str]",
        closing: str,
        config: RepairConfig,
        result: StepResult,
    ) -> list[str]:
        """Return the lines to emit for a finished pending field."""
        match = prefix_pattern.match(pending.joined())
        if match is None:
            result.errors.append(
                self.error(
                    f"Could not reassemble {config.text_field} field on line "
                    f"{pending.start_index}: value does not open with a quote",
                    config,
                    line=pending.start_index,
                    source=pending.first_line,
                )
            )
            return [pending.first_line, *pending.raw_lines]

        prefix, value, _trailing = match.groups()
        result.fixes.append(
            self.fix(
                f"Reassembled broken {config.text_field} field on lines "
                f"{pending.start_index}-{pending.end_index}",
                line=pending.start_index,
                end_line=pending.end_index,
            )
        )
        return [prefix + value + closing]
