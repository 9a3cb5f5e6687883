"""
Configuration and limits for jsonmender repairs.

This module defines the field markers, step toggles and limits that drive
the repair pipeline.
"""

import logging
from dataclasses import dataclass, field
from dataclasses import fields as dataclass_fields
from typing import Iterable, Optional

from ..core.constants import (
    BRACKET_LOOKAHEAD,
    DEFAULT_ID_FIELD,
    DEFAULT_TERMINATOR_FIELDS,
    DEFAULT_TEXT_FIELD,
    JUNK_LINES,
    KNOWN_PHRASES,
    MAX_INPUT_SIZE,
    MAX_LISTED_RECORDS,
    SNIPPET_LENGTH,
)


@dataclass
class RepairLimits:
    """Resource limits applied before the pipeline runs."""

    max_input_size: int = MAX_INPUT_SIZE

    def __post_init__(self) -> None:
        if self.max_input_size <= 0:
            raise ValueError("max_input_size must be positive")


@dataclass
class FieldSettings:
    """Names of the record fields the heuristics key on."""

    id_field: str = DEFAULT_ID_FIELD
    text_field: str = DEFAULT_TEXT_FIELD
    terminator_fields: tuple[str, ...] = DEFAULT_TERMINATOR_FIELDS


@dataclass
class FilterSettings:
    """Settings for the line filters."""

    junk_lines: tuple[str, ...] = JUNK_LINES
    bracket_lookahead: int = BRACKET_LOOKAHEAD


@dataclass
class EscapeSettings:
    """Settings for quote escaping."""

    known_phrases: tuple[str, ...] = KNOWN_PHRASES
    scope_attributes_to_text_field: bool = False


@dataclass
class StepToggles:
    """Enable or disable individual pipeline steps."""

    remove_junk_lines: bool = True
    remove_stray_brackets: bool = True
    normalize_content_escaping: bool = True
    reassemble_multiline_fields: bool = True
    escape_known_phrases: bool = True
    normalize_quotes: bool = True
    insert_missing_commas: bool = True
    validate_structure: bool = True


@dataclass
class ReportSettings:
    """Settings for the repair report."""

    max_listed: int = MAX_LISTED_RECORDS
    snippet_length: int = SNIPPET_LENGTH


@dataclass
class RepairConfig:
    """Granular control over the repair pipeline."""

    fields: Optional[FieldSettings] = None
    filters: Optional[FilterSettings] = None
    escaping: Optional[EscapeSettings] = None
    steps: Optional[StepToggles] = None
    report: Optional[ReportSettings] = None
    limits: Optional[RepairLimits] = None
    logger: Optional[logging.Logger] = field(default=None, repr=False)

    def __post_init__(self) -> None:
        if self.fields is None:
            self.fields = FieldSettings()
        if self.filters is None:
            self.filters = FilterSettings()
        if self.escaping is None:
            self.escaping = EscapeSettings()
        if self.steps is None:
            self.steps = StepToggles()
        if self.report is None:
            self.report = ReportSettings()
        if self.limits is None:
            self.limits = RepairLimits()

    @property
    def id_field(self) -> str:
        """Key of the record identifier field."""
        assert self.fields is not None
        return self.fields.id_field

    @property
    def text_field(self) -> str:
        """Key of the HTML text field the quote heuristics target."""
        assert self.fields is not None
        return self.fields.text_field

    @property
    def terminator_fields(self) -> tuple[str, ...]:
        """Sibling keys that end a broken multi-line text field."""
        assert self.fields is not None
        return self.fields.terminator_fields

    @property
    def junk_lines(self) -> tuple[str, ...]:
        """Exact trimmed lines removed as noise."""
        assert self.filters is not None
        return self.filters.junk_lines

    @property
    def bracket_lookahead(self) -> int:
        """Number of lines inspected after a lone closing bracket."""
        assert self.filters is not None
        return self.filters.bracket_lookahead

    @property
    def known_phrases(self) -> tuple[str, ...]:
        """Quoted phrases escaped verbatim."""
        assert self.escaping is not None
        return self.escaping.known_phrases

    @property
    def scope_attributes_to_text_field(self) -> bool:
        """Whether attribute quoting only touches text-field lines."""
        assert self.escaping is not None
        return self.escaping.scope_attributes_to_text_field

    @property
    def max_listed(self) -> int:
        """Number of fixes and errors listed in the text report."""
        assert self.report is not None
        return self.report.max_listed

    @property
    def snippet_length(self) -> int:
        """Maximum length of line snippets carried by error records."""
        assert self.report is not None
        return self.report.snippet_length

    def is_enabled(self, step_name: str) -> bool:
        """Return whether the named step is switched on."""
        assert self.steps is not None
        return bool(getattr(self.steps, step_name))

    def get_logger(self, name: str) -> logging.Logger:
        """Return the configured logger or the named module logger."""
        return self.logger or logging.getLogger(name)

    @classmethod
    def conservative(cls) -> "RepairConfig":
        """Create a configuration without the steps that guess at content."""
        return cls(
            steps=StepToggles(
                reassemble_multiline_fields=False,
                normalize_quotes=False,
            )
        )

    @classmethod
    def from_steps(cls, enabled_steps: Iterable[str]) -> "RepairConfig":
        """Create configuration from a set of enabled step names."""
        known = {f.name for f in dataclass_fields(StepToggles)}
        enabled = set(enabled_steps)
        unknown = enabled - known
        if unknown:
            raise ValueError(f"Unknown pipeline steps: {', '.join(sorted(unknown))}")

        toggles = StepToggles(**{name: name in enabled for name in known})
        return cls(steps=toggles)
