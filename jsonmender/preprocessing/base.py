"""
Base classes for repair steps.

Every step is a pure text transform: it takes the document, returns the new
document together with the fixes and errors it recorded, and never touches
shared state.
"""

from dataclasses import dataclass, field
from typing import Optional

from ..recovery.core.tracker import ErrorRecord, FixRecord, make_snippet
from ..utils.config import RepairConfig


@dataclass
class StepResult:
    """Output of one repair step."""

    text: str
    fixes: list[FixRecord] = field(default_factory=list)
    errors: list[ErrorRecord] = field(default_factory=list)


class RepairStepBase:
    """Base class for repair steps with common functionality."""

    name = "step"
    toggle = ""

    def should_apply(self, config: RepairConfig) -> bool:
        """Apply unless the step is switched off in the configuration."""
        return not self.toggle or config.is_enabled(self.toggle)

    def process(self, text: str, config: RepairConfig) -> StepResult:
        """Process the text. Must be implemented by subclasses."""
        raise NotImplementedError("Subclasses must implement process()")

    def fix(
        self,
        description: str,
        line: Optional[int] = None,
        end_line: Optional[int] = None,
    ) -> FixRecord:
        return FixRecord(description, step=self.name, line=line, end_line=end_line)

    def error(
        self,
        description: str,
        config: RepairConfig,
        line: Optional[int] = None,
        source: str = "",
    ) -> ErrorRecord:
        return ErrorRecord(
            description,
            step=self.name,
            line=line,
            snippet=make_snippet(source, config.snippet_length),
        )
