"""
Fix and error tracking for repair runs.

Each repair step reports what it changed as fix records and what it could not
change safely as error records. The ledger merges those records append-only
in pipeline order.
"""

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Optional

if TYPE_CHECKING:
    from ...preprocessing.base import StepResult


@dataclass(frozen=True)
class FixRecord:
    """A correction applied to the document."""

    description: str
    step: str = ""
    line: Optional[int] = None
    end_line: Optional[int] = None

    def to_dict(self) -> dict[str, Any]:
        return {
            "description": self.description,
            "step": self.step,
            "line": self.line,
            "end_line": self.end_line,
        }

    def __str__(self) -> str:
        return self.description


@dataclass(frozen=True)
class ErrorRecord:
    """A problem detected but left in place."""

    description: str
    step: str = ""
    line: Optional[int] = None
    snippet: str = ""

    def to_dict(self) -> dict[str, Any]:
        return {
            "description": self.description,
            "step": self.step,
            "line": self.line,
            "snippet": self.snippet,
        }

    def __str__(self) -> str:
        if self.snippet:
            return f"{self.description}: {self.snippet}..."
        return self.description


def make_snippet(line: str, length: int) -> str:
    """Truncate a line for inclusion in an error record."""
    return line[:length]


@dataclass
class RepairLedger:
    """Append-only collection of fixes and errors for one run."""

    fixes: list[FixRecord] = field(default_factory=list)
    errors: list[ErrorRecord] = field(default_factory=list)

    @property
    def fix_count(self) -> int:
        return len(self.fixes)

    @property
    def error_count(self) -> int:
        return len(self.errors)

    def add_fix(self, fix: FixRecord) -> None:
        """Add a fix to the collection."""
        self.fixes.append(fix)

    def add_error(self, error: ErrorRecord) -> None:
        """Add an error to the collection."""
        self.errors.append(error)

    def merge(self, result: "StepResult") -> None:
        """Append the records produced by one step."""
        self.fixes.extend(result.fixes)
        self.errors.extend(result.errors)

    def get_summary(self) -> dict[str, Any]:
        """Get a summary of fixes and errors grouped by step."""
        return {
            "total_fixes": self.fix_count,
            "total_errors": self.error_count,
            "fixes_by_step": self._count_by_step(self.fixes),
            "errors_by_step": self._count_by_step(self.errors),
        }

    @staticmethod
    def _count_by_step(records: list[Any]) -> dict[str, int]:
        counts: dict[str, int] = {}
        for record in records:
            counts[record.step] = counts.get(record.step, 0) + 1
        return counts
