"""
Human-readable and structured summaries of a repair run.
"""

from dataclasses import dataclass
from typing import Any, Optional

from ..core.constants import MAX_LISTED_RECORDS
from .core.tracker import RepairLedger

HINT_MANUAL_ESCAPING = (
    "The main remaining problem is unescaped quotes inside HTML content",
    "Those quotes need a manual edit or a more specific repair rule",
    'Escape quotes inside HTML values: " -> \\"',
)
HINT_PARTIAL_REPAIR = (
    "The file was partially repaired: stray elements were removed or rewritten",
)
HINT_BACKUP = "The original file was kept as {backup}"
HINT_WELL_FORMED = ("The JSON document is already well-formed",)


@dataclass
class RepairReport:
    """Summary of the fixes and errors recorded during one run."""

    ledger: RepairLedger
    valid: Optional[bool] = None
    max_listed: int = MAX_LISTED_RECORDS
    backup_path: Optional[str] = None

    @property
    def fix_count(self) -> int:
        return self.ledger.fix_count

    @property
    def error_count(self) -> int:
        return self.ledger.error_count

    def hints(self) -> list[str]:
        """Select remediation hints for the recorded outcome."""
        if self.error_count:
            return list(HINT_MANUAL_ESCAPING)
        if self.fix_count:
            hints = list(HINT_PARTIAL_REPAIR)
            if self.backup_path:
                hints.append(HINT_BACKUP.format(backup=self.backup_path))
            return hints
        return list(HINT_WELL_FORMED)

    def render(self) -> str:
        """Render the report as plain text."""
        lines = [
            "REPAIR SUMMARY",
            f"Fixes applied: {self.fix_count}",
            f"Errors found: {self.error_count}",
            f"Structure check: {self._structure_status()}",
        ]

        if self.ledger.fixes:
            lines.extend(["", "Fixes:"])
            lines.extend(self._listing(self.ledger.fixes, "fixes"))

        if self.ledger.errors:
            lines.extend(["", f"Errors (first {self.max_listed} shown):"])
            lines.extend(self._listing(self.ledger.errors, "errors"))

        lines.extend(["", "Recommendations:"])
        lines.extend(f"- {hint}" for hint in self.hints())
        return "\n".join(lines)

    def to_dict(self) -> dict[str, Any]:
        """Return the report in machine-readable form."""
        summary = self.ledger.get_summary()
        summary.update(
            {
                "valid": self.valid,
                "backup_path": self.backup_path,
                "fixes": [fix.to_dict() for fix in self.ledger.fixes],
                "errors": [error.to_dict() for error in self.ledger.errors],
                "hints": self.hints(),
            }
        )
        return summary

    def _structure_status(self) -> str:
        if self.valid is None:
            return "skipped"
        return "passed" if self.valid else "failed"

    def _listing(self, records: list[Any], noun: str) -> list[str]:
        shown = records[: self.max_listed]
        lines = [f"  {index}. {record}" for index, record in enumerate(shown, 1)]
        hidden = len(records) - len(shown)
        if hidden > 0:
            lines.append(f"  ... and {hidden} more {noun}")
        return lines

    def __str__(self) -> str:
        return self.render()
