"""
Core interfaces for the repair system.

This module defines the contract pipeline steps implement, so steps can be
composed freely and tested on their own.
"""

from typing import TYPE_CHECKING, Any, Protocol

if TYPE_CHECKING:
    from ..preprocessing.base import StepResult


class RepairStep(Protocol):
    """Protocol for steps in the repair pipeline."""

    name: str

    def process(self, text: str, config: Any) -> "StepResult":
        """Transform the text and report fixes and errors."""
        ...

    def should_apply(self, config: Any) -> bool:
        """Determine if this step should be applied given the configuration."""
        ...
