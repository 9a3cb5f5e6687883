"""
Resource limits for jsonmender.
This module guards the pipeline against documents too large to hold in memory.
"""

from ..utils.config import RepairLimits
from .exceptions import SecurityError


class LimitValidator:
    """Validates documents against configured limits before repair."""

    def __init__(self, limits: RepairLimits):
        self.limits = limits

    def validate_input_size(self, text: str) -> None:
        """Validate that input text size is within limits."""
        if len(text) > self.limits.max_input_size:
            raise SecurityError(
                f"Input size {len(text)} exceeds limit {self.limits.max_input_size}"
            )
