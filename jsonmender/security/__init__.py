"""
jsonmender limits and exceptions.
"""

from .exceptions import (
    DocumentDecodeError,
    DocumentNotFoundError,
    RepairError,
    SecurityError,
)
from .limits import LimitValidator

__all__ = [
    "RepairError",
    "SecurityError",
    "DocumentNotFoundError",
    "DocumentDecodeError",
    "LimitValidator",
]
