"""
Exception hierarchy for jsonmender.

Content problems found while repairing a document are never raised; they are
collected as error records. The exceptions here cover the conditions that stop
a run before any step executes.
"""

from typing import Optional


class RepairError(Exception):
    """Base class for all jsonmender exceptions."""


class SecurityError(RepairError):
    """Raised when a document violates a configured resource limit."""


class DocumentNotFoundError(RepairError, FileNotFoundError):
    """Raised when the document to repair does not exist."""

    def __init__(self, path: str, message: Optional[str] = None):
        self.path = path
        super().__init__(message or f"File not found: {path}")


class DocumentDecodeError(RepairError, ValueError):
    """Raised when the document cannot be decoded with the requested encoding."""

    def __init__(self, path: str, encoding: str, reason: str):
        self.path = path
        self.encoding = encoding
        super().__init__(f"Cannot decode {path} as {encoding}: {reason}")
