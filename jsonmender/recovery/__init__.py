"""
jsonmender fix and error reporting.
"""

from .core import ErrorRecord, FixRecord, RepairLedger
from .report import RepairReport

__all__ = ["ErrorRecord", "FixRecord", "RepairLedger", "RepairReport"]
