"""
Recovery core module.

This module contains the records and the ledger that repair steps report into.
The report built from them lives in the parent recovery module.
"""

from .tracker import ErrorRecord, FixRecord, RepairLedger

__all__ = ["ErrorRecord", "FixRecord", "RepairLedger"]
