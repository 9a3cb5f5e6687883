"""
Repair orchestration for jsonmender.

This module runs the repair pipeline over a document held in memory or on
disk and packages the outcome as structured results.
"""

import json
import logging
from dataclasses import dataclass, field
from typing import Any, Optional, Union

from ..preprocessing.pipeline import RepairPipeline
from ..recovery.core.tracker import RepairLedger
from ..recovery.report import RepairReport
from ..utils.config import RepairConfig
from ..utils.files import PathLike, read_document, write_with_backup
from .constants import MAX_LISTED_RECORDS

logger = logging.getLogger(__name__)


@dataclass
class RepairResult:
    """Outcome of repairing one document."""

    original: str
    text: str
    ledger: RepairLedger = field(default_factory=RepairLedger)
    valid: Optional[bool] = None
    max_listed: int = MAX_LISTED_RECORDS

    @property
    def changed(self) -> bool:
        """Whether the repaired text differs from the original."""
        return self.text != self.original

    @property
    def fixes(self) -> list[Any]:
        return self.ledger.fixes

    @property
    def errors(self) -> list[Any]:
        return self.ledger.errors

    def report(self, backup_path: Optional[str] = None) -> RepairReport:
        """Build the report for this result."""
        return RepairReport(
            ledger=self.ledger,
            valid=self.valid,
            max_listed=self.max_listed,
            backup_path=backup_path,
        )


@dataclass
class FileRepairOutcome:
    """Outcome of repairing a document in place."""

    path: str
    result: RepairResult
    backup_path: Optional[str] = None

    @property
    def written(self) -> bool:
        return self.backup_path is not None

    def report(self) -> RepairReport:
        return self.result.report(self.backup_path)


def repair(
    text: str,
    *,
    config: Optional[RepairConfig] = None,
    pipeline: Optional[RepairPipeline] = None,
) -> RepairResult:
    """
    Repair a malformed JSON document.

    Args:
        text: Document text
        config: RepairConfig object for advanced control
        pipeline: Custom pipeline (default: the standard repair pipeline)

    Returns:
        RepairResult with the repaired text and every fix and error recorded

    Raises:
        TypeError: If text is not a string
        SecurityError: If the document exceeds the configured size limit
    """
    if not isinstance(text, str):
        raise TypeError(f"the document must be str, not {type(text).__name__}")

    config = config or RepairConfig()
    pipeline = pipeline or RepairPipeline.create_default_pipeline()

    run = pipeline.process(text, config)
    return RepairResult(
        original=text,
        text=run.text,
        ledger=run.ledger,
        valid=run.valid,
        max_listed=config.max_listed,
    )


def repair_file(
    path: PathLike,
    *,
    config: Optional[RepairConfig] = None,
    pipeline: Optional[RepairPipeline] = None,
    dry_run: bool = False,
    encoding: str = "utf-8",
) -> FileRepairOutcome:
    """
    Repair a document on disk.

    When the repaired text differs from the original, the original is saved
    as ``<path>.backup`` and the document is overwritten, even if errors
    remain. Nothing is written when the text is unchanged or dry_run is set.

    Raises:
        DocumentNotFoundError: If path does not exist
        DocumentDecodeError: If the document is not valid in the given encoding
        SecurityError: If the document exceeds the configured size limit
    """
    original = read_document(path, encoding=encoding)
    logger.info("Analyzing file: %s", path)

    result = repair(original, config=config, pipeline=pipeline)
    outcome = FileRepairOutcome(path=str(path), result=result)

    if not result.changed:
        if result.errors:
            logger.warning("No automatic fix applies to %s", path)
        else:
            logger.info("File is already correct: %s", path)
    elif dry_run:
        logger.info(
            "Dry run: %d fixes not written to %s", result.ledger.fix_count, path
        )
    else:
        outcome.backup_path = write_with_backup(path, original, result.text, encoding)

    return outcome


def loads(
    s: Union[str, bytes, bytearray],
    *,
    config: Optional[RepairConfig] = None,
    **kw: Any,
) -> Any:
    """
    Repair a document and deserialize it (counterpart of json.loads).

    Keyword arguments other than config are passed to json.loads.

    Raises:
        json.JSONDecodeError: If the repaired text still is not valid JSON
        SecurityError: If the document exceeds the configured size limit
    """
    if isinstance(s, (bytes, bytearray)):
        s = s.decode("utf-8")
    result = repair(s, config=config)
    return json.loads(result.text, **kw)
