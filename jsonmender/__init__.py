"""
jsonmender - repairs malformed JSON documents produced by text generators.

Generated JSON exports tend to break in a handful of recurring ways: markdown
fences around the payload, a closing bracket in the middle of the array,
HTML fields split over several lines, unescaped quotes in HTML attributes
and missing commas between records. jsonmender runs a fixed sequence of
repair steps over the document, checks that the result parses, and reports
every fix it applied and every problem it had to leave alone.

Quick Start:
    import jsonmender

    result = jsonmender.repair(text)
    if result.valid:
        data = json.loads(result.text)
    print(result.report().render())

    # Repair a file in place (keeps <path>.backup)
    outcome = jsonmender.repair_file("project-content.json")

    # Repair and parse in one go
    data = jsonmender.loads(text)
"""

from .core.engine import FileRepairOutcome, RepairResult, loads, repair, repair_file
from .preprocessing.pipeline import RepairPipeline
from .recovery import ErrorRecord, FixRecord, RepairLedger, RepairReport
from .security.exceptions import (
    DocumentDecodeError,
    DocumentNotFoundError,
    RepairError,
    SecurityError,
)
from .utils.config import (
    EscapeSettings,
    FieldSettings,
    FilterSettings,
    RepairConfig,
    RepairLimits,
    ReportSettings,
    StepToggles,
)

__version__ = "0.1.0"
__author__ = "jsonmender contributors"

__all__ = [
    # Repair functions
    "repair", "repair_file", "loads",
    # Results and reporting
    "RepairResult", "FileRepairOutcome", "RepairLedger", "RepairReport",
    "FixRecord", "ErrorRecord",
    # Configuration classes
    "RepairConfig", "FieldSettings", "FilterSettings", "EscapeSettings",
    "StepToggles", "ReportSettings", "RepairLimits",
    # Pipeline
    "RepairPipeline",
    # Exception classes
    "RepairError", "SecurityError", "DocumentNotFoundError", "DocumentDecodeError",
]
