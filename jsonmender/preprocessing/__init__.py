"""
JSON repair steps.

This module provides the repair pipeline and its steps. Each step fixes one
class of corruption produced by an upstream generator and reports what it
did, so steps can be composed into a pipeline or used on their own.
"""

from .base import RepairStepBase, StepResult
from .escapers import ContentEscapeNormalizer, KnownPhraseEscaper
from .filters import LineJunkFilter, StrayBracketFilter
from .normalizers import QuoteNormalizer
from .pipeline import PipelineRun, RepairPipeline
from .reassemblers import MultilineFieldReassembler
from .repairers import CommaInserter
from .validators import StructuralValidator

__all__ = [
    "RepairPipeline",
    "PipelineRun",
    "RepairStepBase",
    "StepResult",
    "LineJunkFilter",
    "StrayBracketFilter",
    "ContentEscapeNormalizer",
    "MultilineFieldReassembler",
    "KnownPhraseEscaper",
    "QuoteNormalizer",
    "CommaInserter",
    "StructuralValidator",
]
