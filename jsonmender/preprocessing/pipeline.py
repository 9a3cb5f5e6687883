"""
Repair pipeline for composable repair steps.

This module implements the pipeline pattern: steps run in a fixed order, each
one receives the text produced by the previous one, and their fix and error
records are merged into a single ledger.
"""

from dataclasses import dataclass
from typing import Optional

from ..core.interfaces import RepairStep
from ..recovery.core.tracker import RepairLedger
from ..security.limits import LimitValidator
from ..utils.config import RepairConfig
from .escapers import ContentEscapeNormalizer, KnownPhraseEscaper
from .filters import LineJunkFilter, StrayBracketFilter
from .normalizers import QuoteNormalizer
from .reassemblers import MultilineFieldReassembler
from .repairers import CommaInserter
from .validators import StructuralValidator


@dataclass
class PipelineRun:
    """Text and records produced by one pass of the pipeline."""

    text: str
    ledger: RepairLedger
    valid: Optional[bool] = None


class RepairPipeline:
    """Manages a sequence of repair steps applied to a document."""

    def __init__(self, steps: Optional[list[RepairStep]] = None):
        self.steps = steps or []

    def add_step(self, step: RepairStep) -> None:
        """Add a repair step to the pipeline."""
        self.steps.append(step)

    @property
    def step_names(self) -> list[str]:
        return [step.name for step in self.steps]

    def process(self, text: str, config: Optional[RepairConfig] = None) -> PipelineRun:
        """Apply all applicable repair steps to the text."""
        if config is None:
            config = RepairConfig()
        assert config.limits is not None
        LimitValidator(config.limits).validate_input_size(text)

        logger = config.get_logger(__name__)
        ledger = RepairLedger()
        valid: Optional[bool] = None
        result = text

        for step in self.steps:
            if not step.should_apply(config):
                logger.debug("Skipping disabled step %s", step.name)
                continue

            outcome = step.process(result, config)
            result = outcome.text
            ledger.merge(outcome)
            logger.debug(
                "Step %s: %d fixes, %d errors",
                step.name,
                len(outcome.fixes),
                len(outcome.errors),
            )
            if isinstance(step, StructuralValidator):
                valid = not outcome.errors

        return PipelineRun(result, ledger, valid)

    @classmethod
    def create_default_pipeline(cls) -> "RepairPipeline":
        """Create the standard repair pipeline."""
        pipeline = cls()

        # Line filters
        pipeline.add_step(LineJunkFilter())
        pipeline.add_step(StrayBracketFilter())

        # Text field repairs
        pipeline.add_step(ContentEscapeNormalizer())
        pipeline.add_step(MultilineFieldReassembler())
        pipeline.add_step(KnownPhraseEscaper())
        pipeline.add_step(QuoteNormalizer())

        # Structure repair, then the final check
        pipeline.add_step(CommaInserter())
        pipeline.add_step(StructuralValidator())

        return pipeline
