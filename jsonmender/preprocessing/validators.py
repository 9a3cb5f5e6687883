"""
Final structural validation.

This step parses the repaired document and reports the parser's complaint
when it still is not valid JSON. It never modifies the text.
"""

import json

from ..utils.config import RepairConfig
from .base import RepairStepBase, StepResult


class StructuralValidator(RepairStepBase):
    """Checks that the document parses as JSON."""

    name = "validation"
    toggle = "validate_structure"

    def process(self, text: str, config: RepairConfig) -> StepResult:
        result = StepResult(text)
        logger = config.get_logger(__name__)

        try:
            json.loads(text)
        except json.JSONDecodeError as e:
            lines = text.split("\n")
            source = lines[e.lineno - 1] if 0 < e.lineno <= len(lines) else ""
            result.errors.append(
                self.error(
                    f"JSON structure error: {e}", config, line=e.lineno, source=source
                )
            )
            logger.warning("Document is still not valid JSON: %s", e)
        except RecursionError:
            result.errors.append(
                self.error("JSON structure error: nesting too deep to parse", config)
            )
            logger.warning("Document nesting exceeds the parser's recursion limit")
        else:
            logger.info("JSON structure is valid")

        return result
