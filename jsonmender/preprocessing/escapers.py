"""
Literal escaping repairs.

This module contains repair steps that rewrite fixed, known-bad fragments:
an escaped opening quote right after the text-field key, and phrases that
the generator is known to emit with bare quotes.
"""

import regex

from ..utils.config import RepairConfig
from .base import RepairStepBase, StepResult


class ContentEscapeNormalizer(RepairStepBase):
    """
    Unescapes the opening quote of the text field.

    ``"Content": \\"<h1>`` becomes ``"Content": "<h1>``.
    """

    name = "content_escaping"
    toggle = "normalize_content_escaping"

    def process(self, text: str, config: RepairConfig) -> StepResult:
        field_name = config.text_field
        pattern = regex.compile(r'"' + regex.escape(field_name) + r'":\s*\\"')
        replacement = f'"{field_name}": "'

        fixed, count = pattern.subn(lambda _match: replacement, text)
        result = StepResult(fixed)
        if count:
            result.fixes.append(
                self.fix(
                    f"Fixed escaped opening quote in {count} {field_name} fields"
                )
            )
            config.get_logger(__name__).info(
                "Unescaped %d %s field openings", count, field_name
            )
        return result


class KnownPhraseEscaper(RepairStepBase):
    """
    Escapes an allow-list of quoted phrases.

    Only exact phrases from the configuration are touched; a new problematic
    phrase means a new configuration entry.
    """

    name = "known_phrases"
    toggle = "escape_known_phrases"

    def process(self, text: str, config: RepairConfig) -> StepResult:
        result = StepResult(text)
        logger = config.get_logger(__name__)

        for phrase in config.known_phrases:
            pattern = regex.compile(r'(?<!\\)"' + regex.escape(phrase) + r'"')
            escaped = '\\"' + phrase + '\\"'
            result.text, count = pattern.subn(
                lambda _match, value=escaped: value, result.text
            )
            if count:
                result.fixes.append(
                    self.fix(f'Escaped quoted phrase "{phrase}": {count} occurrences')
                )
                logger.debug("Escaped %d occurrences of %r", count, phrase)

        return result
