"""
Test cases for repair configuration.

Tests focus on ensuring configuration presets and step selection work correctly.
"""

import logging
import unittest

from jsonmender.utils.config import (
    FieldSettings,
    RepairConfig,
    RepairLimits,
    StepToggles,
)


class TestConfigurationPresets(unittest.TestCase):
    """Test configuration presets and their behavior."""

    def test_default_config(self):
        """Test that every step is enabled with the usual field names."""
        config = RepairConfig()

        self.assertEqual(config.id_field, "ID")
        self.assertEqual(config.text_field, "Content")
        self.assertEqual(config.terminator_fields, ("IMG", "ID"))
        self.assertEqual(config.bracket_lookahead, 4)
        self.assertIn("```json", config.junk_lines)
        self.assertIn("don't ask, don't tell", config.known_phrases)
        self.assertFalse(config.scope_attributes_to_text_field)
        self.assertEqual(config.max_listed, 10)
        self.assertEqual(config.snippet_length, 100)
        self.assertTrue(config.is_enabled("normalize_quotes"))

    def test_conservative_vs_default(self):
        """Test that conservative skips the steps that guess at content."""
        conservative = RepairConfig.conservative()
        default = RepairConfig()

        self.assertFalse(conservative.is_enabled("reassemble_multiline_fields"))
        self.assertFalse(conservative.is_enabled("normalize_quotes"))
        self.assertTrue(default.is_enabled("reassemble_multiline_fields"))
        self.assertTrue(default.is_enabled("normalize_quotes"))

        # Both keep the safe line filters
        self.assertTrue(conservative.is_enabled("remove_junk_lines"))
        self.assertTrue(default.is_enabled("remove_junk_lines"))

    def test_from_steps_method(self):
        """Test selective step enabling."""
        config = RepairConfig.from_steps(["remove_junk_lines", "validate_structure"])

        self.assertTrue(config.is_enabled("remove_junk_lines"))
        self.assertTrue(config.is_enabled("validate_structure"))
        self.assertFalse(config.is_enabled("insert_missing_commas"))
        self.assertFalse(config.is_enabled("normalize_quotes"))

    def test_from_steps_rejects_unknown_names(self):
        """Test that misspelled step names are reported."""
        with self.assertRaises(ValueError) as cm:
            RepairConfig.from_steps(["remove_junk_lines", "fix_everything"])
        self.assertIn("fix_everything", str(cm.exception))

    def test_custom_fields(self):
        """Test overriding the field names."""
        config = RepairConfig(fields=FieldSettings(id_field="Key", text_field="Body"))
        self.assertEqual(config.id_field, "Key")
        self.assertEqual(config.text_field, "Body")
        self.assertIsNotNone(config.steps)

    def test_custom_toggles(self):
        """Test passing explicit toggles."""
        config = RepairConfig(steps=StepToggles(insert_missing_commas=False))
        self.assertFalse(config.is_enabled("insert_missing_commas"))
        self.assertTrue(config.is_enabled("remove_stray_brackets"))


class TestRepairLimits(unittest.TestCase):
    """Test limit validation at construction time."""

    def test_positive_limit(self):
        self.assertEqual(RepairLimits(max_input_size=10).max_input_size, 10)

    def test_non_positive_limit(self):
        """Test that zero and negative sizes are rejected."""
        for size in (0, -1):
            with self.subTest(size=size):
                with self.assertRaises(ValueError):
                    RepairLimits(max_input_size=size)


class TestLoggerSelection(unittest.TestCase):
    """Test logger resolution."""

    def test_module_logger_by_default(self):
        config = RepairConfig()
        logger = config.get_logger("jsonmender.x")
        self.assertIs(logger, logging.getLogger("jsonmender.x"))

    def test_custom_logger(self):
        """Test that a configured logger is used for every module."""
        logger = logging.getLogger("custom.repairs")
        config = RepairConfig(logger=logger)
        self.assertIs(config.get_logger("jsonmender.x"), logger)


if __name__ == "__main__":
    unittest.main()
