"""
Unit tests for quote normalization.
"""

import unittest

from jsonmender.core.quote_state import count_unescaped_quotes
from jsonmender.preprocessing.normalizers import QuoteNormalizer
from jsonmender.utils.config import EscapeSettings, RepairConfig


class TestAttributeQuoting(unittest.TestCase):
    """Test escaping of name="value" fragments."""

    def setUp(self) -> None:
        self.config = RepairConfig()
        self.step = QuoteNormalizer()

    def test_attributes_escaped(self) -> None:
        """Test that attribute quotes are escaped and counted once."""
        text = '"Content": "<a href="https://x.io" class="btn">Go</a>",'
        expected = '"Content": "<a href=\\"https://x.io\\" class=\\"btn\\">Go</a>",'

        result = self.step.process(text, self.config)

        self.assertEqual(result.text, expected)
        self.assertEqual(len(result.fixes), 1)
        self.assertIn("2 HTML attributes", result.fixes[0].description)
        self.assertEqual(result.errors, [])

    def test_escaped_attributes_untouched(self) -> None:
        """Test that already escaped attributes produce no fix."""
        text = '"Content": "<a href=\\"https://x.io\\">Go</a>",'
        result = self.step.process(text, self.config)
        self.assertEqual(result.text, text)
        self.assertEqual(result.fixes, [])

    def test_attribute_quoting_is_not_field_scoped(self) -> None:
        """Test that attributes outside the text field are rewritten too."""
        text = '"Note": "<i class="y">",'
        result = self.step.process(text, self.config)
        self.assertEqual(result.text, '"Note": "<i class=\\"y\\">",')

    def test_scoped_attribute_quoting(self) -> None:
        """Test limiting attribute quoting to text-field lines."""
        escaping = EscapeSettings(scope_attributes_to_text_field=True)
        config = RepairConfig(escaping=escaping)
        text = '"Note": "<i class="y">",\n"Content": "<b class="x">b</b>",'

        result = self.step.process(text, config)

        self.assertEqual(
            result.text,
            '"Note": "<i class="y">",\n"Content": "<b class=\\"x\\">b</b>",',
        )
        self.assertIn("1 HTML attributes", result.fixes[0].description)

    def test_attribute_never_spans_lines(self) -> None:
        """Test that a value is not matched across a line break."""
        text = '"a": "x=",\n"b": "y"'
        result = self.step.process(text, self.config)
        self.assertEqual(result.text, text)


class TestUnpairedQuoteRepair(unittest.TestCase):
    """Test repair of lines with an odd number of quotes."""

    def setUp(self) -> None:
        self.config = RepairConfig()
        self.step = QuoteNormalizer()

    def test_stray_quote_in_last_field_escaped(self) -> None:
        """Test escaping the quote before the field's closing quote."""
        text = '    "Content": "<p>He said "hi</p>"'
        result = self.step.process(text, self.config)

        self.assertEqual(result.text, '    "Content": "<p>He said \\"hi</p>"')
        self.assertEqual(len(result.fixes), 1)
        self.assertEqual(result.fixes[0].line, 1)
        self.assertEqual(count_unescaped_quotes(result.text) % 2, 0)

    def test_terminated_field_reported(self) -> None:
        """Test that a line ending in a field terminator is left alone."""
        text = '"Content": "<p>He said "hi</p>",'
        result = self.step.process(text, self.config)

        self.assertEqual(result.text, text)
        self.assertEqual(result.fixes, [])
        self.assertEqual(len(result.errors), 1)
        self.assertEqual(result.errors[0].line, 1)
        self.assertEqual(result.errors[0].snippet, text)

    def test_non_field_line_reported(self) -> None:
        """Test that odd lines outside the text field are never repaired."""
        text = '{\n  "Title": "Say "hi",\n}'
        result = self.step.process(text, self.config)

        self.assertEqual(result.text, text)
        self.assertEqual(len(result.errors), 1)
        self.assertEqual(result.errors[0].line, 2)

    def test_no_candidate_reported(self) -> None:
        """Test a line whose only value quote is the opening one."""
        text = '"Content": "<p>abc'
        result = self.step.process(text, self.config)

        self.assertEqual(result.text, text)
        self.assertEqual(len(result.errors), 1)

    def test_snippet_is_truncated(self) -> None:
        """Test that error snippets respect the configured length."""
        text = '"Title": "' + "x" * 300
        result = self.step.process(text, self.config)
        self.assertEqual(len(result.errors[0].snippet), 100)

    def test_balanced_lines_untouched(self) -> None:
        """Test that even lines pass through."""
        text = '[\n  {"ID": 1, "Content": "<p>\\"ok\\"</p>"}\n]'
        result = self.step.process(text, self.config)
        self.assertEqual(result.text, text)
        self.assertEqual(result.fixes, [])
        self.assertEqual(result.errors, [])


class TestRepairTextLine(unittest.TestCase):
    """Test the single-line quote repair."""

    marker = '"Content":'

    def _repair(self, line):
        return QuoteNormalizer.repair_text_line(line, self.marker)

    def test_trailing_whitespace_ignored(self) -> None:
        """Test that the closing quote is found before trailing spaces."""
        self.assertEqual(self._repair('"Content": "a "b"   '), '"Content": "a \\"b"   ')

    def test_unterminated_value(self) -> None:
        """Test a value that has no closing quote at all."""
        self.assertEqual(self._repair('"Content": "a "b c'), '"Content": "a \\"b c')

    def test_key_quotes_never_escaped(self) -> None:
        """Test that the key and the opening quote are not candidates."""
        self.assertIsNone(self._repair('"Content": "'))

    def test_terminator_endings(self) -> None:
        """Test each terminator ending."""
        for ending in ('",', '"}', '"},'):
            with self.subTest(ending=ending):
                self.assertIsNone(self._repair('"Content": "a "b' + ending))

    def test_line_without_marker(self) -> None:
        """Test that other lines are not repaired."""
        self.assertIsNone(self._repair('"Title": "a "b"'))


if __name__ == "__main__":
    unittest.main()
