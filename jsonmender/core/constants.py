"""
Common constants used across the jsonmender pipeline.
"""

# Lines that upstream generators wrap around the JSON payload
JUNK_LINES = ("```json", "```", "json", "Generated json")

# Content records carry an identifier, an image and an HTML body
DEFAULT_ID_FIELD = "ID"
DEFAULT_TEXT_FIELD = "Content"
DEFAULT_TERMINATOR_FIELDS = ("IMG", "ID")

# Phrases observed unescaped inside text fields
KNOWN_PHRASES = ("don't ask, don't tell",)

BRACKET_LOOKAHEAD = 4

MAX_LISTED_RECORDS = 10
SNIPPET_LENGTH = 100

MAX_INPUT_SIZE = 64 * 1024 * 1024

BACKUP_SUFFIX = ".backup"


def field_marker(name: str) -> str:
    """Return the quoted key marker for a field, e.g. ``"Content":``."""
    return f'"{name}":'
