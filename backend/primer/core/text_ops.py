"""Text Operations: capitalize and reverse, pure string helpers.

Invariants:
    - Non-str input (None included) raises InvalidArgumentError before any work
    - Empty string in, empty string out
    - Only the first character changes under capitalize()

Design Decisions:
    - reverse_string walks code points, not grapheme clusters: combining marks
      reverse as separate units
"""

from primer.core.errors import InvalidArgumentError


def capitalize(text: str) -> str:
    """Upper-case the first character of text, leaving the rest untouched."""
    if not isinstance(text, str):
        raise InvalidArgumentError(
            "capitalize expects a string", "text", operation="capitalize",
        )
    if text == "":
        return ""
    return text[0].upper() + text[1:]


def reverse_string(text: str) -> str:
    """Return text with its characters in reverse order."""
    if not isinstance(text, str):
        raise InvalidArgumentError(
            "reverse_string expects a string", "text", operation="reverse_string",
        )
    return text[::-1]
