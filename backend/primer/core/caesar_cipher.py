"""Caesar Cipher: shift ASCII letters by a signed offset, wrapping per case.

Invariants:
    - Only A-Z and a-z move; digits, punctuation, whitespace and non-ASCII pass through
    - Shift factor normalized into [0, ALPHABET_SIZE) with true modulo (-3 -> 23)
    - caesar_cipher(caesar_cipher(s, k), -k) == s for every str s and integer k
    - ALPHABET_SIZE (26) is the single source of truth for the modulus

Design Decisions:
    - Integral floats (3.0) accepted as integers, matching an integer test on a number
    - Python % on a positive modulus is already a true modulo; no helper needed
"""

import math

from primer.core.errors import InvalidArgumentError


ALPHABET_SIZE: int = 26
_UPPER_BASE = ord("A")
_LOWER_BASE = ord("a")


def normalize_shift(shift_factor: int | float) -> int:
    """Validate the shift factor and fold it into [0, ALPHABET_SIZE)."""
    if isinstance(shift_factor, bool) or not isinstance(shift_factor, (int, float)):
        raise InvalidArgumentError(
            "caesar_cipher expects an integer shift factor",
            "shift_factor", operation="caesar_cipher",
        )
    if isinstance(shift_factor, float):
        if not math.isfinite(shift_factor) or not shift_factor.is_integer():
            raise InvalidArgumentError(
                "caesar_cipher expects an integer shift factor",
                "shift_factor", operation="caesar_cipher",
            )
        shift_factor = int(shift_factor)
    return shift_factor % ALPHABET_SIZE


def _shift_character(char: str, shift: int) -> str:
    if "A" <= char <= "Z":
        return chr((ord(char) - _UPPER_BASE + shift) % ALPHABET_SIZE + _UPPER_BASE)
    if "a" <= char <= "z":
        return chr((ord(char) - _LOWER_BASE + shift) % ALPHABET_SIZE + _LOWER_BASE)
    return char


def caesar_cipher(text: str, shift_factor: int) -> str:
    """Encrypt text by shifting each letter shift_factor places forward."""
    if not isinstance(text, str):
        raise InvalidArgumentError(
            "caesar_cipher expects a string to encrypt",
            "text", operation="caesar_cipher",
        )
    shift = normalize_shift(shift_factor)
    if shift == 0:
        return text
    return "".join(_shift_character(c, shift) for c in text)
