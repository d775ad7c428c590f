"""Base-48 digit alphabet and fixed-width radix encoding.

Alphabet: 4-9, consonants B-Z, consonants b-z (no vowels, no 0/1).
Leaving out vowels keeps encoded values from spelling words, leaving out
0/1 avoids confusion with O/I/l. The alphabet is in code point order, so
equal-length strings sort the same way as the numbers they encode.
"""

from __future__ import annotations

import re

ALPHABET = "456789BCDFGHJKLMNPQRSTVWXYZbcdfghjklmnpqrstvwxyz"
RADIX = len(ALPHABET)  # 48
ZERO = ALPHABET[0]

# Reverse lookup: character -> digit value
CHAR_TO_INDEX = {c: i for i, c in enumerate(ALPHABET)}


def encode_digits(value: int, width: int) -> str:
    """Encode a non-negative integer as exactly `width` base-48 digits.

    Most significant digit first, left-padded with the zero symbol.
    Raises ValueError if the value does not fit; callers range-check first.
    """
    if width < 1:
        raise ValueError(f"Width must be positive, got {width}")
    if not 0 <= value < RADIX ** width:
        raise ValueError(
            f"Value must be 0-{RADIX ** width - 1} for width {width}, "
            f"got {value}"
        )
    digits = [ZERO] * width
    remaining = value
    for i in range(width - 1, -1, -1):
        remaining, digit = divmod(remaining, RADIX)
        digits[i] = ALPHABET[digit]
    return "".join(digits)


def decode_digit(char: str) -> int:
    """Digit value 0-47 of a single alphabet symbol.

    Raises ValueError for anything outside the alphabet.
    """
    index = CHAR_TO_INDEX.get(char)
    if index is None:
        raise ValueError(f"Invalid digit: {char!r}")
    return index


def decode_digits(text: str) -> int:
    """Decode a base-48 string, most significant digit first.

    Callers validate the shape with a pattern from as_pattern() first.
    """
    value = 0
    for char in text:
        value = value * RADIX + decode_digit(char)
    return value


def as_pattern(width: int) -> re.Pattern[str]:
    """Compiled pattern matching exactly `width` alphabet symbols."""
    if width == 0:
        return re.compile("^$")
    return re.compile(f"[{ALPHABET}]{{{width}}}")
