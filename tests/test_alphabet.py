"""Tests for the base-48 alphabet and fixed-width digit codec.

Test data loaded from: data/fixtures/scenarios/alphabet.json
"""

from __future__ import annotations

import pytest

from conftest import ALPHABET, RADIX, load_scenarios

_data = load_scenarios("alphabet")
ENCODINGS = _data["encodings"]
OVERFLOWS = _data["overflows"]
INVALID_DIGITS = _data["invalid_digits"]


class TestAlphabet:
    """Alphabet constants."""

    def test_matches_reference(self):
        from timehash.alphabet import ALPHABET as alphabet
        from timehash.alphabet import RADIX as radix

        assert alphabet == ALPHABET
        assert radix == RADIX == 48

    def test_symbols_distinct(self):
        from timehash.alphabet import ALPHABET as alphabet

        assert len(set(alphabet)) == len(alphabet)

    def test_sorted_by_code_point(self):
        """Sorted order keeps encoded strings chronologically sortable."""
        from timehash.alphabet import ALPHABET as alphabet

        assert list(alphabet) == sorted(alphabet)

    def test_excludes_ambiguous_and_vowels(self):
        from timehash.alphabet import ALPHABET as alphabet

        for c in "01AEIOUaeiou":
            assert c not in alphabet

    def test_char_to_index_complete(self):
        from timehash.alphabet import ALPHABET as alphabet
        from timehash.alphabet import CHAR_TO_INDEX

        assert len(CHAR_TO_INDEX) == RADIX
        for i, c in enumerate(alphabet):
            assert CHAR_TO_INDEX[c] == i


class TestEncodeDigits:
    """encode_digits: value → fixed-width string."""

    @pytest.mark.parametrize("spec", ENCODINGS, ids=lambda s: s["id"])
    def test_encode(self, spec):
        from timehash.alphabet import encode_digits

        assert encode_digits(spec["value"], spec["width"]) == spec["expected"]

    @pytest.mark.parametrize("spec", OVERFLOWS, ids=lambda s: s["id"])
    def test_overflow_raises(self, spec):
        """Values that do not fit the width are a programmer error."""
        from timehash.alphabet import encode_digits

        with pytest.raises(ValueError, match="Value must be"):
            encode_digits(spec["value"], spec["width"])

    def test_zero_width_rejected(self):
        from timehash.alphabet import encode_digits

        with pytest.raises(ValueError, match="Width must be positive"):
            encode_digits(0, 0)


class TestDecodeDigits:
    """decode_digits / decode_digit: string → value."""

    @pytest.mark.parametrize("spec", ENCODINGS, ids=lambda s: s["id"])
    def test_decode(self, spec):
        from timehash.alphabet import decode_digits

        assert decode_digits(spec["expected"]) == spec["value"]

    def test_decode_digit_positions(self):
        from timehash.alphabet import decode_digit

        assert decode_digit("4") == 0
        assert decode_digit("B") == 6
        assert decode_digit("b") == 27
        assert decode_digit("z") == 47

    @pytest.mark.parametrize("char", INVALID_DIGITS)
    def test_invalid_digit_raises(self, char):
        from timehash.alphabet import decode_digit

        with pytest.raises(ValueError, match="Invalid digit"):
            decode_digit(char)


class TestAsPattern:
    """as_pattern: compiled shape matchers."""

    def test_empty_pattern(self):
        from timehash.alphabet import as_pattern

        pattern = as_pattern(0)
        assert pattern.pattern == "^$"
        assert pattern.fullmatch("")
        assert not pattern.fullmatch("4")

    def test_width_pattern(self):
        from timehash.alphabet import as_pattern

        pattern = as_pattern(3)
        assert pattern.pattern == f"[{ALPHABET}]{{3}}"
        assert pattern.fullmatch("9sQ")
        assert not pattern.fullmatch("9s")
        assert not pattern.fullmatch("9sQ4")
        assert not pattern.fullmatch("9sA")
