"""Boundary: Precision tiers for sub-second handling.

Seven predefined tiers, from whole seconds (TRIM) to nanoseconds (NANOS):

    Name        Period   Suffix chars   Total chars
    TRIM        1 s      0              6
    MILLIGROUP  25 ms    1              7
    MILLIS      1 ms     2              8
    MICROGROUP  10 us    3              9
    NANOGROUP   200 ns   4              10
    QUADNANO    4 ns     5              11
    NANOS       1 ns     6              12
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field

from timehash.alphabet import as_pattern, decode_digits, encode_digits
from timehash.types import TimeValue

# Nanoseconds per unit of each sub-second source field
_FIELD_NANOS = {
    "millisecond": 1_000_000,
    "microsecond": 1_000,
    "nanosecond": 1,
}


@dataclass(frozen=True)
class Precision:
    """How one tier extracts, encodes and restores sub-seconds. Immutable.

    The sub-second source field is read from the value, divided by the
    multiplier and encoded as `length` digits. Decoding reverses this,
    so anything finer than one tier period is dropped.
    """

    name: str
    length: int
    source: str | None = None
    multiplier: int = 1
    _pattern: re.Pattern[str] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        if self.source is not None and self.source not in _FIELD_NANOS:
            raise ValueError(f"Unknown sub-second field: {self.source!r}")
        object.__setattr__(self, "_pattern", as_pattern(self.length))

    @property
    def pattern(self) -> str:
        """Shape the suffix must have, for error messages."""
        return self._pattern.pattern

    @property
    def period_nanos(self) -> int:
        """Smallest representable step, in nanoseconds."""
        if self.source is None:
            return 1_000_000_000
        return _FIELD_NANOS[self.source] * self.multiplier

    def extract(self, value: TimeValue) -> int:
        """Sub-second source field of the value (0 for TRIM)."""
        if self.source is None:
            return 0
        return getattr(value, self.source)

    def encode(self, sub_second: int) -> str:
        """Encode an extracted sub-second value as the suffix."""
        if self.length == 0:
            return ""
        return encode_digits(sub_second // self.multiplier, self.length)

    def decode(self, suffix: str, base: TimeValue) -> TimeValue:
        """Apply a validated suffix to `base`, replacing its sub-seconds."""
        if self.source is None:
            return base
        sub_second = decode_digits(suffix) * self.multiplier
        return base.with_nanosecond(sub_second * _FIELD_NANOS[self.source])

    def matches(self, suffix: str) -> bool:
        """True if the suffix has exactly this tier's length and alphabet."""
        return self._pattern.fullmatch(suffix) is not None

    def truncate(self, value: TimeValue) -> TimeValue:
        """Quantize the value down to this tier's period."""
        nanos = value.nanosecond - value.nanosecond % self.period_nanos
        return value.with_nanosecond(nanos)

    def __str__(self) -> str:
        return self.name


TRIM = Precision("TRIM", 0)
MILLIGROUP = Precision("MILLIGROUP", 1, "millisecond", 25)
MILLIS = Precision("MILLIS", 2, "millisecond")
MICROGROUP = Precision("MICROGROUP", 3, "microsecond", 10)
NANOGROUP = Precision("NANOGROUP", 4, "nanosecond", 200)
QUADNANO = Precision("QUADNANO", 5, "nanosecond", 4)
NANOS = Precision("NANOS", 6, "nanosecond")

# Index == suffix length
PRECISIONS = (TRIM, MILLIGROUP, MILLIS, MICROGROUP, NANOGROUP, QUADNANO, NANOS)


def for_length(suffix_length: int) -> Precision:
    """Tier that produces a suffix of the given length."""
    if not 0 <= suffix_length < len(PRECISIONS):
        raise ValueError(
            f"Suffix length must be 0-{len(PRECISIONS) - 1}, "
            f"got {suffix_length}"
        )
    return PRECISIONS[suffix_length]


def by_name(name: str) -> Precision:
    """Tier by case-insensitive name, e.g. 'millis'."""
    for precision in PRECISIONS:
        if precision.name == name.upper():
            return precision
    names = ", ".join(p.name for p in PRECISIONS)
    raise ValueError(f"Unknown precision {name!r}, expected one of: {names}")
