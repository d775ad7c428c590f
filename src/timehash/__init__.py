"""timehash: Short, sortable strings for naive date-times."""

from timehash.alphabet import ALPHABET, RADIX
from timehash.clock import Clock, fixed, hash_millis, hash_now, system_utc, utc_now_millis
from timehash.codec import YEAR_EPOCH, YEAR_MAX, auto_precision, hash_time, is_valid, unhash_time
from timehash.precision import (
    MICROGROUP,
    MILLIGROUP,
    MILLIS,
    NANOGROUP,
    NANOS,
    PRECISIONS,
    QUADNANO,
    TRIM,
    Precision,
)
from timehash.types import HashFormatError, SubSecondFormatError, TimeValue, YearRangeError

__all__ = [
    "ALPHABET",
    "Clock",
    "HashFormatError",
    "MICROGROUP",
    "MILLIGROUP",
    "MILLIS",
    "NANOGROUP",
    "NANOS",
    "PRECISIONS",
    "Precision",
    "QUADNANO",
    "RADIX",
    "SubSecondFormatError",
    "TRIM",
    "TimeValue",
    "YEAR_EPOCH",
    "YEAR_MAX",
    "YearRangeError",
    "auto_precision",
    "fixed",
    "hash_millis",
    "hash_now",
    "hash_time",
    "is_valid",
    "system_utc",
    "unhash_time",
    "utc_now_millis",
]
