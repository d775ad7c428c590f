"""Composite codec: date-time to short string and back.

Layout of an encoded value (6-12 characters, no separators):

    [year - 2014][month][day][second-of-day x3][sub-second x0-6]

The sub-second suffix length identifies the precision that produced it,
so decoding does not need to be told the precision.
"""

from __future__ import annotations

from datetime import datetime

from timehash.alphabet import RADIX, as_pattern, decode_digit, decode_digits, encode_digits
from timehash.log import get_logger
from timehash.precision import MILLIS, NANOS, PRECISIONS, TRIM, Precision, for_length
from timehash.types import HashFormatError, SubSecondFormatError, TimeValue, YearRangeError

logger = get_logger(__name__)

YEAR_EPOCH = 2014
YEAR_MAX = YEAR_EPOCH + RADIX - 1  # 2061, inclusive

CORE_LENGTH = 6
MAX_LENGTH = CORE_LENGTH + len(PRECISIONS) - 1

_CORE_PATTERN = as_pattern(CORE_LENGTH)


def auto_precision(value: TimeValue) -> Precision:
    """Precision hash_time() picks when none is given.

    Whole seconds use TRIM, whole milliseconds use MILLIS and anything
    else uses NANOS. The group tiers are never picked automatically.
    """
    if value.nanosecond == 0:
        return TRIM
    if value.nanosecond % 1_000_000 == 0:
        return MILLIS
    return NANOS


def hash_time(
    value: TimeValue | datetime,
    precision: Precision | None = None,
) -> str:
    """Encode a naive date-time.

    Without a precision, one is derived from the sub-second value
    (see auto_precision).

    Raises TypeError if a timezone-aware datetime is given.
    Raises YearRangeError if the year is outside YEAR_EPOCH..YEAR_MAX.
    """
    if isinstance(value, datetime):
        value = TimeValue.from_datetime(value)
    if precision is None:
        precision = auto_precision(value)

    if value.year < YEAR_EPOCH:
        logger.debug("timehash.year_out_of_range", year=value.year)
        raise YearRangeError(value.year, YEAR_EPOCH, f"Year before {YEAR_EPOCH}")
    if value.year > YEAR_MAX:
        logger.debug("timehash.year_out_of_range", year=value.year)
        raise YearRangeError(value.year, YEAR_MAX, f"Year after {YEAR_MAX}")

    core = "".join(
        encode_digits(v, 1)
        for v in (value.year - YEAR_EPOCH, value.month, value.day)
    ) + encode_digits(value.second_of_day, 3)
    result = core + precision.encode(precision.extract(value))

    logger.debug("timehash.hash", precision=precision.name, length=len(result))
    return result


def unhash_time(text: str | None, precision: Precision | None = None) -> TimeValue:
    """Decode a string produced by hash_time().

    Without a precision, it is inferred from the string length.

    Raises HashFormatError if the string is missing, has an unsupported
    length, or its first six characters are not alphabet symbols.
    Raises SubSecondFormatError if the suffix does not fit the precision
    or decodes to a full second or more.
    """
    if precision is None:
        _validate_core(text, max_length=MAX_LENGTH)
        precision = for_length(len(text) - CORE_LENGTH)
    else:
        _validate_core(text)

    suffix = text[CORE_LENGTH:]
    if not precision.matches(suffix):
        logger.debug("timehash.invalid_suffix", precision=precision.name)
        raise SubSecondFormatError(
            text,
            precision.pattern,
            f"Subsecond does not match pattern: {precision.pattern}",
        )

    try:
        base = TimeValue.of_second_of_day(
            YEAR_EPOCH + decode_digit(text[0]),
            decode_digit(text[1]),
            decode_digit(text[2]),
            decode_digits(text[3:CORE_LENGTH]),
        )
    except ValueError as exc:
        logger.debug("timehash.invalid_date", value=text)
        raise HashFormatError(
            text, _CORE_PATTERN.pattern, f"Not a valid date-time: {text!r}"
        ) from exc

    try:
        result = precision.decode(suffix, base)
    except ValueError as exc:
        # Suffix digits can spell one second or more, e.g. MILLIS "zz"
        logger.debug("timehash.invalid_suffix", precision=precision.name)
        raise SubSecondFormatError(
            text, precision.pattern, f"Subsecond out of range: {suffix!r}"
        ) from exc

    logger.debug("timehash.unhash", precision=precision.name, length=len(text))
    return result


def is_valid(text: str | None) -> bool:
    """True if unhash_time(text) would succeed."""
    try:
        unhash_time(text)
    except HashFormatError:
        return False
    return True


def _validate_core(text: str | None, max_length: int | None = None) -> None:
    """Check presence, length and the six-character core."""
    if (
        text is None
        or len(text) < CORE_LENGTH
        or (max_length is not None and len(text) > max_length)
        or _CORE_PATTERN.fullmatch(text[:CORE_LENGTH]) is None
    ):
        logger.debug("timehash.invalid_core", value=text)
        raise HashFormatError(
            text,
            _CORE_PATTERN.pattern,
            f"Does not match pattern: {_CORE_PATTERN.pattern}",
        )
