"""ASCII breakdowns for development-time verification.

This module is dev-only and not imported by production code.
"""

from __future__ import annotations

from timehash.alphabet import decode_digit, decode_digits
from timehash.codec import CORE_LENGTH, YEAR_EPOCH, unhash_time
from timehash.precision import PRECISIONS, Precision


def explain(text: str, precision: Precision | None = None) -> list[tuple[str, str, int]]:
    """Split an encoded value into (field, characters, decoded number) rows.

    Validates the whole string first, so a malformed value raises the
    same errors as unhash_time().
    """
    value = unhash_time(text, precision)
    rows = [
        ("year", text[0], YEAR_EPOCH + decode_digit(text[0])),
        ("month", text[1], decode_digit(text[1])),
        ("day", text[2], decode_digit(text[2])),
        ("second_of_day", text[3:CORE_LENGTH], decode_digits(text[3:CORE_LENGTH])),
    ]
    suffix = text[CORE_LENGTH:]
    if suffix:
        rows.append(("nanosecond", suffix, value.nanosecond))
    return rows


def show_hash(text: str, precision: Precision | None = None) -> str:
    """Print a field-by-field table for one encoded value.

    Returns the string and also prints to stdout.
    """
    rows = explain(text, precision)
    value = unhash_time(text, precision)

    lines = [f"{text}  ->  {value.isoformat()}"]
    for name, chars, number in rows:
        lines.append(f"  {name:<14s}{chars:<8s}{number}")

    result = "\n".join(lines)
    print(result)
    return result


def show_precisions() -> str:
    """Print the precision table: name, period, suffix and total length.

    Returns the string and also prints to stdout.
    """
    lines = [f"{'Name':<12s}{'Period (ns)':>12s}{'Suffix':>8s}{'Total':>7s}"]
    for p in PRECISIONS:
        lines.append(
            f"{p.name:<12s}{p.period_nanos:>12d}{p.length:>8d}"
            f"{CORE_LENGTH + p.length:>7d}"
        )

    result = "\n".join(lines)
    print(result)
    return result
