#!/usr/bin/env python
"""Visual verification report for timehash.

Run:  uv run python scripts/verify.py [-v]

Produces a formatted report showing:
  1. Reference data (alphabet, year window, precision table)
  2. Encoding vectors  -- input/output tables with OK/FAIL per row
  3. Decoding vectors  -- explicit and inferred precision
  4. Rejections        -- year range and string shape errors
  5. Field breakdown of the worked examples

Pass -v to also print the codec's debug log events.
"""

from __future__ import annotations

import json
import sys
from datetime import datetime
from pathlib import Path

# ---------------------------------------------------------------------------
# Paths and data loading
# ---------------------------------------------------------------------------
ROOT = Path(__file__).resolve().parent.parent
FIXTURES = ROOT / "data" / "fixtures"
SCENARIOS = FIXTURES / "scenarios"

sys.path.insert(0, str(ROOT / "src"))

from timehash.codec import YEAR_EPOCH, YEAR_MAX, hash_time, unhash_time
from timehash.debug import show_hash, show_precisions
from timehash.log import configure_logging
from timehash.precision import by_name
from timehash.types import HashFormatError, TimeValue, YearRangeError


def _load(path: Path):
    with open(path) as f:
        return json.load(f)


_ref = _load(FIXTURES / "reference.json")
_codec = _load(SCENARIOS / "codec.json")

# ---------------------------------------------------------------------------
# Formatting helpers
# ---------------------------------------------------------------------------
WIDTH = 90


def banner(title: str):
    print()
    print("=" * WIDTH)
    print(f"  {title}")
    print("=" * WIDTH)


def heading(title: str):
    print()
    print(f"  {title}")
    print(f"  {'-' * (len(title) + 2)}")


def table(headers: list[str], rows: list[list[str]], indent: int = 4):
    """Print a formatted table with auto-sized columns."""
    col_widths = [len(h) for h in headers]
    for row in rows:
        for i, cell in enumerate(row):
            col_widths[i] = max(col_widths[i], len(cell))

    pad = " " * indent
    fmt = pad + "  ".join(f"{{:<{w}}}" for w in col_widths)
    sep = pad + "  ".join("-" * w for w in col_widths)

    print(fmt.format(*headers))
    print(sep)
    for row in rows:
        padded = row + [""] * (len(headers) - len(row))
        print(fmt.format(*padded))


def _precision(name: str | None):
    return by_name(name) if name else None


# ---------------------------------------------------------------------------
# Section 1: Reference Data
# ---------------------------------------------------------------------------
def section_reference():
    banner("REFERENCE DATA")
    print(f"\n    Alphabet:       {_ref['alphabet']}")
    print(f"    Radix:          {_ref['radix']}")
    print(f"    Year window:    {YEAR_EPOCH}..{YEAR_MAX} (inclusive)")
    print(f"    Lengths:        {_ref['core_length']}..{_ref['max_length']} characters")

    heading("Precision Table")
    print()
    show_precisions()


# ---------------------------------------------------------------------------
# Section 2: Encoding
# ---------------------------------------------------------------------------
def section_encoding():
    banner("ENCODING  hash_time(value, precision)")

    heading("Explicit precision")
    rows = []
    for s in _codec["explicit"]:
        result = hash_time(TimeValue.fromisoformat(s["datetime"]),
                           _precision(s["precision"]))
        match = "OK" if result == s["expected"] else "FAIL"
        rows.append([s["datetime"], s["precision"], s["expected"], result, match])
    table(["Input", "Precision", "Expected", "Actual", "Match"], rows)

    heading("Auto precision")
    rows = []
    for s in _codec["auto"]:
        result = hash_time(TimeValue.fromisoformat(s["datetime"]))
        match = "OK" if result == s["expected"] else "FAIL"
        rows.append([s["datetime"], s["precision"], s["expected"], result, match])
    table(["Input", "Picks", "Expected", "Actual", "Match"], rows)


# ---------------------------------------------------------------------------
# Section 3: Decoding
# ---------------------------------------------------------------------------
def section_decoding():
    banner("DECODING  unhash_time(text, precision)")

    rows = []
    for s in _codec["explicit"]:
        expected = TimeValue.fromisoformat(s["decoded"])
        explicit = unhash_time(s["expected"], _precision(s["precision"]))
        inferred = unhash_time(s["expected"])
        match = "OK" if explicit == inferred == expected else "FAIL"
        rows.append([s["expected"], s["precision"], explicit.isoformat(), match])
    table(["Input", "Precision", "Decoded", "Match"], rows)


# ---------------------------------------------------------------------------
# Section 4: Rejections
# ---------------------------------------------------------------------------
def section_rejections():
    banner("REJECTIONS")

    heading("Year range")
    rows = []
    for s in _codec["year_errors"]:
        try:
            hash_time(TimeValue.fromisoformat(s["datetime"]))
            rows.append([s["datetime"], "(no error)", "FAIL"])
        except YearRangeError as e:
            rows.append([s["datetime"], str(e), "OK"])
    table(["Input", "Error", "Match"], rows)

    heading("String shape")
    rows = []
    for group in ("core_errors", "suffix_errors", "suffix_overflow", "date_errors"):
        for s in _codec[group]:
            name = s.get("precision")
            try:
                unhash_time(s["value"], _precision(name))
                rows.append([repr(s["value"]), name or "-", "(no error)", "FAIL"])
            except HashFormatError as e:
                message = str(e)
                if len(message) > 50:
                    message = message[:47] + "..."
                rows.append([repr(s["value"]), name or "-", message, "OK"])
    table(["Input", "Precision", "Error", "Match"], rows)


# ---------------------------------------------------------------------------
# Section 5: Field breakdown
# ---------------------------------------------------------------------------
def section_breakdown():
    banner("FIELD BREAKDOWN")
    for text in ("455444", "7569sQNT", "7569sQ78fTKF", "zJgnWz7wQHnM"):
        print()
        show_hash(text)


# ---------------------------------------------------------------------------
# Main
# ---------------------------------------------------------------------------
def main():
    if "-v" in sys.argv[1:]:
        configure_logging(level="DEBUG")

    banner("TIMEHASH   --  VISUAL VERIFICATION REPORT")
    print(f"    Generated: {datetime.now().strftime('%Y-%m-%d %H:%M')}")
    print(f"    Fixture data: {FIXTURES.relative_to(ROOT)}/")

    section_reference()
    section_encoding()
    section_decoding()
    section_rejections()
    section_breakdown()

    banner("END OF REPORT")
    print()


if __name__ == "__main__":
    main()
