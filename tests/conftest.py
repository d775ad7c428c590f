"""Shared test fixtures and data loading for timehash.

All test data lives in data/fixtures/ as JSON files.  This module loads
that data and exposes helper functions + pytest fixtures for the tests.

Reference values: alphabet, radix, year window and the precision table.
Scenario vectors: data/fixtures/scenarios/{alphabet,codec}.json.
"""

from __future__ import annotations

import json
from pathlib import Path

import pytest

# ---------------------------------------------------------------------------
# Paths
# ---------------------------------------------------------------------------
FIXTURES_DIR = Path(__file__).resolve().parent.parent / "data" / "fixtures"
SCENARIOS_DIR = FIXTURES_DIR / "scenarios"


# ---------------------------------------------------------------------------
# Data loaders
# ---------------------------------------------------------------------------
def _load_json(path: Path):
    with open(path) as f:
        return json.load(f)


_reference = _load_json(FIXTURES_DIR / "reference.json")


# ---------------------------------------------------------------------------
# Reference constants derived from reference.json
# ---------------------------------------------------------------------------
ALPHABET = _reference["alphabet"]
RADIX = _reference["radix"]
YEAR_EPOCH = _reference["year_epoch"]
YEAR_MAX = _reference["year_max"]
CORE_LENGTH = _reference["core_length"]
MAX_LENGTH = _reference["max_length"]

# Precision lookup:  PRECISION_SPECS["MILLIS"] → {"length": 2, ...}
PRECISION_SPECS: dict[str, dict] = {p["name"]: p for p in _reference["precisions"]}


# ---------------------------------------------------------------------------
# Convenience helpers (importable by test modules)
# ---------------------------------------------------------------------------
def tv(iso: str):
    """TimeValue from an ISO string with up to 9 fraction digits.

    >>> tv("2017-01-02T03:45:06.789")
    TimeValue(year=2017, month=1, day=2, hour=3, minute=45, second=6, nanosecond=789000000)
    """
    from timehash.types import TimeValue

    return TimeValue.fromisoformat(iso)


def precision(name: str | None):
    """Predefined Precision by name; None passes through (auto/inferred)."""
    if name is None:
        return None
    from timehash.precision import by_name

    return by_name(name)


# ---------------------------------------------------------------------------
# Scenario loader
# ---------------------------------------------------------------------------
def load_scenarios(name: str):
    """Load a scenario file from data/fixtures/scenarios/{name}.json."""
    return _load_json(SCENARIOS_DIR / f"{name}.json")


# ---------------------------------------------------------------------------
# pytest fixtures
# ---------------------------------------------------------------------------
@pytest.fixture
def epoch_start():
    """First encodable instant: 2014-01-01T00:00:00."""
    return tv(f"{YEAR_EPOCH}-01-01T00:00:00")


@pytest.fixture
def last_instant():
    """Last encodable instant at nanosecond precision."""
    return tv(f"{YEAR_MAX}-12-31T23:59:59.999999999")


@pytest.fixture
def sample_value():
    """Mid-window value with every sub-second digit populated."""
    return tv("2017-01-02T03:45:06.789012345")
