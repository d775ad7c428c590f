"""Shared types: TimeValue and the codec's validation errors."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timedelta

NANOS_PER_SECOND = 1_000_000_000
SECONDS_PER_DAY = 86_400

_UNIX_EPOCH = datetime(1970, 1, 1)


def _reject_aware(dt: datetime, name: str) -> None:
    """Reject timezone-aware datetimes."""
    if dt.tzinfo is not None:
        raise TypeError(
            f"{name} must be a naive datetime (no tzinfo), "
            f"got tzinfo={dt.tzinfo!r}. "
            f"All datetimes are assumed to be in the reference timezone."
        )


@dataclass(frozen=True)
class TimeValue:
    """Naive calendar date-time with nanosecond precision. Immutable.

    The standard library datetime stops at microseconds, which is not
    enough for the finer precision tiers.

    Invariants:
        - year/month/day/hour/minute/second form a valid datetime
        - 0 <= nanosecond < 1_000_000_000
    """

    year: int
    month: int
    day: int
    hour: int = 0
    minute: int = 0
    second: int = 0
    nanosecond: int = 0

    def __post_init__(self) -> None:
        # Delegates calendar validation (leap years, month lengths) to datetime
        datetime(self.year, self.month, self.day,
                 self.hour, self.minute, self.second)
        if not 0 <= self.nanosecond < NANOS_PER_SECOND:
            raise ValueError(
                f"nanosecond must be 0-{NANOS_PER_SECOND - 1}, "
                f"got {self.nanosecond}"
            )

    @classmethod
    def from_datetime(
        cls, dt: datetime, nanosecond: int | None = None,
    ) -> TimeValue:
        """Build from a naive datetime.

        When nanosecond is given it replaces the whole sub-second part,
        otherwise the datetime's microseconds are used.
        Raises TypeError if dt is timezone-aware.
        """
        _reject_aware(dt, "dt")
        if nanosecond is None:
            nanosecond = dt.microsecond * 1_000
        return cls(dt.year, dt.month, dt.day,
                   dt.hour, dt.minute, dt.second, nanosecond)

    @classmethod
    def of_second_of_day(
        cls,
        year: int,
        month: int,
        day: int,
        second_of_day: int,
        nanosecond: int = 0,
    ) -> TimeValue:
        """Build from a date plus seconds elapsed since midnight."""
        if not 0 <= second_of_day < SECONDS_PER_DAY:
            raise ValueError(
                f"second_of_day must be 0-{SECONDS_PER_DAY - 1}, "
                f"got {second_of_day}"
            )
        hour, rest = divmod(second_of_day, 3600)
        minute, second = divmod(rest, 60)
        return cls(year, month, day, hour, minute, second, nanosecond)

    @classmethod
    def from_epoch_nanos(cls, nanos: int) -> TimeValue:
        """Wall-clock value for nanoseconds since the Unix epoch (UTC)."""
        seconds, nanosecond = divmod(nanos, NANOS_PER_SECOND)
        dt = _UNIX_EPOCH + timedelta(seconds=seconds)
        return cls.from_datetime(dt, nanosecond)

    @classmethod
    def fromisoformat(cls, text: str) -> TimeValue:
        """Parse 'YYYY-MM-DDTHH:MM:SS[.fffffffff]' (up to 9 fraction digits)."""
        head, _, fraction = text.partition(".")
        dt = datetime.fromisoformat(head)
        if fraction and (len(fraction) > 9 or not fraction.isdigit()):
            raise ValueError(f"Invalid fractional seconds in {text!r}")
        return cls.from_datetime(dt, int(fraction.ljust(9, "0")))

    @property
    def second_of_day(self) -> int:
        return self.hour * 3600 + self.minute * 60 + self.second

    @property
    def millisecond(self) -> int:
        """Millisecond-of-second."""
        return self.nanosecond // 1_000_000

    @property
    def microsecond(self) -> int:
        """Microsecond-of-second."""
        return self.nanosecond // 1_000

    def with_nanosecond(self, nanosecond: int) -> TimeValue:
        """Copy with the sub-second part replaced."""
        return TimeValue(self.year, self.month, self.day,
                         self.hour, self.minute, self.second, nanosecond)

    def to_datetime(self) -> datetime:
        """Naive datetime. Anything below a microsecond is truncated."""
        return datetime(self.year, self.month, self.day,
                        self.hour, self.minute, self.second, self.microsecond)

    def isoformat(self) -> str:
        base = self.to_datetime().replace(microsecond=0).isoformat()
        if self.nanosecond == 0:
            return base
        return f"{base}.{self.nanosecond:09d}"

    def __str__(self) -> str:
        return self.isoformat()


class YearRangeError(ValueError):
    """Raised when a year falls outside the encodable window."""

    def __init__(self, year: int, bound: int, message: str) -> None:
        self.year = year
        self.bound = bound
        super().__init__(message)


class HashFormatError(ValueError):
    """Raised when a string is not a well-formed encoded value."""

    def __init__(self, value: str | None, pattern: str, message: str) -> None:
        self.value = value
        self.pattern = pattern
        super().__init__(message)


class SubSecondFormatError(HashFormatError):
    """Raised when the sub-second suffix does not fit the chosen precision."""
