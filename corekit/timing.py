"""Calendar arithmetic on time vectors, GMT time strings and a simple timer.

A *time vector* is a list ``[year, month, day, hour, minute, second]``
with the month counted from 0 (January) and the day from 1.  A seven
element vector adds the day of the week, counted from 0 (Sunday).
"""

from __future__ import annotations

import time
from collections.abc import Sequence

from corekit.numbers import padded, string_to_integer

DAYS_OF_WEEK = ("Sun", "Mon", "Tue", "Wed", "Thu", "Fri", "Sat")
MONTHS = ("Jan", "Feb", "Mar", "Apr", "May", "Jun", "Jul", "Aug", "Sep", "Oct", "Nov", "Dec")
DAYS_IN_MONTHS = (31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31)
DEFAULT_BASE_YEAR = 1900
FALLBACK_TIME_STRING = "Wed, 19 Aug 2020 13:59:14 GMT"

_DAYS_IN_400_YEARS = 400 * 365 + 97


def _century(base_year: int) -> int:
    return base_year if base_year % 100 == 0 else (base_year // 100) * 100


def days_in_year(year: int) -> int:
    """Return 366 for a Gregorian leap year and 365 otherwise."""
    if year % 4 != 0:
        return 365
    if year % 400 == 0:
        return 366
    if year % 100 == 0:
        return 365
    return 366


def days_since(moment: Sequence[int], base_year: int = DEFAULT_BASE_YEAR) -> int:
    """Count the days from the start of the century of ``base_year`` to ``moment``.

    Only year, month and day are used; the day is added as given, so the
    first of January of the base century counts as day 1.
    """
    if len(moment) < 3:
        raise ValueError("a time vector needs at least year, month and day")
    start = _century(base_year)
    year, month, day = moment[0], moment[1], moment[2]
    skipped_centuries = sum(1 for century in range(start, year, 100) if century % 400 != 0)
    span = year - start
    leap_days = span // 4 - skipped_centuries + 1
    if span % 4 == 0:
        leap_days -= 1
    day += span * 365 + leap_days
    if month > 0:
        day += 31
    if month > 1:
        day += 28
        if days_in_year(year) == 366:
            day += 1
    day += sum(DAYS_IN_MONTHS[j] for j in range(2, 11) if month > j)
    return day


def seconds_since(moment: Sequence[int], base_year: int = DEFAULT_BASE_YEAR) -> int:
    """Count the seconds from the start of the century of ``base_year`` to ``moment``."""
    if len(moment) < 6:
        raise ValueError("a time vector needs six components")
    hours = days_since(moment, base_year) * 24 + moment[3]
    return (hours * 60 + moment[4]) * 60 + moment[5]


def days_to_ymd(days: int, base_year: int = DEFAULT_BASE_YEAR) -> list[int]:
    """Turn a day count from :func:`days_since` back into ``[year, month, day]``."""
    year = _century(base_year) + 400 * (days // _DAYS_IN_400_YEARS)
    remaining = days % _DAYS_IN_400_YEARS
    while remaining > days_in_year(year):
        remaining -= days_in_year(year)
        year += 1
    month_lengths = list(DAYS_IN_MONTHS[:11])
    month_lengths[1] = 29 if days_in_year(year) == 366 else 28
    month = 0
    for length in month_lengths:
        if remaining <= length:
            break
        remaining -= length
        month += 1
    return [year, month, remaining]


def standardize_time(moment: Sequence[int], base_year: int = DEFAULT_BASE_YEAR) -> list[int]:
    """Carry overflowing seconds, minutes, hours and days into a valid time vector.

    Year and month must already be valid.  An hour of exactly 24 is kept.
    """
    if len(moment) != 6:
        raise ValueError("a time vector needs exactly six components")
    result = list(moment)
    if result[5] > 59:
        result[4] += result[5] // 60
        result[5] %= 60
    if result[4] > 59:
        result[3] += result[4] // 60
        result[4] %= 60
    if result[3] > 24:
        result[2] += result[3] // 24
        result[3] %= 24
    start = _century(base_year)
    result[:3] = days_to_ymd(days_since(result, start), start)
    return result


def parse_gmt(text: str) -> list[int]:
    """Parse ``"Wed, 19 Aug 2020 13:59:14 GMT"`` into a six element time vector."""
    if len(text) < 25:
        raise ValueError(f"time string too short: {text!r}")
    day = string_to_integer(text[5:7])
    if not 0 <= day <= 31:
        raise ValueError(f"bad day in {text!r}")
    try:
        month = MONTHS.index(text[8:11])
    except ValueError:
        raise ValueError(f"bad month in {text!r}") from None
    year = string_to_integer(text[12:16])
    hour = string_to_integer(text[17:19])
    if not 0 <= hour <= 23:
        raise ValueError(f"bad hour in {text!r}")
    minute = string_to_integer(text[20:22])
    if not 0 <= minute <= 59:
        raise ValueError(f"bad minute in {text!r}")
    second = string_to_integer(text[23:25])
    if not 0 <= second <= 59:
        raise ValueError(f"bad second in {text!r}")
    return [year, month, day, hour, minute, second]


def day_abbreviation(weekday: int) -> str:
    """Return the three-letter name of ``weekday`` (0 is Sunday), taken modulo 7."""
    return DAYS_OF_WEEK[weekday % len(DAYS_OF_WEEK)]


def month_abbreviation(month: int) -> str:
    """Return the three-letter name of ``month`` (0 is January), taken modulo 12."""
    return MONTHS[month % len(MONTHS)]


def add_time(moment: Sequence[int], delta: Sequence[int]) -> list[int]:
    """Add ``delta`` (six components, year and month zero) to a seven element ``moment``.

    The day of the week advances only by the days carried over from the
    hours, not by the days of ``delta``.
    """
    if len(moment) != 7 or len(delta) != 6:
        raise ValueError("need a seven element moment and a six element delta")
    if delta[0] != 0 or delta[1] != 0:
        raise ValueError("the delta may not contain years or months")
    year, month, day, hour, minute, second, weekday = moment
    if year < 1700:
        raise ValueError("years before 1700 are not supported")
    if not 0 <= month < len(MONTHS):
        raise ValueError("month out of range")
    if min(day, hour, minute, second) < 0:
        raise ValueError("time components must not be negative")
    if not 0 <= weekday < len(DAYS_OF_WEEK):
        raise ValueError("day of the week out of range")
    if min(delta[2:]) < 0:
        raise ValueError("the delta must not be negative")

    total_second = second + delta[5]
    total_minute = minute + delta[4]
    total_hour = hour + delta[3]
    if total_second > 59:
        total_minute += total_second // 60
    if total_minute > 59:
        total_hour += total_minute // 60
    carried_days = total_hour // 24 if total_hour > 24 else 0

    summed = [year, month] + [value + extra for value, extra in zip(moment[2:6], delta[2:])]
    return standardize_time(summed) + [(weekday + carried_days) % len(DAYS_OF_WEEK)]


def now_vector() -> list[int]:
    """Return the current UTC time as a seven element time vector."""
    now = time.gmtime()
    return [
        now.tm_year,
        now.tm_mon - 1,
        now.tm_mday,
        now.tm_hour,
        now.tm_min,
        now.tm_sec,
        (now.tm_wday + 1) % 7,
    ]


def time_string(moment: Sequence[int] | None = None) -> str:
    """Format a seven element moment (now by default) as ``"Wed, 19 Aug 2020 13:59:14 GMT"``."""
    if moment is None:
        moment = now_vector()
    if len(moment) != 7:
        raise ValueError("a moment needs seven components")
    year, month, day, hour, minute, second, weekday = moment
    return (
        f"{day_abbreviation(weekday)}, {padded(day, 10, '0')} {month_abbreviation(month)} {year} "
        f"{padded(hour, 10, '0')}:{padded(minute, 10, '0')}:{padded(second, 10, '0')} GMT"
    )


def time_yyyymmdd(moment: Sequence[int] | None = None) -> str:
    """Format the date of ``moment`` (now by default) as ``YYYYMMDD``."""
    if moment is None:
        moment = now_vector()
    return f"{moment[0]}{padded(moment[1] + 1, 10, '0')}{padded(moment[2], 10, '0')}"


def time_yyyymm(moment: Sequence[int] | None = None) -> str:
    """Format the month of ``moment`` (now by default) as ``YYYYMM``."""
    if moment is None:
        moment = now_vector()
    return f"{moment[0]}{padded(moment[1] + 1, 10, '0')}"


def time_yyyy(moment: Sequence[int] | None = None) -> str:
    """Format the year of ``moment`` (now by default)."""
    if moment is None:
        moment = now_vector()
    return str(moment[0])


def cookie_expiration(days: int = 0, hours: int = 0, minutes: int = 0, seconds: int = 0) -> str:
    """Return the GMT time string for now plus the given non-negative amounts."""
    return time_string(add_time(now_vector(), [0, 0, days, hours, minutes, seconds]))


def sanitize_time_string(text: str) -> str:
    """Return ``text`` if it is a valid GMT time string, otherwise a fixed valid one."""
    try:
        parsed = parse_gmt(text)
    except ValueError:
        return FALLBACK_TIME_STRING
    if parsed[0] < 0:
        return FALLBACK_TIME_STRING
    return text


class Timer:
    """A stopwatch measuring elapsed wall time in milliseconds."""

    def __init__(self, running: bool = False) -> None:
        self._start_ns: int | None = None
        self._end_ns: int | None = None
        if running:
            self.start()

    def start(self) -> None:
        """Start (or restart) the measurement."""
        self._start_ns = time.perf_counter_ns()
        self._end_ns = None

    def stop(self) -> None:
        """Stop the measurement."""
        self._end_ns = time.perf_counter_ns()

    def elapsed(self) -> float:
        """Return the milliseconds between start and stop."""
        if self._start_ns is None or self._end_ns is None:
            raise RuntimeError("the timer has not been started and stopped")
        return (self._end_ns - self._start_ns) / 1_000_000.0

    def now(self, precision: int = 1_000_000_000) -> int:
        """Return the nanoseconds since the epoch divided by ``precision``."""
        return time.time_ns() // precision