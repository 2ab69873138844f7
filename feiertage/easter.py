"""Gregorian Easter date calculation."""

from datetime import date
from functools import lru_cache

from feiertage.errors import InvalidYearError

MIN_YEAR = 1583  # first full year of the Gregorian calendar
MAX_YEAR = 9999


def check_year(year: int) -> int:
    """Validate that year is within the supported range."""
    if isinstance(year, bool) or not isinstance(year, int):
        raise InvalidYearError(f"Year must be an integer, got {year!r}")
    if not MIN_YEAR <= year <= MAX_YEAR:
        raise InvalidYearError(f"Year {year} is outside {MIN_YEAR}..{MAX_YEAR}")
    return year


@lru_cache(maxsize=256)
def compute_easter_sunday(year: int) -> date:
    """Compute Easter Sunday using the Anonymous Gregorian algorithm."""
    check_year(year)
    a = year % 19
    b, c = divmod(year, 100)
    d, e = divmod(b, 4)
    f = (b + 8) // 25
    g = (b - f + 1) // 3
    h = (19 * a + b - d - g + 15) % 30
    i, k = divmod(c, 4)
    l = (32 + 2 * e + 2 * i - h - k) % 7  # noqa: E741
    m = (a + 11 * h + 22 * l) // 451
    month, day = divmod(h + l - 7 * m + 114, 31)
    return date(year, month, day + 1)
