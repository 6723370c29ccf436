"""Japanese national holiday calendar."""

import math
from calendar import MONDAY, SUNDAY, WEDNESDAY, monthrange
from collections.abc import Set
from datetime import MAXYEAR, MINYEAR, date, timedelta

from jpbizday.errors import InvalidDateArithmeticError
from jpbizday.models import Holiday, HolidayKind

# Constants
EQUINOX_BASE_YEAR = 1980
EQUINOX_DRIFT = 0.242194  # days per year
VERNAL_EQUINOX_OFFSET = 20.8431
AUTUMNAL_EQUINOX_OFFSET = 23.2488

FIXED_HOLIDAYS = (
    (1, 1, HolidayKind.NEW_YEARS_DAY),
    (2, 11, HolidayKind.NATIONAL_FOUNDATION_DAY),
    (2, 23, HolidayKind.EMPERORS_BIRTHDAY),
    (4, 29, HolidayKind.SHOWA_DAY),
    (5, 3, HolidayKind.CONSTITUTION_DAY),
    (5, 4, HolidayKind.GREENERY_DAY),
    (5, 5, HolidayKind.CHILDRENS_DAY),
    (8, 11, HolidayKind.MOUNTAIN_DAY),
    (11, 3, HolidayKind.CULTURE_DAY),
    (11, 23, HolidayKind.LABOR_THANKSGIVING_DAY),
)

# (month, nth Monday)
MONDAY_HOLIDAYS = (
    (1, 2, HolidayKind.COMING_OF_AGE_DAY),
    (7, 3, HolidayKind.MARINE_DAY),
    (9, 3, HolidayKind.RESPECT_FOR_THE_AGED_DAY),
    (10, 2, HolidayKind.SPORTS_DAY),
)


def nth_weekday_of_month(year: int, month: int, weekday: int, n: int) -> date:
    """Get the nth occurrence of a weekday (Monday=0) in a month."""
    first = date(year, month, 1)
    offset = (weekday - first.weekday()) % 7
    return first + timedelta(days=offset + (n - 1) * 7)


def _check_year(year: int) -> None:
    if not MINYEAR <= year <= MAXYEAR:
        msg = f"Year {year} is outside the supported range {MINYEAR}-{MAXYEAR}"
        raise InvalidDateArithmeticError(msg)


def _equinox_day(year: int, month: int, offset: float) -> date:
    """
    Approximate an equinox date with the NAOJ linear formula.

    The leap-year correction truncates toward zero, so years before 1980
    are not shifted by an extra day.
    """
    _check_year(year)
    elapsed = year - EQUINOX_BASE_YEAR
    leap_days = elapsed // 4 if elapsed >= 0 else -(-elapsed // 4)
    day = math.floor(offset + EQUINOX_DRIFT * elapsed - leap_days)

    _, days_in_month = monthrange(year, month)
    if not 1 <= day <= days_in_month:
        msg = f"Equinox day {day} is out of range for {year}-{month:02}"
        raise InvalidDateArithmeticError(msg)
    return date(year, month, day)


def vernal_equinox_day(year: int) -> date:
    """Get Vernal Equinox Day (春分の日) for a year."""
    return _equinox_day(year, 3, VERNAL_EQUINOX_OFFSET)


def autumnal_equinox_day(year: int) -> date:
    """Get Autumnal Equinox Day (秋分の日) for a year."""
    return _equinox_day(year, 9, AUTUMNAL_EQUINOX_OFFSET)


def _base_holidays(year: int) -> list[Holiday]:
    """Fixed, floating and equinox holidays before any substitution."""
    _check_year(year)
    holidays = [Holiday(date(year, month, day), kind) for month, day, kind in FIXED_HOLIDAYS]
    holidays.extend(
        Holiday(nth_weekday_of_month(year, month, MONDAY, n), kind)
        for month, n, kind in MONDAY_HOLIDAYS
    )
    holidays.append(Holiday(vernal_equinox_day(year), HolidayKind.VERNAL_EQUINOX_DAY))

    autumnal = autumnal_equinox_day(year)
    holidays.append(Holiday(autumnal, HolidayKind.AUTUMNAL_EQUINOX_DAY))
    # Tuesday sandwiched between Respect-for-the-Aged Monday and the equinox
    if autumnal.weekday() == WEDNESDAY:
        holidays.append(Holiday(autumnal - timedelta(days=1), HolidayKind.CITIZENS_HOLIDAY))

    return holidays


def _substitute_for(sunday: date, original: Set[date]) -> date:
    """Move a Sunday holiday to the next Monday-or-later day not already a holiday."""
    moved = sunday
    while moved.weekday() != MONDAY:
        moved += timedelta(days=1)
    while moved in original:
        moved += timedelta(days=1)
    return moved


def adjust_substitute_holidays(holidays: Set[date]) -> set[date]:
    """
    Add substitute holidays (振替休日) for every holiday falling on a Sunday.

    Each substitute is resolved against the unadjusted input only, so
    several Sunday holidays are moved independently of each other.
    """
    original = frozenset(holidays)
    adjusted = set(original)
    for holiday in original:
        if holiday.weekday() == SUNDAY:
            adjusted.add(_substitute_for(holiday, original))
    return adjusted


def list_holidays(year: int) -> list[Holiday]:
    """Get every holiday of a year, substitutes included, sorted by date."""
    by_date: dict[date, Holiday] = {}
    for holiday in _base_holidays(year):
        by_date.setdefault(holiday.date, holiday)

    original = frozenset(by_date)
    for substitute in adjust_substitute_holidays(original) - original:
        by_date[substitute] = Holiday(substitute, HolidayKind.SUBSTITUTE_HOLIDAY)

    return sorted(by_date.values())


def compute_holidays(year: int) -> set[date]:
    """Get the set of holiday dates for a year."""
    return {holiday.date for holiday in list_holidays(year)}


def get_holiday_name(target_date: date) -> str | None:
    """Get the name of a Japanese holiday, or None if not a holiday."""
    for holiday in list_holidays(target_date.year):
        if holiday.date == target_date:
            return holiday.name
    return None


def is_holiday(target_date: date) -> bool:
    """Check if a date is a Japanese public holiday."""
    return target_date in compute_holidays(target_date.year)
