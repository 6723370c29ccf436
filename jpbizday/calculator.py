"""Business day search."""

from datetime import date, timedelta

from jpbizday.errors import InvalidDateArithmeticError
from jpbizday.holidays import compute_holidays


def _day_before(target_date: date) -> date:
    try:
        return target_date - timedelta(days=1)
    except OverflowError as e:
        msg = f"No date exists before {target_date.isoformat()}"
        raise InvalidDateArithmeticError(msg) from e


def is_weekend(target_date: date) -> bool:
    """Check if a date falls on Saturday or Sunday."""
    # 5 = Saturday, 6 = Sunday
    return target_date.weekday() in (5, 6)


def is_business_day(target_date: date) -> bool:
    """
    Check if a date is a business day.

    A business day is:
    - Not a weekend (Saturday/Sunday)
    - Not a Japanese public holiday, substitute holidays included
    """
    if is_weekend(target_date):
        return False
    return target_date not in compute_holidays(target_date.year)


def previous_business_day(target_date: date, *, per_candidate_year: bool = False) -> date:
    """
    Find the most recent business day strictly before a date.

    Holidays are computed once, for the year of ``target_date``, and that set
    is used for the whole backward scan even when it crosses into the previous
    year. Pass ``per_candidate_year=True`` to look up each candidate against its
    own year's holidays instead.
    """
    holidays_year = target_date.year
    holidays = compute_holidays(holidays_year)

    candidate = _day_before(target_date)
    while True:
        if per_candidate_year and candidate.year != holidays_year:
            holidays_year = candidate.year
            holidays = compute_holidays(holidays_year)
        if not is_weekend(candidate) and candidate not in holidays:
            return candidate
        candidate = _day_before(candidate)
