"""Tests for the previous business day search."""

from datetime import date, timedelta

import pytest

import jpbizday.calculator
from jpbizday.calculator import is_business_day, is_weekend, previous_business_day
from jpbizday.errors import InvalidDateArithmeticError
from jpbizday.holidays import compute_holidays


def test_is_weekend():
    """Test weekend detection."""
    assert is_weekend(date(2024, 6, 15))  # Saturday
    assert is_weekend(date(2024, 6, 16))  # Sunday
    assert not is_weekend(date(2024, 6, 17))  # Monday


def test_is_business_day():
    """Test business day detection."""
    assert is_business_day(date(2024, 6, 12))  # Wednesday
    assert not is_business_day(date(2024, 6, 15))  # Saturday
    assert not is_business_day(date(2024, 7, 15))  # Marine Day
    assert not is_business_day(date(2024, 11, 4))  # Substitute holiday


@pytest.mark.parametrize(
    ("target_date", "expected"),
    [
        # Ordinary weekday
        (date(2024, 6, 12), date(2024, 6, 11)),
        # Monday goes back over the weekend
        (date(2024, 6, 17), date(2024, 6, 14)),
        # New Year's Day: skips Sunday Dec 31 and Saturday Dec 30
        (date(2024, 1, 1), date(2023, 12, 29)),
        # Substitute holiday Jan 2, 2023 for Sunday Jan 1
        (date(2023, 1, 3), date(2022, 12, 30)),
        # Substitute holiday Feb 12, 2024 for Sunday Feb 11
        (date(2024, 2, 13), date(2024, 2, 9)),
        # Golden Week 2025: May 3-6 are all off
        (date(2025, 5, 7), date(2025, 5, 2)),
        # Silver Week 2026: Respect-for-the-Aged, Citizens' Holiday, equinox
        (date(2026, 9, 24), date(2026, 9, 18)),
        # Reference date on a weekend
        (date(2024, 6, 16), date(2024, 6, 14)),
    ],
)
def test_previous_business_day(target_date, expected):
    """Test known previous business days."""
    assert previous_business_day(target_date) == expected


@pytest.mark.parametrize("year", [2024, 2025, 2026])
def test_previous_business_day_properties(year):
    """The result is earlier, a weekday, and not a holiday of the reference year."""
    holidays = compute_holidays(year)
    target_date = date(year, 1, 1)
    while target_date.year == year:
        result = previous_business_day(target_date)
        assert result < target_date
        assert result.weekday() not in (5, 6)
        assert result not in holidays
        target_date += timedelta(days=1)


def test_previous_business_day_modes_agree_on_real_calendar():
    """No rule lands in late December, so both year modes agree on real dates."""
    for target_date in (date(2024, 1, 1), date(2024, 1, 2), date(2023, 1, 3)):
        assert previous_business_day(target_date) == previous_business_day(
            target_date, per_candidate_year=True
        )


def test_year_boundary_uses_reference_year(monkeypatch):
    """Crossing into the previous year still checks the reference year's holidays."""
    requested_years = []

    def fake_compute_holidays(year):
        requested_years.append(year)
        return {date(year, 12, 29)}

    monkeypatch.setattr(jpbizday.calculator, "compute_holidays", fake_compute_holidays)

    # Dec 29, 2023 is only a "holiday" under the 2023 calendar
    assert previous_business_day(date(2024, 1, 1)) == date(2023, 12, 29)
    assert requested_years == [2024]


def test_year_boundary_per_candidate_year(monkeypatch):
    """With per_candidate_year each candidate is checked against its own year."""
    requested_years = []

    def fake_compute_holidays(year):
        requested_years.append(year)
        return {date(year, 12, 29)}

    monkeypatch.setattr(jpbizday.calculator, "compute_holidays", fake_compute_holidays)

    result = previous_business_day(date(2024, 1, 1), per_candidate_year=True)
    assert result == date(2023, 12, 28)
    assert requested_years == [2024, 2023]


def test_previous_business_day_before_min_date(monkeypatch):
    """Running past the first representable date raises."""
    monkeypatch.setattr(jpbizday.calculator, "compute_holidays", lambda year: set())

    with pytest.raises(InvalidDateArithmeticError):
        previous_business_day(date.min)


def test_previous_business_day_invalid_year():
    """Equinox arithmetic failures propagate to the caller."""
    with pytest.raises(InvalidDateArithmeticError):
        previous_business_day(date(1, 6, 1))
