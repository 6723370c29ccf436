"""Data models for holidays."""

from dataclasses import dataclass
from datetime import date
from enum import Enum


class HolidayKind(str, Enum):
    """Kind of national holiday, valued by its Japanese name."""

    NEW_YEARS_DAY = "元日"
    COMING_OF_AGE_DAY = "成人の日"
    NATIONAL_FOUNDATION_DAY = "建国記念の日"
    EMPERORS_BIRTHDAY = "天皇誕生日"
    VERNAL_EQUINOX_DAY = "春分の日"
    SHOWA_DAY = "昭和の日"
    CONSTITUTION_DAY = "憲法記念日"
    GREENERY_DAY = "みどりの日"
    CHILDRENS_DAY = "こどもの日"
    MARINE_DAY = "海の日"
    MOUNTAIN_DAY = "山の日"
    RESPECT_FOR_THE_AGED_DAY = "敬老の日"
    AUTUMNAL_EQUINOX_DAY = "秋分の日"
    CITIZENS_HOLIDAY = "国民の休日"
    SPORTS_DAY = "スポーツの日"
    CULTURE_DAY = "文化の日"
    LABOR_THANKSGIVING_DAY = "勤労感謝の日"
    SUBSTITUTE_HOLIDAY = "振替休日"


@dataclass(frozen=True, order=True)
class Holiday:
    """A single holiday date."""

    date: date
    kind: HolidayKind

    @property
    def name(self) -> str:
        """Japanese name of the holiday."""
        return self.kind.value

    @property
    def is_substitute(self) -> bool:
        """Whether this day was moved here from a Sunday holiday."""
        return self.kind == HolidayKind.SUBSTITUTE_HOLIDAY
