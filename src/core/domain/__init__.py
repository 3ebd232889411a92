"""
Domain models and value objects.

Contains fundamental calendar entities: Weekday, Month, Year, CalendarDate, TimeOfDay.
"""

from src.core.domain.calendar import Month, Weekday, Year, is_leap_year
from src.core.domain.date import CalendarDate
from src.core.domain.time_of_day import (
    ClockFields,
    TimeOfDay,
    compose_seconds,
    decompose_seconds,
)
from src.core.domain.units import (
    EPOCH_YEAR,
    HOURS_PER_DAY,
    MINUTES_PER_HOUR,
    SECONDS_PER_DAY,
    SECONDS_PER_HOUR,
    SECONDS_PER_MINUTE,
    days_to_seconds,
    validate_non_negative_int,
)

__all__ = [
    # Units module
    "SECONDS_PER_MINUTE",
    "MINUTES_PER_HOUR",
    "HOURS_PER_DAY",
    "SECONDS_PER_HOUR",
    "SECONDS_PER_DAY",
    "EPOCH_YEAR",
    "days_to_seconds",
    "validate_non_negative_int",
    # Calendar
    "Weekday",
    "Month",
    "Year",
    "is_leap_year",
    # Date model
    "CalendarDate",
    # Time of day
    "ClockFields",
    "TimeOfDay",
    "decompose_seconds",
    "compose_seconds",
]
