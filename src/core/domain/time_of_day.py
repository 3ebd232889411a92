"""
TimeOfDay — Декомпозиция абсолютных секунд в часы/минуты/секунды

Модуль обеспечивает позиционную декомпозицию по основаниям 60/60/24:
- seconds → (hour, minute, second, days)
- TimeOfDay — immutable снапшот времени суток
- Рендеринг "hh:mm:ss" для IMF-fixdate

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. seconds == days * 86400 + hour * 3600 + minute * 60 + second
2. hour < 24, minute < 60, second < 60
3. day_seconds всегда кратен SECONDS_PER_DAY

ФОРМУЛЫ:
    second = S mod 60
    minute = (S div 60) mod 60
    hour   = (S div 3600) mod 24
    days   = S div 86400
"""

from typing import NamedTuple

from pydantic import BaseModel, Field, field_validator

from src.core.domain.units import (
    HOURS_PER_DAY,
    MINUTES_PER_HOUR,
    SECONDS_PER_DAY,
    SECONDS_PER_MINUTE,
    days_to_seconds,
    validate_non_negative_int,
)


# =============================================================================
# DECOMPOSER
# =============================================================================


class ClockFields(NamedTuple):
    """Результат декомпозиции абсолютных секунд."""

    hour: int
    minute: int
    second: int
    days: int


def decompose_seconds(seconds: int) -> ClockFields:
    """
    Декомпозиция абсолютных секунд в поля времени суток.

    Чистая, тотальная функция над неотрицательными целыми.

    Args:
        seconds: Секунды от эпохи (неотрицательные)

    Returns:
        ClockFields(hour, minute, second, days)

    Raises:
        ValueError: Если seconds отрицательный или не int

    Examples:
        >>> decompose_seconds(0)
        ClockFields(hour=0, minute=0, second=0, days=0)
        >>> decompose_seconds(86399)
        ClockFields(hour=23, minute=59, second=59, days=0)
        >>> decompose_seconds(90061)
        ClockFields(hour=1, minute=1, second=1, days=1)
    """
    validate_non_negative_int(seconds, "seconds")

    minutes, second = divmod(seconds, SECONDS_PER_MINUTE)
    hours, minute = divmod(minutes, MINUTES_PER_HOUR)
    days, hour = divmod(hours, HOURS_PER_DAY)

    return ClockFields(hour=hour, minute=minute, second=second, days=days)


def compose_seconds(fields: ClockFields) -> int:
    """
    Обратная операция к decompose_seconds.

    Returns:
        days * 86400 + hour * 3600 + minute * 60 + second
    """
    return (
        (fields.days * HOURS_PER_DAY + fields.hour) * MINUTES_PER_HOUR + fields.minute
    ) * SECONDS_PER_MINUTE + fields.second


# =============================================================================
# TIME OF DAY MODEL
# =============================================================================


class TimeOfDay(BaseModel):
    """
    Время суток, полностью выводимое из абсолютных секунд.

    day_seconds — целые сутки, выраженные в секундах (days * 86400).
    Вместе с CalendarDate.residual_seconds даёт исходное абсолютное значение.
    Собственного состояния модель не несёт.
    """

    hour: int = Field(default=0, ge=0, lt=HOURS_PER_DAY, description="Час [0, 23]")
    minute: int = Field(default=0, ge=0, lt=MINUTES_PER_HOUR, description="Минута [0, 59]")
    second: int = Field(default=0, ge=0, lt=SECONDS_PER_MINUTE, description="Секунда [0, 59]")
    day_seconds: int = Field(default=0, ge=0, description="Целые сутки в секундах")

    model_config = {"frozen": True}

    @field_validator("day_seconds")
    @classmethod
    def validate_whole_days(cls, v: int) -> int:
        """day_seconds должен быть кратен суткам."""
        if v % SECONDS_PER_DAY != 0:
            raise ValueError(
                f"day_seconds {v} is not a whole number of days ({SECONDS_PER_DAY}s)"
            )
        return v

    @classmethod
    def from_seconds(cls, seconds: int) -> "TimeOfDay":
        """
        Построение снапшота из абсолютных секунд.

        Raises:
            ValueError: Если seconds отрицательный
        """
        fields = decompose_seconds(seconds)
        return cls(
            hour=fields.hour,
            minute=fields.minute,
            second=fields.second,
            day_seconds=days_to_seconds(fields.days),
        )

    @property
    def days(self) -> int:
        """Количество целых суток от эпохи."""
        return self.day_seconds // SECONDS_PER_DAY

    def clock_fields(self) -> ClockFields:
        """Поля для compose_seconds()."""
        return ClockFields(
            hour=self.hour, minute=self.minute, second=self.second, days=self.days
        )

    def for_header(self) -> str:
        """Время в формате IMF-fixdate: "hh:mm:ss"."""
        return f"{self.hour:02d}:{self.minute:02d}:{self.second:02d}"
