"""
CalendarDate — Календарная дата и её продвижение во времени

Immutable Pydantic модель даты + calendar advancer:
- Продвижение на delta секунд точной целочисленной арифметикой
- Переходы через границы суток (с ротацией дня недели), месяцев и лет
- Рендеринг "Www, DD Mon YYYY" для IMF-fixdate

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. 1 <= day <= month.length(year.is_leap())
2. 0 <= residual_seconds < SECONDS_PER_DAY
3. skip(0) == self
4. skip(a).skip(b) == skip(a + b)
5. Длина месяца пересчитывается ПОСЛЕ инкремента года (високосный февраль
   нового года использует статус нового года)

АЛГОРИТМ:
    total = residual_seconds + delta
    пока total >= SECONDS_PER_DAY:
        total -= SECONDS_PER_DAY; weekday += 1
        если day < длина месяца: day += 1
        иначе: day = 1; если декабрь → year += 1; month += 1
    residual_seconds = total

Продвижение идёт по одному дню: типичная дельта — секунды с прошлого
рендеринга заголовка.
"""

from pydantic import BaseModel, Field, model_validator

from src.core.domain.calendar import Month, Weekday, Year, is_leap_year
from src.core.domain.units import SECONDS_PER_DAY, validate_non_negative_int


class CalendarDate(BaseModel):
    """
    Календарная дата.

    Default — дата эпохи: четверг, 1 января 1970, residual 0.
    Все изменения даты создают новый экземпляр.
    """

    day: int = Field(default=1, ge=1, le=31, description="День месяца")
    weekday: Weekday = Field(default_factory=Weekday.default, description="День недели")
    month: Month = Field(default_factory=Month.default, description="Месяц")
    year: Year = Field(default_factory=Year, description="Год")
    residual_seconds: int = Field(
        default=0,
        ge=0,
        lt=SECONDS_PER_DAY,
        description="Секунды, уже прошедшие в текущих сутках",
    )

    model_config = {"frozen": True}

    @model_validator(mode="after")
    def validate_day_in_month(self) -> "CalendarDate":
        """День не выходит за длину месяца с учётом високосности года."""
        month_length = self.month.length(self.year.is_leap())
        if self.day > month_length:
            raise ValueError(
                f"day {self.day} out of range for {self.month.value} {self.year} "
                f"({month_length} days)"
            )
        return self

    def skip(self, seconds: int) -> "CalendarDate":
        """
        Продвижение даты на seconds секунд.

        Args:
            seconds: Прошедшие секунды (неотрицательные)

        Returns:
            Новый CalendarDate (self при seconds == 0)

        Raises:
            ValueError: Если seconds отрицательный
        """
        validate_non_negative_int(seconds, "seconds")

        if seconds == 0:
            return self

        remaining = self.residual_seconds + seconds
        if remaining < SECONDS_PER_DAY:
            return self.model_copy(update={"residual_seconds": remaining})

        day = self.day
        weekday = self.weekday
        month = self.month
        year = self.year.value
        month_length = month.length(is_leap_year(year))

        while remaining >= SECONDS_PER_DAY:
            remaining -= SECONDS_PER_DAY
            weekday = weekday.succ()

            if day != month_length:
                day += 1
                continue

            # Граница месяца
            day = 1
            if month.is_last:
                year += 1
            month = month.succ()
            month_length = month.length(is_leap_year(year))

        return CalendarDate(
            day=day,
            weekday=weekday,
            month=month,
            year=Year(value=year),
            residual_seconds=remaining,
        )

    def advance(self, seconds: int) -> "CalendarDate":
        """Синоним skip()."""
        return self.skip(seconds)

    def for_header(self) -> str:
        """Дата в формате IMF-fixdate: "Www, DD Mon YYYY"."""
        return f"{self.weekday.value}, {self.day:02d} {self.month.value} {self.year}"
