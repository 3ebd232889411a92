"""Calendar — Weekday, Month, Year

Замкнутые циклические перечисления дней недели и месяцев + счётчик лет.

Значение каждого варианта Weekday/Month совпадает с трёхбуквенной
аббревиатурой из IMF-fixdate (RFC 9110, 5.6.7), поэтому рендеринг — это
просто `.value`.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. skip(0) — identity; skip(len(cycle)) возвращает то же значение
2. Високосность: делится на 4 и (не делится на 100 или делится на 400)
3. Длина февраля зависит от високосности ТЕКУЩЕГО года
"""

from enum import Enum
from typing import Final

from pydantic import BaseModel, Field

from src.core.domain.units import EPOCH_YEAR, validate_non_negative_int


# =============================================================================
# ENUMS
# =============================================================================


class Weekday(str, Enum):
    """День недели.

    Порядок объявления задаёт цикл Mon → ... → Sun → Mon.
    Эпоха Unix (1970-01-01) — четверг, поэтому default() == THU.
    """

    MON = "Mon"
    TUE = "Tue"
    WED = "Wed"
    THU = "Thu"
    FRI = "Fri"
    SAT = "Sat"
    SUN = "Sun"

    @classmethod
    def default(cls) -> "Weekday":
        """День недели эпохи."""
        return cls.THU

    def skip(self, days: int = 1) -> "Weekday":
        """
        Циклический сдвиг на days дней вперёд.

        Args:
            days: Количество шагов (неотрицательное)

        Returns:
            Новый Weekday

        Raises:
            ValueError: Если days отрицательный
        """
        validate_non_negative_int(days, "days")
        return _WEEKDAY_CYCLE[(_WEEKDAY_CYCLE.index(self) + days) % len(_WEEKDAY_CYCLE)]

    def succ(self) -> "Weekday":
        """Следующий день недели."""
        return self.skip(1)


class Month(str, Enum):
    """Месяц года.

    Порядок объявления задаёт цикл Jan → ... → Dec → Jan.
    """

    JAN = "Jan"
    FEB = "Feb"
    MAR = "Mar"
    APR = "Apr"
    MAY = "May"
    JUN = "Jun"
    JUL = "Jul"
    AUG = "Aug"
    SEP = "Sep"
    OCT = "Oct"
    NOV = "Nov"
    DEC = "Dec"

    @classmethod
    def default(cls) -> "Month":
        """Месяц эпохи."""
        return cls.JAN

    def length(self, is_leap_year: bool) -> int:
        """
        Количество дней в месяце.

        Args:
            is_leap_year: Високосный ли текущий год

        Returns:
            28-31
        """
        if self is Month.FEB:
            return 29 if is_leap_year else 28
        return _MONTH_LENGTHS[self]

    @property
    def is_last(self) -> bool:
        """Последний месяц года (декабрь)."""
        return self is Month.DEC

    def skip(self, months: int = 1) -> "Month":
        """
        Циклический сдвиг на months месяцев вперёд.

        Не меняет год: переход через декабрь учитывает вызывающий код.

        Raises:
            ValueError: Если months отрицательный
        """
        validate_non_negative_int(months, "months")
        return _MONTH_CYCLE[(_MONTH_CYCLE.index(self) + months) % len(_MONTH_CYCLE)]

    def succ(self) -> "Month":
        """Следующий месяц."""
        return self.skip(1)


_WEEKDAY_CYCLE: Final[tuple[Weekday, ...]] = tuple(Weekday)

_MONTH_CYCLE: Final[tuple[Month, ...]] = tuple(Month)

# Февраль вычисляется отдельно (зависит от високосности)
_MONTH_LENGTHS: Final[dict[Month, int]] = {
    Month.JAN: 31,
    Month.MAR: 31,
    Month.APR: 30,
    Month.MAY: 31,
    Month.JUN: 30,
    Month.JUL: 31,
    Month.AUG: 31,
    Month.SEP: 30,
    Month.OCT: 31,
    Month.NOV: 30,
    Month.DEC: 31,
}


# =============================================================================
# YEAR
# =============================================================================


def is_leap_year(year: int) -> bool:
    """
    Григорианское правило високосного года.

    Examples:
        >>> is_leap_year(1972)
        True
        >>> is_leap_year(1900)
        False
        >>> is_leap_year(2000)
        True
    """
    return year % 4 == 0 and (year % 100 != 0 or year % 400 == 0)


class Year(BaseModel):
    """
    Календарный год (неотрицательный счётчик).

    Immutable модель (frozen=True). Верхней границы нет: int в Python
    не переполняется.
    """

    value: int = Field(default=EPOCH_YEAR, ge=0, description="Год (например, 1970)")

    model_config = {"frozen": True}

    def is_leap(self) -> bool:
        """Високосный ли год."""
        return is_leap_year(self.value)

    def skip(self, years: int = 1) -> "Year":
        """
        Сдвиг на years лет вперёд.

        Raises:
            ValueError: Если years отрицательный
        """
        validate_non_negative_int(years, "years")
        return Year(value=self.value + years)

    def __str__(self) -> str:
        # Без дополнения нулями
        return str(self.value)
