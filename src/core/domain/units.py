"""
TimeUnits — Централизованный модуль единиц времени

RFC 9110, 5.6.7 (IMF-fixdate)

Единственный допустимый способ преобразований между:
- секундами (абсолютными, от эпохи Unix)
- целыми сутками
- секундами внутри текущих суток

ЗАПРЕЩЕНО использовать "магические" 60/3600/86400 вне этого модуля.
"""

from typing import Final


# =============================================================================
# БАЗОВЫЕ ЕДИНИЦЫ
# =============================================================================
SECONDS_PER_MINUTE: Final[int] = 60

MINUTES_PER_HOUR: Final[int] = 60

HOURS_PER_DAY: Final[int] = 24

SECONDS_PER_HOUR: Final[int] = SECONDS_PER_MINUTE * MINUTES_PER_HOUR

# Шаг календарного advancer
SECONDS_PER_DAY: Final[int] = SECONDS_PER_HOUR * HOURS_PER_DAY

# Эпоха Unix: 1970-01-01T00:00:00 UTC (четверг)
EPOCH_YEAR: Final[int] = 1970


# =============================================================================
# БАЗОВЫЕ КОНВЕРТЕРЫ
# =============================================================================


def days_to_seconds(days: int) -> int:
    """
    Конверсия: целые сутки → секунды

    Args:
        days: Количество суток

    Returns:
        days * SECONDS_PER_DAY
    """
    return days * SECONDS_PER_DAY


# =============================================================================
# ВАЛИДАЦИЯ
# =============================================================================


def validate_non_negative_int(value: int, name: str) -> None:
    """
    Проверка, что значение — неотрицательное целое число.

    Используется для секунд и для шагов циклического сдвига
    (Weekday/Month/Year). bool отклоняется явно.

    Args:
        value: Проверяемое значение
        name: Имя параметра (для сообщения об ошибке)

    Raises:
        ValueError: Если значение не int или отрицательное
    """
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"{name} must be an integer, got {value!r}")

    if value < 0:
        raise ValueError(f"{name} cannot be negative: {value}")
