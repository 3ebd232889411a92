"""Clock — источники абсолютных секунд от эпохи Unix.

Чтение часов — единственный побочный эффект во всей библиотеке и
единственный путь к ошибке (ClockError). Источник внедряется явно,
поэтому ядро календаря остаётся чистым и тестируется без мока ОС.

Источники:
- SystemClock: системные часы (UTC), усечение до целых секунд
- FixedClock: фиксированное значение для тестов и replay
"""

import time
from dataclasses import dataclass
from typing import Optional, Protocol

import structlog

logger = structlog.get_logger(component="timestamp.clock")


# =============================================================================
# EXCEPTIONS
# =============================================================================


class ClockError(Exception):
    """
    Не удалось получить текущее время от источника часов.

    Возникает если:
    1. Источник сообщает время раньше эпохи (отрицательные секунды)
    2. Чтение часов завершилось ошибкой ОС
    3. Источник вернул не целое число секунд

    Повторных попыток нет: решение о retry принимает вызывающий код.
    """
    pass


# =============================================================================
# CLOCK SOURCES
# =============================================================================


class ClockSource(Protocol):
    """Минимальный протокол источника времени."""

    def read(self) -> int:
        """Секунды от эпохи Unix."""
        ...


class SystemClock:
    """Системные часы (wall clock)."""

    def read(self) -> int:
        """
        Текущие секунды от эпохи, усечённые вниз до целых.

        Raises:
            ClockError: Если время раньше эпохи
            OSError: Если ОС не смогла вернуть время
        """
        seconds = time.time_ns() // 1_000_000_000
        if seconds < 0:
            raise ClockError(f"System clock reports time before epoch: {seconds}s")
        return seconds

    def __repr__(self) -> str:
        return "SystemClock()"


@dataclass(frozen=True)
class FixedClock:
    """
    Детерминированный источник времени.

    Immutable: tick() возвращает новый экземпляр.
    Отрицательное значение моделирует часы, ушедшие раньше эпохи.
    """

    seconds: int = 0

    def read(self) -> int:
        if self.seconds < 0:
            raise ClockError(f"Fixed clock is set before epoch: {self.seconds}s")
        return self.seconds

    def tick(self, step: int = 1) -> "FixedClock":
        """Новые часы, сдвинутые на step секунд."""
        return FixedClock(self.seconds + step)


# =============================================================================
# READ HELPER
# =============================================================================


def read_epoch_seconds(clock: Optional[ClockSource] = None) -> int:
    """
    Чтение абсолютных секунд от эпохи с нормализацией ошибок.

    Args:
        clock: Источник времени (default: SystemClock)

    Returns:
        Неотрицательное целое число секунд

    Raises:
        ClockError: Если часы недоступны или сообщают время раньше эпохи
    """
    clock = clock if clock is not None else SystemClock()

    try:
        seconds = clock.read()
    except ClockError as e:
        logger.error("clock_read_failed", clock=repr(clock), error=str(e))
        raise
    except (OSError, OverflowError, ValueError) as e:
        logger.error("clock_read_failed", clock=repr(clock), error=str(e))
        raise ClockError(f"Clock could not be read: {e}") from e

    if isinstance(seconds, bool) or not isinstance(seconds, int):
        logger.error("clock_read_failed", clock=repr(clock), value=repr(seconds))
        raise ClockError(f"Clock returned a non-integer value: {seconds!r}")

    if seconds < 0:
        logger.error("clock_read_failed", clock=repr(clock), seconds=seconds)
        raise ClockError(f"Clock reports time before epoch: {seconds}s")

    logger.debug("clock_read", clock=repr(clock), seconds=seconds)
    return seconds
