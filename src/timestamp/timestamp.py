"""Timestamp — композитный снапшот для заголовка HTTP Date.

RFC 9110, 5.6.7: IMF-fixdate = day-name "," SP date1 SP time-of-day SP GMT
    Sun, 06 Nov 1994 08:49:37 GMT

Снапшот хранит CalendarDate, TimeOfDay и абсолютные секунды от эпохи.
Обновление инкрементальное: дата продвигается на разницу секунд с прошлого
снапшота, время суток заново выводится из абсолютного значения.
"""

from typing import Optional

import structlog
from pydantic import BaseModel, Field, model_validator

from src.core.domain.date import CalendarDate
from src.core.domain.time_of_day import TimeOfDay
from src.core.domain.units import validate_non_negative_int
from src.timestamp.clock import ClockSource, read_epoch_seconds

logger = structlog.get_logger(component="timestamp")

# Суффикс зоны: заголовок всегда в UTC
GMT_SUFFIX = "GMT"


class Timestamp(BaseModel):
    """
    Дата, время суток и секунды от эпохи.

    Default — эпоха Unix: "Thu, 01 Jan 1970 00:00:00 GMT".

    Инвариант (проверяется при прямом конструировании):
    date == CalendarDate().skip(seconds), time == TimeOfDay.from_seconds(seconds),
    откуда date.residual_seconds + time.day_seconds == seconds.
    set() строит результат через _advance() без повторной проверки.

    Example:
        >>> ts = Timestamp.new()
        >>> header = ts.for_header()
        >>> # ...
        >>> header = ts.now().for_header()
    """

    date: CalendarDate = Field(default_factory=CalendarDate, description="Календарная дата")
    time: TimeOfDay = Field(default_factory=TimeOfDay, description="Время суток")
    seconds: int = Field(default=0, ge=0, description="Секунды от эпохи Unix")

    model_config = {"frozen": True}

    @model_validator(mode="after")
    def validate_consistency(self) -> "Timestamp":
        """Дата и время суток согласованы с абсолютными секундами."""
        if self.date.residual_seconds + self.time.day_seconds != self.seconds:
            raise ValueError(
                f"date.residual_seconds ({self.date.residual_seconds}) + "
                f"time.day_seconds ({self.time.day_seconds}) != seconds ({self.seconds})"
            )
        if self.time != TimeOfDay.from_seconds(self.seconds):
            raise ValueError(
                f"time {self.time.for_header()} does not match seconds {self.seconds}"
            )
        expected_date = CalendarDate().skip(self.seconds)
        if self.date != expected_date:
            raise ValueError(
                f"date {self.date.for_header()} does not match seconds {self.seconds} "
                f"(expected {expected_date.for_header()})"
            )
        return self

    # =========================================================================
    # CONSTRUCTION
    # =========================================================================

    @classmethod
    def new(cls, clock: Optional[ClockSource] = None) -> "Timestamp":
        """
        Снапшот текущего момента (продвижение от эпохи).

        Raises:
            ClockError: Если часы недоступны или раньше эпохи
        """
        return cls().now(clock)

    @staticmethod
    def raw(clock: Optional[ClockSource] = None) -> int:
        """
        Текущие секунды от эпохи.

        Raises:
            ClockError: Если часы недоступны или раньше эпохи
        """
        return read_epoch_seconds(clock)

    # =========================================================================
    # UPDATE
    # =========================================================================

    def now(self, clock: Optional[ClockSource] = None) -> "Timestamp":
        """
        Продвижение к текущему моменту.

        Args:
            clock: Источник времени (default: SystemClock)

        Returns:
            Новый Timestamp

        Raises:
            ClockError: Если часы недоступны или раньше эпохи
            ValueError: Если часы показывают время раньше self.seconds
        """
        return self.set(self.raw(clock))

    def set(self, seconds: int) -> "Timestamp":
        """
        Продвижение к абсолютному значению seconds.

        Дата продвигается на (seconds - self.seconds), время суток
        выводится из seconds. Исходный снапшот не меняется.

        Args:
            seconds: Секунды от эпохи, не меньше self.seconds

        Returns:
            Новый Timestamp

        Raises:
            ValueError: Если seconds отрицательный или меньше self.seconds
        """
        validate_non_negative_int(seconds, "seconds")

        if seconds < self.seconds:
            raise ValueError(
                f"Cannot move timestamp backwards: {seconds} < {self.seconds}"
            )

        updated = self._advance(seconds)

        logger.debug("timestamp_set", previous_seconds=self.seconds, seconds=seconds)
        return updated

    def _advance(self, seconds: int) -> "Timestamp":
        # Поля выведены из согласованного self: полная проверка
        # (продвижение от эпохи) не нужна
        return Timestamp.model_construct(
            date=self.date.skip(seconds - self.seconds),
            time=TimeOfDay.from_seconds(seconds),
            seconds=seconds,
        )

    # =========================================================================
    # RENDERING
    # =========================================================================

    def for_header(self) -> str:
        """Значение заголовка HTTP Date (IMF-fixdate)."""
        return f"{self.date.for_header()} {self.time.for_header()} {GMT_SUFFIX}"

    def __str__(self) -> str:
        return self.for_header()
