"""Timestamp — снапшоты для заголовка HTTP Date (IMF-fixdate).

- Timestamp: дата + время суток + секунды от эпохи
- Источники времени (SystemClock, FixedClock) и ClockError
"""

from .clock import (
    ClockError,
    ClockSource,
    FixedClock,
    SystemClock,
    read_epoch_seconds,
)
from .timestamp import GMT_SUFFIX, Timestamp

__all__ = [
    "Timestamp",
    "GMT_SUFFIX",
    "ClockError",
    "ClockSource",
    "SystemClock",
    "FixedClock",
    "read_epoch_seconds",
]
