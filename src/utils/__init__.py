"""Структурированное логирование через structlog.

Логгеры модулей — ленивые прокси structlog.get_logger(component=...),
поэтому setup_logging() действует и после импорта библиотеки.
"""

import logging
from typing import Optional

import structlog
from structlog.typing import FilteringBoundLogger, Processor

from src.config import HttpDateSettings, settings as default_settings


def resolve_level(name: str) -> int:
    """
    Числовой уровень по имени ("debug", "WARN", ...).

    Неизвестное имя → INFO.
    """
    return logging.getLevelNamesMapping().get(name.upper(), logging.INFO)


def _renderer(config: HttpDateSettings) -> Processor:
    if config.log_format == "json":
        return structlog.processors.JSONRenderer()
    return structlog.dev.ConsoleRenderer(colors=False)


def setup_logging(config: Optional[HttpDateSettings] = None) -> None:
    """Настройка structlog.

    Console renderer для разработки, JSON для production. Вывод в stdout
    (PrintLoggerFactory), фильтрация по уровню без stdlib logging.

    Args:
        config: Настройки (default: модульный singleton src.config.settings)
    """
    config = config or default_settings

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            _renderer(config),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(resolve_level(config.log_level)),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(),
        cache_logger_on_first_use=False,
    )


def get_logger(name: Optional[str] = None) -> FilteringBoundLogger:
    """Логгер structlog, опционально привязанный к имени компонента."""
    if name:
        return structlog.get_logger(component=name)
    return structlog.get_logger()


__all__ = ["setup_logging", "get_logger", "resolve_level"]
