"""Конфигурация — загружается из .env / переменных окружения через pydantic-settings.

Переменные окружения с префиксом HTTPDATE_ (например, HTTPDATE_LOG_LEVEL=DEBUG).
Календарная арифметика настроек не имеет: конфигурируется только логирование.
"""

from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings


class HttpDateSettings(BaseSettings):
    """Все настройки библиотеки."""

    # --- Logging ---
    log_level: str = Field(default="INFO", description="Уровень логирования")
    log_format: Literal["console", "json"] = Field(
        default="console",
        description="Формат логов: 'console' для разработки, 'json' для production",
    )

    model_config = {
        "env_prefix": "HTTPDATE_",
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "extra": "ignore",
    }


# Singleton настроек (immutable снапшот окружения на момент импорта)
settings = HttpDateSettings()
