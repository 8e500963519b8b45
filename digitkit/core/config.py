"""
Конфигурация digitkit

Настройки читаются из переменных окружения с префиксом DIGITKIT_
(и из .env, если он есть):
- DIGITKIT_BIGINT_ENABLED: публиковать ли big-integer API из
  digitkit.core.math (аналог сборки без GMP при false)
- DIGITKIT_LOG_LEVEL: уровень логгера пакета digitkit

Native-width API от настроек не зависит.
"""

import logging
from functools import lru_cache
from typing import Final

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

PACKAGE_LOGGER_NAME: Final[str] = "digitkit"

_LOG_LEVELS: Final[tuple[str, ...]] = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class DigitkitSettings(BaseSettings):
    """Настройки библиотеки."""

    bigint_enabled: bool = Field(
        default=True, description="Публиковать big-integer варианты разрядных операций"
    )
    # Проверяется в configure_logging: неверный уровень не ломает импорт API
    log_level: str = Field(default="WARNING", description="Уровень логгера digitkit")

    model_config = SettingsConfigDict(
        env_prefix="DIGITKIT_",
        env_file=".env",
        extra="ignore",
    )


@lru_cache()
def get_settings() -> DigitkitSettings:
    return DigitkitSettings()


def configure_logging(settings: DigitkitSettings | None = None) -> logging.Logger:
    """
    Установка уровня логгера пакета по настройкам.

    Handlers не добавляются: вывод настраивает приложение.

    Returns:
        Логгер пакета digitkit

    Raises:
        ValueError: Если log_level не является стандартным уровнем logging
    """
    if settings is None:
        settings = get_settings()

    level = settings.log_level.strip().upper()
    if level not in _LOG_LEVELS:
        raise ValueError(
            f"log_level must be one of {_LOG_LEVELS}, got {settings.log_level!r}"
        )

    package_logger = logging.getLogger(PACKAGE_LOGGER_NAME)
    package_logger.setLevel(level)
    return package_logger
