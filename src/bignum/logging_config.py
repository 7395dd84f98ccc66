"""
Structured Logging Configuration

JSON-форматирование записей логгера `bignum`. Библиотека сама никогда
не устанавливает обработчики; setup_logging() вызывается приложением
(например, CLI bignum-keymap).
"""

import json
import logging
from datetime import datetime, timezone

LOGGER_NAME = "bignum"


class JSONFormatter(logging.Formatter):
    """JSON formatter: одна запись — одна строка"""

    def format(self, record: logging.LogRecord) -> str:
        log_entry = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }

        if record.exc_info:
            log_entry["exception"] = self.formatException(record.exc_info)

        return json.dumps(log_entry, default=str)


def setup_logging(level: str = "WARNING", logger_name: str = LOGGER_NAME) -> logging.Logger:
    """
    Настройка JSON-логирования.

    Args:
        level: Уровень (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        logger_name: Имя логгера

    Returns:
        Настроенный логгер

    Raises:
        ValueError: Если level не является известным уровнем
    """
    numeric_level = logging.getLevelName(level.upper())
    if not isinstance(numeric_level, int):
        raise ValueError(f"Unknown log level: {level}")

    logger = logging.getLogger(logger_name)

    # Удаляем существующие обработчики, чтобы избежать дублей
    for handler in logger.handlers[:]:
        logger.removeHandler(handler)

    handler = logging.StreamHandler()
    handler.setFormatter(JSONFormatter())
    logger.addHandler(handler)
    logger.setLevel(numeric_level)
    logger.propagate = False

    return logger


def get_logger(name: str = LOGGER_NAME) -> logging.Logger:
    """Get logger instance"""
    return logging.getLogger(name)
