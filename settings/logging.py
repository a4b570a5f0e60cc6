"""Logging configuration."""

import sys

from loguru import logger

from settings import ACCESS_TOKEN, API_KEY, LOG_DIR, LOG_LEVEL

CONSOLE_FORMAT = "<green>{time:HH:mm:ss}</green> | <level>{level: <7}</level> | <level>{message}</level>"
FILE_FORMAT = "{time:YYYY-MM-DD HH:mm:ss} | {level: <7} | {name}:{function}:{line} | {message}"


def _redact_secrets(record) -> None:
    """Mask upstream credentials if they ever end up in a message."""
    for secret in (API_KEY, ACCESS_TOKEN):
        if secret and secret in record["message"]:
            record["message"] = record["message"].replace(secret, "[REDACTED]")


def setup_logging(level: str = LOG_LEVEL, to_file: bool = True):
    """Configure console and optional daily-rotated file output."""
    logger.remove()
    logger.configure(patcher=_redact_secrets)

    logger.add(sys.stderr, format=CONSOLE_FORMAT, level=level, colorize=True)

    if to_file:
        LOG_DIR.mkdir(parents=True, exist_ok=True)
        logger.add(
            LOG_DIR / "survey_cache_{time:YYYY-MM-DD}.log",
            format=FILE_FORMAT,
            level="DEBUG",
            rotation="00:00",
            retention="7 days",
            compression="gz",
        )
        logger.info("Logging to {}", LOG_DIR)

    return logger
