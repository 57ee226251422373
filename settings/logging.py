"""Logging configuration."""

import sys

from loguru import logger

from settings import LOG_DIR, LOG_LEVEL


def _is_event(record) -> bool:
    return record["message"].startswith("Event ")


def setup_logging(level: str = LOG_LEVEL, to_file: bool = True):
    """Configure console logging, plus a daily log and a JSON event audit trail on disk."""
    logger.remove()

    logger.add(
        sys.stderr,
        format="<green>{time:HH:mm:ss}</green> | <level>{level: <7}</level> | <level>{message}</level>",
        level=level,
        colorize=True,
    )

    if to_file:
        LOG_DIR.mkdir(exist_ok=True)
        logger.add(
            LOG_DIR / "election_{time:YYYY-MM-DD}.log",
            format="{time:YYYY-MM-DD HH:mm:ss} | {level: <7} | {name}:{function}:{line} | {message}",
            level="DEBUG",
            rotation="00:00",
            retention="30 days",
            compression="gz",
        )
        # One JSON line per published event
        logger.add(
            LOG_DIR / "events.jsonl",
            level="INFO",
            filter=_is_event,
            serialize=True,
        )
        logger.info("Logging to {}", LOG_DIR)

    return logger
