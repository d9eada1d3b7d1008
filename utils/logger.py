import logging
import os
import sys
from datetime import datetime
from typing import Optional


def get_logger(
    name: str,
    console_level: str = "WARNING",
    file_level: str = "DEBUG",
    logs_dir: Optional[str] = "logs",
) -> logging.Logger:
    """
    Returns a logger with a console handler and a file handler.
    The console handler writes to stdout with the specified console_level, and the file handler uses file_level.
    Each run creates a new log file in logs_dir, named with an incremental index and timestamp.

    :param name: Logger name.
    :param console_level: Minimum log level for console output (e.g., "WARNING").
    :param file_level: Minimum log level for file output (e.g., "DEBUG").
    :param logs_dir: Folder for log files. If None, no file handler is attached.
    :return: A configured logging.Logger instance.
    """
    logger = logging.getLogger(name)
    if logger.handlers:
        return logger

    console_level_num = getattr(logging, console_level.upper(), logging.WARNING)
    file_level_num = getattr(logging, file_level.upper(), logging.DEBUG)

    _add_handler(
        logger,
        logging.StreamHandler(sys.stdout),
        console_level_num,
        "%(message)s",
    )
    if logs_dir is None:
        logger.setLevel(console_level_num)
        return logger

    logger.setLevel(min(console_level_num, file_level_num))
    _add_handler(
        logger,
        logging.FileHandler(_next_log_filename(logs_dir), encoding="utf-8"),
        file_level_num,
        "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
    return logger


def _next_log_filename(logs_dir: str) -> str:
    os.makedirs(logs_dir, exist_ok=True)
    existing_logs = [f for f in os.listdir(logs_dir) if f.endswith(".log")]
    log_count = len(existing_logs) + 1
    timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
    return os.path.join(logs_dir, f"log_{log_count}_{timestamp}.log")


def _add_handler(
    logger: logging.Logger, handler: logging.Handler, level: int, fmt: str
) -> None:
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(fmt))
    logger.addHandler(handler)
