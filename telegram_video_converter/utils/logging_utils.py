"""RU: Настройка логирования для CLI конвертера.

EN: Logging setup for the converter CLI.
"""

from __future__ import annotations

import logging
from typing import Final

import coloredlogs

DEFAULT_LOGGER_NAME: Final = "telegram_video_converter"
DEFAULT_FORMAT: Final = "%(levelname)s %(message)s"


def setup_logging(*, verbose: bool = False, quiet: bool = False) -> logging.Logger:
    """RU: Настраивает логгер пакета c учётом флагов --verbose/--quiet.

    EN: Configure the package logger according to --verbose/--quiet.
    """
    level = logging.INFO
    if quiet:
        level = logging.ERROR
    elif verbose:
        level = logging.DEBUG

    logger = logging.getLogger(DEFAULT_LOGGER_NAME)
    logger.setLevel(level)

    # RU: Избегаем двойных handlers при повторном вызове.
    # EN: Avoid double handlers if called multiple times.
    if logger.handlers:
        for handler in logger.handlers:
            handler.setLevel(level)
        return logger

    coloredlogs.install(level=level, logger=logger, fmt=DEFAULT_FORMAT)
    return logger
