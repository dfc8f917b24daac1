# game_maths/utils/logger.py
# ---------------------------------------------------------------
# Минимальный логгер: консоль через basicConfig + опциональный файл.
# ---------------------------------------------------------------

import logging
from pathlib import Path
from typing import Union

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def init_logger():
    logging.basicConfig(
        level=logging.INFO,
        format=LOG_FORMAT,
    )
    return logging.getLogger("GameMaths")


logger = init_logger()


def set_level(level: Union[str, int]) -> None:
    """Уровень логгера: имя ("DEBUG") или число."""
    if isinstance(level, str):
        resolved = logging.getLevelName(level.upper())
        if not isinstance(resolved, int):
            raise ValueError(f"Unknown log level: {level}")
        level = resolved
    logger.setLevel(level)


def add_file_handler(path: Union[str, Path],
                     level: Union[str, int] = logging.DEBUG) -> logging.FileHandler:
    """Дублировать лог в файл (каталог создаётся при необходимости)."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    handler = logging.FileHandler(path, encoding="utf-8")
    handler.setLevel(level if isinstance(level, int) else level.upper())
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logger.addHandler(handler)
    logger.debug(f"[Logger] Writing log to {path}")
    return handler
