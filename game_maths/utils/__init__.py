# game_maths/utils/__init__.py
"""
Пакет утилит.

Экспортируем:
    * logger      – готовый объект logging.Logger (с level INFO)
    * Config      – JSON‑конфигурация
    * format_*    – текстовое представление векторов и матриц
"""

from .logger import logger, add_file_handler, set_level
from .config import Config, DEFAULT_CONFIG
from .formatting import format_grid, format_storage, format_vector

__all__ = [
    "logger",
    "add_file_handler",
    "set_level",
    "Config",
    "DEFAULT_CONFIG",
    "format_grid",
    "format_storage",
    "format_vector",
]
