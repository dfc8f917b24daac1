# game_maths/__main__.py
"""
Демонстрация: настраивает лог (консоль + файл) и печатает примеры.

    python -m game_maths
"""

import sys

from game_maths.maths import Matrix3D, Vector3D
from game_maths.utils import (
    Config,
    add_file_handler,
    format_grid,
    format_storage,
    format_vector,
    logger,
    set_level,
)


def setup_logging(cfg: Config) -> None:
    log_cfg = cfg["logging"]
    set_level(log_cfg.get("level", "DEBUG"))
    if log_cfg.get("file"):
        add_file_handler(log_cfg["file"], log_cfg.get("level", "DEBUG"))
    if not log_cfg.get("console", True):
        logger.propagate = False


def main(config_path: str = "game_maths.json") -> int:
    cfg = Config(config_path)
    setup_logging(cfg)
    precision = cfg["display"].get("precision")

    logger.info("Game Maths: Hello world!")

    v = Vector3D(1.0, 2.0, 3.0)
    logger.info(f"Vector: {format_vector(v, precision)}")
    logger.info(f"Vector * 2: {format_vector(v * 2.0, precision)}")

    m = Matrix3D.index_test()
    logger.info(f"Matrix (row-major):\n{format_grid(m, precision)}")
    logger.debug(f"Matrix storage (column-major):\n{format_storage(m, precision)}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
