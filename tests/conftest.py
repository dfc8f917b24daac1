# -*- coding: utf-8 -*-
"""
conftest.py – общие фикстуры для тестов game_maths.
"""

import logging

import pytest

from game_maths.maths import Matrix3D, Vector3D
from game_maths.utils import Config, logger


@pytest.fixture
def index_matrix() -> Matrix3D:
    """Матрица 0..8 по строкам."""
    return Matrix3D.index_test()


@pytest.fixture
def rows():
    return (Vector3D(0.0, 1.0, 2.0),
            Vector3D(3.0, 4.0, 5.0),
            Vector3D(6.0, 7.0, 8.0))


@pytest.fixture
def config_path(tmp_path):
    """Путь к конфигу во временном каталоге; синглтон сбрасывается."""
    Config.reset()
    yield tmp_path / "game_maths.json"
    Config.reset()


@pytest.fixture
def clean_logger():
    """Снимает добавленные тестом хендлеры и возвращает уровень/propagate."""
    handlers = list(logger.handlers)
    level = logger.level
    propagate = logger.propagate
    yield logger
    for h in logger.handlers:
        if h not in handlers:
            logger.removeHandler(h)
            h.close()
    logger.setLevel(level if level else logging.NOTSET)
    logger.propagate = propagate
