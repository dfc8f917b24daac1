"""
game_maths – векторы и матрицы 3×3 для игрового / графического кода.
"""

from game_maths.utils import logger
from game_maths.maths import (
    Vector3D,
    Matrix3D,
    MathsError,
    IndexOutOfRange,
    ShortInputError,
)

__version__ = "0.1.0"

__all__ = [
    "Vector3D",
    "Matrix3D",
    "MathsError",
    "IndexOutOfRange",
    "ShortInputError",
    "logger",
]
