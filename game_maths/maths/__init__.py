"""
Математический суб‑пакет: Vector3D, Matrix3D.
"""

from game_maths.maths.errors import IndexOutOfRange, MathsError, ShortInputError
from game_maths.maths.layout import DIM, storage_slot
from game_maths.maths.vector3d import Vector3D
from game_maths.maths.matrix3d import Matrix3D

__all__ = [
    "Vector3D",
    "Matrix3D",
    "MathsError",
    "IndexOutOfRange",
    "ShortInputError",
    "DIM",
    "storage_slot",
]
