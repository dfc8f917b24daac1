# -*- coding: utf-8 -*-
# game_maths/maths/vector3d.py
"""
Трёхмерный вектор (float64) на базе NumPy.

Индексы: 0 -> x, 1 -> y, 2 -> z.  Обычная индексация `v[i]` падает сразу
(IndexOutOfRange), для «внешних» индексов есть `v.get(i, default)`.
"""

import math
import numbers
from typing import Iterator, Optional, Sequence, Tuple

import numpy as np

from game_maths.maths.errors import ShortInputError
from game_maths.maths.layout import DIM, check_index


class Vector3D:
    __slots__ = ("_v",)
    # numpy-скаляр слева (np.float64 * v) должен уйти в __rmul__
    __array_ufunc__ = None

    def __init__(self, x: float = 0.0, y: float = 0.0, z: float = 0.0):
        self._v = np.array([x, y, z], dtype=np.float64)

    # -------------------------------------------------
    # конструкторы
    # -------------------------------------------------
    @staticmethod
    def zero() -> "Vector3D":
        return Vector3D()

    @staticmethod
    def from_slice(values: Sequence[float]) -> "Vector3D":
        """Первые три элемента последовательности (длина >= 3)."""
        arr = np.asarray(values, dtype=np.float64)
        if arr.ndim != 1:
            raise ValueError(f"expected a flat sequence, got shape {arr.shape}")
        if arr.shape[0] < DIM:
            raise ShortInputError(DIM, arr.shape[0])
        return Vector3D(*arr[:DIM])

    @staticmethod
    def from_array(values: Sequence[float]) -> "Vector3D":
        """Ровно три элемента: list, tuple или ndarray.

        В отличие от from_slice, лишние элементы не отбрасываются:
        длина > 3 -> ValueError, длина < 3 -> ShortInputError.
        """
        arr = np.asarray(values, dtype=np.float64).reshape(-1)
        if arr.shape[0] < DIM:
            raise ShortInputError(DIM, arr.shape[0])
        if arr.shape[0] > DIM:
            raise ValueError(f"expected {DIM} values, got {arr.shape[0]}")
        return Vector3D(*arr)

    def copy(self) -> "Vector3D":
        return Vector3D(*self._v)

    # -------------------------------------------------
    # свойства с сеттерами
    # -------------------------------------------------
    @property
    def x(self) -> float:
        return float(self._v[0])

    @x.setter
    def x(self, value: float) -> None:
        self._v[0] = float(value)

    @property
    def y(self) -> float:
        return float(self._v[1])

    @y.setter
    def y(self, value: float) -> None:
        self._v[1] = float(value)

    @property
    def z(self) -> float:
        return float(self._v[2])

    @z.setter
    def z(self, value: float) -> None:
        self._v[2] = float(value)

    # -------------------------------------------------
    # индексация
    # -------------------------------------------------
    def __getitem__(self, index: int) -> float:
        return float(self._v[check_index(index)])

    def __setitem__(self, index: int, value: float) -> None:
        self._v[check_index(index)] = float(value)

    def get(self, index: int, default: Optional[float] = None) -> Optional[float]:
        """Проверяемое чтение: вне 0..2 возвращает `default`."""
        try:
            return self[index]
        except IndexError:
            return default

    def __len__(self) -> int:
        return DIM

    def __iter__(self) -> Iterator[float]:
        return iter(self.to_tuple())

    # -------------------------------------------------
    # арифметика со скаляром
    # -------------------------------------------------
    def __mul__(self, scalar: float) -> "Vector3D":
        if not isinstance(scalar, numbers.Real):
            return NotImplemented
        with np.errstate(all="ignore"):
            return Vector3D(*(self._v * scalar))

    __rmul__ = __mul__

    def __truediv__(self, scalar: float) -> "Vector3D":
        if not isinstance(scalar, numbers.Real):
            return NotImplemented
        # деление на ноль -> inf/nan, как в IEEE-754
        with np.errstate(all="ignore"):
            return Vector3D(*(self._v / np.float64(scalar)))

    def __imul__(self, scalar: float) -> "Vector3D":
        if not isinstance(scalar, numbers.Real):
            return NotImplemented
        with np.errstate(all="ignore"):
            self._v *= scalar
        return self

    def __itruediv__(self, scalar: float) -> "Vector3D":
        if not isinstance(scalar, numbers.Real):
            return NotImplemented
        with np.errstate(all="ignore"):
            self._v /= np.float64(scalar)
        return self

    # -------------------------------------------------
    # арифметика вектор-вектор (не меняет исходный объект)
    # -------------------------------------------------
    def __add__(self, other: "Vector3D") -> "Vector3D":
        if not isinstance(other, Vector3D):
            return NotImplemented
        return Vector3D(*(self._v + other._v))

    def __sub__(self, other: "Vector3D") -> "Vector3D":
        if not isinstance(other, Vector3D):
            return NotImplemented
        return Vector3D(*(self._v - other._v))

    def __neg__(self) -> "Vector3D":
        return Vector3D(*(-self._v))

    # -------------------------------------------------
    # вспомогательные методы
    # -------------------------------------------------
    def dot(self, other: "Vector3D") -> float:
        return float(np.dot(self._v, other._v))

    def cross(self, other: "Vector3D") -> "Vector3D":
        return Vector3D(*np.cross(self._v, other._v))

    def length(self) -> float:
        return float(np.linalg.norm(self._v))

    def normalized(self) -> "Vector3D":
        n = self.length()
        if n == 0.0:
            return Vector3D()
        return Vector3D(*(self._v / n))

    def isclose(self, other: "Vector3D", rel_tol: float = 1e-9,
                abs_tol: float = 0.0) -> bool:
        """Покомпонентное сравнение с допуском (math.isclose)."""
        return all(
            math.isclose(a, b, rel_tol=rel_tol, abs_tol=abs_tol)
            for a, b in zip(self, other)
        )

    # -------------------------------------------------
    # сравнение
    # -------------------------------------------------
    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Vector3D):
            return NotImplemented
        # z сравнивается с other.z, а не сам с собой
        return (self.x == other.x
                and self.y == other.y
                and self.z == other.z)

    __hash__ = None  # изменяемый объект

    # -------------------------------------------------
    # преобразования
    # -------------------------------------------------
    def as_array(self) -> np.ndarray:
        """Копия 3‑элементного массива float64."""
        return self._v.copy()

    def as_array_f32(self) -> np.ndarray:
        """Копия в float32 (с потерей точности)."""
        with np.errstate(all="ignore"):
            return self._v.astype(np.float32)

    def to_tuple(self) -> Tuple[float, float, float]:
        return tuple(self._v.tolist())

    def __repr__(self) -> str:
        return f"Vector3D(x={self.x!r}, y={self.y!r}, z={self.z!r})"
