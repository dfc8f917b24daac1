# game_maths/maths/matrix3d.py
"""
Матрица 3×3 (float64).

Хранение – по столбцам (column-major, `_n[col][row]`), адресация –
по строкам: `m[row, col]`.  Перевод одного в другое делает только
`layout.storage_slot`.
"""

from typing import Optional, Sequence, Tuple

import numpy as np

from game_maths.maths.layout import DIM, check_index, storage_slot
from game_maths.maths.vector3d import Vector3D


class Matrix3D:
    __slots__ = ("_n",)
    __array_ufunc__ = None

    def __init__(self, *values: float):
        """Matrix3D() – нулевая матрица; Matrix3D(n00, n01, …, n22) –
        девять значений в порядке чтения строк."""
        self._n = np.zeros((DIM, DIM), dtype=np.float64)
        if not values:
            return
        if len(values) != DIM * DIM:
            raise TypeError(
                f"Matrix3D expects 0 or {DIM * DIM} values, got {len(values)}"
            )
        for i, value in enumerate(values):
            self._n[storage_slot(*divmod(i, DIM))] = float(value)

    # -------------------------------------------------
    # конструкторы
    # -------------------------------------------------
    @staticmethod
    def zero() -> "Matrix3D":
        return Matrix3D()

    @staticmethod
    def identity() -> "Matrix3D":
        m = Matrix3D()
        for i in range(DIM):
            m[i, i] = 1.0
        return m

    @staticmethod
    def from_rows(v0: Vector3D, v1: Vector3D, v2: Vector3D) -> "Matrix3D":
        """Строка i матрицы = компоненты vi: m[i, j] == vi[j]."""
        m = Matrix3D()
        for row, vec in enumerate((v0, v1, v2)):
            for col in range(DIM):
                m[row, col] = vec[col]
        return m

    @staticmethod
    def from_array(rows: Sequence[Sequence[float]]) -> "Matrix3D":
        """Из вложенного списка / ndarray 3×3 в порядке строк."""
        arr = np.asarray(rows, dtype=np.float64)
        if arr.shape != (DIM, DIM):
            raise ValueError(f"expected shape {(DIM, DIM)}, got {arr.shape}")
        return Matrix3D(*arr.reshape(-1))

    @staticmethod
    def index_test() -> "Matrix3D":
        """Эталон для проверки адресации: 0..8 по строкам.

        [ 0 1 2 ]
        [ 3 4 5 ]
        [ 6 7 8 ]
        """
        return Matrix3D(0.0, 1.0, 2.0,
                        3.0, 4.0, 5.0,
                        6.0, 7.0, 8.0)

    def copy(self) -> "Matrix3D":
        m = Matrix3D()
        m._n[...] = self._n
        return m

    # -------------------------------------------------
    # индексация (row-major)
    # -------------------------------------------------
    @staticmethod
    def _key(key) -> Tuple[int, int]:
        if not isinstance(key, tuple) or len(key) != 2:
            raise TypeError("Matrix3D index must be a (row, col) pair")
        return storage_slot(*key)

    def __getitem__(self, key: Tuple[int, int]) -> float:
        return float(self._n[self._key(key)])

    def __setitem__(self, key: Tuple[int, int], value: float) -> None:
        self._n[self._key(key)] = float(value)

    def get(self, row: int, col: int,
            default: Optional[float] = None) -> Optional[float]:
        """Проверяемое чтение: вне 0..2 возвращает `default`."""
        try:
            return self[row, col]
        except IndexError:
            return default

    def row(self, index: int) -> Vector3D:
        r = check_index(index, "row")
        return Vector3D(*(self[r, c] for c in range(DIM)))

    def column(self, index: int) -> Vector3D:
        c = check_index(index, "col")
        return Vector3D(*(self[r, c] for r in range(DIM)))

    def transposed(self) -> "Matrix3D":
        m = Matrix3D()
        for r in range(DIM):
            for c in range(DIM):
                m[c, r] = self[r, c]
        return m

    # -------------------------------------------------
    # сравнение
    # -------------------------------------------------
    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Matrix3D):
            return NotImplemented
        return bool(np.array_equal(self._n, other._n))

    __hash__ = None

    # -------------------------------------------------
    # преобразования
    # -------------------------------------------------
    def as_array(self) -> np.ndarray:
        """Копия 3×3 в порядке строк (логический вид)."""
        return np.array([[self[r, c] for c in range(DIM)] for r in range(DIM)],
                        dtype=np.float64)

    def storage(self) -> np.ndarray:
        """Копия физического хранилища: storage()[col][row]."""
        return self._n.copy()

    def to_gl(self) -> np.ndarray:
        """Плоский float32[9] по столбцам – как ждёт glUniformMatrix3fv."""
        return self._n.astype(np.float32).reshape(-1)

    def __repr__(self) -> str:
        return f"Matrix3D({self.as_array().tolist()})"

    def __str__(self) -> str:
        from game_maths.utils.formatting import format_grid
        return format_grid(self)
