# game_maths/maths/layout.py
# ---------------------------------------------------------------
# Проверка логических индексов и отображение (row, col) -> слот
# хранилища.  Матрица адресуется построчно (row-major):
#
#     [ 0 1 2 ]
#     [ 3 4 5 ]
#     [ 6 7 8 ]
#
# а хранится по столбцам (column-major), n[col][row]:
#
#     n[0] = [0 3 6]   n[1] = [1 4 7]   n[2] = [2 5 8]
#
# Все аксессоры Matrix3D обязаны ходить только через storage_slot().
# ---------------------------------------------------------------

import operator
from typing import Tuple

from game_maths.maths.errors import IndexOutOfRange

DIM = 3


def check_index(value, axis: str = "index") -> int:
    """Вернуть индекс как int, если он в 0..DIM-1, иначе IndexOutOfRange.

    Отрицательные индексы не «заворачиваются», значения не обрезаются.
    """
    idx = operator.index(value)
    if not 0 <= idx < DIM:
        raise IndexOutOfRange(axis, idx)
    return idx


def storage_slot(row, col) -> Tuple[int, int]:
    """Логический адрес (row, col) -> физический слот [col][row]."""
    r = check_index(row, "row")
    c = check_index(col, "col")
    return c, r
