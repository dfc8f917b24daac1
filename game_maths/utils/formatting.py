# game_maths/utils/formatting.py
# ---------------------------------------------------------------
# Текстовое представление векторов и матриц.  Работает только через
# публичный интерфейс (m[row, col], m.storage(), итерация вектора),
# поэтому сами типы про форматирование ничего не знают.
# ---------------------------------------------------------------

from typing import Optional

DIM = 3


def _num(value: float, precision: Optional[int]) -> str:
    if precision is None:
        return repr(float(value))
    return f"{value:.{precision}f}"


def format_grid(m, precision: Optional[int] = None) -> str:
    """Матрица по строкам:

    [ 0.0 1.0 2.0 ]
    [ 3.0 4.0 5.0 ]
    [ 6.0 7.0 8.0 ]
    """
    lines = []
    for r in range(DIM):
        cells = " ".join(_num(m[r, c], precision) for c in range(DIM))
        lines.append(f"[ {cells} ]")
    return "\n".join(lines)


def format_storage(m, precision: Optional[int] = None) -> str:
    """Диагностика: как матрица лежит в памяти (по столбцам)."""
    raw = m.storage()
    lines = []
    for c in range(DIM):
        cells = " ".join(_num(v, precision) for v in raw[c])
        lines.append(f"col{c}: [ {cells} ]")
    return "\n".join(lines)


def format_vector(v, precision: Optional[int] = None) -> str:
    return "(" + ", ".join(_num(x, precision) for x in v) + ")"
