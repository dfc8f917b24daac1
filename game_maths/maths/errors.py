# game_maths/maths/errors.py
"""
Иерархия исключений математического суб‑пакета.

* IndexOutOfRange – логический индекс вне 0..2 (одновременно IndexError).
* ShortInputError – в from_slice/from_array передано меньше 3 значений
  (одновременно ValueError).
"""


class MathsError(Exception):
    """Базовое исключение game_maths."""


class IndexOutOfRange(MathsError, IndexError):
    def __init__(self, axis: str, index: int):
        self.axis = axis
        self.index = index
        super().__init__(f"{axis} {index} out of range 0..2")


class ShortInputError(MathsError, ValueError):
    def __init__(self, expected: int, actual: int):
        self.expected = expected
        self.actual = actual
        super().__init__(f"expected at least {expected} values, got {actual}")
