# -*- coding: utf-8 -*-
import itertools

import numpy as np
import pytest

from game_maths.maths import DIM, IndexOutOfRange, storage_slot
from game_maths.maths.layout import check_index


def test_storage_slot_transposes():
    for r, c in itertools.product(range(DIM), range(DIM)):
        assert storage_slot(r, c) == (c, r)


def test_storage_slot_accepts_numpy_ints():
    assert storage_slot(np.int64(1), np.uint8(2)) == (2, 1)


@pytest.mark.parametrize("value", [-1, 3, 100])
def test_check_index_rejects_without_wrapping(value):
    with pytest.raises(IndexOutOfRange):
        check_index(value)


def test_check_index_rejects_floats():
    with pytest.raises(TypeError):
        check_index(1.0)


def test_index_out_of_range_is_index_error():
    with pytest.raises(IndexError):
        storage_slot(0, 3)
