# -*- coding: utf-8 -*-
from game_maths.maths import Vector3D
from game_maths.utils import format_grid, format_storage, format_vector


def test_format_grid_row_major(index_matrix):
    assert format_grid(index_matrix) == (
        "[ 0.0 1.0 2.0 ]\n"
        "[ 3.0 4.0 5.0 ]\n"
        "[ 6.0 7.0 8.0 ]"
    )


def test_format_grid_precision(index_matrix):
    assert format_grid(index_matrix, precision=2).splitlines()[0] == \
        "[ 0.00 1.00 2.00 ]"


def test_format_storage_column_major(index_matrix):
    assert format_storage(index_matrix, precision=0) == (
        "col0: [ 0 3 6 ]\n"
        "col1: [ 1 4 7 ]\n"
        "col2: [ 2 5 8 ]"
    )


def test_format_vector():
    assert format_vector(Vector3D(1.0, 2.5, -3.0)) == "(1.0, 2.5, -3.0)"
    assert format_vector(Vector3D(1.0, 2.5, -3.0), precision=1) == \
        "(1.0, 2.5, -3.0)"
