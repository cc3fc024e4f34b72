"""
Vec-Num — бинарные операции со скаляром справа

f_vec_num(xs, y)[i] == f(xs[i], y).
"""

from typing import Sequence

from mathlab.core.math import arithmetic
from mathlab.vector._lift import vec_num


def add_vec_num(xs: Sequence[float], y: float) -> list[float]:
    return vec_num(arithmetic.add, xs, y)


def subt_vec_num(xs: Sequence[float], y: float) -> list[float]:
    """
    xs[i] - y для каждого элемента.

    Examples:
        >>> subt_vec_num([0.0, 0.1, 0.2, 0.3], 0.3)
        [-0.3, -0.19999999999999998, -0.09999999999999998, 0.0]
    """
    return vec_num(arithmetic.subt, xs, y)


def mult_vec_num(xs: Sequence[float], y: float) -> list[float]:
    return vec_num(arithmetic.mult, xs, y)


def divi_vec_num(xs: Sequence[float], y: float) -> list[float]:
    return vec_num(arithmetic.divi, xs, y)


def pow_vec_num(xs: Sequence[float], y: float) -> list[float]:
    """
    xs[i] в степени y.

    Examples:
        >>> pow_vec_num([3.0, 0.0, 4.0, float("inf")], 2.0)
        [9.0, 0.0, 16.0, inf]
    """
    return vec_num(arithmetic.pow, xs, y)


def rem_vec_num(xs: Sequence[float], y: float) -> list[float]:
    return vec_num(arithmetic.rem, xs, y)


def nrt_vec_num(xs: Sequence[float], n: float) -> list[float]:
    """Корень степени n из каждого элемента."""
    return vec_num(arithmetic.nrt, xs, n)


def perimeter_vec_num(xs: Sequence[float], y: float) -> list[float]:
    return vec_num(arithmetic.perimeter, xs, y)
