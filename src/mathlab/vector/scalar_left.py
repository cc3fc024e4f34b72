"""
Num-Vec — бинарные операции со скаляром слева

f_num_vec(x, ys)[i] == f(x, ys[i]). Скаляр всегда первый аргумент функции,
что важно для некоммутативных операций (subt, divi, pow, rem, nrt).
"""

from typing import Sequence

from mathlab.core.math import arithmetic
from mathlab.vector._lift import num_vec


def add_num_vec(x: float, ys: Sequence[float]) -> list[float]:
    return num_vec(arithmetic.add, x, ys)


def subt_num_vec(x: float, ys: Sequence[float]) -> list[float]:
    """
    x - ys[i] для каждого элемента.

    Examples:
        >>> subt_num_vec(0.3, [0.0, 0.1, 0.2, 0.3])
        [0.3, 0.19999999999999998, 0.09999999999999998, 0.0]
    """
    return num_vec(arithmetic.subt, x, ys)


def mult_num_vec(x: float, ys: Sequence[float]) -> list[float]:
    return num_vec(arithmetic.mult, x, ys)


def divi_num_vec(x: float, ys: Sequence[float]) -> list[float]:
    """x / ys[i]; деление на 0.0 даёт ±Infinity или NaN."""
    return num_vec(arithmetic.divi, x, ys)


def pow_num_vec(x: float, ys: Sequence[float]) -> list[float]:
    return num_vec(arithmetic.pow, x, ys)


def rem_num_vec(x: float, ys: Sequence[float]) -> list[float]:
    return num_vec(arithmetic.rem, x, ys)


def nrt_num_vec(x: float, ys: Sequence[float]) -> list[float]:
    """Корень степени ys[i] из x."""
    return num_vec(arithmetic.nrt, x, ys)


def perimeter_num_vec(x: float, ys: Sequence[float]) -> list[float]:
    return num_vec(arithmetic.perimeter, x, ys)
