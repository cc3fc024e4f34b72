"""
Vec-Vec — попарные бинарные операции

f_vec_vec(xs, ys)[i] == f(xs[i], ys[i]).

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. len(result) == min(len(xs), len(ys)): более короткая последовательность
   определяет длину результата, несовпадение длин не является ошибкой
2. Входные последовательности не изменяются
"""

from typing import Sequence

from mathlab.core.math import arithmetic
from mathlab.vector._lift import zip_vec


def add_vec_vec(xs: Sequence[float], ys: Sequence[float]) -> list[float]:
    """
    Попарная сумма.

    Examples:
        >>> add_vec_vec([0.0, 0.1, 0.2, 0.3], [0.3, 0.2, 0.1, 0.0])
        [0.3, 0.30000000000000004, 0.30000000000000004, 0.3]
    """
    return zip_vec(arithmetic.add, xs, ys)


def subt_vec_vec(xs: Sequence[float], ys: Sequence[float]) -> list[float]:
    return zip_vec(arithmetic.subt, xs, ys)


def mult_vec_vec(xs: Sequence[float], ys: Sequence[float]) -> list[float]:
    return zip_vec(arithmetic.mult, xs, ys)


def divi_vec_vec(xs: Sequence[float], ys: Sequence[float]) -> list[float]:
    """
    Попарное деление; xs[i] / 0.0 даёт ±Infinity или NaN.

    Examples:
        >>> divi_vec_vec([0.0, 0.1, 0.2, 0.3], [0.3, 0.2, 0.1, 0.0])
        [0.0, 0.5, 2.0, inf]
    """
    return zip_vec(arithmetic.divi, xs, ys)


def pow_vec_vec(xs: Sequence[float], ys: Sequence[float]) -> list[float]:
    return zip_vec(arithmetic.pow, xs, ys)


def rem_vec_vec(xs: Sequence[float], ys: Sequence[float]) -> list[float]:
    """Попарный остаток fmod(xs[i], ys[i])."""
    return zip_vec(arithmetic.rem, xs, ys)


def nrt_vec_vec(xs: Sequence[float], ys: Sequence[float]) -> list[float]:
    return zip_vec(arithmetic.nrt, xs, ys)


def perimeter_vec_vec(xs: Sequence[float], ys: Sequence[float]) -> list[float]:
    return zip_vec(arithmetic.perimeter, xs, ys)
