"""
IEEE-754 scalar evaluation.

Нативные операции Python float не следуют IEEE-754 в исключительных случаях:
`1.0 / 0.0` → ZeroDivisionError, `math.log(0.0)` → ValueError,
`math.exp(1000.0)` → OverflowError, `math.sin(inf)` → ValueError.

Обычный путь вычисляется функцией math (libm платформы, корректное округление
результата сохраняется). Если math отказывается вычислять, тот же аргумент
передаётся соответствующему numpy ufunc, который возвращает NaN / ±Infinity.
Предупреждения numpy подавляются: soft failure — ожидаемый результат, а не ошибка.
"""

import operator
from typing import Callable

import numpy as np


def ufunc(func: np.ufunc, *args: float) -> float:
    """
    Вычисление numpy ufunc над скалярами float64.

    Используется для точных операций (floor, ceil, trunc), где math возвращает int
    и теряет знак нуля.

    Examples:
        >>> ufunc(np.trunc, -0.3)
        -0.0
    """
    with np.errstate(all="ignore"):
        return float(func(*(np.float64(a) for a in args)))


def evaluate(exact: Callable[..., float], fallback: np.ufunc, *args: float) -> float:
    """
    Вычисление с IEEE-754 семантикой в исключительных случаях.

    Args:
        exact: Функция stdlib (math.sin, math.pow, operator.truediv, ...)
        fallback: numpy ufunc с той же семантикой (np.sin, np.power, np.divide, ...)
        *args: Аргументы

    Returns:
        exact(*args), либо NaN / ±Infinity из fallback, если exact поднял исключение

    Examples:
        >>> evaluate(math.log, np.log, 0.0)
        -inf
        >>> evaluate(math.sqrt, np.sqrt, -1.0)
        nan
    """
    try:
        return exact(*args)
    except (ValueError, OverflowError, ZeroDivisionError):
        # Выход из домена или диапазона: результат берётся из numpy
        return ufunc(fallback, *args)


def divide(numerator: float, denominator: float) -> float:
    """IEEE деление: x/±0.0 → ±Infinity, 0/0 → NaN, знак нуля учитывается."""
    return evaluate(operator.truediv, np.divide, numerator, denominator)
