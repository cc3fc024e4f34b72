"""
Classification — предикаты NaN / +Infinity / -Infinity

Модуль для классификации float значений двойной (f64) и одинарной (f32) точности.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. is_nan_* реализован через self-inequality (x != x), никогда через == NAN
2. is_inf_* / is_ninf_* сравнивают с sentinel-константами через ==
   (у ±Infinity единственный bit pattern)
"""

import numpy as np

from mathlab.core.constants import INF_F32, INF_F64, NINF_F32, NINF_F64

# =============================================================================
# SINGLE PRECISION (f32)
# =============================================================================


def is_nan_f32(x: np.float32) -> bool:
    """
    Проверка, является ли f32 значение NaN.

    Examples:
        >>> is_nan_f32(np.float32("nan"))
        True
        >>> is_nan_f32(np.float32(1.0))
        False
    """
    return bool(x != x)


def is_inf_f32(x: np.float32) -> bool:
    """Проверка, равно ли f32 значение +Infinity."""
    return bool(x == INF_F32)


def is_ninf_f32(x: np.float32) -> bool:
    """Проверка, равно ли f32 значение -Infinity."""
    return bool(x == NINF_F32)


# =============================================================================
# DOUBLE PRECISION (f64)
# =============================================================================


def is_nan_f64(x: float) -> bool:
    """
    Проверка, является ли f64 значение NaN.

    NaN — единственное значение, не равное самому себе.

    Examples:
        >>> is_nan_f64(float("nan"))
        True
        >>> is_nan_f64(float("inf"))
        False
    """
    return bool(x != x)


def is_inf_f64(x: float) -> bool:
    """Проверка, равно ли f64 значение +Infinity."""
    return bool(x == INF_F64)


def is_ninf_f64(x: float) -> bool:
    """Проверка, равно ли f64 значение -Infinity."""
    return bool(x == NINF_F64)
