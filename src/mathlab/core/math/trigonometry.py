"""
Trigonometry — тригонометрические функции с подавлением floating-point шума

Модуль содержит:
- Конверсию углов deg_to_rad / rad_to_deg
- Шесть семейств sin / cos / tan / csc / sec / cot, каждое в четырёх формах:
  радианы, градусы (*_deg), обратная (a*), обратная в градусах (a*_deg)

Подавление шума:
- Результат округляется fix(..., TRIG_DECIMALS), так что sin(π) читается как 0.0,
  а не 1.2e-16
- Near-zero snapping: при |x| <= SNAP_THRESHOLD функции sin / tan / asin / atan
  возвращают сам x, cos возвращает 1.0, acos возвращает π/2 (округлённое)

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Один порог SNAP_THRESHOLD (включительно) для всего семейства
2. csc / sec / cot / tan делят по IEEE-754: деление на ±0.0 даёт ±Infinity,
   знак нуля сохраняется fix(), поэтому tan_deg(90.0) == -Infinity
3. Выход из области определения (acos(2.0)) даёт NaN, а не исключение
4. *_deg(x) == f(deg_to_rad(x)); a*_deg(x) == rad_to_deg(a*(x))
"""

import math
from typing import Final

import numpy as np

from mathlab.core._ieee import divide, evaluate
from mathlab.core.config import DEFAULT_CONFIG
from mathlab.core.constants import H_PI, PI
from mathlab.core.math.rounding import fix, fix64

# =============================================================================
# ПАРАМЕТРЫ ТОЧНОСТИ
# =============================================================================

# Знаков после запятой в результатах тригонометрии
TRIG_DECIMALS: Final[int] = DEFAULT_CONFIG.trig_decimals

# Порог near-zero snapping (|x| <= SNAP_THRESHOLD)
SNAP_THRESHOLD: Final[float] = DEFAULT_CONFIG.snap_threshold


def _is_near_zero(x: float) -> bool:
    # NaN не проходит сравнение и идёт по обычному пути
    return math.fabs(x) <= SNAP_THRESHOLD


def _snap(x: float) -> float:
    return fix(x, TRIG_DECIMALS)


# =============================================================================
# КОНВЕРСИЯ УГЛОВ
# =============================================================================


def deg_to_rad(x: float) -> float:
    """
    Конверсия градусов в радианы: x·π/180, округлённое до TRIG_DECIMALS.

    Examples:
        >>> deg_to_rad(30.0)
        0.5235987756
        >>> deg_to_rad(180.0)
        3.1415926536
    """
    return _snap(x * PI / 180.0)


def rad_to_deg(x: float) -> float:
    """
    Конверсия радиан в градусы: x·180/π с эквализацией точности fix64.

    Examples:
        >>> rad_to_deg(0.5235987756)
        30.0
        >>> rad_to_deg(-6.2831853072)
        -360.0
    """
    return fix64(x * 180.0 / PI)


# =============================================================================
# SIN
# =============================================================================


def sin(x: float) -> float:
    """
    Синус (радианы).

    Examples:
        >>> sin(1e-11)
        1e-11
        >>> sin(0.5235987756)
        0.5
        >>> sin(3.1415926536)
        0.0
    """
    if _is_near_zero(x):
        return x
    return _snap(evaluate(math.sin, np.sin, x))


def sin_deg(x: float) -> float:
    """Синус угла в градусах."""
    return sin(deg_to_rad(x))


def asin(x: float) -> float:
    """
    Арксинус в радианах; |x| > 1 → NaN.

    Examples:
        >>> asin(0.5)
        0.5235987756
        >>> asin(-1.0)
        -1.5707963268
    """
    if _is_near_zero(x):
        return x
    return _snap(evaluate(math.asin, np.arcsin, x))


def asin_deg(x: float) -> float:
    """Арксинус в градусах."""
    return rad_to_deg(asin(x))


# =============================================================================
# COS
# =============================================================================


def cos(x: float) -> float:
    """
    Косинус (радианы).

    Examples:
        >>> cos(1e-10)
        1.0
        >>> cos(1e-4)
        0.999999995
        >>> cos(3.1415926536)
        -1.0
    """
    if _is_near_zero(x):
        return 1.0
    return _snap(evaluate(math.cos, np.cos, x))


def cos_deg(x: float) -> float:
    """Косинус угла в градусах."""
    return cos(deg_to_rad(x))


def acos(x: float) -> float:
    """
    Арккосинус в радианах; |x| > 1 → NaN.

    Examples:
        >>> acos(1e-11)
        1.5707963268
        >>> acos(-1.0)
        3.1415926536
    """
    if _is_near_zero(x):
        return _snap(H_PI)
    return _snap(evaluate(math.acos, np.arccos, x))


def acos_deg(x: float) -> float:
    """Арккосинус в градусах."""
    return rad_to_deg(acos(x))


# =============================================================================
# TAN
# =============================================================================


def tan(x: float) -> float:
    """
    Тангенс как отношение округлённых sin(x) / cos(x).

    В нулях косинуса результат ±Infinity со знаком округлённого нуля.

    Examples:
        >>> tan(0.7853981634)
        1.0
        >>> tan(1.5707963268)
        -inf
    """
    if _is_near_zero(x):
        return x
    return _snap(divide(sin(x), cos(x)))


def tan_deg(x: float) -> float:
    """Тангенс угла в градусах."""
    return tan(deg_to_rad(x))


def atan(x: float) -> float:
    """
    Арктангенс в радианах; atan(±Infinity) == ±π/2 (округлённое).

    Examples:
        >>> atan(1.0)
        0.7853981634
    """
    if _is_near_zero(x):
        return x
    return _snap(evaluate(math.atan, np.arctan, x))


def atan_deg(x: float) -> float:
    """Арктангенс в градусах."""
    return rad_to_deg(atan(x))


# =============================================================================
# CSC / SEC / COT
# =============================================================================


def csc(x: float) -> float:
    """
    Косеканс 1/sin(x); csc(0.0) == +Infinity.

    Examples:
        >>> csc(0.5235987756)
        2.0
        >>> csc(3.1415926536)
        -inf
    """
    return _snap(divide(1.0, sin(x)))


def csc_deg(x: float) -> float:
    """Косеканс угла в градусах."""
    return csc(deg_to_rad(x))


def acsc(x: float) -> float:
    """Арккосеканс: asin(1/x)."""
    return asin(divide(1.0, x))


def acsc_deg(x: float) -> float:
    """Арккосеканс в градусах."""
    return asin_deg(divide(1.0, x))


def sec(x: float) -> float:
    """
    Секанс 1/cos(x).

    Examples:
        >>> sec(1.0471975512)
        2.0
    """
    return _snap(divide(1.0, cos(x)))


def sec_deg(x: float) -> float:
    """Секанс угла в градусах."""
    return sec(deg_to_rad(x))


def asec(x: float) -> float:
    """
    Арксеканс: acos(fix(1/x)).

    Округление 1/x до TRIG_DECIMALS переводит большие |x| в near-zero область,
    поэтому asec(±1e12) == π/2 (округлённое).
    """
    return acos(_snap(divide(1.0, x)))


def asec_deg(x: float) -> float:
    """Арксеканс в градусах."""
    return acos_deg(divide(1.0, x))


def cot(x: float) -> float:
    """
    Котангенс cos(x)/sin(x).

    В near-zero области вычисляется как 1/tan(x) без округления,
    поэтому cot(1e-10) == 1e10, а cot(0.0) == +Infinity.

    Examples:
        >>> cot(0.7853981634)
        1.0
        >>> cot(1.5707963268)
        0.0
    """
    if _is_near_zero(x):
        return divide(1.0, tan(x))
    return _snap(divide(cos(x), sin(x)))


def cot_deg(x: float) -> float:
    """Котангенс угла в градусах."""
    return cot(deg_to_rad(x))


def acot(x: float) -> float:
    """Арккотангенс: atan(1/x); acot(0.0) == π/2 (округлённое)."""
    return atan(divide(1.0, x))


def acot_deg(x: float) -> float:
    """Арккотангенс в градусах."""
    return atan_deg(divide(1.0, x))
