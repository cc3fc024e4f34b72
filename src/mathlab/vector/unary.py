"""
Unary — поэлементные версии унарных скалярных функций

Каждая функция f_vec(xs) возвращает новый список [f(x) for x in xs] той же длины
и в том же порядке. Семантика NaN / ±Infinity, snapping и округления полностью
наследуется от скалярной функции.
"""

from typing import Sequence

import numpy as np

from mathlab.core.math import arithmetic, classification, hyperbolic, logarithms, rounding
from mathlab.core.math import trigonometry as trig
from mathlab.vector._lift import map_vec

# =============================================================================
# ЗНАК, МОДУЛЬ, ОБРАТНОЕ ЗНАЧЕНИЕ
# =============================================================================


def abs_vec(xs: Sequence[float]) -> list[float]:
    """
    Поэлементный abs.

    Examples:
        >>> abs_vec([-1.0, 0.0, 3.33])
        [1.0, 0.0, 3.33]
    """
    return map_vec(arithmetic.abs, xs)


def sign_vec(xs: Sequence[float]) -> list[float]:
    """Поэлементный sign (NaN → 0.0)."""
    return map_vec(arithmetic.sign, xs)


def inv_vec(xs: Sequence[float]) -> list[float]:
    """Поэлементный inv (0.0 → +Infinity)."""
    return map_vec(arithmetic.inv, xs)


# =============================================================================
# ЦЕЛОЧИСЛЕННЫЕ ФУНКЦИИ И КОНВЕРСИИ
# =============================================================================


def fact_vec(ns: Sequence[int]) -> list[int]:
    """
    Поэлементный fact.

    Raises:
        MathContractViolation: Если любой элемент нарушает контракт fact
    """
    return map_vec(arithmetic.fact, ns)


def gamma_vec(ns: Sequence[int]) -> list[int]:
    """
    Поэлементный gamma.

    Raises:
        MathContractViolation: Если любой элемент равен 0 или нарушает контракт fact
    """
    return map_vec(arithmetic.gamma, ns)


def u64_to_f64_vec(ns: Sequence[int]) -> list[float]:
    return map_vec(arithmetic.u64_to_f64, ns)


def i64_to_f64_vec(ns: Sequence[int]) -> list[float]:
    return map_vec(arithmetic.i64_to_f64, ns)


# =============================================================================
# ОКРУГЛЕНИЕ И ТОЧНОСТЬ
# =============================================================================


def floor_vec(xs: Sequence[float]) -> list[float]:
    return map_vec(rounding.floor, xs)


def ceil_vec(xs: Sequence[float]) -> list[float]:
    return map_vec(rounding.ceil, xs)


def round_vec(xs: Sequence[float]) -> list[float]:
    """Поэлементный round (half away from zero)."""
    return map_vec(rounding.round, xs)


def trunc_vec(xs: Sequence[float]) -> list[float]:
    return map_vec(rounding.trunc, xs)


def fix_vec(xs: Sequence[float], decimal_places: int) -> list[float]:
    """
    Поэлементный fix с общим количеством знаков.

    Raises:
        ValueError: Если decimal_places < 0 и xs не пуст
    """
    return [rounding.fix(x, decimal_places) for x in xs]


def fix64_vec(xs: Sequence[float]) -> list[float]:
    """
    Поэлементная эквализация точности fix64.

    Examples:
        >>> fix64_vec([0.30000000000000004, 0.09999999999999998])
        [0.3, 0.1]
    """
    return map_vec(rounding.fix64, xs)


def fround_vec(xs: Sequence[float]) -> list[np.float32]:
    """Поэлементное сужение до numpy.float32."""
    return map_vec(rounding.fround, xs)


def f64_to_f32_vec(xs: Sequence[float]) -> list[np.float32]:
    """Синоним fround_vec."""
    return map_vec(rounding.f64_to_f32, xs)


def to_fixed_vec(xs: Sequence[float], decimal_places: int) -> list[str]:
    """Поэлементный to_fixed."""
    return [rounding.to_fixed(x, decimal_places) for x in xs]


# =============================================================================
# КЛАССИФИКАЦИЯ
# =============================================================================


def is_nan_f64_vec(xs: Sequence[float]) -> list[bool]:
    return map_vec(classification.is_nan_f64, xs)


def is_inf_f64_vec(xs: Sequence[float]) -> list[bool]:
    return map_vec(classification.is_inf_f64, xs)


def is_ninf_f64_vec(xs: Sequence[float]) -> list[bool]:
    return map_vec(classification.is_ninf_f64, xs)


def is_nan_f32_vec(xs: Sequence[np.float32]) -> list[bool]:
    return map_vec(classification.is_nan_f32, xs)


def is_inf_f32_vec(xs: Sequence[np.float32]) -> list[bool]:
    return map_vec(classification.is_inf_f32, xs)


def is_ninf_f32_vec(xs: Sequence[np.float32]) -> list[bool]:
    return map_vec(classification.is_ninf_f32, xs)


# =============================================================================
# СТЕПЕНИ, КОРНИ, ЭКСПОНЕНТА, ЛОГАРИФМЫ
# =============================================================================


def sqr_vec(xs: Sequence[float]) -> list[float]:
    return map_vec(arithmetic.sqr, xs)


def sqrt_vec(xs: Sequence[float]) -> list[float]:
    return map_vec(arithmetic.sqrt, xs)


def cube_vec(xs: Sequence[float]) -> list[float]:
    return map_vec(arithmetic.cube, xs)


def cbrt_vec(xs: Sequence[float]) -> list[float]:
    return map_vec(arithmetic.cbrt, xs)


def exp_vec(xs: Sequence[float]) -> list[float]:
    return map_vec(arithmetic.exp, xs)


def ln_vec(xs: Sequence[float]) -> list[float]:
    """Поэлементный ln (0.0 → -Infinity, x < 0 → NaN)."""
    return map_vec(logarithms.ln, xs)


def ln1p_vec(xs: Sequence[float]) -> list[float]:
    return map_vec(logarithms.ln1p, xs)


def log2_vec(xs: Sequence[float]) -> list[float]:
    return map_vec(logarithms.log2, xs)


def log10_vec(xs: Sequence[float]) -> list[float]:
    return map_vec(logarithms.log10, xs)


# =============================================================================
# КОНВЕРСИЯ УГЛОВ
# =============================================================================


def deg_to_rad_vec(xs: Sequence[float]) -> list[float]:
    """
    Поэлементная конверсия градусов в радианы.

    Examples:
        >>> deg_to_rad_vec([0.0, 90.0, 180.0])
        [0.0, 1.5707963268, 3.1415926536]
    """
    return map_vec(trig.deg_to_rad, xs)


def rad_to_deg_vec(xs: Sequence[float]) -> list[float]:
    return map_vec(trig.rad_to_deg, xs)


# =============================================================================
# SIN
# =============================================================================


def sin_vec(xs: Sequence[float]) -> list[float]:
    return map_vec(trig.sin, xs)


def sin_deg_vec(xs: Sequence[float]) -> list[float]:
    return map_vec(trig.sin_deg, xs)


def asin_vec(xs: Sequence[float]) -> list[float]:
    return map_vec(trig.asin, xs)


def asin_deg_vec(xs: Sequence[float]) -> list[float]:
    return map_vec(trig.asin_deg, xs)


# =============================================================================
# COS
# =============================================================================


def cos_vec(xs: Sequence[float]) -> list[float]:
    return map_vec(trig.cos, xs)


def cos_deg_vec(xs: Sequence[float]) -> list[float]:
    return map_vec(trig.cos_deg, xs)


def acos_vec(xs: Sequence[float]) -> list[float]:
    return map_vec(trig.acos, xs)


def acos_deg_vec(xs: Sequence[float]) -> list[float]:
    return map_vec(trig.acos_deg, xs)


# =============================================================================
# TAN
# =============================================================================


def tan_vec(xs: Sequence[float]) -> list[float]:
    return map_vec(trig.tan, xs)


def tan_deg_vec(xs: Sequence[float]) -> list[float]:
    return map_vec(trig.tan_deg, xs)


def atan_vec(xs: Sequence[float]) -> list[float]:
    return map_vec(trig.atan, xs)


def atan_deg_vec(xs: Sequence[float]) -> list[float]:
    return map_vec(trig.atan_deg, xs)


# =============================================================================
# CSC
# =============================================================================


def csc_vec(xs: Sequence[float]) -> list[float]:
    return map_vec(trig.csc, xs)


def csc_deg_vec(xs: Sequence[float]) -> list[float]:
    return map_vec(trig.csc_deg, xs)


def acsc_vec(xs: Sequence[float]) -> list[float]:
    return map_vec(trig.acsc, xs)


def acsc_deg_vec(xs: Sequence[float]) -> list[float]:
    return map_vec(trig.acsc_deg, xs)


# =============================================================================
# SEC
# =============================================================================


def sec_vec(xs: Sequence[float]) -> list[float]:
    return map_vec(trig.sec, xs)


def sec_deg_vec(xs: Sequence[float]) -> list[float]:
    return map_vec(trig.sec_deg, xs)


def asec_vec(xs: Sequence[float]) -> list[float]:
    return map_vec(trig.asec, xs)


def asec_deg_vec(xs: Sequence[float]) -> list[float]:
    return map_vec(trig.asec_deg, xs)


# =============================================================================
# COT
# =============================================================================


def cot_vec(xs: Sequence[float]) -> list[float]:
    return map_vec(trig.cot, xs)


def cot_deg_vec(xs: Sequence[float]) -> list[float]:
    return map_vec(trig.cot_deg, xs)


def acot_vec(xs: Sequence[float]) -> list[float]:
    return map_vec(trig.acot, xs)


def acot_deg_vec(xs: Sequence[float]) -> list[float]:
    return map_vec(trig.acot_deg, xs)


# =============================================================================
# SINH
# =============================================================================


def sinh_vec(xs: Sequence[float]) -> list[float]:
    return map_vec(hyperbolic.sinh, xs)


def sinh_deg_vec(xs: Sequence[float]) -> list[float]:
    return map_vec(hyperbolic.sinh_deg, xs)


def asinh_vec(xs: Sequence[float]) -> list[float]:
    return map_vec(hyperbolic.asinh, xs)


def asinh_deg_vec(xs: Sequence[float]) -> list[float]:
    return map_vec(hyperbolic.asinh_deg, xs)


# =============================================================================
# COSH
# =============================================================================


def cosh_vec(xs: Sequence[float]) -> list[float]:
    return map_vec(hyperbolic.cosh, xs)


def cosh_deg_vec(xs: Sequence[float]) -> list[float]:
    return map_vec(hyperbolic.cosh_deg, xs)


def acosh_vec(xs: Sequence[float]) -> list[float]:
    return map_vec(hyperbolic.acosh, xs)


def acosh_deg_vec(xs: Sequence[float]) -> list[float]:
    return map_vec(hyperbolic.acosh_deg, xs)


# =============================================================================
# TANH
# =============================================================================


def tanh_vec(xs: Sequence[float]) -> list[float]:
    return map_vec(hyperbolic.tanh, xs)


def tanh_deg_vec(xs: Sequence[float]) -> list[float]:
    return map_vec(hyperbolic.tanh_deg, xs)


def atanh_vec(xs: Sequence[float]) -> list[float]:
    return map_vec(hyperbolic.atanh, xs)


def atanh_deg_vec(xs: Sequence[float]) -> list[float]:
    return map_vec(hyperbolic.atanh_deg, xs)


# =============================================================================
# CSCH
# =============================================================================


def csch_vec(xs: Sequence[float]) -> list[float]:
    return map_vec(hyperbolic.csch, xs)


def csch_deg_vec(xs: Sequence[float]) -> list[float]:
    return map_vec(hyperbolic.csch_deg, xs)


def acsch_vec(xs: Sequence[float]) -> list[float]:
    return map_vec(hyperbolic.acsch, xs)


def acsch_deg_vec(xs: Sequence[float]) -> list[float]:
    return map_vec(hyperbolic.acsch_deg, xs)


# =============================================================================
# SECH
# =============================================================================


def sech_vec(xs: Sequence[float]) -> list[float]:
    return map_vec(hyperbolic.sech, xs)


def sech_deg_vec(xs: Sequence[float]) -> list[float]:
    return map_vec(hyperbolic.sech_deg, xs)


def asech_vec(xs: Sequence[float]) -> list[float]:
    return map_vec(hyperbolic.asech, xs)


def asech_deg_vec(xs: Sequence[float]) -> list[float]:
    return map_vec(hyperbolic.asech_deg, xs)


# =============================================================================
# COTH
# =============================================================================


def coth_vec(xs: Sequence[float]) -> list[float]:
    return map_vec(hyperbolic.coth, xs)


def coth_deg_vec(xs: Sequence[float]) -> list[float]:
    return map_vec(hyperbolic.coth_deg, xs)


def acoth_vec(xs: Sequence[float]) -> list[float]:
    return map_vec(hyperbolic.acoth, xs)


def acoth_deg_vec(xs: Sequence[float]) -> list[float]:
    return map_vec(hyperbolic.acoth_deg, xs)
