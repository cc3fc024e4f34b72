"""
Hyperbolic — гиперболические функции

Семейства sinh / cosh / tanh / csch / sech / coth в тех же четырёх формах,
что и тригонометрия: аргумент, *_deg, обратная a*, обратная a*_deg.

В отличие от тригонометрии near-zero snapping не применяется: у гиперболических
функций нет потери точности в окрестности нуля. Результат округляется
fix(..., TRIG_DECIMALS) для согласованности с тригонометрическим семейством.

Переполнение (sinh(1000.0)) даёт ±Infinity, выход из области определения
(acosh(0.5), atanh(2.0)) даёт NaN.
"""

import math

import numpy as np

from mathlab.core._ieee import divide, evaluate
from mathlab.core.math.rounding import fix
from mathlab.core.math.trigonometry import TRIG_DECIMALS, deg_to_rad, rad_to_deg


def _snap(x: float) -> float:
    return fix(x, TRIG_DECIMALS)


# =============================================================================
# SINH / COSH / TANH
# =============================================================================


def sinh(x: float) -> float:
    """
    Гиперболический синус.

    Examples:
        >>> sinh(0.0)
        0.0
        >>> sinh(1.0)
        1.1752011936
    """
    return _snap(evaluate(math.sinh, np.sinh, x))


def sinh_deg(x: float) -> float:
    """Гиперболический синус аргумента в градусах."""
    return sinh(deg_to_rad(x))


def asinh(x: float) -> float:
    """Обратный гиперболический синус."""
    return _snap(evaluate(math.asinh, np.arcsinh, x))


def asinh_deg(x: float) -> float:
    """Обратный гиперболический синус в градусах."""
    return rad_to_deg(asinh(x))


def cosh(x: float) -> float:
    """
    Гиперболический косинус (cosh(0.0) == 1.0).

    Examples:
        >>> cosh(1.0)
        1.5430806348
    """
    return _snap(evaluate(math.cosh, np.cosh, x))


def cosh_deg(x: float) -> float:
    """Гиперболический косинус аргумента в градусах."""
    return cosh(deg_to_rad(x))


def acosh(x: float) -> float:
    """Обратный гиперболический косинус; x < 1 → NaN."""
    return _snap(evaluate(math.acosh, np.arccosh, x))


def acosh_deg(x: float) -> float:
    """Обратный гиперболический косинус в градусах."""
    return rad_to_deg(acosh(x))


def tanh(x: float) -> float:
    """Гиперболический тангенс; tanh(±Infinity) == ±1.0."""
    return _snap(evaluate(math.tanh, np.tanh, x))


def tanh_deg(x: float) -> float:
    """Гиперболический тангенс аргумента в градусах."""
    return tanh(deg_to_rad(x))


def atanh(x: float) -> float:
    """Обратный гиперболический тангенс; atanh(±1.0) == ±Infinity, |x| > 1 → NaN."""
    return _snap(evaluate(math.atanh, np.arctanh, x))


def atanh_deg(x: float) -> float:
    """Обратный гиперболический тангенс в градусах."""
    return rad_to_deg(atanh(x))


# =============================================================================
# CSCH / SECH / COTH
# =============================================================================


def csch(x: float) -> float:
    """Гиперболический косеканс 1/sinh(x); csch(0.0) == +Infinity."""
    return _snap(divide(1.0, sinh(x)))


def csch_deg(x: float) -> float:
    """Гиперболический косеканс аргумента в градусах."""
    return csch(deg_to_rad(x))


def acsch(x: float) -> float:
    """Обратный гиперболический косеканс: asinh(1/x)."""
    return asinh(divide(1.0, x))


def acsch_deg(x: float) -> float:
    """Обратный гиперболический косеканс в градусах."""
    return rad_to_deg(acsch(x))


def sech(x: float) -> float:
    """Гиперболический секанс 1/cosh(x); sech(0.0) == 1.0."""
    return _snap(divide(1.0, cosh(x)))


def sech_deg(x: float) -> float:
    """Гиперболический секанс аргумента в градусах."""
    return sech(deg_to_rad(x))


def asech(x: float) -> float:
    """Обратный гиперболический секанс: acosh(1/x); asech(1.0) == 0.0."""
    return acosh(divide(1.0, x))


def asech_deg(x: float) -> float:
    """Обратный гиперболический секанс в градусах."""
    return rad_to_deg(asech(x))


def coth(x: float) -> float:
    """Гиперболический котангенс cosh(x)/sinh(x); coth(0.0) == +Infinity."""
    return _snap(divide(cosh(x), sinh(x)))


def coth_deg(x: float) -> float:
    """Гиперболический котангенс аргумента в градусах."""
    return coth(deg_to_rad(x))


def acoth(x: float) -> float:
    """Обратный гиперболический котангенс: atanh(1/x)."""
    return atanh(divide(1.0, x))


def acoth_deg(x: float) -> float:
    """Обратный гиперболический котангенс в градусах."""
    return rad_to_deg(acoth(x))
