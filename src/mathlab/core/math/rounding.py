"""
Rounding — округление, усечение и сужение точности

Модуль обеспечивает округление float значений и эквализацию точности:
- floor / ceil / trunc / round (round half away from zero)
- fix(x, decimal_places): округление до фиксированного количества знаков,
  базовый примитив подавления floating-point шума для тригонометрии
- fix64(x): сужение до f32 и обратное расширение через кратчайшее
  десятичное представление (0.1 + 0.2 → 0.3)
- fround / f64_to_f32: прямое сужение до numpy.float32
- to_fixed(x, decimal_places): строковое представление с фиксированными знаками

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. round — half away from zero (НЕ banker's rounding встроенного round)
2. Знак нуля сохраняется: fix(-1e-12, 10) == -0.0 (важно для 1/x → -inf)
3. NaN и ±Infinity проходят через fix/round/floor/ceil/trunc без изменений
4. fix64(fix64(x)) == fix64(x) для всех конечных x
"""

import math
import sys
from typing import Final

import numpy as np

from mathlab.core._ieee import ufunc
from mathlab.core.constants import INF_F64, NINF_F64

# =============================================================================
# ПАРАМЕТРЫ
# =============================================================================

# Начиная с 2**52 каждый double является целым числом
_INTEGRAL_THRESHOLD: Final[float] = 2.0**52

# 10**n для n больше этого значения не представимо в double
_MAX_DECIMAL_EXPONENT: Final[int] = sys.float_info.max_10_exp


# =============================================================================
# ОКРУГЛЕНИЕ ДО ЦЕЛОГО
# =============================================================================


def floor(x: float) -> float:
    """
    Наибольшее целое <= x.

    Examples:
        >>> floor(-0.99)
        -1.0
        >>> floor(1.99)
        1.0
    """
    return ufunc(np.floor, x)


def ceil(x: float) -> float:
    """
    Наименьшее целое >= x.

    Examples:
        >>> ceil(0.99)
        1.0
        >>> ceil(-1.99)
        -1.0
    """
    return ufunc(np.ceil, x)


def trunc(x: float) -> float:
    """Отбрасывание дробной части (округление к нулю)."""
    return ufunc(np.trunc, x)


def round(x: float) -> float:
    """
    Округление до ближайшего целого, половины — от нуля.

    В отличие от встроенного round (banker's rounding): round(0.5) == 1.0,
    round(2.5) == 3.0, round(-0.5) == -1.0.

    Args:
        x: Исходное значение

    Returns:
        Округлённое значение (float); NaN / ±Infinity без изменений

    Examples:
        >>> round(0.5)
        1.0
        >>> round(-0.5)
        -1.0
        >>> round(1.01)
        1.0
    """
    truncated = ufunc(np.trunc, x)

    # Дробная часть x - trunc(x) вычисляется точно; для ±Infinity это NaN
    if math.fabs(x - truncated) >= 0.5:
        return truncated + math.copysign(1.0, x)

    return truncated


# =============================================================================
# ФИКСИРОВАННАЯ ТОЧНОСТЬ
# =============================================================================


def fix(x: float, decimal_places: int) -> float:
    """
    Округление до фиксированного количества знаков после запятой.

    Алгоритм: масштабирование на 10**decimal_places, round half away from zero,
    обратное масштабирование.

    Args:
        x: Исходное значение
        decimal_places: Количество знаков после запятой (>= 0)

    Returns:
        Округлённое значение. NaN / ±Infinity возвращаются без изменений.
        Если x * 10**decimal_places >= 2**52 (или 10**decimal_places
        переполняет double), значение уже целое в этом масштабе и
        возвращается без изменений.

    Raises:
        ValueError: Если decimal_places < 0

    Examples:
        >>> fix(0.5235987755982988, 3)
        0.524
        >>> fix(0.5235987755982928, 0)
        1.0
        >>> fix(3.1415926536 * 7.0, 10)
        21.9911485752
    """
    if decimal_places < 0:
        raise ValueError(f"decimal_places must be non-negative, got {decimal_places}")

    if decimal_places > _MAX_DECIMAL_EXPONENT:
        return x

    multiplier = 10.0**decimal_places
    scaled = x * multiplier

    if not math.isfinite(scaled) or math.fabs(scaled) >= _INTEGRAL_THRESHOLD:
        return x

    return round(scaled) / multiplier


def fix64(x: float) -> float:
    """
    Эквализация точности: f64 → f32 → кратчайшее десятичное → f64.

    Убирает шум, существующий только в double precision, так что результат
    совпадает с вычислением в f32.

    Examples:
        >>> fix64(0.1 + 0.2)
        0.3
        >>> fix64(2.0 / 3.0)
        0.6666667
    """
    # numpy печатает float32 кратчайшей строкой, которая однозначно его задаёт
    return float(str(f64_to_f32(x)))


def f64_to_f32(x: float) -> np.float32:
    """
    Сужение до ближайшего значения single precision.

    Examples:
        >>> f64_to_f32(0.30000000000000004) == np.float32(0.3)
        True
    """
    with np.errstate(over="ignore"):
        return np.float32(x)


def fround(x: float) -> np.float32:
    """Синоним f64_to_f32."""
    return f64_to_f32(x)


# =============================================================================
# ФОРМАТИРОВАНИЕ
# =============================================================================


def to_fixed(x: float, decimal_places: int) -> str:
    """
    Строковое представление с ровно decimal_places знаками после запятой.

    Args:
        x: Исходное значение
        decimal_places: Количество знаков после запятой (>= 0)

    Returns:
        Строка; NaN → "NaN", +Infinity → "inf", -Infinity → "-inf"

    Raises:
        ValueError: Если decimal_places < 0

    Examples:
        >>> to_fixed(0.1 + 0.2, 3)
        '0.300'
        >>> to_fixed(float("nan"), 0)
        'NaN'
    """
    if decimal_places < 0:
        raise ValueError(f"decimal_places must be non-negative, got {decimal_places}")

    if x != x:
        return "NaN"
    if x == INF_F64:
        return "inf"
    if x == NINF_F64:
        return "-inf"

    return f"{fix(x, decimal_places):.{decimal_places}f}"
