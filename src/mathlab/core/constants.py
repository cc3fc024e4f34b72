"""
Constants — математические константы и IEEE-754 sentinel-значения

Модуль содержит неизменяемые значения, общие для всех функций библиотеки:
- Стандартные математические константы с полной double-точностью
- Sentinel-значения NaN / +Infinity / -Infinity для f64 и f32

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. NaN получается вычислением 0/0 в нативном float, а не литералом
2. NaN != NaN (на этом построен is_nan_*), поэтому NaN никогда не сравнивается через ==
3. +Inf / -Inf имеют единственный bit pattern, поэтому сравнение через == безопасно
4. Константы хранятся минимум с 15 значащими цифрами
"""

from typing import Final

import numpy as np

# =============================================================================
# МАТЕМАТИЧЕСКИЕ КОНСТАНТЫ
# =============================================================================

# Число Эйлера e
E: Final[float] = 2.718281828459045

# Число π и его доли
PI: Final[float] = 3.141592653589793
H_PI: Final[float] = 1.5707963267948966  # π / 2
Q_PI: Final[float] = 0.7853981633974483  # π / 4

# τ = 2π (константа окружности)
TAU: Final[float] = 6.283185307179586

# Золотое сечение φ = (1 + sqrt(5)) / 2
PHI: Final[float] = 1.618033988749895

# Логарифмические константы
LN2: Final[float] = 0.6931471805599453
LN10: Final[float] = 2.302585092994046
LOG2E: Final[float] = 1.4426950408889634
LOG10E: Final[float] = 0.4342944819032518


# =============================================================================
# IEEE-754 SENTINEL-ЗНАЧЕНИЯ
# =============================================================================


def _sentinel_f64(numerator: float) -> float:
    # Python float запрещает деление на ноль, поэтому 0/0 и ±1/0 вычисляются в numpy
    with np.errstate(divide="ignore", invalid="ignore"):
        return float(np.float64(numerator) / np.float64(0.0))


def _sentinel_f32(numerator: float) -> np.float32:
    with np.errstate(divide="ignore", invalid="ignore"):
        return np.float32(numerator) / np.float32(0.0)


# Double precision (f64)
NAN_F64: Final[float] = _sentinel_f64(0.0)
INF_F64: Final[float] = _sentinel_f64(1.0)
NINF_F64: Final[float] = _sentinel_f64(-1.0)

# Single precision (f32)
NAN_F32: Final[np.float32] = _sentinel_f32(0.0)
INF_F32: Final[np.float32] = _sentinel_f32(1.0)
NINF_F32: Final[np.float32] = _sentinel_f32(-1.0)
