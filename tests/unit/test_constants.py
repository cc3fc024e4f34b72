"""
Тесты для модуля Constants

Проверяет:
1. Математические константы в полной double precision
2. Соотношения между константами
3. IEEE-754 sentinel-значения для f64 и f32
"""

import math

import numpy as np

from mathlab.core.constants import (
    E,
    H_PI,
    INF_F32,
    INF_F64,
    LN2,
    LN10,
    LOG2E,
    LOG10E,
    NAN_F32,
    NAN_F64,
    NINF_F32,
    NINF_F64,
    PHI,
    PI,
    Q_PI,
    TAU,
)

# =============================================================================
# МАТЕМАТИЧЕСКИЕ КОНСТАНТЫ
# =============================================================================


class TestMathConstants:
    """Тесты математических констант"""

    def test_values_match_stdlib(self) -> None:
        """Константы совпадают с math до последнего бита"""
        assert PI == math.pi
        assert E == math.e
        assert TAU == math.tau

    def test_pi_fractions(self) -> None:
        """H_PI и Q_PI — точные доли π"""
        assert H_PI == PI / 2.0
        assert Q_PI == PI / 4.0
        assert TAU == 2.0 * PI

    def test_golden_ratio(self) -> None:
        """φ = (1 + √5) / 2"""
        assert PHI == (1.0 + math.sqrt(5.0)) / 2.0

    def test_logarithm_constants(self) -> None:
        """Логарифмические константы"""
        assert LN2 == math.log(2.0)
        assert LN10 == math.log(10.0)
        assert LOG2E == math.log2(math.e)
        assert LOG10E == math.log10(math.e)


# =============================================================================
# SENTINEL-ЗНАЧЕНИЯ
# =============================================================================


class TestSentinelsF64:
    """Тесты sentinel-значений double precision"""

    def test_types(self) -> None:
        """Sentinel f64 — обычные Python float"""
        assert type(NAN_F64) is float
        assert type(INF_F64) is float
        assert type(NINF_F64) is float

    def test_nan_is_not_equal_to_itself(self) -> None:
        """NaN не равен самому себе"""
        assert NAN_F64 != NAN_F64
        assert math.isnan(NAN_F64)

    def test_infinities(self) -> None:
        """±Infinity"""
        assert INF_F64 == math.inf
        assert NINF_F64 == -math.inf
        assert INF_F64 > 1e308
        assert NINF_F64 < -1e308


class TestSentinelsF32:
    """Тесты sentinel-значений single precision"""

    def test_types(self) -> None:
        """Sentinel f32 — numpy.float32"""
        assert isinstance(NAN_F32, np.float32)
        assert isinstance(INF_F32, np.float32)
        assert isinstance(NINF_F32, np.float32)

    def test_values(self) -> None:
        """NaN / ±Infinity в single precision"""
        assert np.isnan(NAN_F32)
        assert np.isposinf(INF_F32)
        assert np.isneginf(NINF_F32)
