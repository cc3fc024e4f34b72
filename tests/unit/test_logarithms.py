"""
Тесты для модуля Logarithms

Проверяет ln / ln1p / log2 / log10 и IEEE-754 sentinel-результаты
вне области определения.
"""

import math

import pytest

from mathlab.core.constants import E, INF_F64, LN2, LN10, NAN_F64, NINF_F64
from mathlab.core.math.logarithms import ln, ln1p, log2, log10


class TestLogarithmValues:
    """Тесты значений логарифмов"""

    def test_ln(self) -> None:
        """Натуральный логарифм"""
        assert ln(1.0) == 0.0
        assert ln(E) == 1.0
        assert ln(2.0) == LN2
        assert ln(10.0) == LN10

    def test_ln1p_precision_near_zero(self) -> None:
        """ln1p точен для малых x"""
        assert ln1p(0.0) == 0.0
        assert ln1p(1e-20) == 1e-20
        assert ln1p(1.0) == pytest.approx(LN2)

    def test_log2(self) -> None:
        """Двоичный логарифм"""
        assert log2(8.0) == 3.0
        assert log2(0.5) == -1.0

    def test_log10(self) -> None:
        """Десятичный логарифм"""
        assert log10(1000.0) == 3.0
        assert log10(0.01) == -2.0


class TestLogarithmSentinels:
    """Тесты sentinel-результатов"""

    @pytest.mark.parametrize("func", [ln, log2, log10])
    def test_zero_gives_negative_infinity(self, func) -> None:
        """log(0.0) → -Infinity"""
        assert func(0.0) == NINF_F64

    @pytest.mark.parametrize("func", [ln, log2, log10])
    def test_negative_gives_nan(self, func) -> None:
        """log(x < 0) → NaN"""
        assert math.isnan(func(-1.0))

    def test_ln1p_boundary(self) -> None:
        """ln1p(-1.0) → -Infinity, ln1p(x < -1) → NaN"""
        assert ln1p(-1.0) == NINF_F64
        assert math.isnan(ln1p(-2.0))

    @pytest.mark.parametrize("func", [ln, ln1p, log2, log10])
    def test_infinity(self, func) -> None:
        """log(+Infinity) → +Infinity"""
        assert func(INF_F64) == INF_F64

    @pytest.mark.parametrize("func", [ln, ln1p, log2, log10])
    def test_nan_propagates(self, func) -> None:
        """log(NaN) → NaN"""
        assert math.isnan(func(NAN_F64))
