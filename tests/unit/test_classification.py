"""
Тесты для модуля Classification

Проверяет is_nan / is_inf / is_ninf для f32 и f64.
"""

import math

import numpy as np

from mathlab.core.constants import INF_F32, INF_F64, NAN_F32, NAN_F64, NINF_F32, NINF_F64
from mathlab.core.math.classification import (
    is_inf_f32,
    is_inf_f64,
    is_nan_f32,
    is_nan_f64,
    is_ninf_f32,
    is_ninf_f64,
)


class TestClassificationF64:
    """Тесты классификации double precision"""

    def test_is_nan(self) -> None:
        """Только NaN"""
        assert is_nan_f64(NAN_F64) is True
        assert is_nan_f64(math.nan) is True
        assert is_nan_f64(INF_F64) is False
        assert is_nan_f64(0.0) is False

    def test_is_inf(self) -> None:
        """Только +Infinity"""
        assert is_inf_f64(INF_F64) is True
        assert is_inf_f64(NINF_F64) is False
        assert is_inf_f64(NAN_F64) is False
        assert is_inf_f64(1e308) is False

    def test_is_ninf(self) -> None:
        """Только -Infinity"""
        assert is_ninf_f64(NINF_F64) is True
        assert is_ninf_f64(INF_F64) is False
        assert is_ninf_f64(-1e308) is False


class TestClassificationF32:
    """Тесты классификации single precision"""

    def test_is_nan(self) -> None:
        """NaN в f32"""
        assert is_nan_f32(NAN_F32) is True
        assert is_nan_f32(np.float32(1.0)) is False

    def test_is_inf(self) -> None:
        """+Infinity в f32"""
        assert is_inf_f32(INF_F32) is True
        assert is_inf_f32(NINF_F32) is False
        assert is_inf_f32(np.float32(3.4e38)) is False

    def test_is_ninf(self) -> None:
        """-Infinity в f32"""
        assert is_ninf_f32(NINF_F32) is True
        assert is_ninf_f32(NAN_F32) is False

    def test_returns_python_bool(self) -> None:
        """Результат — bool, а не numpy.bool_"""
        assert type(is_nan_f32(NAN_F32)) is bool
        assert type(is_inf_f32(INF_F32)) is bool


class TestClassificationNumpyScalars:
    """Тесты классификации numpy.float64"""

    def test_returns_python_bool_for_float64(self) -> None:
        """Результат — bool и для numpy.float64"""
        assert type(is_nan_f64(np.float64("nan"))) is bool
        assert type(is_inf_f64(np.float64("inf"))) is bool
        assert type(is_ninf_f64(np.float64("-inf"))) is bool

    def test_values_for_float64(self) -> None:
        """Значения совпадают с Python float"""
        assert is_nan_f64(np.float64("nan")) is True
        assert is_inf_f64(np.float64("inf")) is True
        assert is_ninf_f64(np.float64(1.0)) is False
