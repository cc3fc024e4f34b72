"""
Тесты для модуля Generators

Проверяет:
1. monolist: копии значения, усечение до cap
2. range: направление, шаг без накопления ошибки, отказ при size > cap
3. range_from_to: включительная граница, направление по start / stop
4. Деградацию некорректных запросов в [] с debug-записью
"""

import logging

import pytest

from mathlab.core.config import PrecisionConfig
from mathlab.core.constants import INF_F64, NAN_F64
from mathlab.core.math.generators import RangeOrder, monolist, range, range_from_to

GENERATORS_LOGGER = "mathlab.core.math.generators"


@pytest.fixture
def small_cap() -> PrecisionConfig:
    """Конфигурация с cap = 5"""
    return PrecisionConfig(size_cap=5)


# =============================================================================
# MONOLIST
# =============================================================================


class TestMonolist:
    """Тесты monolist"""

    def test_copies(self) -> None:
        """size копий значения"""
        assert monolist(-1.0, 2) == [-1.0, -1.0]
        assert monolist(0.3, 3) == [0.3, 0.3, 0.3]

    def test_zero_and_negative_size(self) -> None:
        """size <= 0 → []"""
        assert monolist(0.1, 0) == []
        assert monolist(0.1, -3) == []

    def test_clamped_to_cap(self, small_cap: PrecisionConfig) -> None:
        """size > cap усекается до cap"""
        assert monolist(1.0, 10, config=small_cap) == [1.0] * 5

    def test_default_cap(self) -> None:
        """Cap по умолчанию — 1 000 000"""
        assert len(monolist(0.0, 2_000_000)) == 1_000_000

    def test_clamp_is_logged(self, caplog: pytest.LogCaptureFixture, small_cap: PrecisionConfig) -> None:
        """Усечение оставляет debug-запись"""
        with caplog.at_level(logging.DEBUG, logger=GENERATORS_LOGGER):
            monolist(1.0, 10, config=small_cap)

        assert "clamped to cap 5" in caplog.text

    def test_fresh_list_each_call(self) -> None:
        """Каждый вызов возвращает новый список"""
        first = monolist(1.0, 2)
        first.append(2.0)

        assert monolist(1.0, 2) == [1.0, 1.0]


# =============================================================================
# RANGE
# =============================================================================


class TestRange:
    """Тесты range"""

    def test_ascending(self) -> None:
        """Шаг без накопления ошибки: элемент 3 == 0.3"""
        assert range(0.0, 0.1, 4, "asc") == [0.0, 0.1, 0.2, 0.3]

    def test_descending(self) -> None:
        """Направление desc вычитает шаг"""
        assert range(1.0, 0.5, 3, RangeOrder.DESC) == [1.0, 0.5, 0.0]
        assert range(0.0, 0.1, 3, "desc") == [0.0, -0.1, -0.2]

    def test_enum_and_string_equivalent(self) -> None:
        """RangeOrder и строка дают один результат"""
        assert range(2.0, 0.25, 5, RangeOrder.ASC) == range(2.0, 0.25, 5, "asc")

    def test_ten_steps_of_one_tenth(self) -> None:
        """Последний элемент точный"""
        result = range(0.0, 0.1, 11, "asc")

        assert len(result) == 11
        assert result[-1] == 1.0
        assert result[7] == 0.7

    def test_steps_below_trig_precision(self) -> None:
        """Шаг меньше 1e-10 даёт различные значения"""
        result = range(0.0, 1e-12, 5, "asc")

        assert result == [0.0, 1e-12, 2e-12, 3e-12, 4e-12]
        assert len(set(result)) == 5

    def test_tiny_step_descending(self) -> None:
        """Убывающая последовательность с шагом 2.5e-13"""
        assert range(1e-12, 2.5e-13, 3, "desc") == [1e-12, 7.5e-13, 5e-13]

    def test_tiny_start_preserved(self) -> None:
        """start < 5e-11 не округляется до 0.0"""
        assert range(3e-11, 0.1, 2, "asc") == [3e-11, 0.10000000003]

    def test_over_cap_is_rejected(self) -> None:
        """size > cap → [] (без усечения)"""
        assert range(0.0, 0.1, 2_000_000, "asc") == []

    def test_custom_cap(self, small_cap: PrecisionConfig) -> None:
        """Cap берётся из config"""
        assert range(0.0, 1.0, 5, "asc", config=small_cap) == [0.0, 1.0, 2.0, 3.0, 4.0]
        assert range(0.0, 1.0, 6, "asc", config=small_cap) == []

    @pytest.mark.parametrize(
        "start,step,size,direction",
        [
            (0.0, 0.1, 3, "up"),
            (0.0, 0.1, 0, "asc"),
            (0.0, 0.1, -1, "asc"),
            (0.0, 0.0, 3, "asc"),
            (0.0, -0.1, 3, "asc"),
            (NAN_F64, 0.1, 3, "asc"),
            (0.0, INF_F64, 3, "asc"),
        ],
    )
    def test_invalid_requests_give_empty(
        self, start: float, step: float, size: int, direction: str
    ) -> None:
        """Некорректный запрос → []"""
        assert range(start, step, size, direction) == []

    def test_unknown_direction_is_logged(self, caplog: pytest.LogCaptureFixture) -> None:
        """Неизвестное направление оставляет debug-запись"""
        with caplog.at_level(logging.DEBUG, logger=GENERATORS_LOGGER):
            range(0.0, 0.1, 3, "sideways")

        assert "'sideways'" in caplog.text


# =============================================================================
# RANGE_FROM_TO
# =============================================================================


class TestRangeFromTo:
    """Тесты range_from_to"""

    def test_inclusive_stop(self) -> None:
        """stop включается, если достижим шагом"""
        assert range_from_to(0.0, 1.0, 0.25) == [0.0, 0.25, 0.5, 0.75, 1.0]

    def test_quotient_noise_suppressed(self) -> None:
        """0.3 / 0.1 == 2.9999999999999996 округляется до 3"""
        assert range_from_to(0.0, 0.3, 0.1) == [0.0, 0.1, 0.2, 0.3]

    def test_unreachable_stop(self) -> None:
        """stop не достигается шагом: последний элемент < stop"""
        assert range_from_to(0.0, 1.0, 0.3) == [0.0, 0.3, 0.6, 0.9]

    def test_descending(self) -> None:
        """start > stop → убывающая последовательность"""
        assert range_from_to(1.0, 0.0, 0.5) == [1.0, 0.5, 0.0]

    def test_steps_below_trig_precision(self) -> None:
        """Шаг меньше 1e-10 даёт различные значения"""
        result = range_from_to(0.0, 4e-12, 1e-12)

        assert result == [0.0, 1e-12, 2e-12, 3e-12, 4e-12]
        assert len(set(result)) == 5

    def test_single_element(self) -> None:
        """start == stop → [start]"""
        assert range_from_to(2.0, 2.0, 1.0) == [2.0]

    def test_over_cap_is_rejected(self, small_cap: PrecisionConfig) -> None:
        """Количество элементов > cap → []"""
        assert range_from_to(0.0, 10.0, 1.0, config=small_cap) == []
        assert range_from_to(0.0, 4.0, 1.0, config=small_cap) == [0.0, 1.0, 2.0, 3.0, 4.0]

    @pytest.mark.parametrize(
        "start,stop,step",
        [
            (0.0, 1.0, 0.0),
            (0.0, 1.0, -0.5),
            (0.0, INF_F64, 1.0),
            (NAN_F64, 1.0, 0.5),
        ],
    )
    def test_invalid_requests_give_empty(self, start: float, stop: float, step: float) -> None:
        """Некорректный запрос → []"""
        assert range_from_to(start, stop, step) == []
