"""
Generators — генерация числовых последовательностей

Модуль содержит:
- monolist(x, size): size копий значения x
- range(start, step, size, direction): size равномерно распределённых значений
- range_from_to(start, stop, step): включительная последовательность от start до stop

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Длина результата никогда не превышает config.size_cap (1 000 000 по умолчанию)
2. Некорректный запрос деградирует в пустой/усечённый результат, а не в исключение:
   - monolist: size > cap → усечение до cap; size < 0 → []
   - range / range_from_to: size > cap → [] (конец последовательности задаётся
     запросом, усечение молча изменило бы его)
3. Элемент i вычисляется как start ± i·step (без накопления ошибки сложения)
   и округляется fix(..., precision), где precision = max(trig_decimals, знаки
   start, знаки step): range(0.0, 0.1, 10, "asc")[3] == 0.3, а шаг 1e-12 не
   схлопывается в повторяющиеся значения
4. Каждый вызов возвращает новый список
"""

import builtins
import logging
import math
from decimal import Decimal
from enum import Enum

from mathlab.core.config import DEFAULT_CONFIG, PrecisionConfig
from mathlab.core.math.rounding import fix

logger = logging.getLogger(__name__)


# =============================================================================
# ENUMS
# =============================================================================


class RangeOrder(str, Enum):
    """Направление генерации range"""

    ASC = "asc"
    DESC = "desc"


# =============================================================================
# ТОЧНОСТЬ ЭЛЕМЕНТОВ
# =============================================================================


def _decimal_places(value: float) -> int:
    # Знаки после запятой в кратчайшем десятичном представлении: 1e-12 → 12, 0.25 → 2
    exponent = Decimal(repr(float(value))).as_tuple().exponent
    return max(0, -exponent)


def _precision(cfg: PrecisionConfig, *values: float) -> int:
    return max(cfg.trig_decimals, *(_decimal_places(v) for v in values))


# =============================================================================
# MONOLIST
# =============================================================================


def monolist(x: float, size: int, *, config: PrecisionConfig | None = None) -> list[float]:
    """
    Список из size копий значения x.

    Args:
        x: Значение элемента
        size: Требуемая длина
        config: Параметры точности (опционально, используется DEFAULT_CONFIG)

    Returns:
        Новый список; size > cap усекается до cap, size <= 0 даёт []

    Examples:
        >>> monolist(-1.0, 2)
        [-1.0, -1.0]
        >>> monolist(0.1, 0)
        []
    """
    cfg = config or DEFAULT_CONFIG

    if size < 0:
        logger.debug("monolist size %d is negative, returning empty list", size)
        return []

    if size > cfg.size_cap:
        logger.debug("monolist size %d clamped to cap %d", size, cfg.size_cap)
        size = cfg.size_cap

    return [x] * size


# =============================================================================
# RANGE
# =============================================================================


def range(
    start: float,
    step: float,
    size: int,
    direction: RangeOrder | str,
    *,
    config: PrecisionConfig | None = None,
) -> list[float]:
    """
    Последовательность из size значений с шагом step.

    Направление "asc" прибавляет шаг, "desc" вычитает его (шаг всегда > 0).

    Args:
        start: Первый элемент
        step: Шаг (строго положительный, конечный)
        size: Количество элементов (1..cap)
        direction: RangeOrder.ASC / RangeOrder.DESC или строка "asc" / "desc"
        config: Параметры точности (опционально, используется DEFAULT_CONFIG)

    Returns:
        Новый список; [] при неизвестном direction, size <= 0, size > cap,
        step <= 0 или нечисловых start / step

    Examples:
        >>> range(0.0, 0.1, 4, "asc")
        [0.0, 0.1, 0.2, 0.3]
        >>> range(1.0, 0.5, 3, RangeOrder.DESC)
        [1.0, 0.5, 0.0]
        >>> range(0.0, 0.1, 2_000_000, "asc")
        []
    """
    cfg = config or DEFAULT_CONFIG

    try:
        order = RangeOrder(direction)
    except ValueError:
        logger.debug("range direction %r is not recognized, returning empty list", direction)
        return []

    if size <= 0 or size > cfg.size_cap:
        logger.debug("range size %d outside [1, %d], returning empty list", size, cfg.size_cap)
        return []

    if not (math.isfinite(start) and math.isfinite(step)) or step <= 0.0:
        logger.debug("range start=%r step=%r rejected, returning empty list", start, step)
        return []

    signed_step = step if order is RangeOrder.ASC else -step
    precision = _precision(cfg, start, step)

    return [fix(start + i * signed_step, precision) for i in builtins.range(size)]


def range_from_to(
    start: float,
    stop: float,
    step: float,
    *,
    config: PrecisionConfig | None = None,
) -> list[float]:
    """
    Включительная последовательность от start до stop с шагом step.

    Направление определяется порядком start / stop. Количество элементов
    floor(|stop - start| / step) + 1, частное округляется fix(..., trig_decimals),
    так что range_from_to(0.0, 0.3, 0.1) содержит 4 элемента.

    Args:
        start: Первый элемент
        stop: Граница (включается, если достижима шагом)
        step: Шаг (строго положительный, конечный)
        config: Параметры точности (опционально, используется DEFAULT_CONFIG)

    Returns:
        Новый список; [] при step <= 0, нечисловых аргументах или количестве
        элементов больше cap

    Examples:
        >>> range_from_to(0.0, 1.0, 0.25)
        [0.0, 0.25, 0.5, 0.75, 1.0]
        >>> range_from_to(1.0, 0.0, 0.5)
        [1.0, 0.5, 0.0]
    """
    cfg = config or DEFAULT_CONFIG

    if not (math.isfinite(start) and math.isfinite(stop) and math.isfinite(step)) or step <= 0.0:
        logger.debug(
            "range_from_to start=%r stop=%r step=%r rejected, returning empty list",
            start,
            stop,
            step,
        )
        return []

    span = fix(math.fabs(stop - start) / step, cfg.trig_decimals)

    # Огромный span (в т.ч. переполнение до inf) заведомо больше cap
    if span >= cfg.size_cap:
        logger.debug("range_from_to span %r exceeds cap %d, returning empty list", span, cfg.size_cap)
        return []

    size = int(math.floor(span)) + 1
    order = RangeOrder.ASC if stop >= start else RangeOrder.DESC

    return range(start, step, size, order, config=cfg)
