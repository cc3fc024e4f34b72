"""
Geometry — скалярное и векторное произведение, евклидова норма

Функции над короткими последовательностями float:
- dot(a, b): Σ a_i · b_i (левая свёртка)
- cross(a, b): векторное произведение в R^3
- hypot(values): sqrt(Σ x_i^2) для последовательности произвольной длины

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. dot с векторами разной длины → MathContractViolation (ошибка программиста)
2. cross с вектором длины != 3 → MathContractViolation
3. hypot([]) → NaN (sentinel, не исключение); NaN / Infinity в элементах
   пропагируют по правилам IEEE-754
"""

import logging
from typing import Sequence

from mathlab.core.constants import NAN_F64
from mathlab.core.errors import MathContractViolation
from mathlab.core.math.arithmetic import sqrt

logger = logging.getLogger(__name__)


def dot(a: Sequence[float], b: Sequence[float]) -> float:
    """
    Скалярное произведение.

    Args:
        a: Первый вектор
        b: Второй вектор (той же длины)

    Returns:
        Σ a_i · b_i; для пустых векторов 0.0

    Raises:
        MathContractViolation: Если len(a) != len(b)

    Examples:
        >>> dot([0.0, 1.0, 2.0, -1.0], [3.0, 4.0, 5.0, 5.0])
        9.0
    """
    if len(a) != len(b):
        raise MathContractViolation(
            f"dot requires vectors of equal length, got {len(a)} and {len(b)}"
        )

    total = 0.0
    for x, y in zip(a, b):
        total += x * y

    return total


def cross(a: Sequence[float], b: Sequence[float]) -> list[float]:
    """
    Векторное произведение двух векторов в R^3.

    Raises:
        MathContractViolation: Если длина любого вектора != 3

    Examples:
        >>> cross([1.0, 0.0, 0.0], [0.0, 1.0, 0.0])
        [0.0, 0.0, 1.0]
    """
    if len(a) != 3 or len(b) != 3:
        raise MathContractViolation(
            f"cross requires two 3-dimensional vectors, got lengths {len(a)} and {len(b)}"
        )

    return [
        a[1] * b[2] - a[2] * b[1],
        a[2] * b[0] - a[0] * b[2],
        a[0] * b[1] - a[1] * b[0],
    ]


def hypot(values: Sequence[float]) -> float:
    """
    Обобщённая евклидова норма sqrt(Σ x_i^2).

    Args:
        values: Последовательность произвольной длины

    Returns:
        Норма; NaN для пустой последовательности

    Examples:
        >>> hypot([3.0, 4.0])
        5.0
        >>> hypot([1.0, 2.0, 2.0])
        3.0
    """
    if len(values) == 0:
        logger.debug("hypot of empty sequence degraded to NaN")
        return NAN_F64

    total = 0.0
    for x in values:
        total += x * x

    return sqrt(total)
