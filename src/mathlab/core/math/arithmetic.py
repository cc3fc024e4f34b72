"""
Arithmetic — элементарные операции с IEEE-754 семантикой

Модуль содержит тонкие обёртки над нативными операциями float:
- add / subt / mult / divi / pow / rem
- inv / sqr / sqrt / cube / cbrt / nrt / exp
- abs / sign
- perimeter (периметр прямоугольника)
- fact / gamma на беззнаковых 64-битных целых
- u64_to_f64 / i64_to_f64

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Деление на ноль НЕ является ошибкой: x/0.0 → ±Infinity, 0.0/0.0 → NaN
2. pow(x, 0.0) == 1.0 для любого x, включая NaN
3. rem(x, Infinity) == x для конечного x; rem(Infinity, y) и rem(x, 0.0) → NaN
4. sign(NaN) == 0.0 (обе проверки x > 0 и x < 0 ложны)
5. fact/gamma работают в диапазоне u64; выход за диапазон → MathContractViolation
"""

import math
from typing import Final

import numpy as np

from mathlab.core._ieee import divide, evaluate
from mathlab.core.constants import E
from mathlab.core.errors import MathContractViolation

# =============================================================================
# ДИАПАЗОНЫ ЦЕЛЫХ
# =============================================================================

U64_MAX: Final[int] = 2**64 - 1
I64_MIN: Final[int] = -(2**63)
I64_MAX: Final[int] = 2**63 - 1


def _require_int_in_range(value: int, name: str, low: int, high: int) -> None:
    if isinstance(value, bool) or not isinstance(value, (int, np.integer)):
        raise MathContractViolation(f"{name} must be an integer, got {value!r}")

    if value < low or value > high:
        raise MathContractViolation(f"{name} must be in [{low}, {high}], got {value}")


# =============================================================================
# БАЗОВЫЕ ОПЕРАЦИИ
# =============================================================================


def add(x: float, y: float) -> float:
    """
    Сложение.

    Examples:
        >>> add(0.1, 0.2)
        0.30000000000000004
    """
    return x + y


def subt(x: float, y: float) -> float:
    """Вычитание x - y."""
    return x - y


def mult(x: float, y: float) -> float:
    """Умножение."""
    return x * y


def divi(x: float, y: float) -> float:
    """
    Деление по IEEE-754.

    Args:
        x: Числитель
        y: Знаменатель

    Returns:
        x / y; при y == 0.0: +Infinity (x > 0), -Infinity (x < 0), NaN (x == 0)

    Examples:
        >>> divi(2.0, 3.0)
        0.6666666666666666
        >>> divi(-0.3, 0.0)
        -inf
    """
    return divide(x, y)


def pow(x: float, y: float) -> float:
    """
    Возведение в степень x**y.

    NaN пропагирует, кроме pow(x, 0.0) == 1.0 (включая pow(NaN, 0.0)).
    Переполнение даёт Infinity, недопустимый домен (отрицательное основание
    с дробной степенью) даёт NaN.

    Examples:
        >>> pow(2.0, -3.0)
        0.125
        >>> pow(float("nan"), 0.0)
        1.0
    """
    return evaluate(math.pow, np.power, x, y)


def rem(x: float, y: float) -> float:
    """
    Остаток от деления с усечением (знак совпадает с x, как fmod).

    Examples:
        >>> rem(4.0, 3.0)
        1.0
        >>> rem(2.0, float("inf"))
        2.0
    """
    return evaluate(math.fmod, np.fmod, x, y)


def inv(x: float) -> float:
    """Обратное значение 1/x (inv(0.0) == +Infinity)."""
    return divide(1.0, x)


# =============================================================================
# СТЕПЕНИ И КОРНИ
# =============================================================================


def sqr(x: float) -> float:
    """Квадрат x*x."""
    return x * x


def sqrt(x: float) -> float:
    """Квадратный корень (sqrt(x < 0) → NaN)."""
    return evaluate(math.sqrt, np.sqrt, x)


def cube(x: float) -> float:
    """Куб x*x*x."""
    return x * x * x


def cbrt(x: float) -> float:
    """Кубический корень (определён и для отрицательных x)."""
    return evaluate(math.cbrt, np.cbrt, x)


def nrt(x: float, n: float) -> float:
    """
    Корень n-й степени: x ** (1/n).

    Examples:
        >>> nrt(81.0, 4.0)
        3.0
    """
    return pow(x, divide(1.0, n))


def exp(x: float) -> float:
    """
    Экспонента e**x, вычисленная как pow(E, x).

    exp(1.0) == E точно.
    """
    return pow(E, x)


# =============================================================================
# ЗНАК И МОДУЛЬ
# =============================================================================


def abs(x: float) -> float:
    """Абсолютное значение (abs(-0.0) == 0.0, abs(NaN) → NaN)."""
    return math.fabs(x)


def sign(x: float) -> float:
    """
    Знак числа: ровно одно из -1.0, 0.0, 1.0.

    NaN не проходит ни x > 0, ни x < 0, поэтому sign(NaN) == 0.0.

    Examples:
        >>> sign(-9.0)
        -1.0
        >>> sign(float("nan"))
        0.0
    """
    if x > 0.0:
        return 1.0
    elif x < 0.0:
        return -1.0
    else:
        return 0.0


# =============================================================================
# ГЕОМЕТРИЯ
# =============================================================================


def perimeter(x: float, y: float) -> float:
    """
    Периметр прямоугольника со сторонами x и y.

    Examples:
        >>> perimeter(1.0, 2.0)
        6.0
    """
    return 2.0 * (x + y)


# =============================================================================
# FACTORIAL / GAMMA (u64)
# =============================================================================


def fact(n: int) -> int:
    """
    Факториал n! = n × (n-1) × … × 1, fact(0) == 1.

    Результат ограничен диапазоном u64: для n > 20 значение n! превышает
    2**64 - 1, и вызов завершается ошибкой (без wraparound).

    Args:
        n: Неотрицательное целое

    Returns:
        n! как int

    Raises:
        MathContractViolation: Если n не целое, n < 0 или n! > 2**64 - 1

    Examples:
        >>> fact(5)
        120
        >>> fact(18)
        6402373705728000
    """
    _require_int_in_range(n, "n", 0, U64_MAX)

    result = 1
    for k in range(2, int(n) + 1):
        result *= k
        if result > U64_MAX:
            raise MathContractViolation(f"fact({n}) overflows u64 (exceeds {U64_MAX})")

    return result


def gamma(n: int) -> int:
    """
    Гамма-функция на натуральных числах: gamma(n) = fact(n - 1).

    Raises:
        MathContractViolation: Если n == 0 (беззнаковое 0 - 1), n не целое,
            n < 0 или результат превышает u64

    Examples:
        >>> gamma(4)
        6
    """
    _require_int_in_range(n, "n", 0, U64_MAX)

    if n == 0:
        raise MathContractViolation("gamma(0) is undefined: n - 1 underflows u64")

    return fact(n - 1)


# =============================================================================
# КОНВЕРСИИ
# =============================================================================


def u64_to_f64(n: int) -> float:
    """
    Конверсия беззнакового 64-битного целого в float.

    Raises:
        MathContractViolation: Если n вне [0, 2**64 - 1]
    """
    _require_int_in_range(n, "n", 0, U64_MAX)
    return float(n)


def i64_to_f64(n: int) -> float:
    """
    Конверсия знакового 64-битного целого в float.

    Raises:
        MathContractViolation: Если n вне [-2**63, 2**63 - 1]
    """
    _require_int_in_range(n, "n", I64_MIN, I64_MAX)
    return float(n)
