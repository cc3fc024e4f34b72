"""
Logarithms — натуральный, двоичный и десятичный логарифмы

Все функции следуют IEEE-754: ln(0.0) → -Infinity, ln(x < 0) → NaN,
ln(+Infinity) → +Infinity, NaN пропагирует.
"""

import math

import numpy as np

from mathlab.core._ieee import evaluate


def ln(x: float) -> float:
    """
    Натуральный логарифм.

    Examples:
        >>> ln(1.0)
        0.0
        >>> ln(10.0)
        2.302585092994046
    """
    return evaluate(math.log, np.log, x)


def ln1p(x: float) -> float:
    """
    ln(1 + x), численно стабильный для малых |x|.

    ln1p(-1.0) → -Infinity, ln1p(x < -1) → NaN.
    """
    return evaluate(math.log1p, np.log1p, x)


def log2(x: float) -> float:
    """Двоичный логарифм."""
    return evaluate(math.log2, np.log2, x)


def log10(x: float) -> float:
    """Десятичный логарифм."""
    return evaluate(math.log10, np.log10, x)
