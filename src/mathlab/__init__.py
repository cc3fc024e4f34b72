"""
mathlab — скалярная и векторная математика с явной IEEE-754 семантикой

Плоский публичный интерфейс: константы, параметры точности, скалярные функции
(mathlab.core.math) и их поэлементные версии (mathlab.vector).

Examples:
    >>> from mathlab import sin_deg, add_vec_vec
    >>> sin_deg(30.0)
    0.5
    >>> add_vec_vec([1.0, 2.0, 3.0], [10.0, 20.0])
    [11.0, 22.0]
"""

# Constants
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

# Configuration
from mathlab.core.config import DEFAULT_CONFIG, PrecisionConfig

# Errors
from mathlab.core.errors import MathContractViolation

# Scalar core
from mathlab.core.math import *  # noqa: F403
from mathlab.core.math import __all__ as _math_all

# Vector broadcast layer
from mathlab.vector import *  # noqa: F403
from mathlab.vector import __all__ as _vector_all

__version__ = "0.1.0"

__all__ = [
    # Constants
    "E",
    "H_PI",
    "INF_F32",
    "INF_F64",
    "LN2",
    "LN10",
    "LOG2E",
    "LOG10E",
    "NAN_F32",
    "NAN_F64",
    "NINF_F32",
    "NINF_F64",
    "PHI",
    "PI",
    "Q_PI",
    "TAU",
    # Configuration
    "DEFAULT_CONFIG",
    "PrecisionConfig",
    # Errors
    "MathContractViolation",
    # Scalar core + vector layer
    *_math_all,
    *_vector_all,
]
