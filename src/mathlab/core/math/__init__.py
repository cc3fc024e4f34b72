"""
Core math modules для mathlab

Скалярные численные функции с явной IEEE-754 семантикой.
"""

# Arithmetic
from mathlab.core.math.arithmetic import (
    # Integer ranges
    I64_MAX,
    I64_MIN,
    U64_MAX,
    # Basic operations
    add,
    divi,
    inv,
    mult,
    pow,
    rem,
    subt,
    # Powers and roots
    cbrt,
    cube,
    exp,
    nrt,
    sqr,
    sqrt,
    # Sign and magnitude
    abs,
    sign,
    # Geometry
    perimeter,
    # Factorial / gamma
    fact,
    gamma,
    # Conversions
    i64_to_f64,
    u64_to_f64,
)

# Classification
from mathlab.core.math.classification import (
    is_inf_f32,
    is_inf_f64,
    is_nan_f32,
    is_nan_f64,
    is_ninf_f32,
    is_ninf_f64,
)

# Rounding
from mathlab.core.math.rounding import (
    ceil,
    f64_to_f32,
    fix,
    fix64,
    floor,
    fround,
    round,
    to_fixed,
    trunc,
)

# Logarithms
from mathlab.core.math.logarithms import (
    ln,
    ln1p,
    log2,
    log10,
)

# Trigonometry
from mathlab.core.math.trigonometry import (
    SNAP_THRESHOLD,
    TRIG_DECIMALS,
    acos,
    acos_deg,
    acot,
    acot_deg,
    acsc,
    acsc_deg,
    asec,
    asec_deg,
    asin,
    asin_deg,
    atan,
    atan_deg,
    cos,
    cos_deg,
    cot,
    cot_deg,
    csc,
    csc_deg,
    deg_to_rad,
    rad_to_deg,
    sec,
    sec_deg,
    sin,
    sin_deg,
    tan,
    tan_deg,
)

# Hyperbolic
from mathlab.core.math.hyperbolic import (
    acosh,
    acosh_deg,
    acoth,
    acoth_deg,
    acsch,
    acsch_deg,
    asech,
    asech_deg,
    asinh,
    asinh_deg,
    atanh,
    atanh_deg,
    cosh,
    cosh_deg,
    coth,
    coth_deg,
    csch,
    csch_deg,
    sech,
    sech_deg,
    sinh,
    sinh_deg,
    tanh,
    tanh_deg,
)

# Geometry
from mathlab.core.math.geometry import (
    cross,
    dot,
    hypot,
)

# Generators
from mathlab.core.math.generators import (
    RangeOrder,
    monolist,
    range,
    range_from_to,
)

__all__ = [
    # Arithmetic — Integer ranges
    "I64_MAX",
    "I64_MIN",
    "U64_MAX",
    # Arithmetic — Basic operations
    "add",
    "divi",
    "inv",
    "mult",
    "pow",
    "rem",
    "subt",
    # Arithmetic — Powers and roots
    "cbrt",
    "cube",
    "exp",
    "nrt",
    "sqr",
    "sqrt",
    # Arithmetic — Sign and magnitude
    "abs",
    "sign",
    # Arithmetic — Geometry
    "perimeter",
    # Arithmetic — Factorial / gamma
    "fact",
    "gamma",
    # Arithmetic — Conversions
    "i64_to_f64",
    "u64_to_f64",
    # Classification
    "is_inf_f32",
    "is_inf_f64",
    "is_nan_f32",
    "is_nan_f64",
    "is_ninf_f32",
    "is_ninf_f64",
    # Rounding
    "ceil",
    "f64_to_f32",
    "fix",
    "fix64",
    "floor",
    "fround",
    "round",
    "to_fixed",
    "trunc",
    # Logarithms
    "ln",
    "ln1p",
    "log2",
    "log10",
    # Trigonometry — Parameters
    "SNAP_THRESHOLD",
    "TRIG_DECIMALS",
    # Trigonometry — Functions
    "acos",
    "acos_deg",
    "acot",
    "acot_deg",
    "acsc",
    "acsc_deg",
    "asec",
    "asec_deg",
    "asin",
    "asin_deg",
    "atan",
    "atan_deg",
    "cos",
    "cos_deg",
    "cot",
    "cot_deg",
    "csc",
    "csc_deg",
    "deg_to_rad",
    "rad_to_deg",
    "sec",
    "sec_deg",
    "sin",
    "sin_deg",
    "tan",
    "tan_deg",
    # Hyperbolic
    "acosh",
    "acosh_deg",
    "acoth",
    "acoth_deg",
    "acsch",
    "acsch_deg",
    "asech",
    "asech_deg",
    "asinh",
    "asinh_deg",
    "atanh",
    "atanh_deg",
    "cosh",
    "cosh_deg",
    "coth",
    "coth_deg",
    "csch",
    "csch_deg",
    "sech",
    "sech_deg",
    "sinh",
    "sinh_deg",
    "tanh",
    "tanh_deg",
    # Geometry
    "cross",
    "dot",
    "hypot",
    # Generators
    "RangeOrder",
    "monolist",
    "range",
    "range_from_to",
]
