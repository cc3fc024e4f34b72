"""
Vector broadcast layer для mathlab

Поэлементные версии скалярных функций над последовательностями float.
"""

# Generic helpers
from mathlab.vector._lift import map_vec, num_vec, vec_num, zip_vec

# Unary
from mathlab.vector.unary import (
    abs_vec,
    acos_deg_vec,
    acos_vec,
    acosh_deg_vec,
    acosh_vec,
    acot_deg_vec,
    acot_vec,
    acoth_deg_vec,
    acoth_vec,
    acsc_deg_vec,
    acsc_vec,
    acsch_deg_vec,
    acsch_vec,
    asec_deg_vec,
    asec_vec,
    asech_deg_vec,
    asech_vec,
    asin_deg_vec,
    asin_vec,
    asinh_deg_vec,
    asinh_vec,
    atan_deg_vec,
    atan_vec,
    atanh_deg_vec,
    atanh_vec,
    cbrt_vec,
    ceil_vec,
    cos_deg_vec,
    cos_vec,
    cosh_deg_vec,
    cosh_vec,
    cot_deg_vec,
    cot_vec,
    coth_deg_vec,
    coth_vec,
    csc_deg_vec,
    csc_vec,
    csch_deg_vec,
    csch_vec,
    cube_vec,
    deg_to_rad_vec,
    exp_vec,
    f64_to_f32_vec,
    fact_vec,
    fix64_vec,
    fix_vec,
    floor_vec,
    fround_vec,
    gamma_vec,
    i64_to_f64_vec,
    inv_vec,
    is_inf_f32_vec,
    is_inf_f64_vec,
    is_nan_f32_vec,
    is_nan_f64_vec,
    is_ninf_f32_vec,
    is_ninf_f64_vec,
    ln1p_vec,
    ln_vec,
    log10_vec,
    log2_vec,
    rad_to_deg_vec,
    round_vec,
    sec_deg_vec,
    sec_vec,
    sech_deg_vec,
    sech_vec,
    sign_vec,
    sin_deg_vec,
    sin_vec,
    sinh_deg_vec,
    sinh_vec,
    sqr_vec,
    sqrt_vec,
    tan_deg_vec,
    tan_vec,
    tanh_deg_vec,
    tanh_vec,
    to_fixed_vec,
    trunc_vec,
    u64_to_f64_vec,
)

# Scalar-left broadcast
from mathlab.vector.scalar_left import (
    add_num_vec,
    divi_num_vec,
    mult_num_vec,
    nrt_num_vec,
    perimeter_num_vec,
    pow_num_vec,
    rem_num_vec,
    subt_num_vec,
)

# Scalar-right broadcast
from mathlab.vector.scalar_right import (
    add_vec_num,
    divi_vec_num,
    mult_vec_num,
    nrt_vec_num,
    perimeter_vec_num,
    pow_vec_num,
    rem_vec_num,
    subt_vec_num,
)

# Pairwise
from mathlab.vector.pairwise import (
    add_vec_vec,
    divi_vec_vec,
    mult_vec_vec,
    nrt_vec_vec,
    perimeter_vec_vec,
    pow_vec_vec,
    rem_vec_vec,
    subt_vec_vec,
)

__all__ = [
    # Generic helpers
    "map_vec",
    "num_vec",
    "vec_num",
    "zip_vec",
    # Unary
    "abs_vec",
    "acos_deg_vec",
    "acos_vec",
    "acosh_deg_vec",
    "acosh_vec",
    "acot_deg_vec",
    "acot_vec",
    "acoth_deg_vec",
    "acoth_vec",
    "acsc_deg_vec",
    "acsc_vec",
    "acsch_deg_vec",
    "acsch_vec",
    "asec_deg_vec",
    "asec_vec",
    "asech_deg_vec",
    "asech_vec",
    "asin_deg_vec",
    "asin_vec",
    "asinh_deg_vec",
    "asinh_vec",
    "atan_deg_vec",
    "atan_vec",
    "atanh_deg_vec",
    "atanh_vec",
    "cbrt_vec",
    "ceil_vec",
    "cos_deg_vec",
    "cos_vec",
    "cosh_deg_vec",
    "cosh_vec",
    "cot_deg_vec",
    "cot_vec",
    "coth_deg_vec",
    "coth_vec",
    "csc_deg_vec",
    "csc_vec",
    "csch_deg_vec",
    "csch_vec",
    "cube_vec",
    "deg_to_rad_vec",
    "exp_vec",
    "f64_to_f32_vec",
    "fact_vec",
    "fix64_vec",
    "fix_vec",
    "floor_vec",
    "fround_vec",
    "gamma_vec",
    "i64_to_f64_vec",
    "inv_vec",
    "is_inf_f32_vec",
    "is_inf_f64_vec",
    "is_nan_f32_vec",
    "is_nan_f64_vec",
    "is_ninf_f32_vec",
    "is_ninf_f64_vec",
    "ln1p_vec",
    "ln_vec",
    "log10_vec",
    "log2_vec",
    "rad_to_deg_vec",
    "round_vec",
    "sec_deg_vec",
    "sec_vec",
    "sech_deg_vec",
    "sech_vec",
    "sign_vec",
    "sin_deg_vec",
    "sin_vec",
    "sinh_deg_vec",
    "sinh_vec",
    "sqr_vec",
    "sqrt_vec",
    "tan_deg_vec",
    "tan_vec",
    "tanh_deg_vec",
    "tanh_vec",
    "to_fixed_vec",
    "trunc_vec",
    "u64_to_f64_vec",
    # Scalar-left broadcast
    "add_num_vec",
    "divi_num_vec",
    "mult_num_vec",
    "nrt_num_vec",
    "perimeter_num_vec",
    "pow_num_vec",
    "rem_num_vec",
    "subt_num_vec",
    # Scalar-right broadcast
    "add_vec_num",
    "divi_vec_num",
    "mult_vec_num",
    "nrt_vec_num",
    "perimeter_vec_num",
    "pow_vec_num",
    "rem_vec_num",
    "subt_vec_num",
    # Pairwise
    "add_vec_vec",
    "divi_vec_vec",
    "mult_vec_vec",
    "nrt_vec_vec",
    "perimeter_vec_vec",
    "pow_vec_vec",
    "rem_vec_vec",
    "subt_vec_vec",
]
