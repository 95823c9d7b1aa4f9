"""
Core math modules

Математические примитивы серии: округление к четверти, генерация
геометрической серии и выбор special-значений двумя стратегиями.
"""

# Numerical Safeguards
from src.core.math.numerical_safeguards import (
    ieee_divide,
    is_valid_float,
    round_to_epsilon,
    safe_log,
    safe_power,
)

# Quarter Rounding
from src.core.math.rounding import (
    QUARTER_DECIMALS,
    QUARTER_STEP,
    round_quarter,
)

# Series Generator
from src.core.math.series import (
    CANDIDATE_CAP_FACTOR,
    build_series,
    compute_first_term,
    compute_growth_rate,
    generate_series,
    iter_series,
)

# Special Values
from src.core.math.special_values import (
    LEEWAY,
    MIN_SERIES_LENGTH,
    TARGET_CONSTANT,
    InvalidArgument,
    SpecialPair,
    check_series_length,
    estimate_index,
    pick_special,
    pick_special_alt,
    target_approximation,
)

__all__ = [
    # Numerical Safeguards
    "ieee_divide",
    "is_valid_float",
    "round_to_epsilon",
    "safe_log",
    "safe_power",
    # Quarter Rounding — Constants
    "QUARTER_DECIMALS",
    "QUARTER_STEP",
    # Quarter Rounding — Functions
    "round_quarter",
    # Series Generator — Constants
    "CANDIDATE_CAP_FACTOR",
    # Series Generator — Functions
    "build_series",
    "compute_first_term",
    "compute_growth_rate",
    "generate_series",
    "iter_series",
    # Special Values — Constants
    "LEEWAY",
    "MIN_SERIES_LENGTH",
    "TARGET_CONSTANT",
    # Special Values — Exceptions
    "InvalidArgument",
    # Special Values — Types
    "SpecialPair",
    # Special Values — Functions
    "check_series_length",
    "estimate_index",
    "pick_special",
    "pick_special_alt",
    "target_approximation",
]
