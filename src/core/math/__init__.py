"""
Core math modules

Численные примитивы над компонентами double precision.
"""

# Numerical Safeguards
from src.core.math.numerical_safeguards import (
    # Epsilon constants
    EPS_FLOAT_COMPARE_ABS,
    EPS_FLOAT_COMPARE_REL,
    # Argument coercion
    as_component,
    # Equality and checks
    has_negative_sign,
    is_valid_float,
    numeric_equals,
    # Epsilon comparisons
    is_close,
)

__all__ = [
    # Numerical Safeguards — Epsilon constants
    "EPS_FLOAT_COMPARE_ABS",
    "EPS_FLOAT_COMPARE_REL",
    # Numerical Safeguards — Argument coercion
    "as_component",
    # Numerical Safeguards — Equality and checks
    "has_negative_sign",
    "is_valid_float",
    "numeric_equals",
    # Numerical Safeguards — Epsilon comparisons
    "is_close",
]
