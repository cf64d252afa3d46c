"""
Core math modules для sqrtkit

Валидированный квадратный корень и численные примитивы.
"""

# Numerical Safeguards
from sqrtkit.core.math.numerical_safeguards import (
    # Epsilon constants
    EPS_FLOAT_COMPARE_ABS,
    EPS_FLOAT_COMPARE_REL,
    # Classification
    is_nan,
    is_negative_input,
    is_valid_float,
    # Comparisons
    is_close,
    verify_square_root,
)

# Square Root
from sqrtkit.core.math.square_root import (
    square_root,
    try_square_root,
    validate_sqrt_input,
)

__all__ = [
    # Numerical Safeguards — Epsilon constants
    "EPS_FLOAT_COMPARE_ABS",
    "EPS_FLOAT_COMPARE_REL",
    # Numerical Safeguards — Classification
    "is_nan",
    "is_negative_input",
    "is_valid_float",
    # Numerical Safeguards — Comparisons
    "is_close",
    "verify_square_root",
    # Square Root — Functions
    "square_root",
    "try_square_root",
    "validate_sqrt_input",
]
