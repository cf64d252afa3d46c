"""
Numerical Safeguards — Float Classification & Tolerances

Модуль содержит примитивы классификации float и сравнения с учётом
машинной точности, общие для всех square-root операций:
- Классификация входа: NaN, отрицательные значения (включая -inf)
- Epsilon-сравнения float
- Проверка корня: root * root ≈ x

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. -0.0 НЕ считается отрицательным (IEEE 754: -0.0 == 0.0)
2. NaN никогда не считается отрицательным (решение принимается NaN-политикой)
3. Float сравнения всегда учитывают машинную точность
"""

import math
from typing import Final

# =============================================================================
# EPSILON-ПАРАМЕТРЫ
# =============================================================================

# Относительная толерантность для сравнения float
EPS_FLOAT_COMPARE_REL: Final[float] = 1e-9

# Абсолютная толерантность для сравнения float (значения около нуля)
EPS_FLOAT_COMPARE_ABS: Final[float] = 1e-12


# =============================================================================
# КЛАССИФИКАЦИЯ FLOAT
# =============================================================================


def is_valid_float(value: float) -> bool:
    """
    Проверка, является ли float конечным (не NaN, не Inf).

    Args:
        value: Проверяемое значение

    Returns:
        True если значение finite, False если NaN или ±Inf
    """
    return math.isfinite(value)


def is_nan(value: float) -> bool:
    """Проверка на NaN."""
    return math.isnan(value)


def is_negative_input(value: float) -> bool:
    """
    Проверка, является ли значение недопустимым отрицательным входом sqrt.

    Строгое сравнение value < 0: -inf отрицательный, -0.0 и NaN нет.

    Examples:
        >>> is_negative_input(-1.0)
        True
        >>> is_negative_input(float('-inf'))
        True
        >>> is_negative_input(-0.0)
        False
        >>> is_negative_input(float('nan'))
        False
    """
    return value < 0.0


# =============================================================================
# EPSILON-СРАВНЕНИЯ FLOAT
# =============================================================================


def is_close(
    a: float,
    b: float,
    rel_tol: float = EPS_FLOAT_COMPARE_REL,
    abs_tol: float = EPS_FLOAT_COMPARE_ABS,
) -> bool:
    """
    Сравнение float с учётом машинной точности.

    Алгоритм:
        abs(a - b) <= max(rel_tol * max(abs(a), abs(b)), abs_tol)

    Args:
        a: Первое значение
        b: Второе значение
        rel_tol: Относительная толерантность (default: 1e-9)
        abs_tol: Абсолютная толерантность (default: 1e-12)

    Returns:
        True если значения близки с учётом толерантности
    """
    return math.isclose(a, b, rel_tol=rel_tol, abs_tol=abs_tol)


def verify_square_root(
    value: float,
    root: float,
    rel_tol: float = EPS_FLOAT_COMPARE_REL,
    abs_tol: float = EPS_FLOAT_COMPARE_ABS,
) -> bool:
    """
    Проверка корректности корня: root >= 0 и root * root ≈ value.

    Для бесконечностей сравнение точное: корень из inf только inf.
    NaN никогда не проходит проверку.

    Args:
        value: Исходное неотрицательное значение
        root: Предполагаемый квадратный корень
        rel_tol: Относительная толерантность
        abs_tol: Абсолютная толерантность

    Returns:
        True если root является квадратным корнем value в пределах толерантности

    Examples:
        >>> verify_square_root(144.0, 12.0)
        True
        >>> verify_square_root(2.0, 1.4142135623730951)
        True
        >>> verify_square_root(4.0, -2.0)
        False
    """
    if is_nan(value) or is_nan(root):
        return False

    if root < 0.0:
        return False

    if not is_valid_float(value) or not is_valid_float(root):
        # Конечный root * root может переполниться до inf
        return value == root

    return is_close(root * root, value, rel_tol=rel_tol, abs_tol=abs_tol)
