"""
Numerical Safeguards — проверки числовых значений

Примитивы, которыми пользуется парсер и тесты конверсий:
- Проверка "это число" в смысле JSON (bool числом не считается)
- Проверка конечности (не NaN, не Inf) и приведение к float
- Сравнение float с учётом машинной точности

Значение величины (value) может быть любым числом, включая NaN/Inf.
Конечность требуется только от временных меток (updatedAt).
"""

import math
from numbers import Real
from typing import Any, Final

# =============================================================================
# EPSILON-ПАРАМЕТРЫ
# =============================================================================

# Относительная толерантность для сравнения результатов конверсий.
# Таблицы факторов строятся из независимых констант, поэтому
# round-trip конверсия совпадает с исходным значением лишь приближённо.
EPS_FLOAT_COMPARE_REL: Final[float] = 1e-9

# Абсолютная толерантность (для значений около нуля)
EPS_FLOAT_COMPARE_ABS: Final[float] = 1e-12


# =============================================================================
# ПРОВЕРКИ ТИПОВ
# =============================================================================


def is_numeric(value: Any) -> bool:
    """
    Проверка, является ли значение числом в смысле JSON.

    bool в Python — подкласс int, но в JSON это отдельный тип,
    поэтому True/False числами не считаются.

    Args:
        value: Проверяемое значение

    Returns:
        True для int/float (включая NaN и Inf), False иначе

    Examples:
        >>> is_numeric(10)
        True
        >>> is_numeric(float('nan'))
        True
        >>> is_numeric(True)
        False
        >>> is_numeric("10")
        False
    """
    return isinstance(value, Real) and not isinstance(value, bool)


def is_valid_float(value: float) -> bool:
    """
    Проверка, является ли float валидным (не NaN, не Inf).

    Args:
        value: Проверяемое значение

    Returns:
        True если значение конечное, False если NaN или Inf
    """
    return math.isfinite(value)


def is_finite_number(value: Any) -> bool:
    """Число в смысле JSON и при этом конечное."""
    return is_numeric(value) and is_valid_float(to_float(value))


def to_float(value: Real) -> float:
    """
    Приведение числа к float.

    int за пределами диапазона float становится ±Inf
    (так же, как число с плавающей точкой, записанное в JSON-тексте).

    Examples:
        >>> to_float(3)
        3.0
        >>> to_float(-10**400)
        -inf
    """
    try:
        return float(value)
    except OverflowError:
        return math.inf if value > 0 else -math.inf


# =============================================================================
# EPSILON-СРАВНЕНИЯ
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

    Examples:
        >>> is_close(1.0, 1.0 + 1e-10)
        True
        >>> is_close(1.0, 1.1)
        False
    """
    return math.isclose(a, b, rel_tol=rel_tol, abs_tol=abs_tol)
