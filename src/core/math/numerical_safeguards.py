"""
Numerical Safeguards — примитивы для компонент double precision

Модуль содержит операции над отдельными float-компонентами, на которых
построен DoubleComplex:
- Численное равенство (IEEE-754 ==, +0.0 и -0.0 равны)
- Проверка конечности (NaN/Inf)
- Приведение аргументов к float с отказом для None и нечисловых типов
- Epsilon-сравнения float с учётом машинной точности

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. NaN/Inf принимаются и передаются дальше без изменений (не санитизируются)
2. Строки никогда не приводятся к float (нет разбора текста)
3. Все операции детерминированы и воспроизводимы
"""

import math
import numbers
from typing import Any, Final

from src.core.errors import InvalidArgumentError

# =============================================================================
# EPSILON-ПАРАМЕТРЫ
# =============================================================================

# Epsilon для сравнения float (относительная толерантность)
# Используется в is_close для относительных сравнений
EPS_FLOAT_COMPARE_REL: Final[float] = 1e-9

# Epsilon для сравнения float (абсолютная толерантность)
# Используется в is_close для абсолютных сравнений
EPS_FLOAT_COMPARE_ABS: Final[float] = 1e-12


# =============================================================================
# ПРИВЕДЕНИЕ АРГУМЕНТОВ
# =============================================================================


def as_component(value: Any, name: str) -> float:
    """
    Приведение аргумента к компоненте double precision.

    Принимает любой numbers.Real (int, float, numpy floating). None и
    нечисловые значения (str, complex, произвольные объекты) отклоняются.

    Args:
        value: Исходное значение
        name: Имя параметра (для сообщения об ошибке)

    Returns:
        float(value)

    Raises:
        InvalidArgumentError: Если value is None или не является вещественным числом

    Examples:
        >>> as_component(3, "real")
        3.0
        >>> as_component(float("nan"), "real")
        nan
    """
    if value is None:
        raise InvalidArgumentError(f"{name} must not be None")

    if not isinstance(value, numbers.Real):
        raise InvalidArgumentError(
            f"{name} must be a real number, got {type(value).__name__}"
        )

    return float(value)


# =============================================================================
# РАВЕНСТВО И ПРОВЕРКИ
# =============================================================================


def numeric_equals(a: float, b: float) -> bool:
    """
    Численное равенство двух компонент.

    Обычное IEEE-754 сравнение, а не побитовое: +0.0 == -0.0,
    NaN не равен ничему (включая себя).

    Examples:
        >>> numeric_equals(0.0, -0.0)
        True
        >>> numeric_equals(float("nan"), float("nan"))
        False
    """
    return a == b


def is_valid_float(value: float) -> bool:
    """
    Проверка, является ли float валидным (не NaN, не Inf).

    Args:
        value: Проверяемое значение

    Returns:
        True если значение конечное, False если NaN или Inf
    """
    return math.isfinite(value)


def has_negative_sign(value: float) -> bool:
    """
    Проверка знакового бита float.

    В отличие от value < 0 учитывает -0.0 и -inf; NaN считается
    положительным независимо от знакового бита.

    Examples:
        >>> has_negative_sign(-0.0)
        True
        >>> has_negative_sign(0.0)
        False
    """
    if math.isnan(value):
        return False
    return math.copysign(1.0, value) < 0


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

    Реализация Python's math.isclose с настраиваемыми толерантностями.

    Алгоритм:
        abs(a - b) <= max(rel_tol * max(abs(a), abs(b)), abs_tol)

    Args:
        a: Первое значение
        b: Второе значение
        rel_tol: Относительная толерантность (default: 1e-9)
        abs_tol: Абсолютная толерантность (default: 1e-12)

    Returns:
        True если значения близки с учётом толерантности

    Raises:
        ValueError: Если толерантность отрицательная

    Examples:
        >>> is_close(1.0, 1.0 + 1e-10)
        True
        >>> is_close(1.0, 1.1)
        False
        >>> is_close(0.0, 1e-13)
        True  # abs diff < abs_tol
    """
    return math.isclose(a, b, rel_tol=rel_tol, abs_tol=abs_tol)

