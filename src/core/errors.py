"""
Таксономия ошибок core.

- InvalidArgumentError: аргумент отсутствует (None) или имеет неверный тип
- ComplexDivisionByZero: делитель имеет нулевой квадрат модуля
- UnsupportedOperationError: опциональная операция не поддерживается

Все ошибки синхронные и немедленные; частичные результаты не возвращаются.
"""


# =============================================================================
# EXCEPTIONS
# =============================================================================


class InvalidArgumentError(TypeError, ValueError):
    """
    Аргумент операции отсутствует (None) или не является допустимым значением.

    Наследует TypeError и ValueError: вызывающий код может ловить любой из них.
    """

    pass


class ComplexDivisionByZero(ZeroDivisionError):
    """
    Деление на комплексное число с квадратом модуля, точно равным 0.0.

    Аргумент сам по себе корректен, поэтому это ArithmeticError,
    а не InvalidArgumentError.
    """

    pass


class UnsupportedOperationError(NotImplementedError):
    """Опциональная операция не поддерживается данной реализацией."""

    pass
