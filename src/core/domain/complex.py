"""
DoubleComplex — комплексное число с компонентами double precision

Immutable value type над парой float (real, imaginary):
- Арифметика: сложение, вычитание, умножение, деление
- Канонические экземпляры ZERO, ONE, I
- Численное равенство и согласованный с ним hash
- Детерминированное строковое представление "<real><sign><imaginary>i"

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Любое создание экземпляра проходит через канонизацию:
   (0, 0) → ZERO, (0, 1) → I, (1, 0) → ONE (численное равенство, -0.0 == 0.0)
2. После создания компоненты не меняются
3. a == b ⇒ hash(a) == hash(b)
4. NaN/Inf не являются ошибкой и распространяются по IEEE-754

ФОРМУЛЫ (self = a + bi, other = c + di):
    add:             (a + c, b + d)
    subtract:        (a - c, b - d)
    subtracted_from: (c - a, d - b)
    multiply:        (a*c - b*d, a*d + b*c)
    divide:          scale = c*c + d*d
                     ((a*c + b*d) / scale, (a*d - b*c) / scale)
"""

import logging
from collections.abc import Mapping
from typing import Any, Final, NoReturn

from pydantic import ValidationError

from src.core.domain.parts import ComplexParts
from src.core.errors import ComplexDivisionByZero, InvalidArgumentError
from src.core.math.numerical_safeguards import (
    EPS_FLOAT_COMPARE_ABS,
    EPS_FLOAT_COMPARE_REL,
    as_component,
    has_negative_sign,
    is_close,
    is_valid_float,
    numeric_equals,
)

logger = logging.getLogger(__name__)

# =============================================================================
# HASH-ПАРАМЕТРЫ
# =============================================================================

# Фиксированный seed типа: не зависит от id(класса) и PYTHONHASHSEED
HASH_SEED: Final[int] = 0x44C0_3D11

HASH_MULTIPLIER: Final[int] = 31


# =============================================================================
# DOUBLE COMPLEX
# =============================================================================


class DoubleComplex:
    """
    Комплексное число с компонентами double precision.

    Конструктор канонизирует: DoubleComplex(0.0, 0.0) is ZERO.
    Экземпляры immutable и могут свободно разделяться между потоками.

    Examples:
        >>> z = DoubleComplex(123.0, 456.0)
        >>> str(z)
        '123.0+456.0i'
        >>> DoubleComplex(1.0, 0.0) is ONE
        True
    """

    __slots__ = ("_real", "_imaginary")

    def __new__(cls, real: float, imaginary: float) -> "DoubleComplex":
        return _canonical(
            as_component(real, "real"),
            as_component(imaginary, "imaginary"),
        )

    @classmethod
    def _allocate(cls, real: float, imaginary: float) -> "DoubleComplex":
        instance = object.__new__(cls)
        object.__setattr__(instance, "_real", real)
        object.__setattr__(instance, "_imaginary", imaginary)
        return instance

    # -------------------------------------------------------------------------
    # Фабрики
    # -------------------------------------------------------------------------

    @classmethod
    def values_of(cls, real: float, imaginary: float) -> "DoubleComplex":
        """
        Комплексное число с заданными компонентами.

        Args:
            real: Вещественная часть (любой numbers.Real)
            imaginary: Мнимая часть (любой numbers.Real)

        Returns:
            Канонический экземпляр для (0, 0), (0, 1), (1, 0), иначе новый

        Raises:
            InvalidArgumentError: Если компонента None или не вещественное число
        """
        return cls(real, imaginary)

    @classmethod
    def from_parts(cls, parts: ComplexParts | Mapping[str, Any]) -> "DoubleComplex":
        """
        Создание из ComplexParts или mapping вида {"real": ..., "imaginary": ...}.

        Raises:
            InvalidArgumentError: Если parts is None или не проходит валидацию
        """
        if parts is None:
            raise InvalidArgumentError("parts must not be None")

        if not isinstance(parts, ComplexParts):
            try:
                parts = ComplexParts.model_validate(parts)
            except ValidationError as e:
                raise InvalidArgumentError(f"Invalid complex parts: {e}") from e

        return cls(parts.real, parts.imaginary)

    def to_parts(self) -> ComplexParts:
        """Компоненты в виде ComplexParts (значения идентичны real/imaginary)."""
        return ComplexParts(real=self._real, imaginary=self._imaginary)

    # -------------------------------------------------------------------------
    # Accessors
    # -------------------------------------------------------------------------

    @property
    def real(self) -> float:
        """Вещественная часть."""
        return self._real

    @property
    def imaginary(self) -> float:
        """Мнимая часть."""
        return self._imaginary

    def real_part(self) -> float:
        return self._real

    def imaginary_part(self) -> float:
        return self._imaginary

    # -------------------------------------------------------------------------
    # Арифметика
    # -------------------------------------------------------------------------

    def added_to(self, other: "DoubleComplex") -> "DoubleComplex":
        """
        Сумма self + other.

        Raises:
            InvalidArgumentError: Если other is None или не DoubleComplex
        """
        _require_operand(other, "addend")
        return _canonical(
            self._real + other._real,
            self._imaginary + other._imaginary,
        )

    add = added_to

    def subtract(self, other: "DoubleComplex") -> "DoubleComplex":
        """
        Разность self - other.

        Raises:
            InvalidArgumentError: Если other is None или не DoubleComplex
        """
        _require_operand(other, "subtrahend")
        return _canonical(
            self._real - other._real,
            self._imaginary - other._imaginary,
        )

    def subtracted_from(self, other: "DoubleComplex") -> "DoubleComplex":
        """
        Разность other - self: self вычитается из other.

        self: вычитаемое, other: уменьшаемое.
        x.subtracted_from(y) == y.subtract(x)

        Examples:
            >>> DoubleComplex(123, 456).subtracted_from(DoubleComplex(345, 456))
            DoubleComplex(real=222.0, imaginary=0.0)

        Raises:
            InvalidArgumentError: Если other is None или не DoubleComplex
        """
        _require_operand(other, "minuend")
        return _canonical(
            other._real - self._real,
            other._imaginary - self._imaginary,
        )

    def multiplied_by(self, other: "DoubleComplex") -> "DoubleComplex":
        """
        Произведение self * other.

        Raises:
            InvalidArgumentError: Если other is None или не DoubleComplex
        """
        _require_operand(other, "multiplicand")
        a, b = self._real, self._imaginary
        c, d = other._real, other._imaginary
        return _canonical(a * c - b * d, a * d + b * c)

    multiply = multiplied_by

    def divided_by(self, other: "DoubleComplex") -> "DoubleComplex":
        """
        Частное self / other через умножение на сопряжённое.

        Проверка делителя точная (scale == 0.0), без epsilon: очень малые
        делители, чей квадрат модуля уходит в underflow, тоже дают ошибку.

        Raises:
            InvalidArgumentError: Если other is None или не DoubleComplex
            ComplexDivisionByZero: Если c*c + d*d == 0.0
        """
        _require_operand(other, "divisor")
        a, b = self._real, self._imaginary
        c, d = other._real, other._imaginary

        scale = c * c + d * d
        if scale == 0.0:
            logger.debug("Complex division by zero: %s / %s", self, other)
            raise ComplexDivisionByZero(f"Divisor {other} has zero magnitude")

        return _canonical((a * c + b * d) / scale, (a * d - b * c) / scale)

    divide = divided_by

    def __add__(self, other: object) -> "DoubleComplex":
        if not isinstance(other, DoubleComplex):
            return NotImplemented
        return self.added_to(other)

    def __sub__(self, other: object) -> "DoubleComplex":
        if not isinstance(other, DoubleComplex):
            return NotImplemented
        return self.subtract(other)

    def __mul__(self, other: object) -> "DoubleComplex":
        if not isinstance(other, DoubleComplex):
            return NotImplemented
        return self.multiplied_by(other)

    def __truediv__(self, other: object) -> "DoubleComplex":
        if not isinstance(other, DoubleComplex):
            return NotImplemented
        return self.divided_by(other)

    # -------------------------------------------------------------------------
    # Сравнения
    # -------------------------------------------------------------------------

    def is_close(
        self,
        other: "DoubleComplex",
        rel_tol: float = EPS_FLOAT_COMPARE_REL,
        abs_tol: float = EPS_FLOAT_COMPARE_ABS,
    ) -> bool:
        """
        Покомпонентное сравнение с толерантностью.

        Не влияет на __eq__/__hash__: равенство всегда точное.

        Raises:
            InvalidArgumentError: Если other is None или не DoubleComplex
        """
        _require_operand(other, "other")
        return is_close(self._real, other._real, rel_tol, abs_tol) and is_close(
            self._imaginary, other._imaginary, rel_tol, abs_tol
        )

    def is_finite(self) -> bool:
        """True если обе компоненты конечны (не NaN, не Inf)."""
        return is_valid_float(self._real) and is_valid_float(self._imaginary)

    def __eq__(self, other: object) -> bool:
        if self is other:
            return True
        if not isinstance(other, DoubleComplex):
            return False
        return numeric_equals(self._real, other._real) and numeric_equals(
            self._imaginary, other._imaginary
        )

    def __hash__(self) -> int:
        result = HASH_SEED
        result = HASH_MULTIPLIER * result + hash(self._real)
        result = HASH_MULTIPLIER * result + hash(self._imaginary)
        return hash(result)

    # -------------------------------------------------------------------------
    # Представление
    # -------------------------------------------------------------------------

    def __str__(self) -> str:
        # Минус берётся из repr самой мнимой части
        sign = "" if has_negative_sign(self._imaginary) else "+"
        return f"{self._real!r}{sign}{self._imaginary!r}i"

    def __repr__(self) -> str:
        return f"DoubleComplex(real={self._real!r}, imaginary={self._imaginary!r})"

    def __complex__(self) -> complex:
        return complex(self._real, self._imaginary)

    # -------------------------------------------------------------------------
    # Immutability
    # -------------------------------------------------------------------------

    def __setattr__(self, name: str, value: Any) -> NoReturn:
        raise AttributeError(f"DoubleComplex is immutable, cannot set '{name}'")

    def __delattr__(self, name: str) -> NoReturn:
        raise AttributeError(f"DoubleComplex is immutable, cannot delete '{name}'")

    def __copy__(self) -> "DoubleComplex":
        return self

    def __deepcopy__(self, memo: dict[int, Any]) -> "DoubleComplex":
        return self

    def __reduce__(self) -> tuple[type, tuple[float, float]]:
        # Unpickling проходит через канонизацию
        return (DoubleComplex, (self._real, self._imaginary))


# =============================================================================
# КАНОНИЧЕСКИЕ ЭКЗЕМПЛЯРЫ
# =============================================================================

ZERO: Final[DoubleComplex] = DoubleComplex._allocate(0.0, 0.0)

ONE: Final[DoubleComplex] = DoubleComplex._allocate(1.0, 0.0)

I: Final[DoubleComplex] = DoubleComplex._allocate(0.0, 1.0)


def _canonical(real: float, imaginary: float) -> DoubleComplex:
    if real == 0.0:
        if imaginary == 0.0:
            return ZERO
        if imaginary == 1.0:
            return I
    elif real == 1.0 and imaginary == 0.0:
        return ONE

    return DoubleComplex._allocate(real, imaginary)


def _require_operand(other: object, role: str) -> None:
    if other is None:
        raise InvalidArgumentError(f"{role} must not be None")
    if not isinstance(other, DoubleComplex):
        raise InvalidArgumentError(
            f"{role} must be DoubleComplex, got {type(other).__name__}"
        )
