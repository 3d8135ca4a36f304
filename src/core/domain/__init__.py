"""
Domain models and value objects.

Contains the DoubleComplex value type with its canonical instances,
its pydantic interop form and the Vector sequence interface.
"""

from src.core.domain.complex import I, ONE, ZERO, DoubleComplex
from src.core.domain.parts import ComplexParts
from src.core.domain.vector import Vector
from src.core.errors import (
    ComplexDivisionByZero,
    InvalidArgumentError,
    UnsupportedOperationError,
)

__all__ = [
    # Complex module
    "DoubleComplex",
    "ZERO",
    "ONE",
    "I",
    # Interop model
    "ComplexParts",
    # Vector interface
    "Vector",
    # Errors
    "InvalidArgumentError",
    "ComplexDivisionByZero",
    "UnsupportedOperationError",
]
