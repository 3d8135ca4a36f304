"""
ComplexParts — Pydantic-представление комплексного числа

Immutable модель с компонентами как отдельными полями. Используется для
обмена с внешним кодом (dict / JSON-совместимые структуры) там, где
DoubleComplex нельзя передать напрямую. Сама модель не выполняет
арифметику и канонизацию: это делает DoubleComplex.from_parts.
"""

from pydantic import BaseModel, Field


class ComplexParts(BaseModel):
    """
    Компоненты комплексного числа.

    strict=True: строки не приводятся к float, None отклоняется.
    NaN и Inf допустимы (allow_inf_nan по умолчанию).
    """

    real: float = Field(..., description="Вещественная часть")
    imaginary: float = Field(..., description="Мнимая часть")

    model_config = {"frozen": True, "strict": True}  # Immutable
