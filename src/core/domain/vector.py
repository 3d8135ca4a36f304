"""
Vector — минимальная индексируемая последовательность

Абстрактный интерфейс с двумя обязательными методами (size, get) и
опциональным set, который по умолчанию не поддерживается. DoubleComplex
от него не зависит.
"""

from abc import ABC, abstractmethod
from typing import Generic, TypeVar

from src.core.errors import UnsupportedOperationError

E = TypeVar("E")


class Vector(ABC, Generic[E]):
    """
    Индексируемая последовательность фиксированного размера.

    Реализации обязаны определить size и get. Для изменяемых реализаций
    переопределяется set.
    """

    __slots__ = ()

    @abstractmethod
    def size(self) -> int:
        """Количество элементов."""

    @abstractmethod
    def get(self, index: int) -> E:
        """
        Элемент по индексу.

        Raises:
            IndexError: Если index < 0 или index >= size()
        """

    def set(self, index: int, element: E) -> E:
        """
        Замена элемента по индексу (опциональная операция).

        Returns:
            Предыдущий элемент по этому индексу

        Raises:
            UnsupportedOperationError: Если реализация не поддерживает set
        """
        raise UnsupportedOperationError(f"{type(self).__name__} does not support set")

    def check_index(self, index: int) -> None:
        """
        Проверка границ индекса для реализаций get/set.

        Raises:
            IndexError: Если index < 0 или index >= size()
        """
        if index < 0 or index >= self.size():
            raise IndexError(f"Index {index} out of range for size {self.size()}")

    def __len__(self) -> int:
        return self.size()

    def __getitem__(self, index: int) -> E:
        return self.get(index)
