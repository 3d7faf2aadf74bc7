"""
Container Port (Interface)

Abstract contract for an ordered, position-addressable container holding
elements of a single type. Positions are the contiguous integers
``[0, len(container))``; negative positions are never counted from the end.

Implementations are not thread safe. Callers that share a container
between threads must synchronise access themselves.
"""
from abc import ABC, abstractmethod
from typing import Generic, Tuple, TypeVar

T = TypeVar("T")


class Container(ABC, Generic[T]):
    """
    Port for positional CRUD over a sequence of ``T``.

    Every positional operation raises OutOfRangeError for an invalid
    position and leaves the container unchanged when it does.
    """

    @abstractmethod
    def add(self, position: int, element: T) -> None:
        """
        Insert an element so that it occupies ``position``.

        Elements previously at ``position`` and beyond shift one place later.

        Args:
            position: Target position, ``0 <= position <= len(self)``.
                ``len(self)`` appends.
            element: The element to insert.
        """
        pass

    @abstractmethod
    def remove(self, position: int) -> T:
        """
        Delete and return the element at ``position``.

        Args:
            position: Position to delete, ``0 <= position < len(self)``.

        Returns:
            The removed element.
        """
        pass

    @abstractmethod
    def update(self, position: int, element: T) -> None:
        """
        Replace the element at ``position``. Length is unchanged.

        Args:
            position: Position to overwrite, ``0 <= position < len(self)``.
            element: The replacement element.
        """
        pass

    @abstractmethod
    def get(self, position: int) -> T:
        """
        Return the element at ``position`` without mutation.

        Args:
            position: Position to read, ``0 <= position < len(self)``.
        """
        pass

    @abstractmethod
    def get_all(self) -> Tuple[T, ...]:
        """
        Return every element in positional order.

        The returned tuple is a snapshot; later changes to the container
        are not reflected in it.
        """
        pass

    @abstractmethod
    def __len__(self) -> int:
        """Number of elements currently held."""
        pass
