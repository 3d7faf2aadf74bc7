"""
List-backed Container Adapter

EntityContainer is the in-memory implementation of the Container port.
It keeps elements in a Python list, imposes no ordering and performs no
deduplication. Sorting is left to callers, e.g.
``sorted(container.get_all())``.
"""
from typing import Iterator, List, Tuple, TypeVar

from periodicals.domain.container_ports import Container
from periodicals.domain.errors import OutOfRangeError

T = TypeVar("T")


class EntityContainer(Container[T]):
    """
    Ordered container of entities backed by a list.

    Usage:
        journals: EntityContainer[Journal] = EntityContainer()
        journals.add(0, journal)
        journals.get(0)

    Positions are validated before the list is touched, so a failed call
    never shifts or drops elements. Not safe for concurrent mutation.
    """

    def __init__(self):
        self._entities: List[T] = []

    def _check_position(self, operation: str, position: int, upper: int) -> None:
        # bool is an int subclass; True must not silently mean position 1
        if isinstance(position, bool) or not isinstance(position, int):
            raise TypeError(
                f"{operation}: position must be int, got {type(position).__name__}"
            )
        if position < 0 or position > upper:
            raise OutOfRangeError(operation, position, len(self._entities))

    def add(self, position: int, element: T) -> None:
        self._check_position("add", position, len(self._entities))
        self._entities.insert(position, element)

    def remove(self, position: int) -> T:
        self._check_position("remove", position, len(self._entities) - 1)
        return self._entities.pop(position)

    def update(self, position: int, element: T) -> None:
        self._check_position("update", position, len(self._entities) - 1)
        self._entities[position] = element

    def get(self, position: int) -> T:
        self._check_position("get", position, len(self._entities) - 1)
        return self._entities[position]

    def get_all(self) -> Tuple[T, ...]:
        return tuple(self._entities)

    @property
    def entities(self) -> Tuple[T, ...]:
        """Snapshot of the current contents; same as get_all()."""
        return self.get_all()

    def __len__(self) -> int:
        return len(self._entities)

    def __iter__(self) -> Iterator[T]:
        return iter(self.get_all())

    def __repr__(self) -> str:
        return f"EntityContainer({list(self._entities)!r})"
