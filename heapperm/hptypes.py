from typing import Any, Protocol, Self, TypeVar, runtime_checkable

T = TypeVar('T')


@runtime_checkable
class Swappable(Protocol):
    """
    anything Heap's algorithm can permute: a fixed number of logical units,
    any two of which can be exchanged in place.
    """

    def swap(self, a: int, b: int) -> None:
        pass

    def __len__(self) -> int:
        pass

    def __copy__(self) -> Self:
        pass

    @property
    def value(self) -> Any:
        pass


SwappableT = TypeVar('SwappableT', bound=Swappable)
