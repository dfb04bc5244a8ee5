"""
Heap's algorithm without recursion.

`counters[i]` stands in for the loop variable of the recursive call at depth
i, and resetting `cursor` to 1 plays the part of returning to the innermost
frame. Each call to `advance` performs at most one swap.
"""

from heapperm.errors import SizeMismatchError
from heapperm.hptypes import Swappable
from heapperm.log import get_logger

logger = get_logger(__name__)


class HeapPermutor:
    __slots__ = ("_finished", "cursor", "counters")

    def __init__(self, size: int):
        if size < 0:
            raise ValueError("size must be non-negative")
        self._finished = False
        self.cursor = 1
        self.counters = [0] * size
        logger.debug("permutor created for %d units", size)

    @classmethod
    def for_container(cls, container: Swappable) -> "HeapPermutor":
        return cls(len(container))

    @property
    def finished(self) -> bool:
        return self._finished

    def __len__(self) -> int:
        return len(self.counters)

    def advance(self, container: Swappable) -> None:
        """
        step `container` to its next permutation in place. sets `finished`
        instead of swapping once every permutation has been produced.
        """
        size = len(self.counters)
        if len(container) != size:
            raise SizeMismatchError(
                f"permutor sized for {size} units was given a container of "
                f"length {len(container)}"
            )
        counters = self.counters
        while self.cursor < size:
            cursor = self.cursor
            if counters[cursor] < cursor:
                if cursor % 2 == 0:
                    container.swap(0, cursor)
                else:
                    container.swap(counters[cursor], cursor)
                counters[cursor] += 1
                self.cursor = 1
                return
            counters[cursor] = 0
            self.cursor += 1
        self._finished = True
