from copy import copy
from typing import Any, Generic, Iterator

from heapperm.heap import HeapPermutor
from heapperm.hptypes import SwappableT
from heapperm.log import get_logger
from heapperm.swappable import as_swappable

logger = get_logger(__name__)


class PermuteIter(Iterator[SwappableT], Generic[SwappableT]):
    """
    lazy, single-pass iterator over every permutation of a container.

    each pull returns a copy of the container taken before the engine
    advances it, so the first pull is the original arrangement. the
    iterator keeps its own copy of `container`; the caller's object is
    never mutated.
    """

    __slots__ = ("_permutor", "_source", "_produced")

    def __init__(self, container: SwappableT):
        self._source = copy(container)
        self._permutor = HeapPermutor.for_container(self._source)
        self._produced = 0

    @classmethod
    def from_value(cls, value: Any) -> "PermuteIter":
        return cls(as_swappable(value))

    def __iter__(self) -> "PermuteIter[SwappableT]":
        return self

    def __next__(self) -> SwappableT:
        if self._permutor.finished:
            raise StopIteration
        snapshot = copy(self._source)
        self._permutor.advance(self._source)
        self._produced += 1
        if self._permutor.finished:
            logger.debug(
                "exhausted after %d permutations of %d units",
                self._produced, len(self._permutor)
            )
        return snapshot
