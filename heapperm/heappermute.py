from typing import Any, Iterator

from heapperm.iterator import PermuteIter
from heapperm.swappable import as_swappable


def _hpwrap(value: Any) -> PermuteIter:
    try:
        container = as_swappable(value)
    except TypeError:
        raise TypeError(
            "Argument must be a str, bytes, sequence, non-negative int or "
            "Swappable"
        )
    return PermuteIter(container)


def hperms(value: Any) -> Iterator[Any]:
    return (snapshot.value for snapshot in _hpwrap(value))


def heappermute(value: Any) -> tuple[Any, ...]:
    return tuple(hperms(value))
