from heapperm.errors import (
    ContractViolation, SizeMismatchError, SwapRangeError,
    UnstableGraphemeError
)
from heapperm.grapheme import GraphemeString
from heapperm.heap import HeapPermutor
from heapperm.heappermute import heappermute, hperms
from heapperm.hptypes import Swappable
from heapperm.iterator import PermuteIter
from heapperm.swappable import (
    BitPattern, ByteBuffer, CharSequence, ElementSequence, as_swappable
)

__all__ = [
    "BitPattern",
    "ByteBuffer",
    "CharSequence",
    "ContractViolation",
    "ElementSequence",
    "GraphemeString",
    "HeapPermutor",
    "PermuteIter",
    "SizeMismatchError",
    "SwapRangeError",
    "Swappable",
    "UnstableGraphemeError",
    "as_swappable",
    "heappermute",
    "hperms",
]
