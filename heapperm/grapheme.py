"""
Text permuted by extended grapheme cluster rather than by code point.

A cluster such as "g̈" is one logical unit but several code points and
several UTF-8 bytes, so two clusters of different encoded length cannot be
exchanged with a fixed-width swap. GraphemeString keeps the text as a UTF-8
bytearray and splices the two byte spans in place, shifting the bytes that
lie between them by the difference in length.

Cluster boundaries are found by scanning from the start of the buffer on
every swap. The scan makes each swap O(len(buffer)); no boundary index is
kept between calls, so there is nothing to invalidate when the buffer
changes.

That only works if the boundaries survive any reordering. Some clusters
fuse with a neighbour once moved: a leading combining mark, Hangul jamo
split across clusters, a lone regional indicator. Text containing such a
pair is rejected up front with UnstableGraphemeError.
"""

from collections import Counter
from typing import Iterator

import regex

from heapperm.errors import UnstableGraphemeError, check_positions

GRAPHEME = regex.compile(r"\X")


def check_stable(clusters: list[str]) -> None:
    """
    raise UnstableGraphemeError if any two clusters that could end up side
    by side segment differently once joined.
    """
    counts = Counter(clusters)
    for left in counts:
        for right in counts:
            if left == right and counts[left] < 2:
                continue
            if GRAPHEME.findall(left + right) != [left, right]:
                raise UnstableGraphemeError(
                    f"grapheme clusters {left!r} and {right!r} fuse when "
                    f"adjacent"
                )


class GraphemeString:
    __slots__ = ("_buf", "_length", "_scratch")

    def __init__(self, text: str):
        clusters = GRAPHEME.findall(text)
        check_stable(clusters)
        self._buf = bytearray(text.encode("utf-8"))
        # the count never changes under swap, so it is computed once
        self._length = len(clusters)
        self._scratch = bytearray()

    def _spans(self) -> Iterator[tuple[int, int]]:
        start = 0
        for cluster in GRAPHEME.finditer(self._buf.decode("utf-8")):
            end = start + len(cluster.group().encode("utf-8"))
            yield start, end
            start = end

    def _locate(self, a: int, b: int) -> tuple[tuple[int, int], tuple[int, int]]:
        """byte spans of clusters a < b"""
        found = {}
        for position, span in enumerate(self._spans()):
            if position == a or position == b:
                found[position] = span
                if len(found) == 2:
                    break
        if len(found) < 2:
            raise UnstableGraphemeError(
                f"buffer no longer segments into {self._length} clusters: "
                f"{self.graphemes()!r}"
            )
        return found[a], found[b]

    def swap(self, a: int, b: int) -> None:
        check_positions(a, b, self._length)
        if a == b:
            return
        if a > b:
            a, b = b, a
        (left_start, left_end), (right_start, right_end) = self._locate(a, b)
        left_len = left_end - left_start
        right_len = right_end - right_start
        buf, scratch = self._buf, self._scratch
        if left_len == right_len:
            scratch[:] = buf[left_start:left_end]
            buf[left_start:left_end] = buf[right_start:right_end]
            buf[right_start:right_end] = scratch
        elif left_len > right_len:
            shift = left_len - right_len
            scratch[:] = buf[left_start:left_end]
            # shorter unit into the head of the longer unit's old span
            buf[left_start:left_start + right_len] = buf[right_start:right_end]
            buf[left_end - shift:right_start - shift] = (
                buf[left_end:right_start]
            )
            buf[right_start - shift:right_end] = scratch
        else:
            shift = right_len - left_len
            scratch[:] = buf[right_start:right_end]
            # shorter unit into the tail of the longer unit's old span
            buf[right_end - left_len:right_end] = buf[left_start:left_end]
            buf[left_end + shift:right_start + shift] = (
                buf[left_end:right_start]
            )
            buf[left_start:left_start + right_len] = scratch

    def __len__(self) -> int:
        return self._length

    def __copy__(self) -> "GraphemeString":
        clone = GraphemeString.__new__(GraphemeString)
        clone._buf = self._buf.copy()
        clone._length = self._length
        clone._scratch = bytearray()
        return clone

    @property
    def value(self) -> str:
        return self._buf.decode("utf-8")

    def as_bytes(self) -> bytes:
        return bytes(self._buf)

    def graphemes(self) -> list[str]:
        return GRAPHEME.findall(self.value)

    def __str__(self) -> str:
        return self.value

    def __eq__(self, other: object) -> bool:
        if isinstance(other, GraphemeString):
            return self._buf == other._buf
        if isinstance(other, str):
            return self.value == other
        return NotImplemented

    def __repr__(self) -> str:
        return f"GraphemeString({self.value!r})"
