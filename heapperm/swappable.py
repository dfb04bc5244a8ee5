"""Fixed-width containers: one logical unit per element, byte or bit."""

from functools import singledispatch
from typing import Any, Sequence

from heapperm.errors import check_positions
from heapperm.hptypes import Swappable, T


class ElementSequence:
    __slots__ = ("_items", "_kind")

    def __init__(self, elements: Sequence[T]):
        self._kind = tuple if isinstance(elements, tuple) else list
        self._items = list(elements)

    def swap(self, a: int, b: int) -> None:
        check_positions(a, b, len(self._items))
        items = self._items
        items[a], items[b] = items[b], items[a]

    def __len__(self) -> int:
        return len(self._items)

    def __copy__(self) -> "ElementSequence":
        clone = ElementSequence.__new__(ElementSequence)
        clone._kind = self._kind
        clone._items = self._items.copy()
        return clone

    @property
    def value(self) -> list | tuple:
        return self._kind(self._items)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, ElementSequence):
            return self._items == other._items
        if isinstance(other, (list, tuple)):
            return self._items == list(other)
        return NotImplemented

    def __repr__(self) -> str:
        return f"ElementSequence({self.value!r})"


class CharSequence:
    """str permuted code point by code point."""

    __slots__ = ("_chars",)

    def __init__(self, text: str):
        self._chars = list(text)

    def swap(self, a: int, b: int) -> None:
        check_positions(a, b, len(self._chars))
        chars = self._chars
        chars[a], chars[b] = chars[b], chars[a]

    def __len__(self) -> int:
        return len(self._chars)

    def __copy__(self) -> "CharSequence":
        clone = CharSequence.__new__(CharSequence)
        clone._chars = self._chars.copy()
        return clone

    @property
    def value(self) -> str:
        return "".join(self._chars)

    def __str__(self) -> str:
        return self.value

    def __eq__(self, other: object) -> bool:
        if isinstance(other, CharSequence):
            return self._chars == other._chars
        if isinstance(other, str):
            return self.value == other
        return NotImplemented

    def __repr__(self) -> str:
        return f"CharSequence({self.value!r})"


class ByteBuffer:
    __slots__ = ("_buf", "_kind")

    def __init__(self, data: bytes | bytearray):
        self._kind = bytearray if isinstance(data, bytearray) else bytes
        self._buf = bytearray(data)

    def swap(self, a: int, b: int) -> None:
        check_positions(a, b, len(self._buf))
        buf = self._buf
        buf[a], buf[b] = buf[b], buf[a]

    def __len__(self) -> int:
        return len(self._buf)

    def __copy__(self) -> "ByteBuffer":
        clone = ByteBuffer.__new__(ByteBuffer)
        clone._kind = self._kind
        clone._buf = self._buf.copy()
        return clone

    @property
    def value(self) -> bytes | bytearray:
        return self._kind(self._buf)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, ByteBuffer):
            return self._buf == other._buf
        if isinstance(other, (bytes, bytearray)):
            return self._buf == other
        return NotImplemented

    def __repr__(self) -> str:
        return f"ByteBuffer({self.value!r})"


class BitPattern:
    """
    integer viewed as `width` bits, bit 0 being the least significant. with
    `signed`, `value` reads the bits back as two's complement.
    """

    __slots__ = ("_bits", "width", "signed")

    def __init__(self, value: int, width: int = 8, signed: bool = False):
        if width < 1:
            raise ValueError("width must be at least 1")
        if signed:
            low, high = -(1 << (width - 1)), 1 << (width - 1)
        else:
            low, high = 0, 1 << width
        if not low <= value < high:
            raise ValueError(
                f"{value} does not fit in {width} "
                f"{'signed' if signed else 'unsigned'} bits"
            )
        self.width = width
        self.signed = signed
        self._bits = value & ((1 << width) - 1)

    def swap(self, a: int, b: int) -> None:
        check_positions(a, b, self.width)
        if ((self._bits >> a) ^ (self._bits >> b)) & 1:
            self._bits ^= (1 << a) | (1 << b)

    def __len__(self) -> int:
        return self.width

    def __copy__(self) -> "BitPattern":
        clone = BitPattern.__new__(BitPattern)
        clone._bits = self._bits
        clone.width = self.width
        clone.signed = self.signed
        return clone

    @property
    def value(self) -> int:
        if self.signed and self._bits >> (self.width - 1):
            return self._bits - (1 << self.width)
        return self._bits

    def __int__(self) -> int:
        return self.value

    def __eq__(self, other: object) -> bool:
        if isinstance(other, BitPattern):
            return (self.width, self.value) == (other.width, other.value)
        if isinstance(other, int):
            return self.value == other
        return NotImplemented

    def __repr__(self) -> str:
        return f"BitPattern(0b{self._bits:0{self.width}b}, width={self.width})"


@singledispatch
def as_swappable(value: Any) -> Swappable:
    if isinstance(value, Swappable):
        return value
    raise TypeError(f"cannot permute object of type {type(value).__name__}")


@as_swappable.register
def _(value: str) -> Swappable:
    return CharSequence(value)


@as_swappable.register(bytes)
@as_swappable.register(bytearray)
def _(value: bytes | bytearray) -> Swappable:
    return ByteBuffer(value)


@as_swappable.register(list)
@as_swappable.register(tuple)
def _(value: list | tuple) -> Swappable:
    return ElementSequence(value)


@as_swappable.register
def _(value: int) -> Swappable:
    if value < 0:
        raise ValueError(
            "negative integers need an explicit BitPattern width and sign"
        )
    # whole bytes, like the machine integer the value would live in
    width = max(8, -(-value.bit_length() // 8) * 8)
    return BitPattern(value, width)
