from itertools import islice, permutations
from math import factorial

import pytest

from heapperm import (
    BitPattern, ByteBuffer, CharSequence, ElementSequence, PermuteIter,
    heappermute, hperms
)

ABCD = (
    "ABCD", "BACD", "CABD", "ACBD", "BCAD", "CBAD", "DBAC", "BDAC", "ADBC",
    "DABC", "BADC", "ABDC", "ACDB", "CADB", "DACB", "ADCB", "CDAB", "DCAB",
    "DCBA", "CDBA", "BDCA", "DBCA", "CBDA", "BCDA"
)


def test_abc_order():
    assert heappermute("ABC") == ("ABC", "BAC", "CAB", "ACB", "BCA", "CBA")


def test_abcd_order():
    assert heappermute("ABCD") == ABCD


def test_bits_first_ten():
    expected = [
        0b10101001, 0b10101010, 0b10101010, 0b10101001, 0b10101100,
        0b10101100, 0b10100101, 0b10100110, 0b10100011, 0b10100011
    ]
    assert list(islice(hperms(0b10101001), 10)) == expected
    snapshots = list(islice(PermuteIter(BitPattern(0b10101001)), 10))
    assert snapshots == expected


@pytest.mark.parametrize(
    "value",
    ([1, 2, 3, 4, 5], (0, "a", None, 2.5), "xyzw", b"\x00\x01\x02\x03\x04")
)
def test_every_permutation_once(value):
    res = heappermute(value)
    assert len(res) == factorial(len(value))
    assert res[0] == value
    # order is Heap's, not lexicographic, hence set check
    assert {tuple(p) for p in res} == set(permutations(value))


@pytest.mark.parametrize("value", ("", "Q", [], [7], b"", b"q"))
def test_trivial_sizes_yield_original(value):
    assert heappermute(value) == (value,)


def test_repeated_units_not_deduplicated():
    res = heappermute("AAB")
    assert len(res) == 6
    assert set(res) == {"AAB", "ABA", "BAA"}


def test_deterministic():
    assert heappermute([3, 1, 4, 1, 5]) == heappermute([3, 1, 4, 1, 5])


def test_value_types_preserved():
    assert all(isinstance(p, tuple) for p in hperms((1, 2, 3)))
    assert all(isinstance(p, bytearray) for p in hperms(bytearray(b"ab")))


def test_snapshots_are_independent():
    it = PermuteIter(ElementSequence([1, 2, 3]))
    first = next(it)
    second = next(it)
    assert first is not second
    assert first.value == [1, 2, 3]
    assert second.value == [2, 1, 3]


def test_source_container_untouched():
    container = CharSequence("ABC")
    tuple(PermuteIter(container))
    assert container.value == "ABC"


def test_iteration_ends():
    gen = PermuteIter(ByteBuffer(b"ab"))
    res = [next(gen), next(gen)]
    assert res == [b"ab", b"ba"]
    try:
        next(gen)
        raise RuntimeError("Should have raised StopIteration")
    except StopIteration:
        pass
    # not restartable
    assert list(gen) == []


def test_from_value():
    assert [p.value for p in PermuteIter.from_value([1, 2])] == [[1, 2], [2, 1]]


def test_rejects_unpermutable():
    with pytest.raises(TypeError):
        heappermute(object())
    with pytest.raises(TypeError):
        hperms(3.5)


@pytest.mark.parametrize("value", ("ABCD", "ABCDE", (1, 2, 3, 4, 5, 6)))
def test_neighbours_differ_by_one_transposition(value):
    res = heappermute(value)
    for before, after in zip(res, res[1:]):
        moved = [i for i, (x, y) in enumerate(zip(before, after)) if x != y]
        assert len(moved) == 2
        i, j = moved
        assert (before[i], before[j]) == (after[j], after[i])
