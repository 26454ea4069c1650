"""Test construction and queries of the OneBased* index types."""

import copy
import dataclasses
import pickle

import pytest

from one_based import (
    INDEX_TYPES,
    NonZeroU8,
    NonZeroU16,
    NonZeroUsize,
    OneBased,
    OneBasedError,
    OneBasedErrorKind,
    OneBasedU8,
    OneBasedU16,
    OneBasedU32,
    OneBasedUsize,
    TryFromIntError,
)


def _samples(index_type):
    """Representative 1-based values for a width, extremes included."""
    top = index_type.NONZERO.max_value()
    return sorted({1, 2, 127, top // 2, top - 1, top})


def test_one_based_maps_to_zero_based():
    """from_one_based(v).as_zero_based() is v - 1 on every width."""
    print("=" * 70)
    print("TEST: from_one_based -> as_zero_based")
    print("=" * 70)

    for index_type in INDEX_TYPES:
        for v in _samples(index_type):
            index = index_type.from_one_based(v)
            assert index.as_zero_based() == v - 1, f"{index_type.__name__}({v})"
            assert index.as_one_based().get() == v
        print(f"  {index_type.__name__}: OK")

    print("\n[PASS] 1-based construction is consistent")


def test_zero_based_maps_to_one_based():
    """from_zero_based(v).as_one_based() is v + 1 on every width."""
    for index_type in INDEX_TYPES:
        top = index_type.NONZERO.max_value()
        for v in (0, 1, 126, top // 2, top - 1):
            index = index_type.from_zero_based(v)
            assert index.as_one_based().get() == v + 1
            assert index.as_zero_based() == v


def test_valid_values():
    """Spot checks at the edges of the range."""
    assert OneBasedU8.from_one_based(1).as_zero_based() == 0
    assert OneBasedUsize.from_one_based_nonzero(NonZeroUsize(1)).as_zero_based() == 0
    assert OneBasedU16.from_zero_based(0xFFFF - 1).as_one_based() == NonZeroU16.MAX


def test_zero_fails_on_one_based():
    """Zero is never a 1-based index."""
    for index_type in INDEX_TYPES:
        with pytest.raises(OneBasedError) as exc_info:
            index_type.from_one_based(0)
        assert exc_info.value.kind is OneBasedErrorKind.ZERO_INDEX
        assert str(exc_info.value) == "0 passed as 1-based index"


def test_overflow_fails_on_zero_based():
    """MAX cannot be shifted to 1-based without overflowing the width."""
    for index_type in INDEX_TYPES:
        top = index_type.NONZERO.max_value()
        with pytest.raises(OneBasedError) as exc_info:
            index_type.from_zero_based(top)
        assert exc_info.value.kind is OneBasedErrorKind.OVERFLOW_INDEX

    with pytest.raises(OneBasedError) as exc_info:
        OneBasedU8.from_zero_based(255)
    assert str(exc_info.value) == "u8::MAX cannot be used as 0-based index"


def test_error_equality():
    """Errors compare by kind, like the values they describe."""
    assert OneBasedError.zero_index() == OneBasedError(OneBasedErrorKind.ZERO_INDEX, "u32")
    assert OneBasedError.zero_index() != OneBasedError.overflow_index()
    assert isinstance(OneBasedError.zero_index(), ValueError)


def test_out_of_width_values_rejected():
    """Plain ints outside [0, MAX] do not belong to the width at all."""
    with pytest.raises(TryFromIntError):
        OneBasedU8.from_one_based(256)
    with pytest.raises(TryFromIntError):
        OneBasedU8.from_zero_based(256)
    with pytest.raises(TryFromIntError):
        OneBasedU32.from_one_based(-1)
    with pytest.raises(TryFromIntError):
        OneBasedU32.from_zero_based(-1)


def test_non_integers_rejected():
    """Only ints are accepted; bool and float are not."""
    for bad in ("5", 5.0, True, None):
        with pytest.raises(TypeError):
            OneBasedU32.from_one_based(bad)
        with pytest.raises(TypeError):
            OneBasedU32.from_zero_based(bad)


def test_from_one_based_nonzero_requires_same_width():
    """The non-zero scalar must be of the index's own width."""
    assert OneBasedU8.from_one_based_nonzero(NonZeroU8(9)).as_zero_based() == 8

    with pytest.raises(TypeError):
        OneBasedU8.from_one_based_nonzero(NonZeroU16(9))
    with pytest.raises(TypeError):
        OneBasedU8.from_one_based_nonzero(9)


def test_unchecked_constructors():
    """Trusted constructors skip validation but agree on valid input."""
    assert OneBasedU8.from_one_based_unchecked(3) == OneBasedU8.from_one_based(3)
    assert OneBasedU8.from_zero_based_unchecked(254) == OneBasedU8.MAX
    assert OneBasedU32.from_zero_based_unchecked(0) == OneBasedU32.MIN

    # Preconditions are asserted while assertions are enabled
    with pytest.raises(AssertionError):
        OneBasedU8.from_one_based_unchecked(0)
    with pytest.raises(AssertionError):
        OneBasedU8.from_zero_based_unchecked(255)

    # bool is not an index, even though it is an int subclass
    with pytest.raises(AssertionError):
        OneBasedU8.from_one_based_unchecked(True)
    with pytest.raises(AssertionError):
        OneBasedU8.from_zero_based_unchecked(False)


def test_min_and_max_constants():
    """MIN and MAX span the whole width."""
    for index_type in INDEX_TYPES:
        assert index_type.MIN.as_zero_based() == 0
        assert index_type.MAX.as_one_based().get() == index_type.NONZERO.max_value()
        assert index_type.MIN <= index_type.MAX


def test_ordering_agrees_with_both_conventions():
    """a < b iff their 0-based and 1-based values are ordered the same way."""
    values = [OneBasedU32.from_one_based(v) for v in (1, 2, 10, 4_000_000_000)]
    for a in values:
        for b in values:
            assert (a < b) == (a.as_zero_based() < b.as_zero_based())
            assert (a < b) == (a.as_one_based() < b.as_one_based())
            assert (a == b) == (a.as_zero_based() == b.as_zero_based())

    assert sorted(reversed(values)) == values
    assert max(values).as_zero_based() == 3_999_999_999


def test_widths_do_not_mix():
    """Indices of different widths are never equal nor orderable."""
    assert OneBasedU8.from_one_based(1) != OneBasedU16.from_one_based(1)
    with pytest.raises(TypeError):
        OneBasedU8.from_one_based(1) < OneBasedU16.from_one_based(2)


def test_hashable_and_immutable():
    """Values behave as immutable, hashable scalars."""
    a = OneBasedU16.from_one_based(7)
    b = OneBasedU16.from_zero_based(6)
    assert a == b
    assert len({a, b}) == 1
    assert {a: "seventh"}[b] == "seventh"

    with pytest.raises(dataclasses.FrozenInstanceError):
        a.raw = NonZeroU16(8)

    assert copy.copy(a) == a
    assert copy.deepcopy(a) == a
    assert pickle.loads(pickle.dumps(a)) == a


def test_no_implicit_int_conversion():
    """An index does not silently turn into an int of either convention."""
    index = OneBasedU32.from_one_based(5)
    with pytest.raises(TypeError):
        int(index)
    with pytest.raises(TypeError):
        [0, 1, 2, 3, 4, 5][index]


def test_base_class_is_abstract():
    """OneBased itself cannot hold a value."""
    with pytest.raises(TypeError):
        OneBased(NonZeroU8(1))


if __name__ == "__main__":
    test_one_based_maps_to_zero_based()
    test_zero_based_maps_to_one_based()
    test_valid_values()
    test_zero_fails_on_one_based()
    test_overflow_fails_on_zero_based()
    test_error_equality()
    test_out_of_width_values_rejected()
    test_non_integers_rejected()
    test_from_one_based_nonzero_requires_same_width()
    test_unchecked_constructors()
    test_min_and_max_constants()
    test_ordering_agrees_with_both_conventions()
    test_widths_do_not_mix()
    test_hashable_and_immutable()
    test_no_implicit_int_conversion()
    test_base_class_is_abstract()
    print("\nALL CONSTRUCTION TESTS PASSED")
