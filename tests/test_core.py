import pytest

from ari.core import (
    BitField,
    BlackHole,
    as_list,
    bool_as_option,
    initialize,
    initialized,
    option_as_list,
)


def test_initialize_marks_initialized_and_is_idempotent():
    initialize()
    initialize()
    assert initialized() is True


def test_black_hole_absorbs_other_errors():
    hole = BlackHole()
    assert str(hole) == "BlackHole"
    with pytest.raises(BlackHole) as info:
        try:
            raise KeyError("missing")
        except KeyError as error:
            raise hole from error
    assert info.value == BlackHole()
    assert isinstance(info.value.__cause__, KeyError)


def test_black_holes_are_equal():
    assert BlackHole() == BlackHole("anything")
    assert len({BlackHole(), BlackHole()}) == 1


def test_slice_helpers():
    assert as_list(7) == [7]
    assert option_as_list(None) == []
    assert option_as_list(0) == [0]


def test_bool_as_option():
    assert bool_as_option(True) == ()
    assert bool_as_option(False) is None


def test_bitfield_starts_with_given_storage():
    field = BitField(bytes(4))
    assert field.value() == bytes([0, 0, 0, 0])
    assert field.get(0) is False


def test_bitfield_documented_example():
    field = BitField(bytes(4))
    for index in (0, 4, 8, 16):
        field.set(index, True)
    field.set_value(20, 3, 7)
    for index in (0, 4, 8, 16):
        assert field.get(index) is True
    assert field.get_value(20, 3) == 7
    assert field.value() == bytes([17, 1, 113, 0])


def test_bitfield_value_example_truncates():
    field = BitField(bytes(4))
    for index in (0, 4, 8, 16):
        field.set(index, True)
    field.set_value(20, 3, 9)
    assert field.value() == bytes([17, 1, 17, 0])


def test_bitfield_set_value_truncates_to_width():
    field = BitField(bytes(4))
    field.set_value(0, 5, 0xFFFFF)
    assert field.get_value(0, 5) == 31


def test_bitfield_four_bit_value_truncated_to_two_bits():
    field = BitField(bytes(4))
    field.set_value(0, 2, 0b1111)
    assert field.get_value(0, 4) == 0b11


def test_bitfield_clear_bit():
    field = BitField(bytes([0xFF]))
    field.set(3, False)
    assert field.get(3) is False
    assert all(field.get(i) for i in range(8) if i != 3)


@pytest.mark.parametrize("value", [0, 1, 5, 255, 1023])
def test_bitfield_value_round_trip(value):
    field = BitField(bytes(4))
    field.set_value(3, 10, value)
    assert field.get_value(3, 10) == value


def test_bitfield_rejects_wide_values():
    field = BitField(bytes(16))
    with pytest.raises(ValueError):
        field.set_value(0, 65, 1)
    with pytest.raises(ValueError):
        field.get_value(0, 65)


def test_bitfield_out_of_range_index():
    field = BitField(bytes(1))
    with pytest.raises(IndexError):
        field.get(8)


def test_bitfield_does_not_alias_input():
    source = bytearray(2)
    field = BitField(source)
    field.set(0, True)
    assert source == bytearray(2)
    assert field == BitField(bytes([1, 0]))