from __future__ import annotations

import numpy as np
import pytest

from manyvecs import (ManyVecsValueError, Vec2, Vec2f32, Vec2i16, Vec2u8,
                      WrongLengthError)


def test_tuple_round_trip(vec_type):
    v = vec_type(8, 3)
    assert v.to_tuple() == (8, 3)
    assert vec_type.from_tuple(v.to_tuple()) == v
    assert vec_type.from_tuple((2, 3)) == vec_type(2, 3)


def test_sequence_round_trip(vec_type):
    v = vec_type(8, 3)
    assert v.to_list() == [8, 3]
    assert vec_type.from_sequence(v.to_list()) == v
    assert vec_type.from_sequence((5, 1)) == vec_type(5, 1)


def test_array_round_trip(vec_type):
    v = vec_type(8, 3)
    arr = v.to_array()
    assert arr.shape == (2,)
    assert vec_type.from_array(arr) == v


def test_array_uses_dtype():
    assert Vec2i16(1, 2).to_array().dtype == np.int16
    assert Vec2f32(1.5, 2.0).to_array().dtype == np.float32
    assert Vec2(1.5, 2.0).to_array().dtype == np.float64


def test_from_array_coerces_to_dtype():
    v = Vec2u8.from_array(np.array([3.0, 4.0]))
    assert type(v.x) is np.uint8
    assert v == Vec2u8(3, 4)

    v = Vec2.from_array(np.array([3, 4], dtype=np.int32))
    assert type(v.x) is int


@pytest.mark.parametrize(
    "value, length",
    [
        ([8], 1),
        ([1, 2, 3], 3),
        ([], 0),
        ((1, 2, 3, 4), 4),
    ],
)
def test_from_sequence_wrong_length(vec_type, value, length):
    with pytest.raises(WrongLengthError) as exc_info:
        vec_type.from_sequence(value)
    assert exc_info.value.length == length
    assert str(exc_info.value) == (
        f"Given sequence must have size of 2, but instead has size of '{length}'"
    )


def test_wrong_length_is_a_value_error():
    with pytest.raises(ValueError):
        Vec2.from_sequence([8])
    with pytest.raises(ManyVecsValueError):
        Vec2.from_sequence([8])


@pytest.mark.parametrize(
    "value, length",
    [
        (np.array([1.0]), 1),
        (np.zeros(3), 3),
        (np.zeros((2, 2)), 4),
        (np.float64(1.0), 1),
    ],
)
def test_from_array_wrong_shape(value, length):
    with pytest.raises(WrongLengthError) as exc_info:
        Vec2f32.from_array(value)
    assert exc_info.value.length == length


def test_conversions_are_independent():
    data = [1, 2]
    v = Vec2.from_sequence(data)
    data[0] = 9
    assert v == Vec2(1, 2)

    out = v.to_list()
    out[0] = 9
    assert v == Vec2(1, 2)
