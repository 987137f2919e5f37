import numpy as np
import pytest

from mcschem.formats.varint import VarintBlockDataEncoder


@pytest.mark.parametrize(
    "value, expected",
    [
        (0, b"\x00"),
        (5, b"\x05"),
        (127, b"\x7f"),
        (128, b"\x80\x01"),
        (130, b"\x82\x01"),
        (300, b"\xac\x02"),
        (16384, b"\x80\x80\x01"),
    ],
)
def test_single_values(value, expected):
    assert VarintBlockDataEncoder.encode([value]) == expected


def test_stream_is_concatenated():
    assert VarintBlockDataEncoder.encode([5, 130, 0]) == b"\x05\x82\x01\x00"


def test_numpy_small_indices():
    indices = np.array([0, 1, 2, 3, 127], dtype=np.int32)
    assert VarintBlockDataEncoder.encode(indices) == bytes([0, 1, 2, 3, 127])


def test_numpy_large_indices_match_list():
    values = [0, 127, 128, 130, 255, 4000]
    assert VarintBlockDataEncoder.encode(np.array(values, dtype=np.int32)) == \
        VarintBlockDataEncoder.encode(values)


def test_empty():
    assert VarintBlockDataEncoder.encode([]) == b""
    assert VarintBlockDataEncoder.encode(np.zeros(0, dtype=np.int32)) == b""


def test_negative_rejected():
    with pytest.raises(ValueError):
        VarintBlockDataEncoder.encode([-1])
    with pytest.raises(ValueError):
        VarintBlockDataEncoder.encode(np.array([-1], dtype=np.int32))
