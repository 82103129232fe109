from __future__ import annotations

import pytest

from mcprint.protocol import Raster, bytes_per_row, pack_line, pack_raster, raster_from_bits


def test_pack_line_msb_first():
    assert pack_line([1, 0, 0, 0, 0, 0, 0, 1]) == b"\x81"
    assert pack_line([1, 1, 0, 0, 0, 0, 0, 0, 1, 0, 1, 0, 1, 0, 1, 0]) == b"\xc0\xaa"


def test_pack_line_pads_short_chunk_with_zero_bits():
    assert pack_line([1, 1, 1]) == b"\xe0"
    assert pack_line([1] * 10) == b"\xff\xc0"


def test_pack_raster_aligns_each_row():
    bits = [1] * 10 + [0] * 9 + [1]
    assert pack_raster(bits, 10) == b"\xff\xc0\x00\x40"


def test_pack_raster_rejects_ragged_input():
    with pytest.raises(ValueError):
        pack_raster([1, 0, 1], 2)
    with pytest.raises(ValueError):
        pack_raster([1], 0)


@pytest.mark.parametrize("width, expected", [(1, 1), (8, 1), (9, 2), (576, 72), (383, 48)])
def test_bytes_per_row(width, expected):
    assert bytes_per_row(width) == expected


def test_raster_from_bits_dimensions():
    raster = raster_from_bits([0] * 12 * 5, 12)
    assert (raster.width, raster.height, raster.bytes_per_row) == (12, 5, 2)
    assert raster.data == bytes(10)
    raster.validate()


def test_raster_validate_rejects_mismatched_data():
    with pytest.raises(ValueError):
        Raster(width=16, height=2, data=bytes(3)).validate()
    with pytest.raises(ValueError):
        Raster(width=8, height=0, data=b"").validate()
