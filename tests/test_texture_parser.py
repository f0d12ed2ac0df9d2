import struct

import pytest

from rucoymap.bytestream import VectorByteStream
from rucoymap.metrics import Bounds, TextureRegion, Vec2
from rucoymap.texture_parser import (
    TILE_NAME_CAPACITY,
    NamedRegion,
    load_texture_v118,
    load_textures_v115,
    load_tiles_v118,
)


def _image(data):
    return struct.pack(">i", len(data)) + data


def _named(name, x, y, width, height):
    return bytes([len(name)]) + name + struct.pack(">hhhh", x, y, width, height)


def test_load_textures_v115():
    image = bytes(range(32))
    data = (
        _image(image)
        + struct.pack(">i", 2)
        + _named(b"grass", 1, 2, 26, 26)
        + _named(b"water", -3, 4, 5, 6)
    )
    loaded, regions = load_textures_v115(VectorByteStream(data))
    assert loaded == image
    assert regions == [
        NamedRegion("grass", 1, 2, 26, 26),
        NamedRegion("water", -3, 4, 5, 6),
    ]


def test_load_textures_v115_negative_size():
    with pytest.raises(ValueError):
        load_textures_v115(VectorByteStream(struct.pack(">i", -1)))


def test_load_texture_v118():
    image = b"image-bytes"
    data = _image(image) + struct.pack(">hhhh", 10, 20, 30, 40)
    loaded, region = load_texture_v118(VectorByteStream(data))
    assert loaded == image
    assert region == TextureRegion(Vec2(10, 20), Bounds(30, 40))


def test_load_tiles_v118():
    data = struct.pack(">i", 2) + _named(b"stone", 0, 26, 24, 24) + _named(b"sand", 52, 0, 24, 24)
    assert load_tiles_v118(VectorByteStream(data)) == [
        NamedRegion("stone", 0, 26, 24, 24),
        NamedRegion("sand", 52, 0, 24, 24),
    ]


def test_load_tiles_v118_long_name_is_capped():
    name = b"a" * TILE_NAME_CAPACITY
    data = (
        struct.pack(">i", 1)
        + bytes([TILE_NAME_CAPACITY + 6])
        + name
        + struct.pack(">hhhh", 1, 2, 3, 4)
    )
    assert load_tiles_v118(VectorByteStream(data)) == [
        NamedRegion("a" * TILE_NAME_CAPACITY, 1, 2, 3, 4)
    ]


def test_load_tiles_v118_empty():
    assert load_tiles_v118(VectorByteStream(struct.pack(">i", 0))) == []