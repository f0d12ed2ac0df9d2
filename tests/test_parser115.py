import struct

from rucoymap.bytestream import VectorByteStream
from rucoymap.music_region import MusicRegion
from rucoymap.parser115 import MUSIC_NAME_CAPACITY, parse_init


def _header(width, height, layers, unknown):
    return struct.pack(">HHBH", width, height, layers, unknown)


def _region(name, x, y, width, height):
    return bytes([len(name)]) + name + struct.pack(">HHHH", x, y, width, height)


def test_parse_header_and_regions():
    data = (
        _header(418, 553, 2, 7)
        + bytes([2])
        + _region(b"town", 1, 2, 30, 40)
        + _region(b"forest", 100, 200, 5, 6)
        + bytes([1])
        + _region(b"cave", 9, 8, 7, 6)
    )
    info = parse_init(VectorByteStream(data))
    assert (info.width, info.height, info.layers, info.unknown) == (418, 553, 2, 7)
    assert info.music_regions == [
        MusicRegion(music="town", height=40, width=30, x=1, y=2, z=0),
        MusicRegion(music="forest", height=6, width=5, x=100, y=200, z=0),
        MusicRegion(music="cave", height=6, width=7, x=9, y=8, z=1),
    ]


def test_layer_without_regions():
    data = _header(10, 10, 2, 0) + bytes([0]) + bytes([0])
    info = parse_init(VectorByteStream(data))
    assert info.layers == 2
    assert info.music_regions == []


def test_empty_name_consumes_whole_buffer():
    data = (
        _header(10, 10, 1, 0)
        + bytes([1, 0])
        + b"z" * MUSIC_NAME_CAPACITY
        + struct.pack(">HHHH", 3, 4, 5, 6)
    )
    info = parse_init(VectorByteStream(data))
    assert info.music_regions == [
        MusicRegion(music="", height=6, width=5, x=3, y=4, z=0)
    ]