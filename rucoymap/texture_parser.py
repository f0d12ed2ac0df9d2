"""Readers for texture atlases and their named regions."""

from __future__ import annotations

from dataclasses import dataclass

from rucoymap.bytestream import Stream
from rucoymap.metrics import Bounds, TextureRegion, Vec2

TILE_NAME_CAPACITY = 64


@dataclass(frozen=True)
class NamedRegion:
    """A named rectangle inside a texture atlas."""

    name: str
    x: int
    y: int
    width: int
    height: int


def _fill_buffer(stream: Stream, count: int, capacity: int) -> bytes:
    # A non-positive count fills the whole buffer, a large one is capped by it.
    return stream.fill(capacity if count <= 0 else min(count, capacity))


def _read_image(stream: Stream) -> bytes:
    size = stream.read_int(True)
    if size < 0:
        raise ValueError(f"invalid texture size: {size}")
    return stream.fill(size)


def _read_named_region(stream: Stream, capacity: int) -> NamedRegion:
    name = _fill_buffer(stream, stream.read(), capacity)
    x = stream.read_short()
    y = stream.read_short()
    width = stream.read_short()
    height = stream.read_short()
    return NamedRegion(name.decode("utf-8", errors="replace"), x, y, width, height)


def load_textures_v115(stream: Stream) -> tuple[bytes, list[NamedRegion]]:
    """Read the atlas image and its named regions."""
    image = _read_image(stream)
    count = stream.read_int()
    regions = [_read_named_region(stream, len(image)) for _ in range(count)]
    return image, regions


def load_texture_v118(stream: Stream) -> tuple[bytes, TextureRegion]:
    """Read an image followed by the region it occupies (file ``c8``)."""
    image = _read_image(stream)
    x = stream.read_short()
    y = stream.read_short()
    width = stream.read_short()
    height = stream.read_short()
    return image, TextureRegion(Vec2(x, y), Bounds(width, height))


def load_tiles_v118(stream: Stream) -> list[NamedRegion]:
    """Read the named tile regions (file ``c3``)."""
    count = stream.read_int()
    return [_read_named_region(stream, TILE_NAME_CAPACITY) for _ in range(count)]