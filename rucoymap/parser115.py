"""Reader for the ``init`` file of version 115 maps."""

from __future__ import annotations

from dataclasses import dataclass, field

from rucoymap.bytestream import Stream
from rucoymap.music_region import MusicRegion

MUSIC_NAME_CAPACITY = 64


@dataclass
class InitFile:
    """Map size, layer count and music regions."""

    width: int = 0
    height: int = 0
    layers: int = 0
    unknown: int = 0
    music_regions: list[MusicRegion] = field(default_factory=list)


def _read_u16(stream: Stream) -> int:
    return stream.read() * 256 + stream.read()


def _fill_buffer(stream: Stream, count: int, capacity: int) -> bytes:
    # A non-positive count fills the whole buffer, a large one is capped by it.
    return stream.fill(capacity if count <= 0 else min(count, capacity))


def parse_init(stream: Stream) -> InitFile:
    """Parse the map header and the music regions of every layer."""
    info = InitFile()
    info.width = _read_u16(stream)
    info.height = _read_u16(stream)
    info.layers = stream.read()
    info.unknown = _read_u16(stream)

    for sprite_layer in range(info.layers):
        for _ in range(stream.read()):
            name_size = stream.read()
            name = _fill_buffer(stream, name_size, MUSIC_NAME_CAPACITY)
            x = _read_u16(stream)
            y = _read_u16(stream)
            width = _read_u16(stream)
            height = _read_u16(stream)
            info.music_regions.append(
                MusicRegion(
                    music=name[: max(name_size, 0)].decode("utf-8", errors="replace"),
                    height=height,
                    width=width,
                    x=x,
                    y=y,
                    z=sprite_layer,
                )
            )
    return info