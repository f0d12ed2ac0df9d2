"""Map reader for the chunked format of versions 106 to 110."""

from __future__ import annotations

from dataclasses import dataclass, field
from os import PathLike
from pathlib import Path
from typing import Union

from rucoymap.bytestream import FileByteStream, Stream
from rucoymap.metrics import Bounds, Layers, MultiLayeredTile, Tiles, Vec2

MAX_LAYERS = 4
CHUNK_SIZE: Bounds[int] = Bounds(16, 10)
TILE_SIZE = 26.0
MAP_MAX_CHUNKS = 32


@dataclass
class InitFile:
    """Contents of the map's ``init`` file."""

    tile_size: float = TILE_SIZE
    layers: int = 0
    tile_layers: list[int] = field(default_factory=list)
    map: Bounds[int] = field(default_factory=Bounds)
    chunk: Bounds[int] = field(
        default_factory=lambda: Bounds(CHUNK_SIZE.width, CHUNK_SIZE.height)
    )


def _read_u16(stream: Stream) -> int:
    return stream.read() * 256 + stream.read()


def map_info_from_bytes(stream: Stream) -> InitFile:
    """Parse the ``init`` file: map size, layer count and sub-layers per layer."""
    width = _read_u16(stream)
    height = _read_u16(stream)
    layers = stream.read()
    tile_layers = [stream.read() for _ in range(layers)]
    return InitFile(layers=layers, tile_layers=tile_layers, map=Bounds(width, height))


def _add_tiles_from_chunk(
    tiles: Tiles, offset: Vec2[int], map_width: int, stream: Stream, tile_layers: int
) -> None:
    for _ in range(tile_layers):
        for x in range(offset.x, offset.x + CHUNK_SIZE.width):
            for y in range(offset.y, offset.y + CHUNK_SIZE.height):
                if stream.read() == 1:
                    texture_x = stream.read()
                    texture_y = stream.read()
                    tiles[x + y * map_width].add(Vec2(texture_x, texture_y))


def _entire_layer(layer: int, info: InitFile, chunk_folder: Path) -> Tiles:
    map_width = int(info.map.width)
    tiles = [MultiLayeredTile() for _ in range(int(info.map.width * info.map.height))]
    for chunk_x in range(MAP_MAX_CHUNKS):
        for chunk_y in range(MAP_MAX_CHUNKS):
            reader = FileByteStream(chunk_folder / f"{layer}_{chunk_x}_{chunk_y}")
            if reader.valid():
                offset = Vec2(chunk_x * info.chunk.width, chunk_y * info.chunk.height)
                _add_tiles_from_chunk(
                    tiles, offset, map_width, reader, info.tile_layers[layer]
                )
    return tiles


def get_map_tiles(
    map_info: InitFile, chunk_folder: Union[str, "PathLike[str]"]
) -> Layers:
    """Load every layer from the chunk files named ``<layer>_<x>_<y>``."""
    folder = Path(chunk_folder)
    return [_entire_layer(layer, map_info, folder) for layer in range(map_info.layers)]