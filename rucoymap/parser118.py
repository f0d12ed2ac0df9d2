"""Map reader for the bit-packed ``nm1`` format of versions 118 to 122.

Texture coordinates produced here are pixel positions relative to the tile
atlas; later versions lay their atlases out differently.
"""

from __future__ import annotations

import copy
from collections.abc import Iterator
from pathlib import Path
from typing import cast

from rucoymap.bytestream import BitReader, FileByteStream, PathArg, VectorByteStream
from rucoymap.metrics import Layers, MultiLayeredTile, Vec2
from rucoymap.music_region import MusicRegion

MAP_WIDTH = 418
MAP_HEIGHT = 553
WORLD_OFFSET_X = 41

VERTEX_COUNT = 20
WORLD_X = 0
WORLD_Y = 1
TEXTURE_LEFT = 8
TEXTURE_TOP = 9

TILE_STRIDE = 26
TILE_SPAN = 24
TEXTURE_SIZE = 1024
TILES_PER_ROW = 39

NEIGHBOURHOOD = (
    (-1, -1), (-1, 0), (-1, 1),
    (0, -1), (0, 0), (0, 1),
    (1, -1), (1, 0), (1, 1),
)

Vertices = list[float]


class MapParser:
    """Decodes the chunk grid of an ``nm1`` file into sprite vertices."""

    def __init__(self) -> None:
        self.bits_per_sprite = 0
        self.width = 0
        self.chunk_size = 0
        self.animated_sprites = 0
        self.tiles: list[list[int]] = []
        self._layers: list[BitReader] = []

        self.timer = 0.0
        self.animation_frame = 0
        self.last_chunk = (0, 0)
        self.drawn_layer = 0

        self.texture_region_x = 0
        self.texture_region_y = 0
        self.tiles_per_row = TILES_PER_ROW
        self.inv_texture_width = 1.0 / TEXTURE_SIZE
        self.inv_texture_height = 1.0 / TEXTURE_SIZE

    def world_layers(self) -> int:
        """Number of layers loaded."""
        return len(self._layers)

    def load(self, stream: BitReader) -> None:
        """Read the header, chunk table and packed data of every layer."""
        self.bits_per_sprite = stream.parse(8)
        layer_count = stream.parse(8)
        self.width = stream.parse(16)
        height = stream.parse(16)
        self.chunk_size = stream.parse(8)
        self.animated_sprites = stream.parse(16)
        self.tiles = [[0] * (height * self.width) for _ in range(layer_count)]

        readers = []
        for grid in self.tiles:
            for _ in range(stream.parse(16)):
                chunk_x = stream.parse(7)
                chunk_y = stream.parse(7)
                grid[chunk_y * self.width + chunk_x] = stream.parse(24) + 1
            size = stream.parse(32)
            stream.parse(stream.bits_left)
            readers.append(BitReader(VectorByteStream(stream.bytes.fill(size))))
        self._layers = readers

    def set_sprite_vertices(self, index: int, vertices: Vertices) -> None:
        """Write the atlas coordinates of sprite ``index`` into ``vertices``."""
        left = (index % self.tiles_per_row) * TILE_STRIDE + self.texture_region_x + 1
        top = (index // self.tiles_per_row) * TILE_STRIDE + self.texture_region_y + 1
        u0 = left * self.inv_texture_width
        v0 = top * self.inv_texture_height
        u1 = (left + TILE_SPAN) * self.inv_texture_width
        v1 = (top + TILE_SPAN) * self.inv_texture_height
        vertices[3] = u0
        vertices[4] = v1
        vertices[8] = u0
        vertices[9] = v0
        vertices[13] = u1
        vertices[14] = v0
        vertices[18] = u1
        vertices[19] = v1

    def get_tiles_at(
        self, x: float, y: float, game_layer: int, delta_time: float
    ) -> list[Vertices]:
        """Vertices of every sprite in the chunks around world point (x, y)."""
        self.timer += delta_time
        if self.timer >= 1.0:
            self.timer = 0.0
            self.animation_frame = (self.animation_frame + 1) % 2
        if self.chunk_size <= 0:
            raise ValueError("chunk size must be positive; is the map loaded?")

        size = self.chunk_size
        chunk_x = int(x / size)
        chunk_y = int(y / size)
        self.last_chunk = (chunk_x, chunk_y)
        self.drawn_layer = game_layer

        reader = copy.copy(self._layers[game_layer])
        grid = self.tiles[game_layer]
        out: list[Vertices] = []
        for dx, dy in NEIGHBOURHOOD:
            cx, cy = chunk_x + dx, chunk_y + dy
            index = self.width * cy + cx
            if not 0 <= index < len(grid):
                continue
            offset = grid[index] - 1
            if offset < 0:
                continue
            out.extend(self._chunk_vertices(reader, offset, cx * size, cy * size))
        return out

    def _chunk_vertices(
        self, reader: BitReader, offset: int, origin_x: int, origin_y: int
    ) -> Iterator[Vertices]:
        stream = cast(VectorByteStream, reader.bytes)
        stream.position(offset // 8)
        reader.parse(offset % 8)
        count_bits = reader.parse(3)
        size = self.chunk_size
        for cell in range(size * size):
            sprites = reader.parse(count_bits)
            tx = cell % size + origin_x
            ty = cell // size + origin_y
            vertices = [0.0] * VERTEX_COUNT
            vertices[0] = vertices[5] = float(tx)
            vertices[1] = vertices[16] = float(ty)
            vertices[6] = vertices[11] = float(ty + 1)
            vertices[10] = vertices[15] = float(tx + 1)
            for _ in range(sprites):
                self.set_sprite_vertices(reader.parse(self.bits_per_sprite), vertices)
                yield list(vertices)
        reader.parse(reader.bits_left)


def parse_music(stream: BitReader) -> list[MusicRegion]:
    """Read the music regions that follow the map data."""
    regions = []
    for _ in range(stream.parse(8)):
        name_length = stream.parse(8)
        name = bytes(stream.parse(8) for _ in range(name_length))
        x = stream.parse(10)
        y = stream.parse(10)
        layer = stream.parse(4)
        width = stream.parse(10)
        height = stream.parse(10)
        regions.append(
            MusicRegion(
                music=name.decode("utf-8", errors="replace"),
                height=height,
                width=width,
                x=x,
                y=y,
                z=layer,
            )
        )
    return regions


def get_map_tiles(path: PathArg) -> Layers:
    """Load every layer of ``<path>/assets/nm1``; no file gives no layers."""
    stream = FileByteStream(Path(path) / "assets" / "nm1")
    if not stream.valid():
        return []

    parser = MapParser()
    parser.load(BitReader(stream))

    layers: Layers = []
    for layer in range(parser.world_layers()):
        tiles = [MultiLayeredTile() for _ in range(MAP_WIDTH * MAP_HEIGHT + MAP_WIDTH)]
        for x in range(2, 64):
            for y in range(2, 64):
                for vertices in parser.get_tiles_at(x * 10, y * 10, layer, 0.0):
                    tile_x = int(vertices[WORLD_X]) - WORLD_OFFSET_X
                    tile_y = int(vertices[WORLD_Y])
                    if tile_x < 0 or tile_y < 0:
                        continue
                    texture = Vec2(
                        int(vertices[TEXTURE_LEFT] * TEXTURE_SIZE),
                        int(vertices[TEXTURE_TOP] * TEXTURE_SIZE),
                    )
                    tiles[tile_x + tile_y * MAP_WIDTH].add(texture)
        layers.append(tiles)
    return layers