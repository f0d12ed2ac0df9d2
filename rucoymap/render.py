"""Draw a chunked-format map onto a PNG using a tile sheet."""

from __future__ import annotations

import argparse
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Sequence

from PIL import Image

from rucoymap.bytestream import FileByteStream, PathArg
from rucoymap.parser110 import get_map_tiles, map_info_from_bytes

Pixel = tuple[int, int, int]
BLACK: Pixel = (0, 0, 0)

DEFAULT_MAP_DIR = "maps"
DEFAULT_SHEET = "res/ground.png"
DEFAULT_OUTPUT = "outfile.png"


@dataclass(frozen=True)
class Region:
    """A rectangle of pixels."""

    x: int = 0
    y: int = 0
    width: int = 0
    height: int = 0


@dataclass
class Tilesheet:
    """An image divided into equally sized tiles."""

    tile_width: int
    tile_height: int
    sheet: Image.Image

    def at(self, x: int, y: int) -> Region:
        """The pixel region of the tile in column ``x``, row ``y``."""
        return Region(
            x * self.tile_width, y * self.tile_height, self.tile_width, self.tile_height
        )


def blit(
    image: Image.Image,
    region: Region,
    dst: Image.Image,
    x: int,
    y: int,
    ignore: Pixel = BLACK,
) -> None:
    """Copy ``region`` of an RGB ``image`` to ``dst`` at (x, y), skipping ``ignore`` pixels."""
    src = image.load()
    out = dst.load()
    key = tuple(ignore[:3])
    for sy in range(region.y, region.y + region.height):
        for sx in range(region.x, region.x + region.width):
            pixel = src[sx, sy]
            if tuple(pixel[:3]) == key:
                continue
            out[x + sx - region.x, y + sy - region.y] = pixel


def render_map(map_dir: PathArg, sheet_path: PathArg, out_path: PathArg) -> Image.Image:
    """Render the first layer of the map in ``map_dir`` and save it as PNG."""
    folder = Path(map_dir)
    reader = FileByteStream(folder / "init")
    if not reader.valid():
        raise FileNotFoundError(f"cannot read map header: {folder / 'init'}")
    info = map_info_from_bytes(reader)
    layers = get_map_tiles(info, folder)
    if not layers:
        raise ValueError(f"map in {folder} has no layers")

    tile_size = int(info.tile_size)
    with Image.open(sheet_path) as loaded:
        sheet = Tilesheet(tile_size, tile_size, loaded.convert("RGB"))

    width, height = int(info.map.width), int(info.map.height)
    out = Image.new("RGB", (width * tile_size, height * tile_size))
    cells = layers[0]
    for x in range(width):
        for y in range(height):
            cell = cells[x + height * ((height - 1) - y)]
            for coord in cell.tiles():
                if coord.x < 0 or coord.y < 0:
                    continue
                blit(
                    sheet.sheet,
                    sheet.at(coord.x, coord.y),
                    out,
                    x * tile_size,
                    y * tile_size,
                    BLACK,
                )
    out.save(out_path, format="PNG")
    return out


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Render a map directory to a PNG file."""
    parser = argparse.ArgumentParser(description="Render a map to a PNG image.")
    parser.add_argument("map_dir", nargs="?", default=DEFAULT_MAP_DIR)
    parser.add_argument("sheet", nargs="?", default=DEFAULT_SHEET)
    parser.add_argument("output", nargs="?", default=DEFAULT_OUTPUT)
    args = parser.parse_args(argv)
    render_map(args.map_dir, args.sheet, args.output)
    return 0