# rucoymap

Readers for the map, tile and texture data files shipped with old versions
of Rucoy Online, plus a small renderer that turns a map into a PNG image.

## Installation

    pip install .

For running the tests:

    pip install ".[test]"
    pytest

## Command line

    rucoymap [MAP_DIR] [SHEET] [OUTPUT]

All three arguments are optional and default to `maps`, `res/ground.png`
and `outfile.png`. The command reads the map header from `MAP_DIR/init` and
the chunk files `MAP_DIR/<layer>_<x>_<y>` (map versions 106 to 110), takes
tiles from the tile sheet `SHEET`, and draws the first layer to `OUTPUT` as
a PNG. Pixels that are pure black in the tile sheet are treated as
transparent. A missing `init` file raises `FileNotFoundError`; a map with
no layers raises `ValueError`.

## Library use

The package has one module for each part of the data. Readers take a byte
stream or a bit stream and return plain Python objects.

- `rucoymap.bytestream`: byte streams over files (`FileByteStream`) or
  in-memory data (`VectorByteStream`). Both offer `read`, `valid`,
  `read_int`, `read_short` and `fill`; `read` returns `END_OF_STREAM` (-1)
  once the data runs out. A most-significant-bit-first `BitReader` sits on
  top of them.
- `rucoymap.metrics`: the small value types `Vec2`, `Bounds`,
  `TextureRegion` and `MultiLayeredTile`. A `MultiLayeredTile` holds up to
  six texture coordinates for one map cell; unused slots hold
  `INVALID_TEXTURE_COORD` and further additions are ignored.
- `rucoymap.music_region`: the `MusicRegion` record.
- `rucoymap.parser110`: `map_info_from_bytes` reads the `init` header into
  an `InitFile`, and `get_map_tiles` builds every layer from the chunk files.
- `rucoymap.parser115`: `parse_init` reads the v115 init file, including
  its music regions.
- `rucoymap.parser118`: `MapParser`, `parse_music` and `get_map_tiles`,
  which cover the bit-packed `assets/nm1` map used by versions 118 to 122.
  `get_map_tiles` returns an empty list when the file is missing.
- `rucoymap.texture_parser`: `load_textures_v115`, `load_texture_v118` and
  `load_tiles_v118` read texture atlases and `NamedRegion` entries.
- `rucoymap.render`: `Region`, `Tilesheet`, `blit`, `render_map` and the
  command's `main`.

Example:

    from rucoymap.bytestream import FileByteStream
    from rucoymap.parser110 import map_info_from_bytes, get_map_tiles

    info = map_info_from_bytes(FileByteStream("maps/init"))
    layers = get_map_tiles(info, "maps")
    print(info.map.width, info.map.height, len(layers))

To render a map from other locations:

    from rucoymap.render import render_map

    image = render_map("maps", "res/ground.png", "outfile.png")

## Limitations

- The `assets/nm1` file read by `rucoymap.parser118` must already be
  decompressed; the package does not decompress it.
- The renderer only draws maps in the chunked format of versions 106 to
  110, and only their first layer. Maps in the v115 and v118 formats can be
  read but not rendered.
- The texture readers return raw image bytes; they do not decode or save
  the images.