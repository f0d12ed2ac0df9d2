import pytest
from PIL import Image

from rucoymap.parser110 import TILE_SIZE
from rucoymap.render import BLACK, Region, Tilesheet, blit, main, render_map

RED = (255, 0, 0)
GREEN = (0, 255, 0)
BLUE = (0, 0, 255)


def _make_map(tmp_path):
    map_dir = tmp_path / "maps"
    map_dir.mkdir()
    # width 2, height 1, one layer with one sub-layer
    (map_dir / "init").write_bytes(bytes([0, 2, 0, 1, 1, 1]))
    (map_dir / "0_0_0").write_bytes(bytes([1, 1, 0]) + bytes(159))
    size = int(TILE_SIZE)
    sheet = Image.new("RGB", (size * 2, size), RED)
    sheet.paste(GREEN, (size, 0, size * 2, size))
    sheet_path = tmp_path / "sheet.png"
    sheet.save(sheet_path)
    return map_dir, sheet_path


def test_tilesheet_at():
    sheet = Tilesheet(10, 20, Image.new("RGB", (40, 80)))
    assert sheet.at(2, 3) == Region(20, 60, 10, 20)
    assert sheet.at(0, 0) == Region(0, 0, 10, 20)


def test_blit_copies_region_and_skips_ignored():
    src = Image.new("RGB", (4, 4), BLUE)
    src.putpixel((2, 0), RED)
    src.putpixel((3, 0), BLACK)
    src.putpixel((2, 1), GREEN)
    src.putpixel((3, 1), GREEN)
    dst = Image.new("RGB", (4, 4), BLUE)
    dst.putpixel((0, 0), RED)

    blit(src, Region(2, 0, 2, 2), dst, 1, 1)

    assert dst.getpixel((1, 1)) == RED
    assert dst.getpixel((2, 1)) == BLUE
    assert dst.getpixel((1, 2)) == GREEN
    assert dst.getpixel((2, 2)) == GREEN
    assert dst.getpixel((0, 0)) == RED


def test_blit_custom_ignore_colour():
    src = Image.new("RGB", (2, 1), RED)
    src.putpixel((1, 0), GREEN)
    dst = Image.new("RGB", (2, 1), BLUE)
    blit(src, Region(0, 0, 2, 1), dst, 0, 0, RED)
    assert dst.getpixel((0, 0)) == BLUE
    assert dst.getpixel((1, 0)) == GREEN


def test_render_map(tmp_path):
    map_dir, sheet_path = _make_map(tmp_path)
    out_path = tmp_path / "out.png"
    size = int(TILE_SIZE)

    image = render_map(map_dir, sheet_path, out_path)

    assert image.size == (2 * size, size)
    assert image.getpixel((0, 0)) == GREEN
    assert image.getpixel((size - 1, size - 1)) == GREEN
    assert image.getpixel((size, 0)) == BLACK
    with Image.open(out_path) as saved:
        assert saved.convert("RGB").getpixel((5, 5)) == GREEN


def test_render_map_missing_header(tmp_path):
    sheet_path = tmp_path / "sheet.png"
    Image.new("RGB", (4, 4)).save(sheet_path)
    with pytest.raises(FileNotFoundError):
        render_map(tmp_path / "nowhere", sheet_path, tmp_path / "out.png")


def test_main_writes_png(tmp_path):
    map_dir, sheet_path = _make_map(tmp_path)
    out_path = tmp_path / "result.png"
    assert main([str(map_dir), str(sheet_path), str(out_path)]) == 0
    with Image.open(out_path) as saved:
        assert saved.size == (2 * int(TILE_SIZE), int(TILE_SIZE))
        assert saved.convert("RGB").getpixel((1, 1)) == GREEN