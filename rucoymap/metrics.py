"""Small geometry types shared by the map parsers."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Generic, TypeVar

T = TypeVar("T")


@dataclass(frozen=True, order=True)
class Vec2(Generic[T]):
    """A 2D point, ordered by x then y."""

    x: T = 0  # type: ignore[assignment]
    y: T = 0  # type: ignore[assignment]


@dataclass
class Bounds(Generic[T]):
    """A width and height."""

    width: T = 0  # type: ignore[assignment]
    height: T = 0  # type: ignore[assignment]


WorldPosition = Vec2
TextureCoord = Vec2
MapPosition = Vec2

INVALID_TEXTURE_COORD: Vec2[int] = Vec2(-1, -1)
TILE_LAYER_CAPACITY = 6


@dataclass
class TextureRegion:
    """A rectangle inside a texture."""

    position: Vec2[int] = field(default_factory=Vec2)
    size: Bounds[int] = field(default_factory=Bounds)


class MultiLayeredTile:
    """A map cell holding up to six stacked texture coordinates."""

    __slots__ = ("_tiles", "_written")

    def __init__(self) -> None:
        self._tiles = [INVALID_TEXTURE_COORD] * TILE_LAYER_CAPACITY
        self._written = 0

    def add(self, coord: Vec2[int]) -> None:
        """Stack ``coord`` on the cell; ignored once the cell is full."""
        if self._written < len(self._tiles):
            self._tiles[self._written] = coord
            self._written += 1

    def tiles(self) -> tuple[Vec2[int], ...]:
        """All six slots, unused ones holding ``INVALID_TEXTURE_COORD``."""
        return tuple(self._tiles)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, MultiLayeredTile):
            return NotImplemented
        return self._tiles == other._tiles

    def __repr__(self) -> str:
        used = self._tiles[: self._written]
        return f"MultiLayeredTile({used!r})"


Tiles = list[MultiLayeredTile]
Layers = list[Tiles]