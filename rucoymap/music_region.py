"""Music regions placed on the map."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class MusicRegion:
    """A rectangle on one map layer where a music track plays."""

    music: str = ""
    height: int = 0
    width: int = 0
    x: int = 0
    y: int = 0
    z: int = 0