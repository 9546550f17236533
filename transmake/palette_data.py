# transmake/palette_data.py
from __future__ import annotations

"""
Palette model and nearest-colour lookup.

Exports:
  Palette
    .from_bytes(data)           -> Palette   (first 768 bytes as RGB triples)
    .entry(index)               -> RGBA
    .nearest(r, g, b)           -> int       (scalar ascending scan)
    .nearest_many(rgb)          -> uint8 [N] (vectorised, same tie rule)
    .rgba / .rgb                -> read-only uint8 arrays [256,4] / [256,3]
"""

from typing import List

import numpy as np

from .constants import PALETTE_BYTES, PALETTE_ENTRIES
from .core_types import RGBA, U8Palette
from .errors import PaletteFormatError
from .utils import nearest_palette_indices_rgb_distance


class Palette:
    """Fixed 256-entry opaque palette. Immutable once built."""

    __slots__ = ("_rgba", "_entries")

    def __init__(self, rgba: np.ndarray) -> None:
        arr = np.array(rgba, dtype=np.uint8)
        if arr.shape != (PALETTE_ENTRIES, 4):
            raise PaletteFormatError(
                f"palette must be {PALETTE_ENTRIES}x4 RGBA, got {arr.shape}"
            )
        arr.setflags(write=False)
        self._rgba: U8Palette = arr
        self._entries: List[RGBA] = [RGBA.from_row(row) for row in arr.tolist()]

    @classmethod
    def from_bytes(cls, data: bytes) -> "Palette":
        """
        Build from raw RGB triples. Bytes past the first 768 are ignored.
        Alpha is always 255; the source format carries none.
        """
        if len(data) < PALETTE_BYTES:
            raise PaletteFormatError(
                f"palette has {len(data)} bytes, need at least {PALETTE_BYTES}"
            )
        rgb = np.frombuffer(bytes(data[:PALETTE_BYTES]), dtype=np.uint8)
        rgba = np.full((PALETTE_ENTRIES, 4), 255, dtype=np.uint8)
        rgba[:, :3] = rgb.reshape(PALETTE_ENTRIES, 3)
        return cls(rgba)

    @property
    def rgba(self) -> U8Palette:
        return self._rgba

    @property
    def rgb(self) -> np.ndarray:
        return self._rgba[:, :3]

    def __len__(self) -> int:
        return PALETTE_ENTRIES

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Palette):
            return NotImplemented
        return bool(np.array_equal(self._rgba, other._rgba))

    def __hash__(self) -> int:
        return hash(self._rgba.tobytes())

    def entry(self, index: int) -> RGBA:
        return self._entries[index]

    def nearest(self, r: int, g: int, b: int) -> int:
        """
        Index of the closest entry by squared RGB distance.

        Scans in ascending index order. An exact match returns at once;
        otherwise the first entry reaching the minimum wins.
        """
        best_distance = 256 * 256 * 4
        best_index = 0
        for i, colour in enumerate(self._entries):
            dr = r - colour.red
            dg = g - colour.green
            db = b - colour.blue
            distance = dr * dr + dg * dg + db * db
            if distance < best_distance:
                if distance == 0:
                    return i
                best_distance = distance
                best_index = i
        return best_index

    def nearest_many(self, rgb: np.ndarray) -> np.ndarray:
        """Vectorised nearest() over (N,3) or (N,4) rows. Returns uint8 [N]."""
        src = np.asarray(rgb)
        return nearest_palette_indices_rgb_distance(src[..., :3], self.rgb)


__all__ = ["Palette"]
