# transmake/core_types.py
from __future__ import annotations

"""
Core type aliases, small value objects, and lightweight helpers.
"""

from dataclasses import dataclass
from typing import Sequence, Tuple, Union

import numpy as np
from numpy.typing import NDArray

# Basic aliases

RGBTuple = Tuple[int, int, int]
RGBATuple = Tuple[int, int, int, int]

U8Palette = NDArray[np.uint8]  # (256, 4) RGBA rows
U8Pixels = NDArray[np.uint8]  # (N, 4) RGBA rows
U8Table = NDArray[np.uint8]  # (65536,) flat blend table

# Value objects


@dataclass(frozen=True)
class RGBA:
    """A true 32-bit colour. Not palette-indexed."""

    red: int
    green: int
    blue: int
    alpha: int = 255

    def rgb(self) -> RGBTuple:
        return (self.red, self.green, self.blue)

    def as_tuple(self) -> RGBATuple:
        return (self.red, self.green, self.blue, self.alpha)

    @classmethod
    def from_row(cls, row: Union[Sequence[int], NDArray[np.generic]]) -> "RGBA":
        """Build from a 4-length sequence or array row."""
        if len(row) < 4:
            raise ValueError("row too small for RGBA")
        return cls(int(row[0]), int(row[1]), int(row[2]), int(row[3]))


# Small helpers


def clamp_byte(value: int) -> int:
    """Clamp an integer to the inclusive byte range [0, 255]."""
    return 0 if value < 0 else 255 if value > 255 else value


__all__ = [
    # aliases / types
    "RGBTuple",
    "RGBATuple",
    "U8Palette",
    "U8Pixels",
    "U8Table",
    # value objects
    "RGBA",
    # helpers
    "clamp_byte",
]
