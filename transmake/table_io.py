# transmake/table_io.py
from __future__ import annotations

from pathlib import Path
from typing import Union

import numpy as np
from PIL import Image

from .constants import TABLE_BYTES, TABLE_SIDE
from .core_types import U8Table
from .errors import PaletteReadError, TableWriteError
from .palette_data import Palette

"""
Palette file reading, raw table writing, and a PNG preview of a table.
"""

PathLike = Union[str, Path]


def read_palette_file(path: PathLike) -> Palette:
    """Read a raw RGB palette file (at least 768 bytes)."""
    try:
        with open(path, "rb") as fh:
            data = fh.read()
    except OSError as e:
        raise PaletteReadError(f"could not open palette file {path}: {e}") from e
    return Palette.from_bytes(data)


def _as_table(table: np.ndarray) -> U8Table:
    arr = np.asarray(table, dtype=np.uint8).reshape(-1)
    if arr.size != TABLE_BYTES:
        raise TableWriteError(f"table has {arr.size} bytes, expected {TABLE_BYTES}")
    return arr


def write_table(path: PathLike, table: np.ndarray) -> Path:
    """Write a flat 65536-byte table. Raises TableWriteError on any failure."""
    out = Path(path)
    arr = _as_table(table)
    try:
        with open(out, "wb") as fh:
            fh.write(arr.tobytes())
    except OSError as e:
        raise TableWriteError(f"could not write {out}: {e}") from e
    return out


def table_preview_rgb(palette: Palette, table: np.ndarray) -> np.ndarray:
    """(256,256,3) image: row = background, column = foreground, pixel = result colour."""
    arr = _as_table(table)
    return palette.rgb[arr].reshape(TABLE_SIDE, TABLE_SIDE, 3)


def save_table_preview(path: PathLike, palette: Palette, table: np.ndarray) -> Path:
    out = Path(path)
    if out.suffix.lower() != ".png":
        out = out.with_suffix(".png")
    rgb = np.ascontiguousarray(table_preview_rgb(palette, table))
    try:
        Image.fromarray(rgb).save(out)
    except OSError as e:
        raise TableWriteError(f"could not write {out}: {e}") from e
    return out


__all__ = [
    "read_palette_file",
    "write_table",
    "table_preview_rgb",
    "save_table_preview",
]
