"""Builders shared by the test modules."""

from __future__ import annotations

from pathlib import Path
from typing import List, Sequence, Tuple

import numpy as np

from transmake.palette_data import Palette


def grey_rows() -> List[Tuple[int, int, int]]:
    return [(i, i, i) for i in range(256)]


def palette_from_rows(rows: Sequence[Sequence[int]]) -> Palette:
    """Palette from exactly 256 (r, g, b) rows."""
    rgb = np.array(rows, dtype=np.uint8).reshape(256, 3)
    return Palette.from_bytes(rgb.tobytes())


def read_table(path: Path) -> np.ndarray:
    return np.frombuffer(Path(path).read_bytes(), dtype=np.uint8)
