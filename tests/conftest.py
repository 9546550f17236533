from __future__ import annotations

from pathlib import Path

import numpy as np
import pytest

from transmake.palette_data import Palette

from palettes import grey_rows, palette_from_rows


@pytest.fixture
def grey_palette() -> Palette:
    """Every grey level once: index i is (i, i, i)."""
    return palette_from_rows(grey_rows())


@pytest.fixture
def random_palette() -> Palette:
    rng = np.random.default_rng(1234)
    rgb = rng.integers(0, 256, size=(256, 3), dtype=np.uint8)
    return Palette.from_bytes(rgb.tobytes())


@pytest.fixture
def palette_file(tmp_path: Path, random_palette: Palette) -> Path:
    path = tmp_path / "test.pal"
    path.write_bytes(random_palette.rgb.tobytes())
    return path
