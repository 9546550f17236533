from __future__ import annotations

import numpy as np
import pytest

from transmake.core_types import RGBA
from transmake.errors import PaletteFormatError
from transmake.palette_data import Palette

from palettes import palette_from_rows


def test_from_bytes_reads_rgb_triples_and_forces_opaque():
    data = bytes(range(256)) * 3
    pal = Palette.from_bytes(data)
    assert pal.entry(0) == RGBA(0, 1, 2, 255)
    assert pal.entry(1) == RGBA(3, 4, 5, 255)
    assert pal.entry(255) == RGBA(253, 254, 255, 255)
    assert np.all(pal.rgba[:, 3] == 255)


def test_from_bytes_rejects_short_data():
    with pytest.raises(PaletteFormatError):
        Palette.from_bytes(b"\x00" * 767)


def test_from_bytes_ignores_trailing_bytes():
    base = bytes(range(256)) * 3
    assert Palette.from_bytes(base + b"\xff" * 32) == Palette.from_bytes(base)


def test_palette_is_read_only():
    pal = Palette.from_bytes(b"\x10" * 768)
    with pytest.raises(ValueError):
        pal.rgba[0, 0] = 0


def test_nearest_exact_match_returns_first_occurrence():
    rows = [(255, 255, 255)] * 256
    rows[3] = (10, 20, 30)
    rows[7] = (10, 20, 30)
    pal = palette_from_rows(rows)
    assert pal.nearest(10, 20, 30) == 3
    assert pal.nearest(255, 255, 255) == 0


def test_nearest_equidistant_keeps_lowest_index():
    rows = [(255, 255, 255)] * 256
    rows[5] = (10, 0, 0)
    rows[9] = (0, 10, 0)
    pal = palette_from_rows(rows)
    # both at squared distance 50
    assert pal.nearest(5, 5, 0) == 5


def test_nearest_picks_minimum_distance(grey_palette):
    assert grey_palette.nearest(10, 12, 11) == 11
    assert grey_palette.nearest(0, 0, 1) == 0


def test_every_first_occurrence_maps_to_itself():
    rng = np.random.default_rng(7)
    # small channel range forces plenty of duplicates
    rgb = rng.integers(0, 4, size=(256, 3), dtype=np.uint8)
    pal = Palette.from_bytes(rgb.tobytes())
    seen = {}
    for i, row in enumerate(rgb.tolist()):
        seen.setdefault(tuple(row), i)
    for colour, first in seen.items():
        assert pal.nearest(*colour) == first


def test_nearest_many_agrees_with_scalar_scan(random_palette):
    rng = np.random.default_rng(99)
    queries = rng.integers(0, 256, size=(500, 3))
    fast = random_palette.nearest_many(queries)
    slow = [random_palette.nearest(int(r), int(g), int(b)) for r, g, b in queries]
    assert fast.dtype == np.uint8
    assert fast.tolist() == slow


def test_nearest_many_accepts_rgba_rows():
    rows = [(255, 255, 255)] * 256
    rows[2] = (10, 0, 0)
    rows[4] = (10, 0, 0)
    pal = palette_from_rows(rows)
    out = pal.nearest_many(np.array([[10, 0, 0, 255], [9, 1, 0, 0]]))
    assert out.tolist() == [2, 2]
