# transmake/tables.py
from __future__ import annotations

"""
Blend table generation and the per-level driver.

A table is a flat uint8 array of 256*256 bytes. The byte at
background*256 + foreground is the palette index closest to the composite of
palette[foreground] over palette[background].

Exports:
- alpha_level_to_byte(level) -> int
- parse_outfiles(text) -> list[int]
- table_filename(prefix, level) -> str
- generate_table_for_alpha(palette, style, alpha) -> U8Table
- generate_table(palette, style, level) -> U8Table
- TableConfig
- make_tables(config, writer=write_table) -> list[Path]
"""

import time
from dataclasses import dataclass
from pathlib import Path
from typing import Callable, List, Optional, Tuple

import numpy as np

from .blend import composite_arrays
from .blend_style import BlendStyle
from .constants import (
    ALPHA_LEVEL_DENOMINATOR,
    ALPHA_LEVEL_NUMERATOR,
    DEFAULT_OUTFILES,
    DEFAULT_OUTPREFIX,
    MAX_ALPHA_LEVEL,
    MIN_ALPHA_LEVEL,
    PREVIEW_SUFFIX,
    TABLE_BLOCK_ROWS,
    TABLE_BYTES,
    TABLE_SIDE,
    TABLE_SUFFIX,
)
from .core_types import U8Table
from .palette_data import Palette
from .table_io import save_table_preview, write_table
from .utils import (
    debug_log,
    format_seconds_compact,
    key_value_pairs_to_string,
    log,
)


def alpha_level_to_byte(level: int) -> int:
    """Map a 1..9 level to its alpha byte, truncating: 1->25, 5->128, 9->230."""
    level = int(level)
    if not MIN_ALPHA_LEVEL <= level <= MAX_ALPHA_LEVEL:
        raise ValueError(
            f"alpha level must be in [{MIN_ALPHA_LEVEL}, {MAX_ALPHA_LEVEL}], got {level}"
        )
    return (level * ALPHA_LEVEL_NUMERATOR) // ALPHA_LEVEL_DENOMINATOR


def parse_outfiles(text: Optional[str]) -> List[int]:
    """
    Requested levels from a digit string, ascending and de-duplicated.
    Characters other than 1-9 are ignored. Empty or None means all levels.
    """
    if not text:
        text = DEFAULT_OUTFILES
    levels = {int(ch) for ch in text if ch in "123456789"}
    return sorted(levels)


def table_filename(prefix: str, level: int) -> str:
    return f"{prefix}{level}0{TABLE_SUFFIX}"


def generate_table_for_alpha(
    palette: Palette, style: BlendStyle, alpha: int
) -> U8Table:
    """Build one table for a raw alpha byte (0..255)."""
    table = np.empty(TABLE_BYTES, dtype=np.uint8)
    pal = palette.rgba
    for y0 in range(0, TABLE_SIDE, TABLE_BLOCK_ROWS):
        y1 = min(y0 + TABLE_BLOCK_ROWS, TABLE_SIDE)
        rows = y1 - y0
        # background varies by row, foreground by column
        back = np.repeat(pal[y0:y1], TABLE_SIDE, axis=0)
        front = np.tile(pal, (rows, 1))
        blended = composite_arrays(back, front, style, alpha)
        table[y0 * TABLE_SIDE : y1 * TABLE_SIDE] = palette.nearest_many(blended)
    return table


def generate_table(palette: Palette, style: BlendStyle, level: int) -> U8Table:
    """Build the table for alpha level 1..9."""
    return generate_table_for_alpha(palette, style, alpha_level_to_byte(level))


def table_summary(table: np.ndarray) -> List[Tuple[str, object]]:
    """Small stats for debug output."""
    grid = np.asarray(table, dtype=np.uint8).reshape(TABLE_SIDE, TABLE_SIDE)
    backgrounds = np.arange(TABLE_SIDE, dtype=np.uint8)[:, None]
    foregrounds = np.arange(TABLE_SIDE, dtype=np.uint8)[None, :]
    return [
        ("Unique indices", int(np.unique(grid).size)),
        ("Kept background", int(np.count_nonzero(grid == backgrounds))),
        ("Took foreground", int(np.count_nonzero(grid == foregrounds))),
    ]


@dataclass(frozen=True)
class TableConfig:
    """Everything a run needs; built once from the command line."""

    palette: Palette
    style: BlendStyle = BlendStyle.TRANSLUCENT
    prefix: str = DEFAULT_OUTPREFIX
    levels: Tuple[int, ...] = tuple(range(MIN_ALPHA_LEVEL, MAX_ALPHA_LEVEL + 1))
    preview: bool = False
    debug: bool = False


TableWriterFn = Callable[[Path, np.ndarray], object]


def make_tables(
    config: TableConfig, writer: TableWriterFn = write_table
) -> List[Path]:
    """
    Generate and write one table per requested level, ascending.
    Stops at the first failure; the exception propagates to the caller.
    """
    written: List[Path] = []
    for level in sorted(set(config.levels)):
        out_path = Path(table_filename(config.prefix, level))
        log(f"Writing {out_path}...")

        t0 = time.perf_counter()
        table = generate_table(config.palette, config.style, level)
        t1 = time.perf_counter()
        writer(out_path, table)
        written.append(out_path)

        if config.preview:
            preview_path = save_table_preview(
                out_path.with_suffix(PREVIEW_SUFFIX), config.palette, table
            )
            log(f"  preview {preview_path}")

        if config.debug:
            debug_log(
                key_value_pairs_to_string(
                    [
                        ("Level", level),
                        ("Alpha", alpha_level_to_byte(level)),
                        ("Blend", format_seconds_compact(t1 - t0)),
                    ]
                    + table_summary(table)
                )
            )
    return written


__all__ = [
    "alpha_level_to_byte",
    "parse_outfiles",
    "table_filename",
    "generate_table_for_alpha",
    "generate_table",
    "table_summary",
    "TableConfig",
    "make_tables",
]
