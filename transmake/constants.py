# transmake/constants.py
"""
Fixed sizes and defaults used across the project.

- Palette and table geometry
- Alpha level mapping
- Command line defaults
"""
from __future__ import annotations

# ==================
# Palette / table
# ==================
PALETTE_ENTRIES: int = 256
PALETTE_BYTES: int = PALETTE_ENTRIES * 3
TABLE_SIDE: int = 256
TABLE_BYTES: int = TABLE_SIDE * TABLE_SIDE

# Background rows composited and matched per numpy block.
TABLE_BLOCK_ROWS: int = 16

# ==================
# Alpha levels
# ==================
MIN_ALPHA_LEVEL: int = 1
MAX_ALPHA_LEVEL: int = 9
# alpha_byte = int(level * 256 / 10)
ALPHA_LEVEL_NUMERATOR: int = 256
ALPHA_LEVEL_DENOMINATOR: int = 10

# ==================
# Command line
# ==================
DEFAULT_OUTPREFIX: str = "TRANS"
DEFAULT_OUTFILES: str = "123456789"
DEFAULT_BLENDSTYLE: str = "translucent"
TABLE_SUFFIX: str = ".lmp"
PREVIEW_SUFFIX: str = ".png"

__all__ = [
    "PALETTE_ENTRIES",
    "PALETTE_BYTES",
    "TABLE_SIDE",
    "TABLE_BYTES",
    "TABLE_BLOCK_ROWS",
    "MIN_ALPHA_LEVEL",
    "MAX_ALPHA_LEVEL",
    "ALPHA_LEVEL_NUMERATOR",
    "ALPHA_LEVEL_DENOMINATOR",
    "DEFAULT_OUTPREFIX",
    "DEFAULT_OUTFILES",
    "DEFAULT_BLENDSTYLE",
    "TABLE_SUFFIX",
    "PREVIEW_SUFFIX",
]
