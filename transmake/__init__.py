"""
transmake package.

Purpose:
  Precompute translucency lookup tables for 256-colour palettes, so a
  renderer can blend two palette indices with a single table lookup.
  See transmake.cli for the command line.

Public API:
  Palette             : 256-entry palette with nearest-colour lookup.
  BlendStyle          : translucent / add / subtract / reversesubtract / modulate.
  composite           : blend one RGBA foreground over one RGBA background.
  generate_table      : build the 65536-byte table for an alpha level (1..9).
  make_tables         : write one table per requested level.
  read_palette_file   : load a raw 768-byte RGB palette.
  write_table         : dump a table to disk.

Quick start:
  from transmake import Palette, BlendStyle, generate_table
  table = generate_table(palette, BlendStyle.ADD, 5)
"""

__version__ = "0.3.0"

# Re-export namespaces for convenience.
from . import blend
from . import blend_style
from . import core_types
from . import errors
from . import palette_data
from . import table_io
from . import tables
from . import utils

from .blend import composite, composite_arrays  # noqa: E402,F401
from .blend_style import BlendStyle  # noqa: E402,F401
from .core_types import RGBA  # noqa: E402,F401
from .palette_data import Palette  # noqa: E402,F401
from .table_io import read_palette_file, write_table  # noqa: E402,F401
from .tables import (  # noqa: E402,F401
    TableConfig,
    alpha_level_to_byte,
    generate_table,
    make_tables,
)

__all__ = [
    "__version__",
    "blend",
    "blend_style",
    "core_types",
    "errors",
    "palette_data",
    "table_io",
    "tables",
    "utils",
    "RGBA",
    "Palette",
    "BlendStyle",
    "composite",
    "composite_arrays",
    "alpha_level_to_byte",
    "generate_table",
    "TableConfig",
    "make_tables",
    "read_palette_file",
    "write_table",
]
