# transmake/errors.py
from __future__ import annotations

"""
Error kinds raised by transmake. All of them are fatal for a run; the CLI
reports the message and exits with a failure status.
"""


class TransmakeError(Exception):
    """Base class for every reportable transmake failure."""


class MissingArgumentError(TransmakeError):
    """A required command line parameter was not given."""


class PaletteReadError(TransmakeError, OSError):
    """The palette file could not be opened or read."""


class PaletteFormatError(TransmakeError, ValueError):
    """The palette data is smaller than 256 RGB triples."""


class TableWriteError(TransmakeError, OSError):
    """A blend table could not be written."""


__all__ = [
    "TransmakeError",
    "MissingArgumentError",
    "PaletteReadError",
    "PaletteFormatError",
    "TableWriteError",
]
