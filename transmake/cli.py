#!/usr/bin/env python3
"""
transmake/cli.py
Build translucency lookup tables for a 256-colour palette.

Usage:
  transmake -palette PLAYPAL.pal [-outfiles 123456789] [-outprefix TRANS]
            [-blendstyle translucent|add|subtract|reversesubtract|modulate]
            [-preview] [-debug]

Input:
  Raw palette file: 256 RGB triples (768 bytes). Extra bytes are ignored.

Output:
  One 65536-byte table per requested level, named <prefix><level>0.lmp in the
  current directory. Byte [background*256 + foreground] is the palette index
  of foreground blended over background.

Notes:
  Option names are case-insensitive. Unknown options are ignored, and an
  unknown blend style keeps the previous one.
"""

from __future__ import annotations

import argparse
import sys
import time
from typing import List, Optional, Sequence

from .blend_style import (
    STYLE_NAMES,
    BlendStyle,
    blend_style_from_name,
    resolve_blend_style,
)
from .constants import DEFAULT_BLENDSTYLE, DEFAULT_OUTFILES, DEFAULT_OUTPREFIX
from .errors import MissingArgumentError, TransmakeError
from .table_io import read_palette_file
from .tables import TableConfig, make_tables, parse_outfiles
from .utils import (
    debug_log,
    enable_line_buffered_stdout,
    error,
    format_total_duration_compact,
    log,
    print_banner,
    print_config_line,
    warn,
)

VALUE_OPTIONS = ("palette", "outfiles", "outprefix", "blendstyle")
OPTION_NAMES = VALUE_OPTIONS + ("preview", "debug")


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="transmake",
        description="Generate translucency tables for a 256-colour palette.",
        allow_abbrev=False,
    )
    parser.add_argument(
        "-palette", default=None, help="Input palette file (256 RGB triples). Required."
    )
    parser.add_argument(
        "-outfiles",
        default=DEFAULT_OUTFILES,
        help='Levels to write, e.g. "135" writes TRANS10, TRANS30 and TRANS50.',
    )
    parser.add_argument(
        "-outprefix", default=DEFAULT_OUTPREFIX, help="Output filename prefix."
    )
    parser.add_argument(
        "-blendstyle",
        action="append",
        default=None,
        metavar="STYLE",
        help=f"Blend style ({', '.join(STYLE_NAMES)}). Defaults to {DEFAULT_BLENDSTYLE}.",
    )
    parser.add_argument(
        "-preview", action="store_true", help="Also write a PNG preview per table."
    )
    parser.add_argument("-debug", action="store_true", help="Verbose table details")
    return parser


def _normalise_options(argv: Sequence[str]) -> List[str]:
    """
    Lower-case known option names and bind each value-taking option to the
    token after it as '-name=value', so values may start with '-'.
    """
    out: List[str] = []
    i = 0
    while i < len(argv):
        token = argv[i]
        name = token[1:].lower() if len(token) > 1 and token[0] == "-" else ""
        if name in VALUE_OPTIONS and i + 1 < len(argv):
            out.append(f"-{name}={argv[i + 1]}")
            i += 2
            continue
        out.append(f"-{name}" if name in OPTION_NAMES else token)
        i += 1
    return out


def parse_cli_args(argv: Sequence[str]) -> argparse.Namespace:
    """
    Parse CLI arguments for table generation.

    Returns:
      argparse.Namespace with:
        palette: palette path or None
        outfiles: digit string of levels
        outprefix: filename prefix
        blendstyle: list of style names in the order given, or None
        preview: bool, write PNG previews
        debug: bool for verbose table details
        ignored: tokens that matched no option
    """
    args, ignored = _build_parser().parse_known_args(_normalise_options(argv))
    args.ignored = ignored
    return args


def _resolve_style(names: Optional[List[str]], debug: bool) -> BlendStyle:
    style = BlendStyle(DEFAULT_BLENDSTYLE)
    for name in names or []:
        if debug and blend_style_from_name(name) is None:
            debug_log(f"unknown blend style {name!r}; keeping {style.value}")
        style = resolve_blend_style(name, style)
    return style


def build_config(args: argparse.Namespace) -> TableConfig:
    """Load the palette and freeze the run configuration."""
    if args.palette is None:
        raise MissingArgumentError(
            "Palette file not specified. Use the -palette parameter."
        )
    palette = read_palette_file(args.palette)
    log(f"Read palette {args.palette}")
    return TableConfig(
        palette=palette,
        style=_resolve_style(args.blendstyle, args.debug),
        prefix=args.outprefix,
        levels=tuple(parse_outfiles(args.outfiles)),
        preview=args.preview,
        debug=args.debug,
    )


# Entry point


def main(argv: Optional[Sequence[str]] = None) -> int:
    """
    CLI entry point. Returns the process exit status.

    Any TransmakeError stops the run at once and is reported on stderr.
    """
    enable_line_buffered_stdout()
    if argv is None:
        argv = sys.argv[1:]
    if not argv:
        _build_parser().print_help(sys.stderr)
        return 1

    args = parse_cli_args(argv)
    t_start = time.perf_counter()
    print_banner("transmake")
    if args.debug and args.ignored:
        debug_log(f"ignored arguments: {' '.join(args.ignored)}")

    try:
        config = build_config(args)
        print_config_line(
            "run",
            [
                ("Style", config.style.value),
                ("Levels", ",".join(str(n) for n in config.levels) or "-"),
                ("Prefix", config.prefix),
                ("Preview", config.preview),
            ],
            debug=False,
        )
        if not config.levels:
            warn("no alpha levels selected; nothing to write")
        make_tables(config)
    except TransmakeError as e:
        error(str(e))
        return 1

    log(f"Done! ({format_total_duration_compact(time.perf_counter() - t_start)})")
    return 0


if __name__ == "__main__":
    sys.exit(main())
