# transmake/blend_style.py
from __future__ import annotations

from enum import Enum
from typing import Optional

"""
Blend style selection helpers.

Exports:
- BlendStyle
- blend_style_from_name(name) -> Optional[BlendStyle]
- resolve_blend_style(name, current) -> BlendStyle

Notes:
- Names are case-insensitive.
- Unknown names leave the current style unchanged rather than failing.
"""


class BlendStyle(Enum):
    TRANSLUCENT = "translucent"
    ADD = "add"
    SUBTRACT = "subtract"
    REVERSESUBTRACT = "reversesubtract"
    MODULATE = "modulate"


STYLE_NAMES = tuple(style.value for style in BlendStyle)


def blend_style_from_name(name: str) -> Optional[BlendStyle]:
    """Case-insensitive lookup; None for an unrecognised name."""
    try:
        return BlendStyle(name.lower())
    except ValueError:
        return None


def resolve_blend_style(name: Optional[str], current: BlendStyle) -> BlendStyle:
    """
    Resolve a user-supplied style name.
    - None -> current
    - known name -> that style
    - anything else -> current (silently kept)
    """
    if name is None:
        return current
    style = blend_style_from_name(name)
    return current if style is None else style


__all__ = [
    "BlendStyle",
    "STYLE_NAMES",
    "blend_style_from_name",
    "resolve_blend_style",
]
