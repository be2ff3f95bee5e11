"""
Render font records as ``name: value`` lines.

Each record type has its own renderer listing its fields in a fixed order:

* Info: face, size, bold, italic, charset, unicode, stretch_h, smooth,
  super_sampling, padding, spacing, outline, fixed_height
* Common: line_height, base, scale_w, scale_h, pages, packed,
  alpha_channel, red_channel, green_channel, blue_channel
* Character: x, y, width, height, xoffset, yoffset, xadvance, page, channel
* KerningPair: first, second

Tuple values are written comma-separated, as in the text format; everything
else uses its ``str()``.
"""

from __future__ import annotations

import enum
import unicodedata

from fnttools.models import Character, Common, Info, KerningPair

INFO_FIELDS = (
    "face",
    "size",
    "bold",
    "italic",
    "charset",
    "unicode",
    "stretch_h",
    "smooth",
    "super_sampling",
    "padding",
    "spacing",
    "outline",
    "fixed_height",
)
COMMON_FIELDS = (
    "line_height",
    "base",
    "scale_w",
    "scale_h",
    "pages",
    "packed",
    "alpha_channel",
    "red_channel",
    "green_channel",
    "blue_channel",
)
CHARACTER_FIELDS = ("x", "y", "width", "height", "xoffset", "yoffset", "xadvance", "page", "channel")
KERNING_PAIR_FIELDS = ("first", "second")


class CharacterClass(enum.Enum):
    CONTROL = "Control"
    WHITESPACE = "Whitespace"
    PRINTABLE = "Printable"


def classify_character(code: int) -> CharacterClass:
    # Surrogates and out-of-range codes have no glyph to print.
    if not 0 <= code <= 0x10FFFF or 0xD800 <= code <= 0xDFFF:
        return CharacterClass.CONTROL
    c = chr(code)
    if unicodedata.category(c) == "Cc":
        return CharacterClass.CONTROL
    if c.isspace() or unicodedata.category(c) in ("Zs", "Zl", "Zp"):
        return CharacterClass.WHITESPACE
    return CharacterClass.PRINTABLE


def character_label(code: int) -> str:
    """The glyph itself for printable characters, otherwise the class name."""
    cls = classify_character(code)
    if cls is CharacterClass.PRINTABLE:
        return chr(code)
    return cls.value


def format_value(value) -> str:
    if isinstance(value, tuple):
        return ",".join(str(v) for v in value)
    return str(value)


def _render(record, fields: tuple[str, ...]) -> list[str]:
    return [f"{name}: {format_value(getattr(record, name))}" for name in fields]


def render_info(info: Info) -> list[str]:
    return _render(info, INFO_FIELDS)


def render_common(common: Common) -> list[str]:
    return _render(common, COMMON_FIELDS)


def render_character(char: Character) -> list[str]:
    return _render(char, CHARACTER_FIELDS)


def render_kerning_pair(pair: KerningPair) -> list[str]:
    return _render(pair, KERNING_PAIR_FIELDS)
