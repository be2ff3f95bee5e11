"""Read and write text BMFont files."""

from __future__ import annotations

import re

from fnttools import attributes
from fnttools.models import BitmapFont
from fnttools.util import add_unique

ATTRIBUTE_RE = re.compile(r'(\w+)=(?:"([^"]*)"|(\S*))')
QUOTED_KEYS = {"face", "charset", "file"}


def parse_line(line: str) -> tuple[str, dict[str, str]]:
    """Split a line into its tag and attributes."""
    tag, _, rest = line.strip().partition(" ")
    attrs = {}
    for m in ATTRIBUTE_RE.finditer(rest):
        key, quoted, bare = m.groups()
        attrs[key] = quoted if quoted is not None else bare
    return tag, attrs


def format_line(tag: str, attrs: dict[str, str]) -> str:
    parts = [tag]
    for key, value in attrs.items():
        if key in QUOTED_KEYS:
            if '"' in value:
                raise ValueError(f"Cannot write {key}={value!r} to a text font")
            parts.append(f'{key}="{value}"')
        else:
            parts.append(f"{key}={value}")
    return " ".join(parts)


def text_to_font(text: str) -> BitmapFont:
    """Create a font document from the contents of a text BMFont file."""
    font = BitmapFont()
    for lineno, line in enumerate(text.splitlines(), 1):
        if not line.strip():
            continue
        tag, attrs = parse_line(line)
        try:
            if tag == "info":
                font.info = attributes.info_from_attributes(attrs)
            elif tag == "common":
                font.common = attributes.common_from_attributes(attrs)
            elif tag == "page":
                if font.pages is None:
                    font.pages = {}
                add_unique(font.pages, *attributes.page_from_attributes(attrs), "page")
            elif tag == "chars":
                if font.characters is None:
                    font.characters = {}
            elif tag == "char":
                if font.characters is None:
                    font.characters = {}
                add_unique(font.characters, *attributes.character_from_attributes(attrs), "character")
            elif tag == "kernings":
                if font.kerning_pairs is None:
                    font.kerning_pairs = {}
            elif tag == "kerning":
                if font.kerning_pairs is None:
                    font.kerning_pairs = {}
                add_unique(font.kerning_pairs, *attributes.kerning_pair_from_attributes(attrs), "kerning pair")
            # unknown tags are ignored
        except ValueError as exc:
            raise ValueError(f"Line {lineno}: {exc}") from exc
    return font


def font_to_text(font: BitmapFont) -> str:
    """Generate the contents of a text BMFont file, given a font document."""
    lines = []
    if font.info is not None:
        lines.append(format_line("info", attributes.info_to_attributes(font.info)))
    if font.common is not None:
        lines.append(format_line("common", attributes.common_to_attributes(font.common)))
    if font.pages is not None:
        for page_id, file in font.pages.items():
            lines.append(format_line("page", attributes.page_to_attributes(page_id, file)))
    if font.characters is not None:
        lines.append(f"chars count={len(font.characters)}")
        for code, char in font.characters.items():
            lines.append(format_line("char", attributes.character_to_attributes(code, char)))
    if font.kerning_pairs is not None:
        lines.append(f"kernings count={len(font.kerning_pairs)}")
        for pair, amount in font.kerning_pairs.items():
            lines.append(format_line("kerning", attributes.kerning_pair_to_attributes(pair, amount)))
    return "".join(line + "\n" for line in lines)
