"""Read and write XML BMFont files."""

from __future__ import annotations

import xml.etree.ElementTree as ET

from fnttools import attributes
from fnttools.models import BitmapFont
from fnttools.util import add_unique


def xml_bytes_to_font(data: bytes) -> BitmapFont:
    """Create a font document from the contents of an XML BMFont file."""
    try:
        root = ET.fromstring(data)
    except ET.ParseError as exc:
        raise ValueError(f"Malformed XML: {exc}") from exc
    if root.tag != "font":
        raise ValueError(f"Expected a <font> root element, found <{root.tag}>")

    font = BitmapFont()
    info = root.find("info")
    if info is not None:
        font.info = attributes.info_from_attributes(dict(info.attrib))
    common = root.find("common")
    if common is not None:
        font.common = attributes.common_from_attributes(dict(common.attrib))
    pages = root.find("pages")
    if pages is not None:
        font.pages = {}
        for el in pages.iter("page"):
            add_unique(font.pages, *attributes.page_from_attributes(dict(el.attrib)), "page")
    chars = root.find("chars")
    if chars is not None:
        font.characters = {}
        for el in chars.iter("char"):
            add_unique(font.characters, *attributes.character_from_attributes(dict(el.attrib)), "character")
    kernings = root.find("kernings")
    if kernings is not None:
        font.kerning_pairs = {}
        for el in kernings.iter("kerning"):
            add_unique(font.kerning_pairs, *attributes.kerning_pair_from_attributes(dict(el.attrib)), "kerning pair")
    return font


def font_to_xml_bytes(font: BitmapFont) -> bytes:
    """Generate the contents of an XML BMFont file, given a font document."""
    root = ET.Element("font")
    if font.info is not None:
        ET.SubElement(root, "info", attributes.info_to_attributes(font.info))
    if font.common is not None:
        ET.SubElement(root, "common", attributes.common_to_attributes(font.common))
    if font.pages is not None:
        pages = ET.SubElement(root, "pages")
        for page_id, file in font.pages.items():
            ET.SubElement(pages, "page", attributes.page_to_attributes(page_id, file))
    if font.characters is not None:
        chars = ET.SubElement(root, "chars", count=str(len(font.characters)))
        for code, char in font.characters.items():
            ET.SubElement(chars, "char", attributes.character_to_attributes(code, char))
    if font.kerning_pairs is not None:
        kernings = ET.SubElement(root, "kernings", count=str(len(font.kerning_pairs)))
        for pair, amount in font.kerning_pairs.items():
            ET.SubElement(kernings, "kerning", attributes.kerning_pair_to_attributes(pair, amount))
    ET.indent(root)
    return ET.tostring(root, encoding="utf-8", xml_declaration=True) + b"\n"
