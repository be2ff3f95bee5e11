from __future__ import annotations

import logging
import os

from fnttools.binary import MAGIC, bmf_bytes_to_font, font_to_bmf_bytes
from fnttools.models import BitmapFont, FormatHint
from fnttools.text import font_to_text, text_to_font
from fnttools.xmlformat import font_to_xml_bytes, xml_bytes_to_font

logger = logging.getLogger(__name__)


def detect_format(data: bytes) -> FormatHint:
    if data.startswith(MAGIC):
        return FormatHint.BINARY
    if data.lstrip(b"\xef\xbb\xbf \t\r\n").startswith(b"<"):
        return FormatHint.XML
    return FormatHint.TEXT


def parse_font(data: bytes) -> BitmapFont:
    fmt = detect_format(data)
    logger.debug("Parsing %d bytes as %s", len(data), fmt.value)
    if fmt is FormatHint.BINARY:
        return bmf_bytes_to_font(data)
    if fmt is FormatHint.XML:
        return xml_bytes_to_font(data)
    try:
        text = data.decode("utf-8-sig")
    except UnicodeDecodeError as exc:
        raise ValueError(f"Text font is not valid UTF-8: {exc}") from exc
    return text_to_font(text)


def font_to_bytes(font: BitmapFont, fmt: FormatHint) -> bytes:
    if fmt is FormatHint.BINARY:
        return font_to_bmf_bytes(font)
    if fmt is FormatHint.XML:
        return font_to_xml_bytes(font)
    if fmt is FormatHint.TEXT:
        return font_to_text(font).encode("utf-8")
    raise ValueError(f"Unsupported format {fmt!r}")


def load_font(path: str | os.PathLike) -> BitmapFont:
    with open(path, "rb") as fp:
        return parse_font(fp.read())


def save_font(font: BitmapFont, path: str | os.PathLike, fmt: FormatHint) -> None:
    # Nothing is created on disk if serialization fails.
    data = font_to_bytes(font, fmt)
    logger.debug("Writing %d bytes of %s to %s", len(data), fmt.value, path)
    with open(path, "wb") as fp:
        fp.write(data)
