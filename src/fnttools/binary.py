# SPDX-License-Identifier: MIT
"""Read and write binary (version 3) BMFont files."""

import struct

from fnttools.models import BitmapFont, Character, Common, Info, KerningPair
from fnttools.util import asciz, get_bit, pack_bits, split_asciz

MAGIC = b"BMF"
VERSION = 3

BLOCK_INFO = 1
BLOCK_COMMON = 2
BLOCK_PAGES = 3
BLOCK_CHARS = 4
BLOCK_KERNING_PAIRS = 5

INFO_FORMAT = (
    "< "
    "h B B H B "  # font size, bit field, charset, stretchH, aa
    "B B B B "  # padding up, right, down, left
    "B B B"  # spacing horizontal, vertical, outline
)
COMMON_FORMAT = (
    "< "
    "H H H H H "  # lineHeight, base, scaleW, scaleH, pages
    "B B B B B"  # bit field, alpha, red, green, blue channel
)
CHAR_FORMAT = (
    "< "
    "I H H H H "  # id, x, y, width, height
    "h h h "  # xoffset, yoffset, xadvance
    "B B"  # page, channel
)
KERNING_FORMAT = "< I I h"  # first, second, amount

INFO_SIZE = struct.calcsize(INFO_FORMAT)
COMMON_SIZE = struct.calcsize(COMMON_FORMAT)
CHAR_SIZE = struct.calcsize(CHAR_FORMAT)
KERNING_SIZE = struct.calcsize(KERNING_FORMAT)


def string_encoding(unicode: bool) -> str:
    """Names are UTF-8 in unicode fonts and in the ANSI codepage otherwise."""
    return "utf-8" if unicode else "windows-1252"


def _read_info(block: bytes) -> Info:
    (
        size,
        bits,
        charset,
        stretch_h,
        aa,
        pad_up,
        pad_right,
        pad_down,
        pad_left,
        spacing_h,
        spacing_v,
        outline,
    ) = struct.unpack(INFO_FORMAT, block[:INFO_SIZE])
    return Info(
        face=asciz(block[INFO_SIZE:]).decode(string_encoding(get_bit(bits, 1))),
        size=size,
        smooth=get_bit(bits, 0),
        unicode=get_bit(bits, 1),
        italic=get_bit(bits, 2),
        bold=get_bit(bits, 3),
        fixed_height=get_bit(bits, 4),
        charset=charset,
        stretch_h=stretch_h,
        super_sampling=aa,
        padding=(pad_up, pad_right, pad_down, pad_left),
        spacing=(spacing_h, spacing_v),
        outline=outline,
    )


def _read_common(block: bytes) -> Common:
    (
        line_height,
        base,
        scale_w,
        scale_h,
        pages,
        bits,
        alpha,
        red,
        green,
        blue,
    ) = struct.unpack(COMMON_FORMAT, block[:COMMON_SIZE])
    return Common(
        line_height=line_height,
        base=base,
        scale_w=scale_w,
        scale_h=scale_h,
        pages=pages,
        packed=get_bit(bits, 7),
        alpha_channel=alpha,
        red_channel=red,
        green_channel=green,
        blue_channel=blue,
    )


def _read_chars(block: bytes) -> dict[int, Character]:
    if len(block) % CHAR_SIZE:
        raise ValueError(f"Characters block size {len(block)} is not a multiple of {CHAR_SIZE}")
    chars = {}
    for code, x, y, width, height, xoffset, yoffset, xadvance, page, channel in struct.iter_unpack(
        CHAR_FORMAT, block
    ):
        chars[code] = Character(
            x=x,
            y=y,
            width=width,
            height=height,
            xoffset=xoffset,
            yoffset=yoffset,
            xadvance=xadvance,
            page=page,
            channel=channel,
        )
    return chars


def _read_kerning_pairs(block: bytes) -> dict[KerningPair, int]:
    if len(block) % KERNING_SIZE:
        raise ValueError(f"Kerning pairs block size {len(block)} is not a multiple of {KERNING_SIZE}")
    return {KerningPair(first, second): amount for first, second, amount in struct.iter_unpack(KERNING_FORMAT, block)}


def bmf_bytes_to_font(data: bytes) -> BitmapFont:
    """Create a font document from the contents of a binary BMFont file."""
    if not data.startswith(MAGIC):
        raise ValueError("BMF signature not found")
    if len(data) < 4 or data[3] != VERSION:
        raise ValueError(f"Unsupported binary BMFont version {data[3] if len(data) > 3 else None}")

    font = BitmapFont()
    encoding = "utf-8"
    p = 4
    while p < len(data):
        block_type, size = struct.unpack("< B I", data[p : p + 5])
        block = data[p + 5 : p + 5 + size]
        if len(block) != size:
            raise ValueError(f"Block {block_type} overruns file boundaries")
        p = p + 5 + size
        if block_type == BLOCK_INFO:
            font.info = _read_info(block)
            encoding = string_encoding(font.info.unicode)
        elif block_type == BLOCK_COMMON:
            font.common = _read_common(block)
        elif block_type == BLOCK_PAGES:
            font.pages = {i: name.decode(encoding) for i, name in enumerate(split_asciz(block))}
        elif block_type == BLOCK_CHARS:
            font.characters = _read_chars(block)
        elif block_type == BLOCK_KERNING_PAIRS:
            font.kerning_pairs = _read_kerning_pairs(block)
        # other block types are skipped
    return font


def _block(block_type: int, payload: bytes) -> bytes:
    return struct.pack("< B I", block_type, len(payload)) + payload


def font_to_bmf_bytes(font: BitmapFont) -> bytes:
    """Generate the contents of a binary BMFont file, given a font document."""
    file = MAGIC + bytes([VERSION])
    encoding = string_encoding(font.info is None or font.info.unicode)

    if font.info is not None:
        info = font.info
        payload = struct.pack(
            INFO_FORMAT,
            info.size,
            pack_bits(info.smooth, info.unicode, info.italic, info.bold, info.fixed_height),
            info.charset,
            info.stretch_h,
            info.super_sampling,
            *info.padding,
            *info.spacing,
            info.outline,
        )
        file = file + _block(BLOCK_INFO, payload + info.face.encode(encoding) + b"\0")

    if font.common is not None:
        common = font.common
        payload = struct.pack(
            COMMON_FORMAT,
            common.line_height,
            common.base,
            common.scale_w,
            common.scale_h,
            common.pages,
            common.packed << 7,
            common.alpha_channel,
            common.red_channel,
            common.green_channel,
            common.blue_channel,
        )
        file = file + _block(BLOCK_COMMON, payload)

    if font.pages is not None:
        # Page IDs are implicit in the binary format.
        if sorted(font.pages) != list(range(len(font.pages))):
            raise ValueError("Binary format requires page IDs 0..n-1")
        payload = b"".join(font.pages[i].encode(encoding) + b"\0" for i in range(len(font.pages)))
        file = file + _block(BLOCK_PAGES, payload)

    if font.characters is not None:
        payload = b"".join(
            struct.pack(
                CHAR_FORMAT,
                code,
                char.x,
                char.y,
                char.width,
                char.height,
                char.xoffset,
                char.yoffset,
                char.xadvance,
                char.page,
                char.channel,
            )
            for code, char in font.characters.items()
        )
        file = file + _block(BLOCK_CHARS, payload)

    if font.kerning_pairs is not None:
        payload = b"".join(
            struct.pack(KERNING_FORMAT, pair.first, pair.second, amount) for pair, amount in font.kerning_pairs.items()
        )
        file = file + _block(BLOCK_KERNING_PAIRS, payload)

    return file
