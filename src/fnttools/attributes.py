"""
Map font records to and from the ``key=value`` attributes used by the text and XML formats.

Both formats spell a record the same way, e.g.::

    char id=65 x=0 y=0 width=10 height=12 xoffset=0 yoffset=2 xadvance=11 page=0 chnl=15

so the conversion lives here and the format modules only deal with the framing.
"""

from __future__ import annotations

from fnttools.models import Character, Common, Info, KerningPair
from fnttools.util import from_bool, to_bool

# Windows character set names as written by BMFont.
CHARSETS = {
    "ANSI": 0,
    "DEFAULT": 1,
    "SYMBOL": 2,
    "MAC": 77,
    "SHIFTJIS": 128,
    "HANGUL": 129,
    "JOHAB": 130,
    "GB2312": 134,
    "CHINESEBIG5": 136,
    "GREEK": 161,
    "TURKISH": 162,
    "VIETNAMESE": 163,
    "HEBREW": 177,
    "ARABIC": 178,
    "BALTIC": 186,
    "RUSSIAN": 204,
    "THAI": 222,
    "EASTEUROPE": 238,
    "OEM": 255,
}
CHARSET_NAMES = {value: name for name, value in CHARSETS.items()}


def _int(attrs: dict[str, str], key: str, default: int = 0) -> int:
    value = attrs.get(key)
    if value is None or value == "":
        return default
    try:
        return int(value)
    except ValueError:
        raise ValueError(f"Attribute {key}={value!r} is not an integer") from None


def _ints(attrs: dict[str, str], key: str, default: tuple) -> tuple:
    value = attrs.get(key)
    if not value:
        return default
    parts = value.split(",")
    if len(parts) != len(default):
        raise ValueError(f"Attribute {key}={value!r} should have {len(default)} components")
    try:
        return tuple(int(part) for part in parts)
    except ValueError:
        raise ValueError(f"Attribute {key}={value!r} is not a list of integers") from None


def _join(values) -> str:
    return ",".join(str(v) for v in values)


def parse_charset(value: str) -> int:
    value = value.strip()
    if not value:
        return 0
    if value.isdigit():
        return int(value)
    try:
        return CHARSETS[value.upper()]
    except KeyError:
        raise ValueError(f"Unknown character set {value!r}") from None


def format_charset(info: Info) -> str:
    # Unicode fonts leave the charset empty unless a byte was actually set.
    if info.unicode and info.charset == 0:
        return ""
    return CHARSET_NAMES.get(info.charset, str(info.charset))


def info_from_attributes(attrs: dict[str, str]) -> Info:
    default = Info()
    return Info(
        face=attrs.get("face", default.face),
        size=_int(attrs, "size"),
        bold=to_bool(attrs.get("bold", "")),
        italic=to_bool(attrs.get("italic", "")),
        charset=parse_charset(attrs.get("charset", "")),
        unicode=to_bool(attrs.get("unicode", "")),
        stretch_h=_int(attrs, "stretchH", default.stretch_h),
        smooth=to_bool(attrs.get("smooth", "")),
        super_sampling=_int(attrs, "aa", default.super_sampling),
        padding=_ints(attrs, "padding", default.padding),
        spacing=_ints(attrs, "spacing", default.spacing),
        outline=_int(attrs, "outline"),
        fixed_height=to_bool(attrs.get("fixedHeight", "")),
    )


def info_to_attributes(info: Info) -> dict[str, str]:
    attrs = {
        "face": info.face,
        "size": str(info.size),
        "bold": from_bool(info.bold),
        "italic": from_bool(info.italic),
        "charset": format_charset(info),
        "unicode": from_bool(info.unicode),
        "stretchH": str(info.stretch_h),
        "smooth": from_bool(info.smooth),
        "aa": str(info.super_sampling),
        "padding": _join(info.padding),
        "spacing": _join(info.spacing),
        "outline": str(info.outline),
    }
    if info.fixed_height:
        attrs["fixedHeight"] = "1"
    return attrs


def common_from_attributes(attrs: dict[str, str]) -> Common:
    return Common(
        line_height=_int(attrs, "lineHeight"),
        base=_int(attrs, "base"),
        scale_w=_int(attrs, "scaleW"),
        scale_h=_int(attrs, "scaleH"),
        pages=_int(attrs, "pages"),
        packed=to_bool(attrs.get("packed", "")),
        alpha_channel=_int(attrs, "alphaChnl"),
        red_channel=_int(attrs, "redChnl"),
        green_channel=_int(attrs, "greenChnl"),
        blue_channel=_int(attrs, "blueChnl"),
    )


def common_to_attributes(common: Common) -> dict[str, str]:
    return {
        "lineHeight": str(common.line_height),
        "base": str(common.base),
        "scaleW": str(common.scale_w),
        "scaleH": str(common.scale_h),
        "pages": str(common.pages),
        "packed": from_bool(common.packed),
        "alphaChnl": str(common.alpha_channel),
        "redChnl": str(common.red_channel),
        "greenChnl": str(common.green_channel),
        "blueChnl": str(common.blue_channel),
    }


def page_from_attributes(attrs: dict[str, str]) -> tuple[int, str]:
    if "id" not in attrs:
        raise ValueError("Page without an id")
    return _int(attrs, "id"), attrs.get("file", "")


def page_to_attributes(page_id: int, file: str) -> dict[str, str]:
    return {"id": str(page_id), "file": file}


def character_from_attributes(attrs: dict[str, str]) -> tuple[int, Character]:
    if "id" not in attrs:
        raise ValueError("Character without an id")
    return _int(attrs, "id"), Character(
        x=_int(attrs, "x"),
        y=_int(attrs, "y"),
        width=_int(attrs, "width"),
        height=_int(attrs, "height"),
        xoffset=_int(attrs, "xoffset"),
        yoffset=_int(attrs, "yoffset"),
        xadvance=_int(attrs, "xadvance"),
        page=_int(attrs, "page"),
        channel=_int(attrs, "chnl", Character().channel),
    )


def character_to_attributes(code: int, char: Character) -> dict[str, str]:
    return {
        "id": str(code),
        "x": str(char.x),
        "y": str(char.y),
        "width": str(char.width),
        "height": str(char.height),
        "xoffset": str(char.xoffset),
        "yoffset": str(char.yoffset),
        "xadvance": str(char.xadvance),
        "page": str(char.page),
        "chnl": str(char.channel),
    }


def kerning_pair_from_attributes(attrs: dict[str, str]) -> tuple[KerningPair, int]:
    if "first" not in attrs or "second" not in attrs:
        raise ValueError("Kerning pair without both characters")
    return KerningPair(_int(attrs, "first"), _int(attrs, "second")), _int(attrs, "amount")


def kerning_pair_to_attributes(pair: KerningPair, amount: int) -> dict[str, str]:
    return {"first": str(pair.first), "second": str(pair.second), "amount": str(amount)}
