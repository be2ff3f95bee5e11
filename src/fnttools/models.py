from __future__ import annotations

import dataclasses
import enum


class FormatHint(enum.Enum):
    BINARY = "binary"
    TEXT = "text"
    XML = "xml"

    @classmethod
    def parse(cls, name: str) -> FormatHint:
        try:
            return cls(name.lower())
        except ValueError:
            raise ValueError(f"Unknown format {name!r}") from None


@dataclasses.dataclass
class Info:
    face: str = ""
    size: int = 0
    bold: bool = False
    italic: bool = False
    charset: int = 0
    unicode: bool = False
    stretch_h: int = 100
    smooth: bool = False
    super_sampling: int = 1
    padding: tuple[int, int, int, int] = (0, 0, 0, 0)
    spacing: tuple[int, int] = (0, 0)
    outline: int = 0
    fixed_height: bool = False


@dataclasses.dataclass
class Common:
    line_height: int = 0
    base: int = 0
    scale_w: int = 0
    scale_h: int = 0
    pages: int = 0
    packed: bool = False
    alpha_channel: int = 0
    red_channel: int = 0
    green_channel: int = 0
    blue_channel: int = 0


@dataclasses.dataclass
class Character:
    x: int = 0
    y: int = 0
    width: int = 0
    height: int = 0
    xoffset: int = 0
    yoffset: int = 0
    xadvance: int = 0
    page: int = 0
    channel: int = 15


@dataclasses.dataclass(frozen=True)
class KerningPair:
    """Ordered pair of character codes; (a, b) and (b, a) are distinct keys."""

    first: int
    second: int


@dataclasses.dataclass
class BitmapFont:
    """
    An AngelCode bitmap font document.

    Every block is optional: `None` means the block is absent from the
    document, which is not the same thing as an empty block.
    """

    info: Info | None = None
    common: Common | None = None
    pages: dict[int, str] | None = None
    characters: dict[int, Character] | None = None
    kerning_pairs: dict[KerningPair, int] | None = None
