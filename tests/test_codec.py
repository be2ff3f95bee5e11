import pathlib

import pytest
from fnttools.binary import bmf_bytes_to_font, font_to_bmf_bytes
from fnttools.codec import detect_format, font_to_bytes, load_font, parse_font, save_font
from fnttools.models import BitmapFont, Character, Common, FormatHint, Info, KerningPair
from fnttools.text import font_to_text, parse_line, text_to_font
from fnttools.xmlformat import xml_bytes_to_font

fonts_path = pathlib.Path(__file__).parent.parent / "fonts"
test_font_path = fonts_path / "testfont.fnt"


def test_load_text_font():
    font = load_font(test_font_path)
    assert font.info.face == "Test Sans"
    assert font.info.unicode
    assert font.info.spacing == (1, 1)
    assert font.common.pages == 2
    assert font.pages == {0: "testfont_0.png", 1: "testfont_1.png"}
    assert list(font.characters) == [10, 32, 65, 66, 67]
    assert font.characters[66] == Character(x=13, y=2, width=8, height=11, xoffset=1, yoffset=3, xadvance=9)
    assert font.kerning_pairs[KerningPair(65, 66)] == -1
    assert font.kerning_pairs[KerningPair(66, 65)] == 1
    assert KerningPair(67, 66) not in font.kerning_pairs


sparse_font = BitmapFont(common=Common(line_height=5, base=4), characters={65: Character(width=3, xadvance=4)})


@pytest.mark.parametrize("fmt", list(FormatHint), ids=lambda f: f.value)
@pytest.mark.parametrize("font", [load_font(test_font_path), sparse_font], ids=["full", "sparse"])
def test_roundtrip(tmp_path, font, fmt):
    path = tmp_path / "out.fnt"
    save_font(font, path, fmt)
    data = path.read_bytes()
    assert detect_format(data) == fmt
    assert parse_font(data) == font


def test_absent_blocks_stay_absent():
    font = parse_font(font_to_bytes(sparse_font, FormatHint.XML))
    assert font.info is None
    assert font.pages is None
    assert font.kerning_pairs is None


@pytest.mark.parametrize(
    ("data", "fmt"),
    [
        (b"BMF\x03\x01", FormatHint.BINARY),
        (b'<?xml version="1.0"?><font/>', FormatHint.XML),
        (b'\xef\xbb\xbf\n  <font><info face="x"/></font>', FormatHint.XML),
        (b'info face="x" size=12\n', FormatHint.TEXT),
    ],
)
def test_detect_format(data, fmt):
    assert detect_format(data) == fmt


def test_parse_line_quoted_values():
    tag, attrs = parse_line('page id=3 file="my page.png"')
    assert tag == "page"
    assert attrs == {"id": "3", "file": "my page.png"}


def test_text_charset_names():
    font = text_to_font('info face="x" charset="RUSSIAN" unicode=0\n')
    assert font.info.charset == 204
    assert 'charset="RUSSIAN"' in font_to_text(font)


def test_text_empty_chars_block():
    font = text_to_font("chars count=0\n")
    assert font.characters == {}
    assert font.pages is None


def test_text_duplicate_character():
    with pytest.raises(ValueError, match="Line 2: Duplicate character 65"):
        text_to_font("char id=65 width=1\nchar id=65 width=2\n")


def test_text_bad_integer():
    with pytest.raises(ValueError, match="not an integer"):
        text_to_font("common lineHeight=tall\n")


def test_binary_bad_signature():
    with pytest.raises(ValueError, match="BMF signature"):
        bmf_bytes_to_font(b"XYZ\x03")


def test_binary_unsupported_version():
    with pytest.raises(ValueError, match="version"):
        bmf_bytes_to_font(b"BMF\x02")


def test_binary_truncated_block():
    data = font_to_bmf_bytes(BitmapFont(info=Info(face="Truncated")))
    with pytest.raises(ValueError, match="overruns"):
        bmf_bytes_to_font(data[:-3])


def test_binary_requires_sequential_pages():
    with pytest.raises(ValueError, match="page IDs"):
        font_to_bmf_bytes(BitmapFont(pages={0: "a.png", 2: "c.png"}))


def test_binary_info_bits():
    info = Info(face="Bits", bold=True, fixed_height=True, charset=128, padding=(1, 2, 3, 4))
    assert bmf_bytes_to_font(font_to_bmf_bytes(BitmapFont(info=info))).info == info


def test_xml_wrong_root():
    with pytest.raises(ValueError, match="<font>"):
        xml_bytes_to_font(b"<bitmap/>")


def test_xml_malformed():
    with pytest.raises(ValueError, match="Malformed XML"):
        xml_bytes_to_font(b"<font><info></font>")


def test_save_failure_leaves_no_file(tmp_path):
    path = tmp_path / "out.fnt"
    with pytest.raises(ValueError):
        save_font(BitmapFont(pages={5: "a.png"}), path, FormatHint.BINARY)
    assert not path.exists()


def test_binary_ansi_names():
    font = BitmapFont(info=Info(face="Café", charset=0, unicode=False), pages={0: "café_0.png"})
    data = font_to_bmf_bytes(font)
    assert b"Caf\xe9\0" in data
    assert bmf_bytes_to_font(data) == font


def test_binary_unicode_names():
    font = BitmapFont(info=Info(face="Café", unicode=True), pages={0: "页_0.png"})
    data = font_to_bmf_bytes(font)
    assert "Café".encode("utf-8") in data
    assert bmf_bytes_to_font(data) == font


def test_unicode_font_keeps_charset_byte():
    font = BitmapFont(info=Info(face="x", unicode=True, charset=204))
    text = font_to_text(font)
    assert 'charset="RUSSIAN"' in text
    assert bmf_bytes_to_font(font_to_bmf_bytes(text_to_font(text))) == font


def test_unicode_font_without_charset():
    assert 'charset=""' in font_to_text(BitmapFont(info=Info(face="x", unicode=True)))
