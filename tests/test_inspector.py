import pathlib

import pytest
from fnttools import inspector
from fnttools.inspector import InspectRequest, inspect, parse_kerning_keys
from fnttools.models import KerningPair

fonts_path = pathlib.Path(__file__).parent.parent / "fonts"
test_font = str(fonts_path / "testfont.fnt")


def run(capsys, **kwargs):
    source = kwargs.pop("source", test_font)
    code = inspect(InspectRequest(source=source, **kwargs))
    return code, capsys.readouterr().out


def test_parse_kerning_keys():
    assert parse_kerning_keys([65, 66, 66, 65]) == [KerningPair(65, 66), KerningPair(66, 65)]
    with pytest.raises(ValueError):
        parse_kerning_keys([65])


def test_missing_source(capsys, tmp_path):
    code, out = run(capsys, source=str(tmp_path / "zxcv.fnt"), info=True)
    assert code == 1
    assert "was not found. Aborting." in out
    assert "Block" not in out


def test_odd_kerning_ids_do_not_load(capsys, monkeypatch):
    def fail(path):
        raise AssertionError("font should not be loaded")

    monkeypatch.setattr(inspector, "load_font", fail)
    code, out = run(capsys, kerning_pair_ids=[65])
    assert code == 1
    assert "Aborting." in out


def test_load_failure(capsys, tmp_path):
    broken = tmp_path / "broken.fnt"
    broken.write_bytes(b"<font>")
    code, out = run(capsys, source=str(broken), info=True)
    assert code == 1
    assert f'Failed to load bitmap font "{broken}". Aborting.' in out
    assert "Info Block:" not in out


def test_nothing_selected(capsys):
    assert run(capsys) == (0, "")


def test_all_blocks_in_order(capsys):
    code, out = run(capsys, info=True, common=True, pages=True, characters=True, kerning_pairs=True)
    assert code == 0
    headers = ["Info Block:", "Common Block:", "Pages Block:", "Characters Block:", "Kerning Pairs Block:"]
    positions = [out.index(header) for header in headers]
    assert positions == sorted(positions)
    assert "face: Test Sans" in out
    assert "line_height: 18" in out
    assert "Selected" not in out


def test_dump_then_lookup_repeats_page(capsys):
    code, out = run(capsys, pages=True, page_ids=[0])
    assert code == 0
    assert out.startswith("Pages Block:\n")
    assert out.count("id: 0\nfile: testfont_0.png\n") == 2
    assert out.count("id: 1\n") == 1


def test_selected_pages(capsys):
    code, out = run(capsys, page_ids=[1, 7])
    assert code == 0
    assert out.startswith("Selected Pages:\n")
    assert "id: 0\n" not in out
    assert "file: testfont_1.png" in out
    assert "Page 7 does not exist." in out


def test_missing_character(capsys):
    code, out = run(capsys, character_ids=[9999])
    assert code == 0
    assert out.startswith("Selected Characters:\n")
    assert out.count("does not exist") == 1
    assert "Character 9999 does not exist." in out


@pytest.mark.parametrize(
    ("code", "label"),
    [
        (65, "A"),
        (10, "Control"),
        (32, "Whitespace"),
    ],
)
def test_character_labels(capsys, code, label):
    _, out = run(capsys, character_ids=[code])
    assert f"id: {code}\ncharacter: {label}\nx: " in out


def test_characters_block_labels_every_character(capsys):
    _, out = run(capsys, characters=True)
    assert out.count("character: ") == 5
    assert "character: C\n" in out


def test_kerning_pairs(capsys):
    code, out = run(capsys, kerning_pair_ids=[65, 66, 66, 65, 67, 66])
    assert code == 0
    assert out.startswith("Selected Kerning Pairs:\n")
    assert "first: 65\nsecond: 66\namount: -1\n" in out
    assert "first: 66\nsecond: 65\namount: 1\n" in out
    assert "Kerning pair (67, 66) does not exist." in out


def test_absent_blocks(capsys, tmp_path):
    sparse = tmp_path / "sparse.fnt"
    sparse.write_text("common lineHeight=10 base=8\n")
    code, out = run(capsys, source=str(sparse), info=True, pages=True, page_ids=[0], character_ids=[65])
    assert code == 0
    assert "Info Block:\nface: \nsize: 0\n" in out
    assert "Pages Block:\nPage 0 does not exist.\n" in out
    assert "Character 65 does not exist." in out


def test_missing_record_closes_section(capsys):
    code, out = run(capsys, page_ids=[5], character_ids=[65])
    assert code == 0
    assert out.startswith("Selected Pages:\nPage 5 does not exist.\n\nSelected Characters:\nid: 65\n")
    assert out.endswith("channel: 15\n\n")


def test_empty_block_closes_section(capsys, tmp_path):
    empty = tmp_path / "empty.fnt"
    empty.write_text("chars count=0\n")
    code, out = run(capsys, source=str(empty), info=True, characters=True, kerning_pairs=True)
    assert code == 0
    assert out.endswith("fixed_height: False\n\nCharacters Block:\n\nKerning Pairs Block:\n\n")
