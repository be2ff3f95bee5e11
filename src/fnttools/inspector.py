"""Print selected blocks and records of a bitmap font."""

from __future__ import annotations

import dataclasses
import logging
import os
import traceback
from collections.abc import Callable, Iterable
from typing import TextIO

from fnttools.codec import load_font
from fnttools.models import BitmapFont, Character, Common, Info, KerningPair
from fnttools.render import character_label, render_character, render_common, render_info, render_kerning_pair

logger = logging.getLogger(__name__)


@dataclasses.dataclass(frozen=True)
class InspectRequest:
    source: str
    info: bool = False
    common: bool = False
    pages: bool = False
    characters: bool = False
    kerning_pairs: bool = False
    page_ids: list[int] = dataclasses.field(default_factory=list)
    character_ids: list[int] = dataclasses.field(default_factory=list)
    # Flat list, read as consecutive (first, second) pairs.
    kerning_pair_ids: list[int] = dataclasses.field(default_factory=list)


def parse_kerning_keys(ids: list[int]) -> list[KerningPair]:
    if len(ids) % 2:
        raise ValueError(f"Kerning pairs need an even number of IDs, got {len(ids)}")
    return [KerningPair(ids[i], ids[i + 1]) for i in range(0, len(ids), 2)]


def _write(out: TextIO | None, lines: Iterable[str]) -> None:
    for line in lines:
        print(line, file=out)


def print_page(page_id: int, file: str, out: TextIO | None = None) -> None:
    _write(out, [f"id: {page_id}", f"file: {file}", ""])


def print_character(code: int, char: Character, out: TextIO | None = None) -> None:
    _write(out, [f"id: {code}", f"character: {character_label(code)}", *render_character(char), ""])


def print_kerning_pair(pair: KerningPair, amount: int, out: TextIO | None = None) -> None:
    _write(out, [*render_kerning_pair(pair), f"amount: {amount}", ""])


def _print_block(
    out: TextIO | None,
    name: str,
    dump: bool,
    entries: dict | None,
    keys: list,
    print_entry: Callable,
    describe_missing: Callable[[object], str],
) -> None:
    """
    Print one collection block.

    With `dump` set, every entry is printed, followed by the looked-up `keys`
    (which may repeat entries already shown). Without it, only `keys` are
    printed under a "Selected" header. With neither, nothing is printed.
    Every entry, found or missing, ends with a blank line; so does an empty section.
    """
    if not dump and not keys:
        return
    logger.debug("Printing %s (dump=%s, %d keys)", name, dump, len(keys))
    print(f"{name} Block:" if dump else f"Selected {name}:", file=out)
    entries = entries or {}
    if dump:
        for key, value in entries.items():
            print_entry(key, value, out)
    for key in keys:
        if key in entries:
            print_entry(key, entries[key], out)
        else:
            _write(out, [describe_missing(key), ""])
    if not keys and not entries:
        print(file=out)


def print_report(font: BitmapFont, request: InspectRequest, kerning_keys: list[KerningPair], out: TextIO | None = None):
    if request.info:
        _write(out, ["Info Block:", *render_info(font.info or Info()), ""])
    if request.common:
        _write(out, ["Common Block:", *render_common(font.common or Common()), ""])
    _print_block(
        out,
        "Pages",
        request.pages,
        font.pages,
        request.page_ids,
        print_page,
        lambda page_id: f"Page {page_id} does not exist.",
    )
    _print_block(
        out,
        "Characters",
        request.characters,
        font.characters,
        request.character_ids,
        print_character,
        lambda code: f"Character {code} does not exist.",
    )
    _print_block(
        out,
        "Kerning Pairs",
        request.kerning_pairs,
        font.kerning_pairs,
        kerning_keys,
        print_kerning_pair,
        lambda pair: f"Kerning pair ({pair.first}, {pair.second}) does not exist.",
    )


def inspect(request: InspectRequest, out: TextIO | None = None) -> int:
    """Print the blocks and records selected by `request`; return the process exit code."""
    if not os.path.isfile(request.source):
        print(f'Source file "{request.source}" was not found. Aborting.', file=out)
        return 1
    try:
        kerning_keys = parse_kerning_keys(request.kerning_pair_ids)
    except ValueError as exc:
        print(f"{exc}. Aborting.", file=out)
        return 1

    try:
        font = load_font(request.source)
    except Exception:
        print(f'Failed to load bitmap font "{request.source}". Aborting.', file=out)
        print(traceback.format_exc(), end="", file=out)
        return 1

    print_report(font, request, kerning_keys, out)
    return 0
