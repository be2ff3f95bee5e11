"""Convert and inspect AngelCode .fnt bitmap fonts."""

from __future__ import annotations

import argparse
import logging
import sys

from fnttools.converter import ConvertRequest, convert
from fnttools.inspector import InspectRequest, inspect
from fnttools.models import FormatHint


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(prog="fnttools", description=__doc__)
    ap.add_argument("-v", "--verbose", action="store_true", help="log debug messages to stderr")
    commands = ap.add_subparsers(dest="command", required=True)

    cp = commands.add_parser("convert", help="change the format of .fnt bitmap fonts to binary, text or XML")
    cp.add_argument("format", help="the format to convert to: binary, text or xml")
    cp.add_argument("source", nargs="+", help="the bitmap font(s) to convert")
    cp.add_argument("-o", "--output", nargs="+", default=[], help="the name and location of the output file(s)")
    cp.add_argument("--overwrite", action="store_true", help="allow existing files to be overwritten")

    ip = commands.add_parser("inspect", help="inspect the properties of a .fnt bitmap font")
    ip.add_argument("source", help="the bitmap font to inspect")
    ip.add_argument("--all", action="store_true", help="display all blocks; not recommended for large fonts")
    ip.add_argument("--info", action="store_true", help="display the info block")
    ip.add_argument("--common", action="store_true", help="display the common block")
    ip.add_argument("--pages", action="store_true", help="display the pages block")
    ip.add_argument("-p", "--page", nargs="+", type=int, default=[], metavar="ID", help="display the given pages")
    ip.add_argument("--characters", action="store_true", help="display the characters block")
    ip.add_argument(
        "-c", "--character", nargs="+", type=int, default=[], metavar="ID", help="display the given characters"
    )
    ip.add_argument("--kerningpairs", action="store_true", help="display the kerning pairs block")
    ip.add_argument(
        "-k",
        "--kerningpair",
        nargs="+",
        type=int,
        default=[],
        metavar="ID",
        help="display the given kerning pairs, as consecutive first/second character IDs",
    )
    return ap


def run_convert(args) -> int:
    try:
        fmt = FormatHint.parse(args.format)
    except ValueError:
        choices = ", ".join(f.value for f in FormatHint)
        print(f'Unknown format "{args.format}"; expected one of {choices}. Aborting.')
        return 1
    return convert(ConvertRequest(sources=args.source, format=fmt, outputs=args.output, overwrite=args.overwrite))


def run_inspect(args) -> int:
    request = InspectRequest(
        source=args.source,
        info=args.all or args.info,
        common=args.all or args.common,
        pages=args.all or args.pages,
        characters=args.all or args.characters,
        kerning_pairs=args.all or args.kerningpairs,
        page_ids=args.page,
        character_ids=args.character,
        kerning_pair_ids=args.kerningpair,
    )
    return inspect(request)


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING, stream=sys.stderr)
    # Glyphs the terminal cannot encode are escaped instead of failing the report.
    if hasattr(sys.stdout, "reconfigure"):
        sys.stdout.reconfigure(errors="backslashreplace")
    if args.command == "convert":
        return run_convert(args)
    return run_inspect(args)


if __name__ == "__main__":  # pragma: no cover
    sys.exit(main())
