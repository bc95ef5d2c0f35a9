"""Entry point for layoutswap.

Usage:
    layoutswap qwerty                  # → йцукен
    echo йцукен | layoutswap           # → qwerty, one line at a time
    layoutswap --list                  # show built-in layouts
    ls /usr/share/applications | layoutswap --filter dsv
"""
import sys
import logging
import argparse

from layoutswap.config import Config
from layoutswap.layouts import UnknownLayoutError, available_layouts, get_layout
from layoutswap.search import filter_names

logger = logging.getLogger(__name__)


def setup_logging(debug: bool = False):
    level = logging.DEBUG if debug else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(asctime)s [%(name)s] %(levelname)s: %(message)s",
        datefmt="%H:%M:%S",
    )


def build_parser():
    parser = argparse.ArgumentParser(
        prog="layoutswap",
        description="Retype text as if it had been typed on another keyboard layout",
    )
    parser.add_argument("text", nargs="*",
                        help="Text to convert (reads stdin when omitted)")
    parser.add_argument("--layout", "-l",
                        help="Layout to use (default from config)")
    parser.add_argument("--debug", action="store_true",
                        help="Enable debug logging")
    group = parser.add_mutually_exclusive_group()
    group.add_argument("--list", action="store_true",
                       help="List available layouts and exit")
    group.add_argument("--filter", metavar="QUERY",
                       help="Print stdin lines matching QUERY as typed or converted")
    return parser


def run_transliterate(mapper, text, stdin, stdout):
    if text:
        print(mapper.transliterate(" ".join(text)), file=stdout)
        return
    for line in stdin:
        print(mapper.transliterate(line.rstrip("\n")), file=stdout)


def run_filter(mapper, query, stdin, stdout):
    names = [line.rstrip("\n") for line in stdin if line.strip()]
    found = filter_names(names, query, mapper)
    logger.debug("Filter %r matched %d of %d names", query, len(found), len(names))
    for name in found:
        print(name, file=stdout)


def main(argv=None, stdin=None, stdout=None) -> int:
    stdin = stdin if stdin is not None else sys.stdin
    stdout = stdout if stdout is not None else sys.stdout

    parser = build_parser()
    args = parser.parse_args(argv)
    if args.text and (args.list or args.filter is not None):
        parser.error("TEXT cannot be combined with --list or --filter")

    config = Config()
    setup_logging(args.debug or config.debug_logging)

    if args.list:
        for name in available_layouts():
            print(name, file=stdout)
        return 0

    layout_name = args.layout or config.layout
    try:
        mapper = get_layout(layout_name)
    except UnknownLayoutError as e:
        parser.error(str(e))
    logger.debug("Using layout %s (%d keys)", layout_name, len(mapper))

    if args.filter is not None:
        run_filter(mapper, args.filter, stdin, stdout)
    else:
        run_transliterate(mapper, args.text, stdin, stdout)
    return 0


if __name__ == "__main__":
    sys.exit(main())
