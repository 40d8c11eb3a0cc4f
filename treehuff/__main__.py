"""
Command line front end.

Usage:
    treehuff compress FILE            # writes FILE.hf
    treehuff decompress FILE.hf       # writes FILE
    treehuff -v compress FILE -o OUT  # per-call totals on stderr, -vv per symbol
"""

import argparse
import logging
import sys
from pathlib import Path

from .compression import Compressor
from .config_loader import load_config
from .errors import HuffError
from .huffman import DEBUG_HIGH, DEBUG_LOW

log = logging.getLogger("treehuff")


def default_output(src: Path, command: str, suffix: str) -> Path:
    if command == "compress":
        return src.with_name(src.name + suffix)
    if src.name.endswith(suffix) and len(src.name) > len(suffix):
        return src.with_name(src.name[:-len(suffix)])
    return src.with_name(src.name + ".out")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="treehuff", description="Huffman compress or decompress a file.")
    parser.add_argument("--config", help="YAML config file (default: $TREEHUFF_CONFIG or the packaged one)")
    parser.add_argument(
        "-v", "--verbose", action="count", default=0,
        help="trace to stderr; once for totals, twice for per-symbol counts and codes"
    )
    parser.add_argument("command", choices=["compress", "decompress"])
    parser.add_argument("src", type=Path)
    parser.add_argument("-o", "--output", type=Path, help="output file (default derived from src)")
    return parser


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    config = load_config(args.config)

    debug = config["huffman"]["debug_level"]
    if args.verbose:
        debug = max(debug, DEBUG_HIGH if args.verbose > 1 else DEBUG_LOW)
    logging.basicConfig(
        level=logging.DEBUG if debug else config["logging"]["level"],
        format=config["logging"]["format"],
    )

    dst = args.output or default_output(args.src, args.command, config["huffman"]["suffix"])
    compressor = Compressor(debug=debug, logger=log)
    run = compressor.compress_file if args.command == "compress" else compressor.decompress_file
    try:
        bits_read, bits_written = run(args.src, dst)
    except HuffError as exc:
        # a partial output file is never trustworthy
        dst.unlink(missing_ok=True)
        print(f"treehuff: {args.command} failed on {args.src}: {exc}", file=sys.stderr)
        return 1
    log.info("%s %s -> %s (%d bits read, %d bits written)", args.command, args.src, dst, bits_read, bits_written)
    return 0


if __name__ == "__main__":
    sys.exit(main())
