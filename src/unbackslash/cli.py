from __future__ import annotations

import argparse
import io
import logging
import sys
from typing import Iterable, Iterator, List

from unbackslash.decoder import unescape
from unbackslash.log import LOG_LEVELS, setup_logging

logger = logging.getLogger(__name__)


def main(argv: List[str] | None = None) -> None:
    parser = argparse.ArgumentParser(
        prog="unbackslash",
        description="Decode strings written with literal backslash escapes",
    )
    parser.add_argument(
        "strings",
        nargs="*",
        metavar="STRING",
        help="Escaped strings to decode (default: one per line from stdin)",
    )
    parser.add_argument(
        "-0",
        "--null",
        action="store_true",
        help="Terminate each decoded string with NUL instead of a newline",
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=LOG_LEVELS,
        help="Set the logging level (default: WARNING)",
    )

    args = parser.parse_args(argv)
    setup_logging(args.log_level)
    _pass_through_undecodable_bytes()

    inputs: Iterable[str] = args.strings if args.strings else _stdin_lines()
    terminator = "\0" if args.null else "\n"
    sys.exit(decode_command(inputs, terminator))


def decode_command(inputs: Iterable[str], terminator: str = "\n") -> int:
    decoded_count = 0
    rejected = 0
    for line in inputs:
        decoded = unescape(line)
        if decoded is None:
            rejected += 1
            print(f"unbackslash: invalid escaped literal: {line}", file=sys.stderr)
            continue
        decoded_count += 1
        sys.stdout.write(decoded + terminator)

    sys.stdout.flush()
    logger.info("Decoded %d input(s), rejected %d.", decoded_count, rejected)
    return 1 if rejected else 0


def _stdin_lines() -> Iterator[str]:
    for line in sys.stdin:
        yield line.removesuffix("\n").removesuffix("\r")


def _pass_through_undecodable_bytes() -> None:
    # bytes that are not valid in the locale encoding come through argv as lone
    # surrogates; surrogateescape writes them back out unchanged
    for stream in (sys.stdin, sys.stdout):
        if isinstance(stream, io.TextIOWrapper):
            stream.reconfigure(errors="surrogateescape")


if __name__ == "__main__":
    main()
