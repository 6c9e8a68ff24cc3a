"""
Encode and decode short codes from the command line.

Usage:
  shorturl encode 10000
  shorturl --secondary --offset 10000 decode dlu
  shorturl --secondary --offset 10000 roundtrip 42
"""

import argparse
import logging
import sys

from shorturl.core.config import settings
from shorturl.core.errors import ShortCodeError
from shorturl.core.logging_config import configure_logging
from shorturl.services.codec import build_codec

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="shorturl",
        description="Map integers to short codes and back",
    )
    parser.add_argument("--alphabet", help="primary alphabet, one symbol per character")
    parser.add_argument(
        "--secondary",
        action="store_true",
        default=None,
        help="use the shuffled secondary alphabet",
    )
    parser.add_argument("--offset", type=int, help="added before encoding, subtracted after decoding")
    parser.add_argument("-v", "--verbose", action="store_true", help="log codec configuration")

    sub = parser.add_subparsers(dest="command", required=True)

    p_encode = sub.add_parser("encode", help="print the short code for an integer")
    p_encode.add_argument("value", type=int)

    p_decode = sub.add_parser("decode", help="print the integer for a short code")
    p_decode.add_argument("short_code")

    p_roundtrip = sub.add_parser("roundtrip", help="encode an integer, then decode the result")
    p_roundtrip.add_argument("value", type=int)

    return parser


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    configure_logging(logging.DEBUG if args.verbose else logging.WARNING)

    try:
        codec = build_codec(
            settings,
            alphabet=args.alphabet,
            use_secondary=args.secondary,
            offset=args.offset,
        )
        logger.debug("Using %r", codec)

        if args.command == "encode":
            print(codec.encode(args.value))
        elif args.command == "decode":
            print(codec.decode(args.short_code))
        else:
            short_code = codec.encode(args.value)
            print(f"SHORTENED: {short_code}")
            print(f"DECODED: {codec.decode(short_code)}")
    except ShortCodeError as e:
        print(f"error: {e}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
