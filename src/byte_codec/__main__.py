"""
Byte codec CLI entry point.

Decode a hex string to raw bytes and print them as Base64.

Usage::

    python -m byte_codec 49276d206b696c6c696e6720796f757220627261696e
    python -m byte_codec --pad 4927

Options:
    --pad / --no-pad   Complete a trailing partial Base64 group with '=' (default from
                       BYTE_CODEC_B64_PADDING, 'strict' unless set)
    -v, --verbose      Enable debug logging
    --no-color         Disable colored logging output
"""

from __future__ import annotations

import argparse
import logging

from byte_codec import config
from byte_codec.types import ByteString, CodecError, KnownAnswerMismatchError

KNOWN_ANSWER_HEX = (
    "49276d206b696c6c696e6720796f757220627261696e206c696b65206120706f69736f6e6f7573206d757368726f6f6d"  # noqa: E501
)
"""Reference input of the built-in regression check."""

KNOWN_ANSWER_B64 = "SSdtIGtpbGxpbmcgeW91ciBicmFpbiBsaWtlIGEgcG9pc29ub3VzIG11c2hyb29t"
"""Base64 that `KNOWN_ANSWER_HEX` must encode to."""

logger = logging.getLogger(__name__)


def hex_to_b64(hex_string: str, pad: bool | None = None) -> str:
    """
    Convert a hex string to Base64 through raw bytes.

    Raises:
        CodecError: If the hex is malformed or cannot be Base64-encoded
            under the chosen padding policy.
    """
    byte_string = ByteString.from_hex(hex_string)
    logger.debug("Decoded %d bytes from %d hex characters", len(byte_string), len(hex_string))
    return byte_string.to_b64(pad=pad)


def verify_known_answer(hex_string: str, result: str) -> None:
    """
    Check the result against the reference pair when the input is the reference input.

    Any other input passes unchecked.

    Raises:
        KnownAnswerMismatchError: If the reference input produced something else.
    """
    if hex_string.lower() != KNOWN_ANSWER_HEX:
        return
    if result != KNOWN_ANSWER_B64:
        raise KnownAnswerMismatchError(KNOWN_ANSWER_B64, result)
    logger.debug("Known-answer check passed")


class ColoredFormatter(logging.Formatter):
    """Logging formatter with ANSI colors for better readability."""

    # ANSI color codes
    GREY = "\x1b[38;5;244m"
    BLUE = "\x1b[38;5;39m"
    GREEN = "\x1b[38;5;40m"
    YELLOW = "\x1b[38;5;220m"
    RED = "\x1b[38;5;196m"
    BOLD_RED = "\x1b[38;5;196;1m"
    CYAN = "\x1b[38;5;51m"
    RESET = "\x1b[0m"

    LEVEL_COLORS = {
        logging.DEBUG: GREY,
        logging.INFO: GREEN,
        logging.WARNING: YELLOW,
        logging.ERROR: RED,
        logging.CRITICAL: BOLD_RED,
    }

    def format(self, record: logging.LogRecord) -> str:
        """Format log record with colors."""
        color = self.LEVEL_COLORS.get(record.levelno, self.RESET)
        timestamp = f"{self.CYAN}{self.formatTime(record, self.datefmt)}{self.RESET}"
        levelname = f"{color}{record.levelname:8}{self.RESET}"
        name = f"{self.BLUE}{record.name}{self.RESET}"
        return f"{timestamp} {levelname} {name}: {record.getMessage()}"


def setup_logging(verbose: bool = False, no_color: bool = False) -> None:
    """Configure logging for the CLI with optional colors."""
    level = logging.DEBUG if verbose else logging.INFO

    handler = logging.StreamHandler()
    handler.setLevel(level)

    if no_color:
        formatter = logging.Formatter(
            "%(asctime)s %(levelname)-8s %(name)s: %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )
    else:
        formatter = ColoredFormatter(datefmt="%Y-%m-%d %H:%M:%S")

    handler.setFormatter(formatter)

    root = logging.getLogger()
    root.setLevel(level)
    root.addHandler(handler)


def build_parser() -> argparse.ArgumentParser:
    """Build the command-line parser."""
    parser = argparse.ArgumentParser(
        prog="byte-codec",
        description="Convert a hex string to Base64",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__,
    )
    parser.add_argument(
        "hex_string",
        metavar="HEX",
        help="Hexadecimal input (case-insensitive, even length)",
    )
    parser.add_argument(
        "--pad",
        action=argparse.BooleanOptionalAction,
        default=None,
        help=f"Pad a trailing partial group with '=' (default: {config.B64_PADDING})",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable debug logging",
    )
    parser.add_argument(
        "--no-color",
        action="store_true",
        help="Disable colored logging output",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    """CLI entry point. Returns the process exit status."""
    args = build_parser().parse_args(argv)

    setup_logging(args.verbose, args.no_color)

    try:
        result = hex_to_b64(args.hex_string, pad=args.pad)
        verify_known_answer(args.hex_string, result)
    except CodecError as e:
        logger.error("Conversion failed: %s", e)
        return 1

    print(f"Result: {result}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
