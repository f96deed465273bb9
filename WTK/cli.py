#!/usr/bin/env python3
# =============================================================================
# cli.py — WTK Command-Line Router
# =============================================================================
#
# Usage:
#   python -m WTK info                 < in.wav
#   python -m WTK rate 1.5             < in.wav > out.wav
#   python -m WTK channel left|right   < in.wav > out.wav
#   python -m WTK volume 0.5           < in.wav > out.wav
#   python -m WTK generate [--dur D] [--sr SR] [--fm FM] [--fc FC]
#                          [--mi MI] [--amp AMP]          > tone.wav
#
# Binary audio is read from stdin and written to stdout. `info` prints field
# lines on stdout; every error goes to stderr via logging.
#
# Exit codes: 0 success, 1 any validation, stream-size or usage failure.
#
# Environment:
#   WTK_LOG_LEVEL   DEBUG / INFO / WARNING (default) / ERROR
#   WTK_CHUNK_SIZE  streaming block size in bytes
#
# =============================================================================

from __future__ import annotations
import argparse
import logging
import math
import sys
from typing import BinaryIO, Optional, Sequence, TextIO

from WTK.FMM.constants import (
    log_level,
    TONE_DURATION, TONE_SAMPLE_RATE, TONE_FM, TONE_FC, TONE_MI, TONE_AMPLITUDE,
)
from WTK.FCM.errors import UsageError, WavToolError
from WTK.STM.channel import Side
from WTK.commands import Channel, Command, Generate, Info, Rate, Volume, run

logger = logging.getLogger(__name__)


class _Parser(argparse.ArgumentParser):
    """ArgumentParser that raises UsageError instead of exiting with status 2."""

    def error(self, message: str) -> None:  # type: ignore[override]
        raise UsageError(message)


def _finite_float(text: str) -> float:
    value = float(text)
    if not math.isfinite(value):
        raise argparse.ArgumentTypeError(f"factor must be finite, got {text!r}")
    return value


def build_parser() -> argparse.ArgumentParser:
    parser = _Parser(
        prog="wtk",
        description="Single-pass PCM WAV utility (stdin → stdout)",
    )
    sub = parser.add_subparsers(dest="command", metavar="command")
    sub.required = True

    sub.add_parser("info", help="Print header fields and verify the payload size")

    p_rate = sub.add_parser("rate", help="Multiply sample-rate metadata")
    p_rate.add_argument("factor", type=_finite_float)

    p_chan = sub.add_parser("channel", help="Keep one channel of a stereo stream")
    p_chan.add_argument("side", choices=[s.value for s in Side])

    p_vol = sub.add_parser("volume", help="Scale sample amplitude")
    p_vol.add_argument("factor", type=_finite_float)

    p_gen = sub.add_parser("generate", help="Synthesise a phase-modulated test tone")
    p_gen.add_argument("--dur", type=int,          default=TONE_DURATION,
                       help=f"Duration in seconds, default {TONE_DURATION}")
    p_gen.add_argument("--sr",  type=int,          default=TONE_SAMPLE_RATE,
                       help=f"Sample rate in Hz, default {TONE_SAMPLE_RATE}")
    p_gen.add_argument("--fm",  type=_finite_float, default=TONE_FM,
                       help=f"Modulator frequency in Hz, default {TONE_FM}")
    p_gen.add_argument("--fc",  type=_finite_float, default=TONE_FC,
                       help=f"Carrier frequency in Hz, default {TONE_FC}")
    p_gen.add_argument("--mi",  type=_finite_float, default=TONE_MI,
                       help=f"Modulation index, default {TONE_MI}")
    p_gen.add_argument("--amp", type=_finite_float, default=TONE_AMPLITUDE,
                       help=f"Peak amplitude, default {TONE_AMPLITUDE}")
    return parser


def parse_command(argv: Optional[Sequence[str]] = None) -> Command:
    """Turn argv into one immutable command record. Raises UsageError."""
    args = build_parser().parse_args(argv)

    if args.command == "info":
        return Info()
    if args.command == "rate":
        return Rate(args.factor)
    if args.command == "channel":
        return Channel(Side(args.side))
    if args.command == "volume":
        return Volume(args.factor)
    return Generate(
        duration=args.dur,
        sample_rate=args.sr,
        fm=args.fm,
        fc=args.fc,
        mi=args.mi,
        amplitude=args.amp,
    )


def configure_logging() -> None:
    level = log_level()
    fmt   = "%(levelname)s %(name)s: %(message)s" if level <= logging.DEBUG else "%(message)s"
    logging.basicConfig(level=level, stream=sys.stderr, format=fmt)


def main(
    argv: Optional[Sequence[str]] = None,
    stdin: Optional[BinaryIO] = None,
    stdout: Optional[BinaryIO] = None,
    text_out: Optional[TextIO] = None,
) -> int:
    configure_logging()
    src = stdin if stdin is not None else sys.stdin.buffer
    dst = stdout if stdout is not None else sys.stdout.buffer

    try:
        command = parse_command(argv)
        logger.debug("Running %r", command)
        run(command, src, dst, text_out)
    except WavToolError as exc:
        logger.error("Error! %s", exc)
        return 1
    finally:
        dst.flush()
    return 0


if __name__ == "__main__":
    sys.exit(main())
