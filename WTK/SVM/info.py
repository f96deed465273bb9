# =============================================================================
# info.py — Header Diagnostics and Size Verification
# =============================================================================
#
# Prints every header field as "<name>: <value>" while it is parsed, then
# checks that the stream holds exactly data_size payload bytes:
#
#   fewer than data_size bytes  → TruncatedStreamError
#   any byte after the payload  → TrailingDataError
#   exactly data_size then EOF  → OK
#
# Nothing is written to the binary output. Field lines go to a text stream
# (stdout by default); failures are reported by the caller.

from __future__ import annotations
import logging
import sys
from typing import BinaryIO, Optional, TextIO

from WTK.FMM.constants import chunk_size
from WTK.FCM.errors import TrailingDataError, TruncatedStreamError
from WTK.FCM.header import WaveHeader, parse, read_exact

logger = logging.getLogger(__name__)


def report_info(src: BinaryIO, out: Optional[TextIO] = None) -> WaveHeader:
    """Parse, print and size-check the stream in src."""
    out = out if out is not None else sys.stdout

    def show(label: str, value: int) -> None:
        print(f"{label}: {value}", file=out)

    header = parse(src, report=show)

    block     = chunk_size()
    remaining = header.data_size
    while remaining:
        want = min(block, remaining)
        got  = len(read_exact(src, want))
        remaining -= got
        if got < want:
            raise TruncatedStreamError(
                header.data_size, header.data_size - remaining, "payload"
            )

    if src.read(1):
        raise TrailingDataError(header.data_size)

    logger.debug("Payload of %d bytes verified", header.data_size)
    return header
