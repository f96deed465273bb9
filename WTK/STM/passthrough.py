# =============================================================================
# passthrough.py — Verbatim Stream Copy
# =============================================================================
#
# copy_rest()  — drain src into dst unchanged (bytes past the declared payload,
#                partial trailing frames, anything else)
# copy_exact() — copy exactly n payload bytes; a short stream is fatal, but the
#                bytes that did arrive are written first

from __future__ import annotations
import logging
from typing import BinaryIO

from WTK.FMM.constants import chunk_size
from WTK.FCM.errors import TruncatedStreamError
from WTK.FCM.header import read_exact

logger = logging.getLogger(__name__)


def copy_rest(src: BinaryIO, dst: BinaryIO) -> int:
    """Copy src to dst until EOF. Returns the number of bytes copied."""
    block = chunk_size()
    total = 0
    while True:
        buf = src.read(block)
        if not buf:
            break
        dst.write(buf)
        total += len(buf)
    if total:
        logger.debug("Passed through %d trailing bytes", total)
    return total


def copy_exact(src: BinaryIO, dst: BinaryIO, n: int, what: str = "payload") -> None:
    """Copy exactly n bytes from src to dst or raise TruncatedStreamError."""
    block  = chunk_size()
    copied = 0
    while copied < n:
        want = min(block, n - copied)
        buf  = read_exact(src, want)
        dst.write(buf)
        copied += len(buf)
        if len(buf) < want:
            raise TruncatedStreamError(n, copied, what)
