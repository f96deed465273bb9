# =============================================================================
# volume.py — Amplitude Scaler
# =============================================================================
#
# Multiplies every sample by a factor. The header is written back unchanged.
#
# SAMPLE CONTRACT:
#   total_samples = data_size // bytes_per_sample, and every one of them must
#   be present. Running out early is a TruncatedStreamError; the samples that
#   were complete before the stream ended are still written first. Any bytes
#   after the last sample (odd trailing byte, extra data) pass through as-is.
#
#   16-bit, factor 2.0:  32767 → 32767 (clamped, never wraps)
#                        -1000 → -2000
#    8-bit, factor 0.5:  255 → 128   (127.5 rounds half up)

from __future__ import annotations
import logging
from typing import BinaryIO

from WTK.FMM.constants import chunk_size
from WTK.FCM.errors import TruncatedStreamError
from WTK.FCM.header import WaveHeader, parse, read_exact, serialize
from WTK.FCM.samples import decode_s16, decode_u8, encode_s16, encode_u8
from .passthrough import copy_rest

logger = logging.getLogger(__name__)


def scale_block(buf: bytes, bits: int, factor: float) -> bytes:
    """Scale a block of whole samples of the given width."""
    if bits == 8:
        return encode_u8(decode_u8(buf) * factor)
    return encode_s16(decode_s16(buf) * factor)


def scale_volume(src: BinaryIO, dst: BinaryIO, factor: float) -> WaveHeader:
    """Stream src to dst with every sample scaled by factor."""
    header = parse(src)
    if factor < 0:
        logger.warning("Negative volume factor %r inverts polarity", factor)
    dst.write(serialize(header))

    bps           = header.bytes_per_sample
    total_samples = header.data_size // bps
    expected      = total_samples * bps
    block         = max(bps, chunk_size() // bps * bps)
    done          = 0

    while done < expected:
        want  = min(block, expected - done)
        buf   = read_exact(src, want)
        whole = len(buf) // bps * bps
        if whole:
            dst.write(scale_block(buf[:whole], header.bits_per_sample, factor))
            done += whole
        if len(buf) < want:
            raise TruncatedStreamError(expected, done, "samples")

    logger.debug("Scaled %d samples by %s", total_samples, factor)
    copy_rest(src, dst)
    return header
