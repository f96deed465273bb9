# =============================================================================
# rate.py — Playback-Rate Metadata Rewriter
# =============================================================================
#
# Multiplies sample_rate and byte_rate by a factor and nothing else. The
# payload is copied byte-for-byte, so the audio plays faster or slower (and
# higher or lower) rather than being resampled.
#
# ROUNDING:
#   new = trunc(old * factor + 0.5), then saturated into the u32 field range.
#   A zero or negative factor is accepted and yields a 0 Hz header.
#
#   rate 2.0 on 22050 Hz mono 16-bit:
#     sample_rate 22050 → 44100, byte_rate 44100 → 88200, data untouched

from __future__ import annotations
import logging
from typing import BinaryIO

from WTK.FMM.constants import U32_MAX
from WTK.FCM.header import WaveHeader, parse, serialize
from .passthrough import copy_exact, copy_rest

logger = logging.getLogger(__name__)


def scale_rate_field(value: int, factor: float) -> int:
    """Round value * factor half-up and clamp into [0, U32_MAX]."""
    scaled = value * factor + 0.5
    if scaled >= U32_MAX:
        return U32_MAX
    if scaled <= 0:
        return 0
    return int(scaled)


def rewrite_rate(src: BinaryIO, dst: BinaryIO, factor: float) -> WaveHeader:
    """
    Patch the rate fields of the header read from src and stream the result
    to dst. Returns the header that was written.
    """
    header = parse(src)
    if factor <= 0:
        logger.warning("Rate factor %r produces degenerate rate metadata", factor)

    patched = header._replace(
        sample_rate=scale_rate_field(header.sample_rate, factor),
        byte_rate=scale_rate_field(header.byte_rate, factor),
    )
    logger.debug(
        "Rate x%s: sample_rate %d -> %d, byte_rate %d -> %d",
        factor, header.sample_rate, patched.sample_rate,
        header.byte_rate, patched.byte_rate,
    )
    dst.write(serialize(patched))
    copy_exact(src, dst, header.data_size)
    copy_rest(src, dst)
    return patched
