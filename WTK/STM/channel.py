# =============================================================================
# channel.py — Stereo → Mono Channel Selector
# =============================================================================
#
# Keeps one channel of every stereo frame and drops the other. No mixing.
#
#   16-bit stereo frame: [L0 L1 R0 R1]  → left: [L0 L1]  right: [R0 R1]
#    8-bit stereo frame: [L R]          → left: [L]      right: [R]
#
# HEADER: channel_count=1, block_align=bits/8, byte_rate=sample_rate*block_align,
#         data_size=data_size//2. riff_size is left as it was.
#
# FRAME LOOP: frames are consumed until the stream can no longer supply a whole
# frame, independent of data_size. A short final frame is NOT an error here;
# its bytes (0 < r < frame size) are copied through unchanged.
#
# Mono input is passed through verbatim (header, payload, remainder) whichever
# side was requested.

from __future__ import annotations
import enum
import logging
from typing import BinaryIO

import numpy as np

from WTK.FMM.constants import chunk_size
from WTK.FCM.header import WaveHeader, parse, read_exact, serialize
from .passthrough import copy_exact, copy_rest

logger = logging.getLogger(__name__)


class Side(enum.Enum):
    LEFT  = "left"
    RIGHT = "right"

    @property
    def index(self) -> int:
        """Position of this channel inside a stereo frame."""
        return 0 if self is Side.LEFT else 1


def downmix_header(header: WaveHeader) -> WaveHeader:
    """Header describing the mono stream produced from a stereo one."""
    block_align = header.bytes_per_sample
    return header._replace(
        channel_count=1,
        block_align=block_align,
        byte_rate=header.sample_rate * block_align,
        data_size=header.data_size // 2,
    )


def select_channel(src: BinaryIO, dst: BinaryIO, side: Side) -> WaveHeader:
    """
    Stream src to dst keeping only `side` of a stereo input.
    Returns the header that was written.
    """
    header = parse(src)

    if header.channel_count == 1:
        logger.debug("Mono input, channel selection ignored")
        dst.write(serialize(header))
        copy_exact(src, dst, header.data_size)
        copy_rest(src, dst)
        return header

    patched = downmix_header(header)
    dst.write(serialize(patched))

    bps        = header.bytes_per_sample
    frame_size = 2 * bps
    block      = max(frame_size, chunk_size() // frame_size * frame_size)
    frames     = 0

    while True:
        buf   = read_exact(src, block)
        whole = len(buf) // frame_size * frame_size
        if whole:
            view = np.frombuffer(buf, dtype=np.uint8, count=whole).reshape(-1, 2, bps)
            dst.write(view[:, side.index, :].tobytes())
            frames += whole // frame_size
        if len(buf) < block:
            # EOF: a partial final frame goes out as-is
            if len(buf) > whole:
                dst.write(buf[whole:])
            break

    logger.debug("Kept %s channel of %d frames", side.value, frames)
    copy_rest(src, dst)
    return patched
