# =============================================================================
# header.py — Canonical WAV Header Codec
# =============================================================================
#
# Parses the fixed 44-byte RIFF/WAVE header that fronts every stream WTK
# touches, and writes it back out.
#
# VALIDATION ORDER (first failure wins, later fields are never inspected):
#    1. "RIFF" tag            6. channel count in {1, 2}
#    2. "WAVE" tag            7. bits/sample in {8, 16}
#    3. "fmt " tag            8. byte rate  == sample rate * block align
#    4. fmt chunk size == 16  9. block align == bits/8 * channel count
#    5. format tag == 1      10. "data" tag
#
# riff_size and sample_rate are read and reported but never validated on their
# own. A header that passes all ten checks round-trips byte-for-byte through
# decode() -> serialize().
#
# Fields are reported (optional callback) the moment they are read, so a
# diagnostic listing stops exactly where validation stopped.
#
# =============================================================================

from __future__ import annotations
import logging
import struct
from typing import BinaryIO, Callable, NamedTuple, Optional

from WTK.FMM.constants import (
    HEADER_SIZE, RIFF_SIZE_OVERHEAD,
    RIFF_TAG, WAVE_TAG, FMT_TAG, DATA_TAG,
    OFF_RIFF_TAG, OFF_RIFF_SIZE, OFF_WAVE_TAG, OFF_FMT_TAG,
    OFF_FMT_CHUNK_SIZE, OFF_FORMAT_TAG, OFF_CHANNEL_COUNT, OFF_SAMPLE_RATE,
    OFF_BYTE_RATE, OFF_BLOCK_ALIGN, OFF_BITS_PER_SAMPLE, OFF_DATA_TAG,
    OFF_DATA_SIZE,
    PCM_FMT_CHUNK_SIZE, PCM_FORMAT_TAG, VALID_CHANNELS, VALID_BITS,
)
from .errors import FormatError, HeaderCheck, TruncatedStreamError

logger = logging.getLogger(__name__)

# (label, value) — called for every header field as soon as it is read
FieldReporter = Callable[[str, int], None]

_HEADER_STRUCT = struct.Struct("<4sI4s4sIHHIIHH4sI")


class WaveHeader(NamedTuple):
    riff_size:       int
    fmt_chunk_size:  int
    format_tag:      int
    channel_count:   int
    sample_rate:     int
    byte_rate:       int
    block_align:     int
    bits_per_sample: int
    data_size:       int

    @property
    def bytes_per_sample(self) -> int:
        return self.bits_per_sample // 8


# ── Little-endian helpers ────────────────────────────────────────────────────

def read_u16le(buf: bytes, offset: int) -> int:
    return struct.unpack_from("<H", buf, offset)[0]


def read_u32le(buf: bytes, offset: int) -> int:
    return struct.unpack_from("<I", buf, offset)[0]


def write_u16le(buf: bytearray, offset: int, value: int) -> None:
    struct.pack_into("<H", buf, offset, value)


def write_u32le(buf: bytearray, offset: int, value: int) -> None:
    struct.pack_into("<I", buf, offset, value)


def read_exact(stream: BinaryIO, n: int) -> bytes:
    """
    Read up to n bytes, looping over short reads. Returns fewer than n bytes
    only when the stream hit EOF.
    """
    if n <= 0:
        return b""
    parts = []
    remaining = n
    while remaining:
        part = stream.read(remaining)
        if not part:
            break
        parts.append(part)
        remaining -= len(part)
    return b"".join(parts)


# ── Codec ────────────────────────────────────────────────────────────────────

def decode(buf: bytes, report: Optional[FieldReporter] = None) -> WaveHeader:
    """
    Validate and decode an in-memory header.

    Parameters
    ----------
    buf : bytes
        At least HEADER_SIZE bytes; anything after the header is ignored.
    report : callable, optional
        report(label, value) is invoked for each field in parse order.

    Raises
    ------
    TruncatedStreamError  if buf is shorter than HEADER_SIZE
    FormatError           naming the first failed HeaderCheck
    """
    if len(buf) < HEADER_SIZE:
        raise TruncatedStreamError(HEADER_SIZE, len(buf), "header")

    def field(label: str, offset: int, width: int) -> int:
        value = read_u32le(buf, offset) if width == 4 else read_u16le(buf, offset)
        if report is not None:
            report(label, value)
        return value

    if buf[OFF_RIFF_TAG:OFF_RIFF_TAG + 4] != RIFF_TAG:
        raise FormatError(HeaderCheck.RIFF_TAG)
    riff_size = field("size of file", OFF_RIFF_SIZE, 4)

    if buf[OFF_WAVE_TAG:OFF_WAVE_TAG + 4] != WAVE_TAG:
        raise FormatError(HeaderCheck.WAVE_TAG)
    if buf[OFF_FMT_TAG:OFF_FMT_TAG + 4] != FMT_TAG:
        raise FormatError(HeaderCheck.FMT_TAG)

    fmt_chunk_size = field("size of format chunk", OFF_FMT_CHUNK_SIZE, 4)
    if fmt_chunk_size != PCM_FMT_CHUNK_SIZE:
        raise FormatError(HeaderCheck.FMT_CHUNK_SIZE, f"got {fmt_chunk_size}")

    format_tag = field("WAVE type format", OFF_FORMAT_TAG, 2)
    if format_tag != PCM_FORMAT_TAG:
        raise FormatError(HeaderCheck.FORMAT_TAG, f"got {format_tag}")

    channel_count = field("mono/stereo", OFF_CHANNEL_COUNT, 2)
    if channel_count not in VALID_CHANNELS:
        raise FormatError(HeaderCheck.CHANNEL_COUNT, f"got {channel_count}")

    sample_rate     = field("sample rate",     OFF_SAMPLE_RATE,     4)
    byte_rate       = field("bytes/sec",       OFF_BYTE_RATE,       4)
    block_align     = field("block alignment", OFF_BLOCK_ALIGN,     2)
    bits_per_sample = field("bits/sample",     OFF_BITS_PER_SAMPLE, 2)

    if bits_per_sample not in VALID_BITS:
        raise FormatError(HeaderCheck.BITS_PER_SAMPLE, f"got {bits_per_sample}")
    if byte_rate != sample_rate * block_align:
        raise FormatError(
            HeaderCheck.BYTE_RATE,
            f"{byte_rate} != {sample_rate} x {block_align}",
        )
    if block_align != (bits_per_sample // 8) * channel_count:
        raise FormatError(
            HeaderCheck.BLOCK_ALIGN,
            f"{block_align} != {bits_per_sample} / 8 x {channel_count}",
        )

    if buf[OFF_DATA_TAG:OFF_DATA_TAG + 4] != DATA_TAG:
        raise FormatError(HeaderCheck.DATA_TAG)
    data_size = field("size of data chunk", OFF_DATA_SIZE, 4)

    header = WaveHeader(
        riff_size=riff_size,
        fmt_chunk_size=fmt_chunk_size,
        format_tag=format_tag,
        channel_count=channel_count,
        sample_rate=sample_rate,
        byte_rate=byte_rate,
        block_align=block_align,
        bits_per_sample=bits_per_sample,
        data_size=data_size,
    )
    logger.debug("Parsed header: %s", header)
    return header


def parse(stream: BinaryIO, report: Optional[FieldReporter] = None) -> WaveHeader:
    """Read exactly HEADER_SIZE bytes from stream and decode them."""
    return decode(read_exact(stream, HEADER_SIZE), report)


def serialize(header: WaveHeader) -> bytes:
    """Pack all nine fields back into their canonical 44-byte layout."""
    return _HEADER_STRUCT.pack(
        RIFF_TAG, header.riff_size, WAVE_TAG,
        FMT_TAG, header.fmt_chunk_size, header.format_tag,
        header.channel_count, header.sample_rate, header.byte_rate,
        header.block_align, header.bits_per_sample,
        DATA_TAG, header.data_size,
    )


def build_header(
    channels: int, sample_rate: int, bits: int, data_size: int
) -> WaveHeader:
    """Construct a self-consistent PCM header for the given layout."""
    block_align = (bits // 8) * channels
    return WaveHeader(
        riff_size=RIFF_SIZE_OVERHEAD + data_size,
        fmt_chunk_size=PCM_FMT_CHUNK_SIZE,
        format_tag=PCM_FORMAT_TAG,
        channel_count=channels,
        sample_rate=sample_rate,
        byte_rate=sample_rate * block_align,
        block_align=block_align,
        bits_per_sample=bits,
        data_size=data_size,
    )
