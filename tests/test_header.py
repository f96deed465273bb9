"""
Tests for the canonical header codec (WTK.FCM.header).
"""
import io

import pytest

from WTK.FMM.constants import (
    HEADER_SIZE, OFF_BITS_PER_SAMPLE, OFF_BLOCK_ALIGN, OFF_BYTE_RATE,
    OFF_CHANNEL_COUNT, OFF_DATA_TAG, OFF_FMT_CHUNK_SIZE, OFF_FMT_TAG,
    OFF_FORMAT_TAG, OFF_RIFF_SIZE, OFF_RIFF_TAG, OFF_WAVE_TAG,
)
from WTK.FCM.errors import FormatError, HeaderCheck, TruncatedStreamError
from WTK.FCM.header import (
    WaveHeader, build_header, decode, parse, read_exact, read_u16le,
    read_u32le, serialize, write_u16le, write_u32le,
)
from tests.conftest import TrickleReader, wav_bytes

SAMPLE_RATE = 8000


def _base():
    # stereo 16-bit: block_align 4, byte_rate 32000
    return bytearray(wav_bytes(channels=2, bits=16, sample_rate=SAMPLE_RATE,
                               payload=b"", data_size=400))


def _break_block_align(buf):
    # keep byte_rate consistent so only the block-align check can fire
    write_u16le(buf, OFF_BLOCK_ALIGN, 3)
    write_u32le(buf, OFF_BYTE_RATE, SAMPLE_RATE * 3)


BREAKERS = {
    HeaderCheck.RIFF_TAG:        lambda b: b.__setitem__(slice(OFF_RIFF_TAG, OFF_RIFF_TAG + 4), b"RIFX"),
    HeaderCheck.WAVE_TAG:        lambda b: b.__setitem__(slice(OFF_WAVE_TAG, OFF_WAVE_TAG + 4), b"AVI "),
    HeaderCheck.FMT_TAG:         lambda b: b.__setitem__(slice(OFF_FMT_TAG, OFF_FMT_TAG + 4), b"junk"),
    HeaderCheck.FMT_CHUNK_SIZE:  lambda b: write_u32le(b, OFF_FMT_CHUNK_SIZE, 18),
    HeaderCheck.FORMAT_TAG:      lambda b: write_u16le(b, OFF_FORMAT_TAG, 3),
    HeaderCheck.CHANNEL_COUNT:   lambda b: write_u16le(b, OFF_CHANNEL_COUNT, 6),
    HeaderCheck.BITS_PER_SAMPLE: lambda b: write_u16le(b, OFF_BITS_PER_SAMPLE, 24),
    HeaderCheck.BYTE_RATE:       lambda b: write_u32le(b, OFF_BYTE_RATE, 12345),
    HeaderCheck.BLOCK_ALIGN:     _break_block_align,
    HeaderCheck.DATA_TAG:        lambda b: b.__setitem__(slice(OFF_DATA_TAG, OFF_DATA_TAG + 4), b"LIST"),
}


class TestRoundTrip:

    @pytest.mark.parametrize("channels,bits", [(1, 8), (2, 16)])
    def test_serialize_decode_is_identity(self, channels, bits):
        raw = wav_bytes(channels=channels, bits=bits, sample_rate=22050,
                        data_size=1234)
        assert serialize(decode(raw)) == raw

    def test_unvalidated_fields_survive(self):
        buf = _base()
        write_u32le(buf, OFF_RIFF_SIZE, 7)     # riff_size is never checked
        header = decode(bytes(buf))
        assert header.riff_size == 7
        assert serialize(header) == bytes(buf)

    def test_build_header_is_self_consistent(self):
        header = build_header(channels=2, sample_rate=44100, bits=16, data_size=400)
        assert header == WaveHeader(
            riff_size=436, fmt_chunk_size=16, format_tag=1, channel_count=2,
            sample_rate=44100, byte_rate=176400, block_align=4,
            bits_per_sample=16, data_size=400,
        )
        assert header.bytes_per_sample == 2


class TestValidationOrder:

    @pytest.mark.parametrize("check", list(HeaderCheck), ids=lambda c: c.name)
    def test_single_violation_is_reported(self, check):
        buf = _base()
        BREAKERS[check](buf)
        with pytest.raises(FormatError) as exc:
            decode(bytes(buf))
        assert exc.value.check is check

    @pytest.mark.parametrize("check", list(HeaderCheck), ids=lambda c: c.name)
    def test_first_violation_wins_over_later_ones(self, check):
        buf = _base()
        order = list(HeaderCheck)
        # break every later check first, then this one last so it sticks
        for later in reversed(order[order.index(check):]):
            BREAKERS[later](buf)
        with pytest.raises(FormatError) as exc:
            decode(bytes(buf))
        assert exc.value.check is check

    def test_error_message_names_the_check(self):
        buf = _base()
        BREAKERS[HeaderCheck.BITS_PER_SAMPLE](buf)
        with pytest.raises(FormatError, match="bits/sample should be 8 or 16"):
            decode(bytes(buf))


class TestStreamParse:

    def test_short_header_is_truncation(self):
        raw = wav_bytes()[:HEADER_SIZE - 1]
        with pytest.raises(TruncatedStreamError):
            parse(io.BytesIO(raw))

    def test_empty_stream_is_truncation(self):
        with pytest.raises(TruncatedStreamError):
            parse(io.BytesIO(b""))

    def test_parse_consumes_exactly_the_header(self):
        stream = io.BytesIO(wav_bytes(payload=b"\x01\x02") + b"tail")
        parse(stream)
        assert stream.read() == b"\x01\x02tail"

    def test_parse_survives_short_reads(self):
        raw = wav_bytes(channels=2, data_size=16)
        header = parse(TrickleReader(raw, step=3))
        assert header.channel_count == 2

    def test_fields_reported_in_parse_order(self):
        seen = []
        decode(wav_bytes(channels=1, bits=8, sample_rate=11025, data_size=10),
               report=lambda label, value: seen.append((label, value)))
        assert seen == [
            ("size of file", 46),
            ("size of format chunk", 16),
            ("WAVE type format", 1),
            ("mono/stereo", 1),
            ("sample rate", 11025),
            ("bytes/sec", 11025),
            ("block alignment", 1),
            ("bits/sample", 8),
            ("size of data chunk", 10),
        ]

    def test_reporting_stops_at_failed_check(self):
        buf = _base()
        BREAKERS[HeaderCheck.CHANNEL_COUNT](buf)
        seen = []
        with pytest.raises(FormatError):
            decode(bytes(buf), report=lambda label, value: seen.append(label))
        assert seen[-1] == "mono/stereo"
        assert "sample rate" not in seen


class TestLittleEndianHelpers:

    def test_write_then_read(self):
        buf = bytearray(8)
        write_u32le(buf, 0, 0xDEADBEEF)
        write_u16le(buf, 4, 0x1234)
        assert bytes(buf[:6]) == b"\xef\xbe\xad\xde\x34\x12"
        assert read_u32le(buf, 0) == 0xDEADBEEF
        assert read_u16le(buf, 4) == 0x1234

    def test_read_exact_stops_at_eof(self):
        assert read_exact(TrickleReader(b"abc", step=1), 10) == b"abc"
        assert read_exact(io.BytesIO(b"abc"), 0) == b""
