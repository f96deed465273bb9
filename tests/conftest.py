"""
Shared pytest fixtures for WTK tests.
"""
import io
import struct

import pytest

from WTK.FCM.header import build_header, serialize


def wav_bytes(channels=1, bits=16, sample_rate=8000, payload=b"", extra=b"",
              data_size=None):
    """Header + payload + extra. data_size defaults to len(payload)."""
    size = len(payload) if data_size is None else data_size
    header = build_header(channels, sample_rate, bits, size)
    return serialize(header) + payload + extra


def s16(*values):
    return struct.pack(f"<{len(values)}h", *values)


class TrickleReader(io.RawIOBase):
    """Binary stream that hands out at most `step` bytes per read()."""

    def __init__(self, data, step=1):
        self._buf = io.BytesIO(data)
        self._step = step

    def readable(self):
        return True

    def read(self, n=-1):
        if n is None or n < 0:
            n = self._step
        return self._buf.read(min(n, self._step))


@pytest.fixture
def make_wav():
    return wav_bytes


@pytest.fixture
def pcm16():
    return s16


@pytest.fixture
def small_chunks(monkeypatch):
    """Force the streaming block size down so block boundaries get exercised."""
    monkeypatch.setenv("WTK_CHUNK_SIZE", "8")
