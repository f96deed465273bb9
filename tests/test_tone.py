"""
Tests for the phase-modulated tone synthesiser (WTK.SGM.tone).
"""
import io
import math
import struct

import numpy as np
import pytest

from WTK.FMM.constants import HEADER_SIZE
from WTK.FCM.errors import UsageError
from WTK.FCM.header import decode
from WTK.SGM.tone import ToneSynthesizer, generate_tone


def _render(**params):
    out = io.BytesIO()
    header = generate_tone(out, **params)
    return header, out.getvalue()


def test_silent_tone_is_all_zero():
    header, out = _render(duration=1, sample_rate=8000, fm=0, fc=0, mi=0, amplitude=0)
    assert header.data_size == 16000
    assert len(out) == HEADER_SIZE + 16000
    assert out[HEADER_SIZE:] == b"\x00\x00" * 8000


def test_header_is_self_consistent():
    header, out = _render(duration=2, sample_rate=11025)
    written = decode(out)
    assert written == header
    assert written.riff_size == 36 + 2 * 22050
    assert written.fmt_chunk_size == 16
    assert written.format_tag == 1
    assert written.channel_count == 1
    assert written.sample_rate == 11025
    assert written.byte_rate == 22050
    assert written.block_align == 2
    assert written.bits_per_sample == 16
    assert written.data_size == 44100


def test_samples_follow_signal_equation():
    sr, fm, fc, mi, amp = 8000, 2.0, 1500.0, 100.0, 30000.0
    _, out = _render(duration=1, sample_rate=sr, fm=fm, fc=fc, mi=mi, amplitude=amp)
    got = struct.unpack("<8000h", out[HEADER_SIZE:])
    for n in (0, 1, 2, 17, 4000, 7999):
        t = n / sr
        v = amp * math.sin(2 * math.pi * fc * t - mi * math.sin(2 * math.pi * fm * t))
        assert abs(got[n] - v) <= 0.5 + 1e-6


def test_amplitude_clamps_to_int16():
    # quarter-rate carrier: sin hits 0, +1, 0, -1
    _, out = _render(duration=1, sample_rate=8000, fm=0, fc=2000, mi=0, amplitude=40000)
    assert struct.unpack("<4h", out[HEADER_SIZE:HEADER_SIZE + 8]) == (0, 32767, 0, -32768)


def test_zero_duration_is_header_only():
    header, out = _render(duration=0, sample_rate=8000)
    assert header.data_size == 0
    assert len(out) == HEADER_SIZE


def test_block_size_does_not_change_output(monkeypatch):
    _, whole = _render(duration=1, sample_rate=1000)
    monkeypatch.setenv("WTK_CHUNK_SIZE", "8")
    _, pieces = _render(duration=1, sample_rate=1000)
    assert pieces == whole


def test_samples_are_indexed_absolutely():
    synth = ToneSynthesizer(duration=1, sample_rate=1000)
    full = synth.samples(0, 1000)
    assert np.array_equal(synth.samples(250, 500), full[250:500])


def test_defaults():
    synth = ToneSynthesizer()
    assert (synth.duration, synth.sample_rate) == (3, 44100)
    assert (synth.fm, synth.fc, synth.mi, synth.amplitude) == (2.0, 1500.0, 100.0, 30000.0)
    assert synth.header().data_size == 3 * 44100 * 2


@pytest.mark.parametrize("params", [
    {"duration": -1},
    {"sample_rate": 0},
    {"sample_rate": -8000},
    {"duration": 100_000, "sample_rate": 44100},
    {"duration": 1, "sample_rate": 8000, "fc": 1e308},
    {"duration": 1, "sample_rate": 8000, "fm": 1e308},
    {"duration": 1, "sample_rate": 8000, "mi": float("inf")},
    {"duration": 1, "sample_rate": 8000, "amplitude": float("inf")},
])
def test_invalid_parameters_are_usage_errors(params):
    with pytest.raises(UsageError):
        ToneSynthesizer(**params)


def test_huge_frequency_is_fine_for_an_empty_tone():
    header, out = _render(duration=0, sample_rate=8000, fc=1e308)
    assert header.data_size == 0
    assert len(out) == HEADER_SIZE


def test_large_but_finite_frequencies_render_finite_samples():
    synth = ToneSynthesizer(duration=1, sample_rate=8000, fc=1e300, fm=1e300)
    assert np.all(np.isfinite(synth.samples(0, 8000)))
