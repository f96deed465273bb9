# =============================================================================
# tone.py — Phase-Modulated Test Tone Synthesiser
# =============================================================================
#
# SIGNAL MODEL (n = 0 .. N-1, N = duration * sample_rate):
#
#   t    = n / sample_rate
#   s(n) = amplitude * sin(2π·fc·t − mi·sin(2π·fm·t))
#
# Each s(n) is clamped to int16 range and rounded half away from zero, then
# written little-endian. The default parameters sweep a 1500 Hz carrier by
# ±100 radians of phase twice a second, which sounds like a siren.
#
# OUTPUT: a fully self-consistent header followed by 2N payload bytes
#   riff_size = 36 + 2N, channels = 1, bits = 16, block_align = 2,
#   byte_rate = 2 * sample_rate, data_size = 2N
#
# Samples are rendered block by block from absolute sample indices, so the
# output does not depend on the block size.

from __future__ import annotations
import logging
import math
from typing import BinaryIO

import numpy as np

from WTK.FMM.constants import (
    RIFF_SIZE_OVERHEAD, U32_MAX, chunk_size,
    TONE_DURATION, TONE_SAMPLE_RATE, TONE_FM, TONE_FC, TONE_MI, TONE_AMPLITUDE,
)
from WTK.FCM.errors import UsageError
from WTK.FCM.header import WaveHeader, build_header, serialize
from WTK.FCM.samples import encode_s16

logger = logging.getLogger(__name__)

BYTES_PER_SAMPLE = 2


class ToneSynthesizer:
    """
    Renders a mono 16-bit phase-modulated tone.

    Example:
        synth = ToneSynthesizer(duration=1, sample_rate=8000)
        synth.render(sys.stdout.buffer)
    """

    def __init__(
        self,
        duration: int = TONE_DURATION,
        sample_rate: int = TONE_SAMPLE_RATE,
        fm: float = TONE_FM,
        fc: float = TONE_FC,
        mi: float = TONE_MI,
        amplitude: float = TONE_AMPLITUDE,
    ) -> None:
        if duration < 0:
            raise UsageError(f"duration must be >= 0, got {duration}")
        if sample_rate <= 0:
            raise UsageError(f"sample rate must be > 0, got {sample_rate}")
        if sample_rate * BYTES_PER_SAMPLE > U32_MAX:
            raise UsageError(f"sample rate {sample_rate} does not fit the header")

        n_samples = duration * sample_rate
        if RIFF_SIZE_OVERHEAD + n_samples * BYTES_PER_SAMPLE > U32_MAX:
            raise UsageError(
                f"{duration} s at {sample_rate} Hz exceeds the 4 GiB WAV limit"
            )

        # upper bound on |phase| over the whole tone
        phase_bound = (2.0 * math.pi * max(abs(fc), abs(fm)) * duration
                       + abs(mi))
        if n_samples and not (math.isfinite(phase_bound)
                              and math.isfinite(amplitude)):
            raise UsageError(
                f"fm={fm} fc={fc} mi={mi} amp={amplitude} "
                f"give a non-finite signal over {duration} s"
            )

        self.duration    = duration
        self.sample_rate = sample_rate
        self.fm          = fm
        self.fc          = fc
        self.mi          = mi
        self.amplitude   = amplitude
        self.n_samples   = n_samples

    # ── Signal ───────────────────────────────────────────────────────────────

    def samples(self, start: int, stop: int) -> np.ndarray:
        """Float sample values for absolute indices [start, stop)."""
        t = np.arange(start, stop, dtype=np.float64) / self.sample_rate
        phase = 2.0 * math.pi * self.fc * t - self.mi * np.sin(2.0 * math.pi * self.fm * t)
        return self.amplitude * np.sin(phase)

    def header(self) -> WaveHeader:
        return build_header(
            channels=1,
            sample_rate=self.sample_rate,
            bits=16,
            data_size=self.n_samples * BYTES_PER_SAMPLE,
        )

    # ── Output ───────────────────────────────────────────────────────────────

    def render(self, dst: BinaryIO) -> WaveHeader:
        """Write header and all samples to dst. Returns the header written."""
        header = self.header()
        dst.write(serialize(header))

        block = max(1, chunk_size() // BYTES_PER_SAMPLE)
        for start in range(0, self.n_samples, block):
            stop = min(self.n_samples, start + block)
            dst.write(encode_s16(self.samples(start, stop)))

        logger.debug(
            "Generated %d samples (%d s @ %d Hz, fm=%s fc=%s mi=%s amp=%s)",
            self.n_samples, self.duration, self.sample_rate,
            self.fm, self.fc, self.mi, self.amplitude,
        )
        return header


def generate_tone(dst: BinaryIO, **params) -> WaveHeader:
    """Convenience wrapper: ToneSynthesizer(**params).render(dst)."""
    return ToneSynthesizer(**params).render(dst)
