# =============================================================================
# samples.py — PCM Sample Encoding
# =============================================================================
#
# Float → integer sample conversion shared by the volume scaler and the tone
# generator. Values are clamped BEFORE rounding.
#
#   16-bit: clamp to [-32768, 32767], round half away from zero
#            2.5 → 3   -2.5 → -3   32767.4 → 32767
#    8-bit: clamp to [0, 255], round half up (unsigned magnitude, no 128 bias)
#            127.5 → 128   255.0 → 255

from __future__ import annotations

import numpy as np

from WTK.FMM.constants import S16_MIN, S16_MAX, U8_MIN, U8_MAX


def round_half_away(values: np.ndarray) -> np.ndarray:
    """Round to nearest integer, ties away from zero."""
    return np.where(values < 0, np.ceil(values - 0.5), np.floor(values + 0.5))


def encode_s16(values: np.ndarray) -> bytes:
    """Clamp and round float samples into little-endian signed 16-bit bytes."""
    clipped = np.clip(values, S16_MIN, S16_MAX)
    return round_half_away(clipped).astype("<i2").tobytes()


def encode_u8(values: np.ndarray) -> bytes:
    """Clamp and round float samples into unsigned 8-bit bytes."""
    clipped = np.clip(values, U8_MIN, U8_MAX)
    return np.floor(clipped + 0.5).astype(np.uint8).tobytes()


def decode_s16(buf: bytes) -> np.ndarray:
    return np.frombuffer(buf, dtype="<i2").astype(np.float64)


def decode_u8(buf: bytes) -> np.ndarray:
    return np.frombuffer(buf, dtype=np.uint8).astype(np.float64)
