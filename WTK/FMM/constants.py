# =============================================================================
# constants.py — FMM Header Layout, Limits and Defaults
# =============================================================================
#
# Canonical PCM WAV header (44 bytes, every multi-byte field little-endian):
#
#   offset  size  field
#   ------  ----  --------------------------------
#        0     4  "RIFF"
#        4     4  riff_size        (u32)
#        8     4  "WAVE"
#       12     4  "fmt "
#       16     4  fmt_chunk_size   (u32)  must be 16
#       20     2  format_tag       (u16)  must be 1 (integer PCM)
#       22     2  channel_count    (u16)  1 or 2
#       24     4  sample_rate      (u32)
#       28     4  byte_rate        (u32)  sample_rate * block_align
#       32     2  block_align      (u16)  bits/8 * channel_count
#       34     2  bits_per_sample  (u16)  8 or 16
#       36     4  "data"
#       40     4  data_size        (u32)
#
# Only the mandatory fmt/data pair is understood. Extra chunks, compressed or
# float encodings and >2 channels are rejected by the header codec.

import logging
import os

# -----------------------------------------------------------------------------
# HEADER LAYOUT
# -----------------------------------------------------------------------------

HEADER_SIZE = 44

RIFF_TAG = b"RIFF"
WAVE_TAG = b"WAVE"
FMT_TAG  = b"fmt "
DATA_TAG = b"data"

OFF_RIFF_TAG        = 0
OFF_RIFF_SIZE       = 4
OFF_WAVE_TAG        = 8
OFF_FMT_TAG         = 12
OFF_FMT_CHUNK_SIZE  = 16
OFF_FORMAT_TAG      = 20
OFF_CHANNEL_COUNT   = 22
OFF_SAMPLE_RATE     = 24
OFF_BYTE_RATE       = 28
OFF_BLOCK_ALIGN     = 32
OFF_BITS_PER_SAMPLE = 34
OFF_DATA_TAG        = 36
OFF_DATA_SIZE       = 40

# riff_size counts everything after the first 8 bytes: 44 - 8 = 36 + payload
RIFF_SIZE_OVERHEAD = HEADER_SIZE - 8   # = 36

# -----------------------------------------------------------------------------
# ACCEPTED FORMAT VALUES
# -----------------------------------------------------------------------------

PCM_FMT_CHUNK_SIZE = 16
PCM_FORMAT_TAG     = 1
VALID_CHANNELS     = (1, 2)
VALID_BITS         = (8, 16)

U32_MAX = 0xFFFF_FFFF

# 8-bit samples are treated as plain unsigned magnitudes (no 128 offset)
U8_MIN, U8_MAX   = 0, 255
S16_MIN, S16_MAX = -32_768, 32_767

# -----------------------------------------------------------------------------
# TONE GENERATOR DEFAULTS  (phase-modulated sinusoid, mono 16-bit)
# -----------------------------------------------------------------------------

TONE_DURATION    = 3          # seconds
TONE_SAMPLE_RATE = 44_100     # Hz
TONE_FM          = 2.0        # Hz — modulator frequency
TONE_FC          = 1500.0     # Hz — carrier frequency
TONE_MI          = 100.0      # modulation index (radians of phase swing)
TONE_AMPLITUDE   = 30000.0    # peak amplitude, int16 scale

# -----------------------------------------------------------------------------
# ENVIRONMENT SETTINGS
# -----------------------------------------------------------------------------
# There is no config file. Two knobs are read from the environment:
#   WTK_LOG_LEVEL   — logging level name for the CLI (default WARNING)
#   WTK_CHUNK_SIZE  — streaming block size in bytes (default 65536, min 8)

DEFAULT_LOG_LEVEL  = "WARNING"
DEFAULT_CHUNK_SIZE = 65_536
MIN_CHUNK_SIZE     = 8        # one full 16-bit stereo frame, twice over


def log_level() -> int:
    """Resolve WTK_LOG_LEVEL to a logging level, falling back to WARNING."""
    name  = os.environ.get("WTK_LOG_LEVEL", DEFAULT_LOG_LEVEL).strip().upper()
    level = logging.getLevelName(name)
    return level if isinstance(level, int) else logging.WARNING


def chunk_size() -> int:
    """Resolve WTK_CHUNK_SIZE; invalid values fall back to the default."""
    raw = os.environ.get("WTK_CHUNK_SIZE")
    if not raw:
        return DEFAULT_CHUNK_SIZE
    try:
        value = int(raw)
    except ValueError:
        return DEFAULT_CHUNK_SIZE
    return max(value, MIN_CHUNK_SIZE)
