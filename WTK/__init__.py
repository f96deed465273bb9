# =============================================================================
# Wave Tool Kit (WTK)
# Single-pass PCM WAV utility: stdin → one transform → stdout.
# =============================================================================
#
# ── THE STREAM IS THE ONLY STATE ─────────────────────────────────────────────
#
# RESPONSIBLE for:
#   - Header codec
#       Reads the canonical 44-byte RIFF/WAVE header, applies ten ordered
#       validity checks, and writes headers back byte-for-byte.
#   - Streaming transforms
#       Rate metadata rewrite, stereo → mono channel selection, amplitude
#       scaling. Each reads its input exactly once, front to back, in bounded
#       blocks; there is no seeking and nothing is buffered whole.
#   - Passthrough
#       Bytes past the logical end of a transform (extra data, partial frames)
#       are copied through untouched.
#   - Tone synthesis
#       Phase-modulated sinusoid → self-consistent mono 16-bit WAV.
#   - Diagnostics
#       Field listing plus exact payload-length verification (`info`).
#
# NOT responsible for:
#   - Chunks other than the mandatory fmt/data pair (LIST, fact, ...)
#   - Compressed / float encodings, more than 2 channels, >4 GiB streams
#   - Batches of files or random access
#
# ── DATA FLOW ─────────────────────────────────────────────────────────────────
#   cli.py      → argv → immutable command record (commands.py)
#   commands.py → run(command, stdin, stdout)
#   component   → FCM.parse(stdin) → transform blocks → STM.copy_rest()
#   errors      → WavToolError → "Error! ..." on stderr, exit 1
#
# ┌─────────────────────────────────────────────────────────────────────────┐
# │  HEADER LAYOUT (little-endian)                                          │
# ├─────────────────────────────────────────────────────────────────────────┤
# │   0 "RIFF"   4 riff_size u32   8 "WAVE"  12 "fmt "                      │
# │  16 fmt_chunk_size u32 = 16   20 format_tag u16 = 1                     │
# │  22 channel_count u16  24 sample_rate u32  28 byte_rate u32             │
# │  32 block_align u16    34 bits_per_sample u16                           │
# │  36 "data"  40 data_size u32                                            │
# │                                                                          │
# │  8-bit samples are unsigned magnitudes 0..255 (NO 128 offset applied).  │
# │  16-bit samples are signed -32768..32767.                               │
# └─────────────────────────────────────────────────────────────────────────┘
#
# ── Module layout ─────────────────────────────────────────────────────────────
#   FMM/constants.py  — header offsets, limits, tone defaults, env settings
#   FCM/header.py     — WaveHeader, parse / decode / serialize
#   FCM/samples.py    — float ↔ PCM sample encoding (clamp + round)
#   FCM/errors.py     — error taxonomy
#   STM/              — passthrough, rate, channel, volume
#   SGM/tone.py       — tone synthesiser
#   SVM/info.py       — header diagnostics
#   commands.py       — operation records + dispatch
#   cli.py            — argparse router, exit codes, logging setup
# =============================================================================

__version__ = "1.0.0"
