# =============================================================================
# WTK/FCM/__init__.py — Format Codec Module
# =============================================================================
#
# Reads, validates and writes the canonical 44-byte WAV header.
#
# Modules:
#   header.py  — WaveHeader record, parse/decode/serialize, LE helpers
#   errors.py  — error taxonomy shared by every WTK component
#
# Layout constants live in WTK/FMM/constants.py
# =============================================================================

from .errors import (
    WavToolError, FormatError, TruncatedStreamError, TrailingDataError,
    UsageError, HeaderCheck,
)
from .header import WaveHeader, parse, decode, serialize, build_header
