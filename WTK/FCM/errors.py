# =============================================================================
# errors.py — WTK Error Taxonomy
# =============================================================================
#
# Every failure is fatal to the invocation. Nothing here is retried or
# recovered; the CLI turns any WavToolError into a diagnostic plus exit 1.
#
#   FormatError           — a header invariant failed (carries HeaderCheck)
#   TruncatedStreamError  — fewer bytes than a component's contract requires
#   TrailingDataError     — bytes found after the declared payload (info only)
#   UsageError            — unknown command or bad/missing CLI argument

from __future__ import annotations
import enum


class HeaderCheck(enum.Enum):
    """
    Header validation checks, declared in the order they are applied.
    The value is the diagnostic printed when the check fails.
    """
    RIFF_TAG        = '"RIFF" not found'
    WAVE_TAG        = '"WAVE" not found'
    FMT_TAG         = '"fmt " not found'
    FMT_CHUNK_SIZE  = "size of format chunk should be 16"
    FORMAT_TAG      = "WAVE type format should be 1"
    CHANNEL_COUNT   = "mono/stereo should be 1 or 2"
    BITS_PER_SAMPLE = "bits/sample should be 8 or 16"
    BYTE_RATE       = "bytes/second should be sample rate x block alignment"
    BLOCK_ALIGN     = "block alignment should be bits per sample / 8 x mono/stereo"
    DATA_TAG        = '"data" not found'


class WavToolError(Exception):
    """Base class for every failure a WTK command can report."""


class FormatError(WavToolError):
    def __init__(self, check: HeaderCheck, detail: str = "") -> None:
        self.check  = check
        self.detail = detail
        msg = check.value if not detail else f"{check.value} ({detail})"
        super().__init__(msg)


class TruncatedStreamError(WavToolError):
    def __init__(self, expected: int, got: int, what: str = "data") -> None:
        self.expected = expected
        self.got      = got
        self.what     = what
        super().__init__(
            f"insufficient data: {what} needs {expected} bytes, got {got}"
        )


class TrailingDataError(WavToolError):
    def __init__(self, declared: int) -> None:
        self.declared = declared
        super().__init__(
            f"bad file size (found data past the expected end of file, "
            f"declared payload is {declared} bytes)"
        )


class UsageError(WavToolError):
    pass
