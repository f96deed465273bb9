# =============================================================================
# commands.py — Operation Variants and Dispatch
# =============================================================================
#
# Exactly one of five operations runs per invocation. Each is an immutable
# record carrying its already-validated parameters; run() routes it to the
# component that implements it.
#
#   Info()                      → SVM.report_info
#   Rate(factor)                → STM.rewrite_rate
#   Channel(side)               → STM.select_channel
#   Volume(factor)              → STM.scale_volume
#   Generate(duration, ...)     → SGM.ToneSynthesizer

from __future__ import annotations
from typing import BinaryIO, NamedTuple, Optional, TextIO, Union

from WTK.FMM.constants import (
    TONE_DURATION, TONE_SAMPLE_RATE, TONE_FM, TONE_FC, TONE_MI, TONE_AMPLITUDE,
)
from WTK.FCM.header import WaveHeader
from WTK.SGM.tone import ToneSynthesizer
from WTK.STM.channel import Side, select_channel
from WTK.STM.rate import rewrite_rate
from WTK.STM.volume import scale_volume
from WTK.SVM.info import report_info


class Info(NamedTuple):
    pass


class Rate(NamedTuple):
    factor: float


class Channel(NamedTuple):
    side: Side


class Volume(NamedTuple):
    factor: float


class Generate(NamedTuple):
    duration:    int   = TONE_DURATION
    sample_rate: int   = TONE_SAMPLE_RATE
    fm:          float = TONE_FM
    fc:          float = TONE_FC
    mi:          float = TONE_MI
    amplitude:   float = TONE_AMPLITUDE


Command = Union[Info, Rate, Channel, Volume, Generate]


def run(
    command: Command,
    src: BinaryIO,
    dst: BinaryIO,
    text_out: Optional[TextIO] = None,
) -> WaveHeader:
    """
    Execute one command. Returns the header that was read (Info) or written.
    Any WavToolError propagates to the caller.
    """
    if isinstance(command, Info):
        return report_info(src, text_out)
    if isinstance(command, Rate):
        return rewrite_rate(src, dst, command.factor)
    if isinstance(command, Channel):
        return select_channel(src, dst, command.side)
    if isinstance(command, Volume):
        return scale_volume(src, dst, command.factor)
    if isinstance(command, Generate):
        return ToneSynthesizer(**command._asdict()).render(dst)
    raise TypeError(f"Unknown command: {command!r}")
