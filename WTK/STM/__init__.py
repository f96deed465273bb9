# =============================================================================
# STM — Stream Transform Module
# Subfolder of WTK (Wave Tool Kit)
# =============================================================================
#
# Single-pass transforms over a header-fronted PCM stream. Each transform
# parses the header, streams the payload block by block, then hands whatever
# is left to the passthrough so trailing bytes survive untouched.
#
# Modules:
#   passthrough.py — verbatim copy of the remaining stream / exact-size copy
#   rate.py        — rewrites sample-rate / byte-rate metadata only
#   channel.py     — stereo → mono by keeping one channel per frame
#   volume.py      — amplitude scaling with clamping and rounding
#
# Header codec lives in WTK/FCM/
# =============================================================================

from .rate import rewrite_rate
from .channel import select_channel, Side
from .volume import scale_volume
