# =============================================================================
# WTK/FMM/__init__.py — Format Mapping Module
# =============================================================================
#
# The FMM is the single source of truth for the canonical 44-byte PCM WAV
# layout: field offsets, magic tags, accepted format values, streaming block
# size and the tone generator defaults.
#
# All other WTK sub-modules (FCM, STM, SGM, SVM) import exclusively from here.
# Never define layout constants outside this module.
#
# Sub-modules:
#   constants.py  — header offsets, limits, defaults and environment settings
# =============================================================================
