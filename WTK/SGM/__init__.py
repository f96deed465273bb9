# =============================================================================
# SGM — Signal Generation Module
# Subfolder of WTK (Wave Tool Kit)
# =============================================================================
#
# Synthesises brand-new mono 16-bit WAV streams from a closed-form signal
# equation. Consumes no input.
#
# Modules:
#   tone.py — phase-modulated test tone (header + samples)
#
# Defaults live in WTK/FMM/constants.py
# =============================================================================

from .tone import ToneSynthesizer, generate_tone
