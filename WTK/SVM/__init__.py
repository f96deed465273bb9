# =============================================================================
# WTK/SVM/__init__.py — Signal Verification Module
# =============================================================================
#
# Checks that a stream is a structurally valid, exactly-sized PCM WAV and
# reports what its header declares.
#
# Sub-modules:
#   info.py  — header field listing + payload length verification
# =============================================================================

from .info import report_info
