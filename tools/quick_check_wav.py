"""
Quick numeric checker for WTK output (or any PCM WAV).
Usage: python tools/quick_check_wav.py path/to/file.wav
       python -m WTK generate | python tools/quick_check_wav.py -

Reads through libsndfile, so it doubles as an independent check that a file
WTK wrote is a WAV other tools accept.
"""
import io
import sys

import numpy as np
import soundfile as sf


def summarize(source):
    """
    Decode a WAV (path, file object or raw bytes) and return its stats.

    Returns
    -------
    dict  {sample_rate, channels, frames, duration,
           peaks: list[int], rms: list[float]}
    """
    if isinstance(source, (bytes, bytearray)):
        source = io.BytesIO(source)
    data, sr = sf.read(source, dtype="int16", always_2d=True)
    wide = data.astype(np.int64)
    n_frames = data.shape[0]
    return {
        "sample_rate": sr,
        "channels":    data.shape[1],
        "frames":      n_frames,
        "duration":    n_frames / sr if sr else 0.0,
        "peaks":       [int(np.max(np.abs(wide[:, i]))) if n_frames else 0
                        for i in range(data.shape[1])],
        "rms":         [float(np.sqrt(np.mean(wide[:, i] ** 2))) if n_frames else 0.0
                        for i in range(data.shape[1])],
    }


def main(argv=None):
    argv = sys.argv[1:] if argv is None else argv
    if not argv:
        print("Usage: python tools/quick_check_wav.py file.wav")
        return 1

    f = argv[0]
    stats = summarize(sys.stdin.buffer.read() if f == "-" else f)

    print("=" * 60)
    print(f"File        : {f}")
    print(f"Sample rate : {stats['sample_rate']} Hz")
    print(f"Channels    : {stats['channels']}")
    print(f"Duration    : {stats['duration']:.2f} s  ({stats['frames']:,} frames)")
    print("=" * 60)
    for i, (peak, rms) in enumerate(zip(stats["peaks"], stats["rms"])):
        print(f"  Ch{i}: peak={peak}  rms={rms:.1f}")
    print("=" * 60)
    return 0


if __name__ == "__main__":
    sys.exit(main())
