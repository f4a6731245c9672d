"""Playback state and beat arithmetic."""

import math
from dataclasses import dataclass, field

from notation.markings import Dynamic, KeySignature

MS_PER_MINUTE = 60000.0

# Tempo bounds offered to callers; not enforced by the playback path
MIN_TEMPO_BPM = 40
MAX_TEMPO_BPM = 240
DEFAULT_TEMPO_BPM = 120


def beat_length_ms(bpm: float) -> float:
    """Length of one beat in milliseconds.

    Args:
        bpm: Tempo in beats per minute

    Returns:
        60000 / bpm, unrounded; infinite at 0 BPM
    """
    if bpm == 0:
        return math.inf
    return MS_PER_MINUTE / bpm


def note_length_ms(bpm: float, multiplier: float) -> float:
    """Length of a note in milliseconds.

    Args:
        bpm: Tempo in beats per minute
        multiplier: Duration as a multiple of one beat (whole=4, quarter=1, ...)

    Returns:
        beat_length_ms(bpm) * multiplier, unrounded
    """
    return beat_length_ms(bpm) * multiplier


def tempo_in_range(bpm: float) -> bool:
    return MIN_TEMPO_BPM <= bpm <= MAX_TEMPO_BPM


@dataclass
class PlaybackState:
    """Mutable performance settings of one actor.

    Attributes:
        dynamic: Current dynamic marking (default mf)
        key_signature: Current key signature (default C); stored only
    """

    dynamic: Dynamic = Dynamic.MF
    key_signature: KeySignature = KeySignature.C
    notes_played: int = field(default=0, compare=False)

    @property
    def volume(self) -> int:
        """Device volume for the current dynamic."""
        return int(self.dynamic)


def wait_seconds(duration_ms: float) -> float:
    """Seconds a blocking primitive should wait for duration_ms.

    Negative, NaN and infinite durations (from a zero or negative tempo)
    wait 0 seconds.
    """
    if not math.isfinite(duration_ms) or duration_ms <= 0:
        return 0.0
    return duration_ms / 1000.0
