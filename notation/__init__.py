"""Orchestra Notation - Musical markings and beat arithmetic.

Pure data types shared by the playback controller and the collaborator
implementations: key signatures, note durations, dynamics, and the mapping
of pitches and progress values onto the LED grid.
"""

from notation.grid import bar_graph_cells, pitch_to_cell
from notation.markings import Dynamic, KeySignature, NoteDuration
from notation.playback_state import (
    DEFAULT_TEMPO_BPM,
    MAX_TEMPO_BPM,
    MIN_TEMPO_BPM,
    PlaybackState,
    beat_length_ms,
    note_length_ms,
)

__version__ = "1.0.0"

__all__ = [
    "Dynamic",
    "KeySignature",
    "NoteDuration",
    "PlaybackState",
    "beat_length_ms",
    "note_length_ms",
    "pitch_to_cell",
    "bar_graph_cells",
    "DEFAULT_TEMPO_BPM",
    "MIN_TEMPO_BPM",
    "MAX_TEMPO_BPM",
]
