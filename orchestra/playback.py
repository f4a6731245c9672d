"""Playback controller: tempo, dynamics and key for one actor.

Converts symbolic durations into milliseconds and dynamics into device
volume, then drives the music and display primitives synchronously.
Input is not validated; out-of-range values are forwarded unchanged.
"""

import logging
from typing import Any, Optional

from notation.grid import pitch_to_cell
from notation.markings import Dynamic, KeySignature, NoteDuration
from notation.playback_state import PlaybackState, note_length_ms, tempo_in_range
from orchestra.interfaces.display import ILedDisplay
from orchestra.interfaces.music import IMusicOutput

logger = logging.getLogger(__name__)


def _name(marking: Any) -> str:
    # Raw values that are not enum members are logged as-is
    return getattr(marking, "name", str(marking))


class PlaybackController:
    """Plays a monophonic line from sequential host calls."""

    def __init__(
        self,
        music: IMusicOutput,
        display: ILedDisplay,
        state: Optional[PlaybackState] = None,
        actor: str = "actor",
    ):
        """Initialize playback controller.

        Args:
            music: Tone, volume and tempo primitives
            display: LED grid primitives
            state: Initial playback state (default: mf, key of C)
            actor: Name used in log records
        """
        self.music = music
        self.display = display
        self.state = state if state is not None else PlaybackState()
        self.actor = actor

        logger.info(
            f"Playback controller initialized "
            f"(dynamic={_name(self.state.dynamic)}, key={_name(self.state.key_signature)})",
            extra={"actor": self.actor},
        )

    # --- Configuration ---

    def set_tempo(self, bpm: float) -> None:
        """Set the tempo in beats per minute.

        Values outside 40-240 are passed through to the music output.
        """
        if not tempo_in_range(bpm):
            logger.warning(
                f"Tempo {bpm} BPM outside 40-240, passing through",
                extra={"actor": self.actor},
            )
        self.music.set_tempo(bpm)

    @property
    def tempo(self) -> float:
        return self.music.get_tempo()

    def set_dynamic(self, dynamic: Dynamic) -> None:
        """Set the dynamic for subsequent notes and push its volume now."""
        self.state.dynamic = dynamic
        self.music.set_volume(self.state.volume)
        logger.debug(
            f"Dynamic set to {_name(dynamic)} (volume={self.state.volume})",
            extra={"actor": self.actor},
        )

    def set_key_signature(self, key: KeySignature) -> None:
        """Store the key signature. Has no effect on pitch."""
        self.state.key_signature = key

    # --- Playback ---

    def play_note(self, pitch: float, duration: NoteDuration) -> None:
        """Play a note at the current tempo and dynamic.

        Blocks for the full note length.

        Args:
            pitch: Tone pitch (frequency in Hz)
            duration: Note duration as a beat multiplier
        """
        duration_ms = note_length_ms(self.music.get_tempo(), duration)
        self.music.set_volume(self.state.volume)
        logger.debug(
            "Playing note",
            extra={"actor": self.actor, "pitch": pitch, "duration_ms": duration_ms},
        )
        self.music.play_tone(pitch, duration_ms)
        self.state.notes_played += 1

    def rest(self, duration: NoteDuration) -> None:
        """Stay silent for a note duration at the current tempo."""
        duration_ms = note_length_ms(self.music.get_tempo(), duration)
        logger.debug(
            "Resting", extra={"actor": self.actor, "duration_ms": duration_ms}
        )
        self.music.rest(duration_ms)

    # --- Lights ---

    def show_progress(self, current: float, total: float) -> None:
        """Show a progress bar of current out of total on the grid."""
        self.display.plot_bar_graph(current, total)

    def sync_brightness(self) -> None:
        """Set display brightness to the current dynamic's volume.

        Volume and brightness share the 0-255 scale, so no rescaling occurs.
        """
        self.display.set_brightness(self.state.volume)

    def plot_pitch(self, pitch: float) -> None:
        """Clear the grid and light the cell for pitch mod 25."""
        self.display.clear()
        x, y = pitch_to_cell(pitch)
        self.display.plot(x, y)

    def snapshot(self) -> dict[str, Any]:
        """Get current performance settings.

        Returns:
            Dictionary with tempo, dynamic, volume, key and notes played
        """
        return {
            "tempo_bpm": self.music.get_tempo(),
            "dynamic": _name(self.state.dynamic).lower(),
            "volume": self.state.volume,
            "key_signature": _name(self.state.key_signature),
            "accidentals": int(self.state.key_signature),
            "notes_played": self.state.notes_played,
        }
