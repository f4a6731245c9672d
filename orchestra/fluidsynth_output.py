"""FluidSynth music output for audible playback.

Wraps the pyfluidsynth library: pitches (Hz) are played as the nearest
MIDI note on one channel, volume (0-255) becomes note velocity.
"""

import logging
import math
import time
from pathlib import Path
from typing import Optional

import fluidsynth

from notation.playback_state import DEFAULT_TEMPO_BPM, wait_seconds
from orchestra.exceptions import SoundFontLoadError, ToneOutputError
from orchestra.interfaces.music import IMusicOutput

logger = logging.getLogger(__name__)

CHANNEL = 0
MAX_VOLUME = 255
MAX_VELOCITY = 127


def frequency_to_midi(frequency: float) -> Optional[int]:
    """Convert a frequency to the nearest MIDI note number.

    Args:
        frequency: Frequency in Hz

    Returns:
        MIDI note number, or None if the frequency is not positive
    """
    if frequency <= 0:
        return None
    return int(round(69 + 12 * math.log2(frequency / 440.0)))


def volume_to_velocity(level: int) -> int:
    """Map a 0-255 volume onto MIDI velocity 0-127, clamping out-of-range levels."""
    level = max(0, min(MAX_VOLUME, int(level)))
    return level * MAX_VELOCITY // MAX_VOLUME


class FluidSynthMusic(IMusicOutput):
    """Plays tones through a live FluidSynth audio driver."""

    def __init__(
        self,
        soundfont: Path,
        program: int = 73,
        audio_driver: Optional[str] = None,
        sample_rate: int = 44100,
        tempo: float = DEFAULT_TEMPO_BPM,
    ):
        """Initialize FluidSynth and load the SoundFont.

        Args:
            soundfont: Path to .sf2 file
            program: General MIDI preset for the channel (73 = flute)
            audio_driver: FluidSynth audio driver name (None = platform default)
            sample_rate: Audio sample rate in Hz
            tempo: Initial tempo in BPM

        Raises:
            SoundFontLoadError: If the SoundFont is missing or cannot be loaded
            ToneOutputError: If the audio driver cannot be started
        """
        path = Path(soundfont)
        if not path.exists():
            raise SoundFontLoadError(f"SoundFont file not found: {soundfont}")
        if path.suffix.lower() != ".sf2":
            raise SoundFontLoadError(
                f"Invalid SoundFont file extension: {path.suffix} (expected .sf2)"
            )

        self.tempo = tempo
        self.velocity = volume_to_velocity(MAX_VOLUME)
        self.synth = fluidsynth.Synth(samplerate=float(sample_rate))

        # Monophonic line, no effects
        self.synth.setting("synth.polyphony", 16)
        self.synth.setting("synth.reverb.active", 0)
        self.synth.setting("synth.chorus.active", 0)

        try:
            self.synth.start(driver=audio_driver)
        except Exception as e:
            self.synth.delete()
            raise ToneOutputError(f"Failed to start audio driver {audio_driver}: {e}") from e

        sf_id = self.synth.sfload(str(path.resolve()))
        if sf_id == -1:
            self.synth.delete()
            raise SoundFontLoadError(f"Failed to load SoundFont: {soundfont}")
        self.synth.program_select(CHANNEL, sf_id, 0, program)

        logger.info(
            f"FluidSynth initialized at {sample_rate}Hz "
            f"(soundfont={path.name}, program={program}, driver={audio_driver or 'default'})"
        )

    def play_tone(self, pitch: float, duration_ms: float) -> None:
        note = frequency_to_midi(pitch)
        if note is None or not (0 <= note <= 127):
            logger.warning(f"Pitch {pitch}Hz outside MIDI range, playing silence")
            self.rest(duration_ms)
            return

        self.synth.noteon(CHANNEL, note, self.velocity)
        try:
            time.sleep(wait_seconds(duration_ms))
        finally:
            self.synth.noteoff(CHANNEL, note)

    def rest(self, duration_ms: float) -> None:
        time.sleep(wait_seconds(duration_ms))

    def set_volume(self, level: int) -> None:
        self.velocity = volume_to_velocity(level)

    def set_tempo(self, bpm: float) -> None:
        self.tempo = bpm

    def get_tempo(self) -> float:
        return self.tempo

    def cleanup(self) -> None:
        """Release FluidSynth resources."""
        self.synth.all_notes_off(CHANNEL)
        self.synth.delete()
        logger.info("FluidSynth renderer cleaned up")
