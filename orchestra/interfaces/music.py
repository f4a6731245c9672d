"""Music output interface definitions for Orchestra actors."""

from abc import ABC, abstractmethod


class IMusicOutput(ABC):
    """Tone, volume and tempo primitives of one actor."""

    @abstractmethod
    def play_tone(self, pitch: float, duration_ms: float) -> None:
        """Play a tone and block until it has finished.

        Args:
            pitch: Tone pitch (frequency in Hz)
            duration_ms: Tone length in milliseconds, unrounded
        """
        pass

    @abstractmethod
    def rest(self, duration_ms: float) -> None:
        """Stay silent and block for the given time.

        Args:
            duration_ms: Silence length in milliseconds, unrounded
        """
        pass

    @abstractmethod
    def set_volume(self, level: int) -> None:
        """Set output volume immediately.

        Args:
            level: Volume (0-255)
        """
        pass

    @abstractmethod
    def set_tempo(self, bpm: float) -> None:
        """Store the process tempo.

        Args:
            bpm: Beats per minute
        """
        pass

    @abstractmethod
    def get_tempo(self) -> float:
        """Return the stored tempo in beats per minute."""
        pass
