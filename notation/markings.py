"""Notation markings: key signatures, note durations and dynamics."""

from enum import Enum, IntEnum


class KeySignature(IntEnum):
    """Common key signatures, valued by signed accidental count.

    Positive values count sharps, negative values count flats.
    """

    C = 0
    G = 1
    F = -1
    D = 2
    Bb = -2

    @property
    def label(self) -> str:
        """Human-readable major/relative-minor pair."""
        return _KEY_LABELS[self]


_KEY_LABELS = {
    KeySignature.C: "C Major / A Minor",
    KeySignature.G: "G Major / E Minor",
    KeySignature.F: "F Major / D Minor",
    KeySignature.D: "D Major / B Minor",
    KeySignature.Bb: "Bb Major / G Minor",
}


class NoteDuration(float, Enum):
    """Note durations as multipliers of one beat."""

    WHOLE = 4.0
    HALF = 2.0
    QUARTER = 1.0
    EIGHTH = 0.5
    SIXTEENTH = 0.25


class Dynamic(IntEnum):
    """Dynamic markings mapped to device volume (0-255)."""

    PP = 45
    P = 80
    MF = 130
    F = 180
    FF = 255

    @property
    def volume(self) -> int:
        return int(self.value)

    @classmethod
    def from_marking(cls, marking: str) -> "Dynamic":
        """Look up a dynamic by its written marking ("pp", "mf", ...).

        Raises:
            KeyError: If the marking is not one of pp, p, mf, f, ff
        """
        return cls[marking.upper()]
