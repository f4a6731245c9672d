"""Custom exceptions for Orchestra collaborators.

The playback controller and sync channel never raise these; they are
raised by the concrete audio, display and radio implementations.
"""


class OrchestraError(Exception):
    """Base exception for all Orchestra errors."""

    pass


class ConfigurationError(OrchestraError):
    """Error in actor configuration."""

    pass


class ToneOutputError(OrchestraError):
    """Error producing tones on the audio output."""

    pass


class SoundFontLoadError(ToneOutputError):
    """Error loading SoundFont file."""

    pass


class RadioError(OrchestraError):
    """Error connecting to or sending on the radio medium."""

    pass
