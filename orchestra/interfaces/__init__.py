"""Collaborator interfaces for Orchestra actors.

Abstract Base Classes (ABCs) defining the audio, display and radio
primitives consumed by the playback controller and sync channel.
"""

from orchestra.interfaces.display import ILedDisplay
from orchestra.interfaces.music import IMusicOutput
from orchestra.interfaces.radio import IRadio, NumberCallback

__all__ = [
    # Audio
    "IMusicOutput",
    # Display
    "ILedDisplay",
    # Radio
    "IRadio",
    "NumberCallback",
]
