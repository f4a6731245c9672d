"""Orchestra - Synchronized melodic actors.

This package contains the playback controller, the conductor/listener sync
channel, the collaborator interfaces and their simulated, FluidSynth and
WebSocket implementations, and the radio hub.
"""

from orchestra.config import OrchestraConfig, get_config
from orchestra.exceptions import OrchestraError
from orchestra.playback import PlaybackController
from orchestra.simulated import LoopbackRadio, RadioMedium, SimulatedDisplay, SimulatedMusic
from orchestra.sync_channel import SyncChannel

__version__ = "1.0.0"

__all__ = [
    # Core components
    "PlaybackController",
    "SyncChannel",
    # Simulated board
    "SimulatedMusic",
    "SimulatedDisplay",
    "LoopbackRadio",
    "RadioMedium",
    # Configuration
    "OrchestraConfig",
    "get_config",
    # Errors
    "OrchestraError",
]
