"""Dependency injection container for Orchestra actor components.

Builds the music, display and radio collaborators from configuration and
wires them into the playback controller and sync channel.
"""

import logging
from typing import Any, Optional

from notation.playback_state import PlaybackState
from orchestra.config import OrchestraConfig, get_config
from orchestra.interfaces.display import ILedDisplay
from orchestra.interfaces.music import IMusicOutput
from orchestra.interfaces.radio import IRadio
from orchestra.playback import PlaybackController
from orchestra.simulated import LoopbackRadio, SimulatedDisplay, SimulatedMusic
from orchestra.sync_channel import SyncChannel

logger = logging.getLogger(__name__)


class DIContainer:
    """Dependency injection container for actor components."""

    def __init__(self, config: Optional[OrchestraConfig] = None, actor: str = "actor") -> None:
        """Initialize DI container.

        Args:
            config: Configuration (defaults to the global instance)
            actor: Actor name used in log records
        """
        self._config = config if config is not None else get_config()
        self._actor = actor
        self._instances: dict[str, Any] = {}

        logger.info(f"DI container initialized (backend={self._config.backend})")

    def get_config(self) -> OrchestraConfig:
        """Get configuration instance."""
        return self._config

    def get_music_output(self) -> IMusicOutput:
        """Get or create the music output for the configured backend."""
        if "music" not in self._instances:
            if self._config.backend == "live":
                from orchestra.fluidsynth_output import FluidSynthMusic

                self._instances["music"] = FluidSynthMusic(
                    soundfont=self._config.soundfont,
                    program=self._config.program,
                    audio_driver=self._config.audio_driver,
                    tempo=self._config.tempo,
                )
            else:
                self._instances["music"] = SimulatedMusic(
                    tempo=self._config.tempo, realtime=True
                )
        return self._instances["music"]

    def get_display(self) -> ILedDisplay:
        """Get or create the LED display."""
        if "display" not in self._instances:
            self._instances["display"] = SimulatedDisplay()
        return self._instances["display"]

    def get_radio(self) -> IRadio:
        """Get or create the radio for the configured backend."""
        if "radio" not in self._instances:
            if self._config.backend == "live":
                from orchestra.websocket_radio import WebSocketRadio

                self._instances["radio"] = WebSocketRadio(
                    self._config.hub_url, group=self._config.radio_group
                )
            else:
                self._instances["radio"] = LoopbackRadio(group=self._config.radio_group)
        return self._instances["radio"]

    def get_playback(self) -> PlaybackController:
        """Get or create the playback controller."""
        if "playback" not in self._instances:
            state = PlaybackState(
                dynamic=self._config.default_dynamic,
                key_signature=self._config.default_key,
            )
            self._instances["playback"] = PlaybackController(
                music=self.get_music_output(),
                display=self.get_display(),
                state=state,
                actor=self._actor,
            )
        return self._instances["playback"]

    def get_sync_channel(self) -> SyncChannel:
        """Get or create the sync channel."""
        if "sync_channel" not in self._instances:
            self._instances["sync_channel"] = SyncChannel(self.get_radio(), actor=self._actor)
        return self._instances["sync_channel"]

    def cleanup(self) -> None:
        """Clean up all managed instances."""
        logger.info("Cleaning up DI container")

        if "radio" in self._instances:
            try:
                self._instances["radio"].close()
            except Exception as e:
                logger.error(f"Error closing radio: {e}")

        music = self._instances.get("music")
        if music is not None and hasattr(music, "cleanup"):
            try:
                music.cleanup()
            except Exception as e:
                logger.error(f"Error cleaning up music output: {e}")

        self._instances.clear()
        logger.info("DI container cleaned up")
