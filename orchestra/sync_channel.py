"""Conductor/listener synchronization over the radio medium."""

import logging
from typing import Callable

from orchestra.interfaces.radio import IRadio

logger = logging.getLogger(__name__)

SignalHandler = Callable[[], None]


class SyncChannel:
    """Filtered start-signal relay on a shared broadcast medium.

    Every registration installs its own listener on the radio; there is no
    shared dispatch table and no latching, so a repeated broadcast fires
    matching handlers again.
    """

    def __init__(self, radio: IRadio, actor: str = "actor"):
        """Initialize sync channel.

        Args:
            radio: Broadcast medium
            actor: Name used in log records
        """
        self.radio = radio
        self.actor = actor
        self.registrations = 0

    def send_start_signal(self, signal: int) -> None:
        """Broadcast a start signal once (fire-and-forget)."""
        logger.info("Sending start signal", extra={"actor": self.actor, "signal": signal})
        self.radio.send_number(signal)

    def on_signal_received(self, signal: int, handler: SignalHandler) -> None:
        """Run handler whenever exactly `signal` is received.

        Args:
            signal: Signal value to match
            handler: Called with no arguments on each match
        """

        def _filter(received: int) -> None:
            if received == signal:
                logger.debug(
                    "Start signal matched",
                    extra={"actor": self.actor, "signal": received},
                )
                handler()

        self.radio.on_received_number(_filter)
        self.registrations += 1
        logger.debug(
            f"Listening for signal {signal} (registrations={self.registrations})",
            extra={"actor": self.actor},
        )
