"""WebSocket radio: connects an actor to the radio hub.

Inbound numbers are read on a daemon thread and handed to the registered
callbacks, so they may interleave with blocking playback on the main thread.
"""

import json
import logging
import threading
from typing import List, Optional

from websockets.exceptions import ConnectionClosed, InvalidHandshake, InvalidURI
from websockets.sync.client import ClientConnection, connect

from orchestra.exceptions import RadioError
from orchestra.interfaces.radio import IRadio, NumberCallback
from orchestra.radio_hub import number_frame, parse_number_frame

logger = logging.getLogger(__name__)


class WebSocketRadio(IRadio):
    """Radio endpoint backed by a hub WebSocket connection."""

    def __init__(self, url: str, group: int = 0, open_timeout: float = 5.0):
        """Connect to the hub and start the receive thread.

        Args:
            url: Hub WebSocket URL (ws://host:port/ws/radio)
            group: Radio group to join
            open_timeout: Seconds to wait for the connection handshake

        Raises:
            RadioError: If the hub cannot be reached
        """
        self.url = url
        self.group = group
        self.callbacks: List[NumberCallback] = []
        self.received = 0

        try:
            self.connection: ClientConnection = connect(
                f"{url}?group={group}", open_timeout=open_timeout
            )
        except (OSError, TimeoutError, InvalidURI, InvalidHandshake) as e:
            raise RadioError(f"Cannot connect to radio hub at {url}: {e}") from e

        self._thread: Optional[threading.Thread] = threading.Thread(
            target=self._receive_loop, name="radio-receive", daemon=True
        )
        self._thread.start()

        logger.info(f"Radio connected to {url} (group={group})")

    def send_number(self, value: int) -> None:
        try:
            self.connection.send(json.dumps(number_frame(value, self.group)))
        except ConnectionClosed:
            logger.warning("Radio hub connection closed, dropping broadcast", extra={"signal": value})

    def on_received_number(self, callback: NumberCallback) -> None:
        self.callbacks.append(callback)

    def _receive_loop(self) -> None:
        try:
            for message in self.connection:
                try:
                    frame = json.loads(message)
                except ValueError:
                    logger.debug(f"Ignoring non-JSON frame: {message!r}")
                    continue
                value = parse_number_frame(frame)
                if value is None or frame.get("group", self.group) != self.group:
                    continue
                self.received += 1
                self._dispatch(value)
        except ConnectionClosed as e:
            logger.info(f"Radio hub connection closed: {e}")

    def _dispatch(self, value: int) -> None:
        for callback in list(self.callbacks):
            try:
                callback(value)
            except Exception as e:
                logger.error(
                    f"Radio callback failed: {e}", exc_info=True, extra={"signal": value}
                )

    def close(self) -> None:
        self.connection.close()
        if self._thread is not None and self._thread is not threading.current_thread():
            self._thread.join(timeout=1.0)
        self._thread = None
        logger.info("Radio disconnected")
