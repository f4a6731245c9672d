"""Radio interface definitions for the shared broadcast medium."""

from abc import ABC, abstractmethod
from typing import Callable

NumberCallback = Callable[[int], None]


class IRadio(ABC):
    """Broadcast/receive of small integers on a shared medium."""

    @abstractmethod
    def send_number(self, value: int) -> None:
        """Broadcast an integer once, without acknowledgement.

        Args:
            value: Integer to broadcast
        """
        pass

    @abstractmethod
    def on_received_number(self, callback: NumberCallback) -> None:
        """Register a callback for every inbound integer.

        Args:
            callback: Invoked with the received integer. Registrations
                coexist and are invoked in registration order.
        """
        pass

    @abstractmethod
    def close(self) -> None:
        """Release the medium (sockets, threads)."""
        pass
